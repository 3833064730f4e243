# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Event schema synthesis.

Every interactive widget reports into a named boolean flag of the aggregate's
event record. The name is the widget's ``catch`` parameter or, by default, the
field name. Several widgets sharing a name OR their results together. Nested
aggregates contribute a nested event record instead of a flag; a later nested
draw into the same record overwrites it.
"""

from __future__ import annotations

from uiderive.diagnostics import CompileError, ErrorKind, Span
from uiderive.model.aggregate import EventEntry, EventKind, EventSchema
from uiderive.model.annotations import LiteralValue

# ###############
# Public Interface
# ###############


class EventRegistry:
    """Collects the catch names of one aggregate in registration order."""

    def __init__(self, aggregate: str) -> None:
        self._aggregate = aggregate
        self._entries: dict[str, EventEntry] = {}

    def catch_flag(self, field_name: str, catch: LiteralValue | None, span: Span) -> str:
        """Resolve the flag a widget reports into, registering it on first use.

        Args:
            field_name: The field the widget belongs to; the default catch name.
            catch: The widget's explicit ``catch`` parameter, if any.
            span: Position of the widget tag.

        Returns:
            The catch name to OR the widget's result into.

        Raises:
            CompileError: ``ALREADY_DEFINED`` if the name already holds a nested record.
        """
        if catch is not None:
            name, span = str(catch.value), catch.span
        else:
            name = field_name
        existing = self._entries.get(name)
        if existing is None:
            self._entries[name] = EventEntry(name=name, kind=EventKind.BOOL)
        elif existing.kind is not EventKind.BOOL:
            raise CompileError(ErrorKind.ALREADY_DEFINED, span)
        return name

    def catch_nested(
        self,
        field_name: str,
        catch: LiteralValue | None,
        span: Span,
        type_name: str,
        schema: EventSchema | None = None,
    ) -> str:
        """Register the nested record a nested aggregate's events are stored in.

        A name already holding a record of the same type is reused; the last
        nested draw overwrites it.

        Raises:
            CompileError: ``ALREADY_DEFINED`` if the name holds a flag or a
                record of another type.
        """
        if catch is not None:
            name, span = str(catch.value), catch.span
        else:
            name = field_name
        existing = self._entries.get(name)
        if existing is not None:
            if existing.kind is not EventKind.NESTED or existing.type_name != type_name:
                raise CompileError(ErrorKind.ALREADY_DEFINED, span)
            return name
        self._entries[name] = EventEntry(
            name=name,
            kind=EventKind.NESTED,
            type_name=type_name,
            nested_schema=schema,
        )
        return name

    def schema(self) -> EventSchema:
        """Return the finished schema."""
        return EventSchema(aggregate=self._aggregate, entries=list(self._entries.values()))
