# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Aggregates (annotated dataclasses) and the event schemas synthesized for them."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel
from pydantic import Field as _Field

from uiderive.diagnostics import SourceOrigin, Span

# ###############
# Public Interface
# ###############


class AnnotationBlock(BaseModel):
    """The raw text of one ``ui(...)`` marker and where it came from."""

    text: str
    origin: SourceOrigin


class Field(BaseModel):
    """A named field of an aggregate.

    Attributes:
        name: The field identifier.
        type_name: The field's declared type as written (without the marker).
        annotation: The field's single ``ui(...)`` block, if any.
        span: Position of the field declaration.
    """

    name: str
    type_name: str = ""
    annotation: AnnotationBlock | None = None
    span: Span


class Aggregate(BaseModel):
    """A dataclass with named fields in declaration order."""

    name: str
    fields: list[Field] = _Field(default_factory=list)
    span: Span

    def field(self, name: str) -> Field | None:
        """Return the field called *name*, or None."""
        for field in self.fields:
            if field.name == name:
                return field
        return None


class EventKind(Enum):
    """Whether an event entry is a click/change flag or a nested record."""

    BOOL = "bool"
    NESTED = "nested"


class EventEntry(BaseModel):
    """One entry of an event schema.

    Attributes:
        name: The catch name.
        kind: ``BOOL`` for widget interactions, ``NESTED`` for nested aggregates.
        type_name: For nested entries, the nested aggregate's type as written.
        nested_schema: For nested entries, the nested aggregate's schema when known.
    """

    name: str
    kind: EventKind
    type_name: str | None = None
    nested_schema: EventSchema | None = None


class EventSchema(BaseModel):
    """The event record of one aggregate: catch names in registration order."""

    aggregate: str
    entries: list[EventEntry] = _Field(default_factory=list)

    def entry(self, name: str) -> EventEntry | None:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]


EventEntry.model_rebuild()
