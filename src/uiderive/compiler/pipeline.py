# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Two-pass compilation of one aggregate.

Pass 1 reads, parses and emits every annotated field in declaration order,
validating all tags and collecting the event schema. Nothing is rendered until
pass 1 has succeeded for the whole aggregate. Pass 2 renders the ``Events``
dataclass and the ``draw_<name>`` function from the finished structures.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from uiderive.compiler.emitter import INDENT, EmissionContext, emit_field
from uiderive.compiler.grammar import parse_annotation
from uiderive.model.aggregate import Aggregate, EventKind, EventSchema
from uiderive.model.tags import ParamKind, ParamTag, Tag, TagTree
from uiderive.parser.reader import read_annotation

# ###############
# Public Interface
# ###############


@dataclass
class CompiledAggregate:
    """The output of compiling one aggregate.

    Attributes:
        name: The aggregate's class name.
        schema: The synthesized event schema.
        tags: The parsed tags of each annotated field, by field name.
        body: The indented statements of the draw routine.
    """

    name: str
    schema: EventSchema
    tags: dict[str, TagTree] = field(default_factory=dict)
    body: list[str] = field(default_factory=list)

    @property
    def events_name(self) -> str:
        return f"{self.name}Events"

    @property
    def draw_name(self) -> str:
        return f"draw_{snake_case(self.name)}"

    @property
    def providers(self) -> list[str]:
        """Sorted top-level names of the provider callables the draw routine uses."""
        names: set[str] = set()
        for tree in self.tags.values():
            names |= _provider_names(tree)
        return sorted(names)

    @property
    def source(self) -> str:
        """The ``Events`` dataclass and the draw function as Python source."""
        return "\n".join(_render_events(self) + ["", ""] + _render_draw(self)) + "\n"


def compile_aggregate(
    aggregate: Aggregate,
    child_schemas: Mapping[str, EventSchema] | None = None,
) -> CompiledAggregate:
    """Compile an aggregate's annotations into a draw routine and event schema.

    Args:
        aggregate: The aggregate with its fields in declaration order.
        child_schemas: Event schemas of already compiled aggregates keyed by
            type name, attached to the entries of nested fields.

    Returns:
        The compiled aggregate.

    Raises:
        CompileError: On the first error in any field. No output is produced.
    """
    ctx = EmissionContext(aggregate, child_schemas)
    tags: dict[str, TagTree] = {}
    for agg_field in aggregate.fields:
        if agg_field.annotation is None:
            continue
        source = read_annotation(agg_field.annotation.text, agg_field.annotation.origin)
        tree = parse_annotation(source)
        emit_field(ctx, agg_field, tree)
        tags[agg_field.name] = tree
    return CompiledAggregate(name=aggregate.name, schema=ctx.events.schema(), tags=tags, body=ctx.lines)


def render_module(compiled: list[CompiledAggregate], module: str, origin: str) -> str:
    """Render a standalone module registering draw routines for *compiled*.

    Args:
        compiled: The aggregates of one source module.
        module: Dotted name of the module that defines the aggregates.
        origin: Source path recorded in the header.
    """
    names = ", ".join(agg.name for agg in compiled)
    lines = [
        f"# Generated by uiderive from {origin}. Do not edit.",
        f"# aggregates: {names}",
        "from dataclasses import dataclass as _dataclass",
        "",
        "from uiderive import runtime as _rt",
    ]
    # Explicit names, so private providers and modules with __all__ resolve too.
    imported = [agg.name for agg in compiled]
    for agg in compiled:
        for provider in agg.providers:
            if provider not in imported:
                imported.append(provider)
    if imported:
        lines.append(f"from {module} import {', '.join(imported)}")
    for agg in compiled:
        lines.extend(["", "", agg.source.rstrip("\n")])
    if compiled:
        lines.extend(["", ""])
    for agg in compiled:
        lines.append(f"_rt.register({agg.name}, {agg.draw_name}, {agg.events_name})")
    return "\n".join(lines) + "\n"


def snake_case(name: str) -> str:
    """Convert ``CamelCase`` to ``camel_case``."""
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])", "_", name).lower()


# ################
# Implementation
# ################


def _render_events(compiled: CompiledAggregate) -> list[str]:
    lines = [
        "@_dataclass",
        f"class {compiled.events_name}:",
        f'{INDENT}"""Events produced by drawing ``{compiled.name}``."""',
    ]
    if compiled.schema.entries:
        lines.append("")
    for entry in compiled.schema.entries:
        if entry.kind is EventKind.BOOL:
            lines.append(f"{INDENT}{entry.name}: bool = False")
        else:
            annotation = repr(f"{entry.type_name}.Events | None")
            lines.append(f"{INDENT}{entry.name}: {annotation} = None")
    return lines


def _provider_names(tags: Iterable[Tag]) -> set[str]:
    names: set[str] = set()
    for tag in tags:
        if not isinstance(tag, ParamTag):
            continue
        for spec in tag.PARAMS.required + tag.PARAMS.optional:
            value = getattr(tag, spec.name)
            if spec.kind is ParamKind.PROVIDER and value is not None:
                names.add(str(value.value).split(".")[0])
        for children in (getattr(tag, "node", None), getattr(tag, "content", None)):
            names |= _provider_names(children or [])
    return names


def _render_draw(compiled: CompiledAggregate) -> list[str]:
    return [
        f"def {compiled.draw_name}(ui, ext):",
        f'{INDENT}"""Draw ``{compiled.name}`` and return the events it produced."""',
        f"{INDENT}events = {compiled.events_name}()",
        *compiled.body,
        f"{INDENT}return events",
    ]
