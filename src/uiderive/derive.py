# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""The ``ui`` field marker and the ``@derive`` class decorator.

Example::

    @derive
    @dataclass
    class Settings:
        age: Annotated[int, ui("slider(min = 0, max = 100)")] = 18
        submit: Annotated[bool, ui('button(label = "Go")')] = False

    events = draw(host, settings)
    if events.submit:
        ...

``@derive`` compiles the annotations when the class is created, so any
annotation error surfaces as a :class:`CompileError` at import time.
"""

from __future__ import annotations

import ast
import dataclasses
import sys
import typing
from dataclasses import dataclass
from typing import Any, TypeVar

from uiderive import runtime
from uiderive.compiler.emitter import INDENT
from uiderive.compiler.pipeline import CompiledAggregate, compile_aggregate
from uiderive.compiler.scan import DEFAULT_MARKER, annotation_parts, single_block
from uiderive.diagnostics import CompileError, ErrorKind, SourceOrigin, Span
from uiderive.model.aggregate import Aggregate, AnnotationBlock, EventSchema, Field

C = TypeVar("C", bound=type)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class UiMarker:
    """The annotation text of one field, as attached with :func:`ui`."""

    text: str = ""


def ui(text: str = "") -> UiMarker:
    """Annotate a dataclass field, e.g. ``Annotated[int, ui("slider(min = 0, max = 9)")]``.

    ``ui()`` without text shows the field as read-only ``label: value`` text.
    """
    return UiMarker(text)


def derive(cls: C) -> C:
    """Compile a dataclass's ``ui`` annotations and attach the results.

    Adds ``cls.Events`` (the generated event dataclass) and a generated draw
    routine used by :func:`uiderive.runtime.draw`.

    Raises:
        CompileError: ``NON_STRUCT`` if *cls* is not a dataclass, or the first
            annotation error of any field.
    """
    aggregate = reflect_aggregate(cls)
    compiled = compile_aggregate(aggregate, _child_schemas(cls, aggregate))
    draw_fn, events_cls = _materialize(compiled, cls)
    runtime.register(cls, draw_fn, events_cls)
    cls.__ui_schema__ = compiled.schema  # type: ignore[attr-defined]
    cls.__ui_source__ = compiled.source  # type: ignore[attr-defined]
    return cls


def reflect_aggregate(cls: Any) -> Aggregate:
    """Build the aggregate model of a dataclass from its field annotations.

    Raises:
        CompileError: ``NON_STRUCT`` for anything but a dataclass type,
            ``MULTIPLE`` for a field with several markers.
    """
    name = getattr(cls, "__qualname__", type(cls).__name__)
    span = Span(name, 1, 1)
    if not isinstance(cls, type) or not dataclasses.is_dataclass(cls):
        raise CompileError(ErrorKind.NON_STRUCT, span)

    fields: list[Field] = []
    for dc_field in dataclasses.fields(cls):
        label = f"{name}.{dc_field.name}"
        type_name, blocks = _field_parts(dc_field.type, label)
        fields.append(
            Field(
                name=dc_field.name,
                type_name=type_name,
                annotation=single_block(blocks),
                span=Span(label, 1, 1),
            )
        )
    return Aggregate(name=cls.__name__, fields=fields, span=span)


# ################
# Implementation
# ################


def _field_parts(annotation: Any, label: str) -> tuple[str, list[AnnotationBlock]]:
    """Return the type name and marker blocks of a field annotation.

    String annotations (``from __future__ import annotations``) are read
    syntactically so that forward references need not resolve.
    """
    if isinstance(annotation, str):
        try:
            expr = ast.parse(annotation, mode="eval").body
        except SyntaxError:
            return annotation, []
        return annotation_parts(expr, annotation, label, DEFAULT_MARKER)

    if typing.get_origin(annotation) is not typing.Annotated:
        return _type_name(annotation), []
    base, *metadata = typing.get_args(annotation)
    markers = [meta for meta in metadata if isinstance(meta, UiMarker) or meta is ui]
    blocks = [
        AnnotationBlock(
            text=meta.text if isinstance(meta, UiMarker) else "",
            # Evaluated metadata carries no position; later markers are told apart by number.
            origin=SourceOrigin(label if index == 0 else f"{label} (marker {index + 1})"),
        )
        for index, meta in enumerate(markers)
    ]
    return _type_name(base), blocks


def _type_name(tp: Any) -> str:
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp)


def _child_schemas(cls: type, aggregate: Aggregate) -> dict[str, EventSchema]:
    """Collect the event schemas of already derived field types."""
    module = sys.modules.get(cls.__module__)
    namespace: dict[str, Any] = vars(module) if module is not None else {}
    schemas: dict[str, EventSchema] = {}
    for agg_field in aggregate.fields:
        child = namespace.get(agg_field.type_name)
        schema = getattr(child, "__ui_schema__", None)
        if isinstance(schema, EventSchema):
            schemas[agg_field.type_name] = schema
    return schemas


def _materialize(compiled: CompiledAggregate, cls: type) -> tuple[Any, type]:
    """Execute the generated source and return its draw function and Events class.

    The source is wrapped in a factory function so ``_rt`` and ``_dataclass``
    are closure variables, while provider names resolve in the module that
    defines *cls*.
    """
    body = "\n".join(f"{INDENT}{line}" if line else "" for line in compiled.source.splitlines())
    factory = (
        "def __uiderive_factory__(_rt, _dataclass):\n"
        f"{body}\n"
        f"{INDENT}return {compiled.draw_name}, {compiled.events_name}\n"
    )
    module = sys.modules.get(cls.__module__)
    namespace: dict[str, Any] = vars(module) if module is not None else {"__name__": cls.__module__}
    local: dict[str, Any] = {}
    exec(compile(factory, f"<uiderive {cls.__qualname__}>", "exec"), namespace, local)
    draw_fn, events_cls = local["__uiderive_factory__"](runtime, dataclass)
    events_cls.__qualname__ = f"{cls.__qualname__}.Events"
    return draw_fn, events_cls
