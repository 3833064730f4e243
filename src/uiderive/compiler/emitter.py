# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emitter: turns a field's tags into Python statements of the draw routine.

Statements are written into an :class:`EmissionContext` which also holds the
aggregate's event registry. The generated code runs with these names bound:

- ``ui``: the UI host.
- ``ext``: the aggregate instance being drawn.
- ``events``: the event record being filled.
- ``_rt``: the :mod:`uiderive.runtime` module.

Provider parameters (``flags``, ``size``, ``style``, ``map``, ...) are emitted
as plain names, so they resolve in the module that defines the aggregate.
"""

from __future__ import annotations

import re
import string
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager

from uiderive.compiler.events import EventRegistry
from uiderive.compiler.params import to_number
from uiderive.diagnostics import CompileError, ErrorKind
from uiderive.model.aggregate import Aggregate, EventSchema, Field
from uiderive.model.annotations import LiteralValue
from uiderive.model.tags import (
    BulletParentTag,
    BulletTag,
    ButtonTag,
    CheckboxTag,
    ColorButtonTag,
    ColorEditTag,
    ColorPickerTag,
    DisplayField,
    DisplayTag,
    DragTag,
    ImageButtonTag,
    ImageTag,
    InputTag,
    NestedTag,
    NewLineTag,
    NoneTag,
    ParamKind,
    ParamTag,
    ProgressTag,
    SeparatorTag,
    SliderTag,
    Tag,
    TagTree,
    TextTag,
    TextWrapTag,
    TreeTag,
    VarsTag,
)

# ###############
# Public Interface
# ###############

INDENT = "    "


class EmissionContext:
    """Statement buffer and event registry shared by every field of one aggregate.

    Attributes:
        aggregate: The aggregate being compiled, used to resolve sibling fields.
        events: The event registry collecting catch names.
        child_schemas: Event schemas of already compiled aggregates, by type name.
    """

    def __init__(
        self,
        aggregate: Aggregate,
        child_schemas: Mapping[str, EventSchema] | None = None,
        depth: int = 1,
    ) -> None:
        self.aggregate = aggregate
        self.events = EventRegistry(aggregate.name)
        self.child_schemas = dict(child_schemas or {})
        self._lines: list[str] = []
        self._depth = depth

    @property
    def lines(self) -> list[str]:
        """The emitted lines, already indented."""
        return list(self._lines)

    def emit(self, line: str) -> None:
        self._lines.append(f"{INDENT * self._depth}{line}")

    @contextmanager
    def block(self, header: str) -> Iterator[None]:
        """Emit a compound statement header and indent everything emitted inside.

        An empty body is filled with ``pass``.
        """
        self.emit(header)
        self._depth += 1
        start = len(self._lines)
        try:
            yield
        finally:
            if len(self._lines) == start:
                self.emit("pass")
            self._depth -= 1


def emit_field(ctx: EmissionContext, field: Field, tags: TagTree) -> None:
    """Append the statements drawing *field* with *tags* to the context.

    Raises:
        CompileError: When a tag refers to something that does not exist,
            e.g. a display argument naming an unknown field.
    """
    if not tags or all(isinstance(tag, NoneTag) for tag in tags):
        return
    ctx.emit(f"# {field.name}")
    emit_tags(ctx, field, tags)


def emit_tags(ctx: EmissionContext, field: Field, tags: TagTree) -> None:
    for tag in tags:
        _EMITTERS[type(tag)](ctx, field, tag)


# ################
# Implementation
# ################


def _render(kind: ParamKind, value: LiteralValue) -> str:
    """Render a validated parameter value as a Python expression."""
    if kind in (ParamKind.NUMBER, ParamKind.INTEGER):
        return repr(to_number(value))
    if kind is ParamKind.PROVIDER:
        return f"{value.value}()"
    return repr(str(value.value))


def _kwargs(tag: ParamTag, skip: tuple[str, ...] = ("catch", "map")) -> dict[str, str]:
    """Render every set parameter of *tag* except those in *skip*."""
    kwargs: dict[str, str] = {}
    for spec in tag.PARAMS.required + tag.PARAMS.optional:
        value = getattr(tag, spec.name)
        if spec.name in skip or value is None:
            continue
        kwargs[spec.name] = _render(spec.kind, value)
    return kwargs


def _labelled(field: Field, kwargs: dict[str, str]) -> dict[str, str]:
    """Put the label first, defaulting to the field name."""
    return {"label": kwargs.pop("label", repr(field.name)), **kwargs}


def _call(func: str, args: list[str] | None = None, kwargs: Mapping[str, str] | None = None) -> str:
    parts = list(args or [])
    parts.extend(f"{key}={value}" for key, value in (kwargs or {}).items())
    return f"{func}({', '.join(parts)})"


def _value_widget(func: str, params_cls: str) -> Callable[[EmissionContext, Field, ParamTag], None]:
    """Emitter for widgets that edit the field value and report a changed flag."""

    def emit(ctx: EmissionContext, field: Field, tag: ParamTag) -> None:
        flag = ctx.events.catch_flag(field.name, tag.catch, tag.span)  # type: ignore[attr-defined]
        params = _call(f"_rt.{params_cls}", kwargs=_labelled(field, _kwargs(tag)))
        target = f"ext.{field.name}"
        mapper = tag.map  # type: ignore[attr-defined]
        if mapper is None:
            ctx.emit(f"_changed, {target} = _rt.{func}(ui, {target}, {params})")
        else:
            ctx.emit(f"_changed, _value = _rt.{func}(ui, {mapper.value}({target}), {params})")
            with ctx.block("if _changed:"):
                ctx.emit(f"{target} = {mapper.value}({target}, _value)")
        ctx.emit(f"events.{flag} |= _changed")

    return emit


def _emit_color_button(ctx: EmissionContext, field: Field, tag: ColorButtonTag) -> None:
    flag = ctx.events.catch_flag(field.name, tag.catch, tag.span)
    params = _call("_rt.ColorButtonParams", kwargs=_labelled(field, _kwargs(tag)))
    value = f"ext.{field.name}"
    if tag.map is not None:
        value = f"{tag.map.value}({value})"
    ctx.emit(f"events.{flag} |= _rt.color_button(ui, {value}, {params})")


def _emit_button(ctx: EmissionContext, field: Field, tag: ButtonTag) -> None:
    flag = ctx.events.catch_flag(field.name, tag.catch, tag.span)
    params = _call("_rt.ButtonParams", kwargs=_kwargs(tag))
    ctx.emit(f"events.{flag} |= _rt.button(ui, {params})")


def _emit_nested(ctx: EmissionContext, field: Field, tag: NestedTag) -> None:
    schema = ctx.child_schemas.get(field.type_name)
    name = ctx.events.catch_nested(field.name, tag.catch, tag.span, field.type_name, schema)
    ctx.emit(f"events.{name} = _rt.draw(ui, ext.{field.name})")


def _emit_progress(ctx: EmissionContext, field: Field, tag: ProgressTag) -> None:
    kwargs = _kwargs(tag)
    if "overlay" not in kwargs and not field.name.startswith("_"):
        kwargs = {"overlay": repr(field.name), **kwargs}
    params = _call("_rt.ProgressParams", kwargs=kwargs)
    ctx.emit(f"_rt.progress(ui, ext.{field.name}, {params})")


def _texture_widget(func: str, params_cls: str) -> Callable[[EmissionContext, Field, ParamTag], None]:
    """Emitter for image widgets; they report no events."""

    def emit(ctx: EmissionContext, field: Field, tag: ParamTag) -> None:
        params = _call(f"_rt.{params_cls}", kwargs=_kwargs(tag))
        ctx.emit(f"_rt.{func}(ui, ext.{field.name}, {params})")

    return emit


def _emit_text(ctx: EmissionContext, field: Field, tag: TextTag) -> None:
    ctx.emit(f"ui.text({tag.lit.source()})")


def _emit_text_wrap(ctx: EmissionContext, field: Field, tag: TextWrapTag) -> None:
    ctx.emit(f"ui.text_wrapped({tag.lit.source()})")


def _emit_separator(ctx: EmissionContext, field: Field, tag: SeparatorTag) -> None:
    ctx.emit("ui.separator()")


def _emit_new_line(ctx: EmissionContext, field: Field, tag: NewLineTag) -> None:
    ctx.emit("ui.new_line()")


def _emit_bullet(ctx: EmissionContext, field: Field, tag: BulletTag) -> None:
    if tag.text is None:
        ctx.emit("ui.bullet()")
    else:
        ctx.emit(f"ui.bullet_text({tag.text.source()})")


def _emit_bullet_parent(ctx: EmissionContext, field: Field, tag: BulletParentTag) -> None:
    ctx.emit("ui.bullet()")


def _emit_display(ctx: EmissionContext, field: Field, tag: DisplayTag) -> None:
    label = tag.label.source() if tag.label is not None else repr(field.name)
    args: list[str] = []
    for param in tag.params:
        if isinstance(param, DisplayField):
            if ctx.aggregate.field(param.name) is None:
                raise CompileError(ErrorKind.UNEXPECTED_PARAM, param.span)
            args.append(f"ext.{param.name}")
        else:
            args.append(param.value.source())
    if tag.display is None:
        if tag.params:
            raise CompileError(ErrorKind.INVALID_FORMAT, tag.span)
        text = f"str(ext.{field.name})"
    else:
        if _format_arity(str(tag.display.value)) != len(args):
            raise CompileError(ErrorKind.INVALID_FORMAT, tag.display.span)
        text = _call(f"{tag.display.source()}.format", args)
    ctx.emit(f"ui.label_text({label}, {text})")


def _format_arity(fmt: str) -> int | None:
    """Return the number of positional arguments *fmt* consumes.

    ``None`` for malformed formats, named fields, and formats mixing
    automatic with manual numbering.
    """
    auto = 0
    indices: set[int] = set()
    pending = [fmt]
    while pending:
        try:
            parsed = list(string.Formatter().parse(pending.pop()))
        except ValueError:
            return None
        for _, field_name, format_spec, _ in parsed:
            if field_name is None:
                continue
            arg = re.split(r"[.\[]", field_name, maxsplit=1)[0]
            if arg == "":
                auto += 1
            elif arg.isdigit():
                indices.add(int(arg))
            else:
                return None
            if format_spec:
                pending.append(format_spec)
    if auto and indices:
        return None
    return auto or (max(indices) + 1 if indices else 0)


def _emit_tree(ctx: EmissionContext, field: Field, tag: TreeTag) -> None:
    kwargs = _kwargs(tag)
    kwargs = {"label": kwargs.pop("label", repr(field.name)), **kwargs}
    params = _call("_rt.TreeParams", kwargs=kwargs)
    with ctx.block(f"with _rt.tree_node(ui, {params}) as _open:"):
        with ctx.block("if _open:"):
            emit_tags(ctx, field, tag.node or [])


def _emit_vars(ctx: EmissionContext, field: Field, tag: VarsTag) -> None:
    # Style variables are pushed first so the color scope nests inside them.
    with _optional_scope(ctx, "style_vars", tag.style):
        with _optional_scope(ctx, "color_vars", tag.color):
            emit_tags(ctx, field, tag.content or [])


@contextmanager
def _optional_scope(ctx: EmissionContext, func: str, provider: LiteralValue | None) -> Iterator[None]:
    if provider is None:
        yield
        return
    with ctx.block(f"with _rt.{func}(ui, {_render(ParamKind.PROVIDER, provider)}):"):
        yield


def _emit_none(ctx: EmissionContext, field: Field, tag: NoneTag) -> None:
    return None


_EMITTERS: dict[type, Callable[[EmissionContext, Field, Tag], None]] = {
    NoneTag: _emit_none,
    DisplayTag: _emit_display,
    CheckboxTag: _value_widget("checkbox", "CheckboxParams"),
    InputTag: _value_widget("input_field", "InputParams"),
    DragTag: _value_widget("drag", "DragParams"),
    SliderTag: _value_widget("slider", "SliderParams"),
    ColorEditTag: _value_widget("color_edit", "ColorEditParams"),
    ColorPickerTag: _value_widget("color_picker", "ColorPickerParams"),
    ColorButtonTag: _emit_color_button,
    ButtonTag: _emit_button,
    NestedTag: _emit_nested,
    ProgressTag: _emit_progress,
    ImageTag: _texture_widget("image", "ImageParams"),
    ImageButtonTag: _texture_widget("image_button", "ImageButtonParams"),
    TextTag: _emit_text,
    TextWrapTag: _emit_text_wrap,
    BulletTag: _emit_bullet,
    BulletParentTag: _emit_bullet_parent,
    SeparatorTag: _emit_separator,
    NewLineTag: _emit_new_line,
    TreeTag: _emit_tree,
    VarsTag: _emit_vars,
}  # type: ignore[dict-item]
