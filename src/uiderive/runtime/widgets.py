# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Widget adapters called by generated draw routines.

Value widgets take the current field value and return ``(changed, value)``;
the generated code writes the value back. A field holding ``None`` draws
nothing and reports no change.

Numeric inputs, drags and sliders share one routine: the value's numeric kind
(int or float) and arity (scalar, or a list/tuple of components) select the
host primitive's arguments, and the edited components are packed back into
the original shape.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from uiderive.runtime.host import UiHost
from uiderive.runtime.params import (
    ButtonParams,
    CheckboxParams,
    ColorButtonParams,
    ColorEditParams,
    ColorPickerParams,
    DragParams,
    ImageButtonParams,
    ImageParams,
    InputParams,
    ProgressParams,
    SliderParams,
)

# ###############
# Public Interface
# ###############


class NumericKind(enum.Enum):
    INT = "int"
    FLOAT = "float"


# Largest number of components each numeric widget can edit at once.
MAX_COMPONENTS: dict[str, int] = {
    "input": 4,
    "drag": 8,
    "slider": 16,
}


@dataclass(frozen=True)
class NumericShape:
    """The numeric kind and arity of a field value.

    Attributes:
        kind: Integer or float components.
        arity: Number of components.
        container: ``list`` or ``tuple`` for sequences, None for scalars.
    """

    kind: NumericKind
    arity: int
    container: type | None = None

    def unpack(self, value: Any) -> list[int | float]:
        return [value] if self.container is None else list(value)

    def pack(self, components: Sequence[int | float]) -> Any:
        cast = int if self.kind is NumericKind.INT else float
        values = [cast(component) for component in components]
        if self.container is None:
            return values[0]
        return self.container(values)


def numeric_shape(value: Any, widget: str) -> NumericShape:
    """Classify a numeric field value for the given widget.

    Raises:
        TypeError: If the value is not an int, a float, or a non-empty list or
            tuple of them, or has more components than the widget supports.
    """
    if _is_number(value):
        return NumericShape(_kind([value]), 1)
    if isinstance(value, (list, tuple)) and value and all(_is_number(item) for item in value):
        limit = MAX_COMPONENTS[widget]
        if len(value) > limit:
            raise TypeError(f"{widget} supports at most {limit} components, got {len(value)}")
        container = tuple if isinstance(value, tuple) else list
        return NumericShape(_kind(value), len(value), container)
    raise TypeError(f"{widget} expects a number or a sequence of numbers, got {type(value).__name__}")


def checkbox(ui: UiHost, value: bool | None, params: CheckboxParams) -> tuple[bool, bool | None]:
    if value is None:
        return False, None
    if not isinstance(value, bool):
        raise TypeError(f"checkbox expects a bool, got {type(value).__name__}")
    return ui.checkbox(params.label, value)


def input_field(ui: UiHost, value: Any, params: InputParams) -> tuple[bool, Any]:
    """Edit a string, a number, or up to four numeric components."""
    if value is None:
        return False, None
    if isinstance(value, str):
        if params.size is not None:
            return ui.input_text_multiline(params.label, value, params.size, params.flags)
        return ui.input_text(params.label, value, params.flags)

    def draw(kind: NumericKind, components: list[int | float]) -> tuple[bool, list[int | float]]:
        fmt = None
        if params.precision is not None and kind is NumericKind.FLOAT:
            fmt = f"%.{params.precision}f"
        return ui.input_scalar_n(
            params.label, kind.value, components, params.step, params.step_fast, fmt, params.flags
        )

    return _edit_numeric("input", value, draw)


def drag(ui: UiHost, value: Any, params: DragParams) -> tuple[bool, Any]:
    if value is None:
        return False, None

    def draw(kind: NumericKind, components: list[int | float]) -> tuple[bool, list[int | float]]:
        return ui.drag_scalar_n(
            params.label,
            kind.value,
            components,
            params.speed,
            params.min,
            params.max,
            params.format,
            params.power,
        )

    return _edit_numeric("drag", value, draw)


def slider(ui: UiHost, value: Any, params: SliderParams) -> tuple[bool, Any]:
    if value is None:
        return False, None

    def draw(kind: NumericKind, components: list[int | float]) -> tuple[bool, list[int | float]]:
        return ui.slider_scalar_n(
            params.label, kind.value, components, params.min, params.max, params.format, params.power
        )

    return _edit_numeric("slider", value, draw)


def color_edit(ui: UiHost, value: Any, params: ColorEditParams) -> tuple[bool, Any]:
    """Edit an RGB or RGBA color given as three or four floats."""
    if value is None:
        return False, None
    shape = _color_shape(value)
    changed, result = ui.color_edit(
        params.label, shape.unpack(value), params.flags, params.preview, params.mode, params.format
    )
    return changed, shape.pack(result)


def color_picker(ui: UiHost, value: Any, params: ColorPickerParams) -> tuple[bool, Any]:
    if value is None:
        return False, None
    shape = _color_shape(value)
    changed, result = ui.color_picker(
        params.label, shape.unpack(value), params.flags, params.preview, params.mode, params.format
    )
    return changed, shape.pack(result)


def color_button(ui: UiHost, value: Any, params: ColorButtonParams) -> bool:
    if value is None:
        return False
    shape = _color_shape(value)
    return ui.color_button(params.label, shape.unpack(value), params.flags, params.preview, params.size)


def button(ui: UiHost, params: ButtonParams) -> bool:
    if params.size is None:
        return ui.small_button(params.label)
    return ui.button(params.label, params.size)


def progress(ui: UiHost, value: float | None, params: ProgressParams) -> None:
    if value is None:
        return
    ui.progress_bar(float(value), params.size, params.overlay)


def image(ui: UiHost, texture: Any, params: ImageParams) -> None:
    if texture is None:
        return
    ui.image(texture, params.size, params.uv0, params.uv1, params.tint, params.border)


def image_button(ui: UiHost, texture: Any, params: ImageButtonParams) -> bool:
    if texture is None:
        return False
    return ui.image_button(
        texture,
        params.size,
        params.uv0,
        params.uv1,
        params.frame_padding,
        params.background,
        params.tint,
    )


# ################
# Implementation
# ################


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _kind(values: Sequence[Any]) -> NumericKind:
    if all(isinstance(item, int) for item in values):
        return NumericKind.INT
    return NumericKind.FLOAT


def _edit_numeric(
    widget: str,
    value: Any,
    draw: Callable[[NumericKind, list[int | float]], tuple[bool, list[int | float]]],
) -> tuple[bool, Any]:
    shape = numeric_shape(value, widget)
    changed, components = draw(shape.kind, shape.unpack(value))
    return changed, shape.pack(components)


def _color_shape(value: Any) -> NumericShape:
    if isinstance(value, (list, tuple)) and len(value) in (3, 4) and all(_is_number(item) for item in value):
        return NumericShape(NumericKind.FLOAT, len(value), tuple if isinstance(value, tuple) else list)
    raise TypeError(f"colors must be three or four numbers, got {value!r}")
