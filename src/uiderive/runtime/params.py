# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parameter records passed from generated code to the widget adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from uiderive.runtime.host import Vec2, Vec4

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class CheckboxParams:
    label: str


@dataclass(frozen=True)
class InputParams:
    """Parameters of text and numeric inputs.

    ``size`` only applies to text, where it switches to a multiline input.
    ``precision`` only applies to floats.
    """

    label: str
    flags: Any = None
    step: int | float | None = None
    step_fast: int | float | None = None
    precision: int | None = None
    size: Vec2 | None = None


@dataclass(frozen=True)
class DragParams:
    label: str
    min: int | float | None = None
    max: int | float | None = None
    speed: float = 1.0
    power: float = 1.0
    format: str | None = None


@dataclass(frozen=True)
class SliderParams:
    label: str
    min: int | float
    max: int | float
    format: str | None = None
    power: float = 1.0


@dataclass(frozen=True)
class ButtonParams:
    """A button; without ``size`` a small button is drawn."""

    label: str
    size: Vec2 | None = None


@dataclass(frozen=True)
class ProgressParams:
    overlay: str | None = None
    size: Vec2 | None = None


@dataclass(frozen=True)
class ImageParams:
    size: Vec2
    border: Vec4 | None = None
    tint: Vec4 | None = None
    uv0: Vec2 | None = None
    uv1: Vec2 | None = None


@dataclass(frozen=True)
class ImageButtonParams:
    size: Vec2
    background: Vec4 | None = None
    frame_padding: int | None = None
    tint: Vec4 | None = None
    uv0: Vec2 | None = None
    uv1: Vec2 | None = None


@dataclass(frozen=True)
class ColorEditParams:
    label: str
    flags: Any = None
    preview: str | None = None
    mode: str | None = None
    format: str | None = None


@dataclass(frozen=True)
class ColorPickerParams:
    label: str
    flags: Any = None
    preview: str | None = None
    mode: str | None = None
    format: str | None = None


@dataclass(frozen=True)
class ColorButtonParams:
    label: str
    flags: Any = None
    preview: str | None = None
    size: Vec2 | None = None


@dataclass(frozen=True)
class TreeParams:
    """A collapsible tree node.

    ``cond`` controls when the node is forced open, one of ``Always``,
    ``Once``, ``FirstUseEver`` or ``Appearing``.
    """

    label: str
    flags: Any = None
    cond: str | None = None
