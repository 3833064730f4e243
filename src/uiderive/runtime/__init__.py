# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Runtime support called by generated draw routines."""

from uiderive.runtime.host import UiHost
from uiderive.runtime.nested import draw, register
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
    TreeParams,
)
from uiderive.runtime.scopes import color_vars, style_vars, tree_node
from uiderive.runtime.widgets import (
    NumericKind,
    NumericShape,
    button,
    checkbox,
    color_button,
    color_edit,
    color_picker,
    drag,
    image,
    image_button,
    input_field,
    numeric_shape,
    progress,
    slider,
)

__all__ = [
    "UiHost",
    # Dispatch
    "draw",
    "register",
    # Parameters
    "ButtonParams",
    "CheckboxParams",
    "ColorButtonParams",
    "ColorEditParams",
    "ColorPickerParams",
    "DragParams",
    "ImageButtonParams",
    "ImageParams",
    "InputParams",
    "ProgressParams",
    "SliderParams",
    "TreeParams",
    # Widgets
    "NumericKind",
    "NumericShape",
    "numeric_shape",
    "button",
    "checkbox",
    "color_button",
    "color_edit",
    "color_picker",
    "drag",
    "image",
    "image_button",
    "input_field",
    "progress",
    "slider",
    # Scopes
    "color_vars",
    "style_vars",
    "tree_node",
]
