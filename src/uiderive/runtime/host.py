# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""The UI host protocol: the immediate-mode primitives generated code calls.

Any object implementing these methods can be passed as ``ui`` to a draw
routine. Numeric widgets receive their values as a list of components plus a
numeric kind (``"int"`` or ``"float"``) and return ``(changed, components)``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

# ###############
# Public Interface
# ###############

Vec2 = tuple[float, float]
Vec4 = tuple[float, float, float, float]


class UiHost(Protocol):
    """Primitive widget operations of an immediate-mode UI backend."""

    # Value widgets

    def checkbox(self, label: str, state: bool) -> tuple[bool, bool]: ...

    def input_text(self, label: str, value: str, flags: Any) -> tuple[bool, str]: ...

    def input_text_multiline(self, label: str, value: str, size: Vec2 | None, flags: Any) -> tuple[bool, str]: ...

    def input_scalar_n(
        self,
        label: str,
        kind: str,
        values: list[int | float],
        step: int | float | None,
        step_fast: int | float | None,
        format: str | None,
        flags: Any,
    ) -> tuple[bool, list[int | float]]: ...

    def drag_scalar_n(
        self,
        label: str,
        kind: str,
        values: list[int | float],
        speed: float,
        min: int | float | None,
        max: int | float | None,
        format: str | None,
        power: float,
    ) -> tuple[bool, list[int | float]]: ...

    def slider_scalar_n(
        self,
        label: str,
        kind: str,
        values: list[int | float],
        min: int | float,
        max: int | float,
        format: str | None,
        power: float,
    ) -> tuple[bool, list[int | float]]: ...

    def color_edit(
        self,
        label: str,
        color: list[float],
        flags: Any,
        preview: str | None,
        mode: str | None,
        format: str | None,
    ) -> tuple[bool, list[float]]: ...

    def color_picker(
        self,
        label: str,
        color: list[float],
        flags: Any,
        preview: str | None,
        mode: str | None,
        format: str | None,
    ) -> tuple[bool, list[float]]: ...

    # Interaction-only widgets

    def color_button(
        self, label: str, color: Sequence[float], flags: Any, preview: str | None, size: Vec2 | None
    ) -> bool: ...

    def button(self, label: str, size: Vec2) -> bool: ...

    def small_button(self, label: str) -> bool: ...

    def image_button(
        self,
        texture: Any,
        size: Vec2,
        uv0: Vec2 | None,
        uv1: Vec2 | None,
        frame_padding: int | None,
        background: Vec4 | None,
        tint: Vec4 | None,
    ) -> bool: ...

    # Passive widgets

    def image(
        self, texture: Any, size: Vec2, uv0: Vec2 | None, uv1: Vec2 | None, tint: Vec4 | None, border: Vec4 | None
    ) -> None: ...

    def progress_bar(self, fraction: float, size: Vec2 | None, overlay: str | None) -> None: ...

    def label_text(self, label: str, text: str) -> None: ...

    def text(self, text: str) -> None: ...

    def text_wrapped(self, text: str) -> None: ...

    def bullet(self) -> None: ...

    def bullet_text(self, text: str) -> None: ...

    def separator(self) -> None: ...

    def new_line(self) -> None: ...

    # Scopes

    def set_next_item_open(self, is_open: bool, cond: str) -> None: ...

    def tree_node(self, label: str, flags: Any) -> bool: ...

    def tree_pop(self) -> None: ...

    def push_style_var(self, var: Any, value: Any) -> None: ...

    def pop_style_var(self, count: int) -> None: ...

    def push_style_color(self, color: Any, value: Vec4) -> None: ...

    def pop_style_color(self, count: int) -> None: ...
