# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures: a UI host that records every primitive call."""

from __future__ import annotations

from typing import Any

import pytest


class RecordingUi:
    """A UI host double recording calls as ``(name, args)`` tuples.

    Value widgets return ``(False, <unchanged value>)`` and buttons return False
    unless a response was set with :meth:`respond`. Tree nodes open by default.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._responses: dict[str, Any] = {}

    def respond(self, name: str, value: Any) -> None:
        self._responses[name] = value

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def args(self, name: str) -> tuple[Any, ...]:
        """Return the arguments of the first call to *name*."""
        for call_name, args in self.calls:
            if call_name == name:
                return args
        raise AssertionError(f"{name} was not called; calls: {self.names()}")

    def _record(self, name: str, default: Any, *args: Any) -> Any:
        self.calls.append((name, args))
        return self._responses.get(name, default)

    def checkbox(self, label, state):
        return self._record("checkbox", (False, state), label, state)

    def input_text(self, label, value, flags):
        return self._record("input_text", (False, value), label, value, flags)

    def input_text_multiline(self, label, value, size, flags):
        return self._record("input_text_multiline", (False, value), label, value, size, flags)

    def input_scalar_n(self, label, kind, values, step, step_fast, format, flags):
        return self._record("input_scalar_n", (False, values), label, kind, values, step, step_fast, format, flags)

    def drag_scalar_n(self, label, kind, values, speed, min, max, format, power):
        return self._record("drag_scalar_n", (False, values), label, kind, values, speed, min, max, format, power)

    def slider_scalar_n(self, label, kind, values, min, max, format, power):
        return self._record("slider_scalar_n", (False, values), label, kind, values, min, max, format, power)

    def color_edit(self, label, color, flags, preview, mode, format):
        return self._record("color_edit", (False, color), label, color, flags, preview, mode, format)

    def color_picker(self, label, color, flags, preview, mode, format):
        return self._record("color_picker", (False, color), label, color, flags, preview, mode, format)

    def color_button(self, label, color, flags, preview, size):
        return self._record("color_button", False, label, color, flags, preview, size)

    def button(self, label, size):
        return self._record("button", False, label, size)

    def small_button(self, label):
        return self._record("small_button", False, label)

    def image_button(self, texture, size, uv0, uv1, frame_padding, background, tint):
        return self._record("image_button", False, texture, size, uv0, uv1, frame_padding, background, tint)

    def image(self, texture, size, uv0, uv1, tint, border):
        self._record("image", None, texture, size, uv0, uv1, tint, border)

    def progress_bar(self, fraction, size, overlay):
        self._record("progress_bar", None, fraction, size, overlay)

    def label_text(self, label, text):
        self._record("label_text", None, label, text)

    def text(self, text):
        self._record("text", None, text)

    def text_wrapped(self, text):
        self._record("text_wrapped", None, text)

    def bullet(self):
        self._record("bullet", None)

    def bullet_text(self, text):
        self._record("bullet_text", None, text)

    def separator(self):
        self._record("separator", None)

    def new_line(self):
        self._record("new_line", None)

    def set_next_item_open(self, is_open, cond):
        self._record("set_next_item_open", None, is_open, cond)

    def tree_node(self, label, flags):
        return self._record("tree_node", True, label, flags)

    def tree_pop(self):
        self._record("tree_pop", None)

    def push_style_var(self, var, value):
        self._record("push_style_var", None, var, value)

    def pop_style_var(self, count):
        self._record("pop_style_var", None, count)

    def push_style_color(self, color, value):
        self._record("push_style_color", None, color, value)

    def pop_style_color(self, count):
        self._record("pop_style_color", None, count)


@pytest.fixture
def recording_ui() -> RecordingUi:
    return RecordingUi()
