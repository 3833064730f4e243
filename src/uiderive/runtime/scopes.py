# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scoped widgets: tree nodes and pushed style/color variables.

Each scope is a context manager that releases what it pushed when the wrapped
block exits, including when it exits through an exception.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from uiderive.runtime.host import UiHost, Vec4
from uiderive.runtime.params import TreeParams

# ###############
# Public Interface
# ###############


@contextmanager
def tree_node(ui: UiHost, params: TreeParams) -> Iterator[bool]:
    """Open a collapsible tree node and yield whether its body should be drawn."""
    if params.cond is not None:
        ui.set_next_item_open(True, params.cond)
    opened = ui.tree_node(params.label, params.flags)
    try:
        yield opened
    finally:
        if opened:
            ui.tree_pop()


@contextmanager
def style_vars(ui: UiHost, variables: Iterable[tuple[Any, Any]]) -> Iterator[None]:
    """Push ``(style_var, value)`` pairs for the duration of the block."""
    count = 0
    try:
        for var, value in variables:
            ui.push_style_var(var, value)
            count += 1
        yield
    finally:
        if count:
            ui.pop_style_var(count)


@contextmanager
def color_vars(ui: UiHost, colors: Iterable[tuple[Any, Vec4]]) -> Iterator[None]:
    """Push ``(style_color, rgba)`` pairs for the duration of the block."""
    count = 0
    try:
        for color, value in colors:
            ui.push_style_color(color, value)
            count += 1
        yield
    finally:
        if count:
            ui.pop_style_color(count)
