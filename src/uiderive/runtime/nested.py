# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Registration and dispatch of generated draw routines."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from uiderive.runtime.host import UiHost

# ###############
# Public Interface
# ###############


def register(cls: type, draw_fn: Callable[[UiHost, Any], Any], events_cls: type) -> None:
    """Attach a generated draw routine and ``Events`` type to an aggregate class."""
    cls.__ui_draw__ = staticmethod(draw_fn)  # type: ignore[attr-defined]
    cls.Events = events_cls  # type: ignore[attr-defined]


def draw(ui: UiHost, obj: Any) -> Any:
    """Draw a derived aggregate and return its events.

    A ``None`` value draws nothing and returns None.

    Raises:
        TypeError: If *obj*'s class has no registered draw routine.
    """
    if obj is None:
        return None
    draw_fn = getattr(type(obj), "__ui_draw__", None)
    if draw_fn is None:
        raise TypeError(f"{type(obj).__name__} has no generated draw routine; decorate it with @derive")
    return draw_fn(ui, obj)
