# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Annotation-driven immediate-mode UI bindings for Python dataclasses."""

from uiderive.derive import UiMarker, derive, reflect_aggregate, ui
from uiderive.diagnostics import CompileError, ErrorKind, SourceOrigin, Span
from uiderive.runtime import UiHost, draw

__all__ = [
    "derive",
    "ui",
    "UiMarker",
    "draw",
    "reflect_aggregate",
    "UiHost",
    "CompileError",
    "ErrorKind",
    "SourceOrigin",
    "Span",
]
