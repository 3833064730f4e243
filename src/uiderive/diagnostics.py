# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Positioned diagnostics raised while compiling annotated dataclasses.

Every failure in the lexer, reader, grammar parser, parameter validator and
emitter surfaces as a single :class:`CompileError`. There is no recovery: the
first error aborts the compilation of the whole aggregate.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Span:
    """A source position attached to tokens, annotation nodes and diagnostics.

    Attributes:
        origin: Human-readable label of the source (``Aggregate.field`` or a file path).
        line: 1-based line number.
        column: 1-based column number.
    """

    origin: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.origin}, line {self.line}, column {self.column}"


@dataclass(frozen=True)
class SourceOrigin:
    """Where a piece of annotation text starts inside its enclosing source.

    Positions computed relative to the annotation text are shifted by this
    origin so that diagnostics point into the user's file when the text was
    read statically from Python source.
    """

    label: str
    line: int = 1
    column: int = 1

    def span(self, line: int, column: int) -> Span:
        """Translate a 1-based position inside the annotation text to an absolute span."""
        if line == 1:
            return Span(self.label, self.line, self.column + column - 1)
        return Span(self.label, self.line + line - 1, column)

    def start(self) -> Span:
        """Return the span of the first character of the annotation text."""
        return Span(self.label, self.line, self.column)


class ErrorKind(enum.Enum):
    """The kinds of compilation failure, with their user-facing messages."""

    INVALID_FORMAT = "Invalid annotation format."
    MULTIPLE = "Multiple annotations per field."
    NON_STRUCT = "Only dataclasses with named fields are supported."
    UNEXPECTED_MODE = "Unexpected annotation."
    UNEXPECTED_PARAM = "Unexpected parameter."
    BULLET = "Multiple nested annotations inside of a bullet list element."
    ALREADY_DEFINED = "Field is defined already."
    PARSE_ERROR = "String parsing error."
    MISSING_PARAM = "Parameter `{param}` missing."


class CompileError(Exception):
    """Raised when an annotated aggregate cannot be compiled.

    Attributes:
        kind: The failure category.
        span: Position of the offending token.
        param: Name of the missing parameter (only for ``MISSING_PARAM``).
    """

    def __init__(self, kind: ErrorKind, span: Span, *, param: str | None = None) -> None:
        self.kind = kind
        self.span = span
        self.param = param
        super().__init__(f"{span}: {self.message}")

    @property
    def message(self) -> str:
        """The rendered message without the position prefix."""
        if self.kind is ErrorKind.MISSING_PARAM:
            return self.kind.value.format(param=self.param)
        return self.kind.value
