# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generic annotation syntax tree produced by the reader.

The nodes here carry no UI meaning. The grammar parser interprets them as
tags, parameters and display formats.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

from uiderive.diagnostics import Span

# ###############
# Public Interface
# ###############


class LiteralKind(Enum):
    """The lexical kind of a literal value."""

    INT = "int"
    FLOAT = "float"
    STR = "str"


class LiteralValue(BaseModel):
    """A literal as written in an annotation, stored verbatim.

    Attributes:
        kind: Whether the literal was an integer, a float or a string.
        value: The decoded value.
        span: Position of the literal.
    """

    kind: LiteralKind
    value: int | float | str
    span: Span

    def source(self) -> str:
        """Render the literal as a Python expression."""
        return repr(self.value)


class WordNode(BaseModel):
    """A bare identifier, e.g. ``checkbox``."""

    kind: Literal["word"] = "word"
    name: str
    span: Span


class KeyValueNode(BaseModel):
    """An ``identifier = literal`` pair, e.g. ``min = 0``."""

    kind: Literal["key_value"] = "key_value"
    name: str
    value: LiteralValue
    span: Span


class ListNode(BaseModel):
    """An identifier followed by a parenthesised list, e.g. ``slider(min = 0, max = 1)``."""

    kind: Literal["list"] = "list"
    name: str
    nested: list[AnnotationNode] = _Field(default_factory=list)
    span: Span


class LiteralNode(BaseModel):
    """A bare literal in list position, e.g. the ``"Hello"`` in ``text("Hello")``."""

    kind: Literal["literal"] = "literal"
    value: LiteralValue
    span: Span


# One entry of an annotation list. The `kind` discriminator keeps the union unambiguous.
AnnotationNode = Annotated[
    WordNode | KeyValueNode | ListNode | LiteralNode,
    _Field(discriminator="kind"),
]


class AnnotationSource(BaseModel):
    """The whole comma-separated contents of one ``ui(...)`` marker."""

    nodes: list[AnnotationNode] = _Field(default_factory=list)
    span: Span


ListNode.model_rebuild()
AnnotationSource.model_rebuild()
