# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent reader for annotation text.

Converts the token stream produced by the lexer into the generic annotation
tree (words, key-value pairs, nested lists and bare literals). The grammar is::

    annotation := [node ("," node)* [","]] EOF
    node       := IDENT ["=" literal | "(" [node ("," node)* [","]] ")"]
                | literal
    literal    := STRING | INTEGER | FLOAT
"""

from uiderive.diagnostics import CompileError, ErrorKind, SourceOrigin
from uiderive.model.annotations import (
    AnnotationNode,
    AnnotationSource,
    KeyValueNode,
    ListNode,
    LiteralKind,
    LiteralNode,
    LiteralValue,
    WordNode,
)
from uiderive.parser.lexer import Token, TokenType, tokenize

# ###############
# Public Interface
# ###############


def read_annotation(text: str, origin: SourceOrigin | None = None) -> AnnotationSource:
    """Read annotation text into a generic annotation tree.

    Args:
        text: The annotation text, e.g. ``slider(min = 0, max = 100)``.
        origin: Where the text starts in its enclosing source.

    Returns:
        The AnnotationSource holding the top-level nodes in order.

    Raises:
        CompileError: ``INVALID_FORMAT`` on any lexical or syntactic error,
            pointing at the offending token.
    """
    origin = origin or SourceOrigin("<annotation>")
    tokens = tokenize(text, origin)
    return _Reader(tokens).read(origin)


# ################
# Implementation
# ################

_LITERAL_TYPES: dict[TokenType, LiteralKind] = {
    TokenType.STRING: LiteralKind.STR,
    TokenType.INTEGER: LiteralKind.INT,
    TokenType.FLOAT: LiteralKind.FLOAT,
}


class _Reader:
    """Recursive-descent reader for annotation token streams."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def read(self, origin: SourceOrigin) -> AnnotationSource:
        """Read the full token stream and return the top-level nodes."""
        nodes = self._read_sequence(TokenType.EOF)
        self._expect(TokenType.EOF)
        return AnnotationSource(nodes=nodes, span=origin.start())

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _expect(self, *types: TokenType) -> Token:
        """Consume the current token if it matches any of the given types."""
        tok = self._current()
        if tok.type not in types:
            raise CompileError(ErrorKind.INVALID_FORMAT, tok.span)
        return self._advance()

    def _check(self, *types: TokenType) -> bool:
        return self._current().type in types

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def _read_sequence(self, closing: TokenType) -> list[AnnotationNode]:
        """Read comma-separated nodes up to (not including) the closing token.

        A single trailing comma is accepted.
        """
        nodes: list[AnnotationNode] = []
        while not self._check(closing):
            nodes.append(self._read_node())
            if not self._check(TokenType.COMMA):
                break
            self._advance()
        return nodes

    def _read_node(self) -> AnnotationNode:
        tok = self._current()
        if tok.type in _LITERAL_TYPES:
            literal = self._read_literal()
            return LiteralNode(value=literal, span=tok.span)

        name = self._expect(TokenType.IDENTIFIER)
        if self._check(TokenType.EQUALS):
            self._advance()
            return KeyValueNode(name=name.value, value=self._read_literal(), span=name.span)
        if self._check(TokenType.LPAREN):
            self._advance()
            nested = self._read_sequence(TokenType.RPAREN)
            self._expect(TokenType.RPAREN)
            return ListNode(name=name.value, nested=nested, span=name.span)
        return WordNode(name=name.value, span=name.span)

    def _read_literal(self) -> LiteralValue:
        tok = self._expect(*_LITERAL_TYPES)
        kind = _LITERAL_TYPES[tok.type]
        value: int | float | str
        if kind is LiteralKind.INT:
            value = int(tok.value)
        elif kind is LiteralKind.FLOAT:
            value = float(tok.value)
        else:
            value = tok.value
        return LiteralValue(kind=kind, value=value, span=tok.span)
