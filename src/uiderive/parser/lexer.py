# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for ``ui(...)`` annotation text.

Converts the raw annotation string into a sequence of tokens for the reader.
Every scanning failure is reported as an ``INVALID_FORMAT`` compile error.
"""

import enum
from dataclasses import dataclass

from uiderive.diagnostics import CompileError, ErrorKind, SourceOrigin, Span

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the annotation lexer."""

    # Symbols
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    EQUALS = "="

    # Literals
    STRING = "STRING"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"

    # Identifiers
    IDENTIFIER = "IDENTIFIER"

    # End of input
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The raw text of the token (or decoded string content for STRING tokens).
        span: Absolute position where the token starts.
    """

    type: TokenType
    value: str
    span: Span


def tokenize(source: str, origin: SourceOrigin | None = None) -> list[Token]:
    """Tokenize annotation text into a sequence of tokens.

    Args:
        source: The annotation text, e.g. ``slider(min = 0, max = 100)``.
        origin: Where the text starts in its enclosing source. Defaults to
            line 1, column 1 of an anonymous ``<annotation>`` source.

    Returns:
        A list of Token objects ending with a single EOF token.

    Raises:
        CompileError: On unexpected characters, malformed numbers or
            unterminated string literals.
    """
    return _Lexer(source, origin or SourceOrigin("<annotation>")).tokenize()


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "=": TokenType.EQUALS,
}

_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, source: str, origin: SourceOrigin) -> None:
        self._source = source
        self._origin = origin
        self._pos = 0
        self._line = 1
        self._column = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        while self._pos < len(self._source):
            self._skip_whitespace()
            if self._pos >= len(self._source):
                break
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", self._span(self._line, self._column)))
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update position tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _span(self, line: int, column: int) -> Span:
        return self._origin.span(line, column)

    def _error(self, line: int, column: int) -> CompileError:
        return CompileError(ErrorKind.INVALID_FORMAT, self._span(line, column))

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._source) and self._current() in " \t\r\n":
            self._advance()

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch to the appropriate handler based on the current character."""
        ch = self._current()
        line = self._line
        col = self._column

        if ch in _SINGLE_CHAR_TOKENS:
            self._advance()
            self._tokens.append(Token(_SINGLE_CHAR_TOKENS[ch], ch, self._span(line, col)))
        elif ch in "\"'":
            self._scan_string(line, col)
        elif ch.isdigit() or (ch == "-" and self._peek().isdigit()):
            self._scan_number(line, col)
        elif ch.isalpha() or ch == "_":
            self._scan_identifier(line, col)
        else:
            raise self._error(line, col)

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self, line: int, col: int) -> None:
        """Scan a single- or double-quoted string literal with escape sequences."""
        quote = self._advance()
        chars: list[str] = []
        while self._pos < len(self._source):
            ch = self._current()
            if ch == quote:
                self._advance()
                self._tokens.append(Token(TokenType.STRING, "".join(chars), self._span(line, col)))
                return
            if ch == "\n":
                raise self._error(line, col)
            if ch == "\\":
                self._advance()
                esc = self._current()
                if esc not in _ESCAPES:
                    raise self._error(self._line, self._column)
                chars.append(_ESCAPES[esc])
                self._advance()
            else:
                chars.append(ch)
                self._advance()
        raise self._error(line, col)

    def _scan_number(self, line: int, col: int) -> None:
        """Scan an integer or floating-point literal with an optional leading minus.

        A float requires at least one digit on both sides of the decimal point
        and may carry an exponent.
        """
        start = self._pos
        is_float = False
        if self._current() == "-":
            self._advance()
        self._consume_digits()

        if self._current() == "." and self._peek().isdigit():
            is_float = True
            self._advance()
            self._consume_digits()

        if self._current() in ("e", "E"):
            is_float = True
            self._advance()
            if self._current() in ("+", "-"):
                self._advance()
            if not self._current().isdigit():
                raise self._error(line, col)
            self._consume_digits()

        # 12abc is neither a number nor an identifier
        if self._current().isalpha() or self._current() == "_":
            raise self._error(line, col)

        value = self._source[start : self._pos]
        token_type = TokenType.FLOAT if is_float else TokenType.INTEGER
        self._tokens.append(Token(token_type, value, self._span(line, col)))

    def _consume_digits(self) -> None:
        while self._pos < len(self._source) and self._current().isdigit():
            self._advance()

    def _scan_identifier(self, line: int, col: int) -> None:
        start = self._pos
        while self._pos < len(self._source) and (self._current().isalnum() or self._current() == "_"):
            self._advance()
        value = self._source[start : self._pos]
        self._tokens.append(Token(TokenType.IDENTIFIER, value, self._span(line, col)))
