# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and reader for ``ui(...)`` annotation text."""

from uiderive.parser.lexer import Token, TokenType, tokenize
from uiderive.parser.reader import read_annotation

__all__ = [
    "Token",
    "TokenType",
    "read_annotation",
    "tokenize",
]
