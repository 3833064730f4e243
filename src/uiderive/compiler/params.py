# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parameter validation for tag parameter lists.

Fills a tag's declared parameters from ``key = literal`` entries, enforcing
that every key is known, set at most once, carries a value of the right kind,
and that every required key is present.
"""

from __future__ import annotations

import keyword
import math
from typing import TypeVar

from uiderive.diagnostics import CompileError, ErrorKind
from uiderive.model.annotations import KeyValueNode, ListNode, LiteralKind, LiteralValue
from uiderive.model.tags import ParamKind, ParamSpec, ParamTag

T = TypeVar("T", bound=ParamTag)

# ###############
# Public Interface
# ###############


def build_tag(tag_cls: type[T], node: ListNode) -> T:
    """Build a tag from a parameter list such as ``slider(min = 0, max = 1)``.

    Args:
        tag_cls: The tag variant whose parameter table governs the list.
        node: The list node holding ``key = literal`` entries.

    Returns:
        The tag with every supplied parameter stored verbatim.

    Raises:
        CompileError: ``UNEXPECTED_PARAM`` for unknown keys, ``ALREADY_DEFINED``
            for repeated keys, ``INVALID_FORMAT`` or ``PARSE_ERROR`` for values
            of the wrong kind, and ``MISSING_PARAM`` for absent required keys.
    """
    values, _ = collect_params(tag_cls, node)
    return tag_cls(span=node.span, **values)


def collect_params(
    tag_cls: type[ParamTag],
    node: ListNode,
    child: str | None = None,
) -> tuple[dict[str, LiteralValue], ListNode | None]:
    """Validate a parameter list that may contain one named child list.

    Tree and vars tags accept a ``node(...)`` or ``content(...)`` child list next
    to their parameters. The child list is returned unparsed.

    Args:
        tag_cls: The tag variant whose parameter table governs the list.
        node: The list node to validate.
        child: Name of the accepted child list, if any.

    Returns:
        The validated parameters and the child list node, or None when absent.
    """
    table = tag_cls.PARAMS
    values: dict[str, LiteralValue] = {}
    child_node: ListNode | None = None
    for entry in node.nested:
        if child is not None and isinstance(entry, ListNode) and entry.name == child:
            if child_node is not None:
                raise CompileError(ErrorKind.ALREADY_DEFINED, entry.span)
            child_node = entry
            continue
        if not isinstance(entry, KeyValueNode):
            raise CompileError(ErrorKind.INVALID_FORMAT, entry.span)
        spec = table.lookup(entry.name)
        if spec is None:
            raise CompileError(ErrorKind.UNEXPECTED_PARAM, entry.span)
        if entry.name in values:
            raise CompileError(ErrorKind.ALREADY_DEFINED, entry.span)
        check_value(spec, entry.value)
        values[entry.name] = entry.value

    for spec in table.required:
        if spec.name not in values:
            raise CompileError(ErrorKind.MISSING_PARAM, node.span, param=spec.name)
    return values, child_node


def check_value(spec: ParamSpec, value: LiteralValue) -> None:
    """Check that a literal is acceptable for a declared parameter.

    Raises:
        CompileError: ``PARSE_ERROR`` for numeric strings that do not parse,
            ``INVALID_FORMAT`` for any other mismatch.
    """
    if spec.kind is ParamKind.NUMBER:
        to_number(value)
        return
    if spec.kind is ParamKind.INTEGER:
        if not isinstance(to_number(value), int):
            raise CompileError(ErrorKind.INVALID_FORMAT, value.span)
        return

    if value.kind is not LiteralKind.STR:
        raise CompileError(ErrorKind.INVALID_FORMAT, value.span)
    text = str(value.value)
    if spec.kind is ParamKind.IDENTIFIER and not is_identifier(text):
        raise CompileError(ErrorKind.INVALID_FORMAT, value.span)
    if spec.kind is ParamKind.PROVIDER and not is_provider(text):
        raise CompileError(ErrorKind.INVALID_FORMAT, value.span)
    if spec.kind is ParamKind.CHOICE and text not in spec.choices:
        raise CompileError(ErrorKind.INVALID_FORMAT, value.span)


def to_number(value: LiteralValue) -> int | float:
    """Coerce a numeric parameter, parsing string literals.

    Strings are tried as integers first, then as floats.

    Raises:
        CompileError: ``PARSE_ERROR`` when a string is neither, or when the
            number is not finite.
    """
    if value.kind is LiteralKind.STR:
        text = str(value.value).strip()
        try:
            number: int | float = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                raise CompileError(ErrorKind.PARSE_ERROR, value.span) from None
    else:
        number = value.value  # type: ignore[assignment]
    if isinstance(number, float) and not math.isfinite(number):
        raise CompileError(ErrorKind.PARSE_ERROR, value.span)
    return number


def is_identifier(text: str) -> bool:
    """Return True if *text* can name a Python attribute."""
    return text.isidentifier() and not keyword.iskeyword(text)


def is_provider(text: str) -> bool:
    """Return True if *text* is a dotted path to a callable, e.g. ``styles.header``."""
    return all(is_identifier(part) for part in text.split("."))
