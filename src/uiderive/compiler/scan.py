# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Static discovery of annotated aggregates in Python source.

Finds ``@derive`` dataclasses without importing the module and extracts the
``ui(...)`` annotation text of each field, with positions pointing into the
file. The same annotation-expression walker serves string annotations seen at
runtime under ``from __future__ import annotations``.
"""

from __future__ import annotations

import ast
from collections.abc import Sequence
from pathlib import Path

from uiderive.diagnostics import CompileError, ErrorKind, SourceOrigin, Span
from uiderive.model.aggregate import Aggregate, AnnotationBlock, Field

# ###############
# Public Interface
# ###############

DEFAULT_MARKER = "ui"
DEFAULT_DECORATOR = "derive"


def scan_source(
    text: str,
    origin: str,
    *,
    marker: str = DEFAULT_MARKER,
    decorator: str = DEFAULT_DECORATOR,
) -> list[Aggregate]:
    """Find every aggregate marked with *decorator* in Python source text.

    Args:
        text: The Python source.
        origin: Label used in positions, normally the file path.
        marker: Name of the annotation marker callable.
        decorator: Name of the decorator marking aggregates.

    Returns:
        The aggregates in source order.

    Raises:
        SyntaxError: If *text* is not valid Python.
        CompileError: ``NON_STRUCT`` for decorated functions or non-dataclass
            classes, ``MULTIPLE`` and ``INVALID_FORMAT`` for bad markers.
    """
    tree = ast.parse(text, filename=origin)
    aggregates: list[Aggregate] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.ClassDef, ast.FunctionDef, ast.AsyncFunctionDef)):
            continue
        if decorator not in _decorator_names(node):
            continue
        span = Span(origin, node.lineno, node.col_offset + 1)
        if not isinstance(node, ast.ClassDef) or "dataclass" not in _decorator_names(node):
            raise CompileError(ErrorKind.NON_STRUCT, span)
        aggregates.append(_aggregate(node, text, origin, marker))
    aggregates.sort(key=lambda agg: (agg.span.line, agg.span.column))
    return aggregates


def scan_file(path: Path, *, marker: str = DEFAULT_MARKER, label: str | None = None) -> list[Aggregate]:
    """Read *path* and scan it; positions are labelled with *label* or the path."""
    return scan_source(path.read_text(encoding="utf-8"), label or str(path), marker=marker)


def annotation_parts(
    expr: ast.expr,
    text: str,
    label: str,
    marker: str = DEFAULT_MARKER,
) -> tuple[str, list[AnnotationBlock]]:
    """Split a field annotation expression into its type and its marker blocks.

    ``Annotated[int, ui("checkbox")]`` yields ``("int", [<checkbox block>])``.
    Anything that is not ``Annotated`` yields the whole expression and no blocks.

    Args:
        expr: The annotation expression.
        text: The source text *expr* was parsed from, for exact positions.
        label: Label used in positions.
        marker: Name of the annotation marker callable.
    """
    if not (isinstance(expr, ast.Subscript) and _name(expr.value) == "Annotated"):
        return ast.unparse(expr), []
    elements = expr.slice.elts if isinstance(expr.slice, ast.Tuple) else [expr.slice]
    blocks = [
        _marker_block(meta, text, label)
        for meta in elements[1:]
        if _name(meta) == marker or (isinstance(meta, ast.Call) and _name(meta.func) == marker)
    ]
    return ast.unparse(elements[0]), blocks


def single_block(blocks: Sequence[AnnotationBlock]) -> AnnotationBlock | None:
    """Return the only annotation block of a field.

    Raises:
        CompileError: ``MULTIPLE`` at the second block if there are several.
    """
    if len(blocks) > 1:
        raise CompileError(ErrorKind.MULTIPLE, blocks[1].origin.start())
    return blocks[0] if blocks else None


# ################
# Implementation
# ################


def _name(expr: ast.expr) -> str | None:
    if isinstance(expr, ast.Name):
        return expr.id
    if isinstance(expr, ast.Attribute):
        return expr.attr
    return None


def _decorator_names(node: ast.ClassDef | ast.FunctionDef | ast.AsyncFunctionDef) -> set[str]:
    names = set()
    for deco in node.decorator_list:
        target = deco.func if isinstance(deco, ast.Call) else deco
        name = _name(target)
        if name is not None:
            names.add(name)
    return names


def _aggregate(node: ast.ClassDef, text: str, origin: str, marker: str) -> Aggregate:
    fields: list[Field] = []
    for stmt in node.body:
        if not isinstance(stmt, ast.AnnAssign) or not isinstance(stmt.target, ast.Name):
            continue
        if isinstance(stmt.annotation, ast.Subscript) and _name(stmt.annotation.value) == "ClassVar":
            continue
        type_name, blocks = annotation_parts(stmt.annotation, text, origin, marker)
        fields.append(
            Field(
                name=stmt.target.id,
                type_name=type_name,
                annotation=single_block(blocks),
                span=Span(origin, stmt.lineno, stmt.col_offset + 1),
            )
        )
    return Aggregate(name=node.name, fields=fields, span=Span(origin, node.lineno, node.col_offset + 1))


def _marker_block(meta: ast.expr, text: str, label: str) -> AnnotationBlock:
    """Extract the annotation text of ``ui``, ``ui()`` or ``ui("...")``."""
    start = SourceOrigin(label, meta.lineno, meta.col_offset + 1)
    if not isinstance(meta, ast.Call):
        return AnnotationBlock(text="", origin=start)
    if meta.keywords or len(meta.args) > 1:
        raise CompileError(ErrorKind.INVALID_FORMAT, start.start())
    if not meta.args:
        return AnnotationBlock(text="", origin=start)
    arg = meta.args[0]
    if not (isinstance(arg, ast.Constant) and isinstance(arg.value, str)):
        raise CompileError(ErrorKind.INVALID_FORMAT, Span(label, arg.lineno, arg.col_offset + 1))
    return AnnotationBlock(text=arg.value, origin=_string_origin(arg, text, label))


def _string_origin(node: ast.Constant, text: str, label: str) -> SourceOrigin:
    """Position of the first character inside a string literal's quotes."""
    segment = ast.get_source_segment(text, node) or ""
    prefix = len(segment) - len(segment.lstrip("rRbBuUfF"))
    quote = 3 if segment[prefix : prefix + 3] in ('"""', "'''") else 1
    return SourceOrigin(label, node.lineno, node.col_offset + 1 + prefix + quote)
