# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grammar parser: interprets an annotation tree as an ordered list of tags.

The top-level list is scanned in two states. In the initial state a
``label = ...`` or ``display = ...`` pair switches to the display shorthand
and consumes the whole list. Otherwise every entry must be a tag word or a
tag with a parameter list, and the scan moves to the tag state.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence

from uiderive.compiler.params import build_tag, collect_params
from uiderive.diagnostics import CompileError, ErrorKind, Span
from uiderive.model.annotations import (
    AnnotationNode,
    AnnotationSource,
    KeyValueNode,
    ListNode,
    LiteralKind,
    LiteralNode,
    WordNode,
)
from uiderive.model.tags import (
    BulletParentTag,
    BulletTag,
    ButtonTag,
    CheckboxTag,
    ColorButtonTag,
    ColorEditTag,
    ColorPickerTag,
    DisplayArg,
    DisplayField,
    DisplayLiteral,
    DisplayTag,
    DragTag,
    ImageButtonTag,
    ImageTag,
    InputTag,
    NestedTag,
    NewLineTag,
    NoneTag,
    ParamTag,
    ProgressTag,
    SeparatorTag,
    SliderTag,
    Tag,
    TagTree,
    TextTag,
    TextWrapTag,
    TreeTag,
    VarsTag,
)

# ###############
# Public Interface
# ###############


def parse_annotation(source: AnnotationSource) -> TagTree:
    """Interpret a whole ``ui(...)`` annotation.

    An empty annotation yields a single default display tag.

    Args:
        source: The annotation tree produced by the reader.

    Returns:
        The field's ordered tags.

    Raises:
        CompileError: On the first grammar or parameter violation.
    """
    if not source.nodes:
        return [DisplayTag(span=source.span)]
    return parse_nodes(source.nodes)


def parse_nodes(nodes: Sequence[AnnotationNode]) -> TagTree:
    """Interpret a list of annotation nodes as tags.

    Used for the top level of an annotation as well as for the contents of
    ``node(...)``, ``content(...)`` and reparsed bullet lists.
    """
    state = _State.INIT
    tags: TagTree = []
    for node in nodes:
        if isinstance(node, KeyValueNode):
            if state is _State.INIT and node.name in _DISPLAY_KEYS:
                tags.append(_parse_display(nodes, node.span))
                break
            raise CompileError(ErrorKind.INVALID_FORMAT, node.span)
        if isinstance(node, LiteralNode):
            raise CompileError(ErrorKind.INVALID_FORMAT, node.span)
        if isinstance(node, WordNode):
            tags.append(_parse_word(node))
        else:
            tags.extend(_parse_list(node))
        state = _State.TAGS
    return tags


# ################
# Implementation
# ################


class _State(enum.Enum):
    INIT = "init"
    TAGS = "tags"


_DISPLAY_KEYS = ("label", "display")


def _parse_word(node: WordNode) -> Tag:
    """Interpret a bare tag word, e.g. ``checkbox`` or ``separator``."""
    if node.name in _REJECTED_WORDS:
        raise CompileError(ErrorKind.INVALID_FORMAT, node.span)
    if node.name == "display":
        return DisplayTag(span=node.span)
    tag_cls = _TAG_CLASSES.get(node.name)
    if tag_cls is None:
        raise CompileError(ErrorKind.UNEXPECTED_MODE, node.span)
    if tag_cls is BulletTag:
        return BulletTag(span=node.span)
    # Words behave like an empty parameter list, so required parameters are reported missing.
    return build_tag(tag_cls, ListNode(name=node.name, span=node.span))


def _parse_list(node: ListNode) -> list[Tag]:
    """Interpret a tag with a parameter list; some forms expand to several tags."""
    parser = _LIST_PARSERS.get(node.name)
    if parser is not None:
        return parser(node)
    tag_cls = _TAG_CLASSES.get(node.name)
    if tag_cls is None:
        raise CompileError(ErrorKind.UNEXPECTED_MODE, node.span)
    return [build_tag(tag_cls, node)]


def _parse_display(nodes: Sequence[AnnotationNode], span: Span) -> DisplayTag:
    """Interpret the display shorthand, e.g. ``label = "Pos", display = "({}, {})", x, y``.

    ``label`` and ``display`` must come first. Once the first argument is seen
    only further arguments may follow.
    """
    tag = DisplayTag(span=span)
    params: list[DisplayArg] = []
    for node in nodes:
        if isinstance(node, KeyValueNode) and not params and node.name in _DISPLAY_KEYS:
            if node.value.kind is not LiteralKind.STR:
                raise CompileError(ErrorKind.INVALID_FORMAT, node.value.span)
            if getattr(tag, node.name) is not None:
                raise CompileError(ErrorKind.ALREADY_DEFINED, node.span)
            setattr(tag, node.name, node.value)
        elif isinstance(node, WordNode):
            params.append(DisplayField(name=node.name, span=node.span))
        elif isinstance(node, LiteralNode):
            params.append(DisplayLiteral(value=node.value))
        else:
            raise CompileError(ErrorKind.INVALID_FORMAT, node.span)
    tag.params = params
    return tag


def _parse_display_list(node: ListNode) -> list[Tag]:
    """Interpret the list form, e.g. ``display(label = "Pos", display = "({}, {})", x, y)``."""
    return [_parse_display(node.nested, node.span)]


def _parse_text(tag_cls: type[TextTag] | type[TextWrapTag]) -> Callable[[ListNode], list[Tag]]:
    """Text accepts either one positional string or ``lit = "..."``."""

    def parse(node: ListNode) -> list[Tag]:
        if len(node.nested) == 1 and isinstance(node.nested[0], LiteralNode):
            literal = node.nested[0].value
            if literal.kind is not LiteralKind.STR:
                raise CompileError(ErrorKind.INVALID_FORMAT, literal.span)
            return [tag_cls(span=node.span, lit=literal)]
        return [build_tag(tag_cls, node)]

    return parse


def _parse_color(node: ListNode) -> list[Tag]:
    """Interpret ``color(edit, picker(...), button)``; an empty list draws nothing."""
    tags: list[Tag] = []
    for entry in node.nested:
        if isinstance(entry, WordNode):
            tag_cls = _COLOR_MODES.get(entry.name)
            if tag_cls is None:
                raise CompileError(ErrorKind.UNEXPECTED_MODE, entry.span)
            tags.append(tag_cls(span=entry.span))
        elif isinstance(entry, ListNode):
            tag_cls = _COLOR_MODES.get(entry.name)
            if tag_cls is None:
                raise CompileError(ErrorKind.UNEXPECTED_MODE, entry.span)
            tags.append(build_tag(tag_cls, entry))
        else:
            raise CompileError(ErrorKind.INVALID_FORMAT, entry.span)
    return tags or [NoneTag(span=node.span)]


def _parse_bullet(node: ListNode) -> list[Tag]:
    """Interpret ``bullet(text = "...")`` or a bullet prefixing one nested tag.

    When the list is not a valid bullet parameter list it is reparsed as tags:
    no tag gives a bare bullet, one tag gives a bullet followed by that tag.
    """
    try:
        return [build_tag(BulletTag, node)]
    except CompileError:
        inner = parse_nodes(node.nested)
    if len(inner) > 1:
        raise CompileError(ErrorKind.BULLET, node.span)
    return [BulletParentTag(span=node.span), *inner]


def _parse_tree(node: ListNode) -> list[Tag]:
    values, child = collect_params(TreeTag, node, child="node")
    nested = parse_nodes(child.nested) if child is not None else None
    return [TreeTag(span=node.span, node=nested, **values)]


def _parse_vars(node: ListNode) -> list[Tag]:
    values, child = collect_params(VarsTag, node, child="content")
    nested = parse_nodes(child.nested) if child is not None else None
    return [VarsTag(span=node.span, content=nested, **values)]


# These words are only meaningful with a parameter list.
_REJECTED_WORDS = frozenset({"color", "text", "text_wrap"})

_TAG_CLASSES: dict[str, type[ParamTag]] = {
    "checkbox": CheckboxTag,
    "input": InputTag,
    "drag": DragTag,
    "slider": SliderTag,
    "button": ButtonTag,
    "nested": NestedTag,
    "progress": ProgressTag,
    "image": ImageTag,
    "image_button": ImageButtonTag,
    "bullet": BulletTag,
    "separator": SeparatorTag,
    "new_line": NewLineTag,
    "tree": TreeTag,
    "vars": VarsTag,
}

_COLOR_MODES: dict[str, type[ParamTag]] = {
    "edit": ColorEditTag,
    "picker": ColorPickerTag,
    "button": ColorButtonTag,
}

_LIST_PARSERS: dict[str, Callable[[ListNode], list[Tag]]] = {
    "display": _parse_display_list,
    "text": _parse_text(TextTag),
    "text_wrap": _parse_text(TextWrapTag),
    "color": _parse_color,
    "bullet": _parse_bullet,
    "tree": _parse_tree,
    "vars": _parse_vars,
}
