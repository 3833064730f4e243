# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for annotations, tags, aggregates and event schemas."""

from uiderive.model.aggregate import (
    Aggregate,
    AnnotationBlock,
    EventEntry,
    EventKind,
    EventSchema,
    Field,
)
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
from uiderive.model.tags import (
    BulletParentTag,
    BulletTag,
    ButtonTag,
    CheckboxTag,
    ColorButtonTag,
    ColorEditTag,
    ColorPickerTag,
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
    ParamKind,
    ParamSpec,
    ParamTable,
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

__all__ = [
    # Annotation tree
    "AnnotationNode",
    "AnnotationSource",
    "KeyValueNode",
    "ListNode",
    "LiteralKind",
    "LiteralNode",
    "LiteralValue",
    "WordNode",
    # Tags
    "BulletParentTag",
    "BulletTag",
    "ButtonTag",
    "CheckboxTag",
    "ColorButtonTag",
    "ColorEditTag",
    "ColorPickerTag",
    "DisplayField",
    "DisplayLiteral",
    "DisplayTag",
    "DragTag",
    "ImageButtonTag",
    "ImageTag",
    "InputTag",
    "NestedTag",
    "NewLineTag",
    "NoneTag",
    "ParamKind",
    "ParamSpec",
    "ParamTable",
    "ParamTag",
    "ProgressTag",
    "SeparatorTag",
    "SliderTag",
    "Tag",
    "TagTree",
    "TextTag",
    "TextWrapTag",
    "TreeTag",
    "VarsTag",
    # Aggregates and events
    "Aggregate",
    "AnnotationBlock",
    "EventEntry",
    "EventKind",
    "EventSchema",
    "Field",
]
