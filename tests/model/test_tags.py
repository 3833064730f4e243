# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the tag model and its parameter tables."""

import pytest
from pydantic import TypeAdapter

from uiderive.diagnostics import Span
from uiderive.model.annotations import LiteralKind, LiteralValue
from uiderive.model.tags import (
    BulletTag,
    ButtonTag,
    CheckboxTag,
    ColorButtonTag,
    ColorEditTag,
    ColorPickerTag,
    DragTag,
    ImageButtonTag,
    ImageTag,
    InputTag,
    NestedTag,
    NewLineTag,
    ParamKind,
    ParamTag,
    ProgressTag,
    SeparatorTag,
    SliderTag,
    Tag,
    TextTag,
    TextWrapTag,
    TreeTag,
    VarsTag,
)

SPAN = Span("<test>", 1, 1)

# Every tag class whose parameters are validated against a ParamTable.
PARAM_TAGS: tuple[type[ParamTag], ...] = (
    CheckboxTag,
    InputTag,
    DragTag,
    SliderTag,
    ButtonTag,
    NestedTag,
    ProgressTag,
    ImageTag,
    ImageButtonTag,
    ColorEditTag,
    ColorPickerTag,
    ColorButtonTag,
    TextTag,
    TextWrapTag,
    BulletTag,
    SeparatorTag,
    NewLineTag,
    TreeTag,
    VarsTag,
)


def _lit(value: int | float | str) -> LiteralValue:
    kind = {int: LiteralKind.INT, float: LiteralKind.FLOAT, str: LiteralKind.STR}[type(value)]
    return LiteralValue(kind=kind, value=value, span=SPAN)


class TestParamTables:
    @pytest.mark.parametrize("tag_cls", PARAM_TAGS, ids=lambda cls: cls.__name__)
    def test_table_matches_model_fields(self, tag_cls: type[ParamTag]) -> None:
        declared = set(tag_cls.PARAMS.names)
        structural = {"kind", "span", "node", "content"}
        assert declared == set(tag_cls.model_fields) - structural

    @pytest.mark.parametrize("tag_cls", PARAM_TAGS, ids=lambda cls: cls.__name__)
    def test_required_fields_have_no_default(self, tag_cls: type[ParamTag]) -> None:
        for spec in tag_cls.PARAMS.required:
            assert tag_cls.model_fields[spec.name].is_required()

    def test_lookup(self) -> None:
        spec = SliderTag.PARAMS.lookup("min")
        assert spec is not None
        assert spec.kind is ParamKind.NUMBER
        assert SliderTag.PARAMS.lookup("speed") is None

    def test_slider_declares_min_before_max(self) -> None:
        assert [spec.name for spec in SliderTag.PARAMS.required] == ["min", "max"]


class TestTagValues:
    def test_params_returns_only_set_values(self) -> None:
        tag = CheckboxTag(span=SPAN, label=_lit("On"))
        assert list(tag.params()) == ["label"]

    def test_tree_owns_child_tags(self) -> None:
        tag = TreeTag(span=SPAN, node=[CheckboxTag(span=SPAN)])
        assert tag.node is not None
        assert tag.node[0].kind == "checkbox"

    def test_discriminated_union_round_trip(self) -> None:
        adapter = TypeAdapter(Tag)
        tag = TreeTag(span=SPAN, label=_lit("Group"), node=[SliderTag(span=SPAN, min=_lit(0), max=_lit(1))])
        restored = adapter.validate_python(tag.model_dump())
        assert isinstance(restored, TreeTag)
        assert isinstance(restored.node[0], SliderTag)
        assert restored == tag
