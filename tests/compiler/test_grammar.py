# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the grammar parser."""

import pytest

from uiderive.compiler.grammar import parse_annotation
from uiderive.diagnostics import CompileError, ErrorKind
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
    ProgressTag,
    SeparatorTag,
    SliderTag,
    TagTree,
    TextTag,
    TextWrapTag,
    TreeTag,
    VarsTag,
)
from uiderive.parser.reader import read_annotation

# ###############
# Test Helpers
# ###############


def _parse(text: str) -> TagTree:
    return parse_annotation(read_annotation(text))


def _error(text: str) -> CompileError:
    with pytest.raises(CompileError) as exc_info:
        _parse(text)
    return exc_info.value


# ###############
# Words
# ###############


class TestWords:
    @pytest.mark.parametrize(
        ("text", "tag_cls"),
        [
            ("separator", SeparatorTag),
            ("new_line", NewLineTag),
            ("nested", NestedTag),
            ("display", DisplayTag),
            ("checkbox", CheckboxTag),
            ("input", InputTag),
            ("drag", DragTag),
            ("bullet", BulletTag),
            ("progress", ProgressTag),
            ("tree", TreeTag),
            ("vars", VarsTag),
        ],
    )
    def test_word_tags(self, text: str, tag_cls: type) -> None:
        (tag,) = _parse(text)
        assert isinstance(tag, tag_cls)

    @pytest.mark.parametrize("text", ["color", "text", "text_wrap"])
    def test_words_that_need_a_list(self, text: str) -> None:
        assert _error(text).kind is ErrorKind.INVALID_FORMAT

    def test_unknown_word(self) -> None:
        error = _error("checkbox, knob")
        assert error.kind is ErrorKind.UNEXPECTED_MODE
        assert error.span.column == 11

    def test_word_with_required_parameters(self) -> None:
        error = _error("slider")
        assert error.kind is ErrorKind.MISSING_PARAM
        assert error.param == "min"

    def test_empty_annotation_is_display(self) -> None:
        (tag,) = _parse("")
        assert isinstance(tag, DisplayTag)
        assert tag.label is None

    def test_tags_keep_order(self) -> None:
        tags = _parse("separator, checkbox, new_line")
        assert [tag.kind for tag in tags] == ["separator", "checkbox", "new_line"]


# ###############
# Lists
# ###############


class TestLists:
    def test_slider(self) -> None:
        (tag,) = _parse("slider(min = 0, max = 100)")
        assert isinstance(tag, SliderTag)
        assert (tag.min.value, tag.max.value) == (0, 100)

    def test_button(self) -> None:
        (tag,) = _parse('button(label = "Go")')
        assert isinstance(tag, ButtonTag)
        assert tag.label.value == "Go"

    def test_image_and_image_button(self) -> None:
        image, button = _parse('image(size = "icon_size"), image_button(size = "icon_size", frame_padding = 2)')
        assert isinstance(image, ImageTag)
        assert isinstance(button, ImageButtonTag)

    def test_parameterless_list_equals_word(self) -> None:
        assert isinstance(_parse("checkbox()")[0], CheckboxTag)

    def test_unknown_list(self) -> None:
        assert _error("knob(size = 1)").kind is ErrorKind.UNEXPECTED_MODE

    def test_key_value_after_tags(self) -> None:
        assert _error("checkbox, min = 1").kind is ErrorKind.INVALID_FORMAT

    def test_unknown_key_value_first(self) -> None:
        assert _error("min = 1").kind is ErrorKind.INVALID_FORMAT

    def test_top_level_literal(self) -> None:
        assert _error('"hello"').kind is ErrorKind.INVALID_FORMAT

    def test_checkbox_unknown_parameter(self) -> None:
        error = _error('checkbox(foo = "bar")')
        assert error.kind is ErrorKind.UNEXPECTED_PARAM
        assert error.span.column == 10

    def test_parsing_is_pure(self) -> None:
        text = 'tree(label = "Group", node(checkbox, drag(min = -1, max = 1)))'
        assert _parse(text) == _parse(text)


class TestText:
    def test_positional_literal(self) -> None:
        (tag,) = _parse('text("Hello")')
        assert isinstance(tag, TextTag)
        assert tag.lit.value == "Hello"

    def test_named_literal(self) -> None:
        (tag,) = _parse('text_wrap(lit = "Long text")')
        assert isinstance(tag, TextWrapTag)
        assert tag.lit.value == "Long text"

    def test_positional_number(self) -> None:
        assert _error("text(3)").kind is ErrorKind.INVALID_FORMAT

    def test_empty_text(self) -> None:
        error = _error("text()")
        assert error.kind is ErrorKind.MISSING_PARAM
        assert error.param == "lit"


class TestColor:
    def test_modes(self) -> None:
        tags = _parse('color(edit, picker(mode = "HueWheel"), button(size = "swatch"))')
        assert [type(tag) for tag in tags] == [ColorEditTag, ColorPickerTag, ColorButtonTag]
        assert tags[1].mode.value == "HueWheel"

    def test_empty_color_draws_nothing(self) -> None:
        (tag,) = _parse("color()")
        assert isinstance(tag, NoneTag)

    def test_unknown_mode(self) -> None:
        assert _error("color(wheel)").kind is ErrorKind.UNEXPECTED_MODE
        assert _error("color(wheel())").kind is ErrorKind.UNEXPECTED_MODE

    def test_key_value_in_color(self) -> None:
        assert _error('color(label = "c")').kind is ErrorKind.INVALID_FORMAT


class TestBullet:
    def test_bare_bullet(self) -> None:
        (tag,) = _parse("bullet")
        assert isinstance(tag, BulletTag)
        assert tag.text is None

    def test_empty_bullet(self) -> None:
        (tag,) = _parse("bullet()")
        assert isinstance(tag, BulletTag)
        assert tag.text is None

    def test_bullet_text(self) -> None:
        (tag,) = _parse('bullet(text = "Point")')
        assert tag.text.value == "Point"

    def test_bullet_prefixing_one_tag(self) -> None:
        parent, child = _parse("bullet(slider(min = 0, max = 1))")
        assert isinstance(parent, BulletParentTag)
        assert isinstance(child, SliderTag)

    def test_bullet_with_two_tags(self) -> None:
        error = _error("bullet(checkbox, drag(max = 1))")
        assert error.kind is ErrorKind.BULLET
        assert error.span.column == 1

    def test_errors_inside_the_prefixed_tag_surface(self) -> None:
        assert _error("bullet(slider(max = 1))").param == "min"


class TestTree:
    def test_tree_with_children(self) -> None:
        (tag,) = _parse('tree(label = "Group", node(checkbox, drag(min = -1, max = 1)))')
        assert isinstance(tag, TreeTag)
        assert tag.label.value == "Group"
        assert [child.kind for child in tag.node] == ["checkbox", "drag"]
        assert tag.node[1].min.value == -1

    def test_tree_condition(self) -> None:
        (tag,) = _parse('tree(cond = "FirstUseEver")')
        assert tag.cond.value == "FirstUseEver"
        assert _error('tree(cond = "Sometimes")').kind is ErrorKind.INVALID_FORMAT

    def test_duplicate_node(self) -> None:
        error = _error("tree(node(checkbox), node(separator))")
        assert error.kind is ErrorKind.ALREADY_DEFINED
        assert error.span.column == 22

    def test_nested_trees(self) -> None:
        (tag,) = _parse("tree(node(tree(node(checkbox))))")
        assert isinstance(tag.node[0], TreeTag)
        assert isinstance(tag.node[0].node[0], CheckboxTag)

    def test_unknown_tree_parameter(self) -> None:
        assert _error('tree(style = "s")').kind is ErrorKind.UNEXPECTED_PARAM


class TestVars:
    def test_vars_with_content(self) -> None:
        (tag,) = _parse('vars(style = "compact", color = "palette", content(input, separator))')
        assert isinstance(tag, VarsTag)
        assert tag.style.value == "compact"
        assert tag.color.value == "palette"
        assert [child.kind for child in tag.content] == ["input", "separator"]

    def test_duplicate_content(self) -> None:
        assert _error("vars(content(checkbox), content(input))").kind is ErrorKind.ALREADY_DEFINED

    def test_duplicate_style(self) -> None:
        assert _error('vars(style = "a", style = "b")').kind is ErrorKind.ALREADY_DEFINED


# ###############
# Display shorthand
# ###############


class TestDisplay:
    def test_label_only(self) -> None:
        (tag,) = _parse('label = "Name"')
        assert isinstance(tag, DisplayTag)
        assert tag.label.value == "Name"
        assert tag.display is None

    def test_format_with_arguments(self) -> None:
        (tag,) = _parse('label = "Pos", display = "({}, {}) {}", x, y, "m"')
        assert tag.display.value == "({}, {}) {}"
        assert isinstance(tag.params[0], DisplayField)
        assert [p.name for p in tag.params[:2]] == ["x", "y"]
        assert isinstance(tag.params[2], DisplayLiteral)
        assert tag.params[2].value.value == "m"

    def test_display_first(self) -> None:
        (tag,) = _parse('display = "{}", count')
        assert tag.label is None
        assert tag.params[0].name == "count"

    def test_display_list_form(self) -> None:
        (tag,) = _parse('display(label = "Pos", display = "{}", x)')
        assert isinstance(tag, DisplayTag)
        assert tag.params[0].name == "x"

    def test_duplicate_label(self) -> None:
        error = _error('label = "a", label = "b"')
        assert error.kind is ErrorKind.ALREADY_DEFINED
        assert error.span.column == 14

    def test_trailing_tags_are_rejected(self) -> None:
        error = _error('label = "Name", checkbox(label = "x")')
        assert error.kind is ErrorKind.INVALID_FORMAT
        assert error.span.column == 17

    def test_key_value_after_arguments(self) -> None:
        assert _error('display = "{}", x, label = "late"').kind is ErrorKind.INVALID_FORMAT

    def test_label_must_be_string(self) -> None:
        assert _error("label = 3").kind is ErrorKind.INVALID_FORMAT

    def test_shorthand_after_tags(self) -> None:
        assert _error('checkbox, label = "x"').kind is ErrorKind.INVALID_FORMAT
