# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed widget tags produced by the grammar parser.

Each parameterised tag declares a :class:`ParamTable` listing its required and
optional parameters together with the kind of value each one accepts. The
pydantic fields of the tag mirror that table one-to-one; parameter values are
stored verbatim as :class:`LiteralValue` and interpreted by the emitter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

from uiderive.diagnostics import Span
from uiderive.model.annotations import LiteralValue

# ###############
# Public Interface
# ###############


class ParamKind(Enum):
    """The kind of value a tag parameter accepts."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    IDENTIFIER = "identifier"
    PROVIDER = "provider"
    CHOICE = "choice"


@dataclass(frozen=True)
class ParamSpec:
    """A single declared parameter.

    Attributes:
        name: The parameter key as written in the annotation.
        kind: What values the key accepts.
        choices: The allowed spellings for ``CHOICE`` parameters.
    """

    name: str
    kind: ParamKind
    choices: tuple[str, ...] = ()


@dataclass(frozen=True)
class ParamTable:
    """The required and optional parameters of one tag variant."""

    required: tuple[ParamSpec, ...] = ()
    optional: tuple[ParamSpec, ...] = ()

    def lookup(self, name: str) -> ParamSpec | None:
        for spec in self.required + self.optional:
            if spec.name == name:
                return spec
        return None

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.required + self.optional)


TREE_CONDITIONS = ("Always", "Once", "FirstUseEver", "Appearing")
COLOR_PREVIEWS = ("Opaque", "HalfAlpha", "Alpha")
COLOR_EDIT_MODES = ("RGB", "HSV", "HEX")
COLOR_PICKER_MODES = ("HueBar", "HueWheel")
COLOR_FORMATS = ("Float", "U8")


class ParamTag(BaseModel):
    """Base class of every tag whose parameters come from a :class:`ParamTable`."""

    PARAMS: ClassVar[ParamTable] = ParamTable()

    span: Span

    def params(self) -> dict[str, LiteralValue]:
        """Return the declared parameters that were set, keyed by name."""
        values = {}
        for name in self.PARAMS.names:
            value = getattr(self, name)
            if value is not None:
                values[name] = value
        return values


class NoneTag(BaseModel):
    """Draw nothing for the field."""

    kind: Literal["none"] = "none"
    span: Span


class DisplayField(BaseModel):
    """A display argument naming a sibling field of the aggregate."""

    kind: Literal["field"] = "field"
    name: str
    span: Span


class DisplayLiteral(BaseModel):
    """A display argument embedded verbatim."""

    kind: Literal["literal"] = "literal"
    value: LiteralValue


DisplayArg = Annotated[DisplayField | DisplayLiteral, _Field(discriminator="kind")]


class DisplayTag(BaseModel):
    """Read-only ``label: value`` text.

    Without a format the field itself is shown. With a format, the format is
    filled with ``params`` in order.
    """

    kind: Literal["display"] = "display"
    span: Span
    label: LiteralValue | None = None
    display: LiteralValue | None = None
    params: list[DisplayArg] = _Field(default_factory=list)


def _p(name: str, kind: ParamKind, *choices: str) -> ParamSpec:
    return ParamSpec(name, kind, choices)


_S = ParamKind.STRING
_N = ParamKind.NUMBER
_I = ParamKind.INTEGER
_ID = ParamKind.IDENTIFIER
_PR = ParamKind.PROVIDER
_C = ParamKind.CHOICE


class CheckboxTag(ParamTag):
    kind: Literal["checkbox"] = "checkbox"
    PARAMS: ClassVar[ParamTable] = ParamTable(optional=(_p("label", _S), _p("catch", _ID), _p("map", _PR)))

    label: LiteralValue | None = None
    catch: LiteralValue | None = None
    map: LiteralValue | None = None


class InputTag(ParamTag):
    """Editable text or numeric input."""

    kind: Literal["input"] = "input"
    PARAMS: ClassVar[ParamTable] = ParamTable(
        optional=(
            _p("label", _S),
            _p("flags", _PR),
            _p("step", _N),
            _p("step_fast", _N),
            _p("precision", _I),
            _p("size", _PR),
            _p("catch", _ID),
            _p("map", _PR),
        )
    )

    label: LiteralValue | None = None
    flags: LiteralValue | None = None
    step: LiteralValue | None = None
    step_fast: LiteralValue | None = None
    precision: LiteralValue | None = None
    size: LiteralValue | None = None
    catch: LiteralValue | None = None
    map: LiteralValue | None = None


class DragTag(ParamTag):
    kind: Literal["drag"] = "drag"
    PARAMS: ClassVar[ParamTable] = ParamTable(
        optional=(
            _p("label", _S),
            _p("min", _N),
            _p("max", _N),
            _p("speed", _N),
            _p("power", _N),
            _p("format", _S),
            _p("catch", _ID),
            _p("map", _PR),
        )
    )

    label: LiteralValue | None = None
    min: LiteralValue | None = None
    max: LiteralValue | None = None
    speed: LiteralValue | None = None
    power: LiteralValue | None = None
    format: LiteralValue | None = None
    catch: LiteralValue | None = None
    map: LiteralValue | None = None


class SliderTag(ParamTag):
    """Bounded numeric slider. ``min`` and ``max`` are mandatory."""

    kind: Literal["slider"] = "slider"
    PARAMS: ClassVar[ParamTable] = ParamTable(
        required=(_p("min", _N), _p("max", _N)),
        optional=(_p("label", _S), _p("format", _S), _p("power", _N), _p("catch", _ID), _p("map", _PR)),
    )

    min: LiteralValue
    max: LiteralValue
    label: LiteralValue | None = None
    format: LiteralValue | None = None
    power: LiteralValue | None = None
    catch: LiteralValue | None = None
    map: LiteralValue | None = None


class ButtonTag(ParamTag):
    kind: Literal["button"] = "button"
    PARAMS: ClassVar[ParamTable] = ParamTable(
        required=(_p("label", _S),),
        optional=(_p("size", _PR), _p("catch", _ID)),
    )

    label: LiteralValue
    size: LiteralValue | None = None
    catch: LiteralValue | None = None


class NestedTag(ParamTag):
    """Draw a field whose type is itself a derived aggregate."""

    kind: Literal["nested"] = "nested"
    PARAMS: ClassVar[ParamTable] = ParamTable(optional=(_p("catch", _ID),))

    catch: LiteralValue | None = None


class ProgressTag(ParamTag):
    kind: Literal["progress"] = "progress"
    PARAMS: ClassVar[ParamTable] = ParamTable(optional=(_p("overlay", _S), _p("size", _PR)))

    overlay: LiteralValue | None = None
    size: LiteralValue | None = None


class ImageTag(ParamTag):
    kind: Literal["image"] = "image"
    PARAMS: ClassVar[ParamTable] = ParamTable(
        required=(_p("size", _PR),),
        optional=(_p("border", _PR), _p("tint", _PR), _p("uv0", _PR), _p("uv1", _PR)),
    )

    size: LiteralValue
    border: LiteralValue | None = None
    tint: LiteralValue | None = None
    uv0: LiteralValue | None = None
    uv1: LiteralValue | None = None


class ImageButtonTag(ParamTag):
    kind: Literal["image_button"] = "image_button"
    PARAMS: ClassVar[ParamTable] = ParamTable(
        required=(_p("size", _PR),),
        optional=(
            _p("background", _PR),
            _p("frame_padding", _I),
            _p("tint", _PR),
            _p("uv0", _PR),
            _p("uv1", _PR),
        ),
    )

    size: LiteralValue
    background: LiteralValue | None = None
    frame_padding: LiteralValue | None = None
    tint: LiteralValue | None = None
    uv0: LiteralValue | None = None
    uv1: LiteralValue | None = None


class ColorEditTag(ParamTag):
    kind: Literal["color_edit"] = "color_edit"
    PARAMS: ClassVar[ParamTable] = ParamTable(
        optional=(
            _p("label", _S),
            _p("flags", _PR),
            _p("preview", _C, *COLOR_PREVIEWS),
            _p("mode", _C, *COLOR_EDIT_MODES),
            _p("format", _C, *COLOR_FORMATS),
            _p("catch", _ID),
            _p("map", _PR),
        )
    )

    label: LiteralValue | None = None
    flags: LiteralValue | None = None
    preview: LiteralValue | None = None
    mode: LiteralValue | None = None
    format: LiteralValue | None = None
    catch: LiteralValue | None = None
    map: LiteralValue | None = None


class ColorPickerTag(ParamTag):
    kind: Literal["color_picker"] = "color_picker"
    PARAMS: ClassVar[ParamTable] = ParamTable(
        optional=(
            _p("label", _S),
            _p("flags", _PR),
            _p("preview", _C, *COLOR_PREVIEWS),
            _p("mode", _C, *COLOR_PICKER_MODES),
            _p("format", _C, *COLOR_FORMATS),
            _p("catch", _ID),
            _p("map", _PR),
        )
    )

    label: LiteralValue | None = None
    flags: LiteralValue | None = None
    preview: LiteralValue | None = None
    mode: LiteralValue | None = None
    format: LiteralValue | None = None
    catch: LiteralValue | None = None
    map: LiteralValue | None = None


class ColorButtonTag(ParamTag):
    kind: Literal["color_button"] = "color_button"
    PARAMS: ClassVar[ParamTable] = ParamTable(
        optional=(
            _p("label", _S),
            _p("flags", _PR),
            _p("preview", _C, *COLOR_PREVIEWS),
            _p("size", _PR),
            _p("catch", _ID),
            _p("map", _PR),
        )
    )

    label: LiteralValue | None = None
    flags: LiteralValue | None = None
    preview: LiteralValue | None = None
    size: LiteralValue | None = None
    catch: LiteralValue | None = None
    map: LiteralValue | None = None


class TextTag(ParamTag):
    kind: Literal["text"] = "text"
    PARAMS: ClassVar[ParamTable] = ParamTable(required=(_p("lit", _S),))

    lit: LiteralValue


class TextWrapTag(ParamTag):
    kind: Literal["text_wrap"] = "text_wrap"
    PARAMS: ClassVar[ParamTable] = ParamTable(required=(_p("lit", _S),))

    lit: LiteralValue


class BulletTag(ParamTag):
    """A bullet point, optionally followed by text on the same line."""

    kind: Literal["bullet"] = "bullet"
    PARAMS: ClassVar[ParamTable] = ParamTable(optional=(_p("text", _S),))

    text: LiteralValue | None = None


class BulletParentTag(BaseModel):
    """A bare bullet that prefixes the single widget following it."""

    kind: Literal["bullet_parent"] = "bullet_parent"
    span: Span


class SeparatorTag(ParamTag):
    kind: Literal["separator"] = "separator"


class NewLineTag(ParamTag):
    kind: Literal["new_line"] = "new_line"


class TreeTag(ParamTag):
    """A collapsible tree node wrapping the widgets listed in ``node(...)``."""

    kind: Literal["tree"] = "tree"
    PARAMS: ClassVar[ParamTable] = ParamTable(
        optional=(_p("label", _S), _p("flags", _PR), _p("cond", _C, *TREE_CONDITIONS))
    )

    label: LiteralValue | None = None
    flags: LiteralValue | None = None
    cond: LiteralValue | None = None
    node: list[Tag] | None = None


class VarsTag(ParamTag):
    """Widgets in ``content(...)`` drawn with pushed style and color variables."""

    kind: Literal["vars"] = "vars"
    PARAMS: ClassVar[ParamTable] = ParamTable(optional=(_p("style", _PR), _p("color", _PR)))

    style: LiteralValue | None = None
    color: LiteralValue | None = None
    content: list[Tag] | None = None


# A single parsed widget tag. The `kind` discriminator keeps the union unambiguous.
Tag = Annotated[
    NoneTag
    | DisplayTag
    | CheckboxTag
    | InputTag
    | DragTag
    | SliderTag
    | ButtonTag
    | NestedTag
    | ProgressTag
    | ImageTag
    | ImageButtonTag
    | ColorEditTag
    | ColorPickerTag
    | ColorButtonTag
    | TextTag
    | TextWrapTag
    | BulletTag
    | BulletParentTag
    | SeparatorTag
    | NewLineTag
    | TreeTag
    | VarsTag,
    _Field(discriminator="kind"),
]

# The ordered tags of one field.
TagTree = list[Tag]

TreeTag.model_rebuild()
VarsTag.model_rebuild()
