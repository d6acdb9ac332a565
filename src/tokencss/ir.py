"""
Token graph IR types.

Describes the input contract consumed by the exporter: tokens, the groups
that give them ancestry, and the collections they may belong to. All models
are frozen; the exporter never mutates its inputs.

Field names are snake_case. camelCase aliases are accepted so that payloads
exported from design tools (``tokenType``, ``parentGroupId``, ...) validate
without remapping.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# =============================================================================
# Enums
# =============================================================================


class TokenType(StrEnum):
    """Kinds of design token."""

    COLOR = "color"
    BORDER = "border"
    GRADIENT = "gradient"
    SHADOW = "shadow"
    DIMENSION = "dimension"
    DURATION = "duration"
    SIZE = "size"
    SPACE = "space"
    OPACITY = "opacity"
    FONT_SIZE = "fontSize"
    LINE_HEIGHT = "lineHeight"
    LETTER_SPACING = "letterSpacing"
    PARAGRAPH_SPACING = "paragraphSpacing"
    BORDER_WIDTH = "borderWidth"
    RADIUS = "radius"
    BLUR = "blur"
    Z_INDEX = "zIndex"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    TEXT_CASE = "textCase"
    TEXT_DECORATION = "textDecoration"
    VISIBILITY = "visibility"
    STRING = "string"
    PRODUCT_COPY = "productCopy"
    TYPOGRAPHY = "typography"


class Unit(StrEnum):
    """Units a dimension measure can carry."""

    PIXELS = "px"
    REM = "rem"
    EM = "em"
    PERCENT = "percent"
    MS = "ms"
    RAW = "raw"


class BorderStyle(StrEnum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    GROOVE = "groove"


class ShadowType(StrEnum):
    DROP = "drop"
    INNER = "inner"


class GradientType(StrEnum):
    LINEAR = "linear"
    RADIAL = "radial"


_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


# =============================================================================
# Token values
# =============================================================================


class ColorValue(BaseModel):
    """
    Solid color.

    Example:
        ColorValue(r=0, g=102, b=204, opacity=0.5)
    """

    model_config = _MODEL_CONFIG

    kind: Literal["color"] = "color"
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    opacity: float = Field(default=1.0, ge=0.0, le=1.0, allow_inf_nan=False)
    referenced_token_id: str | None = None


class DimensionValue(BaseModel):
    """
    Measure with a unit.

    Example:
        DimensionValue(measure=8, unit=Unit.PIXELS)
    """

    model_config = _MODEL_CONFIG

    kind: Literal["dimension"] = "dimension"
    measure: float = Field(allow_inf_nan=False)
    unit: Unit = Unit.PIXELS
    referenced_token_id: str | None = None


class StringValue(BaseModel):
    """Free text (font families, weights, copy, text case, ...)."""

    model_config = _MODEL_CONFIG

    kind: Literal["string"] = "string"
    text: str
    referenced_token_id: str | None = None


class ShadowLayer(BaseModel):
    model_config = _MODEL_CONFIG

    color: ColorValue
    x: DimensionValue = DimensionValue(measure=0)
    y: DimensionValue = DimensionValue(measure=0)
    radius: DimensionValue = DimensionValue(measure=0)
    spread: DimensionValue = DimensionValue(measure=0)
    type: ShadowType = ShadowType.DROP


class ShadowValue(BaseModel):
    """One or more shadow layers, outermost first."""

    model_config = _MODEL_CONFIG

    kind: Literal["shadow"] = "shadow"
    layers: list[ShadowLayer] = Field(min_length=1)
    referenced_token_id: str | None = None


class BorderValue(BaseModel):
    model_config = _MODEL_CONFIG

    kind: Literal["border"] = "border"
    width: DimensionValue
    style: BorderStyle = BorderStyle.SOLID
    color: ColorValue
    referenced_token_id: str | None = None


class GradientStop(BaseModel):
    model_config = _MODEL_CONFIG

    position: float = Field(
        ge=0.0, le=1.0, allow_inf_nan=False, description="Stop position (0-1)"
    )
    color: ColorValue


class GradientValue(BaseModel):
    """
    Linear or radial gradient.

    Example:
        GradientValue(
            type=GradientType.LINEAR,
            angle=90,
            stops=[
                GradientStop(position=0, color=ColorValue(r=255, g=255, b=255)),
                GradientStop(position=1, color=ColorValue(r=0, g=0, b=0)),
            ],
        )
    """

    model_config = _MODEL_CONFIG

    kind: Literal["gradient"] = "gradient"
    type: GradientType = GradientType.LINEAR
    angle: float = Field(
        default=180.0, allow_inf_nan=False, description="Angle in degrees (linear only)"
    )
    stops: list[GradientStop] = Field(min_length=2)
    referenced_token_id: str | None = None


class TypographyValue(BaseModel):
    """Composite text style, rendered as the CSS ``font`` shorthand."""

    model_config = _MODEL_CONFIG

    kind: Literal["typography"] = "typography"
    font_family: StringValue
    font_weight: StringValue
    font_size: DimensionValue
    line_height: DimensionValue | None = None
    italic: bool = False
    referenced_token_id: str | None = None


TokenValue = Annotated[
    ColorValue
    | DimensionValue
    | StringValue
    | ShadowValue
    | BorderValue
    | GradientValue
    | TypographyValue,
    Field(discriminator="kind"),
]


# =============================================================================
# Token graph
# =============================================================================


class Token(BaseModel):
    """
    A named, typed design value.

    Example:
        Token(
            id="t-space-small",
            name="small",
            token_type=TokenType.SPACE,
            value=DimensionValue(measure=8),
            parent_group_id="g-space",
        )
    """

    model_config = _MODEL_CONFIG

    id: str
    name: str
    token_type: TokenType
    value: TokenValue
    parent_group_id: str
    collection_id: str | None = None
    description: str | None = None


class TokenGroup(BaseModel):
    """
    Node in the token hierarchy.

    ``path`` lists ancestor group names from the top of the tree down to
    (but excluding) this group; the root group itself is never named.
    """

    model_config = _MODEL_CONFIG

    id: str
    name: str
    path: list[str] = Field(default_factory=list)
    is_root: bool = False


class Collection(BaseModel):
    """Named partition of tokens, addressed by persistent id."""

    model_config = _MODEL_CONFIG

    id: str
    persistent_id: str
    name: str
