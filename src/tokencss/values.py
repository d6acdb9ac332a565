"""
CSS value formatting for token values.

Turns a token's value into the text that follows ``--name:`` in a
declaration. References to other tokens are handed to a caller-supplied
callback, which decides how a referenced token is spelled (normally a
``var(--…)`` lookup); this module never recurses into the referenced
token's own value.
"""

from __future__ import annotations

import colorsys
import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from .config import ColorFormat
from .errors import UnsupportedValueError
from .ir import (
    BorderValue,
    ColorValue,
    DimensionValue,
    GradientType,
    GradientValue,
    ShadowType,
    ShadowValue,
    StringValue,
    Token,
    TokenType,
    TypographyValue,
    Unit,
)

logger = logging.getLogger(__name__)

# Token types whose value is a DimensionValue
DIMENSION_TOKEN_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.DIMENSION,
        TokenType.DURATION,
        TokenType.SIZE,
        TokenType.SPACE,
        TokenType.FONT_SIZE,
        TokenType.LINE_HEIGHT,
        TokenType.LETTER_SPACING,
        TokenType.PARAGRAPH_SPACING,
        TokenType.BORDER_WIDTH,
        TokenType.RADIUS,
        TokenType.BLUR,
    }
)

# Token types whose DimensionValue is a bare number; the unit is ignored
UNITLESS_TOKEN_TYPES: frozenset[TokenType] = frozenset({TokenType.OPACITY, TokenType.Z_INDEX})

# Token types whose value is a StringValue rendered as a quoted CSS string
QUOTED_STRING_TOKEN_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.FONT_FAMILY,
        TokenType.FONT_WEIGHT,
        TokenType.STRING,
        TokenType.PRODUCT_COPY,
    }
)

# Token types whose value is a StringValue rendered as a bare CSS keyword
KEYWORD_TOKEN_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.TEXT_CASE,
        TokenType.TEXT_DECORATION,
        TokenType.VISIBILITY,
    }
)

_UNIT_SUFFIXES: dict[Unit, str] = {
    Unit.PIXELS: "px",
    Unit.REM: "rem",
    Unit.EM: "em",
    Unit.PERCENT: "%",
    Unit.MS: "ms",
    Unit.RAW: "",
}


@dataclass(frozen=True)
class FormatOptions:
    """Settings for value formatting."""

    token_to_variable_ref: Callable[[Token], str]
    allow_references: bool = True
    decimals: int = 3
    color_format: ColorFormat = ColorFormat.SMART_HASH_HEX
    force_rem_unit: bool = False
    rem_base: float = 16.0


# =============================================================================
# Scalars
# =============================================================================


def format_number(value: float, decimals: int) -> str:
    """
    Format a number rounded to ``decimals`` places, without trailing zeros.

    Examples:
        >>> format_number(0.5, 3)
        '0.5'
        >>> format_number(8.0, 3)
        '8'
        >>> format_number(0.33333, 2)
        '0.33'

    Raises:
        UnsupportedValueError: If the value is infinite or NaN
    """
    if not math.isfinite(value):
        raise UnsupportedValueError(f"Cannot render non-finite number {value!r}")
    rounded = round(value, decimals)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{decimals}f}".rstrip("0").rstrip(".")


def format_color(color: ColorValue, color_format: ColorFormat, decimals: int) -> str:
    """Format a color literal in the requested format."""
    opaque = color.opacity >= 1.0
    rgb_hex = f"{color.r:02x}{color.g:02x}{color.b:02x}"
    alpha_hex = f"{round(color.opacity * 255):02x}"
    alpha = format_number(color.opacity, decimals)

    if color_format == ColorFormat.HEX6:
        return rgb_hex
    if color_format == ColorFormat.HEX8:
        return rgb_hex + alpha_hex
    if color_format == ColorFormat.HASH_HEX6:
        return f"#{rgb_hex}"
    if color_format == ColorFormat.HASH_HEX8:
        return f"#{rgb_hex}{alpha_hex}"
    if color_format == ColorFormat.SMART_HASH_HEX:
        return f"#{rgb_hex}" if opaque else f"#{rgb_hex}{alpha_hex}"
    if color_format == ColorFormat.SMART_HEX:
        return rgb_hex if opaque else rgb_hex + alpha_hex

    if color_format in (ColorFormat.RGB, ColorFormat.RGBA, ColorFormat.SMART_RGBA):
        channels = f"{color.r}, {color.g}, {color.b}"
        if color_format == ColorFormat.RGB or (color_format == ColorFormat.SMART_RGBA and opaque):
            return f"rgb({channels})"
        return f"rgba({channels}, {alpha})"

    # HSL family
    hue, lightness, saturation = colorsys.rgb_to_hls(color.r / 255, color.g / 255, color.b / 255)
    components = ", ".join(
        [
            format_number(hue * 360, decimals),
            f"{format_number(saturation * 100, decimals)}%",
            f"{format_number(lightness * 100, decimals)}%",
        ]
    )
    if color_format == ColorFormat.HSL or (color_format == ColorFormat.SMART_HSLA and opaque):
        return f"hsl({components})"
    return f"hsla({components}, {alpha})"


def format_dimension(
    dimension: DimensionValue,
    decimals: int,
    *,
    force_rem_unit: bool = False,
    rem_base: float = 16.0,
) -> str:
    """
    Format a measure with its unit suffix.

    Pixel measures become rem when ``force_rem_unit`` is set.
    """
    measure = dimension.measure
    unit = dimension.unit
    if force_rem_unit and unit == Unit.PIXELS:
        measure = measure / rem_base
        unit = Unit.REM
    return f"{format_number(measure, decimals)}{_UNIT_SUFFIXES[unit]}"


def quote_string(text: str) -> str:
    """Wrap text in double quotes, escaping embedded quotes and backslashes."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


# =============================================================================
# Reference-aware rendering
# =============================================================================


class _Renderer:
    """Renders one token value, resolving references through the options callback."""

    def __init__(self, token_map: Mapping[str, Token], options: FormatOptions):
        self.token_map = token_map
        self.options = options

    def reference(self, referenced_token_id: str | None) -> str | None:
        if not self.options.allow_references or not referenced_token_id:
            return None
        referenced = self.token_map.get(referenced_token_id)
        if referenced is None:
            logger.debug("Referenced token '%s' not found, rendering literal", referenced_token_id)
            return None
        return self.options.token_to_variable_ref(referenced)

    def color(self, color: ColorValue) -> str:
        ref = self.reference(color.referenced_token_id)
        if ref is not None:
            return ref
        return format_color(color, self.options.color_format, self.options.decimals)

    def dimension(self, dimension: DimensionValue) -> str:
        ref = self.reference(dimension.referenced_token_id)
        if ref is not None:
            return ref
        return format_dimension(
            dimension,
            self.options.decimals,
            force_rem_unit=self.options.force_rem_unit,
            rem_base=self.options.rem_base,
        )

    def number(self, dimension: DimensionValue) -> str:
        ref = self.reference(dimension.referenced_token_id)
        if ref is not None:
            return ref
        return format_number(dimension.measure, self.options.decimals)

    def string(self, value: StringValue, *, quoted: bool) -> str:
        ref = self.reference(value.referenced_token_id)
        if ref is not None:
            return ref
        return quote_string(value.text) if quoted else value.text

    def shadow(self, shadow: ShadowValue) -> str:
        ref = self.reference(shadow.referenced_token_id)
        if ref is not None:
            return ref
        layers: list[str] = []
        for layer in shadow.layers:
            parts = [
                self.dimension(layer.x),
                self.dimension(layer.y),
                self.dimension(layer.radius),
                self.dimension(layer.spread),
                self.color(layer.color),
            ]
            if layer.type == ShadowType.INNER:
                parts.insert(0, "inset")
            layers.append(" ".join(parts))
        return ", ".join(layers)

    def border(self, border: BorderValue) -> str:
        ref = self.reference(border.referenced_token_id)
        if ref is not None:
            return ref
        return f"{self.dimension(border.width)} {border.style} {self.color(border.color)}"

    def gradient(self, gradient: GradientValue) -> str:
        ref = self.reference(gradient.referenced_token_id)
        if ref is not None:
            return ref
        stops = ", ".join(
            f"{self.color(stop.color)} {format_number(stop.position * 100, self.options.decimals)}%"
            for stop in gradient.stops
        )
        if gradient.type == GradientType.RADIAL:
            return f"radial-gradient(circle, {stops})"
        angle = format_number(gradient.angle, self.options.decimals)
        return f"linear-gradient({angle}deg, {stops})"

    def typography(self, typography: TypographyValue) -> str:
        ref = self.reference(typography.referenced_token_id)
        if ref is not None:
            return ref
        parts: list[str] = []
        if typography.italic:
            parts.append("italic")
        parts.append(self.string(typography.font_weight, quoted=False))
        size = self.dimension(typography.font_size)
        if typography.line_height is not None:
            size = f"{size}/{self.dimension(typography.line_height)}"
        parts.append(size)
        parts.append(self.string(typography.font_family, quoted=True))
        return " ".join(parts)


def token_to_css(token: Token, token_map: Mapping[str, Token], options: FormatOptions) -> str:
    """
    Render a token's value as CSS text.

    Args:
        token: Token to render
        token_map: Token id -> token, used to resolve references
        options: Formatting settings and the reference callback

    Returns:
        CSS value text

    Raises:
        UnsupportedValueError: If the value kind does not fit the token type
    """
    renderer = _Renderer(token_map, options)
    value = token.value
    token_type = token.token_type

    if token_type == TokenType.COLOR and isinstance(value, ColorValue):
        return renderer.color(value)
    if token_type in DIMENSION_TOKEN_TYPES and isinstance(value, DimensionValue):
        return renderer.dimension(value)
    if token_type in UNITLESS_TOKEN_TYPES and isinstance(value, DimensionValue):
        return renderer.number(value)
    if token_type in QUOTED_STRING_TOKEN_TYPES and isinstance(value, StringValue):
        return renderer.string(value, quoted=True)
    if token_type in KEYWORD_TOKEN_TYPES and isinstance(value, StringValue):
        return renderer.string(value, quoted=False)
    if token_type == TokenType.SHADOW and isinstance(value, ShadowValue):
        return renderer.shadow(value)
    if token_type == TokenType.BORDER and isinstance(value, BorderValue):
        return renderer.border(value)
    if token_type == TokenType.GRADIENT and isinstance(value, GradientValue):
        return renderer.gradient(value)
    if token_type == TokenType.TYPOGRAPHY and isinstance(value, TypographyValue):
        return renderer.typography(value)

    raise UnsupportedValueError(
        f"Token '{token.id}' of type '{token_type}' has unsupported value kind '{value.kind}'"
    )
