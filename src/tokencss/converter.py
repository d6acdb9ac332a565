"""
Token to CSS custom-property conversion.

``convert_token`` turns one token into its declaration:

    /* Primary brand color */
    --color-brand-primary: #0066cc;

Every function here is pure; configuration is passed in explicitly and the
token graph is never modified, so tokens can be converted in any order.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping, Sequence
from decimal import Decimal

from .config import ExporterConfig
from .ir import Collection, Token, TokenGroup, TokenType
from .naming import declared_name
from .values import FormatOptions, token_to_css

logger = logging.getLogger(__name__)

# Leading decimal number, as accepted by JavaScript's parseFloat
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# "1e-07" -> "1e-7"
_EXPONENT_PADDING = re.compile(r"e([+-])0*(\d)")


def _parse_leading_number(text: str) -> float | None:
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    number = float(match.group(1))
    if not math.isfinite(number):
        return None
    return number


def _canonical_number(number: float) -> str:
    """
    Shortest decimal spelling of a number, as JavaScript's ``String(number)``.

    Positional between 1e-6 and 1e21 ("700", "450.5", "0.000001"),
    exponent form outside it ("1e-7", "1.5e+21").
    """
    if number == 0:
        return "0"
    shortest = repr(number)
    if 1e-6 <= abs(number) < 1e21:
        text = format(Decimal(shortest), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    return _EXPONENT_PADDING.sub(r"e\1\2", shortest)


def normalize_font_weight(value: str) -> str:
    """
    Prefer a numeric literal for a rendered font weight.

    Examples:
        >>> normalize_font_weight('"700"')
        '700'
        >>> normalize_font_weight('"bold-custom"')
        '"bold-custom"'
    """
    number = _parse_leading_number(value.replace('"', ""))
    if number is None:
        logger.debug("Font weight %s is not numeric, keeping it as text", value)
        return value
    return _canonical_number(number)


def render_value(
    token: Token,
    token_map: Mapping[str, Token],
    token_groups: Sequence[TokenGroup],
    config: ExporterConfig,
    collections: Sequence[Collection] = (),
) -> str:
    """
    Render a token's value, turning references into ``var(--name)`` lookups.

    Args:
        token: Token whose value is rendered
        token_map: Token id -> token, for reference resolution
        token_groups: All token groups (needed to name referenced tokens)
        config: Exporter configuration
        collections: Design system collections

    Returns:
        CSS value text
    """

    def token_to_variable_ref(referenced: Token) -> str:
        return f"var(--{declared_name(referenced, token_groups, collections, config)})"

    options = FormatOptions(
        token_to_variable_ref=token_to_variable_ref,
        allow_references=config.use_references,
        decimals=config.color_precision,
        color_format=config.color_format,
        force_rem_unit=config.force_rem_unit,
        rem_base=config.rem_base,
    )
    value = token_to_css(token, token_map, options)

    if token.token_type == TokenType.FONT_WEIGHT and isinstance(value, str):
        value = normalize_font_weight(value)

    return value


def format_declaration(token: Token, name: str, value: str, config: ExporterConfig) -> str:
    """
    Format a custom-property declaration, with an optional description comment.

    Returns:
        ``{indent}--{name}: {value};``, preceded by ``{indent}/* description */``
        and a newline when descriptions are shown and the token has one.
    """
    indent = config.indent_string()
    declaration = f"{indent}--{name}: {value};"

    description = (token.description or "").strip()
    if config.show_descriptions and description:
        return f"{indent}/* {description} */\n{declaration}"
    return declaration


def convert_token(
    token: Token,
    token_map: Mapping[str, Token],
    token_groups: Sequence[TokenGroup],
    config: ExporterConfig,
    collections: Sequence[Collection] = (),
) -> str:
    """
    Convert a design token into its CSS custom-property declaration.

    Raises:
        MissingParentGroupError: If the token (or a token it references) has
            no parent group in token_groups
        UnresolvedPrefixError: If a token type has no name prefix
        UnsupportedValueError: If the value cannot be rendered for its type
        InvalidTokenNameError: If no identifier can be built from the name
    """
    name = declared_name(token, token_groups, collections, config)
    value = render_value(token, token_map, token_groups, config, collections)
    return format_declaration(token, name, value, config)
