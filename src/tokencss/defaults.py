"""
Built-in prefix tables.
"""

from __future__ import annotations

from .ir import TokenType

# Prefix prepended to a token's name when custom prefixes are disabled
DEFAULT_TOKEN_PREFIXES: dict[TokenType, str] = {
    TokenType.COLOR: "color",
    TokenType.BORDER: "border",
    TokenType.GRADIENT: "gradient",
    TokenType.SHADOW: "shadow",
    TokenType.DIMENSION: "dimension",
    TokenType.DURATION: "duration",
    TokenType.SIZE: "size",
    TokenType.SPACE: "space",
    TokenType.OPACITY: "opacity",
    TokenType.FONT_SIZE: "font-size",
    TokenType.LINE_HEIGHT: "line-height",
    TokenType.LETTER_SPACING: "letter-spacing",
    TokenType.PARAGRAPH_SPACING: "paragraph-spacing",
    TokenType.BORDER_WIDTH: "border-width",
    TokenType.RADIUS: "border-radius",
    TokenType.BLUR: "blur",
    TokenType.Z_INDEX: "z-index",
    TokenType.FONT_FAMILY: "font-family",
    TokenType.FONT_WEIGHT: "font-weight",
    TokenType.TEXT_CASE: "text-case",
    TokenType.TEXT_DECORATION: "text-decoration",
    TokenType.VISIBILITY: "visibility",
    TokenType.STRING: "string",
    TokenType.PRODUCT_COPY: "product-copy",
    TokenType.TYPOGRAPHY: "typography",
}

# Historical type prefixes removed from the start of final names.
# Shared by declared names and var() references so the two always agree.
LEGACY_TOKEN_PREFIXES: dict[TokenType, str] = {
    TokenType.BORDER_WIDTH: "border-width-",
    TokenType.FONT_SIZE: "font-size-",
    TokenType.LETTER_SPACING: "letter-spacing-",
    TokenType.LINE_HEIGHT: "line-height-",
    TokenType.RADIUS: "border-radius-",
    TokenType.SIZE: "sizing-",
    TokenType.SPACE: "spacing-",
    TokenType.FONT_FAMILY: "font-family-",
    TokenType.FONT_WEIGHT: "font-weight-",
}
