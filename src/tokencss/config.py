"""
Exporter configuration.

The configuration is an already-resolved, read-only structure passed
explicitly to every conversion call. Option names mirror the exporter
settings (``customizeTokenPrefixes``, ``tokenNameStructure``, ...) through
camelCase aliases, so a settings mapping can be validated directly:

    config = ExporterConfig.model_validate({"tokenNameStructure": "NameOnly"})
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .ir import TokenType

# =============================================================================
# Enums
# =============================================================================


class TokenNameStructure(StrEnum):
    """Which parts of a token's ancestry end up in its name."""

    NAME_ONLY = "NameOnly"
    PATH_AND_NAME = "PathAndName"
    COLLECTION_PATH_AND_NAME = "CollectionPathAndName"


class StringCase(StrEnum):
    """Case style applied to generated names."""

    CAMEL = "camelCase"
    PASCAL = "PascalCase"
    KEBAB = "kebabCase"
    SNAKE = "snakeCase"
    CONSTANT = "constantCase"
    FLAT = "flatCase"


class ColorFormat(StrEnum):
    """
    Output format for colors.

    The ``smart*`` formats drop the alpha channel when the color is opaque.
    """

    HEX6 = "hex6"
    HEX8 = "hex8"
    HASH_HEX6 = "hashHex6"
    HASH_HEX8 = "hashHex8"
    SMART_HASH_HEX = "smartHashHex"
    SMART_HEX = "smartHex"
    RGB = "rgb"
    RGBA = "rgba"
    SMART_RGBA = "smartRgba"
    HSL = "hsl"
    HSLA = "hsla"
    SMART_HSLA = "smartHsla"


# =============================================================================
# Configuration
# =============================================================================


class ExporterConfig(BaseModel):
    """Resolved exporter settings."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    # Naming
    customize_token_prefixes: bool = Field(
        default=False, description="Use token_prefixes instead of the built-in defaults"
    )
    token_prefixes: dict[TokenType, str] = Field(
        default_factory=dict, description="Per-type prefix overrides"
    )
    token_name_style: StringCase = Field(default=StringCase.KEBAB, description="Name case style")
    token_name_structure: TokenNameStructure = Field(
        default=TokenNameStructure.PATH_AND_NAME,
        description="Which ancestry segments are part of the name",
    )
    global_name_prefix: str | None = Field(
        default=None, description="Prepended to every generated name"
    )

    # Values
    use_references: bool = Field(
        default=True, description="Render references as var() lookups instead of literals"
    )
    color_precision: int = Field(default=3, ge=0, description="Decimal places for numbers")
    color_format: ColorFormat = Field(default=ColorFormat.SMART_HASH_HEX)
    force_rem_unit: bool = Field(default=False, description="Convert px measures to rem")
    rem_base: float = Field(
        default=16.0, gt=0, allow_inf_nan=False, description="Pixels per rem"
    )

    # Output
    show_descriptions: bool = Field(
        default=True, description="Emit token descriptions as comments"
    )
    indent: int | str = Field(
        default=2, description="Number of spaces, or a literal indent string"
    )

    def indent_string(self) -> str:
        """Get the indentation prepended to every output line."""
        if isinstance(self.indent, int):
            return " " * max(self.indent, 0)
        return self.indent
