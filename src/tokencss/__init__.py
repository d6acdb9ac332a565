"""
tokencss - design tokens to CSS custom properties.

Converts tokens from a design-system token graph into ``--name: value;``
declarations, resolving cross-token references into ``var(--name)`` lookups.
"""

from .config import ColorFormat, ExporterConfig, StringCase, TokenNameStructure
from .converter import convert_token, format_declaration, render_value
from .defaults import DEFAULT_TOKEN_PREFIXES, LEGACY_TOKEN_PREFIXES
from .errors import (
    InvalidTokenNameError,
    MissingParentGroupError,
    TokenExportError,
    UnresolvedPrefixError,
    UnsupportedValueError,
)
from .ir import (
    BorderStyle,
    BorderValue,
    Collection,
    ColorValue,
    DimensionValue,
    GradientStop,
    GradientType,
    GradientValue,
    ShadowLayer,
    ShadowType,
    ShadowValue,
    StringValue,
    Token,
    TokenGroup,
    TokenType,
    TypographyValue,
    Unit,
)
from .naming import build_name, declared_name, resolve_prefix, strip_legacy_prefix

__version__ = "0.1.0"

__all__ = [
    # Conversion
    "convert_token",
    "render_value",
    "format_declaration",
    # Naming
    "resolve_prefix",
    "build_name",
    "strip_legacy_prefix",
    "declared_name",
    "DEFAULT_TOKEN_PREFIXES",
    "LEGACY_TOKEN_PREFIXES",
    # Configuration
    "ExporterConfig",
    "TokenNameStructure",
    "StringCase",
    "ColorFormat",
    # IR
    "Token",
    "TokenGroup",
    "Collection",
    "TokenType",
    "Unit",
    "ColorValue",
    "DimensionValue",
    "StringValue",
    "ShadowLayer",
    "ShadowType",
    "ShadowValue",
    "BorderStyle",
    "BorderValue",
    "GradientStop",
    "GradientType",
    "GradientValue",
    "TypographyValue",
    # Errors
    "TokenExportError",
    "InvalidTokenNameError",
    "MissingParentGroupError",
    "UnresolvedPrefixError",
    "UnsupportedValueError",
]
