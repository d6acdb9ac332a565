"""Tests for custom-property name building and legacy prefix stripping."""

from __future__ import annotations

import logging

import pytest

from tokencss.config import ExporterConfig, StringCase, TokenNameStructure
from tokencss.defaults import DEFAULT_TOKEN_PREFIXES, LEGACY_TOKEN_PREFIXES
from tokencss.ir import ColorValue, DimensionValue, Token, TokenType

# =============================================================================
# Casing
# =============================================================================


class TestCasing:
    def test_split_words_on_punctuation_and_humps(self):
        from tokencss.casing import split_words

        assert split_words("Brand / Primary Color") == ["Brand", "Primary", "Color"]
        assert split_words("fontSize-2xl") == ["font", "Size", "2xl"]
        assert split_words("HTMLParser") == ["HTML", "Parser"]

    def test_split_words_drops_accents(self):
        from tokencss.casing import split_words

        assert split_words("Café Crème") == ["Cafe", "Creme"]

    @pytest.mark.parametrize(
        "style,expected",
        [
            (StringCase.KEBAB, "color-brand-primary"),
            (StringCase.SNAKE, "color_brand_primary"),
            (StringCase.CONSTANT, "COLOR_BRAND_PRIMARY"),
            (StringCase.FLAT, "colorbrandprimary"),
            (StringCase.CAMEL, "colorBrandPrimary"),
            (StringCase.PASCAL, "ColorBrandPrimary"),
        ],
    )
    def test_to_case(self, style, expected):
        from tokencss.casing import to_case

        assert to_case(["color", "Brand", "PRIMARY"], style) == expected

    def test_leading_digit_is_prefixed(self):
        from tokencss.casing import code_safe_variable_name

        assert code_safe_variable_name(["2xl"], StringCase.KEBAB) == "_2xl"
        assert code_safe_variable_name(["space", "2xl"], StringCase.KEBAB) == "space-2xl"

    def test_only_identifier_characters(self):
        from tokencss.casing import code_safe_variable_name

        name = code_safe_variable_name(["color", "Brand (old)!", "50%"], StringCase.KEBAB)
        assert name == "color-brand-old-50"

    def test_symbol_only_fragment_spelled_by_code_points(self):
        from tokencss.casing import code_safe_variable_name

        assert code_safe_variable_name(["色"], StringCase.KEBAB) == "u8272"
        assert code_safe_variable_name(["color", "★ star"], StringCase.KEBAB) == "color-star"
        assert code_safe_variable_name(["color", "色 彩"], StringCase.KEBAB) == "color-u82725f69"

    def test_empty_fragments_raise(self):
        from tokencss.casing import code_safe_variable_name
        from tokencss.errors import InvalidTokenNameError

        with pytest.raises(InvalidTokenNameError):
            code_safe_variable_name(["", "  "], StringCase.KEBAB)


# =============================================================================
# Prefix resolution
# =============================================================================


class TestResolvePrefix:
    def test_defaults_when_not_customized(self):
        from tokencss.naming import resolve_prefix

        config = ExporterConfig(token_prefixes={TokenType.COLOR: "ignored"})
        for token_type in TokenType:
            assert resolve_prefix(token_type, config) == DEFAULT_TOKEN_PREFIXES[token_type]

    def test_custom_prefixes_override_every_type(self):
        from tokencss.naming import resolve_prefix

        prefixes = {token_type: f"p-{token_type.value}" for token_type in TokenType}
        config = ExporterConfig(customize_token_prefixes=True, token_prefixes=prefixes)
        for token_type in TokenType:
            assert resolve_prefix(token_type, config) == prefixes[token_type]

    def test_defaults_cover_every_type(self):
        assert set(DEFAULT_TOKEN_PREFIXES) == set(TokenType)

    def test_missing_custom_prefix_raises(self):
        from tokencss.errors import UnresolvedPrefixError
        from tokencss.naming import resolve_prefix

        config = ExporterConfig(
            customize_token_prefixes=True, token_prefixes={TokenType.COLOR: "c"}
        )
        with pytest.raises(UnresolvedPrefixError) as exc_info:
            resolve_prefix(TokenType.SPACE, config)
        assert exc_info.value.token_type == TokenType.SPACE
        assert exc_info.value.custom is True


# =============================================================================
# Name building
# =============================================================================


class TestBuildName:
    def test_path_and_name(self, brand_color, token_groups):
        from tokencss.naming import build_name

        name = build_name(brand_color, token_groups, [], ExporterConfig())
        assert name == "color-brand-primary-blue"

    def test_name_only_omits_ancestry(self, brand_color, token_groups, name_only_config):
        from tokencss.naming import build_name

        assert build_name(brand_color, token_groups, [], name_only_config) == "color-blue"

    def test_root_parent_contributes_nothing(self, space_small, token_groups):
        from tokencss.naming import build_name

        assert build_name(space_small, token_groups, [], ExporterConfig()) == "space-small"

    def test_global_prefix(self, brand_color, token_groups):
        from tokencss.naming import build_name

        config = ExporterConfig(global_name_prefix="ds")
        assert build_name(brand_color, token_groups, [], config) == "ds-color-brand-primary-blue"

    def test_empty_global_prefix_is_skipped(self, brand_color, token_groups):
        from tokencss.naming import build_name

        config = ExporterConfig(global_name_prefix="")
        assert build_name(brand_color, token_groups, [], config) == "color-brand-primary-blue"

    def test_custom_prefix(self, brand_color, token_groups):
        from tokencss.naming import build_name

        config = ExporterConfig(
            customize_token_prefixes=True, token_prefixes={TokenType.COLOR: "clr"}
        )
        assert build_name(brand_color, token_groups, [], config) == "clr-brand-primary-blue"

    def test_empty_custom_prefix_is_skipped(self, brand_color, token_groups):
        from tokencss.naming import build_name

        config = ExporterConfig(
            customize_token_prefixes=True, token_prefixes={TokenType.COLOR: ""}
        )
        assert build_name(brand_color, token_groups, [], config) == "brand-primary-blue"

    def test_collection_name_included(self, brand_color, token_groups, collections):
        from tokencss.naming import build_name

        token = brand_color.model_copy(update={"collection_id": "col-core"})
        config = ExporterConfig(token_name_structure=TokenNameStructure.COLLECTION_PATH_AND_NAME)
        assert build_name(token, token_groups, collections, config) == (
            "color-core-brand-primary-blue"
        )

    def test_collection_ignored_for_other_structures(self, brand_color, token_groups, collections):
        from tokencss.naming import build_name

        token = brand_color.model_copy(update={"collection_id": "col-core"})
        assert build_name(token, token_groups, collections, ExporterConfig()) == (
            "color-brand-primary-blue"
        )

    def test_unknown_collection_falls_back_to_id(self, brand_color, token_groups, collections):
        from tokencss.naming import build_name

        token = brand_color.model_copy(update={"collection_id": "missing-id"})
        config = ExporterConfig(token_name_structure=TokenNameStructure.COLLECTION_PATH_AND_NAME)
        name = build_name(token, token_groups, collections, config)
        assert "missing-id" in name
        assert name == "color-missing-id-brand-primary-blue"

    def test_unknown_collection_is_logged(self, brand_color, token_groups, collections, caplog):
        from tokencss.naming import build_name

        token = brand_color.model_copy(update={"collection_id": "missing-id"})
        config = ExporterConfig(token_name_structure=TokenNameStructure.COLLECTION_PATH_AND_NAME)
        with caplog.at_level(logging.DEBUG, logger="tokencss"):
            build_name(token, token_groups, collections, config)
        assert any(
            "missing-id" in record.getMessage() and record.levelno == logging.DEBUG
            for record in caplog.records
        )

    def test_non_ascii_name_with_empty_prefix(self, token_groups):
        from tokencss.naming import build_name

        token = Token(
            id="t-hue",
            name="色",
            token_type=TokenType.COLOR,
            value=ColorValue(r=0, g=0, b=0),
            parent_group_id="g-root",
        )
        config = ExporterConfig(
            customize_token_prefixes=True, token_prefixes={TokenType.COLOR: ""}
        )
        assert build_name(token, token_groups, [], config) == "u8272"

    def test_blank_name_with_empty_prefix_raises(self, token_groups):
        from tokencss.errors import InvalidTokenNameError
        from tokencss.naming import build_name

        token = Token(
            id="t-blank",
            name="   ",
            token_type=TokenType.COLOR,
            value=ColorValue(r=0, g=0, b=0),
            parent_group_id="g-root",
        )
        config = ExporterConfig(
            customize_token_prefixes=True, token_prefixes={TokenType.COLOR: ""}
        )
        with pytest.raises(InvalidTokenNameError):
            build_name(token, token_groups, [], config)

    def test_camel_case_style(self, brand_color, token_groups):
        from tokencss.naming import build_name

        config = ExporterConfig(token_name_style=StringCase.CAMEL)
        assert build_name(brand_color, token_groups, [], config) == "colorBrandPrimaryBlue"

    def test_missing_parent_group_raises(self, brand_color):
        from tokencss.errors import MissingParentGroupError
        from tokencss.naming import build_name

        with pytest.raises(MissingParentGroupError) as exc_info:
            build_name(brand_color, [], [], ExporterConfig())
        assert exc_info.value.token_id == "t-brand"
        assert exc_info.value.parent_group_id == "g-primary"

    def test_deterministic(self, brand_color, token_groups, collections):
        from tokencss.naming import build_name

        config = ExporterConfig()
        first = build_name(brand_color, token_groups, collections, config)
        assert build_name(brand_color, token_groups, collections, config) == first


# =============================================================================
# Legacy prefix stripping
# =============================================================================


class TestStripLegacyPrefix:
    @pytest.mark.parametrize("token_type,prefix", list(LEGACY_TOKEN_PREFIXES.items()))
    def test_strips_mapped_prefix(self, token_type, prefix):
        from tokencss.naming import strip_legacy_prefix

        assert strip_legacy_prefix(f"{prefix}body", token_type) == "body"

    @pytest.mark.parametrize("token_type,prefix", list(LEGACY_TOKEN_PREFIXES.items()))
    def test_idempotent(self, token_type, prefix):
        from tokencss.naming import strip_legacy_prefix

        for name in (f"{prefix}body", "body", "color-brand"):
            once = strip_legacy_prefix(name, token_type)
            assert strip_legacy_prefix(once, token_type) == once

    def test_prefix_of_other_type_is_kept(self):
        from tokencss.naming import strip_legacy_prefix

        assert strip_legacy_prefix("font-size-body", TokenType.LINE_HEIGHT) == "font-size-body"

    def test_space_keeps_space_prefix(self):
        from tokencss.naming import strip_legacy_prefix

        assert strip_legacy_prefix("space-small", TokenType.SPACE) == "space-small"
        assert strip_legacy_prefix("spacing-small", TokenType.SPACE) == "small"

    def test_unmapped_type_unchanged(self):
        from tokencss.naming import strip_legacy_prefix

        assert strip_legacy_prefix("color-border-width-x", TokenType.COLOR) == (
            "color-border-width-x"
        )

    def test_only_leading_prefix_removed(self):
        from tokencss.naming import strip_legacy_prefix

        assert strip_legacy_prefix("x-sizing-y", TokenType.SIZE) == "x-sizing-y"


class TestDeclaredName:
    def test_font_size_prefix_removed(self, token_groups):
        from tokencss.naming import declared_name

        token = Token(
            id="t-fs",
            name="body",
            token_type=TokenType.FONT_SIZE,
            value=DimensionValue(measure=16),
            parent_group_id="g-root",
        )
        assert declared_name(token, token_groups, [], ExporterConfig()) == "body"

    def test_camel_case_names_are_not_stripped(self, token_groups):
        from tokencss.naming import declared_name

        token = Token(
            id="t-fs",
            name="body",
            token_type=TokenType.FONT_SIZE,
            value=DimensionValue(measure=16),
            parent_group_id="g-root",
        )
        config = ExporterConfig(token_name_style=StringCase.CAMEL)
        assert declared_name(token, token_groups, [], config) == "fontSizeBody"

    def test_radius_prefix_removed(self, token_groups):
        from tokencss.naming import declared_name

        token = Token(
            id="t-r",
            name="Medium",
            token_type=TokenType.RADIUS,
            value=DimensionValue(measure=4),
            parent_group_id="g-root",
        )
        assert declared_name(token, token_groups, [], ExporterConfig()) == "medium"
