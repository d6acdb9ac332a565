"""Shared pytest fixtures for tokencss tests."""

from __future__ import annotations

import pytest

from tokencss.config import ExporterConfig
from tokencss.ir import (
    Collection,
    ColorValue,
    DimensionValue,
    StringValue,
    Token,
    TokenGroup,
    TokenType,
)


@pytest.fixture
def token_groups() -> list[TokenGroup]:
    """Return a small group tree: root > Brand > Primary, root > Spacing."""
    return [
        TokenGroup(id="g-root", name="Root", is_root=True),
        TokenGroup(id="g-brand", name="Brand", path=[]),
        TokenGroup(id="g-primary", name="Primary", path=["Brand"]),
        TokenGroup(id="g-space", name="Spacing", path=[]),
    ]


@pytest.fixture
def collections() -> list[Collection]:
    return [Collection(id="c-1", persistent_id="col-core", name="Core")]


@pytest.fixture
def brand_color() -> Token:
    return Token(
        id="t-brand",
        name="Blue",
        token_type=TokenType.COLOR,
        value=ColorValue(r=0, g=102, b=204),
        parent_group_id="g-primary",
        description="Primary brand color",
    )


@pytest.fixture
def space_small() -> Token:
    return Token(
        id="t-space-small",
        name="small",
        token_type=TokenType.SPACE,
        value=DimensionValue(measure=8),
        parent_group_id="g-root",
    )


@pytest.fixture
def font_weight_bold() -> Token:
    return Token(
        id="t-weight-bold",
        name="bold",
        token_type=TokenType.FONT_WEIGHT,
        value=StringValue(text="700"),
        parent_group_id="g-root",
    )


@pytest.fixture
def name_only_config() -> ExporterConfig:
    return ExporterConfig(token_name_structure="NameOnly")
