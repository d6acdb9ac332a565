"""
Custom-property naming for design tokens.

A token's declared name is built in three steps:

1. Resolve the type prefix (configured overrides or built-in defaults).
2. Build a code-safe name from the global prefix, type prefix, optional
   collection name, parent group ancestry and the token's own name.
3. Strip the legacy type prefix for the token's type, if present.

``declared_name`` runs all three and is the only entry point used by both
the declaration path and the var() reference path.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .casing import code_safe_variable_name
from .config import ExporterConfig, StringCase, TokenNameStructure
from .defaults import DEFAULT_TOKEN_PREFIXES, LEGACY_TOKEN_PREFIXES
from .errors import MissingParentGroupError, UnresolvedPrefixError
from .ir import Collection, Token, TokenGroup, TokenType

logger = logging.getLogger(__name__)


def resolve_prefix(token_type: TokenType, config: ExporterConfig) -> str:
    """
    Get the name prefix for a token type.

    Raises:
        UnresolvedPrefixError: If the consulted table has no entry for the type
    """
    table = config.token_prefixes if config.customize_token_prefixes else DEFAULT_TOKEN_PREFIXES
    try:
        return table[token_type]
    except KeyError:
        raise UnresolvedPrefixError(
            token_type, custom=config.customize_token_prefixes
        ) from None


def _find_parent_group(token: Token, token_groups: Sequence[TokenGroup]) -> TokenGroup:
    for group in token_groups:
        if group.id == token.parent_group_id:
            return group
    raise MissingParentGroupError(token.id, token.parent_group_id)


def _find_collection(collection_id: str, collections: Sequence[Collection]) -> Collection:
    for collection in collections:
        if collection.persistent_id == collection_id:
            return collection
    logger.debug("Collection '%s' not found, using its id as the name", collection_id)
    return Collection(id=collection_id, persistent_id=collection_id, name=collection_id)


def code_safe_variable_name_for_token(
    token: Token,
    style: StringCase,
    parent: TokenGroup | None,
    prefix: str,
) -> str:
    """
    Build a code-safe name from a prefix, the parent's ancestry and the token name.

    Args:
        token: Token being named
        style: Case style of the result
        parent: Parent group, or None to leave ancestry out
        prefix: Already-composed prefix segment (may be empty)
    """
    fragments: list[str] = []
    if prefix:
        fragments.append(prefix)
    if parent is not None and not parent.is_root:
        fragments.extend(parent.path)
        fragments.append(parent.name)
    fragments.append(token.name)
    return code_safe_variable_name(fragments, style)


def build_name(
    token: Token,
    token_groups: Sequence[TokenGroup],
    collections: Sequence[Collection],
    config: ExporterConfig,
) -> str:
    """
    Build the unstripped variable name for a token.

    Raises:
        MissingParentGroupError: If the token's parent group is not in token_groups
        UnresolvedPrefixError: If the token type has no prefix
    """
    parent = _find_parent_group(token, token_groups)
    prefix = resolve_prefix(token.token_type, config)

    collection: Collection | None = None
    structure = config.token_name_structure
    if structure == TokenNameStructure.COLLECTION_PATH_AND_NAME and token.collection_id:
        collection = _find_collection(token.collection_id, collections)

    segments = [config.global_name_prefix, prefix, collection.name if collection else None]
    prefix_segment = "-".join(segment for segment in segments if segment)

    return code_safe_variable_name_for_token(
        token,
        config.token_name_style,
        parent if structure != TokenNameStructure.NAME_ONLY else None,
        prefix_segment,
    )


def strip_legacy_prefix(name: str, token_type: TokenType) -> str:
    """
    Remove the legacy prefix for a token type from the start of a name.

    Examples:
        >>> strip_legacy_prefix("font-size-body", TokenType.FONT_SIZE)
        'body'
        >>> strip_legacy_prefix("space-small", TokenType.SPACE)
        'space-small'
    """
    legacy_prefix = LEGACY_TOKEN_PREFIXES.get(token_type)
    if legacy_prefix and name.startswith(legacy_prefix):
        return name[len(legacy_prefix) :]
    return name


def declared_name(
    token: Token,
    token_groups: Sequence[TokenGroup],
    collections: Sequence[Collection],
    config: ExporterConfig,
) -> str:
    """Get the final custom-property name of a token (without ``--``)."""
    return strip_legacy_prefix(
        build_name(token, token_groups, collections, config), token.token_type
    )
