"""
Error types for design token export.
"""

from __future__ import annotations


class TokenExportError(Exception):
    """Base exception for all token export errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingParentGroupError(TokenExportError):
    """
    Raised when a token's parent group is not in the supplied group list.

    The parent group is a precondition of name building; there is no
    fallback, so conversion of that token stops here.
    """

    def __init__(self, token_id: str, parent_group_id: str):
        self.token_id = token_id
        self.parent_group_id = parent_group_id
        super().__init__(
            f"Token '{token_id}' references unknown parent group '{parent_group_id}'"
        )


class UnresolvedPrefixError(TokenExportError):
    """
    Raised when a token type has no entry in the consulted prefix table.

    Examples:
    - customizeTokenPrefixes is on but tokenPrefixes omits the type
    """

    def __init__(self, token_type: str, *, custom: bool):
        self.token_type = token_type
        self.custom = custom
        source = "configured tokenPrefixes" if custom else "default prefixes"
        super().__init__(f"No prefix for token type '{token_type}' in {source}")


class UnsupportedValueError(TokenExportError):
    """Raised when a token value cannot be rendered for its token type."""

    pass


class InvalidTokenNameError(TokenExportError):
    """
    Raised when no identifier can be built from a token's name fragments.

    Examples:
    - Empty prefix and a whitespace-only token name
    """

    pass
