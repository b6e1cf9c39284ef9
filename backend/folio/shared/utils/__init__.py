"""
Utilities Package

Contents:
=========
- security: Password hashing and session tokens
- slug: URL slug generation

Usage:
======
    from folio.shared.utils.security import SecurityUtils, TokenIssuer
    from folio.shared.utils.slug import slugify
"""

from folio.shared.utils.security import SecurityUtils, SessionClaims, TokenIssuer
from folio.shared.utils.slug import slugify

__all__ = [
    "SecurityUtils",
    "SessionClaims",
    "TokenIssuer",
    "slugify",
]
