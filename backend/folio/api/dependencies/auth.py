"""
Authentication Dependencies

FastAPI dependencies for the authorization gate.

Dependency Hierarchy:
=====================
    get_token_issuer()   ← TokenIssuer built at startup (app.state.token_issuer)
           │
           ▼
    get_current_user()   ← Bearer token → SessionClaims
           │                 no token      → 401 "Access denied"
           │                 invalid token → 403 "Invalid token"
           ▼
    require_admin()      ← role must be admin
                             otherwise     → 403 "Access denied. Admin only."

Type Aliases:
=============
    CurrentUser  - Any authenticated user
    AdminUser    - Authenticated admin

Usage:
======
    from folio.api.dependencies.auth import AdminUser, CurrentUser

    @router.get("/me")
    async def get_me(current_user: CurrentUser):
        return current_user.user_id

    @router.delete("/users/{user_id}")
    async def delete_user(user_id: int, admin: AdminUser):
        ...
"""

from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from folio.shared.core.exceptions import AuthenticationError, AuthorizationError, InvalidTokenError
from folio.shared.utils.security import SessionClaims, TokenIssuer


# Missing headers are reported by get_current_user, not by HTTPBearer
security = HTTPBearer(auto_error=False)


def get_token_issuer(request: Request) -> TokenIssuer:
    """The TokenIssuer created in the application lifespan."""
    return request.app.state.token_issuer


async def get_current_user(
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> SessionClaims:
    """
    Validate the bearer token of the request.

    Returns:
        Claims of the session (user_id, username, role)

    Raises:
        AuthenticationError: No bearer token (401)
        AuthorizationError: Token present but invalid or expired (403)
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access denied")

    try:
        return issuer.validate(credentials.credentials)
    except InvalidTokenError as e:
        raise AuthorizationError("Invalid token") from e


async def require_admin(
    claims: Annotated[SessionClaims, Depends(get_current_user)],
) -> SessionClaims:
    """
    Raises:
        AuthorizationError: Authenticated user is not an admin (403)
    """
    if not claims.is_admin:
        raise AuthorizationError("Access denied. Admin only.")
    return claims


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated user (most common dependency)
CurrentUser = Annotated[SessionClaims, Depends(get_current_user)]

# Authenticated admin
AdminUser = Annotated[SessionClaims, Depends(require_admin)]
