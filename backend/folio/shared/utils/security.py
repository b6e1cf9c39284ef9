"""
Security Utilities

Password hashing and session token management.

Password Hashing:
=================
bcrypt through passlib's CryptContext. The cost factor comes from
settings.BCRYPT_ROUNDS.

Session Tokens:
===============
Signed HS256 JWTs (PyJWT) carrying {id, username, role} and a fixed expiry.
Tokens are stateless: there is no server-side revocation, logout is the
client discarding its token.

Usage:
======
    from folio.shared.utils.security import SecurityUtils, TokenIssuer

    hashed = SecurityUtils.hash_password("password123")
    SecurityUtils.verify_password("password123", hashed)  # True

    issuer = TokenIssuer.from_settings(settings)
    token = issuer.issue(user.id, user.username, user.role)
    claims = issuer.validate(token)   # SessionClaims or InvalidTokenError
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

from folio.config.settings import Settings, settings
from folio.shared.core.exceptions import InvalidTokenError
from folio.shared.models.enums import UserRole


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


class SecurityUtils:
    """Password hashing helpers."""

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            bcrypt hash string (includes salt and cost)
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against a bcrypt hash.

        Returns:
            True if password matches, False otherwise (including unreadable hashes)
        """
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            return False


@dataclass(frozen=True)
class SessionClaims:
    """Identity carried by a valid session token."""

    user_id: int
    username: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class TokenIssuer:
    """
    Mints and validates session tokens.

    Built once at startup from configuration and shared by every request;
    it holds no mutable state.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(hours=24),
    ) -> None:
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    @classmethod
    def from_settings(cls, config: Settings) -> "TokenIssuer":
        return cls(
            secret_key=config.SECRET_KEY,
            algorithm=config.JWT_ALGORITHM,
            expires_delta=timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES),
        )

    def issue(self, user_id: int, username: str, role: UserRole, now: datetime | None = None) -> str:
        """
        Create a signed token for a user.

        Args:
            user_id: User primary key
            username: Username embedded for display
            role: Role checked by the admin gate
            now: Issue time (defaults to the current UTC time)

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "id": user_id,
            "username": username,
            "role": UserRole(role).value,
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def validate(self, token: str) -> SessionClaims:
        """
        Decode and verify a token.

        Raises:
            InvalidTokenError: For expired, tampered, malformed tokens and
                tokens whose claims are missing or carry an unknown role.
                The cases are deliberately indistinguishable to the caller.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp", "id", "role"]},
            )
            return SessionClaims(
                user_id=int(payload["id"]),
                username=str(payload.get("username", "")),
                role=UserRole(payload["role"]),
            )
        except (jwt.InvalidTokenError, KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError() from e
