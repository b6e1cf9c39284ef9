"""
Authentication Service

Business logic for user registration, login and profile lookup.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Security helpers (hashing, tokens)
- Domain rules

Usage:
======
    from folio.shared.services.auth_service import AuthService

    service = AuthService(db, token_issuer)
    user = await service.register_user("alice", "alice@example.com", "secret1")
    user, token = await service.login_user("alice@example.com", "secret1")
"""

import asyncio
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.core.exceptions import (
    DuplicateResourceError,
    InvalidCredentialError,
    UserNotFoundError,
)
from folio.shared.core.logging import get_logger
from folio.shared.models.enums import UserRole
from folio.shared.models.user import User
from folio.shared.repositories.user_repository import UserRepository
from folio.shared.utils.security import SecurityUtils, TokenIssuer


logger = get_logger(__name__)


async def hash_password(password: str) -> str:
    """bcrypt is CPU-bound; keep it off the event loop."""
    return await asyncio.to_thread(SecurityUtils.hash_password, password)


async def verify_password(password: str, hashed: str) -> bool:
    return await asyncio.to_thread(SecurityUtils.verify_password, password, hashed)


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration
    - Credential verification (login)
    - Session token issuance

    Attributes:
        session: Database session
        repo: UserRepository instance
        token_issuer: Signs session tokens; None when only registration
            or verification is needed
    """

    def __init__(self, session: AsyncSession, token_issuer: Optional[TokenIssuer] = None) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
            token_issuer: Issuer created at application startup
        """
        self.session = session
        self.repo = UserRepository(session)
        self.token_issuer = token_issuer

    async def register_user(
        self,
        username: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """
        Register a new user.

        The insert is a single statement inside a SAVEPOINT. The unique
        constraints on username and email decide duplicates, so two
        concurrent registrations cannot both succeed.

        Args:
            username: Display name (trimmed)
            email: Email address (trimmed)
            password: Plain text password (will be hashed)
            role: Role of the new account

        Returns:
            The created user

        Raises:
            DuplicateResourceError: If the username or email is taken
        """
        username = username.strip()
        email = email.strip()
        password_hash = await hash_password(password)

        try:
            async with self.session.begin_nested():
                user = await self.repo.create(
                    username=username,
                    email=email,
                    password=password_hash,
                    role=role,
                )
        except IntegrityError as e:
            logger.info("Registration rejected", reason="duplicate")
            raise DuplicateResourceError("User already exists") from e

        logger.info("User registered", user_id=user.id, role=user.role.value)
        return user

    async def verify_credentials(self, email: str, password: str) -> User:
        """
        Check an email/password pair.

        Returns:
            The matching user

        Raises:
            UserNotFoundError: No user has this email
            InvalidCredentialError: Password does not match
        """
        user = await self.repo.get_by_email(email.strip())
        if user is None:
            logger.info("Login rejected", reason="unknown_email")
            raise UserNotFoundError()

        if not await verify_password(password, user.password):
            logger.info("Login rejected", reason="invalid_password", user_id=user.id)
            raise InvalidCredentialError()

        return user

    async def login_user(self, email: str, password: str) -> Tuple[User, str]:
        """
        Authenticate user and issue a session token.

        Returns:
            Tuple of (user, token)

        Raises:
            UserNotFoundError, InvalidCredentialError: see verify_credentials()
        """
        if self.token_issuer is None:
            raise RuntimeError("AuthService.login_user requires a token issuer")

        user = await self.verify_credentials(email, password)
        token = self.token_issuer.issue(user.id, user.username, user.role)
        logger.info("User logged in", user_id=user.id)
        return user, token

    async def get_profile(self, user_id: int) -> User:
        """
        Raises:
            UserNotFoundError: The token's user was deleted
        """
        user = await self.repo.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
