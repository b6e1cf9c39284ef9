import pytest
from sqlalchemy import func, select

from folio.shared.core.exceptions import DuplicateResourceError, InvalidCredentialError, UserNotFoundError
from folio.shared.models import User, UserRole
from folio.shared.services.auth_service import AuthService


async def test_register_stores_hash_only(session):
    user = await AuthService(session).register_user(" alice ", "alice@example.com ", "hunter22")

    assert user.username == "alice"
    assert user.email == "alice@example.com"
    assert user.role == UserRole.USER
    assert user.password != "hunter22"
    assert user.password.startswith("$2")


async def test_register_same_email_twice(session):
    service = AuthService(session)
    await service.register_user("alice", "alice@example.com", "hunter22")

    with pytest.raises(DuplicateResourceError):
        await service.register_user("alice2", "alice@example.com", "hunter22")

    assert await session.scalar(select(func.count()).select_from(User)) == 1


async def test_verify_credentials(session):
    service = AuthService(session)
    created = await service.register_user("alice", "alice@example.com", "hunter22")

    user = await service.verify_credentials("alice@example.com", "hunter22")
    assert user.id == created.id

    with pytest.raises(InvalidCredentialError):
        await service.verify_credentials("alice@example.com", "wrong")
    with pytest.raises(UserNotFoundError):
        await service.verify_credentials("nobody@example.com", "hunter22")


async def test_login_issues_token_for_role(session, token_issuer):
    service = AuthService(session, token_issuer)
    await service.register_user("root", "root@example.com", "hunter22", role=UserRole.ADMIN)

    user, token = await service.login_user("root@example.com", "hunter22")

    claims = token_issuer.validate(token)
    assert claims.user_id == user.id
    assert claims.username == "root"
    assert claims.is_admin
