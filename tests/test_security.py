import json
from datetime import datetime, timedelta, timezone

import jwt
from jwt.utils import base64url_encode
import pytest

from folio.shared.core.exceptions import InvalidTokenError
from folio.shared.models import UserRole
from folio.shared.utils.security import SecurityUtils, TokenIssuer


SECRET = "unit-test-secret-key-with-enough-length"


@pytest.fixture
def issuer() -> TokenIssuer:
    return TokenIssuer(SECRET)


def test_hash_is_not_plaintext_and_verifies():
    hashed = SecurityUtils.hash_password("password123")
    assert hashed != "password123"
    assert SecurityUtils.verify_password("password123", hashed)
    assert not SecurityUtils.verify_password("password124", hashed)


def test_verify_against_garbage_hash_is_false():
    assert SecurityUtils.verify_password("password123", "not-a-bcrypt-hash") is False


def test_issue_and_validate_round_trip(issuer):
    token = issuer.issue(7, "alice", UserRole.USER)
    claims = issuer.validate(token)
    assert claims.user_id == 7
    assert claims.username == "alice"
    assert claims.role is UserRole.USER
    assert not claims.is_admin


def test_token_carries_expected_claims(issuer):
    now = datetime.now(timezone.utc)
    token = issuer.issue(1, "root", UserRole.ADMIN, now=now)
    payload = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert payload["id"] == 1
    assert payload["role"] == "admin"
    assert payload["exp"] - payload["iat"] == 24 * 60 * 60


def test_expired_token_is_rejected(issuer):
    token = issuer.issue(1, "alice", UserRole.USER, now=datetime.now(timezone.utc) - timedelta(hours=25))
    with pytest.raises(InvalidTokenError):
        issuer.validate(token)


def test_tampered_token_is_rejected(issuer):
    token = issuer.issue(1, "alice", UserRole.USER)
    header, _payload, signature = token.split(".")
    forged = base64url_encode(
        json.dumps({"id": 1, "username": "alice", "role": "admin", "exp": 4102444800}).encode()
    ).decode()
    with pytest.raises(InvalidTokenError):
        issuer.validate(".".join([header, forged, signature]))


def test_token_signed_with_other_secret_is_rejected(issuer):
    token = TokenIssuer("another-secret-key-with-enough-length").issue(1, "alice", UserRole.ADMIN)
    with pytest.raises(InvalidTokenError):
        issuer.validate(token)


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "x", "role": "user"},
        {"id": 1, "username": "x"},
        {"id": 1, "username": "x", "role": "superuser"},
        {"id": "not-a-number", "username": "x", "role": "user"},
    ],
)
def test_bad_claims_are_rejected(issuer, payload):
    payload = {**payload, "exp": datetime.now(timezone.utc) + timedelta(hours=1)}
    token = jwt.encode(payload, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        issuer.validate(token)


def test_malformed_token_is_rejected(issuer):
    with pytest.raises(InvalidTokenError):
        issuer.validate("definitely.not.a-jwt")
