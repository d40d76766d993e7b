"""Unit tests for the bcrypt hasher and the JWT token issuer."""

import time

import jwt
import pytest

from event_platform.domain.entities import User, UserRole
from event_platform.domain.exceptions import AuthenticationError
from event_platform.infrastructure.security import JwtTokenIssuer

SECRET = "unit-test-secret-key-with-enough-bytes"


def _user(**overrides) -> User:
    values = {
        "person_id": "person-1",
        "email": "ada@example.com",
        "password_hash": "unused",
        "role": UserRole.COMPANY_ADMIN,
        "company_id": "company-1",
    }
    values.update(overrides)
    return User(**values)


# ── Password hashing ────────────────────────────────────────────────


def test_hash_is_salted_bcrypt(password_hasher):
    first = password_hasher.hash("correct horse")
    second = password_hasher.hash("correct horse")
    assert first.startswith("$2b$")
    assert first != second


def test_verify_accepts_matching_password(password_hasher):
    hashed = password_hasher.hash("correct horse")
    assert password_hasher.verify("correct horse", hashed) is True
    assert password_hasher.verify("wrong horse", hashed) is False


@pytest.mark.parametrize("stored", ["", "plaintext", "$1$legacy$md5hash"])
def test_verify_rejects_non_bcrypt_hashes(password_hasher, stored):
    assert password_hasher.verify("plaintext", stored) is False


def test_verify_rejects_malformed_bcrypt_hash(password_hasher):
    assert password_hasher.verify("secret", "$2b$04$tooshort") is False


# ── Tokens ──────────────────────────────────────────────────────────


def test_issue_and_decode_round_trip(token_issuer):
    user = _user()
    issued = token_issuer.issue(user)
    assert issued.expires_in == 30 * 60

    actor = token_issuer.decode(issued.access_token)
    assert actor.user_id == user.id
    assert actor.email == "ada@example.com"
    assert actor.role == UserRole.COMPANY_ADMIN
    assert actor.company_id == "company-1"


def test_claims_use_camel_case_company(token_issuer):
    issued = token_issuer.issue(_user())
    payload = jwt.decode(issued.access_token, SECRET, algorithms=["HS256"])
    assert payload["companyId"] == "company-1"
    assert payload["role"] == "company_admin"
    assert payload["exp"] - payload["iat"] == 30 * 60


def test_expired_token_is_rejected(token_issuer):
    now = int(time.time())
    token = jwt.encode(
        {"sub": "user-1", "role": "user", "iat": now - 120, "exp": now - 60},
        SECRET,
        algorithm="HS256",
    )
    with pytest.raises(AuthenticationError, match="expired"):
        token_issuer.decode(token)


def test_token_signed_with_other_secret_is_rejected(token_issuer):
    other = JwtTokenIssuer(secret="another-secret-key-that-is-long-enough")
    token = other.issue(_user()).access_token
    with pytest.raises(AuthenticationError, match="Invalid token"):
        token_issuer.decode(token)


def test_tampered_token_is_rejected(token_issuer):
    token = token_issuer.issue(_user()).access_token
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])
    with pytest.raises(AuthenticationError):
        token_issuer.decode(tampered)


def test_token_without_subject_is_rejected(token_issuer):
    token = jwt.encode({"role": "user", "exp": int(time.time()) + 60}, SECRET, algorithm="HS256")
    with pytest.raises(AuthenticationError):
        token_issuer.decode(token)


def test_unknown_role_is_rejected(token_issuer):
    token = jwt.encode(
        {"sub": "user-1", "role": "superuser", "exp": int(time.time()) + 60},
        SECRET,
        algorithm="HS256",
    )
    with pytest.raises(AuthenticationError, match="Invalid token"):
        token_issuer.decode(token)


def test_garbage_is_rejected(token_issuer):
    with pytest.raises(AuthenticationError):
        token_issuer.decode("not-a-jwt")
