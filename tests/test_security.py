"""Token service and password hashing."""

from datetime import timedelta

import pytest
from jose import jwt

from app.utilities.errors import Unauthorized
from app.utilities.security import create_access_token, hash_password, verify_password, verify_token
from config import ALGORITHM, JWT_SECRET_KEY


def test_token_round_trip():
    token = create_access_token(user_id="abc123", email="a@x.com", role="admin")
    assert verify_token(token) == {"user_id": "abc123", "email": "a@x.com", "role": "admin"}


def test_expired_token_rejected():
    token = create_access_token(user_id="abc123", email="a@x.com", role="user", expires_delta=timedelta(seconds=-5))
    with pytest.raises(Unauthorized):
        verify_token(token)


def test_wrong_signature_rejected():
    token = jwt.encode({"sub": "abc123", "role": "admin"}, "not-the-secret", algorithm=ALGORITHM)
    with pytest.raises(Unauthorized):
        verify_token(token)


def test_garbage_token_rejected():
    with pytest.raises(Unauthorized):
        verify_token("not.a.jwt")


def test_token_without_subject_rejected():
    token = jwt.encode({"email": "a@x.com", "role": "admin"}, JWT_SECRET_KEY, algorithm=ALGORITHM)
    with pytest.raises(Unauthorized):
        verify_token(token)


def test_missing_role_means_user():
    token = jwt.encode({"sub": "abc123", "email": "a@x.com"}, JWT_SECRET_KEY, algorithm=ALGORITHM)
    assert verify_token(token)["role"] == "user"


def test_password_hash_verifies():
    hashed = hash_password("secret1")
    assert hashed != "secret1"
    assert verify_password("secret1", hashed)
    assert not verify_password("secret2", hashed)


def test_verify_password_handles_bad_hash():
    assert verify_password("secret1", "not-a-hash") is False
