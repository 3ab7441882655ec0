from datetime import timedelta

import pytest
from jose import JWTError, jwt

from backend.auth import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from backend.config import ALGORITHM, SECRET_KEY


def test_password_hash_round_trip():
    hashed = get_password_hash("R3g5T7#gh")
    assert hashed != "R3g5T7#gh"
    assert verify_password("R3g5T7#gh", hashed)
    assert not verify_password("r3g5t7#gh", hashed)


def test_password_hashes_are_salted():
    assert get_password_hash("R3g5T7#gh") != get_password_hash("R3g5T7#gh")


def test_token_carries_subject_and_expiry():
    token = create_access_token({"sub": "42"})
    payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    assert payload["sub"] == "42"
    assert "exp" in payload
    assert decode_access_token(token) == 42


def test_expired_token_fails():
    token = create_access_token({"sub": "42"}, expires_delta=timedelta(minutes=-1))
    with pytest.raises(JWTError):
        decode_access_token(token)


def test_token_signed_with_other_key_fails():
    token = jwt.encode({"sub": "42"}, "some-other-key", algorithm=ALGORITHM)
    with pytest.raises(JWTError):
        decode_access_token(token)


@pytest.mark.parametrize("claims", [{}, {"sub": "abc"}])
def test_token_without_usable_subject_fails(claims):
    token = create_access_token(claims)
    with pytest.raises(JWTError):
        decode_access_token(token)
