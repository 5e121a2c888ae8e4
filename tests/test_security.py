import hashlib

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from resource_pack_api.app.core.authorization import Role
from resource_pack_api.app.core.security import (
    create_access_token,
    decode_access_token,
    get_current_principal,
    hash_password,
    PBKDF2_ITERATIONS,
)


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def test_token_round_trip():
    payload = decode_access_token(create_access_token({"sub": "42"}))
    assert payload["sub"] == "42"
    assert "exp" in payload


def test_tampered_and_expired_tokens_are_rejected():
    header, _, signature = create_access_token({"sub": "42"}).split(".")
    _, forged_body, _ = create_access_token({"sub": "1"}).split(".")
    assert decode_access_token(f"{header}.{forged_body}.{signature}") is None
    assert decode_access_token("not-a-token") is None
    assert decode_access_token(create_access_token({"sub": "42"}, expires_delta=-10)) is None


def test_password_hashing():
    hashed = hash_password("correct horse")
    assert hashed != hash_password("correct horse")
    salt_hex, hash_hex = hashed.split("$")
    assert len(bytes.fromhex(salt_hex)) == 16
    expected = hashlib.pbkdf2_hmac("sha256", b"correct horse", bytes.fromhex(salt_hex), PBKDF2_ITERATIONS)
    assert hash_hex == expected.hex()


def test_principal_carries_known_roles(make_user):
    make_user("7", roles=["Moderator", "Retired"])
    principal = get_current_principal(_credentials(create_access_token({"sub": "7"})))
    assert principal.user_id == "7"
    assert principal.roles == frozenset({Role.MODERATOR})


def test_missing_or_unknown_principal_is_unauthorized():
    with pytest.raises(HTTPException) as exc:
        get_current_principal(None)
    assert exc.value.status_code == 401
    with pytest.raises(HTTPException) as exc:
        get_current_principal(_credentials(create_access_token({"sub": "ghost"})))
    assert exc.value.status_code == 401
