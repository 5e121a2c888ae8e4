"""
Security helpers for password hashing and bearer token authentication.

Tokens are HMAC-SHA256 signed JWTs whose subject (``sub``) is a user
id.  Issuing tokens belongs to the external login handshake; this
module only needs ``create_access_token`` for tooling and tests.
``get_current_principal`` decodes the bearer token and loads the
account's roles from the ``users`` collection so the service layer
receives a ``Principal``.

Passwords are hashed with PBKDF2-HMAC-SHA256 and a per-password salt.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Callable, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .authorization import Principal, Role, split_roles
from .collections import USERS
from .config import settings
from .db import collection
from .errors import NotFoundError

PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, str], expires_delta: Optional[int] = None) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with an ``exp`` field (UNIX timestamp).
    ``expires_delta`` is the lifetime in seconds and defaults to
    ``settings.access_token_expire_minutes * 60``.
    """
    to_encode = dict(data)
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, str]]:
    """Verify and decode a JWT token.

    Returns the payload when the signature matches and ``exp`` lies in
    the future, otherwise ``None``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(_sign(signing_input, settings.secret_key), actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        if not isinstance(data, dict) or data.get("exp") is None or int(data["exp"]) < int(time.time()):
            return None
    except (ValueError, TypeError):
        # bad base64, bad utf-8, bad JSON and a non-numeric exp
        return None
    return data


security = HTTPBearer(auto_error=False)


def get_current_principal(credentials: HTTPAuthorizationCredentials = Depends(security)) -> Principal:
    """Dependency resolving the bearer token to a ``Principal``.

    Raises HTTP 401 when the header is missing, the token is invalid
    or expired, or the account it names no longer exists.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials)
    if not payload or not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        user = collection(USERS).get(payload["sub"])
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User no longer exists",
            headers={"WWW-Authenticate": "Bearer"},
        )
    known, _ = split_roles(user.get("roles") or [])
    return Principal(user_id=str(user["id"]), roles=frozenset(known))


def require_roles(*roles: Role) -> Callable[[Principal], Principal]:
    """Dependency factory enforcing that the caller holds one of ``roles``.

    Use as ``Depends(require_roles(Role.ADMINISTRATOR, Role.MODERATOR))``.
    """

    def _role_dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.roles & set(roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return principal

    return _role_dependency


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    Returns ``"<salt hex>$<hash hex>"`` with a fresh 16-byte salt.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"

