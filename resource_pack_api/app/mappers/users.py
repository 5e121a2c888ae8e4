"""
Mapping between stored and domain user accounts.

Stored accounts use camelCase (``isVerified``, ``verificationToken``)
and carry the password hash, which never leaves the repository layer.
Stored role names outside ``Role`` are left out of the domain account
and logged; the repository writes them back untouched.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.authorization import split_roles
from ..schemas.user import User

logger = logging.getLogger(__name__)


def map_user(record: Dict[str, Any]) -> User:
    roles, unknown = split_roles(record.get("roles") or [])
    if unknown:
        logger.warning("User %s has unknown stored roles %s", record.get("id"), unknown)
    return User(
        id=str(record["id"]),
        username=record.get("username"),
        email=record.get("email"),
        roles=roles,
        is_verified=bool(record.get("isVerified", False)),
        verification_token=record.get("verificationToken"),
    )


def unmap_user(user: User, password: Optional[str] = None, extra_roles: Optional[List[str]] = None) -> Dict[str, Any]:
    """Return the stored layout of ``user``.

    ``password`` is the stored hash to carry over; it is omitted when
    ``None``.  ``extra_roles`` are stored role names outside ``Role``
    that are appended as they are.
    """
    record: Dict[str, Any] = {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "roles": [r.value for r in user.roles] + list(extra_roles or []),
        "isVerified": user.is_verified,
        "verificationToken": user.verification_token,
    }
    if password is not None:
        record["password"] = password
    return record
