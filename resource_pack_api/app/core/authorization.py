"""
Role enumeration and authorization predicates.

Roles form a closed set.  Every authorization decision in the service
layer goes through one of the predicates below, which take the
authenticated ``Principal`` and, where relevant, the resource being
acted on.  They are plain functions so they can be tested without
HTTP or storage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, FrozenSet, Iterable, List, Tuple

from .errors import ValidationError

if TYPE_CHECKING:
    from ..schemas.addon import Addon


class Role(str, Enum):
    """Roles a user account can hold."""

    ADMINISTRATOR = "Administrator"
    MODERATOR = "Moderator"
    DEVELOPER = "Developer"
    COUNCIL = "Council"
    TRANSLATOR = "Translator"


# Roles allowed to moderate content regardless of authorship.
MODERATION_ROLES: FrozenSet[Role] = frozenset({Role.ADMINISTRATOR, Role.MODERATOR})


def parse_role(value: str) -> Role:
    """Return the ``Role`` named by ``value`` or raise ``ValidationError``."""
    try:
        return Role(value)
    except ValueError:
        allowed = ", ".join(r.value for r in Role)
        raise ValidationError(f"Invalid role, must be one of: {allowed}", details={"role": value})


def split_roles(values: Iterable[str]) -> Tuple[List[Role], List[str]]:
    """Split stored role names into known roles and unknown leftovers."""
    known: List[Role] = []
    unknown: List[str] = []
    for value in values:
        try:
            known.append(Role(value))
        except ValueError:
            unknown.append(value)
    return known, unknown


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of a service operation."""

    user_id: str
    roles: FrozenSet[Role] = field(default_factory=frozenset)

    @classmethod
    def of(cls, user_id: str, roles: Iterable[str] = ()) -> "Principal":
        return cls(user_id=str(user_id), roles=frozenset(parse_role(r) for r in roles))


def is_moderator(principal: Principal) -> bool:
    return bool(principal.roles & MODERATION_ROLES)


def is_addon_author(principal: Principal, addon: "Addon") -> bool:
    return principal.user_id in addon.authors


def can_manage_addon(principal: Principal, addon: "Addon") -> bool:
    """Authors manage their own add-ons; moderators manage every add-on."""
    return is_addon_author(principal, addon) or is_moderator(principal)


def can_review(principal: Principal) -> bool:
    """Only moderators review, whether or not they authored the add-on."""
    return is_moderator(principal)
