"""
Business logic for add-ons and their review.

Review lifecycle::

    create -> pending --review--> approved | denied
                 ^                        |
                 +--------reopen----------+

- Authors create add-ons; the caller must be listed in ``authors``.
- Authors edit and delete their own add-ons; moderators
  (Administrator or Moderator) may edit and delete any add-on.
- Only moderators review, authorship notwithstanding.  Denials need a
  reason.
- ``approved`` and ``denied`` are terminal: a reviewed add-on can be
  neither reviewed again nor edited until a moderator reopens it,
  which puts it back to ``pending``.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.authorization import Principal, can_manage_addon, can_review
from ..core.errors import InvalidTransitionError, PermissionDeniedError, ValidationError
from ..repositories.addons import AddonRepository
from ..schemas.addon import (
    TERMINAL_STATUSES,
    Addon,
    AddonApproval,
    AddonCreate,
    AddonReviewBody,
    AddonStatus,
)

logger = logging.getLogger(__name__)

# Keys of the stored record that a create or edit payload cannot set.
PROTECTED_FIELDS = ("id", "approval")


def _content(body: AddonCreate) -> Dict[str, Any]:
    data = body.model_dump(mode="json")
    for key in PROTECTED_FIELDS:
        data.pop(key, None)
    return data


def _check_author(body: AddonCreate, principal: Principal) -> None:
    if principal.user_id not in body.authors:
        raise ValidationError(
            "Add-on authors must include the authenticated user (author mismatch)",
            details={"user": principal.user_id},
        )


class AddonService:
    """Service for add-ons."""

    def __init__(self, addons: Optional[AddonRepository] = None) -> None:
        self.addon_repo = addons or AddonRepository()

    async def get_raw(self) -> Dict[str, Addon]:
        return await self.addon_repo.get_raw()

    async def get_addon(self, addon_id: str) -> Addon:
        return await self.addon_repo.get_by_id(addon_id)

    async def get_by_status(self, status: AddonStatus) -> List[Addon]:
        return await self.addon_repo.get_by_status(status)

    async def get_by_author(self, user_id: str) -> List[Addon]:
        return await self.addon_repo.get_by_author(user_id)

    async def create(self, body: AddonCreate, principal: Principal) -> Addon:
        """Create a new add-on in the ``pending`` state."""
        _check_author(body, principal)
        record = _content(body)
        record["approval"] = AddonApproval().model_dump(mode="json")
        addon = await self.addon_repo.create(record)
        logger.info("User %s created add-on %s", principal.user_id, addon.id)
        return addon

    async def update(self, addon_id: str, body: AddonCreate, principal: Principal) -> Addon:
        """Replace the content of an add-on, keeping its review state.

        The new body must list the caller as an author.  A caller who
        is not an author of the stored add-on needs a moderation role.
        Reviewed add-ons must be reopened before they can be edited.
        """
        _check_author(body, principal)
        addon = await self.addon_repo.get_by_id(addon_id)
        if not can_manage_addon(principal, addon):
            raise PermissionDeniedError()
        if addon.approval.status in TERMINAL_STATUSES:
            raise InvalidTransitionError(
                f"Add-on {addon_id} was {addon.approval.status.value}, reopen it before editing",
                current=addon.approval.status.value,
                requested="edit",
            )
        updated = await self.addon_repo.set(Addon(id=addon_id, approval=addon.approval, **_content(body)))
        logger.info("User %s updated add-on %s", principal.user_id, addon_id)
        return updated

    async def delete(self, addon_id: str, principal: Principal) -> None:
        addon = await self.addon_repo.get_by_id(addon_id)
        if not can_manage_addon(principal, addon):
            raise PermissionDeniedError()
        await self.addon_repo.delete(addon_id)
        logger.info("User %s deleted add-on %s", principal.user_id, addon_id)

    async def review(self, addon_id: str, body: AddonReviewBody, principal: Principal) -> Addon:
        """Approve or deny a pending add-on."""
        if not can_review(principal):
            raise PermissionDeniedError()
        if body.status == AddonStatus.PENDING:
            raise ValidationError("Review status must be approved or denied; use reopen to reset a review")
        reason = (body.reason or "").strip()
        if body.status == AddonStatus.DENIED and not reason:
            raise ValidationError("A reason is required when denying an add-on")

        addon = await self.addon_repo.get_by_id(addon_id)
        if addon.approval.status != AddonStatus.PENDING:
            raise InvalidTransitionError(
                f"Add-on {addon_id} was already {addon.approval.status.value}",
                current=addon.approval.status.value,
                requested=body.status.value,
            )
        approval = AddonApproval(
            status=body.status,
            author=principal.user_id,
            reason=reason if body.status == AddonStatus.DENIED else None,
        )
        reviewed = await self.addon_repo.set(addon.model_copy(update={"approval": approval}))
        logger.info("User %s set add-on %s to %s", principal.user_id, addon_id, body.status.value)
        return reviewed

    async def reopen(self, addon_id: str, principal: Principal) -> Addon:
        """Put a reviewed add-on back to ``pending``, clearing the review."""
        if not can_review(principal):
            raise PermissionDeniedError()
        addon = await self.addon_repo.get_by_id(addon_id)
        if addon.approval.status not in TERMINAL_STATUSES:
            raise InvalidTransitionError(
                f"Add-on {addon_id} is not reviewed yet",
                current=addon.approval.status.value,
                requested=AddonStatus.PENDING.value,
            )
        reopened = await self.addon_repo.set(addon.model_copy(update={"approval": AddonApproval()}))
        logger.info("User %s reopened add-on %s", principal.user_id, addon_id)
        return reopened
