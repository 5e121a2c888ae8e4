"""
Pydantic schemas for add-ons and their review.

Add-ons go through a review before being published:
``pending`` -> ``approved`` | ``denied``.  ``approval`` records the
current state, the reviewer and, for denials, the reason.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class AddonStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


TERMINAL_STATUSES = frozenset({AddonStatus.APPROVED, AddonStatus.DENIED})


class AddonApproval(BaseModel):
    status: AddonStatus = AddonStatus.PENDING
    author: Optional[str] = Field(None, description="User id of the reviewer")
    reason: Optional[str] = Field(None, description="Reason given when denied")


class AddonCreate(BaseModel):
    """Schema for creating or editing an add-on.

    Besides the fields below, any extra payload (options, download
    links, screenshots...) is stored as given.
    """

    model_config = {"extra": "allow"}

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    authors: List[str] = Field(..., min_length=1, description="User ids of the add-on authors")

    @field_validator("authors")
    @classmethod
    def dedupe_authors(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(str(a) for a in v))


class Addon(AddonCreate):
    id: str
    approval: AddonApproval = Field(default_factory=AddonApproval)


class AddonReviewBody(BaseModel):
    """Payload of a review: the target state and, when denying, a reason."""

    status: AddonStatus
    reason: Optional[str] = None
