"""
Pydantic schemas for texture contributions.

A contribution records who made a texture at a given resolution and
when.  ``ContributionDetail`` is the joined read model with the
texture and contributor accounts resolved.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .texture import Texture
from .user import UserRead


class Resolution(str, Enum):
    C32 = "c32"
    C64 = "c64"


class ContributionCreate(BaseModel):
    date: int = Field(..., description="Contribution time as a UNIX timestamp in milliseconds")
    resolution: Resolution
    texture: int = Field(..., description="Identifier of the contributed texture")
    contributors: List[str] = Field(..., min_length=1, description="Ordered user ids")


class Contribution(ContributionCreate):
    id: str


class ContributionDetail(BaseModel):
    """A contribution with its texture and contributor accounts resolved.

    ``texture`` is ``None`` when the referenced texture no longer
    exists.  Contributor ids without an account are left out of
    ``contributors``.
    """

    contribution: Contribution
    texture: Optional[Texture] = None
    contributors: List[UserRead] = Field(default_factory=list)
