"""
Pydantic schemas for packs and their submission settings.

A submission record shares its id with the pack it belongs to but is
stored in its own collection, and may exist without a pack.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Pack(BaseModel):
    model_config = {"extra": "allow"}

    id: str
    name: str
    tags: List[str] = Field(default_factory=list)


class SubmissionCreate(BaseModel):
    """Submission settings of a pack.

    Unknown keys are kept so older submission records survive a
    read-modify-write round trip.
    """

    model_config = {"extra": "allow"}

    reference: Optional[str] = Field(None, description="Pack whose textures are shown as reference")
    channels: Dict[str, str] = Field(default_factory=dict, description="Submission, council and results channel ids")
    council_enabled: bool = False
    time_to_results: int = Field(0, ge=0, description="Seconds before a submission gets its result")
    time_to_council: Optional[int] = Field(None, ge=0)
    contributor_role: Optional[str] = None


class Submission(SubmissionCreate):
    id: str


class PackAll(Pack):
    """A pack merged with its submission settings."""

    submission: Submission
