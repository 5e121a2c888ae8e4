"""
Pydantic models for user accounts.

``User`` is the full domain record including verification state.
``UserRead`` is what the API returns about any account and never
contains the verification token.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..core.authorization import Role


class UserCreate(BaseModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, examples=["steve"])
    email: str = Field(..., min_length=3, examples=["steve@example.com"])
    password: str = Field(..., min_length=8)


class UserRead(BaseModel):
    id: str
    username: Optional[str] = None
    roles: List[Role] = Field(default_factory=list)


class User(UserRead):
    email: Optional[str] = None
    is_verified: bool = False
    verification_token: Optional[str] = None


class RoleChange(BaseModel):
    role: str = Field(..., description="Role name", examples=["Moderator"])
