"""
Pydantic schemas for textures, their uses and their paths.

A texture is a named image with tags.  A *use* is one place the game
uses that texture in a given edition, and a *path* is one file
location of a use, valid for a set of game versions.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator


class TextureCreate(BaseModel):
    """Schema for creating or replacing a texture.

    Names are stripped here, on input only; stored names are read back
    as they are.
    """

    name: str = Field(..., min_length=1, description="Texture name", examples=["stone"])
    tags: List[str] = Field(default_factory=list, description="Ordered list of tags", examples=[["block"]])

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Texture name must not be blank")
        return v


class Texture(BaseModel):
    id: str
    name: str
    tags: List[str] = Field(default_factory=list)


class UseCreate(BaseModel):
    """Schema for creating or replacing a texture use."""

    name: str = Field(..., description="Use name, usually the texture name in that edition")
    texture: int = Field(..., description="Identifier of the texture this use belongs to")
    edition: str = Field(..., min_length=1, examples=["java"])


class Use(UseCreate):
    id: str


class PathCreate(BaseModel):
    """Schema for creating or replacing a texture path."""

    use: str = Field(..., description="Identifier of the use this path belongs to")
    name: str = Field(..., min_length=1, description="Path inside the resource pack", examples=["textures/block/stone.png"])
    versions: List[str] = Field(default_factory=list, description="Game versions this path exists in")
    mcmeta: bool = False

    @field_validator("versions")
    @classmethod
    def dedupe_versions(cls, v: List[str]) -> List[str]:
        # versions behave as a set but keep their first-seen order
        return list(dict.fromkeys(v))


class Path(PathCreate):
    id: str
