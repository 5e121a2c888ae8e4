"""
Pydantic schemas for the mods catalog.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ModResourcePack(BaseModel):
    blacklist: List[str] = Field(default_factory=list, description="Game versions without textures")
    versions: List[str] = Field(default_factory=list, description="Supported game versions")
    git_repository: Optional[str] = None


class Mod(BaseModel):
    """A mod the resource pack provides textures for.

    ``id`` is the catalog project id, or a custom id for mods that are
    not listed in the catalog.
    """

    id: str
    name: str
    aliases: List[str] = Field(default_factory=list)
    curse_url: Optional[str] = None
    resource_pack: ModResourcePack = Field(default_factory=ModResourcePack)
    blacklisted: bool = False


class Modpack(BaseModel):
    """A modpack entry.  Stored fields beyond ``id`` and ``name`` are kept as they are."""

    model_config = {"extra": "allow"}

    id: str
    name: Optional[str] = None
