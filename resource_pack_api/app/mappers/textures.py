"""
Mapping between stored and domain textures, uses and paths.

Stored layouts::

    texture  {id, name, type}
    use      {id, textureID, textureUseName, editions}
    path     {id, useID, path, versions, mcmeta}

Lossy point: a stored use may list several editions but the domain
``Use`` has exactly one.  ``map_use`` keeps ``editions[0]`` and
``unmap_use`` writes a single-element list, so extra editions do not
survive a round trip.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, Field

from ..core.errors import ValidationError
from ..schemas.texture import Path, PathCreate, Texture, TextureCreate, Use


class LegacyTextureCreation(BaseModel):
    name: str
    type: List[str] = Field(default_factory=list)


class LegacyTexture(LegacyTextureCreation):
    id: str


class LegacyUse(BaseModel):
    id: str
    textureID: int
    textureUseName: str
    editions: List[str]


class LegacyPathCreation(BaseModel):
    useID: str
    path: str
    versions: List[str] = Field(default_factory=list)
    mcmeta: bool = False


class LegacyPath(LegacyPathCreation):
    id: str


def map_texture(old: Union[LegacyTexture, Texture]) -> Texture:
    """Map a stored texture to the domain shape.

    A ``Texture`` is returned unchanged: some stored records were
    already migrated to the domain layout.
    """
    if isinstance(old, Texture):
        return old
    return Texture(id=old.id, name=old.name, tags=list(old.type))


def map_textures(data: Sequence[Union[LegacyTexture, Texture]]) -> List[Texture]:
    return [map_texture(t) for t in data]


def unmap_texture(data: Texture) -> LegacyTexture:
    return LegacyTexture(id=data.id, name=str(data.name), type=list(data.tags))


def unmap_texture_creation(data: TextureCreate) -> LegacyTextureCreation:
    return LegacyTextureCreation(name=str(data.name), type=list(data.tags))


def texture_from_record(record: Dict[str, Any]) -> Texture:
    """Read a raw store record in whichever layout it was written."""
    if "type" not in record:
        return map_texture(Texture.model_validate(record))
    return map_texture(LegacyTexture.model_validate(record))


def parse_texture_id(value: Union[int, str]) -> Optional[int]:
    """Return the numeric texture id stored on uses and contributions, or ``None``."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def map_use(old: LegacyUse) -> Use:
    if not old.editions:
        raise ValidationError(f"Use '{old.id}' has no edition", details={"id": old.id})
    return Use(id=old.id, name=old.textureUseName, texture=old.textureID, edition=old.editions[0])


def map_uses(data: Sequence[LegacyUse]) -> List[Use]:
    return [map_use(u) for u in data]


def unmap_use(use: Use) -> LegacyUse:
    return LegacyUse(id=use.id, textureID=use.texture, textureUseName=use.name, editions=[use.edition])


def map_path(old: LegacyPath) -> Path:
    return Path(id=old.id, use=old.useID, name=old.path, versions=list(old.versions), mcmeta=old.mcmeta)


def map_paths(data: Sequence[LegacyPath]) -> List[Path]:
    return [map_path(p) for p in data]


def unmap_path(path: Union[Path, PathCreate]) -> Union[LegacyPath, LegacyPathCreation]:
    """Map a path back to the stored layout.

    Creation input has no id yet and yields a ``LegacyPathCreation``.
    """
    fields = {"useID": path.use, "path": path.name, "versions": list(path.versions), "mcmeta": path.mcmeta}
    if isinstance(path, Path):
        return LegacyPath(id=path.id, **fields)
    return LegacyPathCreation(**fields)
