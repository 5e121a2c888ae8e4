"""
Repositories for textures, uses and paths.

Uses reference textures through ``texture`` and paths reference uses
through ``use``.  Both references are checked before every write.
"""

import logging
from typing import Any, Dict, Iterable, List, Union

from ..core import collections
from ..core.db import collection
from ..core.errors import ValidationError
from ..mappers.textures import (
    LegacyPath,
    LegacyUse,
    map_path,
    map_use,
    parse_texture_id,
    texture_from_record,
    unmap_path,
    unmap_texture,
    unmap_texture_creation,
    unmap_use,
)
from ..schemas.texture import Path, PathCreate, Texture, TextureCreate, Use
from .base import DocumentRepository

logger = logging.getLogger(__name__)


class TextureRepository(DocumentRepository[Texture]):
    collection_name = collections.TEXTURES

    def from_record(self, record: Dict[str, Any]) -> Texture:
        return texture_from_record(record)

    def to_record(self, item: Texture) -> Dict[str, Any]:
        return unmap_texture(item).model_dump()

    async def create(self, payload: TextureCreate) -> Texture:
        texture_id = self.collection.add(unmap_texture_creation(payload).model_dump())
        return await self.get_by_id(texture_id)

    async def search_by_name(self, name: str) -> List[Texture]:
        return [self.read(r) for r in self.collection.search("name", name)]


class UseRepository(DocumentRepository[Use]):
    collection_name = collections.USES

    def from_record(self, record: Dict[str, Any]) -> Use:
        return map_use(LegacyUse.model_validate(record))

    def to_record(self, item: Use) -> Dict[str, Any]:
        return unmap_use(item).model_dump()

    async def validate_references(self, item: Use) -> None:
        if not collection(collections.TEXTURES).exists(str(item.texture)):
            raise ValidationError(
                f"Use '{item.id}' references unknown texture '{item.texture}'",
                details={"texture": item.texture},
            )

    async def get_use_by_id_or_name(self, id_or_name: str) -> Union[Use, List[Use]]:
        """Return the use with that id, else every use with that name.

        An unknown name gives an empty list.
        """
        if self.collection.exists(id_or_name):
            return await self.get_by_id(id_or_name)
        return [self.read(r) for r in self.collection.search("textureUseName", id_or_name)]

    async def get_uses_by_texture(self, texture_id: Union[int, str]) -> List[Use]:
        """Uses of a texture; a non-numeric id matches nothing."""
        numeric = parse_texture_id(texture_id)
        if numeric is None:
            return []
        return [self.read(r) for r in self.collection.search("textureID", numeric)]

    async def get_uses_by_ids_and_edition(self, texture_ids: Iterable[Union[int, str]], edition: str) -> List[Use]:
        wanted = {parse_texture_id(i) for i in texture_ids} - {None}
        uses = await self.get_raw()
        return [u for u in uses.values() if u.texture in wanted and u.edition == edition]


class PathRepository(DocumentRepository[Path]):
    collection_name = collections.PATHS

    def from_record(self, record: Dict[str, Any]) -> Path:
        return map_path(LegacyPath.model_validate(record))

    def to_record(self, item: Path) -> Dict[str, Any]:
        return unmap_path(item).model_dump()

    async def validate_references(self, item: Union[Path, PathCreate]) -> None:
        if not collection(collections.USES).exists(item.use):
            raise ValidationError(
                f"Path '{item.name}' references unknown use '{item.use}'",
                details={"use": item.use},
            )

    async def create(self, payload: PathCreate) -> Path:
        await self.validate_references(payload)
        path_id = self.collection.add(unmap_path(payload).model_dump())
        return await self.get_by_id(path_id)

    async def get_paths_by_use_id(self, use_id: str) -> List[Path]:
        return [self.read(r) for r in self.collection.search("useID", use_id)]
