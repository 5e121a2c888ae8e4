"""
Repositories for the mods catalog, the modpacks and the pack versions list.
"""

from typing import Any, Dict

from ..core import collections
from ..core.db import collection
from ..mappers.mods import map_mod, unmap_mod
from ..schemas.mod import Mod, Modpack
from .base import DocumentRepository


class ModRepository(DocumentRepository[Mod]):
    collection_name = collections.MODS

    def from_record(self, record: Dict[str, Any]) -> Mod:
        return map_mod(record)

    def to_record(self, item: Mod) -> Dict[str, Any]:
        return unmap_mod(item)

    async def get_pack_versions(self) -> Dict[str, Any]:
        return collection(collections.PACK_VERSIONS).read_raw()

    async def get_name_in_database(self, id: str) -> str:
        return (await self.get_by_id(id)).name


class ModpackRepository(DocumentRepository[Modpack]):
    """Read access to the modpacks collection; nothing in the API writes it."""

    collection_name = collections.MODPACKS

    def from_record(self, record: Dict[str, Any]) -> Modpack:
        return Modpack.model_validate(record)

    def to_record(self, item: Modpack) -> Dict[str, Any]:
        return item.model_dump()
