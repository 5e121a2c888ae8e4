"""
Business logic for the mods catalog.

Names and thumbnails of catalog-listed mods come from the external
catalog; everything else is read from the document store.
"""

from typing import Any, Dict, Optional

from ..integrations.curseforge import CurseForgeClient
from ..repositories.mods import ModpackRepository, ModRepository
from ..schemas.mod import Mod, Modpack


class ModService:
    def __init__(
        self,
        mods: Optional[ModRepository] = None,
        catalog: Optional[CurseForgeClient] = None,
        modpacks: Optional[ModpackRepository] = None,
    ) -> None:
        self.mod_repo = mods or ModRepository()
        self.modpack_repo = modpacks or ModpackRepository()
        self.catalog = catalog or CurseForgeClient()

    async def get_raw(self) -> Dict[str, Mod]:
        return await self.mod_repo.get_raw()

    async def get_modpacks(self) -> Dict[str, Modpack]:
        return await self.modpack_repo.get_raw()

    async def get_pack_versions(self) -> Dict[str, Any]:
        return await self.mod_repo.get_pack_versions()

    async def get_thumbnail(self, mod_id: int) -> str:
        return await self.catalog.thumbnail_url(mod_id)

    async def get_curseforge_name(self, mod_id: int) -> str:
        return await self.catalog.mod_name(mod_id)

    async def get_name_in_database(self, mod_id: str) -> str:
        return await self.mod_repo.get_name_in_database(mod_id)
