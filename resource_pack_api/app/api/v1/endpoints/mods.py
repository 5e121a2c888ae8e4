"""
Mod endpoints.

``/{id}/thumbnail`` and ``/{id}/curseforge/name`` query the external
mods catalog on every call; the other routes read the local store.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ....schemas.mod import Mod, Modpack
from ....services.mod_service import ModService

router = APIRouter()


def get_mod_service() -> ModService:
    return ModService()


@router.get("/raw", response_model=Dict[str, Mod])
async def get_raw_mods(service: ModService = Depends(get_mod_service)) -> Dict[str, Mod]:
    return await service.get_raw()


@router.get("/modpacks/raw", response_model=Dict[str, Modpack])
async def get_raw_modpacks(service: ModService = Depends(get_mod_service)) -> Dict[str, Modpack]:
    return await service.get_modpacks()


@router.get("/pack_versions")
async def get_pack_versions(service: ModService = Depends(get_mod_service)) -> Dict[str, Any]:
    return await service.get_pack_versions()


@router.get("/{mod_id}/thumbnail")
async def get_thumbnail(mod_id: int, service: ModService = Depends(get_mod_service)) -> str:
    return await service.get_thumbnail(mod_id)


@router.get("/{mod_id}/curseforge/name")
async def get_curseforge_name(mod_id: int, service: ModService = Depends(get_mod_service)) -> str:
    return await service.get_curseforge_name(mod_id)


@router.get("/{mod_id}/name")
async def get_name_in_database(mod_id: str, service: ModService = Depends(get_mod_service)) -> str:
    return await service.get_name_in_database(mod_id)
