"""
Texture endpoints.

Reads are public.  Writes need an authenticated caller with a
moderation role.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, status

from ....core.authorization import Principal, Role
from ....core.security import require_roles
from ....schemas.texture import Texture, TextureCreate, Use
from ....services.texture_service import TextureService

router = APIRouter()

moderator = require_roles(Role.ADMINISTRATOR, Role.MODERATOR)


def get_texture_service() -> TextureService:
    return TextureService()


@router.get("/raw", response_model=Dict[str, Texture])
async def get_raw_textures(service: TextureService = Depends(get_texture_service)) -> Dict[str, Texture]:
    """Return every texture keyed by id."""
    return await service.get_raw()


@router.get("/search", response_model=List[Texture])
async def search_textures(name: str, service: TextureService = Depends(get_texture_service)) -> List[Texture]:
    return await service.search_by_name(name)


@router.get("/{texture_id}", response_model=Texture)
async def get_texture(texture_id: str, service: TextureService = Depends(get_texture_service)) -> Texture:
    return await service.get_by_id(texture_id)


@router.get("/{texture_id}/uses", response_model=List[Use])
async def get_texture_uses(texture_id: str, service: TextureService = Depends(get_texture_service)) -> List[Use]:
    return await service.get_uses(texture_id)


@router.post("", response_model=Texture, status_code=status.HTTP_201_CREATED)
async def create_texture(
    body: TextureCreate,
    principal: Principal = Depends(moderator),
    service: TextureService = Depends(get_texture_service),
) -> Texture:
    return await service.create(body)


@router.put("/{texture_id}", response_model=Texture)
async def update_texture(
    texture_id: str,
    body: TextureCreate,
    principal: Principal = Depends(moderator),
    service: TextureService = Depends(get_texture_service),
) -> Texture:
    return await service.update(texture_id, body)


@router.delete("/{texture_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_texture(
    texture_id: str,
    principal: Principal = Depends(moderator),
    service: TextureService = Depends(get_texture_service),
) -> None:
    """Delete a texture together with its uses and their paths."""
    await service.delete(texture_id)
