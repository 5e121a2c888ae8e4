"""Texture path endpoints."""

from typing import Dict

from fastapi import APIRouter, Depends, status

from ....core.authorization import Principal, Role
from ....core.security import require_roles
from ....schemas.texture import Path, PathCreate
from ....services.texture_service import PathService

router = APIRouter()

moderator = require_roles(Role.ADMINISTRATOR, Role.MODERATOR)


def get_path_service() -> PathService:
    return PathService()


@router.get("/raw", response_model=Dict[str, Path])
async def get_raw_paths(service: PathService = Depends(get_path_service)) -> Dict[str, Path]:
    return await service.get_raw()


@router.get("/{path_id}", response_model=Path)
async def get_path(path_id: str, service: PathService = Depends(get_path_service)) -> Path:
    return await service.get_by_id(path_id)


@router.post("", response_model=Path, status_code=status.HTTP_201_CREATED)
async def create_path(
    body: PathCreate,
    principal: Principal = Depends(moderator),
    service: PathService = Depends(get_path_service),
) -> Path:
    return await service.create_path(body)


@router.put("/{path_id}", response_model=Path)
async def update_path(
    path_id: str,
    body: PathCreate,
    principal: Principal = Depends(moderator),
    service: PathService = Depends(get_path_service),
) -> Path:
    return await service.update_path(path_id, body)


@router.delete("/{path_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_path(
    path_id: str,
    principal: Principal = Depends(moderator),
    service: PathService = Depends(get_path_service),
) -> None:
    await service.delete_path(path_id)
