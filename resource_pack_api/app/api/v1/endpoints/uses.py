"""Texture use endpoints."""

from typing import Dict, List, Union

from fastapi import APIRouter, Depends, status

from ....core.authorization import Principal, Role
from ....core.security import require_roles
from ....schemas.texture import Path, Use, UseCreate
from ....services.texture_service import UseService

router = APIRouter()

moderator = require_roles(Role.ADMINISTRATOR, Role.MODERATOR)


def get_use_service() -> UseService:
    return UseService()


@router.get("/raw", response_model=Dict[str, Use])
async def get_raw_uses(service: UseService = Depends(get_use_service)) -> Dict[str, Use]:
    return await service.get_raw()


@router.get("/{id_or_name}", response_model=Union[Use, List[Use]])
async def get_use(id_or_name: str, service: UseService = Depends(get_use_service)) -> Union[Use, List[Use]]:
    """Look a use up by id, or else return every use with that name."""
    return await service.get_use_by_id_or_name_and_catch(id_or_name)


@router.get("/{id_or_name}/paths", response_model=List[Path])
async def get_use_paths(id_or_name: str, service: UseService = Depends(get_use_service)) -> List[Path]:
    return await service.get_path_use_by_id_or_name(id_or_name)


@router.post("", response_model=Use, status_code=status.HTTP_201_CREATED)
async def create_use(
    body: Use,
    principal: Principal = Depends(moderator),
    service: UseService = Depends(get_use_service),
) -> Use:
    """Create a use under the id given in the body."""
    return await service.create_use(body)


@router.put("/{use_id}", response_model=Use)
async def update_use(
    use_id: str,
    body: UseCreate,
    principal: Principal = Depends(moderator),
    service: UseService = Depends(get_use_service),
) -> Use:
    return await service.update_use(use_id, body)


@router.delete("/{use_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_use(
    use_id: str,
    principal: Principal = Depends(moderator),
    service: UseService = Depends(get_use_service),
) -> None:
    await service.delete_use(use_id)
