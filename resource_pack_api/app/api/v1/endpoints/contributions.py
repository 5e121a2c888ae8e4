"""Contribution endpoints."""

from typing import Dict, List

from fastapi import APIRouter, Depends, status

from ....core.authorization import Principal, Role
from ....core.security import require_roles
from ....schemas.contribution import Contribution, ContributionCreate, ContributionDetail
from ....services.contribution_service import ContributionService

router = APIRouter()

moderator = require_roles(Role.ADMINISTRATOR, Role.MODERATOR)


def get_contribution_service() -> ContributionService:
    return ContributionService()


@router.get("/raw", response_model=Dict[str, Contribution])
async def get_raw_contributions(
    service: ContributionService = Depends(get_contribution_service),
) -> Dict[str, Contribution]:
    return await service.get_raw()


@router.get("/all", response_model=List[ContributionDetail])
async def get_every_contribution(
    service: ContributionService = Depends(get_contribution_service),
) -> List[ContributionDetail]:
    """Every contribution joined with its texture and contributors."""
    return await service.get_every_contribution()


@router.get("/texture/{texture_id}", response_model=List[Contribution])
async def get_texture_contributions(
    texture_id: str, service: ContributionService = Depends(get_contribution_service)
) -> List[Contribution]:
    return await service.get_by_texture(texture_id)


@router.get("/{contribution_id}", response_model=Contribution)
async def get_contribution(
    contribution_id: str, service: ContributionService = Depends(get_contribution_service)
) -> Contribution:
    return await service.get_by_id(contribution_id)


@router.post("", response_model=Contribution, status_code=status.HTTP_201_CREATED)
async def add_contribution(
    body: ContributionCreate,
    principal: Principal = Depends(moderator),
    service: ContributionService = Depends(get_contribution_service),
) -> Contribution:
    return await service.add_contribution(body)


@router.delete("/{contribution_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contribution(
    contribution_id: str,
    principal: Principal = Depends(moderator),
    service: ContributionService = Depends(get_contribution_service),
) -> None:
    await service.delete_contribution(contribution_id)
