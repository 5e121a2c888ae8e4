"""
Add-on endpoints.

Every mutating route needs an authenticated caller.  Which caller may
do what (authors versus moderators, review state) is decided by
``AddonService``; this module only wires HTTP to it.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, status

from ....core.authorization import Principal
from ....core.security import get_current_principal
from ....schemas.addon import Addon, AddonCreate, AddonReviewBody, AddonStatus
from ....services.addon_service import AddonService

router = APIRouter()


def get_addon_service() -> AddonService:
    return AddonService()


@router.get("/raw", response_model=Dict[str, Addon])
async def get_raw_addons(service: AddonService = Depends(get_addon_service)) -> Dict[str, Addon]:
    return await service.get_raw()


@router.get("/status/{addon_status}", response_model=List[Addon])
async def get_addons_by_status(
    addon_status: AddonStatus, service: AddonService = Depends(get_addon_service)
) -> List[Addon]:
    return await service.get_by_status(addon_status)


@router.get("/author/{user_id}", response_model=List[Addon])
async def get_addons_by_author(user_id: str, service: AddonService = Depends(get_addon_service)) -> List[Addon]:
    return await service.get_by_author(user_id)


@router.get("/{addon_id}", response_model=Addon)
async def get_addon(addon_id: str, service: AddonService = Depends(get_addon_service)) -> Addon:
    return await service.get_addon(addon_id)


@router.post("", response_model=Addon, status_code=status.HTTP_201_CREATED)
async def create_addon(
    body: AddonCreate,
    principal: Principal = Depends(get_current_principal),
    service: AddonService = Depends(get_addon_service),
) -> Addon:
    return await service.create(body, principal)


@router.patch("/{addon_id}", response_model=Addon)
async def update_addon(
    addon_id: str,
    body: AddonCreate,
    principal: Principal = Depends(get_current_principal),
    service: AddonService = Depends(get_addon_service),
) -> Addon:
    return await service.update(addon_id, body, principal)


@router.delete("/{addon_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_addon(
    addon_id: str,
    principal: Principal = Depends(get_current_principal),
    service: AddonService = Depends(get_addon_service),
) -> None:
    await service.delete(addon_id, principal)


@router.put("/{addon_id}/review", response_model=Addon)
async def review_addon(
    addon_id: str,
    body: AddonReviewBody,
    principal: Principal = Depends(get_current_principal),
    service: AddonService = Depends(get_addon_service),
) -> Addon:
    return await service.review(addon_id, body, principal)


@router.put("/{addon_id}/reopen", response_model=Addon)
async def reopen_addon(
    addon_id: str,
    principal: Principal = Depends(get_current_principal),
    service: AddonService = Depends(get_addon_service),
) -> Addon:
    return await service.reopen(addon_id, principal)
