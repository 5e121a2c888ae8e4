"""CDN administration endpoints, restricted to administrators."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from ....core.authorization import Principal, Role
from ....core.security import require_roles
from ....services.cloudflare_service import CloudflareService

router = APIRouter()


def get_cloudflare_service() -> CloudflareService:
    return CloudflareService()


@router.post("/purge")
async def purge_cache(
    principal: Principal = Depends(require_roles(Role.ADMINISTRATOR)),
    service: CloudflareService = Depends(get_cloudflare_service),
) -> List[Dict[str, Any]]:
    return await service.purge()


@router.post("/dev/{mode}")
async def set_development_mode(
    mode: str,
    principal: Principal = Depends(require_roles(Role.ADMINISTRATOR)),
    service: CloudflareService = Depends(get_cloudflare_service),
) -> List[Dict[str, Any]]:
    """Switch development mode ``on`` or ``off``.  The CDN turns it off after three hours."""
    return await service.dev(mode)
