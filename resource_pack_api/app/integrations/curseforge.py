"""
Client for the external mods catalog (CurseForge API v1).

Only lookups by project id are needed.  The catalog sometimes returns
``null`` for nested objects such as ``logo``; a missing or null field
is reported as ``NotFoundError`` rather than crashing on the shape.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import requests

from ..core.config import settings
from ..core.errors import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)


class CurseForgeClient:
    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.session = session or requests.Session()

    def _get(self, path: str) -> Dict[str, Any]:
        url = f"{settings.curseforge_api_url.rstrip('/')}{path}"
        try:
            response = self.session.get(
                url,
                headers={"x-api-key": settings.curseforge_api_key, "Accept": "application/json"},
                timeout=settings.http_timeout,
            )
        except requests.RequestException as exc:
            logger.error("Catalog request to %s failed: %s", url, exc)
            raise UpstreamError("Mods catalog unreachable") from exc
        if response.status_code == 404:
            raise NotFoundError("Mod not found in the catalog", details={"url": url})
        try:
            response.raise_for_status()
            return response.json()
        except (requests.HTTPError, ValueError) as exc:
            logger.error("Catalog request to %s failed (%s): %s", url, response.status_code, exc)
            raise UpstreamError("Mods catalog returned an error", details={"status": response.status_code}) from exc

    async def get_mod(self, mod_id: int) -> Dict[str, Any]:
        """Return the catalog's ``data`` object for ``mod_id``."""
        body = await asyncio.to_thread(self._get, f"/mods/{mod_id}")
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise NotFoundError("Mod not found in the catalog", details={"id": mod_id})
        return data

    async def thumbnail_url(self, mod_id: int) -> str:
        data = await self.get_mod(mod_id)
        logo = data.get("logo")
        url = logo.get("thumbnailUrl") if isinstance(logo, dict) else None
        if not url:
            raise NotFoundError("No thumbnail found for this mod", details={"id": mod_id})
        return url

    async def mod_name(self, mod_id: int) -> str:
        data = await self.get_mod(mod_id)
        name = data.get("name")
        if not name:
            raise NotFoundError("No name found for this mod", details={"id": mod_id})
        return name
