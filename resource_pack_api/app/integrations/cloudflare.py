"""
Client for the CDN administration API (Cloudflare v4).

Two operations per zone: purge the whole cache and toggle development
mode, which bypasses the cache for three hours before switching itself
off.  Failures raise ``UpstreamError``.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import requests

from ..core.config import settings
from ..core.errors import UpstreamError

logger = logging.getLogger(__name__)


class CloudflareClient:
    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, json_body: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{settings.cloudflare_api_url.rstrip('/')}{path}"
        try:
            response = self.session.request(
                method,
                url,
                json=json_body,
                headers={"Authorization": f"Bearer {settings.cloudflare_token}"},
                timeout=settings.http_timeout,
            )
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Cloudflare %s %s failed: %s", method, path, exc)
            raise UpstreamError("Cloudflare request failed", details={"path": path}) from exc
        if not body.get("success", False):
            logger.error("Cloudflare %s %s rejected: %s", method, path, body.get("errors"))
            raise UpstreamError("Cloudflare rejected the request", details={"errors": body.get("errors")})
        return body.get("result") or {}

    async def purge_everything(self, zone: str) -> Dict[str, Any]:
        return await asyncio.to_thread(
            self._request, "POST", f"/zones/{zone}/purge_cache", {"purge_everything": True}
        )

    async def development_mode(self, zone: str, value: str) -> Dict[str, Any]:
        return await asyncio.to_thread(
            self._request, "PATCH", f"/zones/{zone}/settings/development_mode", {"value": value}
        )
