"""
CDN cache administration.

Both operations apply to every configured zone and are awaited inline;
nothing here tracks what the CDN does afterwards.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.config import settings
from ..core.errors import ValidationError
from ..integrations.cloudflare import CloudflareClient

logger = logging.getLogger(__name__)

DEV_MODES = ("on", "off")


class CloudflareService:
    def __init__(self, client: Optional[CloudflareClient] = None) -> None:
        self.client = client or CloudflareClient()

    async def purge(self) -> List[Dict[str, Any]]:
        """Purge the entire cache of every zone."""
        results = [await self.client.purge_everything(zone) for zone in settings.zone_ids()]
        logger.info("Purged CDN cache for %d zone(s)", len(results))
        return results

    async def dev(self, mode: str) -> List[Dict[str, Any]]:
        """Turn development mode on or off for every zone.

        Once on, the CDN turns it back off by itself after three hours.
        """
        if mode not in DEV_MODES:
            raise ValidationError(f"Development mode must be one of: {', '.join(DEV_MODES)}", details={"mode": mode})
        results = [await self.client.development_mode(zone, mode) for zone in settings.zone_ids()]
        logger.info("Set CDN development mode %s for %d zone(s)", mode, len(results))
        return results
