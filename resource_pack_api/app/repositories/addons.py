"""
Repository for add-ons.
"""

from typing import Any, Dict, List

from ..core import collections
from ..schemas.addon import Addon, AddonStatus
from .base import DocumentRepository


class AddonRepository(DocumentRepository[Addon]):
    collection_name = collections.ADDONS

    def from_record(self, record: Dict[str, Any]) -> Addon:
        return Addon.model_validate(record)

    def to_record(self, item: Addon) -> Dict[str, Any]:
        return item.model_dump(mode="json")

    async def create(self, record: Dict[str, Any]) -> Addon:
        addon_id = self.collection.add(record)
        return await self.get_by_id(addon_id)

    async def get_by_status(self, status: AddonStatus) -> List[Addon]:
        return [self.read(r) for r in self.collection.search("approval.status", status.value)]

    async def get_by_author(self, user_id: str) -> List[Addon]:
        return [a for a in (await self.get_raw()).values() if user_id in a.authors]
