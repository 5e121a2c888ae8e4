"""
Business logic for texture contributions.
"""

import logging
from typing import Dict, List, Optional

from ..repositories.contributions import ContributionRepository
from ..schemas.contribution import Contribution, ContributionCreate, ContributionDetail

logger = logging.getLogger(__name__)


class ContributionService:
    def __init__(self, contributions: Optional[ContributionRepository] = None) -> None:
        self.contribution_repo = contributions or ContributionRepository()

    async def get_raw(self) -> Dict[str, Contribution]:
        return await self.contribution_repo.get_raw()

    async def get_by_id(self, contribution_id: str) -> Contribution:
        return await self.contribution_repo.get_by_id(contribution_id)

    async def get_by_texture(self, texture_id: str) -> List[Contribution]:
        return await self.contribution_repo.get_by_texture(texture_id)

    async def get_every_contribution(self) -> List[ContributionDetail]:
        return await self.contribution_repo.get_every_contribution_joined()

    async def add_contribution(self, data: ContributionCreate) -> Contribution:
        contribution = await self.contribution_repo.create(data)
        logger.info(
            "Recorded %s contribution %s on texture %s", contribution.resolution.value, contribution.id, contribution.texture
        )
        return contribution

    async def delete_contribution(self, contribution_id: str) -> None:
        await self.contribution_repo.delete(contribution_id)
        logger.info("Deleted contribution %s", contribution_id)
