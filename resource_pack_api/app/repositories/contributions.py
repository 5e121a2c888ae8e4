"""
Repository for contributions and their joined read model.
"""

import logging
from typing import Any, Dict, List, Union

from ..core import collections
from ..core.db import collection
from ..core.errors import NotFoundError, ValidationError
from ..mappers.contributions import LegacyContribution, map_contribution, unmap_contribution
from ..mappers.textures import parse_texture_id, texture_from_record
from ..mappers.users import map_user
from ..schemas.contribution import Contribution, ContributionCreate, ContributionDetail
from ..schemas.user import UserRead
from .base import DocumentRepository, read_record

logger = logging.getLogger(__name__)


class ContributionRepository(DocumentRepository[Contribution]):
    collection_name = collections.CONTRIBUTIONS

    def from_record(self, record: Dict[str, Any]) -> Contribution:
        return map_contribution(LegacyContribution.model_validate(record))

    def to_record(self, item: Contribution) -> Dict[str, Any]:
        return unmap_contribution(item).model_dump(mode="json")

    async def validate_references(self, item: Union[Contribution, ContributionCreate]) -> None:
        if not collection(collections.TEXTURES).exists(str(item.texture)):
            raise ValidationError(
                f"Contribution references unknown texture '{item.texture}'",
                details={"texture": item.texture},
            )

    async def create(self, payload: ContributionCreate) -> Contribution:
        await self.validate_references(payload)
        record = {
            "date": payload.date,
            "res": payload.resolution.value,
            "textureID": payload.texture,
            "contributors": list(payload.contributors),
        }
        contribution_id = self.collection.add(record)
        return await self.get_by_id(contribution_id)

    async def get_by_texture(self, texture_id: Union[int, str]) -> List[Contribution]:
        numeric = parse_texture_id(texture_id)
        if numeric is None:
            return []
        return [self.read(r) for r in self.collection.search("textureID", numeric)]

    async def get_every_contribution_joined(self) -> List[ContributionDetail]:
        """Join every contribution with its texture and contributor accounts.

        Textures deleted since the contribution was recorded come back
        as ``texture=None``; contributor ids without an account are
        skipped.
        """
        textures = collection(collections.TEXTURES)
        users = collection(collections.USERS)
        details: List[ContributionDetail] = []
        for contribution in (await self.get_raw()).values():
            try:
                texture = read_record(
                    collections.TEXTURES, textures.get(str(contribution.texture)), texture_from_record
                )
            except NotFoundError:
                logger.warning(
                    "Contribution %s references missing texture %s", contribution.id, contribution.texture
                )
                texture = None
            contributors = [
                UserRead.model_validate(read_record(collections.USERS, u, map_user).model_dump())
                for u in users.search_keys(contribution.contributors)
            ]
            details.append(ContributionDetail(contribution=contribution, texture=texture, contributors=contributors))
        return details
