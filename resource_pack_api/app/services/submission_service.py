"""
Business logic for pack submissions.

A submission may be created for a pack id that has no pack yet; such
submissions are readable on their own but do not show up in
``get_every_pack`` until the pack exists.
"""

import logging
from typing import Dict, Optional

from ..core.errors import ConflictError
from ..repositories.packs import SubmissionRepository
from ..schemas.pack import PackAll, Submission, SubmissionCreate

logger = logging.getLogger(__name__)


class SubmissionService:
    def __init__(self, submissions: Optional[SubmissionRepository] = None) -> None:
        self.submission_repo = submissions or SubmissionRepository()

    async def get_raw(self) -> Dict[str, Submission]:
        return await self.submission_repo.get_raw()

    async def get_by_id(self, pack_id: str) -> Submission:
        return await self.submission_repo.get_by_id(pack_id)

    async def get_every_pack(self) -> Dict[str, PackAll]:
        return await self.submission_repo.get_every_pack()

    async def create(self, pack_id: str, data: SubmissionCreate) -> Submission:
        if await self.submission_repo.exists(pack_id):
            raise ConflictError(f"Pack '{pack_id}' already has submission settings", details={"id": pack_id})
        submission = await self.submission_repo.create(pack_id, data)
        logger.info("Created submission settings for pack %s", pack_id)
        return submission

    async def update(self, pack_id: str, data: SubmissionCreate) -> Submission:
        await self.submission_repo.get_by_id(pack_id)
        submission = await self.submission_repo.update(pack_id, data)
        logger.info("Updated submission settings for pack %s", pack_id)
        return submission

    async def delete(self, pack_id: str) -> None:
        await self.submission_repo.delete(pack_id)
        logger.info("Deleted submission settings for pack %s", pack_id)
