"""
Repositories for packs and pack submissions.

Submissions are keyed by the id of the pack they configure, but the
store does not tie the two together: a submission can outlive its
pack or be created before it.
"""

import logging
from typing import Any, Dict, Optional

from ..core import collections
from ..core.errors import NotFoundError
from ..schemas.pack import Pack, PackAll, Submission, SubmissionCreate
from .base import DocumentRepository

logger = logging.getLogger(__name__)


class PackRepository(DocumentRepository[Pack]):
    collection_name = collections.PACKS

    def from_record(self, record: Dict[str, Any]) -> Pack:
        return Pack.model_validate(record)

    def to_record(self, item: Pack) -> Dict[str, Any]:
        return item.model_dump()


class SubmissionRepository(DocumentRepository[Submission]):
    collection_name = collections.SUBMISSIONS

    def __init__(self, packs: Optional[PackRepository] = None) -> None:
        super().__init__()
        self.packs = packs or PackRepository()

    def from_record(self, record: Dict[str, Any]) -> Submission:
        return Submission.model_validate(record)

    def to_record(self, item: Submission) -> Dict[str, Any]:
        return item.model_dump()

    async def create(self, pack_id: str, payload: SubmissionCreate) -> Submission:
        return await self.set(self._keyed(pack_id, payload))

    async def update(self, pack_id: str, payload: SubmissionCreate) -> Submission:
        return await self.set(self._keyed(pack_id, payload))

    @staticmethod
    def _keyed(pack_id: str, payload: SubmissionCreate) -> Submission:
        # the pack id always wins over any id smuggled into the body
        body = payload.model_dump()
        body.pop("id", None)
        return Submission(id=pack_id, **body)

    async def get_every_pack(self) -> Dict[str, PackAll]:
        """Return every submission merged into its pack, keyed by pack id.

        A submission whose pack cannot be found is left out of the
        result and logged; it stays readable through ``get_raw``.
        Any other store failure aborts the whole call.
        """
        result: Dict[str, PackAll] = {}
        for pack_id, submission in self.collection.read_raw().items():
            try:
                pack = await self.packs.get_by_id(pack_id)
            except NotFoundError:
                logger.warning("Submission %s has no matching pack, leaving it out", pack_id)
                continue
            result[pack_id] = PackAll.model_validate({**pack.model_dump(), "submission": submission, "id": submission["id"]})
        return result
