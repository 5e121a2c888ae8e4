"""
Pack submission endpoints.

Submissions are addressed by the id of the pack they belong to.
"""

from typing import Dict

from fastapi import APIRouter, Depends, status

from ....core.authorization import Principal, Role
from ....core.security import require_roles
from ....schemas.pack import PackAll, Submission, SubmissionCreate
from ....services.submission_service import SubmissionService

router = APIRouter()

moderator = require_roles(Role.ADMINISTRATOR, Role.MODERATOR)


def get_submission_service() -> SubmissionService:
    return SubmissionService()


@router.get("/raw", response_model=Dict[str, Submission])
async def get_raw_submissions(service: SubmissionService = Depends(get_submission_service)) -> Dict[str, Submission]:
    return await service.get_raw()


@router.get("/all", response_model=Dict[str, PackAll])
async def get_every_pack(service: SubmissionService = Depends(get_submission_service)) -> Dict[str, PackAll]:
    """Every submission merged into its pack.  Submissions without a pack are left out."""
    return await service.get_every_pack()


@router.get("/{pack_id}", response_model=Submission)
async def get_submission(pack_id: str, service: SubmissionService = Depends(get_submission_service)) -> Submission:
    return await service.get_by_id(pack_id)


@router.post("/{pack_id}", response_model=Submission, status_code=status.HTTP_201_CREATED)
async def create_submission(
    pack_id: str,
    body: SubmissionCreate,
    principal: Principal = Depends(moderator),
    service: SubmissionService = Depends(get_submission_service),
) -> Submission:
    return await service.create(pack_id, body)


@router.put("/{pack_id}", response_model=Submission)
async def update_submission(
    pack_id: str,
    body: SubmissionCreate,
    principal: Principal = Depends(moderator),
    service: SubmissionService = Depends(get_submission_service),
) -> Submission:
    return await service.update(pack_id, body)


@router.delete("/{pack_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_submission(
    pack_id: str,
    principal: Principal = Depends(moderator),
    service: SubmissionService = Depends(get_submission_service),
) -> None:
    await service.delete(pack_id)
