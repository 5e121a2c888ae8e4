"""
User endpoints.

Registration and email verification are public.  Listing users,
deleting accounts and changing roles are restricted to administrators.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from ....core.authorization import Principal, Role
from ....core.security import require_roles
from ....schemas.user import RoleChange, UserCreate, UserRead
from ....services.user_service import UserService

router = APIRouter()

admin = require_roles(Role.ADMINISTRATOR)


def get_user_service() -> UserService:
    return UserService()


@router.post("/users", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(body: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Register an account and mail its verification link.

    Responds 409 when the username or email is taken.
    """
    return await service.create_user(body)


@router.get("/users", response_model=List[UserRead])
async def list_users(
    username: Optional[str] = None,
    principal: Principal = Depends(admin),
    service: UserService = Depends(get_user_service),
) -> List[UserRead]:
    if username is not None:
        return await service.find_all(username=username)
    return await service.find_all()


@router.get("/users/{user_id}", response_model=UserRead)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    return await service.get(user_id)


@router.delete("/users/{user_id}", response_model=UserRead)
async def delete_user(
    user_id: str,
    principal: Principal = Depends(admin),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Delete an account, notify its owner by email and return it."""
    return await service.delete(user_id)


@router.put("/users/{user_id}/roles", response_model=UserRead)
async def add_role(
    user_id: str,
    body: RoleChange,
    principal: Principal = Depends(admin),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    return await service.add_role(user_id, body.role)


@router.delete("/users/{user_id}/roles/{role}", response_model=UserRead)
async def delete_role(
    user_id: str,
    role: str,
    principal: Principal = Depends(admin),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    return await service.delete_role(user_id, role)


@router.get("/auth/verify/{user_id}/{token}")
async def verify_email(user_id: str, token: str, service: UserService = Depends(get_user_service)) -> dict:
    """Confirm an email address with the link sent at registration."""
    return {"verified": await service.verify(user_id, token)}
