"""
Repository for user accounts.

Writes may raise ``DuplicateKeyError`` when the username or email is
already taken; translating that is the service layer's job.
"""

from typing import Any, Dict, List, Optional

from ..core import collections
from ..core.authorization import split_roles
from ..mappers.users import map_user, unmap_user
from ..schemas.user import User
from .base import DocumentRepository


class UserRepository(DocumentRepository[User]):
    collection_name = collections.USERS

    def from_record(self, record: Dict[str, Any]) -> User:
        return map_user(record)

    def to_record(self, item: User) -> Dict[str, Any]:
        return unmap_user(item)

    async def set(self, item: User) -> User:
        # keep the stored password hash and unknown roles, the domain record carries neither
        password = None
        extra_roles: List[str] = []
        if self.collection.exists(item.id):
            stored = self.collection.get(item.id)
            password = stored.get("password")
            _, extra_roles = split_roles(stored.get("roles") or [])
        self.collection.set(item.id, unmap_user(item, password=password, extra_roles=extra_roles))
        return await self.get_by_id(item.id)

    async def create(self, record: Dict[str, Any]) -> User:
        user_id = self.collection.add(record)
        return await self.get_by_id(user_id)

    async def find_all(self, **query: Any) -> List[User]:
        """Return users whose stored fields equal every keyword given."""
        if not query:
            return list((await self.get_raw()).values())
        (field, value), *rest = query.items()
        matches = self.collection.search(field, value)
        return [self.read(r) for r in matches if all(r.get(k) == v for k, v in rest)]

    async def find_one(self, **query: Any) -> Optional[User]:
        users = await self.find_all(**query)
        return users[0] if users else None

    async def find_with_token(self, id: str, token: str) -> Optional[User]:
        """Return the user when both id and verification token match."""
        if not token or not self.collection.exists(id):
            return None
        record = self.collection.get(id)
        if record.get("verificationToken") != token:
            return None
        return self.read(record)
