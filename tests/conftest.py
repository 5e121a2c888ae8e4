"""
Shared fixtures.

Every test gets its own SQLite file with all migrations applied, so
generated ids start at "1" in each test.
"""

from typing import Dict, List

import pytest

from resource_pack_api.app.core import collections
from resource_pack_api.app.core.config import settings
from resource_pack_api.app.core.db import collection, init_db
from resource_pack_api.app.core.errors import UpstreamError
from resource_pack_api.app.core.security import create_access_token
from resource_pack_api.app.integrations.mailer import OutboundEmail


class FakeMailer:
    """Records outgoing emails instead of sending them."""

    def __init__(self, fail: bool = False) -> None:
        self.sent: List[OutboundEmail] = []
        self.fail = fail

    async def send(self, message: OutboundEmail) -> None:
        if self.fail:
            raise UpstreamError("Email delivery failed", details={"to": message.to})
        self.sent.append(message)


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "resource_pack.db"))
    init_db()
    yield


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def make_user():
    """Store an account under an explicit id and return that id."""

    def _make_user(user_id: str, roles=(), username: str = None) -> str:
        collection(collections.USERS).set(
            user_id,
            {
                "username": username or f"user{user_id}",
                "email": f"user{user_id}@example.com",
                "password": "",
                "roles": list(roles),
                "isVerified": True,
                "verificationToken": None,
            },
        )
        return user_id

    return _make_user


def auth_header(user_id: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token({'sub': user_id})}"}
