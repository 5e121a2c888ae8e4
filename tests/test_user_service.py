import pytest

from resource_pack_api.app.core import collections
from resource_pack_api.app.core.authorization import Role
from resource_pack_api.app.core.config import settings
from resource_pack_api.app.core.db import collection
from resource_pack_api.app.core.errors import ConflictError, NotFoundError, UpstreamError, ValidationError
from resource_pack_api.app.schemas.user import UserCreate
from resource_pack_api.app.services.user_service import UserService

from .conftest import FakeMailer


def _signup(username="steve", email="steve@example.com") -> UserCreate:
    return UserCreate(username=username, email=email, password="diamond-pickaxe")


@pytest.fixture
def service(mailer) -> UserService:
    return UserService(mailer=mailer)


@pytest.mark.asyncio
async def test_create_user_stores_hash_and_sends_verification(service, mailer, monkeypatch):
    monkeypatch.setattr(settings, "api_public_url", "https://api.example.com/v2/")
    user = await service.create_user(_signup())
    stored = collection(collections.USERS).get(user.id)

    assert stored["isVerified"] is False
    assert stored["password"] != "diamond-pickaxe"
    assert stored["password"].count("$") == 1
    assert user.roles == []

    (email,) = mailer.sent
    assert email.to == "steve@example.com"
    assert email.sender == settings.email_sender
    assert f"https://api.example.com/v2/auth/verify/{user.id}/{stored['verificationToken']}" in email.body


@pytest.mark.asyncio
@pytest.mark.parametrize("username, email", [("steve", "other@example.com"), ("alex", "steve@example.com")])
async def test_duplicate_account_conflicts_without_email(service, mailer, username, email):
    await service.create_user(_signup())
    with pytest.raises(ConflictError, match="Username or email already exists"):
        await service.create_user(_signup(username, email))
    assert len(mailer.sent) == 1
    assert len(await service.find_all()) == 1


@pytest.mark.asyncio
async def test_failed_verification_email_keeps_account():
    service = UserService(mailer=FakeMailer(fail=True))
    with pytest.raises(UpstreamError):
        await service.create_user(_signup())
    assert (await service.find_one(username="steve")) is not None


@pytest.mark.asyncio
async def test_add_role_is_idempotent(service, make_user):
    make_user("1", roles=["Translator"])
    once = await service.add_role("1", "Moderator")
    twice = await service.add_role("1", "Moderator")
    assert once.roles == twice.roles == [Role.TRANSLATOR, Role.MODERATOR]
    assert collection(collections.USERS).get("1")["roles"] == ["Translator", "Moderator"]


@pytest.mark.asyncio
async def test_delete_role_keeps_order_and_ignores_absent_role(service, make_user):
    make_user("1", roles=["Council", "Moderator", "Translator"])
    user = await service.delete_role("1", "Moderator")
    assert user.roles == [Role.COUNCIL, Role.TRANSLATOR]
    again = await service.delete_role("1", "Moderator")
    assert again.roles == [Role.COUNCIL, Role.TRANSLATOR]


@pytest.mark.asyncio
async def test_role_changes_validate_user_then_role(service, make_user):
    with pytest.raises(NotFoundError):
        await service.add_role("404", "NotARole")
    make_user("1")
    with pytest.raises(ValidationError):
        await service.add_role("1", "NotARole")
    with pytest.raises(ValidationError):
        await service.delete_role("1", "moderator")


@pytest.mark.asyncio
async def test_verify(service):
    user = await service.create_user(_signup())
    token = collection(collections.USERS).get(user.id)["verificationToken"]

    assert await service.verify(user.id, "wrong") is False
    assert await service.verify("404", token) is False
    assert (await service.get(user.id)).is_verified is False

    assert await service.verify(user.id, token) is True
    verified = await service.get(user.id)
    assert verified.is_verified is True
    assert verified.verification_token is None
    # the token is single use
    assert await service.verify(user.id, token) is False


@pytest.mark.asyncio
async def test_delete_returns_account_and_notifies(service, mailer, make_user):
    make_user("5", username="alex")
    deleted = await service.delete("5")
    assert deleted.username == "alex"
    assert mailer.sent[-1].to == "user5@example.com"
    with pytest.raises(NotFoundError):
        await service.get("5")
    with pytest.raises(NotFoundError):
        await service.delete("5")


@pytest.mark.asyncio
async def test_unknown_stored_role_is_skipped_and_kept(service, make_user):
    make_user("5", roles=["Designer", "Moderator"])
    assert (await service.get("5")).roles == [Role.MODERATOR]
    assert [u.id for u in await service.find_all()] == ["5"]

    user = await service.add_role("5", "Council")
    assert user.roles == [Role.MODERATOR, Role.COUNCIL]
    assert collection(collections.USERS).get("5")["roles"] == ["Moderator", "Council", "Designer"]

    await service.delete_role("5", "Moderator")
    assert collection(collections.USERS).get("5")["roles"] == ["Council", "Designer"]
