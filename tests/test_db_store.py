import pytest

from resource_pack_api.app.core import collections
from resource_pack_api.app.core.db import collection, get_connection, init_db
from resource_pack_api.app.core.errors import DuplicateKeyError, NotFoundError


def test_init_db_is_idempotent():
    init_db()
    conn = get_connection()
    try:
        versions = [row["version"] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
    finally:
        conn.close()
    assert versions == [1, 2]


def test_add_generates_sequential_string_ids():
    textures = collection(collections.TEXTURES)
    assert textures.add({"name": "Stone", "type": ["block"]}) == "1"
    assert textures.add({"name": "Dirt", "type": ["block"]}) == "2"
    assert textures.get("1") == {"id": "1", "name": "Stone", "type": ["block"]}


def test_add_skips_ids_taken_by_explicit_writes():
    textures = collection(collections.TEXTURES)
    textures.set("1", {"name": "Stone"})
    assert textures.add({"name": "Dirt"}) == "2"


def test_sequences_are_per_collection():
    assert collection(collections.TEXTURES).add({"name": "Stone"}) == "1"
    assert collection(collections.ADDONS).add({"name": "Addon"}) == "1"


def test_read_raw_keeps_insertion_order():
    packs = collection(collections.PACKS)
    for key in ("b", "a", "c"):
        packs.set(key, {"name": key})
    assert list(packs.read_raw()) == ["b", "a", "c"]


def test_set_upserts_and_key_wins_over_body_id():
    packs = collection(collections.PACKS)
    packs.set("faithful_32x", {"id": "other", "name": "Faithful"})
    confirmation = packs.set("faithful_32x", {"name": "Faithful 32x"})
    assert confirmation.id == "faithful_32x"
    assert packs.read_raw() == {"faithful_32x": {"id": "faithful_32x", "name": "Faithful 32x"}}


def test_get_missing_raises_not_found():
    with pytest.raises(NotFoundError):
        collection(collections.TEXTURES).get("404")


def test_second_remove_fails():
    textures = collection(collections.TEXTURES)
    key = textures.add({"name": "Stone"})
    assert textures.remove(key).message == "Removed"
    with pytest.raises(NotFoundError):
        textures.remove(key)
    assert not textures.exists(key)


def test_search_matches_top_level_and_nested_fields():
    addons = collection(collections.ADDONS)
    addons.add({"name": "a", "approval": {"status": "pending"}, "public": True})
    addons.add({"name": "b", "approval": {"status": "approved"}, "public": False})
    assert [r["name"] for r in addons.search("approval.status", "approved")] == ["b"]
    assert [r["name"] for r in addons.search("public", True)] == ["a"]
    assert addons.search("name", "missing") == []


def test_search_keys_follows_request_order_and_skips_unknown():
    users = collection(collections.USERS)
    users.set("u1", {"username": "one", "email": "one@example.com"})
    users.set("u2", {"username": "two", "email": "two@example.com"})
    assert [r["id"] for r in users.search_keys(["u2", "ghost", "u1"])] == ["u2", "u1"]
    assert users.search_keys([]) == []


def test_duplicate_username_or_email_is_rejected():
    users = collection(collections.USERS)
    users.add({"username": "steve", "email": "steve@example.com"})
    with pytest.raises(DuplicateKeyError):
        users.add({"username": "steve", "email": "other@example.com"})
    with pytest.raises(DuplicateKeyError):
        users.set("9", {"username": "alex", "email": "steve@example.com"})
    assert len(users.read_raw()) == 1


def test_rewriting_a_user_does_not_collide_with_itself():
    users = collection(collections.USERS)
    key = users.add({"username": "steve", "email": "steve@example.com"})
    users.set(key, {"username": "steve", "email": "steve@example.com", "roles": ["Moderator"]})
    assert users.get(key)["roles"] == ["Moderator"]


def test_uniqueness_only_applies_to_users():
    textures = collection(collections.TEXTURES)
    textures.add({"username": "steve"})
    textures.add({"username": "steve"})
    assert len(textures.read_raw()) == 2
