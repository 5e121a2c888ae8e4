import pydantic
import pytest

from resource_pack_api.app.core.authorization import Role
from resource_pack_api.app.core.errors import ValidationError
from resource_pack_api.app.mappers.contributions import (
    LegacyContribution,
    map_contribution,
    map_contributions,
    unmap_contribution,
)
from resource_pack_api.app.mappers.mods import map_mod, unmap_mod
from resource_pack_api.app.mappers.textures import (
    LegacyPath,
    LegacyPathCreation,
    LegacyTexture,
    LegacyUse,
    map_path,
    map_paths,
    map_texture,
    map_textures,
    map_use,
    map_uses,
    texture_from_record,
    unmap_path,
    unmap_texture,
    unmap_use,
)
from resource_pack_api.app.mappers.users import map_user, unmap_user
from resource_pack_api.app.schemas.contribution import Resolution
from resource_pack_api.app.schemas.texture import PathCreate, Texture, TextureCreate


@pytest.mark.parametrize(
    "legacy",
    [
        LegacyTexture(id="1", name="Stone", type=["block"]),
        LegacyTexture(id="2", name="Dirt", type=[]),
        LegacyTexture(id="3", name="Oak Log", type=["block", "wood", "log"]),
        LegacyTexture(id="4", name="Stone ", type=["block"]),
        LegacyTexture(id="5", name="", type=[]),
    ],
)
def test_texture_round_trip(legacy):
    assert unmap_texture(map_texture(legacy)) == legacy


def test_texture_input_is_stripped_but_stored_names_are_not():
    assert TextureCreate(name="  Stone  ").name == "Stone"
    with pytest.raises(pydantic.ValidationError):
        TextureCreate(name="   ")
    assert map_texture(LegacyTexture(id="1", name=" Stone ", type=[])).name == " Stone "


def test_map_texture_renames_type_to_tags():
    texture = map_texture(LegacyTexture(id="1", name="Stone", type=["block"]))
    assert texture == Texture(id="1", name="Stone", tags=["block"])


def test_map_texture_leaves_domain_texture_alone():
    texture = Texture(id="1", name="Stone", tags=["block"])
    assert map_texture(texture) is texture


def test_texture_from_record_reads_both_layouts():
    legacy = texture_from_record({"id": "1", "name": "Stone", "type": ["block"]})
    migrated = texture_from_record({"id": "1", "name": "Stone", "tags": ["block"]})
    assert legacy == migrated == Texture(id="1", name="Stone", tags=["block"])


def test_map_textures_keeps_order():
    textures = map_textures([LegacyTexture(id="2", name="b"), LegacyTexture(id="1", name="a")])
    assert [t.id for t in textures] == ["2", "1"]


def test_map_use_takes_first_edition():
    use = map_use(LegacyUse(id="10", textureID=1, textureUseName="stone", editions=["java", "bedrock"]))
    assert use.edition == "java"
    assert use.texture == 1
    assert use.name == "stone"


def test_use_round_trip_drops_extra_editions():
    legacy = LegacyUse(id="10", textureID=1, textureUseName="stone", editions=["java", "bedrock"])
    back = unmap_use(map_use(legacy))
    assert (back.id, back.textureID, back.textureUseName) == ("10", 1, "stone")
    assert back.editions == ["java"]
    assert back != legacy


def test_use_round_trip_with_single_edition_is_exact():
    legacy = LegacyUse(id="10", textureID=1, textureUseName="stone", editions=["bedrock"])
    assert unmap_use(map_use(legacy)) == legacy


def test_map_use_without_edition_is_rejected():
    with pytest.raises(ValidationError):
        map_use(LegacyUse(id="10", textureID=1, textureUseName="stone", editions=[]))
    with pytest.raises(ValidationError):
        map_uses([LegacyUse(id="11", textureID=1, textureUseName="stone", editions=[])])


def test_path_round_trip():
    legacy = LegacyPath(id="7", useID="10", path="textures/block/stone.png", versions=["1.20", "1.21"], mcmeta=True)
    path = map_path(legacy)
    assert path.use == "10"
    assert path.name == "textures/block/stone.png"
    assert unmap_path(path) == legacy
    assert map_paths([legacy, legacy]) == [path, path]


def test_unmap_path_creation_has_no_id():
    created = unmap_path(PathCreate(use="10", name="textures/block/stone.png", versions=["1.20", "1.20"]))
    assert isinstance(created, LegacyPathCreation)
    assert not isinstance(created, LegacyPath)
    assert created.versions == ["1.20"]


def test_contribution_round_trip():
    legacy = LegacyContribution(id="3", date=1700000000000, res="c32", textureID=1, contributors=["u2", "u1"])
    contribution = map_contribution(legacy)
    assert contribution.resolution == Resolution.C32
    assert contribution.contributors == ["u2", "u1"]
    assert unmap_contribution(contribution) == legacy
    assert map_contributions([legacy]) == [contribution]


def test_map_mod_normalizes_missing_catalog_url():
    mod = map_mod({"id": "custom", "name": "Custom Mod", "curse_url": ""})
    assert mod.curse_url is None
    assert mod.aliases == []
    assert mod.resource_pack.versions == []
    assert unmap_mod(mod)["curse_url"] is None


def test_user_mapping_keeps_password_out_of_domain():
    record = {
        "id": "1",
        "username": "steve",
        "email": "steve@example.com",
        "password": "salt$hash",
        "roles": ["Moderator"],
        "isVerified": False,
        "verificationToken": "abc",
    }
    user = map_user(record)
    assert not hasattr(user, "password")
    assert user.verification_token == "abc"
    assert unmap_user(user, password="salt$hash") == record
    assert "password" not in unmap_user(user)


def test_user_mapping_skips_unknown_roles(caplog):
    record = {"id": "1", "username": "steve", "roles": ["Designer", "Moderator"]}
    with caplog.at_level("WARNING"):
        user = map_user(record)
    assert user.roles == [Role.MODERATOR]
    assert "Designer" in caplog.text
    assert unmap_user(user, extra_roles=["Designer"])["roles"] == ["Moderator", "Designer"]
