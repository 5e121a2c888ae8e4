import pytest

from resource_pack_api.app.core import collections
from resource_pack_api.app.core.db import collection
from resource_pack_api.app.core.errors import ConflictError, NotFoundError, ValidationError
from resource_pack_api.app.schemas.contribution import ContributionCreate
from resource_pack_api.app.schemas.pack import SubmissionCreate
from resource_pack_api.app.schemas.texture import PathCreate, TextureCreate, Use, UseCreate
from resource_pack_api.app.services.contribution_service import ContributionService
from resource_pack_api.app.services.submission_service import SubmissionService
from resource_pack_api.app.services.texture_service import PathService, TextureService, UseService


async def _stone_with_uses():
    textures = TextureService()
    texture = await textures.create(TextureCreate(name="Stone", tags=["block"]))
    uses = UseService()
    await uses.create_use(Use(id="1a", name="stone", texture=int(texture.id), edition="java"))
    await uses.create_use(Use(id="1b", name="stone", texture=int(texture.id), edition="bedrock"))
    paths = PathService()
    await paths.create_path(PathCreate(use="1a", name="assets/minecraft/textures/block/stone.png"))
    await paths.create_path(PathCreate(use="1b", name="textures/blocks/stone.png"))
    return texture


@pytest.mark.asyncio
async def test_create_texture_then_read_raw():
    texture = await TextureService().create(TextureCreate(name="Stone", tags=["block"]))
    assert texture.id == "1"
    raw = await TextureService().get_raw()
    assert raw["1"].model_dump() == {"id": "1", "name": "Stone", "tags": ["block"]}


@pytest.mark.asyncio
async def test_texture_delete_cascades_to_uses_and_paths():
    texture = await _stone_with_uses()
    await TextureService().delete(texture.id)
    assert collection(collections.TEXTURES).read_raw() == {}
    assert collection(collections.USES).read_raw() == {}
    assert collection(collections.PATHS).read_raw() == {}


@pytest.mark.asyncio
async def test_use_delete_cascades_to_its_paths_only():
    await _stone_with_uses()
    await UseService().delete_use("1a")
    remaining = await PathService().get_raw()
    assert [p.use for p in remaining.values()] == ["1b"]


@pytest.mark.asyncio
async def test_create_use_conflicts_on_existing_id():
    await _stone_with_uses()
    with pytest.raises(ConflictError):
        await UseService().create_use(Use(id="1a", name="stone", texture=1, edition="java"))


@pytest.mark.asyncio
async def test_update_use_requires_existing_use_and_texture():
    await _stone_with_uses()
    uses = UseService()
    with pytest.raises(NotFoundError):
        await uses.update_use("9z", UseCreate(name="stone", texture=1, edition="java"))
    with pytest.raises(ValidationError):
        await uses.update_use("1a", UseCreate(name="stone", texture=99, edition="java"))
    updated = await uses.update_use("1a", UseCreate(name="smooth_stone", texture=1, edition="java"))
    assert updated.name == "smooth_stone"


@pytest.mark.asyncio
async def test_use_lookup_by_name_and_paths():
    await _stone_with_uses()
    uses = UseService()
    assert [u.edition for u in await uses.get_use_by_id_or_name_and_catch("stone")] == ["java", "bedrock"]
    with pytest.raises(NotFoundError):
        await uses.get_use_by_id_or_name_and_catch("granite")
    paths = await uses.get_path_use_by_id_or_name("stone")
    assert [p.use for p in paths] == ["1a", "1b"]
    assert [u.id for u in await TextureService().get_uses("1")] == ["1a", "1b"]


@pytest.mark.asyncio
async def test_contribution_service_round_trip(make_user):
    make_user("u1")
    await TextureService().create(TextureCreate(name="Stone"))
    service = ContributionService()
    contribution = await service.add_contribution(
        ContributionCreate(date=1700000000000, resolution="c64", texture=1, contributors=["u1"])
    )
    assert [c.id for c in await service.get_by_texture("1")] == [contribution.id]
    (detail,) = await service.get_every_contribution()
    assert detail.contributors[0].username == "useru1"
    await service.delete_contribution(contribution.id)
    with pytest.raises(NotFoundError):
        await service.get_by_id(contribution.id)


@pytest.mark.asyncio
async def test_submission_create_conflicts_and_update_requires_existing():
    service = SubmissionService()
    await service.create("faithful_32x", SubmissionCreate(time_to_results=3600))
    with pytest.raises(ConflictError):
        await service.create("faithful_32x", SubmissionCreate())
    with pytest.raises(NotFoundError):
        await service.update("faithful_64x", SubmissionCreate())
    updated = await service.update("faithful_32x", SubmissionCreate(time_to_results=7200))
    assert updated.time_to_results == 7200
    await service.delete("faithful_32x")
    with pytest.raises(NotFoundError):
        await service.delete("faithful_32x")
