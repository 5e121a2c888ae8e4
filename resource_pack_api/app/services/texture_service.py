"""
Business logic for textures, texture uses and texture paths.

Deleting cascades downwards: a texture takes its uses with it and a
use takes its paths with it.  Each step is a separate store write, so
a failure midway leaves the already deleted children deleted.
"""

import logging
from typing import Dict, Iterable, List, Optional, Union

from ..core.errors import ConflictError, NotFoundError
from ..repositories.textures import PathRepository, TextureRepository, UseRepository
from ..schemas.texture import Path, PathCreate, Texture, TextureCreate, Use, UseCreate

logger = logging.getLogger(__name__)


class PathService:
    """Service for texture paths."""

    def __init__(self, paths: Optional[PathRepository] = None) -> None:
        self.path_repo = paths or PathRepository()

    async def get_raw(self) -> Dict[str, Path]:
        return await self.path_repo.get_raw()

    async def get_by_id(self, path_id: str) -> Path:
        return await self.path_repo.get_by_id(path_id)

    async def get_path_by_use_id(self, use_id: str) -> List[Path]:
        return await self.path_repo.get_paths_by_use_id(use_id)

    async def create_path(self, data: PathCreate) -> Path:
        path = await self.path_repo.create(data)
        logger.info("Created path %s (%s) for use %s", path.id, path.name, path.use)
        return path

    async def update_path(self, path_id: str, data: PathCreate) -> Path:
        await self.path_repo.get_by_id(path_id)
        path = await self.path_repo.set(Path(id=path_id, **data.model_dump()))
        logger.info("Updated path %s", path_id)
        return path

    async def delete_path(self, path_id: str) -> None:
        await self.path_repo.delete(path_id)
        logger.info("Deleted path %s", path_id)


class UseService:
    """Service for texture uses.

    Uses are looked up either by id or, failing that, by name; a name
    can match several uses so that lookup returns a list.
    """

    def __init__(self, uses: Optional[UseRepository] = None, path_service: Optional[PathService] = None) -> None:
        self.use_repo = uses or UseRepository()
        self.path_service = path_service or PathService()

    async def get_raw(self) -> Dict[str, Use]:
        return await self.use_repo.get_raw()

    async def get_use_by_id_or_name(self, id_or_name: str) -> Union[Use, List[Use]]:
        return await self.use_repo.get_use_by_id_or_name(id_or_name)

    async def get_use_by_id_or_name_and_catch(self, id_or_name: str) -> Union[Use, List[Use]]:
        """Same as ``get_use_by_id_or_name`` but an empty result is ``NotFoundError``."""
        result = await self.get_use_by_id_or_name(id_or_name)
        if isinstance(result, list) and not result:
            raise NotFoundError("Use ID not found", details={"id": id_or_name})
        return result

    async def get_path_use_by_id_or_name(self, id_or_name: str) -> List[Path]:
        result = await self.get_use_by_id_or_name_and_catch(id_or_name)
        uses = result if isinstance(result, list) else [result]
        paths: List[Path] = []
        for use in uses:
            paths.extend(await self.path_service.get_path_by_use_id(use.id))
        return paths

    async def get_uses_by_ids_and_edition(self, texture_ids: Iterable[Union[int, str]], edition: str) -> List[Use]:
        return await self.use_repo.get_uses_by_ids_and_edition(texture_ids, edition)

    async def create_use(self, use: Use) -> Use:
        if await self.use_repo.exists(use.id):
            raise ConflictError("Texture use ID already exists", details={"id": use.id})
        created = await self.use_repo.set(use)
        logger.info("Created use %s for texture %s", created.id, created.texture)
        return created

    async def update_use(self, use_id: str, data: UseCreate) -> Use:
        await self.use_repo.get_by_id(use_id)
        use = await self.use_repo.set(Use(id=use_id, **data.model_dump()))
        logger.info("Updated use %s", use_id)
        return use

    async def delete_use(self, use_id: str) -> None:
        await self.use_repo.get_by_id(use_id)
        for path in await self.path_service.get_path_by_use_id(use_id):
            await self.path_service.delete_path(path.id)
        await self.use_repo.delete(use_id)
        logger.info("Deleted use %s", use_id)


class TextureService:
    """Service for textures."""

    def __init__(self, textures: Optional[TextureRepository] = None, use_service: Optional[UseService] = None) -> None:
        self.texture_repo = textures or TextureRepository()
        self.use_service = use_service or UseService()

    async def get_raw(self) -> Dict[str, Texture]:
        return await self.texture_repo.get_raw()

    async def get_by_id(self, texture_id: str) -> Texture:
        return await self.texture_repo.get_by_id(texture_id)

    async def search_by_name(self, name: str) -> List[Texture]:
        return await self.texture_repo.search_by_name(name)

    async def get_uses(self, texture_id: str) -> List[Use]:
        await self.texture_repo.get_by_id(texture_id)
        return await self.use_service.use_repo.get_uses_by_texture(texture_id)

    async def create(self, data: TextureCreate) -> Texture:
        texture = await self.texture_repo.create(data)
        logger.info("Created texture %s (%s)", texture.id, texture.name)
        return texture

    async def update(self, texture_id: str, data: TextureCreate) -> Texture:
        await self.texture_repo.get_by_id(texture_id)
        texture = await self.texture_repo.set(Texture(id=texture_id, **data.model_dump()))
        logger.info("Updated texture %s", texture_id)
        return texture

    async def delete(self, texture_id: str) -> None:
        for use in await self.get_uses(texture_id):
            await self.use_service.delete_use(use.id)
        await self.texture_repo.delete(texture_id)
        logger.info("Deleted texture %s", texture_id)
