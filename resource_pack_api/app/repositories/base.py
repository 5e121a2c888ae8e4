"""
Common CRUD contract shared by every repository.

``get_raw`` returns the whole collection keyed by id, ``get_by_id``
raises ``NotFoundError`` when the id is absent, ``set`` upserts and
returns the record as re-read from the store, and ``delete`` raises
``NotFoundError`` when there is nothing to delete, including on a
second delete of the same id.

A stored record that does not fit its model surfaces as the domain
``ValidationError`` naming the collection and the id.
"""

from typing import Any, Callable, Dict, Generic, TypeVar

import pydantic
from pydantic import BaseModel

from ..core.db import Collection, WriteConfirmation, collection
from ..core.errors import ValidationError

T = TypeVar("T", bound=BaseModel)
R = TypeVar("R")


def read_record(collection_name: str, record: Dict[str, Any], reader: Callable[[Dict[str, Any]], R]) -> R:
    """Apply ``reader`` to a raw store record."""
    try:
        return reader(record)
    except pydantic.ValidationError as e:
        record_id = record.get("id")
        raise ValidationError(
            f"Stored {collection_name} entry '{record_id}' is malformed: {e.error_count()} invalid field(s)",
            details={"collection": collection_name, "id": record_id},
        ) from e


class DocumentRepository(Generic[T]):
    """Base repository over one collection of the document store."""

    collection_name: str

    def __init__(self) -> None:
        self.collection: Collection = collection(self.collection_name)

    def from_record(self, record: Dict[str, Any]) -> T:
        raise NotImplementedError

    def to_record(self, item: T) -> Dict[str, Any]:
        raise NotImplementedError

    def read(self, record: Dict[str, Any]) -> T:
        return read_record(self.collection_name, record, self.from_record)

    async def validate_references(self, item: T) -> None:
        """Check the records ``item`` points to in other collections.

        The store has no foreign keys; repositories with outgoing
        references override this and raise ``ValidationError``.
        """

    async def get_raw(self) -> Dict[str, T]:
        return {key: self.read(record) for key, record in self.collection.read_raw().items()}

    async def get_by_id(self, id: str) -> T:
        return self.read(self.collection.get(id))

    async def exists(self, id: str) -> bool:
        return self.collection.exists(id)

    async def set(self, item: T) -> T:
        await self.validate_references(item)
        record = self.to_record(item)
        self.collection.set(record["id"], record)
        return await self.get_by_id(record["id"])

    async def delete(self, id: str) -> WriteConfirmation:
        return self.collection.remove(id)
