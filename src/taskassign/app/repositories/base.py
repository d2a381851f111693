"""Base repository implementation over beanie documents."""

from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from beanie import Document, PydanticObjectId
from beanie.operators import In

ModelType = TypeVar("ModelType", bound=Document)


class BaseRepository(Generic[ModelType]):
    """Provide shared persistence helpers for repositories."""

    def __init__(self, model_type: type[ModelType]) -> None:
        self._model_type = model_type

    @property
    def model_type(self) -> type[ModelType]:
        return self._model_type

    async def get(self, entity_id: PydanticObjectId) -> ModelType | None:
        """Retrieve a document by its identifier."""
        return await self._model_type.get(entity_id)

    async def list(self) -> list[ModelType]:
        """Return all documents of the repository type."""
        return await self._model_type.find_all().to_list()

    async def list_by_ids(self, ids: Sequence[PydanticObjectId]) -> list[ModelType]:
        """Fetch all documents whose identifiers are contained in ``ids``."""
        if not ids:
            return []
        return await self._model_type.find(In(self._model_type.id, list(ids))).to_list()

    async def add(self, instance: ModelType) -> ModelType:
        """Insert a new document."""
        await instance.insert()
        return instance
