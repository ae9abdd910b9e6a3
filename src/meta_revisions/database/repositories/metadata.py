"""Repository for the metadata container (one document per entity key, partitioned by /entity_id)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from pydantic import BaseModel, Field

from meta_revisions.database.repositories.base import BaseRepository

if TYPE_CHECKING:
    from collections.abc import Sequence


def _document_id(entity_id: str, key: str) -> str:
    # Cosmos ids may not contain / \ ? #
    return f"{quote(entity_id, safe='')}|{quote(key, safe='')}"


class MetadataDocument(BaseModel):
    id: str
    entity_id: str
    key: str
    values: list[Any] = Field(default_factory=list)


class CosmosMetadataStore(BaseRepository[MetadataDocument]):
    """Live metadata in Cosmos DB.

    Each key's value sequence is one document, so ``set`` is a single
    ``upsert_item`` and readers see either the old or the new sequence.
    """

    container_name = "metadata"
    model_class = MetadataDocument

    async def get(self, entity_id: str, key: str) -> list[Any]:  # type: ignore[override]
        document = await super().get(_document_id(entity_id, key), entity_id)
        return document.values if document else []

    async def get_all(self, entity_id: str) -> dict[str, list[Any]]:
        documents = await self.query(
            "SELECT * FROM c WHERE c.entity_id = @entity_id",
            [{"name": "@entity_id", "value": entity_id}],
            partition_key=entity_id,
        )
        return {document.key: document.values for document in documents if document.values}

    async def set(self, entity_id: str, key: str, values: Sequence[Any]) -> None:
        if not values:
            await self.delete(entity_id, key)
            return
        await self.upsert(
            MetadataDocument(
                id=_document_id(entity_id, key),
                entity_id=entity_id,
                key=key,
                values=list(values),
            )
        )

    async def delete(self, entity_id: str, key: str) -> None:  # type: ignore[override]
        await super().delete(_document_id(entity_id, key), entity_id)
