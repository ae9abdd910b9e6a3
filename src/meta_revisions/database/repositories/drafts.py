"""Repository for the drafts container (one document per entity, partitioned by /id)."""

from __future__ import annotations

from meta_revisions.database.repositories.base import BaseRepository
from meta_revisions.models.draft import Draft


class DraftRepository(BaseRepository[Draft]):
    container_name = "drafts"
    model_class = Draft

    async def get(self, entity_id: str, partition_key: str | None = None) -> Draft | None:  # type: ignore[override]
        return await super().get(entity_id, partition_key or entity_id)

    async def put(self, draft: Draft) -> Draft:
        return await self.upsert(draft)

    async def delete(self, entity_id: str, partition_key: str | None = None) -> None:  # type: ignore[override]
        await super().delete(entity_id, partition_key or entity_id)
