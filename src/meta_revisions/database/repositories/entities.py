"""Repository for the entities container (partitioned by /id)."""

from __future__ import annotations

from meta_revisions.database.repositories.base import BaseRepository
from meta_revisions.models.entity import Entity


class EntityRepository(BaseRepository[Entity]):
    container_name = "entities"
    model_class = Entity

    async def get(self, entity_id: str, partition_key: str | None = None) -> Entity | None:  # type: ignore[override]
        return await super().get(entity_id, partition_key or entity_id)

    async def save(self, entity: Entity) -> Entity:
        return await self.upsert(entity)
