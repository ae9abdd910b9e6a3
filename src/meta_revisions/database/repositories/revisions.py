"""Repository for the revisions container (partitioned by /entity_id)."""

from __future__ import annotations

from meta_revisions.database.repositories.base import BaseRepository
from meta_revisions.models.revision import Revision


class RevisionRepository(BaseRepository[Revision]):
    """Append-only revision history; documents are never replaced."""

    container_name = "revisions"
    model_class = Revision

    async def add(self, revision: Revision) -> Revision:
        return await self.create(revision)

    async def get(self, revision_id: str, partition_key: str | None = None) -> Revision | None:  # type: ignore[override]
        """Fetch a revision by id; without a partition key this is a cross-partition query."""
        if partition_key is not None:
            return await super().get(revision_id, partition_key)
        results = await self.query(
            "SELECT * FROM c WHERE c.id = @id",
            [{"name": "@id", "value": revision_id}],
        )
        return results[0] if results else None

    async def list_by_entity(self, entity_id: str) -> list[Revision]:
        """Fetch every revision of an entity, oldest first."""
        return await self.query(
            "SELECT * FROM c WHERE c.entity_id = @entity_id ORDER BY c.sequence ASC",
            [{"name": "@entity_id", "value": entity_id}],
            partition_key=entity_id,
        )

    async def latest(self, entity_id: str) -> Revision | None:
        """Fetch the highest-sequence revision of an entity."""
        results = await self.query(
            "SELECT TOP 1 * FROM c WHERE c.entity_id = @entity_id ORDER BY c.sequence DESC",
            [{"name": "@entity_id", "value": entity_id}],
            partition_key=entity_id,
        )
        return results[0] if results else None
