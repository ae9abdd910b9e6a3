"""Revision engine — freezes an entity's versioned metadata into immutable revisions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from meta_revisions.models import Revision, RevisionSource, Snapshot

if TYPE_CHECKING:
    from meta_revisions.revisioning.keys import KeyResolver
    from meta_revisions.revisioning.locks import EntityLocks
    from meta_revisions.store import MetadataStore, RevisionStore

logger = logging.getLogger(__name__)


class RevisionEngine:
    """Create and look up revisions.

    Revisions hold deep copies of the live values, so later writes to the
    metadata store never reach back into history.
    """

    def __init__(
        self,
        metadata: MetadataStore,
        revisions: RevisionStore,
        resolver: KeyResolver,
        locks: EntityLocks,
    ) -> None:
        self._metadata = metadata
        self._revisions = revisions
        self._resolver = resolver
        self._locks = locks

    async def create_revision(
        self,
        entity_id: str,
        *,
        source: RevisionSource = RevisionSource.SAVE,
    ) -> str | None:
        """Snapshot the entity's versioned metadata. Returns None for unknown entities."""
        async with self._locks(entity_id):
            revision = await self.create_locked(entity_id, source)
        return revision.id if revision else None

    async def create_locked(
        self, entity_id: str, source: RevisionSource = RevisionSource.SAVE
    ) -> Revision | None:
        """Create a revision; the caller must hold the entity lock."""
        entity, keys = await self._resolver.resolve(entity_id)
        if entity is None:
            return None

        live = await self._metadata.get_all(entity_id)
        latest = await self._revisions.latest(entity_id)
        revision = Revision(
            entity_id=entity_id,
            sequence=latest.sequence + 1 if latest else 1,
            source=source,
            body=entity.model_copy(deep=True).body,
            snapshot=Snapshot.capture(live, keys),
        )
        await self._revisions.add(revision)
        logger.info(
            "Revision created — entity=%s revision=%s sequence=%d keys=%d",
            entity_id,
            revision.id,
            revision.sequence,
            len(revision.snapshot.values),
        )
        return revision

    async def get_revision(self, revision_id: str) -> Revision | None:
        return await self._revisions.get(revision_id)

    async def latest_revision(self, entity_id: str) -> Revision | None:
        return await self._revisions.latest(entity_id)

    async def list_revisions(self, entity_id: str) -> list[Revision]:
        return await self._revisions.list_by_entity(entity_id)
