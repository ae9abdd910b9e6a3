"""Restore a past revision's metadata as the entity's live metadata."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from meta_revisions.errors import StoreFailure

if TYPE_CHECKING:
    from meta_revisions.revisioning.keys import KeyResolver
    from meta_revisions.revisioning.locks import EntityLocks
    from meta_revisions.store import MetadataStore, RevisionStore

logger = logging.getLogger(__name__)


@dataclass
class RestoreResult:
    revision_id: str
    restored: list[str] = field(default_factory=list)
    cleared: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def applied(self) -> bool:
        return bool(self.restored or self.cleared)


class RestoreCoordinator:
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

    async def restore(self, entity_id: str, revision_id: str) -> RestoreResult:
        """Overwrite every versioned key of the entity from the revision.

        Keys are written independently. A key whose write fails does not stop
        the others; once all keys were attempted a ``StoreFailure`` naming the
        failed keys is raised. Unknown revisions, and revisions belonging to
        another entity, leave live metadata untouched.
        """
        async with self._locks(entity_id):
            return await self._restore_locked(entity_id, revision_id)

    async def _restore_locked(self, entity_id: str, revision_id: str) -> RestoreResult:
        result = RestoreResult(revision_id=revision_id)

        revision = await self._revisions.get(revision_id)
        if revision is None:
            logger.warning("Restore skipped, unknown revision — entity=%s revision=%s", entity_id, revision_id)
            return result
        if revision.entity_id != entity_id:
            logger.warning(
                "Restore skipped, revision belongs to another entity — entity=%s revision=%s owner=%s",
                entity_id,
                revision_id,
                revision.entity_id,
            )
            return result

        _, keys = await self._resolver.resolve(entity_id)
        for key in keys:
            values = revision.snapshot.get(key)
            try:
                if values:
                    await self._metadata.set(entity_id, key, values)
                    result.restored.append(key)
                else:
                    await self._metadata.delete(entity_id, key)
                    result.cleared.append(key)
            except StoreFailure:
                logger.exception("Restore failed for key — entity=%s key=%s", entity_id, key)
                result.failed.append(key)

        logger.info(
            "Revision restored — entity=%s revision=%s restored=%d cleared=%d failed=%d",
            entity_id,
            revision_id,
            len(result.restored),
            len(result.cleared),
            len(result.failed),
        )
        if result.failed:
            raise StoreFailure(
                f"restore of revision {revision_id} failed for keys: {', '.join(result.failed)}",
                keys=tuple(result.failed),
            )
        return result
