"""Facade exposing the lifecycle call sites a host document system invokes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from meta_revisions.config import ComparisonMode
from meta_revisions.events import (
    DraftDiscarded,
    DraftSaved,
    RevisionCreated,
    RevisionRestored,
    notify_all,
)
from meta_revisions.models import MetadataKeySet, RevisionSource, Snapshot
from meta_revisions.revisioning import (
    ChangeDetector,
    DiffField,
    DraftOverlay,
    EntityLocks,
    KeyResolver,
    RestoreCoordinator,
    RestoreResult,
    RevisionEngine,
)
from meta_revisions.revisioning.compare import sequences_equal

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from meta_revisions.events import RevisionListener
    from meta_revisions.models import Draft, Revision
    from meta_revisions.store import DraftStore, EntityStore, MetadataStore, RevisionStore

logger = logging.getLogger(__name__)


class MetaRevisions:
    """Wire the stores, key set and listeners into the revisioning components."""

    def __init__(
        self,
        *,
        metadata: MetadataStore,
        entities: EntityStore,
        revisions: RevisionStore,
        drafts: DraftStore,
        key_set: MetadataKeySet,
        listeners: Iterable[RevisionListener] = (),
        comparison: ComparisonMode = ComparisonMode.STRICT,
    ) -> None:
        self.metadata = metadata
        self.entities = entities
        self.key_set = key_set
        self._listeners = tuple(listeners)
        self._locks = EntityLocks()
        self._resolver = KeyResolver(entities, key_set)
        self._comparison = comparison

        self.engine = RevisionEngine(metadata, revisions, self._resolver, self._locks)
        self.detector = ChangeDetector(metadata, revisions, self._resolver, mode=comparison)
        self.restorer = RestoreCoordinator(metadata, revisions, self._resolver, self._locks)
        self.overlay = DraftOverlay(metadata, drafts, self._resolver, mode=comparison)

    # -- revisions ---------------------------------------------------------

    async def save(self, entity_id: str, *, body_changed: bool = False) -> Revision | None:
        """Create a revision when the body or versioned metadata changed.

        Returns the new revision, or None when nothing changed or the entity
        is unknown.
        """
        latest = await self.engine.latest_revision(entity_id)
        if latest is not None and not await self.detector.has_changed(
            entity_id, latest.id, body_changed=body_changed
        ):
            logger.debug("No changes since last revision — entity=%s revision=%s", entity_id, latest.id)
            return None
        return await self.create_revision(entity_id)

    async def create_revision(
        self, entity_id: str, *, source: RevisionSource = RevisionSource.SAVE
    ) -> Revision | None:
        revision_id = await self.engine.create_revision(entity_id, source=source)
        if revision_id is None:
            return None
        revision = await self.engine.get_revision(revision_id)
        if revision is not None:
            await self._announce(revision)
        return revision

    async def _announce(self, revision: Revision) -> None:
        await notify_all(
            self._listeners,
            RevisionCreated(entity_id=revision.entity_id, revision_id=revision.id, sequence=revision.sequence),
        )

    async def has_changed(
        self, entity_id: str, last_revision_id: str | None, *, body_changed: bool = False
    ) -> bool:
        return await self.detector.has_changed(entity_id, last_revision_id, body_changed=body_changed)

    async def restore(self, entity_id: str, revision_id: str) -> RestoreResult:
        result = await self.restorer.restore(entity_id, revision_id)
        if result.applied:
            await notify_all(
                self._listeners,
                RevisionRestored(
                    entity_id=entity_id,
                    revision_id=revision_id,
                    restored_keys=result.restored,
                    cleared_keys=result.cleared,
                ),
            )
        return result

    async def list_revisions(self, entity_id: str) -> list[Revision]:
        return await self.engine.list_revisions(entity_id)

    # -- drafts ------------------------------------------------------------

    async def save_draft(self, entity_id: str, candidate_values: Mapping[str, Any]) -> list[str]:
        changed = await self.overlay.save_draft(entity_id, candidate_values)
        if changed:
            await notify_all(self._listeners, DraftSaved(entity_id=entity_id, changed_keys=changed))
        return changed

    async def read_with_preview(self, entity_id: str, key: str, *, single: bool = False) -> Any:
        return await self.overlay.read_with_preview(entity_id, key, single=single)

    async def get_draft(self, entity_id: str) -> Draft | None:
        return await self.overlay.get_draft(entity_id)

    async def discard_draft(self, entity_id: str) -> bool:
        discarded = await self.overlay.discard_draft(entity_id)
        if discarded:
            await notify_all(self._listeners, DraftDiscarded(entity_id=entity_id))
        return discarded

    async def promote_draft(self, entity_id: str) -> Revision | None:
        """Write the draft's values to live metadata, drop the draft and revision the result.

        The writes and the new revision happen under the entity lock, so a
        concurrent restore lands either before or after the promotion.
        """
        async with self._locks(entity_id):
            draft = await self.overlay.get_draft(entity_id)
            if draft is None:
                return None
            _, keys = await self._resolver.resolve(entity_id)
            for key in keys:
                values = draft.get(key)
                if values:
                    await self.metadata.set(entity_id, key, values)
            await self.overlay.discard_draft(entity_id)
            revision = await self.engine.create_locked(entity_id, RevisionSource.DRAFT)
        logger.info("Draft promoted — entity=%s", entity_id)
        if revision is not None:
            await self._announce(revision)
        return revision

    # -- diff inputs -------------------------------------------------------

    async def snapshot_for_diff(self, object_id: str) -> dict[str, list[Any]]:
        """Versioned values of a live entity or of a revision, for an external diff."""
        revision = await self.engine.get_revision(object_id)
        if revision is not None:
            entity, keys = await self._resolver.resolve(revision.entity_id)
            if entity is None:
                # entity deleted since; the revision still carries its own keys
                keys = tuple(revision.snapshot.values)
            return revision.snapshot.restrict(keys)

        entity, keys = await self._resolver.resolve(object_id)
        if entity is None:
            return {}
        live = await self.metadata.get_all(object_id)
        return Snapshot.capture(live, keys).restrict(keys)

    async def diff(self, from_id: str | None, to_id: str) -> list[DiffField]:
        """List the versioned keys whose values differ between two states.

        ``from_id`` may be None to compare against nothing (first revision).
        """
        to_values = await self.snapshot_for_diff(to_id)
        from_values = await self.snapshot_for_diff(from_id) if from_id else {}

        entity_type = await self._entity_type_of(to_id)
        fields: list[DiffField] = []
        for key in self.key_set.keys_for(entity_type):
            before = from_values.get(key, [])
            after = to_values.get(key, [])
            if sequences_equal(before, after, self._comparison):
                continue
            fields.append(
                DiffField(
                    key=key,
                    label=self.key_set.label_for(entity_type, key),
                    from_values=before,
                    to_values=after,
                )
            )
        return fields

    async def _entity_type_of(self, object_id: str) -> str | None:
        revision = await self.engine.get_revision(object_id)
        entity_id = revision.entity_id if revision else object_id
        entity = await self.entities.get(entity_id)
        return entity.entity_type if entity else None
