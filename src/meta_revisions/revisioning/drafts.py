"""Draft overlay — autosaved metadata read as a preview without touching live values."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from meta_revisions.config import ComparisonMode
from meta_revisions.models import Draft
from meta_revisions.revisioning.compare import is_empty_value, sequences_equal

if TYPE_CHECKING:
    from collections.abc import Mapping

    from meta_revisions.revisioning.keys import KeyResolver
    from meta_revisions.store import DraftStore, MetadataStore

logger = logging.getLogger(__name__)


class DraftOverlay:
    """Keep one draft per entity and substitute its values on preview reads.

    The overlay never writes to the metadata store; promoting a draft is
    the facade's job.
    """

    def __init__(
        self,
        metadata: MetadataStore,
        drafts: DraftStore,
        resolver: KeyResolver,
        *,
        mode: ComparisonMode = ComparisonMode.STRICT,
    ) -> None:
        self._metadata = metadata
        self._drafts = drafts
        self._resolver = resolver
        self._mode = mode

    async def save_draft(self, entity_id: str, candidate_values: Mapping[str, Any]) -> list[str]:
        """Merge candidate values into the entity's draft.

        Each versioned key present in ``candidate_values`` is compared with
        its current preview value; on a difference the draft key is cleared
        and, when the candidate is not empty, replaced by the candidate.
        Returns the keys that changed.
        """
        entity, keys = await self._resolver.resolve(entity_id)
        if entity is None or entity.is_revision:
            return []

        draft = await self._drafts.get(entity_id) or Draft(id=entity_id)
        changed: list[str] = []
        for key in keys:
            if key not in candidate_values:
                continue
            candidate = candidate_values[key]
            current = draft.values.get(key) or await self._metadata.get(entity_id, key)
            proposed = [] if is_empty_value(candidate) else [candidate]
            if sequences_equal(current, proposed, self._mode):
                continue
            draft.values.pop(key, None)
            if proposed:
                draft.values[key] = proposed
            changed.append(key)

        ignored = set(candidate_values) - set(keys)
        if ignored:
            logger.debug("Unversioned draft keys ignored — entity=%s keys=%s", entity_id, sorted(ignored))

        if changed:
            draft.updated_at = datetime.now(UTC)
            await self._drafts.put(draft)
            logger.info("Draft saved — entity=%s keys=%s", entity_id, ", ".join(changed))
        return changed

    async def read_with_preview(self, entity_id: str, key: str, *, single: bool = False) -> Any:
        """Read a key, substituting the draft value where one applies."""
        values = await self._preview_values(entity_id, key)
        if single:
            return values[0] if values else None
        return values

    async def _preview_values(self, entity_id: str, key: str) -> list[Any]:
        live = await self._metadata.get(entity_id, key)
        entity, keys = await self._resolver.resolve(entity_id)
        if entity is None or entity.is_revision or key not in keys:
            return live

        draft = await self._drafts.get(entity_id)
        if draft is None:
            return live
        return draft.get(key) or live

    async def get_draft(self, entity_id: str) -> Draft | None:
        return await self._drafts.get(entity_id)

    async def discard_draft(self, entity_id: str) -> bool:
        """Drop the entity's draft. Returns False when there was none."""
        if await self._drafts.get(entity_id) is None:
            return False
        await self._drafts.delete(entity_id)
        logger.info("Draft discarded — entity=%s", entity_id)
        return True
