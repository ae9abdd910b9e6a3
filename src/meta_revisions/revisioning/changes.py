"""Change detection between live metadata and a revision snapshot."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from meta_revisions.config import ComparisonMode
from meta_revisions.models import Snapshot
from meta_revisions.revisioning.compare import sequences_equal

if TYPE_CHECKING:
    from meta_revisions.revisioning.keys import KeyResolver
    from meta_revisions.store import MetadataStore, RevisionStore

logger = logging.getLogger(__name__)


class ChangeDetector:
    """Decide whether versioned metadata moved since the last revision.

    The result only ever adds reasons to create a revision: a body change
    reported by the host always wins.
    """

    def __init__(
        self,
        metadata: MetadataStore,
        revisions: RevisionStore,
        resolver: KeyResolver,
        *,
        mode: ComparisonMode = ComparisonMode.STRICT,
    ) -> None:
        self._metadata = metadata
        self._revisions = revisions
        self._resolver = resolver
        self._mode = mode

    async def has_changed(
        self,
        entity_id: str,
        last_revision_id: str | None,
        *,
        body_changed: bool = False,
    ) -> bool:
        if body_changed:
            return True

        _, keys = await self._resolver.resolve(entity_id)
        if not keys:
            return False

        revision = await self._revisions.get(last_revision_id) if last_revision_id else None
        snapshot = revision.snapshot if revision else Snapshot()

        for key in keys:
            current = await self._metadata.get(entity_id, key)
            if not sequences_equal(current, snapshot.get(key), self._mode):
                logger.debug("Versioned metadata changed — entity=%s key=%s", entity_id, key)
                return True
        return False
