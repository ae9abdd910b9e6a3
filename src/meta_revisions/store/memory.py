"""In-memory store implementations for tests and single-process embedding."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from meta_revisions.models import Draft, Entity, Revision

logger = logging.getLogger(__name__)


class InMemoryMetadataStore:
    """Metadata held as immutable tuples so a write is a single reference swap."""

    def __init__(self) -> None:
        self._data: dict[str, dict[str, tuple[Any, ...]]] = {}

    async def get(self, entity_id: str, key: str) -> list[Any]:
        return copy.deepcopy(list(self._data.get(entity_id, {}).get(key, ())))

    async def get_all(self, entity_id: str) -> dict[str, list[Any]]:
        entity_meta = dict(self._data.get(entity_id, {}))
        return {key: copy.deepcopy(list(values)) for key, values in entity_meta.items()}

    async def set(self, entity_id: str, key: str, values: Sequence[Any]) -> None:
        frozen = tuple(copy.deepcopy(list(values)))
        if not frozen:
            await self.delete(entity_id, key)
            return
        self._data.setdefault(entity_id, {})[key] = frozen

    async def delete(self, entity_id: str, key: str) -> None:
        entity_meta = self._data.get(entity_id)
        if entity_meta is not None:
            entity_meta.pop(key, None)


class InMemoryEntityStore:
    def __init__(self) -> None:
        self._entities: dict[str, Entity] = {}

    async def get(self, entity_id: str) -> Entity | None:
        return self._entities.get(entity_id)

    async def save(self, entity: Entity) -> Entity:
        self._entities[entity.id] = entity
        return entity


class InMemoryRevisionStore:
    """Revisions are copied on the way in and out so callers cannot rewrite history."""

    def __init__(self) -> None:
        self._revisions: dict[str, Revision] = {}

    async def add(self, revision: Revision) -> Revision:
        self._revisions[revision.id] = revision.model_copy(deep=True)
        return revision

    async def get(self, revision_id: str) -> Revision | None:
        revision = self._revisions.get(revision_id)
        return revision.model_copy(deep=True) if revision else None

    async def latest(self, entity_id: str) -> Revision | None:
        revisions = await self.list_by_entity(entity_id)
        return revisions[-1] if revisions else None

    async def list_by_entity(self, entity_id: str) -> list[Revision]:
        return sorted(
            (rev.model_copy(deep=True) for rev in self._revisions.values() if rev.entity_id == entity_id),
            key=lambda rev: rev.sequence,
        )


class InMemoryDraftStore:
    def __init__(self) -> None:
        self._drafts: dict[str, Draft] = {}

    async def get(self, entity_id: str) -> Draft | None:
        draft = self._drafts.get(entity_id)
        return draft.model_copy(deep=True) if draft else None

    async def put(self, draft: Draft) -> Draft:
        self._drafts[draft.entity_id] = draft.model_copy(deep=True)
        return draft

    async def delete(self, entity_id: str) -> None:
        if self._drafts.pop(entity_id, None) is not None:
            logger.debug("Draft removed — entity=%s", entity_id)
