"""Resolve the versioned keys of an entity from its type tag."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from meta_revisions.models import Entity, MetadataKeySet
    from meta_revisions.store import EntityStore

logger = logging.getLogger(__name__)


class KeyResolver:
    def __init__(self, entities: EntityStore, key_set: MetadataKeySet) -> None:
        self._entities = entities
        self.key_set = key_set

    async def resolve(self, entity_id: str) -> tuple[Entity | None, tuple[str, ...]]:
        """Return the entity and its versioned keys; unknown entities have none."""
        entity = await self._entities.get(entity_id)
        if entity is None:
            logger.debug("Unknown entity — entity=%s", entity_id)
            return None, ()
        return entity, self.key_set.keys_for(entity.entity_type)
