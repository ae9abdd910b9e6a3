"""Draft document model — the single autosave overlay of an entity."""

from __future__ import annotations

import copy
from typing import Any

from pydantic import Field

from meta_revisions.models.base import DocumentBase


class Draft(DocumentBase):
    """Provisional metadata for an in-progress edit.

    The document id is the entity id, so an entity has at most one draft.
    """

    values: dict[str, list[Any]] = Field(default_factory=dict)

    @property
    def entity_id(self) -> str:
        return self.id

    def get(self, key: str) -> list[Any]:
        return copy.deepcopy(self.values.get(key, []))
