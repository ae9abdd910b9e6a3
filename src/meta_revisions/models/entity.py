"""Entity document model — the revisionable documents owned by the host."""

from __future__ import annotations

from pydantic import Field

from meta_revisions.models.base import DocumentBase


class Entity(DocumentBase):
    """A document whose metadata is versioned.

    ``parent_id`` is set when the host registers a revision object as an
    entity of its own; such entities never read draft previews.
    """

    entity_type: str = "post"
    body: dict = Field(default_factory=dict)
    parent_id: str | None = None

    @property
    def is_revision(self) -> bool:
        return self.parent_id is not None
