"""Revision document model — immutable metadata snapshots for entities."""

from __future__ import annotations

from enum import StrEnum

from pydantic import ConfigDict, Field

from meta_revisions.models.base import DocumentBase
from meta_revisions.models.snapshot import Snapshot


class RevisionSource(StrEnum):
    """Enumerate the events that create a revision."""

    SAVE = "save"
    RESTORE = "restore"
    DRAFT = "draft"


class Revision(DocumentBase):
    """A frozen copy of an entity's body and versioned metadata."""

    model_config = ConfigDict(frozen=True)

    entity_id: str
    sequence: int
    source: RevisionSource = RevisionSource.SAVE
    body: dict = Field(default_factory=dict)
    snapshot: Snapshot = Field(default_factory=Snapshot)
