"""Versioned key-value metadata for revisioned documents."""

from meta_revisions.errors import MetaRevisionsError, StoreFailure
from meta_revisions.models import (
    Draft,
    Entity,
    MetadataKeySet,
    Revision,
    RevisionSource,
    Snapshot,
)
from meta_revisions.service import MetaRevisions

__all__ = [
    "Draft",
    "Entity",
    "MetaRevisions",
    "MetaRevisionsError",
    "MetadataKeySet",
    "Revision",
    "RevisionSource",
    "Snapshot",
    "StoreFailure",
]
