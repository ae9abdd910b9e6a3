"""Storage protocols and in-memory implementations."""

from meta_revisions.store.base import DraftStore, EntityStore, MetadataStore, RevisionStore
from meta_revisions.store.memory import (
    InMemoryDraftStore,
    InMemoryEntityStore,
    InMemoryMetadataStore,
    InMemoryRevisionStore,
)

__all__ = [
    "DraftStore",
    "EntityStore",
    "InMemoryDraftStore",
    "InMemoryEntityStore",
    "InMemoryMetadataStore",
    "InMemoryRevisionStore",
    "MetadataStore",
    "RevisionStore",
]
