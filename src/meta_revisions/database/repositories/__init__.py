"""Repository modules for each Cosmos DB container."""

from meta_revisions.database.repositories.drafts import DraftRepository
from meta_revisions.database.repositories.entities import EntityRepository
from meta_revisions.database.repositories.metadata import CosmosMetadataStore
from meta_revisions.database.repositories.revisions import RevisionRepository

__all__ = [
    "CosmosMetadataStore",
    "DraftRepository",
    "EntityRepository",
    "RevisionRepository",
]
