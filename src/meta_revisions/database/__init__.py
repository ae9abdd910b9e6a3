"""Azure Cosmos DB persistence backend."""

from meta_revisions.database.client import CosmosClient

__all__ = ["CosmosClient"]
