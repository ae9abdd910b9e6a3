"""Build a ready MetaRevisions instance from settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.cosmos.exceptions import CosmosHttpResponseError

from meta_revisions.config import StoreBackend
from meta_revisions.database import CosmosClient
from meta_revisions.database.repositories import (
    CosmosMetadataStore,
    DraftRepository,
    EntityRepository,
    RevisionRepository,
)
from meta_revisions.models.keys import load_key_set
from meta_revisions.service import MetaRevisions
from meta_revisions.store import (
    InMemoryDraftStore,
    InMemoryEntityStore,
    InMemoryMetadataStore,
    InMemoryRevisionStore,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from meta_revisions.config import Settings
    from meta_revisions.events import RevisionListener
    from meta_revisions.models import MetadataKeySet

logger = logging.getLogger(__name__)


async def init_database(settings: Settings) -> CosmosClient:
    """Connect to Cosmos DB. Raises ConnectionError when it is unreachable."""
    cosmos = CosmosClient(settings.cosmos)
    try:
        await cosmos.initialize(create_containers=settings.app.is_development)
    except CosmosHttpResponseError as exc:
        await cosmos.close()
        msg = f"Cannot connect to Cosmos DB at {settings.cosmos.endpoint}: {exc.message}"
        raise ConnectionError(msg) from exc
    logger.info("Cosmos DB connected — database=%s", settings.cosmos.database)
    return cosmos


async def init_revisions(
    settings: Settings,
    *,
    key_set: MetadataKeySet | None = None,
    cosmos: CosmosClient | None = None,
    listeners: Iterable[RevisionListener] = (),
) -> MetaRevisions:
    """Create the facade for the configured backend.

    For the Cosmos backend an initialized client may be passed in; otherwise
    one is created. The caller owns closing it.
    """
    key_set = key_set if key_set is not None else load_key_set(settings.revisions)

    if settings.revisions.backend == StoreBackend.COSMOS:
        cosmos = cosmos or await init_database(settings)
        database = cosmos.database
        service = MetaRevisions(
            metadata=CosmosMetadataStore(database),
            entities=EntityRepository(database),
            revisions=RevisionRepository(database),
            drafts=DraftRepository(database),
            key_set=key_set,
            listeners=listeners,
            comparison=settings.revisions.comparison,
        )
    else:
        service = MetaRevisions(
            metadata=InMemoryMetadataStore(),
            entities=InMemoryEntityStore(),
            revisions=InMemoryRevisionStore(),
            drafts=InMemoryDraftStore(),
            key_set=key_set,
            listeners=listeners,
            comparison=settings.revisions.comparison,
        )

    logger.info(
        "Metadata revisioning ready — backend=%s comparison=%s",
        settings.revisions.backend,
        settings.revisions.comparison,
    )
    return service
