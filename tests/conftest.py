"""Shared fixtures: in-memory stores and a small key configuration."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

import pytest

from meta_revisions.models import Entity, MetadataKeySet
from meta_revisions.store import (
    InMemoryDraftStore,
    InMemoryEntityStore,
    InMemoryMetadataStore,
    InMemoryRevisionStore,
)


@pytest.fixture
def key_set() -> MetadataKeySet:
    return MetadataKeySet(
        types={
            "post": {"tags": "Tags", "gallery": "Gallery", "caption": "Caption"},
            "page": {"layout": "Layout"},
        }
    )


class YieldingMetadataStore(InMemoryMetadataStore):
    """Hands control back to the event loop on every call, like a network-backed store."""

    async def get_all(self, entity_id: str) -> dict[str, list[Any]]:
        await asyncio.sleep(0)
        return await super().get_all(entity_id)

    async def set(self, entity_id: str, key: str, values: Sequence[Any]) -> None:
        await asyncio.sleep(0)
        await super().set(entity_id, key, values)

    async def delete(self, entity_id: str, key: str) -> None:
        await asyncio.sleep(0)
        await super().delete(entity_id, key)


@pytest.fixture
def metadata() -> InMemoryMetadataStore:
    return InMemoryMetadataStore()


@pytest.fixture
def yielding_metadata() -> YieldingMetadataStore:
    return YieldingMetadataStore()


@pytest.fixture
def entities() -> InMemoryEntityStore:
    return InMemoryEntityStore()


@pytest.fixture
def revisions() -> InMemoryRevisionStore:
    return InMemoryRevisionStore()


@pytest.fixture
def drafts() -> InMemoryDraftStore:
    return InMemoryDraftStore()


@pytest.fixture
async def post(entities: InMemoryEntityStore) -> Entity:
    return await entities.save(Entity(id="post-1", entity_type="post", body={"title": "Hello"}))
