"""Per-entity asyncio locks serializing revision, restore and promote operations."""

from __future__ import annotations

import asyncio
import contextlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class EntityLocks:
    """Hands out one lock per entity id, dropped again once nobody holds or awaits it.

    Locks are not reentrant: a holder must not call another locked
    operation on the same entity.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @contextlib.asynccontextmanager
    async def __call__(self, entity_id: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(entity_id, asyncio.Lock())
        self._users[entity_id] = self._users.get(entity_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[entity_id] -= 1
            if not self._users[entity_id]:
                del self._users[entity_id]
                del self._locks[entity_id]

    def locked(self, entity_id: str) -> bool:
        lock = self._locks.get(entity_id)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)
