"""Tests for the per-entity lock registry."""

import asyncio

import pytest

from meta_revisions.revisioning import EntityLocks


class TestEntityLocks:
    """Test lock hand-out and cleanup."""

    async def test_idle_locks_are_dropped(self) -> None:
        """Verify the registry forgets an entity once its lock is released."""
        locks = EntityLocks()

        async with locks("post-1"):
            assert locks.locked("post-1")
            assert len(locks) == 1

        assert len(locks) == 0
        assert locks.locked("post-1") is False

    async def test_lock_kept_while_waiters_remain(self) -> None:
        """Verify a waiting task shares the holder's lock and cleanup waits for it."""
        locks = EntityLocks()
        order: list[str] = []
        release = asyncio.Event()

        async def first() -> None:
            async with locks("post-1"):
                order.append("first")
                await release.wait()

        async def second() -> None:
            async with locks("post-1"):
                order.append("second")

        tasks = [asyncio.create_task(first()), asyncio.create_task(second())]
        await asyncio.sleep(0)
        assert order == ["first"]
        assert len(locks) == 1

        release.set()
        await asyncio.gather(*tasks)

        assert order == ["first", "second"]
        assert len(locks) == 0

    async def test_entities_do_not_block_each_other(self) -> None:
        """Verify holding one entity's lock leaves other entities free."""
        locks = EntityLocks()

        async with locks("post-1"), locks("post-2"):
            assert len(locks) == 2

        assert len(locks) == 0

    async def test_released_on_error(self) -> None:
        """Verify a failing holder still releases and drops its lock."""
        locks = EntityLocks()

        with pytest.raises(RuntimeError):
            async with locks("post-1"):
                raise RuntimeError("boom")

        assert len(locks) == 0
