"""Tests for the in-memory store implementations."""

from meta_revisions.models import Draft, Entity, Revision, Snapshot
from meta_revisions.store import (
    DraftStore,
    EntityStore,
    InMemoryDraftStore,
    InMemoryEntityStore,
    InMemoryMetadataStore,
    InMemoryRevisionStore,
    MetadataStore,
    RevisionStore,
)


def test_implementations_satisfy_protocols() -> None:
    """Verify the in-memory stores satisfy the store protocols."""
    assert isinstance(InMemoryMetadataStore(), MetadataStore)
    assert isinstance(InMemoryEntityStore(), EntityStore)
    assert isinstance(InMemoryRevisionStore(), RevisionStore)
    assert isinstance(InMemoryDraftStore(), DraftStore)


class TestInMemoryMetadataStore:
    """Test live metadata storage."""

    async def test_unknown_entity_reads_empty(self) -> None:
        """Verify an unknown entity reads as empty."""
        store = InMemoryMetadataStore()

        assert await store.get("missing", "tags") == []
        assert await store.get_all("missing") == {}

    async def test_delete_on_unknown_entity_is_noop(self) -> None:
        """Verify deleting from an unknown entity does nothing."""
        store = InMemoryMetadataStore()

        await store.delete("missing", "tags")

        assert await store.get_all("missing") == {}

    async def test_set_replaces_all_values(self) -> None:
        """Verify set replaces the whole value sequence."""
        store = InMemoryMetadataStore()
        await store.set("post-1", "tags", ["a", "b"])

        await store.set("post-1", "tags", ["c"])

        assert await store.get("post-1", "tags") == ["c"]

    async def test_set_empty_removes_key(self) -> None:
        """Verify setting an empty sequence removes the key."""
        store = InMemoryMetadataStore()
        await store.set("post-1", "tags", ["a"])

        await store.set("post-1", "tags", [])

        assert await store.get_all("post-1") == {}

    async def test_reads_are_isolated_from_callers(self) -> None:
        """Verify callers cannot mutate stored values through inputs or reads."""
        store = InMemoryMetadataStore()
        source = [{"w": 1}]
        await store.set("post-1", "gallery", source)

        source[0]["w"] = 2
        (await store.get("post-1", "gallery"))[0]["w"] = 3

        assert await store.get("post-1", "gallery") == [{"w": 1}]

    async def test_get_all(self) -> None:
        """Verify get_all returns only the requested entity's keys."""
        store = InMemoryMetadataStore()
        await store.set("post-1", "tags", ["a"])
        await store.set("post-1", "caption", ["c"])
        await store.set("post-2", "tags", ["z"])

        assert await store.get_all("post-1") == {"tags": ["a"], "caption": ["c"]}


class TestInMemoryRevisionStore:
    """Test revision storage ordering."""

    async def test_latest_and_listing_follow_sequence(self) -> None:
        """Verify listing and latest follow sequence, not insertion order."""
        store = InMemoryRevisionStore()
        second = await store.add(Revision(entity_id="post-1", sequence=2))
        first = await store.add(Revision(entity_id="post-1", sequence=1))
        await store.add(Revision(entity_id="post-2", sequence=5))

        assert [rev.id for rev in await store.list_by_entity("post-1")] == [first.id, second.id]
        assert await store.latest("post-1") == second

    async def test_latest_returns_none_when_empty(self) -> None:
        """Verify latest returns None for an entity without revisions."""
        assert await InMemoryRevisionStore().latest("post-1") is None

    async def test_stored_revisions_cannot_be_mutated(self) -> None:
        """Verify changes to added or returned revisions never reach stored history."""
        store = InMemoryRevisionStore()
        revision = Revision(
            entity_id="post-1",
            sequence=1,
            body={"title": "Hello"},
            snapshot=Snapshot.capture({"tags": ["a"]}, ["tags"]),
        )
        await store.add(revision)
        revision.body["title"] = "Edited after add"

        fetched = await store.get(revision.id)
        fetched.body["title"] = "Edited after get"
        fetched.snapshot.values["tags"] = ("z",)
        (await store.list_by_entity("post-1"))[0].body["title"] = "Edited after list"

        stored = await store.get(revision.id)
        assert stored.body == {"title": "Hello"}
        assert stored.snapshot.get("tags") == ["a"]


class TestInMemoryDraftStore:
    """Test draft storage."""

    async def test_put_get_delete(self) -> None:
        """Verify a draft can be stored, read and removed."""
        store = InMemoryDraftStore()
        await store.put(Draft(id="post-1", values={"caption": ["new"]}))

        draft = await store.get("post-1")
        assert draft is not None
        assert draft.values == {"caption": ["new"]}

        await store.delete("post-1")
        assert await store.get("post-1") is None

    async def test_returned_draft_is_a_copy(self) -> None:
        """Verify a returned draft is a copy of the stored one."""
        store = InMemoryDraftStore()
        await store.put(Draft(id="post-1", values={"caption": ["new"]}))

        draft = await store.get("post-1")
        draft.values["caption"] = ["changed"]

        assert (await store.get("post-1")).values == {"caption": ["new"]}


class TestInMemoryEntityStore:
    async def test_save_and_get(self) -> None:
        """Verify an entity can be saved and read back."""
        store = InMemoryEntityStore()
        entity = await store.save(Entity(id="post-1"))

        assert await store.get("post-1") == entity
        assert await store.get("post-2") is None
