"""Tests for DraftOverlay."""

import pytest

from meta_revisions.models import Entity
from meta_revisions.revisioning import DraftOverlay, KeyResolver


@pytest.fixture
def overlay(metadata, drafts, entities, key_set) -> DraftOverlay:
    return DraftOverlay(metadata, drafts, KeyResolver(entities, key_set))


class TestDraftOverlay:
    """Test draft saving and preview reads."""

    async def test_draft_isolation(self, overlay, metadata, entities, post: Entity) -> None:
        """Verify draft values only show up in previews of the same entity."""
        await entities.save(Entity(id="post-2"))
        await metadata.set(post.id, "caption", ["old"])
        await metadata.set("post-2", "caption", ["other"])

        changed = await overlay.save_draft(post.id, {"caption": "new"})

        assert changed == ["caption"]
        assert await metadata.get(post.id, "caption") == ["old"]
        assert await overlay.read_with_preview(post.id, "caption") == ["new"]
        assert await overlay.read_with_preview("post-2", "caption") == ["other"]

    async def test_single_read(self, overlay, post: Entity) -> None:
        """Verify a single read returns the first preview value."""
        await overlay.save_draft(post.id, {"caption": "new"})

        assert await overlay.read_with_preview(post.id, "caption", single=True) == "new"
        assert await overlay.read_with_preview(post.id, "tags", single=True) is None

    async def test_unchanged_candidate_is_not_written(self, overlay, metadata, post: Entity) -> None:
        """Verify a candidate equal to the live value is not stored."""
        await metadata.set(post.id, "caption", ["same"])

        changed = await overlay.save_draft(post.id, {"caption": "same"})

        assert changed == []
        assert await overlay.get_draft(post.id) is None

    async def test_absent_keys_are_left_alone(self, overlay, post: Entity) -> None:
        """Verify keys missing from the candidate keep their draft values."""
        await overlay.save_draft(post.id, {"caption": "one", "tags": "t"})

        await overlay.save_draft(post.id, {"caption": "two"})

        draft = await overlay.get_draft(post.id)
        assert draft.values == {"caption": ["two"], "tags": ["t"]}

    async def test_empty_candidate_clears_draft_key(self, overlay, metadata, post: Entity) -> None:
        """Verify an empty candidate drops the key from the draft."""
        await metadata.set(post.id, "caption", ["live"])
        await overlay.save_draft(post.id, {"caption": "draft"})

        await overlay.save_draft(post.id, {"caption": ""})

        draft = await overlay.get_draft(post.id)
        assert "caption" not in draft.values
        assert await overlay.read_with_preview(post.id, "caption") == ["live"]

    async def test_reverting_to_live_value_replaces_draft(self, overlay, metadata, post: Entity) -> None:
        """Verify reverting a candidate to the live value removes the draft entry."""
        await metadata.set(post.id, "caption", ["live"])
        await overlay.save_draft(post.id, {"caption": "draft"})

        await overlay.save_draft(post.id, {"caption": "live"})

        assert await overlay.read_with_preview(post.id, "caption") == ["live"]

    async def test_unversioned_keys_are_ignored(self, overlay, metadata, post: Entity) -> None:
        """Verify unversioned keys never enter the draft."""
        await metadata.set(post.id, "internal_flag", ["0"])

        changed = await overlay.save_draft(post.id, {"internal_flag": "1"})

        assert changed == []
        assert await overlay.read_with_preview(post.id, "internal_flag") == ["0"]

    async def test_revision_objects_read_live_values(self, overlay, entities, metadata, drafts) -> None:
        """Verify previews of revision objects read their own values, not drafts."""
        await entities.save(Entity(id="rev-obj", parent_id="post-1"))
        await metadata.set("rev-obj", "caption", ["frozen"])

        assert await overlay.save_draft("rev-obj", {"caption": "new"}) == []
        assert await overlay.read_with_preview("rev-obj", "caption") == ["frozen"]

    async def test_unknown_entity_reads_live(self, overlay) -> None:
        """Verify an unknown entity previews as empty live metadata."""
        assert await overlay.read_with_preview("missing", "caption") == []
        assert await overlay.save_draft("missing", {"caption": "x"}) == []

    async def test_discard(self, overlay, metadata, post: Entity) -> None:
        """Verify discard removes the draft and reports whether one existed."""
        await metadata.set(post.id, "caption", ["live"])
        await overlay.save_draft(post.id, {"caption": "draft"})

        assert await overlay.discard_draft(post.id) is True
        assert await overlay.discard_draft(post.id) is False
        assert await overlay.read_with_preview(post.id, "caption") == ["live"]
