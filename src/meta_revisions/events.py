"""Typed lifecycle events and the listener protocol hosts register at construction."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class EventType(StrEnum):
    REVISION_CREATED = "revision-created"
    REVISION_RESTORED = "revision-restored"
    DRAFT_SAVED = "draft-saved"
    DRAFT_DISCARDED = "draft-discarded"


class RevisionEvent(BaseModel):
    event: EventType
    entity_id: str
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class RevisionCreated(RevisionEvent):
    event: EventType = EventType.REVISION_CREATED
    revision_id: str
    sequence: int


class RevisionRestored(RevisionEvent):
    event: EventType = EventType.REVISION_RESTORED
    revision_id: str
    restored_keys: list[str] = Field(default_factory=list)
    cleared_keys: list[str] = Field(default_factory=list)


class DraftSaved(RevisionEvent):
    event: EventType = EventType.DRAFT_SAVED
    changed_keys: list[str] = Field(default_factory=list)


class DraftDiscarded(RevisionEvent):
    event: EventType = EventType.DRAFT_DISCARDED


@runtime_checkable
class RevisionListener(Protocol):
    """Protocol for receiving revisioning lifecycle events."""

    async def notify(self, event: RevisionEvent) -> None:
        """Handle a single lifecycle event."""
        ...


async def notify_all(listeners: Iterable[RevisionListener], event: RevisionEvent) -> None:
    """Deliver an event to every listener; listener failures are logged, never raised."""
    for listener in listeners:
        try:
            await listener.notify(event)
        except Exception:  # noqa: BLE001
            logger.warning(
                "Listener %s failed for event=%s entity=%s",
                type(listener).__name__,
                event.event,
                event.entity_id,
                exc_info=True,
            )
