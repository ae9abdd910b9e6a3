"""Storage protocols the revisioning core is written against."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from meta_revisions.models import Draft, Entity, Revision


@runtime_checkable
class MetadataStore(Protocol):
    """Live multi-valued metadata keyed by (entity id, key).

    Unknown entities read as empty and writes to them are accepted.
    ``set`` replaces every value of a key in one step. Backend failures
    raise ``StoreFailure``.
    """

    async def get(self, entity_id: str, key: str) -> list[Any]: ...

    async def get_all(self, entity_id: str) -> dict[str, list[Any]]: ...

    async def set(self, entity_id: str, key: str, values: Sequence[Any]) -> None: ...

    async def delete(self, entity_id: str, key: str) -> None: ...


@runtime_checkable
class EntityStore(Protocol):
    """Lookup of host entities, used to resolve their type tag."""

    async def get(self, entity_id: str) -> Entity | None: ...

    async def save(self, entity: Entity) -> Entity: ...


@runtime_checkable
class RevisionStore(Protocol):
    """Append-only storage of revisions."""

    async def add(self, revision: Revision) -> Revision: ...

    async def get(self, revision_id: str) -> Revision | None: ...

    async def latest(self, entity_id: str) -> Revision | None: ...

    async def list_by_entity(self, entity_id: str) -> list[Revision]: ...


@runtime_checkable
class DraftStore(Protocol):
    """At most one draft per entity."""

    async def get(self, entity_id: str) -> Draft | None: ...

    async def put(self, draft: Draft) -> Draft: ...

    async def delete(self, entity_id: str) -> None: ...
