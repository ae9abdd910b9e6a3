"""Generic repository over a single Cosmos DB container of pydantic documents."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from azure.core.exceptions import AzureError
from azure.cosmos.exceptions import CosmosResourceNotFoundError
from pydantic import BaseModel

from meta_revisions.errors import StoreFailure

if TYPE_CHECKING:
    from azure.cosmos.aio import DatabaseProxy

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# HTTP errors, transport failures (ServiceRequestError, ServiceResponseError) and timeouts
_BACKEND_ERRORS = (AzureError, TimeoutError)


class BaseRepository(Generic[T]):
    """CRUD helpers shared by every container repository.

    Backend errors other than "not found" are re-raised as ``StoreFailure``.
    """

    container_name: ClassVar[str]
    model_class: type[T]

    def __init__(self, database: DatabaseProxy) -> None:
        self._container = database.get_container_client(self.container_name)

    def _failure(self, action: str, exc: Exception) -> StoreFailure:
        status = getattr(exc, "status_code", None) or type(exc).__name__
        logger.warning(
            "Cosmos %s failed — container=%s status=%s",
            action,
            self.container_name,
            status,
        )
        return StoreFailure(f"{self.container_name}: {action} failed ({status})")

    async def get(self, item_id: str, partition_key: str) -> T | None:
        """Read a document by id, or None when it does not exist."""
        try:
            data = await self._container.read_item(item=item_id, partition_key=partition_key)
        except CosmosResourceNotFoundError:
            return None
        except _BACKEND_ERRORS as exc:
            raise self._failure("read", exc) from exc
        return self.model_class.model_validate(data)

    async def create(self, item: T) -> T:
        try:
            await self._container.create_item(body=item.model_dump(mode="json"))
        except _BACKEND_ERRORS as exc:
            raise self._failure("create", exc) from exc
        return item

    async def upsert(self, item: T) -> T:
        try:
            await self._container.upsert_item(body=item.model_dump(mode="json"))
        except _BACKEND_ERRORS as exc:
            raise self._failure("upsert", exc) from exc
        return item

    async def delete(self, item_id: str, partition_key: str) -> None:
        """Delete a document; deleting a missing document is a no-op."""
        try:
            await self._container.delete_item(item=item_id, partition_key=partition_key)
        except CosmosResourceNotFoundError:
            return
        except _BACKEND_ERRORS as exc:
            raise self._failure("delete", exc) from exc

    async def query(
        self,
        sql: str,
        parameters: list[dict[str, Any]] | None = None,
        *,
        partition_key: str | None = None,
    ) -> list[T]:
        """Run a SQL query and validate each result into the model class."""
        kwargs: dict[str, Any] = {"parameters": parameters or []}
        if partition_key is not None:
            kwargs["partition_key"] = partition_key
        try:
            return [
                self.model_class.model_validate(item)
                async for item in self._container.query_items(sql, **kwargs)
            ]
        except _BACKEND_ERRORS as exc:
            raise self._failure("query", exc) from exc
