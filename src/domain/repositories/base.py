"""Generic data-access contract.

CrudService[T, P, U] is the root abstraction every resource implements.
Concrete implementations live in src/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the persisted record, P the pending-create payload, U the
    pending-update payload.  All three are Pydantic models.
  - The storage handle is passed into every call rather than bound at
    construction, so one service instance serves every request.
  - id-addressed operations raise NotFoundError on a miss; every other
    data-access failure surfaces as StorageError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)
P = TypeVar("P", bound=BaseModel)
U = TypeVar("U", bound=BaseModel)

# Opaque to the domain layer; the SQL services expect an async_sessionmaker.
StorageHandle = Any


class CrudService(ABC, Generic[T, P, U]):
    """Abstract CRUD interface for one entity kind."""

    entity_name: ClassVar[str]
    record_model: ClassVar[type[BaseModel]]
    create_model: ClassVar[type[BaseModel]]
    update_model: ClassVar[type[BaseModel]]

    @abstractmethod
    async def create(self, handle: StorageHandle, pending: P) -> T:
        """Persist a new row and return it with storage-assigned fields populated."""

    @abstractmethod
    async def get_all(self, handle: StorageHandle) -> list[T]:
        """Return every row for this entity kind."""

    @abstractmethod
    async def find(self, handle: StorageHandle, id: int) -> T:
        """Return the row with the given id.  Raises NotFoundError on a miss."""

    @abstractmethod
    async def update(self, handle: StorageHandle, id: int, pending: U) -> T:
        """Apply pending to the row and return it.  Raises NotFoundError on a miss."""

    @abstractmethod
    async def delete(self, handle: StorageHandle, id: int) -> None:
        """Remove the row.  Raises NotFoundError on a miss, including a repeat delete."""

    @abstractmethod
    async def count(self, handle: StorageHandle) -> int:
        """Total row count for this entity kind."""

    @abstractmethod
    async def factory(self, handle: StorageHandle) -> T:
        """Persist and return a valid synthetic record for test setup."""
