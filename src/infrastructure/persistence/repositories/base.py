"""Shared SQLAlchemy plumbing for the CrudService implementations."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, ClassVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.domain.errors import NotFoundError, StorageError
from src.domain.repositories.base import CrudService, P, T, U
from src.infrastructure.database import Base


class SqlCrudService(CrudService[T, P, U]):
    """Generic get_all/find/delete/count over a single ORM class with an integer id.

    Subclasses supply orm_model, _to_domain and the entity-specific
    create/update/factory.
    """

    orm_model: ClassVar[type[Base]]

    @staticmethod
    @abstractmethod
    def _to_domain(row: Any) -> Any:
        """Map an ORM row to the domain record."""

    @asynccontextmanager
    async def _session(
        self, handle: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Borrow one session for the duration of one call.

        Commits on success, rolls back on any error.  SQLAlchemy failures,
        including those raised at commit, and driver-level connection
        failures or timeouts surface as StorageError.
        """
        try:
            async with handle.begin() as session:
                yield session
        except SQLAlchemyError as exc:
            orig = getattr(exc, "orig", None)
            raise StorageError(str(orig) if orig is not None else str(exc)) from exc
        except (OSError, TimeoutError) as exc:
            # asyncpg raises these unwrapped when the server is unreachable.
            raise StorageError(str(exc) or f"storage unavailable: {type(exc).__name__}") from exc

    async def _get_row(self, session: AsyncSession, id: int) -> Any:
        row = await session.get(self.orm_model, id)
        if row is None:
            raise NotFoundError(self.entity_name, id)
        return row

    async def get_all(self, handle: async_sessionmaker[AsyncSession]) -> list[T]:
        stmt = select(self.orm_model).order_by(self.orm_model.id)
        async with self._session(handle) as session:
            result = await session.execute(stmt)
            return [self._to_domain(row) for row in result.scalars()]

    async def find(self, handle: async_sessionmaker[AsyncSession], id: int) -> T:
        async with self._session(handle) as session:
            return self._to_domain(await self._get_row(session, id))

    async def delete(self, handle: async_sessionmaker[AsyncSession], id: int) -> None:
        async with self._session(handle) as session:
            row = await self._get_row(session, id)
            await session.delete(row)

    async def count(self, handle: async_sessionmaker[AsyncSession]) -> int:
        stmt = select(func.count()).select_from(self.orm_model)
        async with self._session(handle) as session:
            result = await session.execute(stmt)
            return result.scalar_one()
