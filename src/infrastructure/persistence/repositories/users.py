"""SQLAlchemy implementation of UserService."""

from __future__ import annotations

from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.domain.models.users import PendingUser, User as DomainUser, UserUpdate
from src.domain.repositories.users import UserService
from src.infrastructure.persistence.models.users import User as OrmUser

from .base import SqlCrudService


class SqlUserService(SqlCrudService, UserService):
    orm_model = OrmUser

    @staticmethod
    def _to_domain(row: OrmUser) -> DomainUser:
        return DomainUser(
            id=row.id,
            name=row.name,
            email=row.email,
            created_at=row.created_at,
        )

    async def create(
        self, handle: async_sessionmaker[AsyncSession], pending: PendingUser
    ) -> DomainUser:
        async with self._session(handle) as session:
            row = OrmUser(name=pending.name, email=pending.email)
            session.add(row)
            await session.flush()
            await session.refresh(row)
            return self._to_domain(row)

    async def update(
        self, handle: async_sessionmaker[AsyncSession], id: int, pending: UserUpdate
    ) -> DomainUser:
        async with self._session(handle) as session:
            row = await self._get_row(session, id)
            for field, value in pending.changes().items():
                setattr(row, field, value)
            await session.flush()
            await session.refresh(row)
            return self._to_domain(row)

    async def factory(self, handle: async_sessionmaker[AsyncSession]) -> DomainUser:
        suffix = uuid4().hex[:12]
        pending = PendingUser(name=f"user-{suffix}", email=f"user-{suffix}@example.com")
        return await self.create(handle, pending)
