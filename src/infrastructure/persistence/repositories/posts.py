"""SQLAlchemy implementation of PostService."""

from __future__ import annotations

from uuid import uuid4

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.domain.models.posts import PendingPost, Post as DomainPost, PostUpdate
from src.domain.repositories.posts import PostService
from src.infrastructure.persistence.models.posts import Post as OrmPost

from .base import SqlCrudService


class SqlPostService(SqlCrudService, PostService):
    orm_model = OrmPost

    @staticmethod
    def _to_domain(row: OrmPost) -> DomainPost:
        return DomainPost(
            id=row.id,
            title=row.title,
            body=row.body,
            published=row.published,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    async def create(
        self, handle: async_sessionmaker[AsyncSession], pending: PendingPost
    ) -> DomainPost:
        async with self._session(handle) as session:
            row = OrmPost(title=pending.title, body=pending.body, published=pending.published)
            session.add(row)
            await session.flush()
            await session.refresh(row)
            return self._to_domain(row)

    async def update(
        self, handle: async_sessionmaker[AsyncSession], id: int, pending: PostUpdate
    ) -> DomainPost:
        async with self._session(handle) as session:
            row = await self._get_row(session, id)
            row.title = pending.title
            row.body = pending.body
            row.published = pending.published
            # Explicit so an identical replacement still moves updated_at.
            row.updated_at = func.now()
            await session.flush()
            await session.refresh(row)
            return self._to_domain(row)

    async def factory(self, handle: async_sessionmaker[AsyncSession]) -> DomainPost:
        suffix = uuid4().hex[:12]
        pending = PendingPost(title=f"Post {suffix}", body=f"Generated body {suffix}.")
        return await self.create(handle, pending)
