"""In-memory UserService used to exercise the HTTP layer without a database.

The storage handle is a MemoryStore; the service keeps no state of its own,
mirroring how the SQL services borrow everything from the handle.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.controller import CrudController
from src.api.router import crud_router
from src.domain.errors import CrudError, NotFoundError
from src.domain.models.users import PendingUser, User, UserUpdate
from src.domain.repositories.users import UserService


class MemoryStore:
    def __init__(self) -> None:
        self.rows: dict[int, User] = {}
        self.next_id = 1
        self.calls: list[str] = []
        self.fail: CrudError | None = None

    def check(self, op: str) -> None:
        self.calls.append(op)
        if self.fail is not None:
            raise self.fail


class InMemoryUserService(UserService):
    async def create(self, handle: MemoryStore, pending: PendingUser) -> User:
        handle.check("create")
        record = User(
            id=handle.next_id,
            name=pending.name,
            email=pending.email,
            created_at=datetime.now(timezone.utc),
        )
        handle.rows[record.id] = record
        handle.next_id += 1
        return record

    async def get_all(self, handle: MemoryStore) -> list[User]:
        handle.check("get_all")
        return list(handle.rows.values())

    async def find(self, handle: MemoryStore, id: int) -> User:
        handle.check("find")
        try:
            return handle.rows[id]
        except KeyError:
            raise NotFoundError(self.entity_name, id) from None

    async def update(self, handle: MemoryStore, id: int, pending: UserUpdate) -> User:
        handle.check("update")
        if id not in handle.rows:
            raise NotFoundError(self.entity_name, id)
        record = handle.rows[id].model_copy(update=pending.changes())
        handle.rows[id] = record
        return record

    async def delete(self, handle: MemoryStore, id: int) -> None:
        handle.check("delete")
        if handle.rows.pop(id, None) is None:
            raise NotFoundError(self.entity_name, id)

    async def count(self, handle: MemoryStore) -> int:
        handle.check("count")
        return len(handle.rows)

    async def factory(self, handle: MemoryStore) -> User:
        return await self.create(handle, PendingUser(name=f"user-{handle.next_id}"))


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def service() -> InMemoryUserService:
    return InMemoryUserService()


@pytest.fixture
def controller(service) -> CrudController:
    return CrudController(service)


@pytest.fixture
def client(service, store):
    app = FastAPI()
    app.include_router(crud_router(service, store), prefix="/users")
    with TestClient(app) as test_client:
        yield test_client
