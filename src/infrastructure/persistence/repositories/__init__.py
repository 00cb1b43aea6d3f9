"""Concrete SQLAlchemy service implementations.

Exports every SqlService class and the get_services() factory function
for wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import SqlCrudService
from .posts import SqlPostService
from .users import SqlUserService


@dataclass
class Services:
    """One service instance per entity kind.

    Services are stateless; the storage handle is supplied on every call,
    so a single Services instance is shared by all requests.
    """

    users: SqlUserService
    posts: SqlPostService


def get_services() -> Services:
    """Construct all services.

    Intended for wiring at application startup:

        services = get_services()
        app.include_router(crud_router(services.users, AsyncSessionLocal), prefix="/users")
    """
    return Services(
        users=SqlUserService(),
        posts=SqlPostService(),
    )


__all__ = [
    "SqlCrudService",
    "SqlUserService",
    "SqlPostService",
    "Services",
    "get_services",
]
