"""User service interface."""

from __future__ import annotations

from src.domain.models.users import PendingUser, User, UserUpdate

from .base import CrudService


class UserService(CrudService[User, PendingUser, UserUpdate]):
    """Data-access interface for User records.

    update() merges only the fields present in the payload.  create() and
    update() raise StorageError when the email is already taken.
    """

    entity_name = "User"
    record_model = User
    create_model = PendingUser
    update_model = UserUpdate
