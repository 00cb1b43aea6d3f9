"""Domain service interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in src/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.

Import from this package rather than individual modules to avoid coupling
handlers to specific service module paths.
"""

from .base import CrudService, StorageHandle
from .posts import PostService
from .users import UserService

__all__ = [
    "CrudService",
    "StorageHandle",
    "UserService",
    "PostService",
]
