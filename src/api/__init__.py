"""HTTP layer: generic request handlers and route binding."""

from .controller import CrudController
from .router import CrudRouter, crud_router

__all__ = ["CrudController", "CrudRouter", "crud_router"]
