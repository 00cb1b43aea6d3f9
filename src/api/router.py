"""Binds CrudController actions to the fixed five-endpoint shape.

    GET    /       index
    POST   /       store
    GET    /{id}   show
    PUT    /{id}   update
    DELETE /{id}   destroy

The storage handle is supplied once to build() and closed over by every
bound handler; there is no global lookup.
"""

from __future__ import annotations

from typing import Generic

from fastapi import APIRouter, Request
from starlette.responses import Response

from src.domain.repositories.base import CrudService, P, StorageHandle, T, U

from .controller import CrudController


class CrudRouter(Generic[T, P, U]):
    def __init__(self, controller: CrudController[T, P, U]) -> None:
        self.controller = controller

    def build(self, handle: StorageHandle) -> APIRouter:
        """Return a mountable router fragment bound to ``handle``."""
        controller = self.controller
        router = APIRouter(tags=[controller.entity_name])

        async def index() -> Response:
            return await controller.index(handle)

        async def store(request: Request) -> Response:
            return await controller.store(handle, await request.body())

        async def show(id: int) -> Response:
            return await controller.show(handle, id)

        async def update(id: int, request: Request) -> Response:
            return await controller.update(handle, id, await request.body())

        async def destroy(id: int) -> Response:
            return await controller.destroy(handle, id)

        router.add_api_route("/", index, methods=["GET"])
        router.add_api_route("/", store, methods=["POST"])
        router.add_api_route("/{id}", show, methods=["GET"])
        router.add_api_route("/{id}", update, methods=["PUT"])
        router.add_api_route("/{id}", destroy, methods=["DELETE"])
        return router


def crud_router(service: CrudService[T, P, U], handle: StorageHandle) -> APIRouter:
    """Build the controller and router stack for ``service`` bound to ``handle``."""
    return CrudRouter(CrudController(service)).build(handle)
