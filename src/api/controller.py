"""Generic request handlers over any CrudService.

Each action decodes and validates its payload, makes exactly one service
call, and maps the outcome to a response:

    store / create   400 invalid payload, 500 any service failure
    index            500 any service failure
    show             404 any service failure
    update           400 invalid payload, 500 any service failure
    destroy          500 any service failure

Not-found on update/destroy deliberately maps to 500, not 404; changing it
changes the observable API and needs a product decision first.

Success bodies are JSON; error bodies are the error message as plain text.
"""

from __future__ import annotations

import logging
from typing import Any, Generic

from starlette.responses import JSONResponse, PlainTextResponse, Response

from src.domain.errors import CrudError, NotFoundError, ValidationError
from src.domain.repositories.base import CrudService, P, StorageHandle, T, U
from src.domain.validation import decode_payload

logger = logging.getLogger(__name__)


def _record(record: T) -> JSONResponse:
    return JSONResponse(record.model_dump(mode="json"))


def _error(status_code: int, exc: CrudError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=status_code)


class CrudController(Generic[T, P, U]):
    """HTTP-facing CRUD actions for the entity kind served by ``service``."""

    def __init__(self, service: CrudService[T, P, U]) -> None:
        self.service = service

    @property
    def entity_name(self) -> str:
        return self.service.entity_name

    def _rejected(self, action: str, exc: ValidationError) -> PlainTextResponse:
        logger.warning("%s %s rejected: %s", self.entity_name, action, exc.messages)
        return _error(400, exc)

    def _failed(self, action: str, status_code: int, exc: CrudError) -> PlainTextResponse:
        log = logger.info if isinstance(exc, NotFoundError) else logger.error
        log("%s %s failed: %s", self.entity_name, action, exc.message)
        return _error(status_code, exc)

    async def store(self, handle: StorageHandle, payload: Any) -> Response:
        try:
            pending = decode_payload(self.service.create_model, payload)
        except ValidationError as exc:
            return self._rejected("store", exc)
        try:
            record = await self.service.create(handle, pending)
        except CrudError as exc:
            return self._failed("store", 500, exc)
        return _record(record)

    async def create(self, handle: StorageHandle, payload: Any) -> Response:
        """Alias of store()."""
        return await self.store(handle, payload)

    async def index(self, handle: StorageHandle) -> Response:
        try:
            records = await self.service.get_all(handle)
        except CrudError as exc:
            return self._failed("index", 500, exc)
        return JSONResponse([record.model_dump(mode="json") for record in records])

    async def show(self, handle: StorageHandle, id: int) -> Response:
        try:
            record = await self.service.find(handle, id)
        except CrudError as exc:
            return self._failed("show", 404, exc)
        return _record(record)

    async def update(self, handle: StorageHandle, id: int, payload: Any) -> Response:
        try:
            pending = decode_payload(self.service.update_model, payload)
        except ValidationError as exc:
            return self._rejected("update", exc)
        try:
            record = await self.service.update(handle, id, pending)
        except CrudError as exc:
            return self._failed("update", 500, exc)
        return _record(record)

    async def destroy(self, handle: StorageHandle, id: int) -> Response:
        try:
            await self.service.delete(handle, id)
        except CrudError as exc:
            return self._failed("destroy", 500, exc)
        return Response(status_code=200)
