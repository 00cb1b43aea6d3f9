"""Payload decoding and validation for pending create/update shapes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel

from .errors import ValidationError

M = TypeVar("M", bound=BaseModel)


def render_errors(exc: pydantic.ValidationError) -> list[str]:
    """One "loc: msg" line per field failure; payload-level failures get no loc."""
    lines = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        lines.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return lines


def decode_payload(model: type[M], payload: Any) -> M:
    """Decode a wire payload into ``model`` and validate it.

    payload may be raw JSON (bytes/str) or an already decoded mapping.
    Raises ValidationError on malformed JSON, a non-object body, or any
    field-level failure.
    """
    try:
        if isinstance(payload, (bytes, bytearray, str)):
            return model.model_validate_json(payload)
        if not isinstance(payload, Mapping):
            raise ValidationError([f"expected a JSON object, got {type(payload).__name__}"])
        return model.model_validate(dict(payload))
    except pydantic.ValidationError as exc:
        raise ValidationError(render_errors(exc)) from exc
