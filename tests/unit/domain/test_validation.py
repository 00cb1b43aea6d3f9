"""Tests for src/domain/validation.py."""

import pytest

from src.domain.errors import ValidationError
from src.domain.models.posts import PendingPost
from src.domain.models.users import PendingUser
from src.domain.validation import decode_payload


def test_decode_bytes_payload():
    assert decode_payload(PendingUser, b'{"name": "A"}').name == "A"


def test_decode_str_payload():
    assert decode_payload(PendingUser, '{"name": "A"}').name == "A"


def test_decode_mapping_payload():
    assert decode_payload(PendingUser, {"name": "A"}).name == "A"


def test_malformed_json_raises_validation_error():
    with pytest.raises(ValidationError):
        decode_payload(PendingUser, b"{not json")


def test_non_object_payload_raises_validation_error():
    with pytest.raises(ValidationError, match="expected a JSON object"):
        decode_payload(PendingUser, ["A"])


def test_messages_are_prefixed_with_field_name():
    with pytest.raises(ValidationError) as info:
        decode_payload(PendingUser, {"name": "", "email": "bad"})
    fields = sorted(m.split(":", 1)[0] for m in info.value.messages)
    assert fields == ["email", "name"]


def test_field_validator_message_surfaces():
    with pytest.raises(ValidationError, match="single line"):
        decode_payload(PendingPost, {"title": "a\nb", "body": "B"})


def test_unknown_field_is_rejected():
    with pytest.raises(ValidationError, match="id"):
        decode_payload(PendingUser, {"id": 1, "name": "A"})
