"""Tests for src/domain/errors.py."""

from src.domain.errors import CrudError, NotFoundError, StorageError, ValidationError


def test_not_found_message_names_entity_and_id():
    assert str(NotFoundError("User", 7)) == "User with id 7 not found"


def test_not_found_keeps_identifier():
    assert NotFoundError("User", 7).identifier == 7


def test_validation_error_joins_messages():
    exc = ValidationError(["name: too short", "email: bad"])
    assert exc.message == "name: too short\nemail: bad"


def test_validation_error_without_messages_has_fallback():
    assert ValidationError([]).message == "invalid payload"


def test_storage_error_message_verbatim():
    assert StorageError("connection refused").message == "connection refused"


def test_all_errors_share_base():
    for exc in (ValidationError(["x"]), NotFoundError("Post", 1), StorageError("x")):
        assert isinstance(exc, CrudError)
