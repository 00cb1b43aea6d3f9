"""Tests for the get_services() DI factory."""

from src.domain.repositories import CrudService, PostService, UserService
from src.infrastructure.persistence.repositories import (
    Services,
    SqlPostService,
    SqlUserService,
    get_services,
)


def test_get_services_returns_services_instance():
    assert isinstance(get_services(), Services)


def test_services_users_is_correct_type():
    assert isinstance(get_services().users, SqlUserService)


def test_services_posts_is_correct_type():
    assert isinstance(get_services().posts, SqlPostService)


def test_sql_services_satisfy_domain_interfaces():
    services = get_services()
    assert isinstance(services.users, UserService)
    assert isinstance(services.posts, PostService)
    assert isinstance(services.users, CrudService)


def test_services_dataclass_has_two_fields():
    assert len(Services.__dataclass_fields__) == 2
