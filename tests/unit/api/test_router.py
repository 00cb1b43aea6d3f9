"""Tests for CrudRouter: endpoint shape and the HTTP round trip."""

from fastapi.routing import APIRoute

from src.api.controller import CrudController
from src.api.router import CrudRouter


def _bindings(router):
    return {
        (route.path, method)
        for route in router.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    }


def test_build_binds_exactly_five_endpoints(service, store):
    router = CrudRouter(CrudController(service)).build(store)
    assert _bindings(router) == {
        ("/", "GET"),
        ("/", "POST"),
        ("/{id}", "GET"),
        ("/{id}", "PUT"),
        ("/{id}", "DELETE"),
    }


def test_build_tags_routes_with_entity_name(service, store):
    router = CrudRouter(CrudController(service)).build(store)
    assert router.tags == ["User"]


def test_post_then_get_round_trip(client):
    created = client.post("/users/", json={"name": "A"}).json()
    fetched = client.get(f"/users/{created['id']}").json()
    assert fetched == created


def test_handlers_share_the_bound_handle(client, store):
    client.post("/users/", json={"name": "A"})
    client.get("/users/")
    assert store.calls == ["create", "get_all"]


def test_put_invalid_payload_returns_400_text(client):
    response = client.put("/users/1", json={"name": ""})
    assert response.status_code == 400
    assert response.text.startswith("name:")


def test_post_non_object_body_returns_400(client):
    response = client.post("/users/", json=["A"])
    assert response.status_code == 400


def test_delete_returns_empty_body(client):
    user_id = client.post("/users/", json={"name": "A"}).json()["id"]
    response = client.delete(f"/users/{user_id}")
    assert response.status_code == 200
    assert response.content == b""
