import re

import pytest
from fastapi.testclient import TestClient

from hexservice.entities import Example
from hexservice.http import AppContext, HttpProvider, create_app
from hexservice.ports import ExampleRepo, RepositoryError
from hexservice.service import ExampleService


class MemoryRepo(ExampleRepo):
    def __init__(self):
        self.examples = []

    async def all(self):
        return list(self.examples)

    async def insert(self, example):
        self.examples.append(example)
        return example


class BrokenRepo(ExampleRepo):
    async def all(self):
        raise RepositoryError("boom")

    async def insert(self, example):
        raise RepositoryError("boom")


def make_client(repo):
    app = create_app(AppContext(example_service=ExampleService(repo)))
    return TestClient(app)


@pytest.fixture
def repo():
    return MemoryRepo()


@pytest.fixture
def client(repo):
    return make_client(repo)


def test_list_is_empty_at_start(client):
    response = client.get("/api/v1/example")
    assert response.status_code == 200
    assert response.json() == []


def test_add_random_example_returns_dto(client, repo):
    response = client.post("/api/v1/example/random")
    assert response.status_code == 200
    body = response.json()
    assert body["name"].startswith("example-")
    assert re.fullmatch(r"[0-9a-f]{24}", body["id"])
    assert body["created_at"].endswith("Z")
    assert [str(example.id) for example in repo.examples] == [body["id"]]


def test_added_example_is_listed(client):
    created = client.post("/api/v1/example/random").json()
    listed = client.get("/api/v1/example").json()
    assert listed == [created]


def test_list_shows_stored_entities(client, repo):
    repo.examples.append(Example(name="stored"))
    listed = client.get("/api/v1/example").json()
    assert [item["name"] for item in listed] == ["stored"]
    assert listed[0]["id"] == str(repo.examples[0].id)


def test_repository_failure_on_list_is_bad_gateway():
    response = make_client(BrokenRepo()).get("/api/v1/example")
    assert response.status_code == 502
    assert response.json() == {"cause": "boom"}


def test_repository_failure_on_add_is_bad_gateway():
    response = make_client(BrokenRepo()).post("/api/v1/example/random")
    assert response.status_code == 502
    assert response.json() == {"cause": "boom"}


def test_random_route_rejects_get(client):
    assert client.get("/api/v1/example/random").status_code == 405


def test_cors_preflight_allows_any_origin(client):
    response = client.options(
        "/api/v1/example/random",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_http_provider_address(client):
    provider = HttpProvider(8080, client.app)
    assert provider.addr == "0.0.0.0:8080"
    assert provider.port == 8080