import pytest
from fastapi.testclient import TestClient

from static_server.app import create_app


@pytest.fixture
def client(static_root):
    return TestClient(create_app(static_root))


def test_index(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "Hello, world!" in response.text
    assert response.headers["content-type"] == "text/html"
    assert response.headers["content-encoding"] == "utf-8"
    assert int(response.headers["content-length"]) == len(response.content)


def test_root_matches_index(client):
    assert client.get("/").content == client.get("/index.html").content


def test_contacts(client):
    response = client.get("/contacts.html")

    assert response.status_code == 200
    for i in range(1, 6):
        assert f"Contact {i}" in response.text


def test_missing(client):
    response = client.get("/missing.html")

    assert response.status_code == 404
    assert response.content == b""


def test_docs_routes_are_not_served(client):
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_post_not_allowed(client):
    response = client.post("/index.html")

    assert response.status_code == 405
    assert response.headers["allow"] == "GET"


def test_connection_close(client):
    assert client.get("/").headers["connection"] == "close"


@pytest.mark.parametrize("path", ["/index.html%00", "/" + "a" * 300 + ".html"])
def test_unusable_paths_are_not_found(static_root, path):
    client = TestClient(create_app(static_root), raise_server_exceptions=False)
    response = client.get(path)

    assert response.status_code == 404
    assert response.content == b""
