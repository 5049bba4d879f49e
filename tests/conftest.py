"""Shared fixtures: an application bound to a temporary database and log dir."""
import pytest
from fastapi.testclient import TestClient

from articles_api.main import create_app


@pytest.fixture
def log_dir(tmp_path):
    return tmp_path / "logs"


@pytest.fixture
def app(tmp_path, log_dir):
    return create_app(
        database_path=tmp_path / "data" / "articles.db",
        log_dir=log_dir,
        max_body_bytes=1024,
        body_timeout=5,
        expose_error_details=False,
    )


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_article(client):
    """Create an article through the API and return the response body."""
    def _make(title="Hello", content="World", category=None):
        payload = {"title": title, "content": content}
        if category is not None:
            payload["category"] = category
        response = client.post("/articles", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make
