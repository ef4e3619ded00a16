import pytest
from fastapi.testclient import TestClient

from blog_services.app.core.errors import (
    IdentifierExhaustedError,
    NotFoundError,
    ValidationError,
)
from blog_services.app.main import create_comments_app, create_posts_app


@pytest.fixture
def client(settings):
    app = create_posts_app(settings)

    @app.get("/validation-error")
    def raise_validation_error():
        raise ValidationError("bad payload")

    @app.get("/not-found")
    def raise_not_found():
        raise NotFoundError("Post not found")

    @app.get("/exhausted")
    def raise_exhausted():
        raise IdentifierExhaustedError("no ids left")

    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlerMappings:
    def test_validation_error_returns_400(self, client):
        response = client.get("/validation-error")
        assert response.status_code == 400
        assert response.json() == {"error": "bad payload"}

    def test_not_found_returns_404(self, client):
        response = client.get("/not-found")
        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}

    def test_identifier_exhausted_returns_503(self, client):
        response = client.get("/exhausted")
        assert response.status_code == 503


def test_missing_store_returns_503(settings):
    app = create_posts_app(settings)
    del app.state.post_store

    response = TestClient(app).get("/posts")

    assert response.status_code == 503
    assert response.json() == {"error": "Post store unavailable"}


def test_missing_comment_store_returns_503(settings):
    app = create_comments_app(settings)
    del app.state.comment_store

    response = TestClient(app).get("/posts/p1/comments")

    assert response.status_code == 503
    assert response.json() == {"error": "Comment store unavailable"}
