"""Shared fixtures: fresh applications and stores for every test."""

import pytest
from fastapi.testclient import TestClient

from blog_services.app.core.config import Settings
from blog_services.app.main import create_comments_app, create_posts_app
from blog_services.app.services.comment_store import CommentStore
from blog_services.app.services.post_store import PostStore


@pytest.fixture
def settings():
    return Settings(log_level="WARNING", id_bytes=4, strict_payloads=False)


@pytest.fixture
def strict_settings():
    return Settings(log_level="WARNING", id_bytes=4, strict_payloads=True)


@pytest.fixture
def post_store():
    return PostStore()


@pytest.fixture
def comment_store():
    return CommentStore()


@pytest.fixture
def posts_client(settings, post_store):
    app = create_posts_app(settings, store=post_store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def comments_client(settings, comment_store):
    app = create_comments_app(settings, store=comment_store)
    with TestClient(app) as client:
        yield client
