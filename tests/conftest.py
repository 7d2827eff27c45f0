"""
Shared Test Fixtures for Blog Manager

Every test gets a fresh in-memory SQLite database, so fixtures can be
combined freely without leaking rows between tests.
"""

import pytest
from fastapi.testclient import TestClient

from blog_manager.domain.entities import Post
from blog_manager.infrastructure.config.container import Container
from blog_manager.infrastructure.config.settings import AppConfig, Settings
from blog_manager.infrastructure.database.engine import build_engine, init_schema
from blog_manager.presentation.web.app import create_app


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def engine():
    """
    In-memory SQLite engine with the schema already created.

    Returns:
        sqlalchemy.Engine: Engine bound to a single shared connection.
    """
    eng = build_engine("sqlite://")
    init_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def container(engine):
    """Dependency container wired to the in-memory engine."""
    settings = Settings(database_url="sqlite://")
    return Container(settings=settings, app_config=AppConfig({}), engine=engine)


@pytest.fixture
def post_repo(container):
    return container.post_repo


@pytest.fixture
def post_service(container):
    return container.post_service


# =============================================================================
# Web Fixtures
# =============================================================================

@pytest.fixture
def app(container):
    return create_app(container)


@pytest.fixture
def client(app):
    """
    FastAPI TestClient for the app.

    Usage:
        def test_something(client):
            response = client.get("/api/posts")
    """
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# Data Factories
# =============================================================================

@pytest.fixture
def make_post():
    """
    Factory for unsaved Post entities.

    Usage:
        post = make_post(title="Hello", published=True)
    """
    def _make_post(**overrides) -> Post:
        data = {
            "title": "Test Title",
            "content": "Test Content",
            "summary": "Test Summary",
            "author": "Test Author",
            "tags": "python,testing",
            "published": False,
        }
        data.update(overrides)
        return Post(**data)

    return _make_post
