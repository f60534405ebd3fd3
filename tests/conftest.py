"""Test configuration for the todo API."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from todo_api.config import Settings  # noqa: E402
from todo_api.database import TodoCollection  # noqa: E402
from todo_api.main import create_app  # noqa: E402
from todo_api.repositories.todo_repository import TodoRepository  # noqa: E402
from todo_api.services.todo_service import TodoService  # noqa: E402


def make_settings(**overrides) -> Settings:
    values = {
        "title": "Todo API",
        "api_prefix": "",
        "seed_path": None,
        "host": "127.0.0.1",
        "port": 8080,
        "log_level": "INFO",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def collection() -> TodoCollection:
    """Provide an empty todo collection."""
    return TodoCollection()


@pytest.fixture
def todo_service(collection: TodoCollection) -> TodoService:
    """Create todo service over the test collection."""
    return TodoService(TodoRepository(collection))


@pytest.fixture
def client(collection: TodoCollection) -> TestClient:
    """Provide a TestClient for an app owning the test collection."""
    app = create_app(collection=collection, settings=make_settings())
    with TestClient(app) as test_client:
        yield test_client
