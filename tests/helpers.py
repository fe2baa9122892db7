"""Shared fixtures for the todo API tests."""
from fastapi.testclient import TestClient

from todo_api.config import Settings
from todo_api.main import create_app

FUTURE = "2999-01-01T00:00:00Z"
PAST = "2000-01-01T00:00:00Z"


def todo_payload(todo_id=1, name="buy milk", due_date=FUTURE, is_completed=False):
    return {
        "id": todo_id,
        "name": name,
        "dueDate": due_date,
        "isCompleted": is_completed,
    }


def make_client(store_backend="memory", **overrides):
    settings = Settings(store_backend=store_backend, **overrides)
    return TestClient(create_app(settings))
