from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from todo_api.app.core.config import Settings
from todo_api.app.main import create_app
from todo_api.app.services.todo_store import TodoStore

FIXTURE_PATH = Path(__file__).resolve().parent / "fixtures" / "todos.json"


@pytest.fixture()
def fixture_path() -> Path:
    return FIXTURE_PATH


@pytest.fixture()
def todo_store() -> TodoStore:
    return TodoStore.from_file(str(FIXTURE_PATH))


@pytest.fixture()
def client() -> Iterator[TestClient]:
    app = create_app(Settings(todo_data_file=str(FIXTURE_PATH)))
    with TestClient(app) as test_client:
        yield test_client
