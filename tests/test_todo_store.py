from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from todo_api.app.core.config import DEFAULT_TODO_DATA_FILE
from todo_api.app.core.errors import TodoDataLoadError
from todo_api.app.schemas.todo import Todo
from todo_api.app.services.todo_store import Found, NotFound, TodoStore

BLANCHE_ID = "58895985a22c04e761776d54"


def _write(path: Path, payload: object) -> str:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_store_size_matches_file(todo_store: TodoStore) -> None:
    assert todo_store.size() == 12
    assert len(todo_store.list_all()) == 12


def test_list_all_keeps_load_order(todo_store: TodoStore, fixture_path: Path) -> None:
    raw = json.loads(fixture_path.read_text(encoding="utf-8"))

    assert [todo.id for todo in todo_store.list_all()] == [item["_id"] for item in raw]


def test_list_all_is_read_only(todo_store: TodoStore) -> None:
    todos = todo_store.list_all()

    assert isinstance(todos, tuple)
    with pytest.raises(ValidationError):
        todos[0].owner = "Somebody else"
    assert todo_store.list_all()[0].owner == "Blanche"


def test_get_by_id_returns_found(todo_store: TodoStore) -> None:
    result = todo_store.get_by_id(BLANCHE_ID)

    assert isinstance(result, Found)
    assert result.todo.id == BLANCHE_ID
    assert result.todo.owner == "Blanche"
    assert result.todo.category == "software design"


@pytest.mark.parametrize("todo_id", ["nonexistent", "", "58895985A22C04E761776D54", " " + BLANCHE_ID])
def test_get_by_id_returns_not_found(todo_store: TodoStore, todo_id: str) -> None:
    assert todo_store.get_by_id(todo_id) == NotFound(todo_id)


def test_todo_serialises_with_wire_id(todo_store: TodoStore) -> None:
    dumped = todo_store.list_all()[0].model_dump(by_alias=True)

    assert dumped["_id"] == BLANCHE_ID
    assert set(dumped) == {"_id", "owner", "status", "category", "body"}


def test_todo_accepts_field_name_for_id() -> None:
    todo = Todo(id="abc", owner="Fry", status=True, category="homework", body="Do it")

    assert todo.id == "abc"


def test_bundled_data_file_loads() -> None:
    store = TodoStore.from_file(DEFAULT_TODO_DATA_FILE)

    assert store.size() > 0


def test_missing_file_is_a_load_error(tmp_path: Path) -> None:
    with pytest.raises(TodoDataLoadError) as exc_info:
        TodoStore.from_file(str(tmp_path / "missing.json"))

    assert isinstance(exc_info.value.__cause__, OSError)
    assert "missing.json" in str(exc_info.value)


def test_invalid_json_is_a_load_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('[{"_id": "1", "owner": ', encoding="utf-8")

    with pytest.raises(TodoDataLoadError):
        TodoStore.from_file(str(path))


def test_non_array_is_a_load_error(tmp_path: Path) -> None:
    path = _write(tmp_path / "object.json", {"_id": "1", "owner": "Fry"})

    with pytest.raises(TodoDataLoadError):
        TodoStore.from_file(path)


def test_record_with_missing_field_is_a_load_error(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "partial.json",
        [
            {"_id": "1", "owner": "Fry", "status": True, "category": "homework", "body": "ok"},
            {"_id": "2", "owner": "Fry", "status": False, "category": "homework"},
        ],
    )

    with pytest.raises(TodoDataLoadError):
        TodoStore.from_file(path)


def test_duplicate_ids_are_a_load_error(tmp_path: Path) -> None:
    record = {"_id": "1", "owner": "Fry", "status": True, "category": "homework", "body": "ok"}
    path = _write(tmp_path / "dupes.json", [record, dict(record, owner="Dawn")])

    with pytest.raises(TodoDataLoadError) as exc_info:
        TodoStore.from_file(path)

    assert "duplicate id 1" in str(exc_info.value)


def test_empty_array_loads_empty_store(tmp_path: Path) -> None:
    store = TodoStore.from_file(_write(tmp_path / "empty.json", []))

    assert store.size() == 0
    assert store.list_all() == ()
    assert isinstance(store.get_by_id("anything"), NotFound)
