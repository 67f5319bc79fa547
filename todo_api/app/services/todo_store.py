"""
Read-only record store for todos.

The store is built once at startup from a JSON array of records and is
never modified afterwards, so it can be shared by concurrent requests
without locking.  Lookups by identifier return a ``Found`` or
``NotFound`` result rather than raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from fastapi import Request
from pydantic import TypeAdapter, ValidationError

from todo_api.app.core.errors import TodoDataLoadError
from todo_api.app.schemas.todo import Todo

logger = logging.getLogger(__name__)

_TODO_LIST_ADAPTER = TypeAdapter(List[Todo])


@dataclass(frozen=True)
class Found:
    """Successful lookup."""

    todo: Todo


@dataclass(frozen=True)
class NotFound:
    """No record carries ``todo_id``."""

    todo_id: str


LookupResult = Union[Found, NotFound]


class TodoStore:
    """Immutable in-memory collection of todo records in load order."""

    def __init__(self, todos: Iterable[Todo]) -> None:
        self._todos: Tuple[Todo, ...] = tuple(todos)

    @classmethod
    def from_file(cls, path: str) -> "TodoStore":
        """Load the store from a JSON file containing an array of records.

        Any failure (unreadable file, invalid JSON, a record with missing
        or mistyped fields, duplicate ``_id`` values) raises
        ``TodoDataLoadError``; there is no partial load.
        """
        data_path = Path(path)
        try:
            raw = data_path.read_bytes()
        except OSError as exc:
            raise TodoDataLoadError(str(data_path), str(exc)) from exc
        try:
            todos = _TODO_LIST_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            raise TodoDataLoadError(str(data_path), f"{exc.error_count()} validation error(s)") from exc

        seen = set()
        for todo in todos:
            if todo.id in seen:
                raise TodoDataLoadError(str(data_path), f"duplicate id {todo.id}")
            seen.add(todo.id)

        logger.info("Loaded %d todos from %s", len(todos), data_path)
        return cls(todos)

    def size(self) -> int:
        return len(self._todos)

    def get_by_id(self, todo_id: str) -> LookupResult:
        """Return ``Found`` for the record with ``todo_id`` or ``NotFound``."""
        for todo in self._todos:
            if todo.id == todo_id:
                return Found(todo)
        return NotFound(todo_id)

    def list_all(self) -> Tuple[Todo, ...]:
        """Return every record in load order.

        The tuple of frozen models cannot be used to alter the store.
        """
        return self._todos


def get_todo_store(request: Request) -> TodoStore:
    """FastAPI dependency returning the store loaded at startup."""
    return request.app.state.todo_store
