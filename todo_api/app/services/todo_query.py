"""
Query engine for todo records.

``list_todos`` runs a fixed pipeline over the store's records:

1. ``owner``: exact, case-sensitive match on ``owner``
2. ``category``: exact match on ``category``
3. ``status``: ``"complete"`` selects completed tasks; any other
   value (including ``"Complete"``) selects incomplete ones
4. ``contains``: substring match on ``body`` (``body`` is accepted as
   an alias; ``contains`` wins when both are given)
5. ``orderBy``: ascending sort on ``owner``, ``body``, ``status`` or
   ``category``; an unknown field produces an empty result
6. ``limit``: keep at most N leading records

Each stage is a generator over the previous one, so filters do not
copy the sequence; only sorting and the final result materialise it.
Parameters arrive as a mapping of name to list of values, as parsed
from a query string; only the first value of each is used and unknown
names are ignored.
"""

from __future__ import annotations

import itertools
import logging
import re
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence

from todo_api.app.core.errors import InvalidQueryParameterError
from todo_api.app.schemas.todo import Todo

logger = logging.getLogger(__name__)

COMPLETE_STATUS = "complete"
ORDERABLE_FIELDS = frozenset({"owner", "body", "status", "category"})

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def filter_by_owner(todos: Iterable[Todo], owner: str) -> Iterator[Todo]:
    return (todo for todo in todos if todo.owner == owner)


def filter_by_category(todos: Iterable[Todo], category: str) -> Iterator[Todo]:
    return (todo for todo in todos if todo.category == category)


def filter_by_status(todos: Iterable[Todo], status: str) -> Iterator[Todo]:
    """Keep completed todos for ``"complete"`` and incomplete ones otherwise.

    Unrecognised values are not rejected; they select incomplete todos.
    """
    complete = status == COMPLETE_STATUS
    return (todo for todo in todos if todo.status == complete)


def filter_by_contains(todos: Iterable[Todo], text: str) -> Iterator[Todo]:
    return (todo for todo in todos if text in todo.body)


def order_by(todos: Iterable[Todo], field: str) -> Iterator[Todo]:
    """Sort ascending by the string form of ``field``.

    The sort is stable, so records comparing equal keep their relative
    order.  An unknown field yields nothing rather than an error.
    """
    if field not in ORDERABLE_FIELDS:
        logger.debug("Unknown orderBy field %r, returning no todos", field)
        return iter(())
    return iter(sorted(todos, key=lambda todo: str(getattr(todo, field))))


def limit(todos: Iterable[Todo], count: int) -> Iterator[Todo]:
    return itertools.islice(todos, count)


def parse_limit(raw: str) -> int:
    """Parse a base-10, non-negative ``limit`` value.

    Values of any magnitude are accepted.  Raises
    ``InvalidQueryParameterError`` carrying the raw value.
    """
    error = InvalidQueryParameterError(
        "limit", raw, f"Specified limit '{raw}' can't be parsed to an integer"
    )
    if not _INTEGER_RE.fullmatch(raw):
        raise error
    try:
        value = int(raw)
    except ValueError as exc:
        # More digits than the interpreter will convert.
        raise error from exc
    if value < 0:
        raise error
    return value


def _first(params: Mapping[str, Sequence[str]], name: str) -> Optional[str]:
    values = params.get(name)
    if not values:
        return None
    return values[0]


def list_todos(records: Iterable[Todo], params: Mapping[str, Sequence[str]]) -> List[Todo]:
    """Apply the filter/sort/limit pipeline and return the matching todos.

    ``limit`` is validated before any other stage runs so a bad value
    fails the query without doing work.
    """
    owner = _first(params, "owner")
    category = _first(params, "category")
    status = _first(params, "status")
    contains = _first(params, "contains")
    if contains is None:
        contains = _first(params, "body")
    order_field = _first(params, "orderBy")
    raw_limit = _first(params, "limit")
    max_count = parse_limit(raw_limit) if raw_limit is not None else None

    todos: Iterable[Todo] = records
    if owner is not None:
        todos = filter_by_owner(todos, owner)
    if category is not None:
        todos = filter_by_category(todos, category)
    if status is not None:
        todos = filter_by_status(todos, status)
    if contains is not None:
        todos = filter_by_contains(todos, contains)
    if order_field is not None:
        todos = order_by(todos, order_field)
    if max_count is not None:
        todos = limit(todos, max_count)
    return list(todos)
