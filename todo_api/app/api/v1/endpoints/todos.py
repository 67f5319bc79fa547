"""
Todo endpoints for API v1.

These routes expose the read-only todo collection.  The list endpoint
accepts the query parameters ``owner``, ``category``, ``status``,
``contains`` (or ``body``), ``orderBy`` and ``limit``; any other
parameter is ignored.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from todo_api.app.core.errors import InvalidQueryParameterError
from todo_api.app.schemas.todo import Todo
from todo_api.app.services.todo_query import list_todos
from todo_api.app.services.todo_store import Found, TodoStore, get_todo_store

logger = logging.getLogger(__name__)

router = APIRouter()


def _query_param_map(request: Request) -> Dict[str, List[str]]:
    """Group repeated query parameters into lists, keeping their order."""
    params: Dict[str, List[str]] = {}
    for key, value in request.query_params.multi_items():
        params.setdefault(key, []).append(value)
    return params


@router.get("/", response_model=List[Todo])
async def get_todos(
    request: Request,
    store: TodoStore = Depends(get_todo_store),
) -> List[Todo]:
    """List todos matching the query string filters.

    - **owner**, **category**: exact matches.
    - **status**: ``complete`` for finished tasks; any other value
      selects unfinished ones.
    - **contains** / **body**: substring of the task body.
    - **orderBy**: ``owner``, ``body``, ``status`` or ``category``;
      any other field returns an empty list.
    - **limit**: maximum number of todos; must be an integer.
    """
    try:
        return list_todos(store.list_all(), _query_param_map(request))
    except InvalidQueryParameterError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get("/{todo_id}", response_model=Todo)
async def get_todo(
    todo_id: str,
    store: TodoStore = Depends(get_todo_store),
) -> Todo:
    """Retrieve a single todo by its ID.  Returns 404 if it does not exist."""
    result = store.get_by_id(todo_id)
    if isinstance(result, Found):
        return result.todo
    logger.info("Todo %s was not found", result.todo_id)
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No todo with id {result.todo_id} was found.",
    )
