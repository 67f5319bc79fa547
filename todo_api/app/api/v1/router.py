"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers defined in
``api/v1/endpoints`` under a unified prefix.  Only ``todos`` exists
today; new resources are added here with their own prefix and tag.
"""

from fastapi import APIRouter

from .endpoints import todos

router = APIRouter()

router.include_router(todos.router, prefix="/todos", tags=["todos"])
