"""
Pydantic model for todo records.

Records come from a static JSON file where the identifier is stored
under ``_id``.  The model is frozen: records never change after the
store has loaded them.
"""

from pydantic import BaseModel, Field


class Todo(BaseModel):
    """A single task entry.

    ``status`` is ``True`` for a completed task and ``False`` otherwise.
    ``category`` is a free-form tag.
    """

    id: str = Field(..., alias="_id", description="Unique record identifier")
    owner: str = Field(..., description="Person responsible for the task")
    status: bool = Field(..., description="True when the task is complete")
    category: str = Field(..., description="Free-form category tag")
    body: str = Field(..., description="Task description")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }
