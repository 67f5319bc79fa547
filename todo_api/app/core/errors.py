"""
Exception types raised by the record store and the query engine.

A missing record is not an error: ``TodoStore.get_by_id`` returns a
``NotFound`` result instead of raising.
"""


class TodoDataLoadError(RuntimeError):
    """The backing data file could not be turned into a store."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not load todos from '{path}': {reason}")
        self.path = path
        self.reason = reason


class InvalidQueryParameterError(ValueError):
    """A query parameter value is malformed (a client error)."""

    def __init__(self, name: str, value: str, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.value = value
