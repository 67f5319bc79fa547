"""
Service layer for the Todo API.

``todo_store`` holds the records loaded at startup and ``todo_query``
implements the filter/sort/limit pipeline used by the list endpoint.
"""
