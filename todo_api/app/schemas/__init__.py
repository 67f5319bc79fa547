"""
Pydantic schemas for the Todo API.

Schemas describe the records read from the data file and returned to
clients.
"""
