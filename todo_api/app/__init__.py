"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, errors), ``schemas``
(the record model), ``services`` (the record store and the query
engine) and ``api`` (versioned HTTP routers).
"""

from .main import app  # noqa: F401
