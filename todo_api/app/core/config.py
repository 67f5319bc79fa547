"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with the bundled record file when nothing is set.
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TODO_DATA_FILE = str(Path(__file__).resolve().parent.parent.parent / "data" / "todos.json")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Todo API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional file that receives a copy of the console log.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the JSON array of todo records loaded once at startup.
    # Relative paths are resolved against the current working directory.
    todo_data_file: str = os.getenv("TODO_DATA_FILE", DEFAULT_TODO_DATA_FILE)

    # Bind address used by ``run.py``.
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "4567"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
