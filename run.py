"""Entry point for the Todo API server.

Host and port are read from the ``API_HOST`` and ``API_PORT``
environment variables (defaults ``0.0.0.0`` and ``4567``); the record
file comes from ``TODO_DATA_FILE``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from todo_api.app.core.config import settings
from todo_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.api_host, port=settings.api_port, reload=False, log_level="info")
    server = Server(config)
    try:
        await server.serve()
    except Exception:
        logging.exception("Todo API stopped unexpectedly")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
