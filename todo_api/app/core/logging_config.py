"""
Logging configuration for the Todo API.

``setup_logging`` attaches a console handler, plus a file handler when
``LOG_FILE`` is set, to the root logger.  Modules log through
``logging.getLogger(__name__)`` and inherit this configuration.
"""

import logging
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``; unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        File that receives a copy of every record, appended to in
        UTF-8.  ``None`` or an empty string logs to the console only.
    """
    root = logging.getLogger()
    if root.handlers:
        # Someone (pytest, uvicorn, an earlier create_app) got here first.
        return

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
