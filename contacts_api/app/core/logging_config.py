"""
Logging configuration for the Contacts API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it runs.  Every call
re-applies the level to the root logger and to uvicorn's own loggers,
so ``LOG_LEVEL`` also governs server and access-log output when the
app is launched through ``run.py``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers created by uvicorn; they propagate to the root handlers.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> int:
    """Configure the root and server loggers and return the numeric level.

    Unknown level names fall back to ``INFO``.  ``logfile`` adds a
    UTF-8 file handler on first configuration only.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    if root.handlers:
        return numeric_level

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return numeric_level
