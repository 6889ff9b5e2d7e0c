"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with a local SQLite file and console logging.  Override
these via environment variables in a deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Contacts API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the ``/contacts`` router is mounted, e.g.
    # ``/api/v1``.  Empty mounts it at the root.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Path to the SQLite database holding the contacts collection.  A
    # relative path is resolved against the project root by ``db``;
    # ``:memory:`` keeps everything in process.
    database_url: str = os.getenv("DATABASE_URL", "contacts.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "9999"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
