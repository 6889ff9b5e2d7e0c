"""Entry point for the Contacts API.

Starts the FastAPI application under Uvicorn.  It is intended to be
executed from the project root, for example in Docker, where you only
specify a single Python file to run.

Host, port and the database location are read from environment
variables (``HOST``, ``PORT``, ``DATABASE_URL``); see
``contacts_api.app.core.config`` for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from contacts_api.app.core.config import settings
from contacts_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Contacts API stopped")
