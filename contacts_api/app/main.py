"""
Main entrypoint for the Contacts API.

This module assembles the FastAPI application, sets up logging, opens
the contacts store and includes versioned routers.  ``create_app``
builds and configures the app, which is then instantiated at module
import time as ``app``, e.g.::

    uvicorn contacts_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.envelope import validation_errors_body
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import get_connection, init_db
from .core.logging_config import setup_logging
from .services.contact_service import ContactService
from .services.store import ContactStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use instead of the module-level ``settings``.
        Tests pass one pointing at a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # One connection for the whole process, shared by every request.
        conn = get_connection(settings.database_url)
        try:
            init_db(conn)
            app.state.contact_service = ContactService(ContactStore(conn))
            logger.info("Contacts store ready at %s", settings.database_url)
            yield
        finally:
            conn.close()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(validation_errors_body(exc.errors())),
        )

    app.include_router(v1_router, prefix=settings.api_prefix)
    return app


app = create_app()
