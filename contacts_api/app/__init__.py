"""
Application package initializer.

The contacts domain is split into configuration and persistence
(``core``), request/response schemas (``schemas``), business logic
(``services``) and HTTP routers (``api/v1/endpoints``).
"""

from .main import app  # noqa: F401
