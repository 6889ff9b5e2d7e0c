"""
Top‑level router for version 1 of the API.

This router aggregates resource routers under a unified prefix.  When
new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import contacts, health

router = APIRouter()

router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
router.include_router(health.router, tags=["health"])
