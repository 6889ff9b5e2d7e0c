"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from contacts_api.app.services.contact_service import ContactService


def get_contact_service(request: Request) -> ContactService:
    """Return the service built at startup by ``create_app``."""
    return request.app.state.contact_service
