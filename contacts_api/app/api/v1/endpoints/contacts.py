"""
Contact endpoints for API v1.

These routes expose the CRUD API for contacts.  Handlers are thin:
the request body is validated by ``ContactIn``, the work is done by
``ContactService`` and the returned ``Result`` is rendered into the
response envelope.  None of the routes require authentication.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from contacts_api.app.api.deps import get_contact_service
from contacts_api.app.api.v1.envelope import render
from contacts_api.app.schemas.contact import ContactIn
from contacts_api.app.services.contact_service import ContactService

router = APIRouter()


@router.get("/")
async def list_contacts(
    service: ContactService = Depends(get_contact_service),
) -> JSONResponse:
    """Return every contact."""
    return render(await service.list_contacts())


@router.get("/{contact_id}")
async def get_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> JSONResponse:
    """Retrieve a single contact by ID.

    Returns HTTP 404 if the contact is not found and 400 if
    ``contact_id`` is not a valid identifier.
    """
    return render(await service.get_contact(contact_id))


@router.post("/")
async def create_contact(
    contact_in: ContactIn,
    service: ContactService = Depends(get_contact_service),
) -> JSONResponse:
    """Create a contact.

    Responds 400 when another contact already uses the same mobile.
    """
    return render(await service.create_contact(contact_in))


@router.put("/{contact_id}")
async def update_contact(
    contact_id: str,
    contact_in: ContactIn,
    service: ContactService = Depends(get_contact_service),
) -> JSONResponse:
    """Replace an existing contact.

    Every field is overwritten; omitted optional fields are cleared.
    A missing contact is reported as 400, not 404.
    """
    result = await service.update_contact(contact_id, contact_in)
    return render(result, not_found=status.HTTP_400_BAD_REQUEST)


@router.delete("/{contact_id}")
async def delete_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> JSONResponse:
    """Delete a contact and return the deleted record."""
    return render(await service.delete_contact(contact_id))
