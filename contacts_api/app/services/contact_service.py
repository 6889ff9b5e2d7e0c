"""
Business logic for contacts.

``ContactService`` implements the five contact operations on top of
an injected ``ContactStore``.  Every method returns a ``Result``:
expected failures (bad identifier, missing record, duplicate mobile)
and unexpected ones (anything the store raises) are returned as
``ContactError`` instances rather than raised, and the API layer maps
them to HTTP responses.

Request bodies arrive already checked by ``ContactIn``'s validators.
"""

import logging
from typing import List

from ..core.errors import (
    ConflictError,
    ContactError,
    NotFoundError,
    Result,
    StoreError,
)
from ..core.identifiers import coerce_identifier
from ..schemas.contact import ContactIn, ContactRead
from .store import DUPLICATE_MOBILE, ContactStore

logger = logging.getLogger(__name__)

GET_NOT_FOUND = "NO contact found"
UPDATE_NOT_FOUND = "Contact is not found..."
DELETE_NOT_FOUND = "No contact found"

CREATED = "Contact is Created"
UPDATED = "Contact is Updated"
DELETED = "Contact is Deleted"


class ContactService:
    """Сервис для управления контактами.

    Each operation is a single best-effort attempt; nothing is retried.
    """

    def __init__(self, store: ContactStore) -> None:
        self.store = store

    async def list_contacts(self) -> Result[List[ContactRead]]:
        """Return all contacts in store order."""
        try:
            contacts = await self.store.find_all()
        except Exception as exc:
            return self._unexpected("list contacts", exc)
        return Result.success(contacts)

    async def get_contact(self, contact_id: str) -> Result[ContactRead]:
        """Retrieve a single contact by its identifier."""
        try:
            contact = await self.store.find_by_id(coerce_identifier(contact_id))
        except Exception as exc:
            return self._unexpected(f"get contact {contact_id}", exc)
        if contact is None:
            return Result.failure(NotFoundError(GET_NOT_FOUND))
        return Result.success(contact, msg="")

    async def create_contact(self, data: ContactIn) -> Result[ContactRead]:
        """Insert a new contact unless its mobile is already taken.

        The lookup below gives the usual error for sequential
        duplicates; the store's unique index catches a concurrent
        insert that slips past it and reports the same ``ConflictError``.
        """
        try:
            existing = await self.store.find_one("mobile", data.mobile)
            if existing is not None:
                return Result.failure(ConflictError(DUPLICATE_MOBILE))
            contact = await self.store.insert(data)
        except Exception as exc:
            return self._unexpected("create contact", exc)
        logger.info("Created contact %s", contact.id)
        return Result.success(contact, msg=CREATED)

    async def update_contact(self, contact_id: str, data: ContactIn) -> Result[ContactRead]:
        """Replace every field of an existing contact.

        This is not a merge: optional fields missing from ``data`` are
        cleared.
        """
        try:
            key = coerce_identifier(contact_id)
            if await self.store.find_by_id(key) is None:
                return Result.failure(NotFoundError(UPDATE_NOT_FOUND))
            contact = await self.store.update_by_id(key, data)
        except Exception as exc:
            return self._unexpected(f"update contact {contact_id}", exc)
        if contact is None:
            # Deleted between the lookup and the update.
            return Result.failure(NotFoundError(UPDATE_NOT_FOUND))
        logger.info("Updated contact %s", contact.id)
        return Result.success(contact, msg=UPDATED)

    async def delete_contact(self, contact_id: str) -> Result[ContactRead]:
        """Delete a contact and return its last snapshot."""
        try:
            snapshot = await self.store.delete_by_id(coerce_identifier(contact_id))
        except Exception as exc:
            return self._unexpected(f"delete contact {contact_id}", exc)
        if snapshot is None:
            return Result.failure(NotFoundError(DELETE_NOT_FOUND))
        logger.info("Deleted contact %s", snapshot.id)
        return Result.success(snapshot, msg=DELETED)

    @staticmethod
    def _unexpected(action: str, exc: Exception) -> Result:
        """Wrap ``exc`` as a failed result.

        Errors from the contact taxonomy pass through as they are;
        anything else becomes a ``StoreError`` carrying the original
        message.
        """
        if isinstance(exc, ContactError):
            logger.warning("Could not %s: %s", action, exc.message)
            return Result.failure(exc)
        logger.exception("Unexpected error while trying to %s", action)
        return Result.failure(StoreError(str(exc)))
