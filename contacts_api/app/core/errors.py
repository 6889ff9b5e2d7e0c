"""
Error taxonomy and result container for the contacts service.

Service operations never let expected failures escape as exceptions.
They return a ``Result`` carrying either a value or one of the
``ContactError`` subclasses below, and the HTTP layer decides which
status code each error kind maps to.  ``ContactStore`` raises the same
classes, which the service catches and wraps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class ContactError(Exception):
    """Base class for every failure the contacts service reports."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ContactError):
    """Malformed or missing input."""


class InvalidIdentifierError(ValidationError):
    """A path identifier is not a valid store identifier."""


class NotFoundError(ContactError):
    """No record exists for the given identifier."""


class ConflictError(ContactError):
    """The write would break the one-contact-per-mobile rule."""


class StoreError(ContactError):
    """Any other failure raised while talking to the store."""


@dataclass
class Result(Generic[T]):
    """Outcome of a service operation.

    Exactly one of ``value`` and ``error`` is meaningful: ``error`` is
    ``None`` on success.  ``msg`` is the human readable message sent
    alongside successful payloads.
    """

    value: Optional[T] = None
    error: Optional[ContactError] = None
    msg: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any, msg: Optional[str] = None) -> "Result":
        return cls(value=value, msg=msg)

    @classmethod
    def failure(cls, error: ContactError) -> "Result":
        return cls(error=error)
