"""
Contact identifier helpers.

Contacts are keyed by BSON object ids rendered as 24 character hex
strings, the same opaque identifiers a MongoDB collection assigns.
"""

from bson import ObjectId
from bson.errors import InvalidId

from .errors import InvalidIdentifierError


def new_identifier() -> str:
    """Return a fresh identifier for a contact being inserted."""
    return str(ObjectId())


def coerce_identifier(value: str) -> str:
    """Normalise ``value`` to the store's identifier format.

    Raises ``InvalidIdentifierError`` when ``value`` is not a valid
    object id.
    """
    try:
        return str(ObjectId(value))
    except (InvalidId, TypeError) as exc:
        raise InvalidIdentifierError(
            f"Invalid contact id {value!r}: expected a 24 character hex string"
        ) from exc
