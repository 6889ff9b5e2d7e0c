"""
Pydantic models for contact data.

``ContactIn`` is the body accepted by the create and update endpoints
and doubles as the field validator for those writes.  ``ContactRead``
is a stored record including its identifier.  Both use the camelCase
keys clients send (``imageUrl``, ``groupId``) while exposing
snake_case attributes to Python code.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError


class ContactBase(BaseModel):
    name: str = Field(..., examples=["Alice"])
    image_url: Optional[str] = Field(None, alias="imageUrl")
    email: Optional[str] = Field(None, examples=["alice@example.com"])
    mobile: str = Field(..., examples=["+15550100"])
    company: Optional[str] = None
    title: Optional[str] = None
    group_id: Optional[str] = Field(None, alias="groupId")

    model_config = ConfigDict(populate_by_name=True)


class ContactIn(ContactBase):
    """Schema for creating or replacing a contact.

    ``name`` and ``mobile`` must be present and non-blank.  ``email``
    is optional but must be a valid address when given; a blank string
    counts as absent.  All other fields are passed through untouched.
    """

    email: Optional[EmailStr] = Field(None, examples=["alice@example.com"])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError("value_error", "Name is Required")
        return v

    @field_validator("mobile")
    @classmethod
    def validate_mobile(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError("value_error", "Mobile is Required")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ContactRead(ContactBase):
    """A stored contact as returned by the API."""

    id: str = Field(..., alias="_id")

    def to_json(self) -> dict:
        """Serialise with the public key names (``_id``, ``imageUrl``...)."""
        return self.model_dump(by_alias=True)
