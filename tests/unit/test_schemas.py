import pytest
from pydantic import ValidationError

from contacts_api.app.schemas.contact import ContactIn, ContactRead


def test_contact_in_accepts_camel_case_keys():
    contact = ContactIn.model_validate(
        {"name": "Alice", "mobile": "111", "imageUrl": "http://x/a.png", "groupId": "g1"}
    )
    assert contact.image_url == "http://x/a.png"
    assert contact.group_id == "g1"
    assert contact.email is None


def test_contact_in_requires_name_and_mobile():
    with pytest.raises(ValidationError) as exc_info:
        ContactIn.model_validate({})
    missing = {err["loc"][0] for err in exc_info.value.errors()}
    assert missing == {"name", "mobile"}


@pytest.mark.parametrize("field, message", [("name", "Name is Required"), ("mobile", "Mobile is Required")])
def test_contact_in_rejects_blank_required_fields(field, message):
    payload = {"name": "Alice", "mobile": "111", field: "   "}
    with pytest.raises(ValidationError) as exc_info:
        ContactIn.model_validate(payload)
    assert exc_info.value.errors()[0]["msg"] == message


@pytest.mark.parametrize("email", ["nope", "alice@example..com", "a@-x.com", "a@x.com."])
def test_contact_in_rejects_malformed_email(email):
    with pytest.raises(ValidationError) as exc_info:
        ContactIn.model_validate({"name": "Alice", "mobile": "111", "email": email})
    assert exc_info.value.errors()[0]["loc"] == ("email",)


def test_contact_in_accepts_valid_email():
    assert ContactIn.model_validate({"name": "Alice", "mobile": "111", "email": "alice@example.com"}).email == "alice@example.com"


@pytest.mark.parametrize("email", ["", "   "])
def test_contact_in_treats_blank_email_as_absent(email):
    assert ContactIn.model_validate({"name": "Alice", "mobile": "111", "email": email}).email is None


def test_contact_read_serialises_public_keys():
    contact = ContactRead(id="65a1b2c3d4e5f60718293a4b", name="Alice", mobile="111")
    assert contact.to_json() == {
        "_id": "65a1b2c3d4e5f60718293a4b",
        "name": "Alice",
        "imageUrl": None,
        "email": None,
        "mobile": "111",
        "company": None,
        "title": None,
        "groupId": None,
    }
