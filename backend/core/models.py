"""Contact entity, its edit view model and form validation."""

import enum
import re
from dataclasses import dataclass
from typing import Any


EDITABLE_FIELDS = ("name", "address", "city", "state", "zip", "email")

MAX_FIELD_LENGTH = 100

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ContactStatus(str, enum.Enum):
    SUBMITTED = "Submitted"
    APPROVED = "Approved"


@dataclass
class Contact:
    """A stored contact row."""

    owner_id: str
    name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    email: str = ""
    status: ContactStatus = ContactStatus.SUBMITTED
    contact_id: int | None = None

    def to_row(self) -> dict:
        return {
            "contact_id": self.contact_id,
            "owner_id": self.owner_id,
            "name": self.name,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
            "email": self.email,
            "status": self.status.value,
        }


@dataclass
class ContactEditViewModel:
    """Editable fields of a contact as exchanged with the client.

    Owner and status are not part of it; parse_contact_form ignores keys with
    those names in a request body.
    """

    contact_id: int | None = None
    name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    email: str = ""


def view_model_to_contact(view_model: ContactEditViewModel, contact: Contact) -> Contact:
    """Copy the editable fields of ``view_model`` onto ``contact``."""
    for name in EDITABLE_FIELDS:
        setattr(contact, name, getattr(view_model, name))
    return contact


def contact_to_view_model(contact: Contact) -> ContactEditViewModel:
    return ContactEditViewModel(
        contact_id=contact.contact_id,
        **{name: getattr(contact, name) for name in EDITABLE_FIELDS},
    )


def validate_contact_form(view_model: ContactEditViewModel) -> dict[str, list[str]]:
    """Return field errors keyed by field name; empty when the form is valid."""
    errors: dict[str, list[str]] = {}

    def add(field_name: str, message: str) -> None:
        errors.setdefault(field_name, []).append(message)

    for name in EDITABLE_FIELDS:
        if len(getattr(view_model, name)) > MAX_FIELD_LENGTH:
            add(name, f"Must be at most {MAX_FIELD_LENGTH} characters")

    if not view_model.name.strip():
        add("name", "Name is required")

    email = view_model.email.strip()
    if not email:
        add("email", "Email is required")
    elif not EMAIL_RE.match(email):
        add("email", "Email is not a valid address")

    return errors


def parse_contact_form(
    body: dict[str, Any], contact_id: int | None = None
) -> tuple[ContactEditViewModel, dict[str, list[str]]]:
    """Build a form from a decoded request body and collect its field errors.

    Missing and null fields become empty strings. Values of any other
    non-string type are reported as errors and echoed back as text. Keys that
    are not editable fields (owner_id, status, ...) are ignored.
    """
    values: dict[str, str] = {}
    errors: dict[str, list[str]] = {}

    for name in EDITABLE_FIELDS:
        value = body.get(name)
        if value is None:
            value = ""
        elif not isinstance(value, str):
            errors.setdefault(name, []).append("Must be text")
            value = str(value)
        values[name] = value

    view_model = ContactEditViewModel(contact_id=contact_id, **values)
    for name, messages in validate_contact_form(view_model).items():
        errors.setdefault(name, []).extend(messages)
    return view_model, errors
