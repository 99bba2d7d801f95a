from core.models import (
    Contact,
    ContactEditViewModel,
    ContactStatus,
    contact_to_view_model,
    parse_contact_form,
    validate_contact_form,
    view_model_to_contact,
)


def valid_form(**overrides) -> ContactEditViewModel:
    values = {
        "name": "Jane Doe",
        "address": "742 Evergreen Terrace",
        "city": "Springfield",
        "state": "IL",
        "zip": "62704",
        "email": "jane@example.com",
    }
    values.update(overrides)
    return ContactEditViewModel(**values)


def test_view_model_round_trip_preserves_editable_fields():
    form = valid_form(contact_id=7)
    contact = view_model_to_contact(form, Contact(owner_id="u-alice", contact_id=7))

    assert contact_to_view_model(contact) == form


def test_view_model_to_contact_leaves_owner_and_status_alone():
    contact = Contact(owner_id="u-alice", status=ContactStatus.APPROVED, contact_id=3)

    result = view_model_to_contact(valid_form(name="Renamed"), contact)

    assert result is contact
    assert result.name == "Renamed"
    assert result.owner_id == "u-alice"
    assert result.status == ContactStatus.APPROVED
    assert result.contact_id == 3


def test_view_model_has_no_owner_or_status():
    fields = set(ContactEditViewModel.__dataclass_fields__)
    assert "owner_id" not in fields
    assert "status" not in fields


def test_new_contact_defaults_to_submitted():
    assert Contact(owner_id="u-alice").status == ContactStatus.SUBMITTED


def test_to_row_serializes_status_value():
    row = Contact(owner_id="u-alice", status=ContactStatus.APPROVED).to_row()
    assert row["status"] == "Approved"
    assert row["owner_id"] == "u-alice"


class TestValidateContactForm:
    def test_valid(self):
        assert validate_contact_form(valid_form()) == {}

    def test_optional_address_fields(self):
        assert validate_contact_form(valid_form(address="", city="", state="", zip="")) == {}

    def test_name_required(self):
        assert validate_contact_form(valid_form(name="  ")) == {"name": ["Name is required"]}

    def test_email_required(self):
        assert validate_contact_form(valid_form(email="")) == {"email": ["Email is required"]}

    def test_email_format(self):
        errors = validate_contact_form(valid_form(email="not-an-email"))
        assert errors == {"email": ["Email is not a valid address"]}

    def test_field_length(self):
        errors = validate_contact_form(valid_form(city="x" * 101))
        assert list(errors) == ["city"]


class TestParseContactForm:
    def test_valid_body(self):
        form, errors = parse_contact_form({"name": "Jane", "email": "jane@example.com"}, contact_id=4)
        assert errors == {}
        assert form == ContactEditViewModel(contact_id=4, name="Jane", email="jane@example.com")

    def test_ignores_owner_status_and_body_contact_id(self):
        form, errors = parse_contact_form(
            {
                "name": "Jane",
                "email": "jane@example.com",
                "owner_id": "u-bob",
                "status": "Approved",
                "contact_id": 99,
            }
        )
        assert errors == {}
        assert form.contact_id is None

    def test_null_becomes_empty(self):
        form, errors = parse_contact_form({"name": "Jane", "email": "jane@example.com", "city": None})
        assert errors == {}
        assert form.city == ""

    def test_non_string_reported_and_echoed(self):
        form, errors = parse_contact_form({"name": "Jane", "email": "jane@example.com", "zip": 62704})
        assert errors == {"zip": ["Must be text"]}
        assert form.zip == "62704"

    def test_type_and_content_errors_combined(self):
        _, errors = parse_contact_form({"name": ["Jane"], "email": None})
        assert errors == {"name": ["Must be text"], "email": ["Email is required"]}
