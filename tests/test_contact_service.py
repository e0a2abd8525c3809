"""Tests for ContactService business rules."""
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from services.contact_service import ContactService, clean_contact_data
from services.results import Invalid, NotFound, Ok


@pytest.fixture
def service(app):
    return ContactService()


class TestCleanContactData:

    def test_full_payload_converted_to_columns(self, payload):
        result = clean_contact_data(payload)

        assert result.ok
        assert result.value["first_name"] == "John"
        assert result.value["known_from"] == "Conf"
        assert result.value["last_contact_date"] == datetime(2024, 1, 1)

    @pytest.mark.parametrize("field", ["firstName", "lastName", "email"])
    @pytest.mark.parametrize("bad_value", [None, "", 0, False])
    def test_identity_fields_must_be_present_and_non_empty(self, payload, field, bad_value):
        payload[field] = bad_value

        result = clean_contact_data(payload)

        assert isinstance(result, Invalid)
        assert result.field == field
        assert field in result.message

    def test_first_failing_field_is_reported(self, payload):
        del payload["lastName"]
        del payload["email"]

        result = clean_contact_data(payload)

        assert result.field == "lastName"
        assert result.message == "lastName is required"

    def test_non_string_rejected(self, payload):
        payload["firstName"] = 123

        result = clean_contact_data(payload)

        assert result.message == "firstName must be a string"

    def test_free_text_fields_may_be_empty(self, payload):
        payload["comments"] = ""
        payload["workplace"] = ""

        assert clean_contact_data(payload).ok

    def test_bad_date(self, payload):
        payload["lastContactDate"] = "not a date"

        result = clean_contact_data(payload)

        assert result.field == "lastContactDate"
        assert "ISO-8601" in result.message

    def test_system_and_unknown_fields_dropped(self, payload):
        payload.update({"id": 77, "lastUpdate": "2000-01-01", "nickname": "JD"})

        values = clean_contact_data(payload).value

        assert "id" not in values
        assert "last_update" not in values
        assert "nickname" not in values

    def test_partial_skips_absent_and_null(self):
        result = clean_contact_data({"firstName": "Updated", "lastName": None}, partial=True)

        assert result.ok
        assert result.value == {"first_name": "Updated"}

    def test_partial_still_checks_types(self):
        result = clean_contact_data({"knownFrom": 42}, partial=True)

        assert isinstance(result, Invalid)
        assert result.field == "knownFrom"

    @pytest.mark.parametrize("body", [None, [], "text", 5])
    def test_body_must_be_object(self, body):
        result = clean_contact_data(body)

        assert isinstance(result, Invalid)
        assert result.message == "Request body must be a JSON object"


def test_create_and_read_back(service, payload):
    created = service.create_contact(payload)

    assert isinstance(created, Ok)
    fetched = service.get_contact_by_id(created.value.id)
    assert fetched.ok
    for key, value in payload.items():
        if key != "lastContactDate":
            assert fetched.value.to_dict()[key] == value


def test_invalid_create_never_reaches_store(payload):
    store = MagicMock()
    payload["email"] = ""

    result = ContactService(store=store).create_contact(payload)

    assert isinstance(result, Invalid)
    store.create.assert_not_called()


def test_invalid_update_never_reaches_store():
    store = MagicMock()

    result = ContactService(store=store).update_contact(1, {"firstName": 123})

    assert isinstance(result, Invalid)
    store.update.assert_not_called()


def test_get_missing_contact(service):
    result = service.get_contact_by_id(999999)

    assert isinstance(result, NotFound)
    assert result.message == "Contact with ID 999999 not found"
    assert result.status_code == 404


def test_update_preserves_untouched_fields(service, payload):
    created = service.create_contact(payload).value

    result = service.update_contact(created.id, {"firstName": "Jack"})

    assert result.ok
    assert result.value.first_name == "Jack"
    assert result.value.last_name == "Doe"
    assert result.value.workplace == "Acme"
    assert result.value.comments == "met at conf"


def test_update_missing_contact(service):
    assert isinstance(service.update_contact(4242, {"firstName": "Ghost"}), NotFound)


def test_delete_then_delete_again(service, payload):
    created = service.create_contact(payload).value

    assert service.delete_contact(created.id).ok
    assert isinstance(service.delete_contact(created.id), NotFound)


def test_store_failures_propagate():
    store = MagicMock()
    store.find_all.side_effect = RuntimeError("connection refused")

    with pytest.raises(RuntimeError):
        ContactService(store=store).get_all_contacts()
