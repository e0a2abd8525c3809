from models.contact import CONTACT_FIELDS, parse_datetime, utcnow
from services.contact_store import ContactStore
from services.results import Invalid, NotFound, Ok


def _check_field(rule, value):
    """Validate one non-null value. Returns (column value, error message)."""
    if rule.kind == "datetime":
        parsed = parse_datetime(value) if isinstance(value, str) else None
        if parsed is None:
            return None, f"{rule.key} must be a valid ISO-8601 date"
        return parsed, None

    if not isinstance(value, str):
        return None, f"{rule.key} must be a string"
    if not value and not rule.allow_empty:
        return None, f"{rule.key} is required"
    return value, None


def clean_contact_data(data, partial=False):
    """
    Check a JSON payload against CONTACT_FIELDS and convert it to column values.

    On create (partial=False) every business field must be present. On update
    only the fields supplied are checked, and a null value leaves the field
    unchanged. System fields and unknown keys are dropped. Fields are checked in
    declared order and the first failure is reported.
    """
    if not isinstance(data, dict):
        return Invalid(None, "Request body must be a JSON object")

    values = {}
    for rule in CONTACT_FIELDS:
        value = data.get(rule.key)
        if value is None:
            if partial:
                continue
            return Invalid(rule.key, f"{rule.key} is required")

        column_value, message = _check_field(rule, value)
        if message:
            return Invalid(rule.key, message)
        values[rule.attr] = column_value

    return Ok(values)


class ContactService:
    """Business rules for contacts, layered over the ContactStore."""

    def __init__(self, store=None):
        self.store = store or ContactStore()

    def get_all_contacts(self):
        return Ok(self.store.find_all())

    def get_contact_by_id(self, contact_id):
        contact = self.store.find_by_id(contact_id)
        if contact is None:
            return _not_found(contact_id)
        return Ok(contact)

    def create_contact(self, data):
        result = clean_contact_data(data)
        if not result.ok:
            return result

        values = result.value
        values["last_update"] = utcnow()
        return Ok(self.store.create(values))

    def update_contact(self, contact_id, data):
        result = clean_contact_data(data, partial=True)
        if not result.ok:
            return result

        contact = self.store.update(contact_id, result.value)
        if contact is None:
            return _not_found(contact_id)
        return Ok(contact)

    def delete_contact(self, contact_id):
        if not self.store.delete(contact_id):
            return _not_found(contact_id)
        return Ok()


def _not_found(contact_id):
    return NotFound(f"Contact with ID {contact_id} not found")
