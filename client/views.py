"""
UI-local state for the contact list and detail screens.

Each view owns its own copy of the data it shows. The list is refetched on
refresh and after every successful mutation made through it; nothing is shared
between views.
"""
import logging

from .contact_client import ContactApiError

logger = logging.getLogger(__name__)

BUSINESS_FIELDS = (
    "firstName",
    "lastName",
    "workplace",
    "email",
    "knownFrom",
    "comments",
    "lastContactDate",
)

COMMENT_PREVIEW_LENGTH = 50


def truncate_comment(text, limit=COMMENT_PREVIEW_LENGTH):
    if text and len(text) > limit:
        return f"{text[:limit]}..."
    return text


def filter_contacts(contacts, search_term):
    """Case-insensitive substring match on any business field."""
    if not search_term:
        return list(contacts)

    needle = search_term.lower()
    return [
        contact for contact in contacts
        if any(
            contact.get(field) is not None and needle in str(contact.get(field)).lower()
            for field in BUSINESS_FIELDS
        )
    ]


def _sort_value(value):
    return value.lower() if isinstance(value, str) else value


def sort_contacts(contacts, key, direction="asc"):
    """Single-key sort; strings compare case-insensitively and empty values always go last."""
    present = [contact for contact in contacts if contact.get(key)]
    missing = [contact for contact in contacts if not contact.get(key)]
    present.sort(key=lambda contact: _sort_value(contact[key]), reverse=direction == "desc")
    return present + missing


class ContactListView:
    def __init__(self, client):
        self.client = client
        self.contacts = []
        self.loading = True
        self.error = None
        self.search_term = ""
        self.sort_key = "lastName"
        self.sort_direction = "asc"

    def refresh(self):
        self.loading = True
        try:
            self.contacts = self.client.get_all_contacts()
            self.error = None
        except ContactApiError as e:
            logger.error("Error fetching contacts: %s", e.message)
            self.error = e.message
        finally:
            self.loading = False
        return self.contacts

    def request_sort(self, key):
        if self.sort_key == key and self.sort_direction == "asc":
            self.sort_direction = "desc"
        else:
            self.sort_direction = "asc"
        self.sort_key = key

    def sort_indicator(self, key):
        if self.sort_key != key:
            return None
        return "↑" if self.sort_direction == "asc" else "↓"

    @property
    def visible_contacts(self):
        contacts = filter_contacts(self.contacts, self.search_term)
        if self.sort_key:
            contacts = sort_contacts(contacts, self.sort_key, self.sort_direction)
        return contacts

    def create(self, contact_data):
        return self._mutate(self.client.create_contact, contact_data)

    def update(self, contact_id, contact_data):
        return self._mutate(self.client.update_contact, contact_id, contact_data)

    def delete(self, contact_id):
        return self._mutate(self.client.delete_contact, contact_id)

    def _mutate(self, operation, *args):
        try:
            result = operation(*args)
        except ContactApiError as e:
            logger.error("Contact change failed: %s", e.message)
            self.error = e.message
            return None
        self.refresh()
        return result


class ContactDetailView:
    def __init__(self, client, contact_id):
        self.client = client
        self.contact_id = contact_id
        self.contact = None
        self.loading = True
        self.error = None
        self.editing = False
        self.form = {}
        self.deleted = False

    def load(self):
        self.loading = True
        try:
            self.contact = self.client.get_contact_by_id(self.contact_id)
            self.error = None
        except ContactApiError as e:
            logger.error("Error fetching contact %s: %s", self.contact_id, e.message)
            self.error = e.message
        finally:
            self.loading = False
        return self.contact

    def start_edit(self):
        if self.contact is None:
            return
        self.form = {field: self.contact.get(field) for field in BUSINESS_FIELDS}
        self.editing = True

    def cancel_edit(self):
        self.form = {}
        self.editing = False

    def set_field(self, field, value):
        if field not in BUSINESS_FIELDS:
            raise KeyError(field)
        self.form[field] = value

    def changed_fields(self):
        return {
            field: value for field, value in self.form.items()
            if value != self.contact.get(field)
        }

    def save(self):
        """Send only the edited fields; the server's copy replaces ours."""
        if not self.editing:
            return self.contact

        changes = self.changed_fields()
        if not changes:
            self.cancel_edit()
            return self.contact

        try:
            self.contact = self.client.update_contact(self.contact_id, changes)
        except ContactApiError as e:
            logger.error("Error updating contact %s: %s", self.contact_id, e.message)
            self.error = e.message
            return None

        self.error = None
        self.cancel_edit()
        return self.contact

    def delete(self):
        try:
            message = self.client.delete_contact(self.contact_id)
        except ContactApiError as e:
            logger.error("Error deleting contact %s: %s", self.contact_id, e.message)
            self.error = e.message
            return None

        self.deleted = True
        self.contact = None
        return message
