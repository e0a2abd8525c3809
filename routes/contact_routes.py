import re

from flask import Blueprint, current_app, request

from services.contact_service import ContactService
from services.results import Invalid, Ok
from utils.api_response import send_error, send_success
from utils.errors import get_status_code

contact_bp = Blueprint('contacts', __name__)
contact_service = ContactService()

_ID_PATTERN = re.compile(r"-?[0-9]+")

# --- Helpers ---

def parse_contact_id(raw_id):
    """Path ids must be integers; anything else is rejected before the service runs."""
    if raw_id is None or not _ID_PATTERN.fullmatch(raw_id):
        return Invalid("id", "Contact ID must be a number")
    return Ok(int(raw_id))


def serialize(value):
    if value is None:
        return None
    if isinstance(value, list):
        return [contact.to_dict() for contact in value]
    return value.to_dict()


def respond(result, success_message, failure_message, success_status=200):
    """Map a service result onto the response envelope and its status code."""
    if result.ok:
        return send_success(success_message, serialize(result.value), success_status)

    status_code = get_status_code(result)
    current_app.logger.warning(f"[WARN] {failure_message} ({status_code}): {result.message}")
    return send_error(failure_message, result.message, status_code)

# --- Routes ---

@contact_bp.route('/contacts', methods=['GET'])
def get_contacts():
    result = contact_service.get_all_contacts()
    return respond(result, 'Contacts retrieved successfully', 'Failed to retrieve contacts')


@contact_bp.route('/contacts/<contact_id>', methods=['GET'])
def get_contact(contact_id):
    parsed = parse_contact_id(contact_id)
    if parsed.ok:
        result = contact_service.get_contact_by_id(parsed.value)
    else:
        result = parsed
    return respond(result, 'Contact retrieved successfully', 'Failed to retrieve contact')


@contact_bp.route('/contacts', methods=['POST'])
def create_contact():
    data = request.get_json(silent=True)
    result = contact_service.create_contact(data)
    return respond(result, 'Contact created successfully', 'Failed to create contact', 201)


@contact_bp.route('/contacts/<contact_id>', methods=['PUT'])
def update_contact(contact_id):
    parsed = parse_contact_id(contact_id)
    if parsed.ok:
        result = contact_service.update_contact(parsed.value, request.get_json(silent=True))
    else:
        result = parsed
    return respond(result, 'Contact updated successfully', 'Failed to update contact')


@contact_bp.route('/contacts/<contact_id>', methods=['DELETE'])
def delete_contact(contact_id):
    parsed = parse_contact_id(contact_id)
    if parsed.ok:
        result = contact_service.delete_contact(parsed.value)
    else:
        result = parsed
    return respond(result, 'Contact deleted successfully', 'Failed to delete contact')
