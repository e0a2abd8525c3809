import os
from datetime import datetime
from urllib.parse import urlsplit

# Set env vars BEFORE any imports that might cache them
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402

from app import create_app  # noqa: E402
from config import TestConfig  # noqa: E402
from extensions import db  # noqa: E402
from models.contact import Contact, utcnow  # noqa: E402


VALID_PAYLOAD = {
    "firstName": "John",
    "lastName": "Doe",
    "workplace": "Acme",
    "email": "j@x.com",
    "knownFrom": "Conf",
    "comments": "met at conf",
    "lastContactDate": "2024-01-01",
}


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def payload():
    return dict(VALID_PAYLOAD)


@pytest.fixture
def contact_factory(app):
    """Insert contacts straight through the session, bypassing the API."""
    def make(**overrides):
        data = {
            "first_name": "Update",
            "last_name": "Test",
            "workplace": "Update Company",
            "email": "update@example.com",
            "known_from": "Testing",
            "comments": "This contact will be updated",
            "last_contact_date": datetime(2024, 1, 1),
            "last_update": utcnow(),
        }
        data.update(overrides)
        contact = Contact(**data)
        db.session.add(contact)
        db.session.commit()
        return contact
    return make


class FlaskResponseAdapter:
    def __init__(self, response):
        self.status_code = response.status_code
        self._response = response

    def json(self):
        body = self._response.get_json(silent=True)
        if body is None:
            raise ValueError("No JSON body")
        return body


class FlaskSession:
    """Stands in for requests.Session, routing calls into the Flask test client."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append((method, url, kwargs))
        parts = urlsplit(url)
        response = self.test_client.open(parts.path, method=method, json=kwargs.get("json"))
        return FlaskResponseAdapter(response)


@pytest.fixture
def api_session(client):
    return FlaskSession(client)
