"""HTTP client for the contacts API, unwrapping the response envelope."""
import requests

DEFAULT_BASE_URL = "http://127.0.0.1:3000"
API_PATH = "/api/contacts"


class ContactApiError(Exception):
    """A failed API call, carrying the server-supplied error text."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ContactClient:
    """One network call per operation; no caching or retries."""

    def __init__(self, base_url=DEFAULT_BASE_URL, session=None, timeout=10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def get_all_contacts(self):
        return self._request("GET", API_PATH).get("data", [])

    def get_contact_by_id(self, contact_id):
        return self._request("GET", f"{API_PATH}/{contact_id}").get("data")

    def create_contact(self, contact_data):
        return self._request("POST", API_PATH, json=contact_data).get("data")

    def update_contact(self, contact_id, contact_data):
        return self._request("PUT", f"{API_PATH}/{contact_id}", json=contact_data).get("data")

    def delete_contact(self, contact_id):
        return self._request("DELETE", f"{API_PATH}/{contact_id}").get("message")

    def _request(self, method, path, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ContactApiError(f"Connection Error: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            raise ContactApiError(
                f"Unexpected response from {method} {path} ({response.status_code})",
                response.status_code,
            )

        if response.status_code >= 400 or body.get("status") == "error":
            message = body.get("error") or body.get("message") or f"Request failed with status {response.status_code}"
            raise ContactApiError(message, response.status_code)

        return body
