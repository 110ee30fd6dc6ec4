"""
Shared fixtures for CategoryDesk client tests.

FakeCategoryAPI stands in for CategoryDeskAPI: it keeps a server-side
list, records every call, and raises whatever exception a test queues
for a given method.
"""

import json
import logging
from unittest.mock import MagicMock

import pytest

from categorydesk.models import AddressDraft, Category, LoginResponse, RegistrationDraft


class FakeCategoryAPI:
    def __init__(self, categories=None):
        self.remote = [Category(**c) if isinstance(c, dict) else c for c in (categories or [])]
        self.next_id = max((c.id for c in self.remote), default=0) + 1
        self.calls = []
        self.failures = {}
        self.login_response = LoginResponse.model_validate({
            "accessToken": "token-123",
            "user": {"email": "jane@example.com", "id": 1}
        })
        self.closed = False

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.failures:
            raise self.failures[name]

    def calls_to(self, name):
        return [call for call in self.calls if call[0] == name]

    def list_categories(self):
        self._record("list_categories")
        return list(self.remote)

    def create_category(self, name, description):
        self._record("create_category", name, description)
        created = Category(id=self.next_id, name=name, description=description)
        self.next_id += 1
        self.remote.append(created)
        return created

    def update_category(self, category_id, name, description):
        self._record("update_category", category_id, name, description)
        # Server normalizes; the client must not pick this up
        self.remote = [
            c.model_copy(update={"name": name.upper()}) if c.id == category_id else c
            for c in self.remote
        ]

    def delete_category(self, category_id):
        self._record("delete_category", category_id)
        self.remote = [c for c in self.remote if c.id != category_id]

    def login(self, email, password):
        self._record("login", email, password)
        return self.login_response

    def register(self, registration):
        self._record("register", registration)
        return {"id": 42}

    def close(self):
        self.closed = True


THREE_CATEGORIES = [
    {"id": 1, "name": "Books", "description": "Printed and e-books"},
    {"id": 2, "name": "Music", "description": "Vinyl and CDs"},
    {"id": 3, "name": "Games", "description": "Board games"},
]


@pytest.fixture
def fake_api():
    return FakeCategoryAPI(THREE_CATEGORIES)


@pytest.fixture
def empty_api():
    return FakeCategoryAPI()


def make_response(status_code, body=None, text=None, reason="Reason"):
    """
    Build a MagicMock shaped like requests.Response.

    Pass body for a JSON response, text for a non-JSON one, neither for
    an empty body.
    """
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    if text is not None:
        response.content = text.encode()
        response.text = text
        response.json.side_effect = ValueError("Expecting value")
    elif body is None:
        response.content = b""
        response.text = ""
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.content = json.dumps(body).encode()
        response.text = json.dumps(body)
        response.json.return_value = body
    return response


@pytest.fixture
def restore_root_logging():
    """Undo handler changes made by setup_*_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    handler_levels = [handler.level for handler in handlers]
    level = root_logger.level
    yield
    for handler, handler_level in zip(handlers, handler_levels):
        handler.setLevel(handler_level)
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


VALID_REGISTRATION = {
    "full_name": "Jane Doe",
    "email": "jane@example.com",
    "date_of_birth": "1990-04-12",
    "street": "1 Main St",
    "city": "Springfield",
    "state": "IL",
    "zip_code": "62701",
    "password": "Str0ng!Pass",
}


def registration_draft(**overrides):
    """RegistrationDraft built from VALID_REGISTRATION with fields overridden."""
    values = dict(VALID_REGISTRATION, **overrides)
    return RegistrationDraft(
        full_name=values["full_name"],
        email=values["email"],
        date_of_birth=values["date_of_birth"],
        address=AddressDraft(values["street"], values["city"], values["state"], values["zip_code"]),
        password=values["password"],
    )
