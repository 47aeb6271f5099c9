"""Pytest shared fixtures: a stub transport standing in for the API."""
import json
import pathlib
import sys
from types import SimpleNamespace

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from iam_admin.core.user_admin import IAM, IAMClient

BASE_URL = "https://iam.test"
USER_ADMIN = f"{BASE_URL}/identity-management/v3/user-admin"
API_CLIENTS = f"{BASE_URL}/identity-management/v3/api-clients"

INTERNAL_ERROR_BODY = """
{
    "type": "internal_error",
    "title": "Internal Server Error",
    "detail": "Error making request",
    "status": 500
}"""

USER_NOT_FOUND_BODY = """
{
    "instance": "",
    "httpStatus": 404,
    "detail": "",
    "title": "User not found",
    "type": "/useradmin-api/error-types/1100"
}"""


class StubResponse:
    def __init__(self, status_code: int = 200, body="", url: str = ""):
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)
        self.content = self.text.encode()
        self.url = url

    def json(self):
        return json.loads(self.text)


class StubSession:
    """Records every request and replays queued responses in order."""

    def __init__(self):
        self.calls = []
        self.responses = []
        self.auth = None

    def queue(self, status_code: int = 200, body=""):
        self.responses.append(StubResponse(status_code, body))
        return self

    def request(self, method, url, **kwargs):
        self.calls.append(SimpleNamespace(method=method, url=url, **kwargs))
        if not self.responses:
            raise AssertionError(f"unexpected request: {method} {url}")
        response = self.responses.pop(0)
        response.url = url
        return response

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture()
def session():
    return StubSession()


@pytest.fixture()
def client(session):
    return IAMClient(BASE_URL, access_token="test-token", session=session)


@pytest.fixture()
def iam(client):
    return IAM(client)
