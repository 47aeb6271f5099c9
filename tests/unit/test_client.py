"""Unit tests for the low-level IAM HTTP client."""
import pytest
import requests

from iam_admin.core.user_admin import (
    APIError,
    ErrorBodyDecodeError,
    IAMClient,
    Operation,
    RequestError,
    ResponseDecodeError,
)
from iam_admin.core.user_admin.client import query
from tests.conftest import BASE_URL, USER_ADMIN


class TestQuery:
    def test_sorted_and_rendered(self):
        assert query(users=False, actions=True, groupId=42) == [
            ("actions", "true"),
            ("groupId", "42"),
            ("users", "false"),
        ]

    def test_none_values_are_skipped(self):
        assert query(actions=True, groupId=None) == [("actions", "true")]


class TestBuildURL:
    def test_path_segments_are_escaped(self, client):
        assert client.user_admin_path("ui-identities", "A/B C") == (
            "/identity-management/v3/user-admin/ui-identities/A%2FB%20C"
        )

    def test_api_version_is_configurable(self, session):
        client = IAMClient(BASE_URL, session=session, api_version="v2")
        assert client.user_admin_path("roles") == "/identity-management/v2/user-admin/roles"
        assert client.api_clients_path("self") == "/identity-management/v2/api-clients/self"

    def test_account_switch_key_is_appended_last(self, session):
        client = IAMClient(BASE_URL + "/", session=session, account_switch_key="1-ABC:1-2345")
        url = client.build_url("/identity-management/v3/user-admin/roles", query(actions=True))
        assert url == f"{USER_ADMIN}/roles?actions=true&accountSwitchKey=1-ABC%3A1-2345"

    def test_no_query_string_when_no_params(self, client):
        assert client.build_url("/x") == f"{BASE_URL}/x"

    def test_base_url_is_required(self):
        with pytest.raises(ValueError):
            IAMClient("")


class TestExecute:
    def test_sends_bearer_token_and_timeout(self, client, session):
        session.queue(200, "[]")

        client.call(Operation.LIST_ROLES, "GET", client.user_admin_path("roles"))

        assert session.last.headers["Authorization"] == "Bearer test-token"
        assert session.last.headers["Accept"] == "application/json"
        assert session.last.timeout == 5
        assert not hasattr(session.last, "json")

    def test_no_authorization_header_without_token(self, session):
        session.queue(200, "[]")
        client = IAMClient(BASE_URL, session=session, timeout=2.5)

        client.call(Operation.LIST_ROLES, "GET", client.user_admin_path("roles"))

        assert "Authorization" not in session.last.headers
        assert session.last.timeout == 2.5

    def test_auth_object_signs_each_request(self, session):
        session.queue(200, "[]")
        auth = requests.auth.HTTPBasicAuth("user", "pass")
        client = IAMClient(BASE_URL, session=session, auth=auth)

        client.call(Operation.LIST_ROLES, "GET", client.user_admin_path("roles"))

        assert session.last.auth is auth
        assert session.auth is None

    def test_no_auth_kwarg_without_auth_object(self, client, session):
        session.queue(200, "[]")

        client.call(Operation.LIST_ROLES, "GET", client.user_admin_path("roles"))

        assert not hasattr(session.last, "auth")

    def test_transport_failure_becomes_request_error(self, client, monkeypatch):
        def boom(method, url, **kwargs):
            raise requests.ConnectionError("connection refused")

        monkeypatch.setattr(client.session, "request", boom)

        with pytest.raises(RequestError) as exc_info:
            client.call(Operation.LIST_ROLES, "GET", client.user_admin_path("roles"))

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
        assert exc_info.value.operation is Operation.LIST_ROLES
        assert str(exc_info.value).startswith("list roles: ")


class TestCall:
    def test_empty_body_returns_none(self, client, session):
        session.queue(204)
        assert client.call(Operation.DELETE_ROLE, "DELETE", "/x", expect=(204,)) is None

    def test_invalid_json_on_success(self, client, session):
        session.queue(200, "not json")

        with pytest.raises(ResponseDecodeError) as exc_info:
            client.call(Operation.GET_ROLE, "GET", "/x")

        assert isinstance(exc_info.value, RequestError)
        assert exc_info.value.operation is Operation.GET_ROLE

    def test_unexpected_status_maps_problem_detail(self, client, session):
        session.queue(403, {"type": "forbidden", "title": "Forbidden", "detail": "no access", "status": 403})

        with pytest.raises(APIError) as exc_info:
            client.call(Operation.LIST_USERS, "GET", "/x")

        err = exc_info.value
        assert err.status_code == 403
        assert err.status == 403
        assert err.title == "Forbidden"
        assert str(err) == "list users: API error [403] Forbidden: no access (type: forbidden)"

    @pytest.mark.parametrize("body", ["<html>bad gateway</html>", "[1, 2]", "", "  "])
    def test_undecodable_error_body(self, client, session, body):
        session.queue(502, body)

        with pytest.raises(ErrorBodyDecodeError) as exc_info:
            client.call(Operation.GET_USER, "GET", "/x")

        err = exc_info.value
        assert isinstance(err, APIError)
        assert err.status_code == 502
        assert err.title == "Failed to unmarshal error body"
        assert err.detail == body


class TestAPIErrorEquality:
    def test_equal_on_type_title_detail_and_status(self):
        a = APIError(404, type="t", title="Not found", detail="d", instance="x", operation=Operation.GET_ROLE)
        b = APIError(404, type="t", title="Not found", detail="d", instance="y")
        assert a == b
        assert hash(a) == hash(b)

    def test_different_status_is_not_equal(self):
        assert APIError(404, title="Not found") != APIError(500, title="Not found")
