"""Low-level HTTP client for the IAM user-admin API.

Handles authentication headers, URL building, request execution and the
mapping of non-success responses onto ``APIError``.
"""
from __future__ import annotations
import json
import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple
from urllib.parse import quote, urlencode

import requests

from .exceptions import (
    APIError,
    ErrorBodyDecodeError,
    Operation,
    RequestError,
    ResponseDecodeError,
)

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 5
DEFAULT_API_VERSION = "v3"

QueryParams = List[Tuple[str, str]]


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def query(**params: Any) -> QueryParams:
    """Render query parameters in alphabetical order.

    Booleans render as ``true``/``false``, integers in decimal; ``None``
    values are omitted.
    """
    rendered: QueryParams = []
    for name in sorted(params):
        value = params[name]
        if value is None:
            continue
        if isinstance(value, bool):
            rendered.append((name, format_bool(value)))
        else:
            rendered.append((name, str(value)))
    return rendered


class IAMClient:
    """HTTP client for the IAM user-admin API.

    Features:
    - Bearer token or caller-supplied ``requests`` auth (e.g. an EdgeGrid signer)
    - Versioned path prefixes built from configuration
    - Centralized status checking and problem-detail error mapping

    Usage:
        client = IAMClient("https://akab-xxx.luna.akamaiapis.net", access_token="...")
        payload = client.call(Operation.LIST_ROLES, "GET", client.user_admin_path("roles"))
    """

    def __init__(
        self,
        base_url: str,
        *,
        access_token: Optional[str] = None,
        auth: Optional[requests.auth.AuthBase] = None,
        session: Optional[requests.Session] = None,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = REQUEST_TIMEOUT,
        account_switch_key: Optional[str] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API host base URL
            access_token: Bearer token sent with every request
            auth: ``requests`` auth object used to sign each request; the
                session itself is left unchanged
            session: Pre-configured session (TLS, adapters, signing)
            api_version: Version segment of the API paths (e.g. "v3")
            timeout: Per-request timeout in seconds
            account_switch_key: Account to act on behalf of
        """
        if not base_url:
            raise ValueError("base_url is required")
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self.timeout = timeout
        self.account_switch_key = account_switch_key
        self.session = session or requests.Session()
        self.auth = auth
        self._token = access_token

    @classmethod
    def from_settings(cls, settings, session: Optional[requests.Session] = None) -> "IAMClient":
        """Create a client from an ``IAMSettings`` instance."""
        return cls(
            settings.base_url,
            access_token=settings.access_token or None,
            session=session,
            api_version=settings.api_version,
            timeout=settings.request_timeout,
            account_switch_key=settings.account_switch_key or None,
        )

    # ─────────────────────────────────────────────────────────────────────
    # URL building
    # ─────────────────────────────────────────────────────────────────────
    def user_admin_path(self, *segments: Any) -> str:
        return self._join(f"/identity-management/{self.api_version}/user-admin", segments)

    def api_clients_path(self, *segments: Any) -> str:
        return self._join(f"/identity-management/{self.api_version}/api-clients", segments)

    @staticmethod
    def _join(prefix: str, segments: Iterable[Any]) -> str:
        parts = [quote(str(segment), safe="") for segment in segments]
        if not parts:
            return prefix
        return f"{prefix}/{'/'.join(parts)}"

    def build_url(self, path: str, params: Optional[Sequence[Tuple[str, str]]] = None) -> str:
        """Return the absolute URL for a path and ordered query parameters."""
        pairs = list(params or [])
        if self.account_switch_key:
            pairs.append(("accountSwitchKey", self.account_switch_key))
        url = f"{self.base_url}{path}"
        if pairs:
            url = f"{url}?{urlencode(pairs)}"
        return url

    # ─────────────────────────────────────────────────────────────────────
    # Execution
    # ─────────────────────────────────────────────────────────────────────
    def execute(
        self,
        operation: Operation,
        method: str,
        path: str,
        *,
        params: Optional[Sequence[Tuple[str, str]]] = None,
        body: Any = None,
    ) -> requests.Response:
        """Send a request and return the raw response.

        Raises:
            RequestError: On transport failure
        """
        url = self.build_url(path, params)
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        kwargs: dict = {"headers": headers, "timeout": self.timeout}
        if body is not None:
            kwargs["json"] = body
        if self.auth is not None:
            kwargs["auth"] = self.auth

        try:
            resp = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise RequestError(f"request failed: {exc}", operation) from exc

        logger.debug("%s %s -> %s", method, path, resp.status_code)
        return resp

    def call(
        self,
        operation: Operation,
        method: str,
        path: str,
        *,
        params: Optional[Sequence[Tuple[str, str]]] = None,
        body: Any = None,
        expect: Tuple[int, ...] = (200,),
    ) -> Any:
        """Execute a request, check its status and decode the JSON body.

        Args:
            operation: Operation being performed (attached to raised errors)
            method: HTTP method
            path: API path (see ``user_admin_path``/``api_clients_path``)
            params: Ordered query parameters
            body: JSON-serializable request body
            expect: Status codes treated as success

        Returns:
            Decoded JSON body, or None when the body is empty

        Raises:
            RequestError: On transport failure
            APIError: If the status is not one of ``expect``
            ResponseDecodeError: If a successful body is not valid JSON
        """
        resp = self.execute(operation, method, path, params=params, body=body)
        if resp.status_code not in expect:
            raise self.error(resp, operation)

        if not resp.content or not resp.content.strip():
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise ResponseDecodeError(f"could not decode response body: {exc}", operation) from exc

    def error(self, resp: requests.Response, operation: Optional[Operation] = None) -> APIError:
        """Map a non-success response onto an ``APIError``.

        Args:
            resp: Response object to convert
            operation: Operation that failed

        Returns:
            ``APIError``, or ``ErrorBodyDecodeError`` when the body is not a
            problem-detail JSON object
        """
        logger.warning("%s: unexpected status %s", operation.value if operation else "request", resp.status_code)
        try:
            payload = json.loads(resp.text)
        except ValueError:
            logger.error("could not unmarshal API error body (status %s)", resp.status_code)
            return ErrorBodyDecodeError(resp.status_code, resp.text, operation)
        if not isinstance(payload, dict):
            logger.error("API error body is not an object (status %s)", resp.status_code)
            return ErrorBodyDecodeError(resp.status_code, resp.text, operation)
        return APIError.from_payload(resp.status_code, payload, operation)
