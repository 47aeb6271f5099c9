"""User-admin API exceptions for error handling."""
from __future__ import annotations
import enum
from typing import Dict, Optional


class Operation(enum.Enum):
    """Identifies the client operation an error was raised from."""

    CREATE_ROLE = "create role"
    GET_ROLE = "get role"
    UPDATE_ROLE = "update role"
    DELETE_ROLE = "delete role"
    LIST_ROLES = "list roles"
    LIST_GRANTABLE_ROLES = "list grantable roles"

    CREATE_USER = "create user"
    GET_USER = "get user"
    LIST_USERS = "list users"
    REMOVE_USER = "remove user"
    UPDATE_USER_AUTH_GRANTS = "update user auth grants"
    UPDATE_USER_INFO = "update user info"
    UPDATE_USER_NOTIFICATIONS = "update user notifications"
    UPDATE_TFA = "update user's two-factor authentication"

    LOCK_USER = "lock user"
    UNLOCK_USER = "unlock user"

    RESET_USER_PASSWORD = "reset user password"
    SET_USER_PASSWORD = "set user password"

    GET_PASSWORD_POLICY = "get password policy"
    SUPPORTED_COUNTRIES = "supported countries"
    LIST_STATES = "list states"
    SUPPORTED_TIMEZONES = "supported timezones"
    SUPPORTED_CONTACT_TYPES = "supported contact types"
    SUPPORTED_LANGUAGES = "supported languages"
    LIST_PRODUCTS = "list products"
    LIST_TIMEOUT_POLICIES = "list timeout policies"

    LIST_ACCOUNT_SWITCH_KEYS = "list account switch keys"


class IAMError(Exception):
    """Base exception for all user-admin operations.

    Attributes:
        operation: Operation that failed (None when raised outside an operation)
    """

    def __init__(self, message: str, operation: Optional[Operation] = None):
        self.operation = operation
        if operation is not None:
            message = f"{operation.value}: {message}"
        super().__init__(message)


class ValidationError(IAMError):
    """Request parameters failed local validation; nothing was sent.

    Attributes:
        errors: Field name -> validation message
    """

    def __init__(self, errors: Dict[str, str], operation: Optional[Operation] = None):
        self.errors = dict(errors)
        details = "; ".join(f"{name}: {self.errors[name]}" for name in sorted(self.errors))
        super().__init__(f"struct validation: {details}", operation)


class RequestError(IAMError):
    """The request could not be built or the transport failed."""
    pass


class ResponseDecodeError(RequestError):
    """A successful response carried a body that is not valid JSON."""
    pass


class APIError(IAMError):
    """Non-success HTTP response mapped from a problem-detail payload.

    Attributes:
        type: Problem type URI
        title: Short summary
        detail: Human-readable explanation
        instance: Problem occurrence identifier
        status: ``status`` member of the payload, when present
        http_status: ``httpStatus`` member of the payload, when present
        status_code: HTTP status code of the response
    """

    def __init__(
        self,
        status_code: int,
        *,
        type: str = "",
        title: str = "",
        detail: str = "",
        instance: str = "",
        status: Optional[int] = None,
        http_status: Optional[int] = None,
        operation: Optional[Operation] = None,
    ):
        self.status_code = status_code
        self.type = type
        self.title = title
        self.detail = detail
        self.instance = instance
        self.status = status
        self.http_status = http_status
        message = f"API error [{status_code}]"
        if title:
            message += f" {title}"
        if detail:
            message += f": {detail}"
        if type:
            message += f" (type: {type})"
        super().__init__(message, operation)

    @classmethod
    def from_payload(cls, status_code: int, payload: dict, operation: Optional[Operation] = None) -> "APIError":
        """Build an error from a decoded problem-detail body."""
        return cls(
            status_code,
            type=str(payload.get("type") or ""),
            title=str(payload.get("title") or ""),
            detail=str(payload.get("detail") or ""),
            instance=str(payload.get("instance") or ""),
            status=payload.get("status"),
            http_status=payload.get("httpStatus"),
            operation=operation,
        )

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def _key(self) -> tuple:
        return (self.type, self.title, self.detail, self.status_code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class ErrorBodyDecodeError(APIError):
    """The error response body was not a valid problem-detail payload."""

    def __init__(self, status_code: int, body: str, operation: Optional[Operation] = None):
        super().__init__(
            status_code,
            title="Failed to unmarshal error body",
            detail=body,
            operation=operation,
        )
