"""IAM user identity operations."""
from __future__ import annotations
import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..validators import email_format, one_of, required, validate_fields
from .client import IAMClient, query
from .exceptions import Operation


class TFAAction(str, enum.Enum):
    ENABLE = "enable"
    DISABLE = "disable"
    RESET = "reset"


# (attribute, JSON key, always sent)
_BASIC_INFO_FIELDS = (
    ("first_name", "firstName", True),
    ("last_name", "lastName", True),
    ("user_name", "uiUserName", False),
    ("email", "email", True),
    ("phone", "phone", False),
    ("time_zone", "timeZone", False),
    ("job_title", "jobTitle", True),
    ("tfa_enabled", "tfaEnabled", True),
    ("secondary_email", "secondaryEmail", False),
    ("mobile_phone", "mobilePhone", False),
    ("address", "address", False),
    ("city", "city", False),
    ("state", "state", False),
    ("zip_code", "zipCode", False),
    ("country", "country", True),
    ("contact_type", "contactType", False),
    ("preferred_language", "preferredLanguage", False),
    ("session_time_out", "sessionTimeOut", False),
)


@dataclass
class UserBasicInfo:
    """Basic profile of a user.

    ``session_time_out`` is tri-state: None leaves it unset, 0 is a value.
    """
    first_name: str = ""
    last_name: str = ""
    user_name: str = ""
    email: str = ""
    phone: str = ""
    time_zone: str = ""
    job_title: str = ""
    tfa_enabled: bool = False
    secondary_email: str = ""
    mobile_phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = ""
    contact_type: str = ""
    preferred_language: str = ""
    session_time_out: Optional[int] = None

    def basic_info_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        for attr, key, always in _BASIC_INFO_FIELDS:
            value = getattr(self, attr)
            if always:
                body[key] = value
            elif attr == "session_time_out":
                if value is not None:
                    body[key] = value
            elif value:
                body[key] = value
        return body

    def to_dict(self) -> Dict[str, Any]:
        return self.basic_info_dict()

    @staticmethod
    def _basic_info_kwargs(data: Dict[str, Any]) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        for attr, key, _ in _BASIC_INFO_FIELDS:
            if key in data and data[key] is not None:
                kwargs[attr] = data[key]
        return kwargs

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserBasicInfo":
        return cls(**cls._basic_info_kwargs(data))


@dataclass
class UserActions:
    """Permissions available on the user."""
    api_client: bool = False
    delete: bool = False
    edit: bool = False
    is_cloneable: bool = False
    reset_password: bool = False
    third_party_access: bool = False
    can_edit_tfa: bool = False
    edit_profile: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserActions":
        return cls(
            api_client=bool(data.get("apiClient", False)),
            delete=bool(data.get("delete", False)),
            edit=bool(data.get("edit", False)),
            is_cloneable=bool(data.get("isCloneable", False)),
            reset_password=bool(data.get("resetPassword", False)),
            third_party_access=bool(data.get("thirdPartyAccess", False)),
            can_edit_tfa=bool(data.get("canEditTFA", False)),
            edit_profile=bool(data.get("editProfile", False)),
        )


@dataclass
class AuthGrant:
    """Role assignment of a user for one group, with nested sub-groups."""
    group_id: int = 0
    group_name: str = ""
    is_blocked: bool = False
    role_description: str = ""
    role_id: Optional[int] = None
    role_name: str = ""
    sub_groups: List["AuthGrant"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthGrant":
        return cls(
            group_id=data.get("groupId", 0),
            group_name=data.get("groupName", ""),
            is_blocked=bool(data.get("isBlocked", False)),
            role_description=data.get("roleDescription", ""),
            role_id=data.get("roleId"),
            role_name=data.get("roleName", ""),
            sub_groups=[cls.from_dict(item) for item in data.get("subGroups") or []],
        )


@dataclass
class AuthGrantRequest:
    """Role assignment sent with create user and update auth grants."""
    group_id: int = 0
    is_blocked: bool = False
    role_id: Optional[int] = None
    sub_groups: List["AuthGrantRequest"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"groupId": self.group_id, "isBlocked": self.is_blocked}
        if self.role_id is not None:
            body["roleId"] = self.role_id
        if self.sub_groups:
            body["subGroups"] = [sub.to_dict() for sub in self.sub_groups]
        return body


@dataclass
class UserNotificationOptions:
    new_user: bool = False
    password_expiry: bool = False
    proactive: List[str] = field(default_factory=list)
    upgrade: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "newUserNotification": self.new_user,
            "passwordExpiry": self.password_expiry,
            "proactive": list(self.proactive),
            "upgrade": list(self.upgrade),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserNotificationOptions":
        return cls(
            new_user=bool(data.get("newUserNotification", False)),
            password_expiry=bool(data.get("passwordExpiry", False)),
            proactive=list(data.get("proactive") or []),
            upgrade=list(data.get("upgrade") or []),
        )


@dataclass
class UserNotifications:
    """Product notification emails the user receives."""
    enable_email: bool = False
    options: UserNotificationOptions = field(default_factory=UserNotificationOptions)

    def to_dict(self) -> Dict[str, Any]:
        return {"enableEmailNotifications": self.enable_email, "options": self.options.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserNotifications":
        return cls(
            enable_email=bool(data.get("enableEmailNotifications", False)),
            options=UserNotificationOptions.from_dict(data.get("options") or {}),
        )


@dataclass
class User(UserBasicInfo):
    """User returned by the get and create endpoints."""
    ui_identity_id: str = ""
    is_locked: bool = False
    last_login_date: str = ""
    password_expiry_date: str = ""
    tfa_configured: bool = False
    email_update_pending: bool = False
    auth_grants: Optional[List[AuthGrant]] = None
    notifications: Optional[UserNotifications] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        grants = data.get("authGrants")
        notifications = data.get("notifications")
        return cls(
            ui_identity_id=data.get("uiIdentityId", ""),
            is_locked=bool(data.get("isLocked", False)),
            last_login_date=data.get("lastLoginDate", ""),
            password_expiry_date=data.get("passwordExpiryDate", ""),
            tfa_configured=bool(data.get("tfaConfigured", False)),
            email_update_pending=bool(data.get("emailUpdatePending", False)),
            auth_grants=[AuthGrant.from_dict(item) for item in grants] if grants else None,
            notifications=UserNotifications.from_dict(notifications) if notifications else None,
            **cls._basic_info_kwargs(data),
        )


@dataclass
class UserListItem:
    """User entry returned by the list endpoint."""
    ui_identity_id: str = ""
    first_name: str = ""
    last_name: str = ""
    user_name: str = ""
    email: str = ""
    tfa_enabled: bool = False
    is_locked: bool = False
    last_login_date: str = ""
    tfa_configured: bool = False
    account_id: str = ""
    actions: Optional[UserActions] = None
    auth_grants: Optional[List[AuthGrant]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserListItem":
        actions = data.get("actions")
        grants = data.get("authGrants")
        return cls(
            ui_identity_id=data.get("uiIdentityId", ""),
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
            user_name=data.get("uiUserName", ""),
            email=data.get("email", ""),
            tfa_enabled=bool(data.get("tfaEnabled", False)),
            is_locked=bool(data.get("isLocked", False)),
            last_login_date=data.get("lastLoginDate", ""),
            tfa_configured=bool(data.get("tfaConfigured", False)),
            account_id=data.get("accountId", ""),
            actions=UserActions.from_dict(actions) if actions is not None else None,
            auth_grants=[AuthGrant.from_dict(item) for item in grants] if grants else None,
        )


@dataclass
class CreateUserRequest(UserBasicInfo):
    auth_grants: List[AuthGrantRequest] = field(default_factory=list)
    notifications: UserNotifications = field(default_factory=UserNotifications)
    send_email: bool = False

    def to_dict(self) -> Dict[str, Any]:
        body = self.basic_info_dict()
        if self.auth_grants:
            body["authGrants"] = [grant.to_dict() for grant in self.auth_grants]
        body["notifications"] = self.notifications.to_dict()
        return body


@dataclass
class GetUserRequest:
    identity_id: str
    actions: bool = False
    auth_grants: bool = False
    notifications: bool = False


@dataclass
class ListUsersRequest:
    group_id: Optional[int] = None
    auth_grants: bool = False
    actions: bool = False


@dataclass
class UpdateUserInfoRequest:
    identity_id: str
    user: UserBasicInfo = field(default_factory=UserBasicInfo)


@dataclass
class UpdateUserNotificationsRequest:
    identity_id: str
    notifications: UserNotifications = field(default_factory=UserNotifications)


@dataclass
class UpdateUserAuthGrantsRequest:
    identity_id: str
    auth_grants: List[AuthGrantRequest] = field(default_factory=list)


@dataclass
class RemoveUserRequest:
    identity_id: str


@dataclass
class UpdateTFARequest:
    identity_id: str
    action: Optional[TFAAction] = None


def _tfa_action_rule(value: Any) -> Optional[str]:
    choices = tuple(action.value for action in TFAAction)
    raw = value.value if isinstance(value, TFAAction) else value
    return one_of(
        *choices,
        message=f"value '{raw}' is invalid. Must be one of: 'enable', 'disable' or 'reset'",
    )(raw)


class UserService:
    """Service for managing IAM user identities."""

    def __init__(self, client: IAMClient):
        """Initialize user service.

        Args:
            client: Configured IAM client
        """
        self.client = client

    def create_user(self, params: CreateUserRequest) -> User:
        """Create a user in the account of the API client.

        Args:
            params: Profile, auth grants and notification settings;
                ``send_email`` asks the API to send the welcome email

        Returns:
            Created user

        Raises:
            ValidationError: If a required field is missing or email is malformed
            APIError: If the API does not answer 201
        """
        validate_fields(
            {
                "country": (params.country, [required]),
                "email": (params.email, [required, email_format]),
                "firstName": (params.first_name, [required]),
                "lastName": (params.last_name, [required]),
                "authGrants": (params.auth_grants, [required]),
            },
            Operation.CREATE_USER,
        )
        payload = self.client.call(
            Operation.CREATE_USER,
            "POST",
            self.client.user_admin_path("ui-identities"),
            params=query(sendEmail=params.send_email),
            body=params.to_dict(),
            expect=(201,),
        )
        return User.from_dict(payload or {})

    def get_user(self, params: GetUserRequest) -> User:
        """Fetch a user's profile.

        Args:
            params: Identity ID and flags expanding actions, auth grants
                and notifications

        Returns:
            User profile
        """
        validate_fields({"uiIdentity": (params.identity_id, [required])}, Operation.GET_USER)
        payload = self.client.call(
            Operation.GET_USER,
            "GET",
            self.client.user_admin_path("ui-identities", params.identity_id),
            params=query(
                actions=params.actions,
                authGrants=params.auth_grants,
                notifications=params.notifications,
            ),
        )
        return User.from_dict(payload or {})

    def list_users(self, params: Optional[ListUsersRequest] = None) -> List[UserListItem]:
        """List users who have access on the account.

        ``group_id`` narrows the list and is only sent when set.
        """
        params = params or ListUsersRequest()
        payload = self.client.call(
            Operation.LIST_USERS,
            "GET",
            self.client.user_admin_path("ui-identities"),
            params=query(actions=params.actions, authGrants=params.auth_grants, groupId=params.group_id),
        )
        return [UserListItem.from_dict(item) for item in payload or []]

    def remove_user(self, params: RemoveUserRequest) -> None:
        validate_fields({"uiIdentity": (params.identity_id, [required])}, Operation.REMOVE_USER)
        self.client.call(
            Operation.REMOVE_USER,
            "DELETE",
            self.client.user_admin_path("ui-identities", params.identity_id),
            expect=(200, 204),
        )

    def update_user_auth_grants(self, params: UpdateUserAuthGrantsRequest) -> List[AuthGrant]:
        """Replace the groups and roles a user has access to."""
        validate_fields(
            {
                "uiIdentity": (params.identity_id, [required]),
                "authGrants": (params.auth_grants, [required]),
            },
            Operation.UPDATE_USER_AUTH_GRANTS,
        )
        payload = self.client.call(
            Operation.UPDATE_USER_AUTH_GRANTS,
            "PUT",
            self.client.user_admin_path("ui-identities", params.identity_id, "auth-grants"),
            body=[grant.to_dict() for grant in params.auth_grants],
        )
        return [AuthGrant.from_dict(item) for item in payload or []]

    def update_user_info(self, params: UpdateUserInfoRequest) -> UserBasicInfo:
        """Update a user's basic profile information."""
        user = params.user
        validate_fields(
            {
                "uiIdentity": (params.identity_id, [required]),
                "firstName": (user.first_name, [required]),
                "lastName": (user.last_name, [required]),
                "country": (user.country, [required]),
                "timeZone": (user.time_zone, [required]),
                "preferredLanguage": (user.preferred_language, [required]),
                "sessionTimeOut": (user.session_time_out, [required]),
            },
            Operation.UPDATE_USER_INFO,
        )
        payload = self.client.call(
            Operation.UPDATE_USER_INFO,
            "PUT",
            self.client.user_admin_path("ui-identities", params.identity_id, "basic-info"),
            body=user.basic_info_dict(),
        )
        return UserBasicInfo.from_dict(payload or {})

    def update_user_notifications(self, params: UpdateUserNotificationsRequest) -> UserNotifications:
        """Subscribe or unsubscribe a user to product notification emails."""
        validate_fields({"uiIdentity": (params.identity_id, [required])}, Operation.UPDATE_USER_NOTIFICATIONS)
        payload = self.client.call(
            Operation.UPDATE_USER_NOTIFICATIONS,
            "PUT",
            self.client.user_admin_path("ui-identities", params.identity_id, "notifications"),
            body=params.notifications.to_dict(),
        )
        return UserNotifications.from_dict(payload or {})

    def update_tfa(self, params: UpdateTFARequest) -> None:
        """Enable, disable or reset a user's two-factor authentication."""
        validate_fields(
            {
                "IdentityID": (params.identity_id, [required]),
                "Action": (params.action, [required, _tfa_action_rule]),
            },
            Operation.UPDATE_TFA,
        )
        action = params.action.value if isinstance(params.action, TFAAction) else params.action
        self.client.call(
            Operation.UPDATE_TFA,
            "PUT",
            self.client.user_admin_path("ui-identities", params.identity_id, "tfa"),
            params=query(action=action),
            expect=(204,),
        )
