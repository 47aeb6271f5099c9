"""IAM user-admin API client library.

This package provides a modular, testable interface to the identity
management user-admin API.

Architecture:
- client.py: HTTP client, URL building and error mapping
- roles.py: Role management
- users.py: User lifecycle (create, update, auth grants, TFA, remove)
- user_lock.py: Account lock and unlock
- user_password.py: Password reset and set
- support.py: Reference data (countries, timezones, policies)
- account_switch_keys.py: Account switch keys of an API client
- exceptions.py: Typed exceptions and operation sentinels
- api.py: IAM facade bundling all services

Usage:
    from iam_admin.core.user_admin import IAM, IAMClient, GetRoleRequest

    iam = IAM(IAMClient("https://akab-xxx.luna.akamaiapis.net", access_token="..."))
    role = iam.roles.get_role(GetRoleRequest(id=123456, actions=True))
"""
from .exceptions import (
    Operation,
    IAMError,
    ValidationError,
    RequestError,
    ResponseDecodeError,
    APIError,
    ErrorBodyDecodeError,
)
from .client import IAMClient, REQUEST_TIMEOUT, DEFAULT_API_VERSION
from .roles import (
    RoleService,
    RoleType,
    RoleAction,
    GrantedRoleID,
    RoleGrantedRole,
    RoleUser,
    Role,
    RoleRequest,
    CreateRoleRequest,
    UpdateRoleRequest,
    GetRoleRequest,
    DeleteRoleRequest,
    ListRolesRequest,
)
from .users import (
    UserService,
    TFAAction,
    UserBasicInfo,
    UserActions,
    AuthGrant,
    AuthGrantRequest,
    UserNotificationOptions,
    UserNotifications,
    User,
    UserListItem,
    CreateUserRequest,
    GetUserRequest,
    ListUsersRequest,
    UpdateUserInfoRequest,
    UpdateUserNotificationsRequest,
    UpdateUserAuthGrantsRequest,
    RemoveUserRequest,
    UpdateTFARequest,
)
from .user_lock import UserLockService, LockUserRequest, UnlockUserRequest
from .user_password import (
    UserPasswordService,
    ResetUserPasswordRequest,
    ResetUserPasswordResponse,
    SetUserPasswordRequest,
)
from .support import (
    SupportService,
    PasswordPolicy,
    Timezone,
    TimeoutPolicy,
    ListStatesRequest,
)
from .account_switch_keys import (
    AccountSwitchKeyService,
    AccountSwitchKey,
    ListAccountSwitchKeysRequest,
)
from .api import IAM

__all__ = [
    # Client
    "IAMClient",
    "IAM",
    "REQUEST_TIMEOUT",
    "DEFAULT_API_VERSION",

    # Exceptions
    "Operation",
    "IAMError",
    "ValidationError",
    "RequestError",
    "ResponseDecodeError",
    "APIError",
    "ErrorBodyDecodeError",

    # Roles
    "RoleService",
    "RoleType",
    "RoleAction",
    "GrantedRoleID",
    "RoleGrantedRole",
    "RoleUser",
    "Role",
    "RoleRequest",
    "CreateRoleRequest",
    "UpdateRoleRequest",
    "GetRoleRequest",
    "DeleteRoleRequest",
    "ListRolesRequest",

    # Users
    "UserService",
    "TFAAction",
    "UserBasicInfo",
    "UserActions",
    "AuthGrant",
    "AuthGrantRequest",
    "UserNotificationOptions",
    "UserNotifications",
    "User",
    "UserListItem",
    "CreateUserRequest",
    "GetUserRequest",
    "ListUsersRequest",
    "UpdateUserInfoRequest",
    "UpdateUserNotificationsRequest",
    "UpdateUserAuthGrantsRequest",
    "RemoveUserRequest",
    "UpdateTFARequest",

    # Lock / unlock
    "UserLockService",
    "LockUserRequest",
    "UnlockUserRequest",

    # Passwords
    "UserPasswordService",
    "ResetUserPasswordRequest",
    "ResetUserPasswordResponse",
    "SetUserPasswordRequest",

    # Reference data
    "SupportService",
    "PasswordPolicy",
    "Timezone",
    "TimeoutPolicy",
    "ListStatesRequest",

    # Account switch keys
    "AccountSwitchKeyService",
    "AccountSwitchKey",
    "ListAccountSwitchKeysRequest",
]
