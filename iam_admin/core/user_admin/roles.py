"""IAM role management operations."""
from __future__ import annotations
import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..validators import required, validate_fields
from .client import IAMClient, query
from .exceptions import Operation


class RoleType(str, enum.Enum):
    STANDARD = "standard"
    CUSTOM = "custom"


def _role_type(value: Optional[str]) -> Optional[RoleType]:
    # Unknown types are dropped rather than failing the whole decode.
    try:
        return RoleType(value) if value else None
    except ValueError:
        return None


@dataclass
class RoleAction:
    """Permissions the caller has on a role."""
    edit: bool = False
    delete: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoleAction":
        return cls(edit=bool(data.get("edit", False)), delete=bool(data.get("delete", False)))


@dataclass
class GrantedRoleID:
    """Reference to a granted role in create/update requests."""
    id: int

    def to_dict(self) -> Dict[str, Any]:
        return {"grantedRoleId": self.id}


@dataclass
class RoleGrantedRole:
    role_id: int
    role_name: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoleGrantedRole":
        return cls(
            role_id=data.get("grantedRoleId", 0),
            role_name=data.get("grantedRoleName", ""),
            description=data.get("grantedRoleDescription", ""),
        )


@dataclass
class RoleUser:
    """User sharing a role."""
    ui_identity_id: str
    first_name: str = ""
    last_name: str = ""
    account_id: str = ""
    email: str = ""
    last_login_date: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoleUser":
        return cls(
            ui_identity_id=data.get("uiIdentityId", ""),
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
            account_id=data.get("accountId", ""),
            email=data.get("email", ""),
            last_login_date=data.get("lastLoginDate", ""),
        )


@dataclass
class Role:
    role_id: int
    role_name: str = ""
    role_description: str = ""
    role_type: Optional[RoleType] = None
    created_date: str = ""
    created_by: str = ""
    modified_date: str = ""
    modified_by: str = ""
    actions: Optional[RoleAction] = None
    granted_roles: Optional[List[RoleGrantedRole]] = None
    users: Optional[List[RoleUser]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Role":
        role_type = data.get("type")
        actions = data.get("actions")
        granted = data.get("grantedRoles")
        users = data.get("users")
        return cls(
            role_id=data.get("roleId", 0),
            role_name=data.get("roleName", ""),
            role_description=data.get("roleDescription", ""),
            role_type=_role_type(role_type),
            created_date=data.get("createdDate", ""),
            created_by=data.get("createdBy", ""),
            modified_date=data.get("modifiedDate", ""),
            modified_by=data.get("modifiedBy", ""),
            actions=RoleAction.from_dict(actions) if actions is not None else None,
            granted_roles=[RoleGrantedRole.from_dict(item) for item in granted] if granted else None,
            users=[RoleUser.from_dict(item) for item in users] if users else None,
        )


@dataclass
class RoleRequest:
    """Role body for create and update; unset fields are not sent."""
    name: Optional[str] = None
    description: Optional[str] = None
    granted_roles: Optional[List[GrantedRoleID]] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if self.name:
            body["roleName"] = self.name
        if self.description:
            body["roleDescription"] = self.description
        if self.granted_roles:
            body["grantedRoles"] = [granted.to_dict() for granted in self.granted_roles]
        return body


@dataclass
class CreateRoleRequest(RoleRequest):
    pass


@dataclass
class UpdateRoleRequest:
    id: int
    role: RoleRequest = field(default_factory=RoleRequest)


@dataclass
class GetRoleRequest:
    id: int
    actions: bool = False
    granted_roles: bool = False
    users: bool = False


@dataclass
class DeleteRoleRequest:
    id: int


@dataclass
class ListRolesRequest:
    group_id: Optional[int] = None
    actions: bool = False
    ignore_context: bool = False
    users: bool = False


class RoleService:
    """Service for managing IAM roles."""

    def __init__(self, client: IAMClient):
        """Initialize role service.

        Args:
            client: Configured IAM client
        """
        self.client = client

    def create_role(self, params: CreateRoleRequest) -> Role:
        """Create a custom role.

        Args:
            params: Role name, description and granted roles

        Returns:
            Created role

        Raises:
            ValidationError: If name, description or granted roles are missing
            APIError: If the API does not answer 201
        """
        validate_fields(
            {
                "roleName": (params.name, [required]),
                "roleDescription": (params.description, [required]),
                "grantedRoles": (params.granted_roles, [required]),
            },
            Operation.CREATE_ROLE,
        )
        payload = self.client.call(
            Operation.CREATE_ROLE,
            "POST",
            self.client.user_admin_path("roles"),
            body=params.to_dict(),
            expect=(201,),
        )
        return Role.from_dict(payload or {})

    def get_role(self, params: GetRoleRequest) -> Role:
        """Fetch a role, optionally expanding actions, granted roles and users."""
        validate_fields({"roleId": (params.id, [required])}, Operation.GET_ROLE)
        payload = self.client.call(
            Operation.GET_ROLE,
            "GET",
            self.client.user_admin_path("roles", params.id),
            params=query(actions=params.actions, grantedRoles=params.granted_roles, users=params.users),
        )
        return Role.from_dict(payload or {})

    def update_role(self, params: UpdateRoleRequest) -> Role:
        """Update a role; only the fields set on ``params.role`` are sent."""
        validate_fields({"roleId": (params.id, [required])}, Operation.UPDATE_ROLE)
        payload = self.client.call(
            Operation.UPDATE_ROLE,
            "PUT",
            self.client.user_admin_path("roles", params.id),
            body=params.role.to_dict(),
        )
        return Role.from_dict(payload or {})

    def delete_role(self, params: DeleteRoleRequest) -> None:
        validate_fields({"roleId": (params.id, [required])}, Operation.DELETE_ROLE)
        self.client.call(
            Operation.DELETE_ROLE,
            "DELETE",
            self.client.user_admin_path("roles", params.id),
            expect=(204,),
        )

    def list_roles(self, params: Optional[ListRolesRequest] = None) -> List[Role]:
        """List roles; ``group_id`` is only sent when set."""
        params = params or ListRolesRequest()
        payload = self.client.call(
            Operation.LIST_ROLES,
            "GET",
            self.client.user_admin_path("roles"),
            params=query(
                actions=params.actions,
                groupId=params.group_id,
                ignoreContext=params.ignore_context,
                users=params.users,
            ),
        )
        return [Role.from_dict(item) for item in payload or []]

    def list_grantable_roles(self) -> List[RoleGrantedRole]:
        """List roles that can be granted to a custom role."""
        payload = self.client.call(
            Operation.LIST_GRANTABLE_ROLES,
            "GET",
            self.client.user_admin_path("roles", "grantable-roles"),
        )
        return [RoleGrantedRole.from_dict(item) for item in payload or []]
