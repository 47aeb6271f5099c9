"""Single entry point bundling every user-admin service."""
from __future__ import annotations

from .account_switch_keys import AccountSwitchKeyService
from .client import IAMClient
from .roles import RoleService
from .support import SupportService
from .user_lock import UserLockService
from .user_password import UserPasswordService
from .users import UserService


class IAM:
    """Groups the services sharing one ``IAMClient``.

    Usage:
        iam = IAM(IAMClient(base_url, access_token=token))
        roles = iam.roles.list_roles()
    """

    def __init__(self, client: IAMClient):
        self.client = client
        self.roles = RoleService(client)
        self.users = UserService(client)
        self.user_lock = UserLockService(client)
        self.passwords = UserPasswordService(client)
        self.support = SupportService(client)
        self.account_switch_keys = AccountSwitchKeyService(client)

    @classmethod
    def from_settings(cls, settings) -> "IAM":
        return cls(IAMClient.from_settings(settings))
