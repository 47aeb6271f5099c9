"""IAM user lock and unlock operations."""
from __future__ import annotations
from dataclasses import dataclass

from ..validators import required, validate_fields
from .client import IAMClient
from .exceptions import Operation


@dataclass
class LockUserRequest:
    identity_id: str


@dataclass
class UnlockUserRequest:
    identity_id: str


class UserLockService:
    """Service for locking and unlocking user accounts."""

    def __init__(self, client: IAMClient):
        self.client = client

    def lock_user(self, params: LockUserRequest) -> None:
        """Lock a user account, blocking sign-in until it is unlocked."""
        validate_fields({"uiIdentity": (params.identity_id, [required])}, Operation.LOCK_USER)
        self.client.call(
            Operation.LOCK_USER,
            "POST",
            self.client.user_admin_path("ui-identities", params.identity_id, "lock"),
            expect=(200, 204),
        )

    def unlock_user(self, params: UnlockUserRequest) -> None:
        """Unlock a user account.

        Unlocking an account that is not locked succeeds as well.
        """
        validate_fields({"uiIdentity": (params.identity_id, [required])}, Operation.UNLOCK_USER)
        self.client.call(
            Operation.UNLOCK_USER,
            "POST",
            self.client.user_admin_path("ui-identities", params.identity_id, "unlock"),
            expect=(200, 204),
        )
