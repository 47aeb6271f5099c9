"""IAM user password operations."""
from __future__ import annotations
from dataclasses import dataclass

from ..validators import required, validate_fields
from .client import IAMClient, query
from .exceptions import Operation


@dataclass
class ResetUserPasswordRequest:
    identity_id: str
    send_email: bool = False


@dataclass
class ResetUserPasswordResponse:
    """New one-time password; empty when the API mailed it to the user."""
    new_password: str = ""


@dataclass
class SetUserPasswordRequest:
    identity_id: str
    new_password: str = ""


class UserPasswordService:
    """Service for resetting and setting user passwords."""

    def __init__(self, client: IAMClient):
        self.client = client

    def reset_user_password(self, params: ResetUserPasswordRequest) -> ResetUserPasswordResponse:
        """Generate a new one-time password for a user.

        Args:
            params: Identity ID; ``send_email`` mails the password instead of
                returning it

        Returns:
            Response holding the new password (empty on 204)
        """
        validate_fields({"uiIdentity": (params.identity_id, [required])}, Operation.RESET_USER_PASSWORD)
        payload = self.client.call(
            Operation.RESET_USER_PASSWORD,
            "POST",
            self.client.user_admin_path("ui-identities", params.identity_id, "reset-password"),
            params=query(sendEmail=params.send_email),
            expect=(200, 204),
        )
        return ResetUserPasswordResponse(new_password=(payload or {}).get("newPassword", ""))

    def set_user_password(self, params: SetUserPasswordRequest) -> None:
        validate_fields(
            {
                "uiIdentity": (params.identity_id, [required]),
                "newPassword": (params.new_password, [required]),
            },
            Operation.SET_USER_PASSWORD,
        )
        self.client.call(
            Operation.SET_USER_PASSWORD,
            "POST",
            self.client.user_admin_path("ui-identities", params.identity_id, "set-password"),
            body={"newPassword": params.new_password},
            expect=(204,),
        )
