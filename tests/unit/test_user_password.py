import pytest

from iam_admin.core.user_admin import (
    APIError,
    Operation,
    ResetUserPasswordRequest,
    ResetUserPasswordResponse,
    SetUserPasswordRequest,
    ValidationError,
)
from tests.conftest import INTERNAL_ERROR_BODY, USER_ADMIN


class TestResetUserPassword:
    def test_returns_new_password(self, iam, session):
        session.queue(200, '{"newPassword": "K5U6PaQWrWHb"}')

        result = iam.passwords.reset_user_password(ResetUserPasswordRequest(identity_id="A-BC-1234567"))

        assert result == ResetUserPasswordResponse(new_password="K5U6PaQWrWHb")
        assert session.last.method == "POST"
        assert session.last.url == f"{USER_ADMIN}/ui-identities/A-BC-1234567/reset-password?sendEmail=false"

    def test_emailed_password_has_no_content(self, iam, session):
        session.queue(204)

        result = iam.passwords.reset_user_password(
            ResetUserPasswordRequest(identity_id="A-BC-1234567", send_email=True)
        )

        assert result.new_password == ""
        assert session.last.url.endswith("?sendEmail=true")

    def test_server_error(self, iam, session):
        session.queue(500, INTERNAL_ERROR_BODY)

        with pytest.raises(APIError) as exc_info:
            iam.passwords.reset_user_password(ResetUserPasswordRequest(identity_id="A-BC-1234567"))

        assert exc_info.value.operation is Operation.RESET_USER_PASSWORD


class TestSetUserPassword:
    def test_no_content(self, iam, session):
        session.queue(204)

        iam.passwords.set_user_password(
            SetUserPasswordRequest(identity_id="A-BC-1234567", new_password="newpwd")
        )

        assert session.last.method == "POST"
        assert session.last.url == f"{USER_ADMIN}/ui-identities/A-BC-1234567/set-password"
        assert session.last.json == {"newPassword": "newpwd"}

    def test_missing_fields(self, iam, session):
        with pytest.raises(ValidationError) as exc_info:
            iam.passwords.set_user_password(SetUserPasswordRequest(identity_id=""))

        assert exc_info.value.errors == {"uiIdentity": "cannot be blank", "newPassword": "cannot be blank"}
        assert session.calls == []

    def test_bad_request(self, iam, session):
        session.queue(400, """
{
    "type": "/useradmin-api/error-types/1002",
    "title": "Password policy violation",
    "detail": "The password does not meet the policy",
    "httpStatus": 400
}""")

        with pytest.raises(APIError) as exc_info:
            iam.passwords.set_user_password(
                SetUserPasswordRequest(identity_id="A-BC-1234567", new_password="x")
            )

        assert exc_info.value.status_code == 400
        assert exc_info.value.operation is Operation.SET_USER_PASSWORD
