import pytest

from iam_admin.core import validators
from iam_admin.core.user_admin import Operation, ValidationError


class TestIsBlank:
    @pytest.mark.parametrize("value", [None, "", [], {}, 0])
    def test_blank_values(self, value):
        assert validators.is_blank(value)

    @pytest.mark.parametrize("value", [False, True, "x", [1], 7, 0.0])
    def test_non_blank_values(self, value):
        assert not validators.is_blank(value)


class TestValidateEmail:
    def test_returns_lowercased_email(self):
        assert validators.validate_email("  USER@Example.COM ") == "user@example.com"

    @pytest.mark.parametrize(
        "email",
        ["", "no-at-symbol", "user@", "@domain.com", "user@example", "a@b@c.com", "a" * 255 + "@example.com"],
    )
    def test_invalid_email_formats(self, email):
        with pytest.raises(ValueError):
            validators.validate_email(email)


class TestRules:
    def test_required(self):
        assert validators.required("") == "cannot be blank"
        assert validators.required("x") is None

    def test_email_format_leaves_blank_to_required(self):
        assert validators.email_format("") is None
        assert validators.email_format("john.doe") == "must be a valid email address"
        assert validators.email_format("john.doe@example.com") is None

    def test_one_of(self):
        rule = validators.one_of("a", "b", message="pick a or b")
        assert rule("a") is None
        assert rule("c") == "pick a or b"
        assert validators.one_of("a")("z") == "must be a valid value"


class TestValidateFields:
    def test_passes_when_all_valid(self):
        validators.validate_fields({"name": ("x", [validators.required])})

    def test_reports_every_invalid_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validators.validate_fields(
                {
                    "lastName": ("", [validators.required]),
                    "email": ("bad", [validators.required, validators.email_format]),
                    "firstName": ("John", [validators.required]),
                },
                Operation.CREATE_USER,
            )

        err = exc_info.value
        assert err.errors == {"lastName": "cannot be blank", "email": "must be a valid email address"}
        assert err.operation is Operation.CREATE_USER
        assert str(err) == (
            "create user: struct validation: email: must be a valid email address; lastName: cannot be blank"
        )

    def test_first_failing_rule_wins(self):
        with pytest.raises(ValidationError) as exc_info:
            validators.validate_fields({"email": (None, [validators.required, validators.email_format])})
        assert exc_info.value.errors == {"email": "cannot be blank"}
