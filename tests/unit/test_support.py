import pytest

from iam_admin.core.user_admin import (
    APIError,
    ListStatesRequest,
    Operation,
    PasswordPolicy,
    TimeoutPolicy,
    Timezone,
    ValidationError,
)
from tests.conftest import INTERNAL_ERROR_BODY, USER_ADMIN


def test_get_password_policy(iam, session):
    session.queue(200, """
{
    "caseDif": 0,
    "maxRepeating": 1,
    "minDigits": 1,
    "minLength": 1,
    "minLetters": 1,
    "minNonAlpha": 0,
    "minReuse": 1,
    "pwclass": "test_class",
    "rotateFrequency": 10
}""")

    policy = iam.support.get_password_policy()

    assert session.last.url == f"{USER_ADMIN}/common/password-policy"
    assert policy == PasswordPolicy(
        case_diff=0,
        max_repeating=1,
        min_digits=1,
        min_length=1,
        min_letters=1,
        min_non_alpha=0,
        min_reuse=1,
        pw_class="test_class",
        rotate_frequency=10,
    )


@pytest.mark.parametrize(
    "method, path, body",
    [
        ("supported_countries", "countries", '["Afghanistan", "Aland Islands"]'),
        ("supported_contact_types", "contact-types", '["Billing", "Security"]'),
        ("supported_languages", "supported-languages", '["Deutsch", "English"]'),
        ("list_products", "notification-products", '["EdgeComputing for Java", "Streaming"]'),
    ],
)
def test_string_lists(iam, session, method, path, body):
    session.queue(200, body)

    result = getattr(iam.support, method)()

    assert session.last.method == "GET"
    assert session.last.url == f"{USER_ADMIN}/common/{path}"
    assert len(result) == 2
    assert all(isinstance(item, str) for item in result)


def test_list_states(iam, session):
    session.queue(200, '["AA", "AE", "AK"]')

    states = iam.support.list_states(ListStatesRequest(country="USA"))

    assert session.last.url == f"{USER_ADMIN}/common/countries/USA/states"
    assert states == ["AA", "AE", "AK"]


def test_list_states_country_is_escaped(iam, session):
    session.queue(200, "[]")

    iam.support.list_states(ListStatesRequest(country="United States"))

    assert session.last.url == f"{USER_ADMIN}/common/countries/United%20States/states"


def test_list_states_requires_country(iam, session):
    with pytest.raises(ValidationError) as exc_info:
        iam.support.list_states(ListStatesRequest())

    assert exc_info.value.errors == {"country": "cannot be blank"}
    assert exc_info.value.operation is Operation.LIST_STATES
    assert session.calls == []


def test_supported_timezones(iam, session):
    session.queue(200, """
[
    {"timezone": "Asia/Rangoon", "description": "Asia/Rangoon GMT+6", "offset": "+6", "posix": "Asia/Rangoon"}
]""")

    timezones = iam.support.supported_timezones()

    assert session.last.url == f"{USER_ADMIN}/common/timezones"
    assert timezones == [
        Timezone(timezone="Asia/Rangoon", description="Asia/Rangoon GMT+6", offset="+6", posix="Asia/Rangoon")
    ]


def test_list_timeout_policies(iam, session):
    session.queue(200, '[{"name": "after15Minutes", "value": 900}, {"name": "after30Minutes", "value": 1800}]')

    policies = iam.support.list_timeout_policies()

    assert session.last.url == f"{USER_ADMIN}/common/timeout-policies"
    assert policies == [TimeoutPolicy(name="after15Minutes", value=900), TimeoutPolicy(name="after30Minutes", value=1800)]


@pytest.mark.parametrize(
    "method, operation",
    [
        ("get_password_policy", Operation.GET_PASSWORD_POLICY),
        ("supported_countries", Operation.SUPPORTED_COUNTRIES),
        ("supported_timezones", Operation.SUPPORTED_TIMEZONES),
        ("list_timeout_policies", Operation.LIST_TIMEOUT_POLICIES),
    ],
)
def test_server_errors_carry_operation(iam, session, method, operation):
    session.queue(500, INTERNAL_ERROR_BODY)

    with pytest.raises(APIError) as exc_info:
        getattr(iam.support, method)()

    assert exc_info.value.status_code == 500
    assert exc_info.value.operation is operation
