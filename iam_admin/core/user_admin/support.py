"""IAM reference data: countries, timezones, languages and policies.

All endpoints are read-only lists maintained by the provider.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List

from ..validators import required, validate_fields
from .client import IAMClient
from .exceptions import Operation


@dataclass
class PasswordPolicy:
    case_diff: int = 0
    max_repeating: int = 0
    min_digits: int = 0
    min_length: int = 0
    min_letters: int = 0
    min_non_alpha: int = 0
    min_reuse: int = 0
    pw_class: str = ""
    rotate_frequency: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PasswordPolicy":
        return cls(
            case_diff=data.get("caseDif", 0),
            max_repeating=data.get("maxRepeating", 0),
            min_digits=data.get("minDigits", 0),
            min_length=data.get("minLength", 0),
            min_letters=data.get("minLetters", 0),
            min_non_alpha=data.get("minNonAlpha", 0),
            min_reuse=data.get("minReuse", 0),
            pw_class=data.get("pwclass", ""),
            rotate_frequency=data.get("rotateFrequency", 0),
        )


@dataclass
class Timezone:
    timezone: str = ""
    description: str = ""
    offset: str = ""
    posix: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Timezone":
        return cls(
            timezone=data.get("timezone", ""),
            description=data.get("description", ""),
            offset=data.get("offset", ""),
            posix=data.get("posix", ""),
        )


@dataclass
class TimeoutPolicy:
    """Session timeout option; ``value`` is in seconds."""
    name: str = ""
    value: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimeoutPolicy":
        return cls(name=data.get("name", ""), value=data.get("value", 0))


@dataclass
class ListStatesRequest:
    country: str = ""


class SupportService:
    """Service for IAM reference data."""

    def __init__(self, client: IAMClient):
        self.client = client

    def _get_common(self, operation: Operation, *segments: str) -> Any:
        return self.client.call(operation, "GET", self.client.user_admin_path("common", *segments))

    def get_password_policy(self) -> PasswordPolicy:
        payload = self._get_common(Operation.GET_PASSWORD_POLICY, "password-policy")
        return PasswordPolicy.from_dict(payload or {})

    def supported_countries(self) -> List[str]:
        return list(self._get_common(Operation.SUPPORTED_COUNTRIES, "countries") or [])

    def list_states(self, params: ListStatesRequest) -> List[str]:
        """List states or provinces of a country."""
        validate_fields({"country": (params.country, [required])}, Operation.LIST_STATES)
        return list(self._get_common(Operation.LIST_STATES, "countries", params.country, "states") or [])

    def supported_timezones(self) -> List[Timezone]:
        payload = self._get_common(Operation.SUPPORTED_TIMEZONES, "timezones")
        return [Timezone.from_dict(item) for item in payload or []]

    def supported_contact_types(self) -> List[str]:
        return list(self._get_common(Operation.SUPPORTED_CONTACT_TYPES, "contact-types") or [])

    def supported_languages(self) -> List[str]:
        return list(self._get_common(Operation.SUPPORTED_LANGUAGES, "supported-languages") or [])

    def list_products(self) -> List[str]:
        """List products a user can subscribe to for notifications."""
        return list(self._get_common(Operation.LIST_PRODUCTS, "notification-products") or [])

    def list_timeout_policies(self) -> List[TimeoutPolicy]:
        payload = self._get_common(Operation.LIST_TIMEOUT_POLICIES, "timeout-policies")
        return [TimeoutPolicy.from_dict(item) for item in payload or []]
