"""Input validation helpers for request parameters.

A rule is a callable taking a value and returning an error message, or None
when the value is acceptable.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple

from .user_admin.exceptions import Operation, ValidationError

Rule = Callable[[Any], Optional[str]]


def is_blank(value: Any) -> bool:
    """Return True for values treated as unset by the ``required`` rule."""
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    if isinstance(value, int):
        return value == 0
    return False


def required(value: Any) -> Optional[str]:
    if is_blank(value):
        return "cannot be blank"
    return None


def validate_email(email: str) -> str:
    """Validate email address.

    Args:
        email: Email address to validate

    Returns:
        Normalized email address

    Raises:
        ValueError: If email is invalid
    """
    email = email.strip().lower()
    if not email or email.count("@") != 1:
        raise ValueError("Invalid email format")

    local, domain = email.rsplit("@", 1)
    if not local or not domain or "." not in domain:
        raise ValueError("Invalid email format")
    if domain.startswith(".") or domain.endswith("."):
        raise ValueError("Invalid email format")
    if any(char.isspace() for char in email):
        raise ValueError("Invalid email format")
    if len(email) > 254:
        raise ValueError("Email exceeds maximum length")

    return email


def email_format(value: Any) -> Optional[str]:
    # Blank values are left to ``required``.
    if is_blank(value):
        return None
    try:
        validate_email(str(value))
    except ValueError:
        return "must be a valid email address"
    return None


def one_of(*choices: Any, message: Optional[str] = None) -> Rule:
    """Build a rule accepting only the given values."""
    def _rule(value: Any) -> Optional[str]:
        if is_blank(value) or value in choices:
            return None
        return message or "must be a valid value"
    return _rule


def validate_fields(
    fields: Dict[str, Tuple[Any, Sequence[Rule]]],
    operation: Optional[Operation] = None,
) -> None:
    """Run every rule and raise one error naming all invalid fields.

    Args:
        fields: Field name -> (value, rules); rules run in order and the
            first failure is reported for that field
        operation: Operation to attach to the raised error

    Raises:
        ValidationError: If at least one field is invalid
    """
    errors: Dict[str, str] = {}
    for name, (value, rules) in fields.items():
        message = _first_failure(value, rules)
        if message:
            errors[name] = message
    if errors:
        raise ValidationError(errors, operation)


def _first_failure(value: Any, rules: Iterable[Rule]) -> Optional[str]:
    for rule in rules:
        message = rule(value)
        if message:
            return message
    return None
