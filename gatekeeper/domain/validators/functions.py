"""Field check functions.

A check inspects one already-typed value and returns a violation message,
or None when the value passes. Checks never raise and never stop the
checks after them: the validator collects every message in order.

Usage:
    from gatekeeper.domain.validators.functions import max_length, matches

    checks = (max_length(50, "First name cannot exceed 50 characters"),)
"""

import re
from collections.abc import Callable, Iterable
from typing import Any

type Check = Callable[[Any], str | None]

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
PHONE_PATTERN = r"^\+?[\d\s\-()]+$"
PASSWORD_CLASSES_PATTERN = r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)"


def min_length(minimum: int, message: str) -> Check:
    """Build a check rejecting strings shorter than `minimum`.

    Example:
        >>> min_length(8, "too short")("abc")
        'too short'
    """

    def check(value: str) -> str | None:
        return message if len(value) < minimum else None

    return check


def max_length(maximum: int, message: str) -> Check:
    """Build a check rejecting strings longer than `maximum`."""

    def check(value: str) -> str | None:
        return message if len(value) > maximum else None

    return check


def matches(pattern: str, message: str) -> Check:
    """Build a check requiring the whole string to match `pattern`.

    Character classes are ASCII-only (`\\d` means 0-9).

    Example:
        >>> matches(EMAIL_PATTERN, "Invalid email format")("not-an-email")
        'Invalid email format'
    """
    compiled = re.compile(pattern, re.ASCII)

    def check(value: str) -> str | None:
        return None if compiled.fullmatch(value) else message

    return check


def one_of(allowed: Iterable[str], message: str) -> Check:
    """Build a check requiring membership in a closed set of values."""
    permitted = frozenset(allowed)

    def check(value: str) -> str | None:
        return None if value in permitted else message

    return check


def password_strength(message: str) -> Check:
    """Build a check requiring a lowercase letter, an uppercase letter and a digit.

    Example:
        >>> password_strength("weak")("alllowercase1")
        'weak'
    """
    compiled = re.compile(PASSWORD_CLASSES_PATTERN, re.ASCII | re.DOTALL)

    def check(value: str) -> str | None:
        return None if compiled.match(value) else message

    return check
