"""Validation schema registry.

Single source of truth for request input rules. Each schema is a
data-driven table of field rules; `validate()` walks the table and
accumulates every violation instead of stopping at the first.

Per field, in order:
    1. Presence: absent required fields report their required message;
       absent optional fields are skipped (or take their default).
    2. Type: a value of the wrong type reports one message and ends the
       checks for that field only.
    3. Normalization: trim, lower-case.
    4. Checks: every check runs; messages keep check order.

Usage:
    from gatekeeper.domain.validators import SchemaName, validate

    result = validate(SchemaName.REGISTRATION, payload)
    if not result.is_valid:
        return Failure(error=ValidationError(
            message="Validation failed", field_errors=result.field_errors
        ))
    data = result.value  # normalized, never the raw input
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from gatekeeper.domain.entities.user import (
    BIO_MAX_LENGTH,
    BIO_TOO_LONG,
    EXPERIENCE_MAX_LENGTH,
    EXPERIENCE_TOO_LONG,
    FIRST_NAME_TOO_LONG,
    LAST_NAME_TOO_LONG,
    NAME_MAX_LENGTH,
)
from gatekeeper.domain.enums import SELF_ASSIGNABLE_ROLES, UserRole
from gatekeeper.domain.validators.functions import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    Check,
    matches,
    max_length,
    min_length,
    one_of,
    password_strength,
)
from gatekeeper.domain.value_objects import ValidationResult

SCHEMA_ERROR_KEY = "_schema"
EMAIL_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 8
# bcrypt only reads the first 72 bytes
PASSWORD_MAX_LENGTH = 72


class SchemaName(str, Enum):
    """Schemas recognized by the request pipeline."""

    REGISTRATION = "registration"
    LOGIN = "login"
    PROFILE_UPDATE = "profile_update"


class FieldType(str, Enum):
    """Expected JSON type of a field."""

    STRING = "string"
    STRING_LIST = "string_list"
    OBJECT = "object"


@dataclass(frozen=True, kw_only=True)
class FieldRule:
    """Declarative rule for one input field.

    Attributes:
        name: Input key (camelCase, as on the wire).
        label: Human name used in generated messages ("First name").
        type: Expected JSON type.
        required: Report `required_message` when the key is absent.
        required_message: Message for an absent required field.
        trim: Strip surrounding whitespace (strings and list items).
        lowercase: Lower-case after trimming.
        checks: Checks applied to the normalized value.
        item_checks: Checks applied to each list item (STRING_LIST only).
        fields: Nested rules (OBJECT only).
        default: Value used when an optional field is absent.
    """

    name: str
    label: str
    type: FieldType = FieldType.STRING
    required: bool = False
    required_message: str | None = None
    trim: bool = False
    lowercase: bool = False
    checks: tuple[Check, ...] = ()
    item_checks: tuple[Check, ...] = ()
    fields: tuple["FieldRule", ...] = ()
    default: Any = None


@dataclass(frozen=True, kw_only=True)
class Schema:
    """Named, ordered set of field rules.

    Attributes:
        name: Registry key.
        fields: Rules in check order.
        partial: Every field optional; only supplied fields are checked.
    """

    name: SchemaName
    fields: tuple[FieldRule, ...]
    partial: bool = False


def _email_rule() -> FieldRule:
    return FieldRule(
        name="email",
        label="Email",
        required=True,
        required_message="Email is required",
        trim=True,
        lowercase=True,
        checks=(
            min_length(1, "Email is required"),
            max_length(EMAIL_MAX_LENGTH, "Email cannot exceed 255 characters"),
            matches(EMAIL_PATTERN, "Invalid email format"),
        ),
    )


def _name_rule(name: str, label: str, too_long: str) -> FieldRule:
    return FieldRule(
        name=name,
        label=label,
        required=True,
        required_message=f"{label} is required",
        trim=True,
        checks=(
            min_length(1, f"{label} is required"),
            max_length(NAME_MAX_LENGTH, too_long),
        ),
    )


# =============================================================================
# Schema Registry
# =============================================================================

SCHEMA_REGISTRY: dict[SchemaName, Schema] = {
    SchemaName.REGISTRATION: Schema(
        name=SchemaName.REGISTRATION,
        fields=(
            _email_rule(),
            FieldRule(
                name="password",
                label="Password",
                required=True,
                required_message="Password is required",
                checks=(
                    min_length(
                        PASSWORD_MIN_LENGTH,
                        "Password must be at least 8 characters long",
                    ),
                    max_length(
                        PASSWORD_MAX_LENGTH, "Password cannot exceed 72 characters"
                    ),
                    password_strength(
                        "Password must contain at least one uppercase letter, "
                        "one lowercase letter, and one number"
                    ),
                ),
            ),
            _name_rule("firstName", "First name", FIRST_NAME_TOO_LONG),
            _name_rule("lastName", "Last name", LAST_NAME_TOO_LONG),
            FieldRule(
                name="role",
                label="Role",
                trim=True,
                checks=(
                    one_of(
                        (role.value for role in SELF_ASSIGNABLE_ROLES),
                        "Role must be one of: candidate, recruiter",
                    ),
                ),
                default=UserRole.CANDIDATE.value,
            ),
        ),
    ),
    SchemaName.LOGIN: Schema(
        name=SchemaName.LOGIN,
        fields=(
            _email_rule(),
            FieldRule(
                name="password",
                label="Password",
                required=True,
                required_message="Password is required",
                checks=(min_length(1, "Password is required"),),
            ),
        ),
    ),
    SchemaName.PROFILE_UPDATE: Schema(
        name=SchemaName.PROFILE_UPDATE,
        partial=True,
        fields=(
            _name_rule("firstName", "First name", FIRST_NAME_TOO_LONG),
            _name_rule("lastName", "Last name", LAST_NAME_TOO_LONG),
            FieldRule(
                name="phone",
                label="Phone",
                trim=True,
                checks=(matches(PHONE_PATTERN, "Invalid phone number"),),
            ),
            FieldRule(
                name="bio",
                label="Bio",
                checks=(max_length(BIO_MAX_LENGTH, BIO_TOO_LONG),),
            ),
            FieldRule(
                name="skills",
                label="Skills",
                type=FieldType.STRING_LIST,
                trim=True,
            ),
            FieldRule(
                name="experience",
                label="Experience",
                checks=(max_length(EXPERIENCE_MAX_LENGTH, EXPERIENCE_TOO_LONG),),
            ),
        ),
    ),
}


def get_schema(name: SchemaName) -> Schema:
    """Get a registered schema.

    Raises:
        KeyError: If the schema is not registered.
    """
    return SCHEMA_REGISTRY[name]


def validate(schema_name: SchemaName, raw_input: Any) -> ValidationResult:
    """Apply a registered schema to raw input.

    Args:
        schema_name: Registered schema.
        raw_input: Decoded JSON body (any type).

    Returns:
        ValidationResult: All violations plus the normalized value.

    Example:
        >>> result = validate(SchemaName.LOGIN, {"email": " A@B.io ", "password": "x"})
        >>> result.value["email"]
        'a@b.io'
    """
    return validate_against(get_schema(schema_name), raw_input)


def validate_against(schema: Schema, raw_input: Any) -> ValidationResult:
    """Apply an explicit schema to raw input (see `validate`)."""
    if not isinstance(raw_input, dict):
        return ValidationResult(
            field_errors={SCHEMA_ERROR_KEY: ["Expected a JSON object"]},
        )
    field_errors: dict[str, list[str]] = {}
    value = _validate_fields(
        schema.fields, raw_input, "", field_errors, partial=schema.partial
    )
    return ValidationResult(field_errors=field_errors, value=value)


def _validate_fields(
    rules: tuple[FieldRule, ...],
    raw: dict[str, Any],
    prefix: str,
    field_errors: dict[str, list[str]],
    *,
    partial: bool,
) -> dict[str, Any]:
    value: dict[str, Any] = {}
    for rule in rules:
        path = f"{prefix}{rule.name}"
        if rule.name not in raw:
            if rule.required and not partial:
                field_errors.setdefault(path, []).append(
                    rule.required_message or f"{rule.label} is required"
                )
            elif rule.default is not None and not partial:
                value[rule.name] = rule.default
            continue

        normalized = _validate_value(rule, raw[rule.name], path, field_errors, partial)
        if normalized is not None:
            value[rule.name] = normalized
    return value


def _validate_value(
    rule: FieldRule,
    raw: Any,
    path: str,
    field_errors: dict[str, list[str]],
    partial: bool,
) -> Any:
    if rule.type is FieldType.STRING:
        if not isinstance(raw, str):
            field_errors.setdefault(path, []).append(f"{rule.label} must be a string")
            return None
        normalized = _normalize(rule, raw)
        _run_checks(rule.checks, normalized, path, field_errors)
        return normalized

    if rule.type is FieldType.STRING_LIST:
        if not isinstance(raw, list):
            field_errors.setdefault(path, []).append(
                f"{rule.label} must be a list of strings"
            )
            return None
        items: list[str] = []
        for index, item in enumerate(raw):
            item_path = f"{path}.{index}"
            if not isinstance(item, str):
                field_errors.setdefault(item_path, []).append(
                    f"{rule.label} entries must be strings"
                )
                continue
            normalized_item = _normalize(rule, item)
            _run_checks(rule.item_checks, normalized_item, item_path, field_errors)
            items.append(normalized_item)
        _run_checks(rule.checks, items, path, field_errors)
        return items

    if not isinstance(raw, dict):
        field_errors.setdefault(path, []).append(f"{rule.label} must be an object")
        return None
    return _validate_fields(rule.fields, raw, f"{path}.", field_errors, partial=partial)


def _normalize(rule: FieldRule, raw: str) -> str:
    normalized = raw.strip() if rule.trim else raw
    return normalized.lower() if rule.lowercase else normalized


def _run_checks(
    checks: tuple[Check, ...],
    value: Any,
    path: str,
    field_errors: dict[str, list[str]],
) -> None:
    for check in checks:
        message = check(value)
        if message is not None:
            field_errors.setdefault(path, []).append(message)
