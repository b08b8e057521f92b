"""Input validation: check functions and the schema registry.

Usage:
    from gatekeeper.domain.validators import SchemaName, validate
"""

from gatekeeper.domain.validators.registry import (
    SCHEMA_ERROR_KEY,
    SCHEMA_REGISTRY,
    FieldRule,
    FieldType,
    Schema,
    SchemaName,
    get_schema,
    validate,
    validate_against,
)

__all__ = [
    "SCHEMA_ERROR_KEY",
    "SCHEMA_REGISTRY",
    "FieldRule",
    "FieldType",
    "Schema",
    "SchemaName",
    "get_schema",
    "validate",
    "validate_against",
]
