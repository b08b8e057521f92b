"""Outcome of applying a validation schema."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationResult:
    """Collected field violations plus the normalized value.

    Attributes:
        field_errors: Dot-joined field path (`skills.1`) -> messages in
            check order. Empty means the input was accepted.
        value: Normalized input (trimmed, lower-cased email, defaults
            applied, unknown keys dropped). Only meaningful when valid.
    """

    field_errors: dict[str, list[str]] = field(default_factory=dict)
    value: dict[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """True when no field reported a violation."""
        return not self.field_errors
