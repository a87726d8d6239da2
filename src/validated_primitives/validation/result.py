"""
Validation Result - Ordered Accumulation of Validation Errors.

A ValidationResult is created fresh for every construction attempt. It is
appended to only while that attempt runs and is treated as read-only once it
is handed back to the caller.

Two composition modes are supported:
    - Short-circuit: return the first failing result as-is
    - Accumulate: merge() several results so the caller sees every failure
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from validated_primitives.validation.errors import ErrorCode, ValidationError


@dataclass
class ValidationResult:
    """Result of a validation pass."""

    errors: List[ValidationError] = field(default_factory=list)

    @classmethod
    def success(cls) -> ValidationResult:
        """Create an empty (valid) result."""
        return cls()

    @classmethod
    def failure(
        cls,
        message: str,
        property_name: str,
        code: ErrorCode,
    ) -> ValidationResult:
        """Create a result holding exactly one error."""
        result = cls()
        result.add_error(property_name, message, code)
        return result

    @classmethod
    def from_errors(
        cls, errors: Iterable[Optional[ValidationError]]
    ) -> ValidationResult:
        """Collect the non-empty outcomes of several rule checks."""
        return cls(errors=[error for error in errors if error is not None])

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, property_name: str, message: str, code: ErrorCode) -> None:
        """Append an error during the construction pass."""
        self.errors.append(ValidationError(property_name, message, code))

    def add(self, error: Optional[ValidationError]) -> None:
        """Append the outcome of a single rule, ignoring passes."""
        if error is not None:
            self.errors.append(error)

    def merge(self, other: Optional[ValidationResult]) -> ValidationResult:
        """Return a new result with this result's errors followed by other's."""
        if other is None:
            return ValidationResult(errors=list(self.errors))
        return ValidationResult(errors=[*self.errors, *other.errors])

    @property
    def codes(self) -> List[ErrorCode]:
        """Error codes in the order they were reported."""
        return [error.code for error in self.errors]

    def to_bullet_list(self) -> str:
        """Render one '- property: message' line per error."""
        return "\n".join(
            f"- {error.property_name}: {error.message}" for error in self.errors
        )

    def to_single_message(self, separator: str = "; ") -> str:
        """Render all errors on a single line."""
        return separator.join(str(error) for error in self.errors)

    def to_dictionary(self) -> Dict[str, List[str]]:
        """Group error messages by property name."""
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.property_name, []).append(error.message)
        return grouped
