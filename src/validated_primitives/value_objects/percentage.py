"""
Percentage - A Value Between 0 and 100 With Limited Precision.

Unlike the single-scalar types, the range and precision rules are both
reported when both fail (accumulate mode).
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from pydantic import Field

from validated_primitives.config.models import ParsingConfig
from validated_primitives.core.value_object import (
    TryCreateResult,
    ValidatedValueObject,
)
from validated_primitives.validation import rules
from validated_primitives.validation.errors import ErrorCode
from validated_primitives.validation.result import ValidationResult

MIN_PERCENTAGE = Decimal(0)
MAX_PERCENTAGE = Decimal(100)
MAX_DECIMAL_PLACES = 3

Number = Union[Decimal, int, float, str]


class Percentage(ValidatedValueObject):
    """A validated percentage such as 12.5%."""

    value: Decimal
    decimal_places: int = Field(default=0, ge=0, le=MAX_DECIMAL_PLACES)

    @classmethod
    def try_create(
        cls,
        value: Optional[Number],
        decimal_places: int = 0,
        property_name: str = "Percentage",
        *,
        parsing: Optional[ParsingConfig] = None,
    ) -> TryCreateResult[Percentage]:
        """
        Validate a percentage.

        Args:
            value: Number or numeric string ("12.5", "12,5")
            decimal_places: Allowed precision, 0 to 3
            property_name: Label attached to errors
            parsing: Number parsing settings (defaults when None)

        Returns:
            (result, percentage) on success, (result, None) otherwise
        """
        if not 0 <= decimal_places <= MAX_DECIMAL_PLACES:
            return cls._reject(
                ValidationResult.failure(
                    f"Decimal places must be between 0 and {MAX_DECIMAL_PLACES}.",
                    property_name,
                    ErrorCode.INVALID_DECIMAL_PLACES,
                )
            )

        missing = rules.required(value, property_name)
        if missing is not None:
            return cls._reject(ValidationResult(errors=[missing]))

        if isinstance(value, str):
            number, parse_error = rules.parse_decimal(value, property_name, parsing)
            if parse_error is not None:
                return cls._reject(ValidationResult(errors=[parse_error]))
        else:
            number = _to_decimal(value)
            if number is None:
                return cls._reject(
                    ValidationResult.failure(
                        f"{property_name} must be a number, got {type(value).__name__}.",
                        property_name,
                        ErrorCode.INVALID_FORMAT,
                    )
                )

        result = _check(number, decimal_places, property_name)
        if not result.is_valid:
            return cls._reject(result)

        return cls._accept(result, value=number, decimal_places=decimal_places)

    def to_fraction(self) -> Decimal:
        """50% -> 0.5"""
        return self.value / 100

    def of(self, base: Union[Decimal, int]) -> Decimal:
        """Apply this percentage to base."""
        return Decimal(base) * self.to_fraction()

    def revalidate(self) -> ValidationResult:
        return _check(self.value, self.decimal_places, "Percentage")

    def __str__(self) -> str:
        return f"{self.value:.{self.decimal_places}f}%"


def _to_decimal(value: Any) -> Optional[Decimal]:
    try:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None


def _check(value: Decimal, decimal_places: int, property_name: str) -> ValidationResult:
    # NaN and infinities do not compare, so they never reach the range rule
    if not value.is_finite():
        return ValidationResult.failure(
            f"{property_name} must be a finite number, got {value}.",
            property_name,
            ErrorCode.OUT_OF_RANGE,
        )
    return ValidationResult.from_errors(
        [
            rules.in_range(
                value,
                MIN_PERCENTAGE,
                MAX_PERCENTAGE,
                property_name,
                message=(
                    f"{property_name} must be between {MIN_PERCENTAGE}% and "
                    f"{MAX_PERCENTAGE}%, got {value}%."
                ),
            ),
            rules.decimal_places(value, decimal_places, property_name),
        ]
    )
