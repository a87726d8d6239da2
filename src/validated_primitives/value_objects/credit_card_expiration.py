"""
Credit Card Expiration - Month/Year Pair That Has Not Yet Passed.

Two-digit years are read as 20YY. Month, year and expiry failures are all
reported together.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from validated_primitives.core.value_object import (
    TryCreateResult,
    ValidatedValueObject,
)
from validated_primitives.validation import rules
from validated_primitives.validation.errors import ErrorCode, ValidationError
from validated_primitives.validation.result import ValidationResult


def normalize_year(year: int) -> int:
    """25 -> 2025; four-digit and negative years are kept."""
    return year + 2000 if 0 <= year < 100 else year


class CreditCardExpiration(ValidatedValueObject):
    """Card expiration month and (four-digit) year."""

    month: int
    year: int

    @classmethod
    def try_create(
        cls,
        month: int,
        year: int,
        property_name: str = "Expiration",
        *,
        today: Optional[date] = None,
    ) -> TryCreateResult[CreditCardExpiration]:
        year = normalize_year(year)
        result = _check(month, year, today or date.today(), property_name)
        if not result.is_valid:
            return cls._reject(result)
        return cls._accept(result, month=month, year=year)

    def revalidate(self) -> ValidationResult:
        return _check(self.month, self.year, date.today(), "Expiration")

    def __str__(self) -> str:
        return f"{self.month:02d}/{self.year % 100:02d}"


def _check(month: int, year: int, today: date, property_name: str) -> ValidationResult:
    result = ValidationResult.success()
    result.add(
        rules.in_range(
            month,
            1,
            12,
            property_name,
            message="Month must be between 1 and 12.",
            code=ErrorCode.INVALID_MONTH,
        )
    )
    if year < 0:
        result.add_error(
            property_name, "Year must be a positive number.", ErrorCode.INVALID_YEAR
        )
    if result.is_valid:
        result.add(_not_expired(month, year, today, property_name))
    return result


def _not_expired(
    month: int, year: int, today: date, property_name: str
) -> Optional[ValidationError]:
    # Valid through the last day of the expiration month
    if (year, month) >= (today.year, today.month):
        return None
    return ValidationError(
        property_name,
        "Expiration date must be in the future or current month.",
        ErrorCode.EXPIRED,
    )
