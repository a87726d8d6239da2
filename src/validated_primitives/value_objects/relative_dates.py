"""
Relative Dates - Dates Validated Against Today.

    - FutureDate: today or later
    - DateOfBirth: strictly before today

Only the calendar day is compared; a datetime's time of day is ignored.
Both accept strings, parsed with the parse_date rule.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from validated_primitives.config.models import ParsingConfig
from validated_primitives.core.value_object import (
    TryCreateResult,
    ValidatedValueObject,
)
from validated_primitives.date_ranges.date_range import DateLike, format_bound
from validated_primitives.validation import rules
from validated_primitives.validation.errors import ErrorCode, ValidationError
from validated_primitives.validation.result import ValidationResult


def _calendar_day(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def _resolve(
    value: Union[date, str, None],
    property_name: str,
    parsing: Optional[ParsingConfig],
) -> Union[ValidationResult, date]:
    if isinstance(value, date):
        return value
    parsed, error = rules.parse_date(value, property_name, parsing)
    if error is not None:
        return ValidationResult(errors=[error])
    return parsed


class FutureDate(ValidatedValueObject):
    """A date that is today or in the future."""

    value: DateLike

    @classmethod
    def try_create(
        cls,
        value: Union[date, str],
        property_name: str = "FutureDate",
        *,
        today: Optional[date] = None,
        parsing: Optional[ParsingConfig] = None,
    ) -> TryCreateResult[FutureDate]:
        resolved = _resolve(value, property_name, parsing)
        if isinstance(resolved, ValidationResult):
            return cls._reject(resolved)

        error = _from_today_forward(resolved, today or date.today(), property_name)
        if error is not None:
            return cls._reject(ValidationResult(errors=[error]))
        return cls._accept(ValidationResult.success(), value=resolved)

    def revalidate(self) -> ValidationResult:
        return ValidationResult.from_errors(
            [_from_today_forward(self.value, date.today(), "FutureDate")]
        )

    def __str__(self) -> str:
        return format_bound(self.value)


class DateOfBirth(ValidatedValueObject):
    """A date strictly before today."""

    value: DateLike

    @classmethod
    def try_create(
        cls,
        value: Union[date, str],
        property_name: str = "DateOfBirth",
        *,
        today: Optional[date] = None,
        parsing: Optional[ParsingConfig] = None,
    ) -> TryCreateResult[DateOfBirth]:
        resolved = _resolve(value, property_name, parsing)
        if isinstance(resolved, ValidationResult):
            return cls._reject(resolved)

        error = _before_today(resolved, today or date.today(), property_name)
        if error is not None:
            return cls._reject(ValidationResult(errors=[error]))
        return cls._accept(ValidationResult.success(), value=resolved)

    def age(self, on: Optional[date] = None) -> int:
        """Completed years on the given day (today by default)."""
        on = on or date.today()
        born = _calendar_day(self.value)
        return on.year - born.year - ((on.month, on.day) < (born.month, born.day))

    def revalidate(self) -> ValidationResult:
        return ValidationResult.from_errors(
            [_before_today(self.value, date.today(), "DateOfBirth")]
        )

    def __str__(self) -> str:
        return format_bound(self.value)


def _from_today_forward(
    value: date, today: date, property_name: str
) -> Optional[ValidationError]:
    if _calendar_day(value) >= today:
        return None
    return ValidationError(
        property_name,
        f"{property_name} must be today or in the future.",
        ErrorCode.FROM_TODAY_FORWARD,
    )


def _before_today(
    value: date, today: date, property_name: str
) -> Optional[ValidationError]:
    if _calendar_day(value) < today:
        return None
    return ValidationError(
        property_name,
        f"{property_name} must be before today.",
        ErrorCode.BEFORE_TODAY,
    )
