"""
Time Range - Interval of Times of Day.

Same bound rules as DateRange (InvalidRange, EmptyRange, Required) applied
to datetime.time values, e.g. opening hours. The range never wraps past
midnight: 22:00 .. 06:00 is rejected as start after end.
"""

from __future__ import annotations

from datetime import time
from typing import Optional

from validated_primitives.core.value_object import (
    TryCreateResult,
    ValidatedValueObject,
)
from validated_primitives.date_ranges.date_range import (
    awareness_mismatch,
    check_bounds,
    format_bound,
)
from validated_primitives.validation.errors import ErrorCode, ValidationError
from validated_primitives.validation.result import ValidationResult


class TimeRange(ValidatedValueObject):
    """An interval of times of day with inclusive or exclusive ends."""

    start: time
    end: time
    start_inclusive: bool = True
    end_inclusive: bool = True

    @classmethod
    def try_create(
        cls,
        start: time,
        end: time,
        start_inclusive: bool = True,
        end_inclusive: bool = True,
        property_name: str = "TimeRange",
    ) -> TryCreateResult[TimeRange]:
        error = _check_time_bounds(
            start, end, start_inclusive, end_inclusive, property_name
        )
        if error is not None:
            return cls._reject(ValidationResult(errors=[error]))

        return cls._accept(
            ValidationResult.success(),
            start=start,
            end=end,
            start_inclusive=start_inclusive,
            end_inclusive=end_inclusive,
        )

    def contains(self, value: time) -> bool:
        if awareness_mismatch(value, self.start, self.end):
            return False
        lower_ok = value >= self.start if self.start_inclusive else value > self.start
        upper_ok = value <= self.end if self.end_inclusive else value < self.end
        return lower_ok and upper_ok

    def __contains__(self, value: time) -> bool:
        return self.contains(value)

    def revalidate(self) -> ValidationResult:
        return ValidationResult.from_errors(
            [
                _check_time_bounds(
                    self.start,
                    self.end,
                    self.start_inclusive,
                    self.end_inclusive,
                    "TimeRange",
                )
            ]
        )

    def __str__(self) -> str:
        lower = "[" if self.start_inclusive else "("
        upper = "]" if self.end_inclusive else ")"
        return f"{lower}{format_bound(self.start)} .. {format_bound(self.end)}{upper}"


def _check_time_bounds(
    start: time,
    end: time,
    start_inclusive: bool,
    end_inclusive: bool,
    property_name: str,
) -> Optional[ValidationError]:
    for label, bound in (("Start", start), ("End", end)):
        if bound is not None and not isinstance(bound, time):
            return ValidationError(
                property_name,
                f"{label} of the range must be a time of day, "
                f"got {type(bound).__name__}.",
                ErrorCode.INVALID_FORMAT,
            )
    return check_bounds(start, end, start_inclusive, end_inclusive, property_name)
