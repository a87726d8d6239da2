"""
Date Range - Immutable Interval with Per-Side Bound Semantics.

A DateRange is small and immutable, so the same instance can back any
number of selections without copying.

Comparisons use full precision: a datetime bound keeps its time of day.
When a plain date meets a datetime, the date is read as midnight (in the
datetime's timezone).
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Tuple, Union

from validated_primitives.core.value_object import (
    TryCreateResult,
    ValidatedValueObject,
)
from validated_primitives.validation import rules
from validated_primitives.validation.errors import ErrorCode, ValidationError
from validated_primitives.validation.result import ValidationResult

DateLike = Union[datetime, date]


def comparable(*values: date) -> Tuple[date, ...]:
    """Promote plain dates to midnight when any of values is a datetime."""
    anchor = next((v for v in values if isinstance(v, datetime)), None)
    if anchor is None:
        return values
    return tuple(
        v
        if isinstance(v, datetime)
        else datetime.combine(v, time.min, tzinfo=anchor.tzinfo)
        for v in values
    )


def awareness_mismatch(*values: Union[date, time]) -> bool:
    """True when timezone-aware and naive datetimes (or times) are mixed."""
    kinds = {v.tzinfo is None for v in values if isinstance(v, (datetime, time))}
    return len(kinds) > 1


def format_bound(value: Union[date, time]) -> str:
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    if isinstance(value, datetime):
        return value.isoformat()
    return value.strftime("%Y-%m-%d")


class DateRange(ValidatedValueObject):
    """An interval of dates with inclusive or exclusive ends."""

    start: DateLike
    end: DateLike
    start_inclusive: bool = True
    end_inclusive: bool = True

    @classmethod
    def try_create(
        cls,
        start: date,
        end: date,
        start_inclusive: bool = True,
        end_inclusive: bool = True,
        property_name: str = "DateRange",
    ) -> TryCreateResult[DateRange]:
        """
        Validate the bounds and build a range.

        Fails with InvalidRange when start is after end, and with EmptyRange
        when start equals end but either side is exclusive.

        Returns:
            (result, range) on success, (result, None) with one error otherwise
        """
        error = check_bounds(
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

    @classmethod
    def until_now(
        cls,
        start: date,
        start_inclusive: bool = True,
        end_inclusive: bool = True,
        property_name: str = "DateRange",
    ) -> TryCreateResult[DateRange]:
        """Range from start up to the current moment."""
        return cls.try_create(
            start, _now_like(start), start_inclusive, end_inclusive, property_name
        )

    @classmethod
    def from_now_until(
        cls,
        end: date,
        start_inclusive: bool = True,
        end_inclusive: bool = True,
        property_name: str = "DateRange",
    ) -> TryCreateResult[DateRange]:
        """Range from the current moment up to end."""
        return cls.try_create(
            _now_like(end), end, start_inclusive, end_inclusive, property_name
        )

    def contains(self, value: date) -> bool:
        """Check value against both bounds, honouring inclusivity."""
        if awareness_mismatch(value, self.start, self.end):
            return False

        point, start, end = comparable(value, self.start, self.end)

        lower_ok = point >= start if self.start_inclusive else point > start
        upper_ok = point <= end if self.end_inclusive else point < end
        return lower_ok and upper_ok

    def __contains__(self, value: date) -> bool:
        return self.contains(value)

    def revalidate(self) -> ValidationResult:
        return ValidationResult.from_errors(
            [
                check_bounds(
                    self.start,
                    self.end,
                    self.start_inclusive,
                    self.end_inclusive,
                    "DateRange",
                )
            ]
        )

    def describe_bounds(self) -> str:
        """Human readable bound semantics, e.g. 'inclusive start, exclusive end'."""
        lower = "inclusive" if self.start_inclusive else "exclusive"
        upper = "inclusive" if self.end_inclusive else "exclusive"
        return f"{lower} start, {upper} end"

    def __str__(self) -> str:
        lower = "[" if self.start_inclusive else "("
        upper = "]" if self.end_inclusive else ")"
        return f"{lower}{format_bound(self.start)} .. {format_bound(self.end)}{upper}"


def check_bounds(
    start: Union[date, time],
    end: Union[date, time],
    start_inclusive: bool,
    end_inclusive: bool,
    property_name: str,
) -> Optional[ValidationError]:
    """Validate range bounds; shared by DateRange and TimeRange."""
    for label, bound in (("Start", start), ("End", end)):
        missing = rules.required(
            bound, property_name, f"{label} of the range is required."
        )
        if missing is not None:
            return missing

    if awareness_mismatch(start, end):
        return ValidationError(
            property_name,
            "Start and end must both be timezone-aware or both be naive.",
            ErrorCode.INVALID_RANGE,
        )

    lower, upper = comparable(start, end)

    if lower > upper:
        return ValidationError(
            property_name,
            f"Start ({format_bound(start)}) must be less than or equal to "
            f"end ({format_bound(end)}).",
            ErrorCode.INVALID_RANGE,
        )

    if lower == upper and not (start_inclusive and end_inclusive):
        return ValidationError(
            property_name,
            f"Range starting and ending at {format_bound(start)} must include "
            "both bounds, otherwise it is empty.",
            ErrorCode.EMPTY_RANGE,
        )

    return None


def _now_like(anchor: date) -> date:
    if isinstance(anchor, datetime):
        return datetime.now(tz=anchor.tzinfo)
    return date.today()
