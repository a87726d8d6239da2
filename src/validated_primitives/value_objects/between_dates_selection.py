"""
Between Dates Selection - A Date Validated Against a DateRange.

Pipeline (each stage gates the next, so at most one error is reported):
    1. Parse the value when it is a string        -> InvalidDateString
    2. Use the given range or build one            -> InvalidRange / EmptyRange
    3. Check the value lies within the range       -> Between

Comparison is exact. A datetime value keeps its time of day, so callers who
want date-only semantics must pass dates.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from validated_primitives.config.models import ParsingConfig
from validated_primitives.core.value_object import (
    TryCreateResult,
    ValidatedValueObject,
)
from validated_primitives.date_ranges.date_range import (
    DateLike,
    DateRange,
    awareness_mismatch,
    format_bound,
)
from validated_primitives.validation import rules
from validated_primitives.validation.errors import ErrorCode, ValidationError
from validated_primitives.validation.result import ValidationResult


class BetweenDatesSelection(ValidatedValueObject):
    """A date that lies within a (shared) DateRange."""

    value: DateLike
    range: DateRange

    @classmethod
    def try_create(
        cls,
        value: Union[date, str],
        range_or_start: Union[DateRange, date],
        end: Optional[date] = None,
        inclusive: bool = True,
        property_name: str = "BetweenDatesSelection",
        *,
        parsing: Optional[ParsingConfig] = None,
    ) -> TryCreateResult[BetweenDatesSelection]:
        """
        Validate value against a range.

        Accepted shapes:
            try_create(value, date_range)
            try_create(value, start, end, inclusive=True)

        value may be a date/datetime or a string; strings are parsed with
        the parse_date rule. With start/end a transient DateRange is built
        whose both bounds are inclusive iff inclusive is True.

        Args:
            value: The selected date, or its string form
            range_or_start: An existing DateRange, or the range start
            end: Range end (only with a start date)
            inclusive: Bound semantics of the transient range
            property_name: Label attached to errors
            parsing: Date parsing settings (defaults when None)

        Returns:
            (result, selection) on success, (result, None) with one error otherwise
        """
        # Stage 1: parse
        if isinstance(value, date):
            point: date = value
        else:
            parsed, parse_error = rules.parse_date(value, property_name, parsing)
            if parse_error is not None:
                return cls._reject(ValidationResult(errors=[parse_error]))
            point = parsed

        # Stage 2: range
        if isinstance(range_or_start, DateRange):
            date_range = range_or_start
        else:
            range_result, built = DateRange.try_create(
                range_or_start,
                end,
                start_inclusive=inclusive,
                end_inclusive=inclusive,
                property_name=property_name,
            )
            if built is None:
                return cls._reject(range_result)
            date_range = built

        # Stage 3: containment
        error = _check_between(point, date_range, property_name)
        if error is not None:
            return cls._reject(ValidationResult(errors=[error]))

        return cls._accept(ValidationResult.success(), value=point, range=date_range)

    def revalidate(self) -> ValidationResult:
        return ValidationResult.from_errors(
            [_check_between(self.value, self.range, "BetweenDatesSelection")]
        )

    def __str__(self) -> str:
        return format_bound(self.value)


def _check_between(
    value: date,
    date_range: DateRange,
    property_name: str,
) -> Optional[ValidationError]:
    if date_range.contains(value):
        return None

    if awareness_mismatch(value, date_range.start, date_range.end):
        message = (
            f"{property_name} {format_bound(value)} cannot be compared with "
            f"{date_range}: mixing timezone-aware and naive datetimes."
        )
    elif date_range.start_inclusive and date_range.end_inclusive:
        message = (
            f"{property_name} {format_bound(value)} must be between "
            f"{format_bound(date_range.start)} and {format_bound(date_range.end)} "
            f"({date_range.describe_bounds()})."
        )
    else:
        message = (
            f"{property_name} {format_bound(value)} must be within the range "
            f"{date_range} ({date_range.describe_bounds()})."
        )
    return ValidationError(property_name, message, ErrorCode.BETWEEN)
