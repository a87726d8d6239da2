"""
Validation Rule Primitives - Small Pure Checks.

Each rule inspects one value and returns either None (pass) or a single
ValidationError. Value types assemble their own fixed, ordered pipeline of
rules; there is no rule registry.

Rules:
    - required: presence of a string or optional value
    - in_range: numeric / comparable range with per-side bound semantics
    - length: allowed lengths or a min/max window
    - matches / character_class: structural format checks
    - decimal_places: maximum scale of a Decimal
    - parse_date / parse_decimal: string interpretation (returns value + error)
"""

from __future__ import annotations

import re
import string
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Collection, Optional, Pattern, Tuple, Union

from validated_primitives.config.models import ParsingConfig
from validated_primitives.validation.errors import ErrorCode, ValidationError

LETTERS = frozenset(string.ascii_uppercase)
DIGITS = frozenset(string.digits)
ALPHANUMERIC = LETTERS | DIGITS

# Grouping characters stripped before locale-aware number parsing
_GROUPING_SPACES = (" ", "\u00a0", "\u202f", "_", "'")
_NUMBER_CHARS = re.compile(r"^[+-]?[\d.,]+$")
_COMMA_GROUPED = re.compile(r"^[+-]?\d{1,3}(,\d{3})+$")
_DOT_GROUPED = re.compile(r"^[+-]?\d{1,3}(\.\d{3})+$")

_DEFAULT_PARSING = ParsingConfig()


def required(
    value: Any,
    property_name: str,
    message: Optional[str] = None,
) -> Optional[ValidationError]:
    """Fail when value is None or a blank string."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return ValidationError(
            property_name,
            message or f"{property_name} is required.",
            ErrorCode.REQUIRED,
        )
    return None


def in_range(
    value: Any,
    minimum: Any,
    maximum: Any,
    property_name: str,
    *,
    min_inclusive: bool = True,
    max_inclusive: bool = True,
    message: Optional[str] = None,
    code: ErrorCode = ErrorCode.OUT_OF_RANGE,
) -> Optional[ValidationError]:
    """Fail when value falls outside [minimum, maximum] (or open variants)."""
    below = value < minimum if min_inclusive else value <= minimum
    above = value > maximum if max_inclusive else value >= maximum
    if not (below or above):
        return None

    if message is None:
        lower = "[" if min_inclusive else "("
        upper = "]" if max_inclusive else ")"
        message = (
            f"{property_name} must be within {lower}{minimum}, {maximum}{upper}, "
            f"got {value}."
        )
    return ValidationError(property_name, message, code)


def length(
    value: str,
    property_name: str,
    *,
    allowed: Optional[Collection[int]] = None,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
    message: Optional[str] = None,
    code: ErrorCode = ErrorCode.INVALID_LENGTH,
) -> Optional[ValidationError]:
    """Fail when len(value) is not allowed or outside [minimum, maximum]."""
    size = len(value)
    ok = True
    if allowed is not None and size not in allowed:
        ok = False
    if minimum is not None and size < minimum:
        ok = False
    if maximum is not None and size > maximum:
        ok = False
    if ok:
        return None

    if message is None:
        if allowed is not None:
            options = " or ".join(str(n) for n in sorted(allowed))
            message = f"{property_name} must be {options} characters long."
        else:
            message = (
                f"{property_name} length must be between "
                f"{minimum if minimum is not None else 0} and "
                f"{maximum if maximum is not None else 'unlimited'} characters."
            )
    return ValidationError(property_name, message, code)


def matches(
    value: str,
    pattern: Union[str, Pattern[str]],
    property_name: str,
    message: Optional[str] = None,
    code: ErrorCode = ErrorCode.INVALID_FORMAT,
) -> Optional[ValidationError]:
    """Fail when value does not fully match pattern."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    if compiled.fullmatch(value):
        return None
    return ValidationError(
        property_name,
        message or f"{property_name} has an invalid format.",
        code,
    )


def character_class(
    value: str,
    allowed: Collection[str],
    property_name: str,
    message: Optional[str] = None,
    code: ErrorCode = ErrorCode.INVALID_FORMAT,
) -> Optional[ValidationError]:
    """Fail when value is empty or holds a character outside allowed."""
    if value and all(ch in allowed for ch in value):
        return None
    return ValidationError(
        property_name,
        message or f"{property_name} contains invalid characters.",
        code,
    )


def decimal_places(
    value: Decimal,
    maximum: int,
    property_name: str,
) -> Optional[ValidationError]:
    """Fail when value carries more than maximum digits after the point."""
    exponent = value.normalize().as_tuple().exponent
    places = -exponent if isinstance(exponent, int) and exponent < 0 else 0
    if places <= maximum:
        return None
    return ValidationError(
        property_name,
        f"{property_name} cannot have more than {maximum} decimal places.",
        ErrorCode.DECIMAL_PLACES,
    )


# =============================================================================
# Parse rules
# =============================================================================


def parse_date(
    text: Optional[str],
    property_name: str,
    parsing: Optional[ParsingConfig] = None,
) -> Tuple[Optional[date], Optional[ValidationError]]:
    """
    Interpret text as a date or datetime.

    ISO 8601 is tried first; then the regional formats of the parsing
    config (day-first / month-first order per config), first date-only and
    then with a time-of-day suffix. Date-only input yields a date, input
    with a time component yields a datetime.

    Returns:
        (parsed value, None) on success, (None, error) otherwise
    """
    parsing = parsing or _DEFAULT_PARSING
    candidate = text.strip() if isinstance(text, str) else ""

    if candidate:
        parsed = _parse_iso_date(candidate)
        if parsed is not None:
            return parsed, None

        for pattern in parsing.date_formats:
            try:
                return datetime.strptime(candidate, pattern).date(), None
            except ValueError:
                continue

        for pattern in parsing.datetime_formats:
            try:
                return datetime.strptime(candidate, pattern), None
            except ValueError:
                continue

    return None, ValidationError(
        property_name,
        f"'{text}' is not a recognised date.",
        ErrorCode.INVALID_DATE_STRING,
    )


def _parse_iso_date(candidate: str) -> Optional[date]:
    try:
        return date.fromisoformat(candidate)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(candidate)
    except ValueError:
        return None


def parse_decimal(
    text: Optional[str],
    property_name: str,
    parsing: Optional[ParsingConfig] = None,
) -> Tuple[Optional[Decimal], Optional[ValidationError]]:
    """
    Interpret text as a finite Decimal.

    The invariant form ("1234.5", "-3", "1e3") is tried first. The
    locale-aware fallback strips grouping spaces and accepts "1,234.50",
    "1.234,50" and, when decimal_comma is enabled, "12,5".

    Returns:
        (parsed value, None) on success, (None, error) otherwise
    """
    parsing = parsing or _DEFAULT_PARSING
    candidate = text.strip() if isinstance(text, str) else ""

    if candidate:
        value = _to_finite_decimal(candidate)
        if value is None:
            normalized = _normalize_separators(candidate, parsing.decimal_comma)
            if normalized is not None:
                value = _to_finite_decimal(normalized)
        if value is not None:
            return value, None

    return None, ValidationError(
        property_name,
        f"'{text}' is not a recognised number.",
        ErrorCode.INVALID_NUMBER_STRING,
    )


def _to_finite_decimal(candidate: str) -> Optional[Decimal]:
    try:
        value = Decimal(candidate)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def _normalize_separators(candidate: str, decimal_comma: bool) -> Optional[str]:
    """Rewrite a regional number into invariant form, or None if ambiguous."""
    for space in _GROUPING_SPACES:
        candidate = candidate.replace(space, "")

    if not _NUMBER_CHARS.match(candidate):
        return None

    has_comma = "," in candidate
    has_dot = "." in candidate

    if has_comma and has_dot:
        if candidate.rfind(",") > candidate.rfind("."):
            return candidate.replace(".", "").replace(",", ".")
        return candidate.replace(",", "")

    if has_comma:
        if decimal_comma and candidate.count(",") == 1:
            return candidate.replace(",", ".")
        if _COMMA_GROUPED.match(candidate):
            return candidate.replace(",", "")
        return None

    if has_dot and _DOT_GROUPED.match(candidate):
        return candidate.replace(".", "")

    return candidate
