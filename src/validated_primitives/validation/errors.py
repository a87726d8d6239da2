"""
Validation Errors - Error Codes, Error Records and Exceptions.

Every failed rule produces one ValidationError carrying a stable code from
ErrorCode. Codes are plain strings on the wire (ErrorCode is a str Enum), so
callers can compare against either the member or its value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from validated_primitives.validation.result import ValidationResult


class ErrorCode(str, Enum):
    """Stable identifiers for validation failures."""

    # Generic rule primitives
    REQUIRED = "Required"
    INVALID_FORMAT = "InvalidFormat"
    INVALID_LENGTH = "InvalidLength"
    OUT_OF_RANGE = "OutOfRange"
    INVALID_DATE_STRING = "InvalidDateString"
    INVALID_NUMBER_STRING = "InvalidNumberString"

    # Ranges
    INVALID_RANGE = "InvalidRange"
    EMPTY_RANGE = "EmptyRange"
    BETWEEN = "Between"

    # SWIFT / BIC
    INVALID_INSTITUTION_CODE = "InvalidInstitutionCode"
    INVALID_COUNTRY_CODE = "InvalidCountryCode"
    INVALID_LOCATION_CODE = "InvalidLocationCode"
    INVALID_BRANCH_CODE = "InvalidBranchCode"
    TEST_CODE_NOT_ALLOWED = "TestCodeNotAllowed"

    # Dates relative to today
    FROM_TODAY_FORWARD = "FromTodayForward"
    BEFORE_TODAY = "BeforeToday"

    # Percentages
    DECIMAL_PLACES = "DecimalPlaces"
    INVALID_DECIMAL_PLACES = "InvalidDecimalPlaces"

    # Card expiration
    INVALID_MONTH = "InvalidMonth"
    INVALID_YEAR = "InvalidYear"
    EXPIRED = "Expired"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationError:
    """A single validation failure attributed to a property."""

    property_name: str
    message: str
    code: ErrorCode

    def __str__(self) -> str:
        if not self.property_name:
            return self.message
        return f"{self.property_name}: {self.message}"


class ValueObjectValidationError(ValueError):
    """Raised when a value object is constructed from invalid input."""

    def __init__(
        self,
        value_object_type: type,
        validation_result: ValidationResult,
        message: Optional[str] = None,
    ) -> None:
        self.value_object_type = value_object_type
        self.validation_result = validation_result
        super().__init__(
            message
            or f"Invalid {value_object_type.__name__}: "
            f"{validation_result.to_single_message()}"
        )
