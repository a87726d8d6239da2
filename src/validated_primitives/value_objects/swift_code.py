"""
SWIFT Code - ISO 9362 Business Identifier Code (BIC).

Format AAAABBCCXXX:
    - AAAA: institution code (letters)
    - BB:   country code (letters, ISO 3166-1 alpha-2)
    - CC:   location code (letters or digits); '0' as second char marks a test BIC
    - XXX:  branch code (letters or digits, optional); 'XXX' is the primary office

8-character codes (BIC8) carry an implicit 'XXX' branch. Two codes are equal
when their 11-character full forms are equal, so DEUTDEFF == DEUTDEFFXXX
but DEUTDEFF != DEUTDEFF500.

Examples:
    >>> result, code = SwiftCode.try_create("deutdeff")
    >>> code.institution_code, code.branch_code
    ('DEUT', 'XXX')
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import model_serializer, model_validator

from validated_primitives.core.value_object import (
    TryCreateResult,
    ValidatedValueObject,
)
from validated_primitives.validation import rules
from validated_primitives.validation.errors import ErrorCode, ValidationError
from validated_primitives.validation.result import ValidationResult
from validated_primitives.value_objects.country_codes import is_country_code

BIC8_LENGTH = 8
BIC11_LENGTH = 11
PRIMARY_OFFICE_BRANCH = "XXX"


class SwiftCode(ValidatedValueObject):
    """
    A validated SWIFT/BIC code, stored normalized (trimmed, uppercase).

    allow_test_codes is an admission policy of try_create, not part of the
    value: a test BIC that was once admitted round-trips through
    model_dump_json / model_validate_json like any other code.
    """

    value: str

    @classmethod
    def try_create(
        cls,
        value: Optional[str],
        allow_test_codes: bool = False,
        property_name: str = "SwiftCode",
    ) -> TryCreateResult[SwiftCode]:
        """
        Validate and decompose a SWIFT code.

        Checks run in order and stop at the first failure: presence, length,
        institution, country, location, branch, test-code policy.

        Args:
            value: Raw code (8 or 11 characters, any case, may be padded)
            allow_test_codes: Accept test BICs (location code 'X0')
            property_name: Label attached to errors

        Returns:
            (result, code) on success, (result, None) with one error otherwise
        """
        error, normalized = _validate(value, allow_test_codes, property_name)
        if error is not None:
            return cls._reject(ValidationResult(errors=[error]))

        return cls._accept(ValidationResult.success(), value=normalized)

    # -------------------------------------------------------------------------
    # Derived components
    # -------------------------------------------------------------------------

    @property
    def institution_code(self) -> str:
        return self.value[0:4]

    @property
    def bank_code(self) -> str:
        """Alias for institution_code."""
        return self.institution_code

    @property
    def country_code(self) -> str:
        return self.value[4:6]

    @property
    def location_code(self) -> str:
        return self.value[6:8]

    @property
    def branch_code(self) -> str:
        """Explicit branch for BIC11, 'XXX' (primary office) for BIC8."""
        if len(self.value) == BIC11_LENGTH:
            return self.value[8:11]
        return PRIMARY_OFFICE_BRANCH

    @property
    def is_primary_office(self) -> bool:
        return self.branch_code == PRIMARY_OFFICE_BRANCH

    @property
    def is_test_code(self) -> bool:
        return self.location_code[1] == "0"

    @property
    def is_bic8(self) -> bool:
        return len(self.value) == BIC8_LENGTH

    @property
    def is_bic11(self) -> bool:
        return len(self.value) == BIC11_LENGTH

    def to_normalized_string(self) -> str:
        return self.value

    def to_full_format(self) -> str:
        """The 11-character form, appending 'XXX' to a BIC8."""
        return self.value if self.is_bic11 else self.value + PRIMARY_OFFICE_BRANCH

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SwiftCode):
            return NotImplemented
        return self.to_full_format() == other.to_full_format()

    def __hash__(self) -> int:
        return hash(self.to_full_format())

    def __str__(self) -> str:
        return self.value

    @model_serializer
    def serialize(self) -> str:
        return self.value

    @model_validator(mode="before")
    @classmethod
    def normalize_input(cls, data: Any) -> Any:
        if isinstance(data, str):
            data = {"value": data}
        if isinstance(data, dict) and isinstance(data.get("value"), str):
            data = {**data, "value": _normalize(data["value"])}
        return data

    def revalidate(self) -> ValidationResult:
        # The test-code policy is applied on admission only, so serialized
        # test BICs can be read back
        error, _ = _validate(self.value, True, "SwiftCode")
        return ValidationResult.from_errors([error])


def _normalize(value: str) -> str:
    # Only ASCII is folded; str.upper() can lengthen other characters
    stripped = value.strip()
    return stripped.upper() if stripped.isascii() else stripped


def _validate(
    value: Optional[str],
    allow_test_codes: bool,
    property_name: str,
) -> Tuple[Optional[ValidationError], str]:
    """Run the ordered rule pipeline; returns (first error, normalized code)."""
    error = rules.required(value, property_name, "SWIFT code must be provided.")
    if error is not None:
        return error, ""

    if not isinstance(value, str):
        return (
            ValidationError(
                property_name,
                f"SWIFT code must be a string, got {type(value).__name__}.",
                ErrorCode.INVALID_FORMAT,
            ),
            "",
        )

    normalized = _normalize(value)

    if not normalized.isascii():
        return (
            ValidationError(
                property_name,
                "SWIFT code must contain only ASCII letters and digits.",
                ErrorCode.INVALID_FORMAT,
            ),
            normalized,
        )

    error = rules.length(
        normalized,
        property_name,
        allowed=(BIC8_LENGTH, BIC11_LENGTH),
        message=(
            "SWIFT code must be either 8 characters (BIC8) or "
            "11 characters (BIC11) according to ISO 9362."
        ),
    )
    if error is not None:
        return error, normalized

    error = rules.character_class(
        normalized[0:4],
        rules.LETTERS,
        property_name,
        "SWIFT institution code (characters 1-4) must be letters A-Z.",
        ErrorCode.INVALID_INSTITUTION_CODE,
    )
    if error is not None:
        return error, normalized

    error = _check_country(normalized[4:6], property_name)
    if error is not None:
        return error, normalized

    error = rules.character_class(
        normalized[6:8],
        rules.ALPHANUMERIC,
        property_name,
        "SWIFT location code (characters 7-8) must be letters or digits.",
        ErrorCode.INVALID_LOCATION_CODE,
    )
    if error is not None:
        return error, normalized

    if len(normalized) == BIC11_LENGTH:
        error = rules.character_class(
            normalized[8:11],
            rules.ALPHANUMERIC,
            property_name,
            "SWIFT branch code (characters 9-11) must be letters or digits.",
            ErrorCode.INVALID_BRANCH_CODE,
        )
        if error is not None:
            return error, normalized

    # Test BICs carry '0' as the second location character
    if normalized[7] == "0" and not allow_test_codes:
        return (
            ValidationError(
                property_name,
                "SWIFT code is a test code (location code second character "
                "is '0'); test codes are not allowed.",
                ErrorCode.TEST_CODE_NOT_ALLOWED,
            ),
            normalized,
        )

    return None, normalized


def _check_country(country: str, property_name: str) -> Optional[ValidationError]:
    if rules.character_class(country, rules.LETTERS, property_name) is None and (
        is_country_code(country)
    ):
        return None
    return ValidationError(
        property_name,
        f"SWIFT country code '{country}' (characters 5-6) is not a recognised "
        "ISO 3166-1 alpha-2 code.",
        ErrorCode.INVALID_COUNTRY_CODE,
    )
