"""
Value Objects - Immutable, Always-Valid Domain Primitives.

Value Objects:
    - BetweenDatesSelection: A date inside a DateRange
    - SwiftCode: ISO 9362 BIC, decomposed into its components
    - Percentage: 0-100 with limited decimal places
    - FutureDate / DateOfBirth: dates relative to today
    - CreditCardExpiration: month/year not yet passed

Every type exposes try_create() (returns the ValidationResult and the
instance or None) and create() (raises ValueObjectValidationError).
"""

from validated_primitives.value_objects.between_dates_selection import (
    BetweenDatesSelection,
)
from validated_primitives.value_objects.credit_card_expiration import (
    CreditCardExpiration,
)
from validated_primitives.value_objects.percentage import Percentage
from validated_primitives.value_objects.relative_dates import DateOfBirth, FutureDate
from validated_primitives.value_objects.swift_code import SwiftCode

__all__ = [
    "BetweenDatesSelection",
    "CreditCardExpiration",
    "DateOfBirth",
    "FutureDate",
    "Percentage",
    "SwiftCode",
]
