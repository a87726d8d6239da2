"""
Validated Primitives - Self-Validating Value Types.

A library of immutable value objects that are guaranteed valid once
constructed: dates within a range, SWIFT/BIC codes, percentages, card
expirations. Raw input (typed values or strings) runs through a fixed,
ordered set of rules and yields either an instance or a structured
ValidationResult describing every failure.

Main Components:
    - validation: ValidationResult, ValidationError, ErrorCode, rule primitives
    - core: the shared try_create / create construction protocol
    - date_ranges: DateRange and TimeRange with inclusive/exclusive bounds
    - value_objects: BetweenDatesSelection, SwiftCode, Percentage, ...
    - config: Pydantic config models and YAML loader

Example:
    >>> from validated_primitives import SwiftCode
    >>> result, code = SwiftCode.try_create("DEUTDEFF500")
    >>> result.is_valid, code.branch_code
    (True, '500')
"""

import logging
from typing import Optional

from validated_primitives.config import LoggingConfig, ParsingConfig, PrimitivesConfig
from validated_primitives.date_ranges import DateRange, TimeRange
from validated_primitives.validation import (
    ErrorCode,
    ValidationError,
    ValidationResult,
    ValueObjectValidationError,
)
from validated_primitives.value_objects import (
    BetweenDatesSelection,
    CreditCardExpiration,
    DateOfBirth,
    FutureDate,
    Percentage,
    SwiftCode,
)

__version__ = "0.1.0"

__all__ = [
    "BetweenDatesSelection",
    "CreditCardExpiration",
    "DateOfBirth",
    "DateRange",
    "ErrorCode",
    "FutureDate",
    "LoggingConfig",
    "ParsingConfig",
    "Percentage",
    "PrimitivesConfig",
    "SwiftCode",
    "TimeRange",
    "ValidationError",
    "ValidationResult",
    "ValueObjectValidationError",
    "configure_logging",
]


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    config: Optional[LoggingConfig] = None,
) -> None:
    """
    Configure logging for Validated Primitives.

    Call this at application startup to see log messages. Successful and
    rejected constructions are logged at DEBUG level.

    Args:
        level: Logging level (default: INFO)
        format: Log message format
        config: LoggingConfig whose level and format override the arguments

    Example:
        >>> import validated_primitives
        >>> validated_primitives.configure_logging(logging.DEBUG)
    """
    if config is not None:
        level = config.level_number
        format = config.format

    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Set our package's logger
    logging.getLogger("validated_primitives").setLevel(level)
