"""
Validation Package - Results, Errors and Rule Primitives.

This package provides the building blocks every value type uses:
    - ValidationResult: ordered collection of failures (short-circuit or merge)
    - ValidationError / ErrorCode: one failure and its stable code
    - ValueObjectValidationError: raised by the raising factories only
    - rules: small pure checks returning an optional ValidationError

Design Principles:
    - Failures are data; try_create never raises
    - Clear, actionable error messages
    - Each value type hardcodes its own rule pipeline
"""

from validated_primitives.validation.errors import (
    ErrorCode,
    ValidationError,
    ValueObjectValidationError,
)
from validated_primitives.validation.result import ValidationResult

__all__ = [
    "ErrorCode",
    "ValidationError",
    "ValueObjectValidationError",
    "ValidationResult",
]
