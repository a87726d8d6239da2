"""
Core - Construction Protocol Shared by All Value Types.
"""

from validated_primitives.core.value_object import (
    SupportsTryCreate,
    TryCreateResult,
    ValidatedValueObject,
)

__all__ = ["SupportsTryCreate", "TryCreateResult", "ValidatedValueObject"]
