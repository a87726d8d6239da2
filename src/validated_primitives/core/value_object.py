"""
Construction Protocol - Shared try_create / create Contract.

Every value type exposes:
    - try_create(...) -> (ValidationResult, instance or None), never raises
    - create(...) -> instance, raises ValueObjectValidationError

Instances built by try_create have already passed their rule pipeline and
are materialized with model_construct(). Any other construction path
(direct __init__, model_validate, model_validate_json) re-runs the same
pipeline through a model validator, so an invalid instance cannot exist.
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    Optional,
    Protocol,
    Tuple,
    Type,
    TypeVar,
    runtime_checkable,
)

from pydantic import BaseModel, model_validator

from validated_primitives.validation.errors import ValueObjectValidationError
from validated_primitives.validation.result import ValidationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V", bound="ValidatedValueObject")

# (result, instance) pair returned by every try_create
TryCreateResult = Tuple[ValidationResult, Optional[T]]


@runtime_checkable
class SupportsTryCreate(Protocol):
    """Structural type of anything exposing the construction protocol."""

    @classmethod
    def try_create(cls, *args: Any, **kwargs: Any) -> TryCreateResult[Any]:
        ...

    @classmethod
    def create(cls, *args: Any, **kwargs: Any) -> Any:
        ...


class ValidatedValueObject(BaseModel):
    """Base class for immutable, always-valid value objects."""

    model_config = {"frozen": True}

    @classmethod
    def try_create(cls: Type[V], *args: Any, **kwargs: Any) -> TryCreateResult[V]:
        """
        Validate raw input and build an instance.

        Every subclass overrides this with its own signature and rule
        pipeline. Implementations never raise for invalid input: they return
        (result, None) with the failures instead.

        Returns:
            (result, instance) on success, (result, None) otherwise
        """
        raise NotImplementedError(f"{cls.__name__} must implement try_create")

    @classmethod
    def create(cls: Type[V], *args: Any, **kwargs: Any) -> V:
        """
        Construct an instance or raise.

        Raises:
            ValueObjectValidationError: If any rule fails
        """
        result, instance = cls.try_create(*args, **kwargs)
        if instance is None:
            raise ValueObjectValidationError(cls, result)
        return instance

    @classmethod
    def _accept(
        cls: Type[V], result: ValidationResult, **fields: Any
    ) -> TryCreateResult[V]:
        """Materialize an instance whose fields already passed validation."""
        instance = cls.model_construct(**fields)
        logger.debug(f"{cls.__name__} created: {instance}")
        return result, instance

    @classmethod
    def _reject(cls: Type[V], result: ValidationResult) -> TryCreateResult[V]:
        logger.debug(
            f"{cls.__name__} rejected: {result.to_single_message()}"
        )
        return result, None

    def revalidate(self) -> ValidationResult:
        """Run the type's rule pipeline against this instance's fields."""
        return ValidationResult.success()

    @model_validator(mode="after")
    def check_invariants(self) -> ValidatedValueObject:
        result = self.revalidate()
        if not result.is_valid:
            raise ValueObjectValidationError(type(self), result)
        return self
