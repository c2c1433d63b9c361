"""Validation utilities for plant and grid data."""

from enum import Enum
from typing import Any, Optional, Type, Union

from .exceptions import PlantCategoryError, ValidationTypeError, ValidationRangeError

class Validator:
    """Base validator class."""
    
    @staticmethod
    def validate_type(value: Any, expected_type: Union[Type, tuple]) -> None:
        """Validate value type."""
        # bool is an int subclass but never a sensible quantity
        if isinstance(value, bool) or not isinstance(value, expected_type):
            expected = getattr(expected_type, "__name__", None) or " or ".join(
                t.__name__ for t in expected_type
            )
            raise ValidationTypeError(
                f"Expected type {expected}, got {type(value).__name__}"
            )

    @staticmethod
    def validate_range(
        value: Union[int, float],
        min_value: Optional[Union[int, float]] = None,
        max_value: Optional[Union[int, float]] = None
    ) -> None:
        """Validate numeric range."""
        if min_value is not None and value < min_value:
            raise ValidationRangeError(f"Value {value} is below minimum {min_value}")
        
        if max_value is not None and value > max_value:
            raise ValidationRangeError(f"Value {value} exceeds maximum {max_value}")

class PlantValidator(Validator):
    """Validator for plant-related data."""
    
    @staticmethod
    def validate_capacity(capacity: float) -> None:
        """Validate nominal plant capacity."""
        Validator.validate_type(capacity, (int, float))
        Validator.validate_range(capacity, min_value=0)

class GridValidator(Validator):
    """Validator for grid-level data."""
    
    @staticmethod
    def validate_load(load: float) -> None:
        """Validate grid load."""
        Validator.validate_type(load, (int, float))
        Validator.validate_range(load, min_value=0)

def validate_enum_value(value: Any, enum_type: Type[Enum]) -> Enum:
    """Resolve a display name (or member) to a member of ``enum_type``.

    Matching is case-insensitive so ``"hydro"`` and ``"Hydro"`` both work in
    configuration files.
    """
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        for member in enum_type:
            if member.value.lower() == value.strip().lower():
                return member
    valid = [member.value for member in enum_type]
    raise PlantCategoryError(
        f"Invalid {enum_type.__name__} {value!r}. Must be one of: {valid}"
    )
