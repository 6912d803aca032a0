"""Blueprint storage and enum/enum-value construction."""

from .enum_builder import EnumBuilder
from .enum_value_builder import EnumValueBuilder
from .validation import (
    CONSTANT_NAME_PATTERN,
    ENUM_NAME_PATTERN,
    validate_blueprint,
)

__all__ = [
    "EnumBuilder",
    "EnumValueBuilder",
    "CONSTANT_NAME_PATTERN",
    "ENUM_NAME_PATTERN",
    "validate_blueprint",
]
