"""Runtime-defined string enums built from validated blueprints."""

from .builder import EnumBuilder, EnumValueBuilder
from .catalog import load_blueprint_catalog, load_into, store_catalog
from .enum_instance import Enum
from .enums import BlueprintErrorCode, EnumErrorCode, LifecycleState
from .errors import (
    EnumBlueprintInvalidError,
    EnumNotFoundError,
    EnumRegistryCorruptedError,
    EnumTypeConflictError,
    EnumValueNotFoundError,
    SettyError,
)
from .registry import BlueprintRegistry, EnumType, TypeRegistry
from .value import EnumValue

__version__ = "0.1.0"

__all__ = [
    "EnumBuilder",
    "EnumValueBuilder",
    "Enum",
    "EnumValue",
    "EnumType",
    "BlueprintRegistry",
    "TypeRegistry",
    "BlueprintErrorCode",
    "EnumErrorCode",
    "LifecycleState",
    "SettyError",
    "EnumBlueprintInvalidError",
    "EnumNotFoundError",
    "EnumValueNotFoundError",
    "EnumRegistryCorruptedError",
    "EnumTypeConflictError",
    "load_blueprint_catalog",
    "load_into",
    "store_catalog",
]
