"""
Stores enum blueprints and builds `Enum` objects from them.

A blueprint is a mapping with two keys:

    {"name": "Compass", "constant": {"NORTH": "n", "SOUTH": "s"}}

`store_from_array` validates and registers one blueprint at a time;
`build_stored` turns a registered name into a populated `Enum`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from setty.builder.enum_value_builder import EnumValueBuilder
from setty.builder.validation import duplicate_name_error, validate_blueprint
from setty.enum_instance import Enum
from setty.enums import LifecycleState
from setty.errors import EnumNotFoundError, EnumRegistryCorruptedError, EnumTypeConflictError
from setty.registry import BlueprintRegistry, EnumType, TypeRegistry

logger = logging.getLogger(__name__)


class EnumBuilder:
    def __init__(
        self,
        value_builder: Optional[EnumValueBuilder] = None,
        *,
        registry: Optional[BlueprintRegistry] = None,
    ) -> None:
        self.value_builder = value_builder if value_builder is not None else EnumValueBuilder()
        self.registry = registry if registry is not None else BlueprintRegistry()
        self._built: set[str] = set()

    @property
    def types(self) -> TypeRegistry:
        return self.value_builder.types

    def store_from_array(self, blueprint: Mapping[str, Any]) -> None:
        """
        Validate `blueprint` and register it under its name.

        Raises `EnumBlueprintInvalidError` (with a `BlueprintErrorCode`) on the
        first failed check; nothing is registered in that case.
        """
        name, constants = validate_blueprint(blueprint, is_stored=self.is_stored)
        self.registry.insert_if_absent(name, constants, on_duplicate=duplicate_name_error)

    def build_stored(self, enum_name: str) -> Enum:
        enum_type = self.synthesize(enum_name)
        members = {
            const_name: self.value_builder.build_enum_value(enum_type.name, const_value)
            for const_name, const_value in enum_type.constants.items()
        }
        self._built.add(enum_name)
        logger.debug("Built enum %s with members %s", enum_name, list(members))
        return Enum(enum_type.name, members, enum_type.constants)

    def synthesize(self, enum_name: str) -> EnumType:
        """Return the `EnumType` of a stored blueprint, creating it on first use."""
        constants = self.registry.get(enum_name)
        if constants is None:
            raise EnumNotFoundError(enum_name)

        enum_type = self.types.get(enum_name)
        if enum_type is None:
            # Registry contents were validated on store; a repeat here means corruption.
            seen: set[str] = set()
            for value in constants.values():
                if value in seen:
                    raise EnumRegistryCorruptedError(enum_name, value)
                seen.add(value)
            enum_type = self.types.synthesize(enum_name, constants)

        # A shared type registry only reuses a type built from the same blueprint.
        if list(enum_type.constants.items()) != list(constants.items()):
            raise EnumTypeConflictError(enum_name)
        return enum_type

    def is_stored(self, enum_name: str) -> bool:
        return enum_name in self.registry

    def stored_names(self) -> list[str]:
        return self.registry.names()

    def stored_constants(self, enum_name: str) -> Dict[str, str]:
        constants = self.registry.get(enum_name)
        if constants is None:
            raise EnumNotFoundError(enum_name)
        return dict(constants)

    def lifecycle_state(self, enum_name: str) -> LifecycleState:
        if not self.is_stored(enum_name):
            return LifecycleState.UNREGISTERED
        if enum_name in self._built:
            return LifecycleState.BUILT
        if enum_name in self.types:
            return LifecycleState.SYNTHESIZED
        return LifecycleState.STORED


__all__ = ["EnumBuilder"]
