"""
Process-local stores behind the builders.

`BlueprintRegistry` holds validated constant maps by enum name (write once,
never deleted). `TypeRegistry` holds the synthesized `EnumType` records.
Each store owns its own lock; no instance is shared unless a caller injects it.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from setty.value import EnumValue

logger = logging.getLogger(__name__)


def _frozen_constants(constants: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(constants))


class BlueprintRegistry:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._blueprints: Dict[str, Mapping[str, str]] = {}

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._blueprints

    def __len__(self) -> int:
        with self._lock:
            return len(self._blueprints)

    def names(self) -> list[str]:
        with self._lock:
            return list(self._blueprints)

    def get(self, name: str) -> Optional[Mapping[str, str]]:
        with self._lock:
            return self._blueprints.get(name)

    def insert_if_absent(
        self,
        name: str,
        constants: Mapping[str, str],
        *,
        on_duplicate: Callable[[str], Exception],
    ) -> Mapping[str, str]:
        """
        Store `constants` under `name` unless the name is already taken.

        The duplicate check and the insert happen under one lock; on a clash
        the exception built by `on_duplicate(name)` is raised and nothing changes.
        """
        frozen = _frozen_constants(constants)
        with self._lock:
            if name in self._blueprints:
                raise on_duplicate(name)
            self._blueprints[name] = frozen
        logger.debug("Stored blueprint %s with %d constants", name, len(frozen))
        return frozen


@dataclass(frozen=True)
class EnumType:
    """The synthesized, closed member set of one stored blueprint."""

    name: str
    constants: Mapping[str, str]
    value_class: type[EnumValue]

    def member_names(self) -> list[str]:
        return list(self.constants)


def make_value_class(enum_name: str) -> type[EnumValue]:
    """Create the `EnumValue` subclass that members of `enum_name` are instances of."""
    return type(
        enum_name,
        (EnumValue,),
        {
            "__slots__": (),
            "__module__": __name__,
            "__qualname__": enum_name,
            "ENUM_NAME": enum_name,
        },
    )


class TypeRegistry:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._types: Dict[str, EnumType] = {}
        self._value_classes: Dict[str, type[EnumValue]] = {}

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._types

    def get(self, name: str) -> Optional[EnumType]:
        with self._lock:
            return self._types.get(name)

    def value_class(self, name: str) -> type[EnumValue]:
        """
        Return the value class for `name`, creating it on first use.

        A value class may exist before its `EnumType` when values are requested
        directly from an `EnumValueBuilder`; `synthesize` then adopts it.
        """
        with self._lock:
            return self._value_class_locked(name)

    def synthesize(self, name: str, constants: Mapping[str, str]) -> EnumType:
        """Create the `EnumType` for `name` once; later calls return the existing one."""
        with self._lock:
            existing = self._types.get(name)
            if existing is not None:
                return existing
            enum_type = EnumType(
                name=name,
                constants=_frozen_constants(constants),
                value_class=self._value_class_locked(name),
            )
            self._types[name] = enum_type
        logger.debug("Synthesized enum type %s", name)
        return enum_type

    def _value_class_locked(self, name: str) -> type[EnumValue]:
        cls = self._value_classes.get(name)
        if cls is None:
            cls = make_value_class(name)
            self._value_classes[name] = cls
        return cls


__all__ = [
    "BlueprintRegistry",
    "EnumType",
    "TypeRegistry",
    "make_value_class",
]
