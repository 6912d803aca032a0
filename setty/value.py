"""
Immutable enum member values.

Every enum type gets its own `EnumValue` subclass (see `setty.registry.make_value_class`), so
values from different enums never compare equal even when their strings do.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EnumValue:
    value: str

    def __str__(self) -> str:
        # Always the constructor value; subclasses must not change this.
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def as_string(self) -> str:
        return str(self)

    @classmethod
    def enum_name(cls) -> str:
        return str(getattr(cls, "ENUM_NAME", cls.__name__))


__all__ = ["EnumValue"]
