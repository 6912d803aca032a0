"""
Canonical codes for blueprint validation failures and enum lookup errors.

Rules:
- Raise with one of these codes, never an ad-hoc string.
- Keep semantics stable; prefer adding new codes over changing existing meaning.
"""

from __future__ import annotations

from enum import Enum, unique


class StrEnum(str, Enum):
    """Py3.10+ compatible string enum base (without requiring enum.StrEnum)."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> list[str]:
        return [m.value for m in cls]

    @classmethod
    def has_value(cls, value: str) -> bool:
        return value in cls._value2member_map_  # type: ignore[attr-defined]


@unique
class LifecycleState(StrEnum):
    UNREGISTERED = "unregistered"
    STORED = "stored"
    SYNTHESIZED = "synthesized"
    BUILT = "built"


# =========================
# A) BLUEPRINT_* (store_from_array)
# =========================
@unique
class BlueprintErrorCode(StrEnum):
    BLUEPRINT_MISSING_KEYS = "BLUEPRINT_MISSING_KEYS"
    BLUEPRINT_INVALID_NAME = "BLUEPRINT_INVALID_NAME"
    BLUEPRINT_DUPLICATE_NAME = "BLUEPRINT_DUPLICATE_NAME"
    BLUEPRINT_INVALID_CONSTANTS = "BLUEPRINT_INVALID_CONSTANTS"
    BLUEPRINT_INVALID_CONSTANT_KEY = "BLUEPRINT_INVALID_CONSTANT_KEY"
    BLUEPRINT_INVALID_CONSTANT_VALUE = "BLUEPRINT_INVALID_CONSTANT_VALUE"
    BLUEPRINT_DUPLICATE_VALUE = "BLUEPRINT_DUPLICATE_VALUE"


# =========================
# B) ENUM_* (build_stored / member access)
# =========================
@unique
class EnumErrorCode(StrEnum):
    ENUM_NOT_FOUND = "ENUM_NOT_FOUND"
    ENUM_DUPLICATE_VALUE = "ENUM_DUPLICATE_VALUE"
    ENUM_TYPE_CONFLICT = "ENUM_TYPE_CONFLICT"
    ENUM_MEMBER_NOT_CONFIGURED = "ENUM_MEMBER_NOT_CONFIGURED"
    ENUM_MEMBER_NOT_FOUND = "ENUM_MEMBER_NOT_FOUND"


__all__ = [
    "StrEnum",
    "LifecycleState",
    "BlueprintErrorCode",
    "EnumErrorCode",
]
