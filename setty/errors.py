from __future__ import annotations

from typing import Optional

from setty.enums import BlueprintErrorCode, EnumErrorCode


class SettyError(Exception):
    """Base class for every error raised by setty."""


class EnumBlueprintInvalidError(SettyError, ValueError):
    """A blueprint handed to `EnumBuilder.store_from_array` was rejected.

    Nothing is stored when this is raised.
    """

    def __init__(self, code: BlueprintErrorCode, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.code = code
        self.field = field


class EnumNotFoundError(SettyError, LookupError):
    def __init__(self, enum_name: str) -> None:
        super().__init__(f"No blueprint has been stored for the enum '{enum_name}'")
        self.code = EnumErrorCode.ENUM_NOT_FOUND
        self.enum_name = enum_name


class EnumValueNotFoundError(SettyError, LookupError):
    """Member access on an enum that is unpopulated or lacks the member."""

    def __init__(self, code: EnumErrorCode, message: str, *, enum_name: str, member_name: str) -> None:
        super().__init__(message)
        self.code = code
        self.enum_name = enum_name
        self.member_name = member_name


class EnumRegistryCorruptedError(SettyError, RuntimeError):
    """A stored blueprint violates an invariant the validator should have enforced."""

    def __init__(self, enum_name: str, value: str) -> None:
        super().__init__(
            f"The stored constants for the enum '{enum_name}' map more than one name to the value '{value}'"
        )
        self.code = EnumErrorCode.ENUM_DUPLICATE_VALUE
        self.enum_name = enum_name
        self.value = value


class EnumTypeConflictError(SettyError, RuntimeError):
    """A shared type registry already holds a different blueprint under this name."""

    def __init__(self, enum_name: str) -> None:
        super().__init__(
            f"The enum type '{enum_name}' was already synthesized from a different blueprint"
        )
        self.code = EnumErrorCode.ENUM_TYPE_CONFLICT
        self.enum_name = enum_name


__all__ = [
    "SettyError",
    "EnumBlueprintInvalidError",
    "EnumNotFoundError",
    "EnumValueNotFoundError",
    "EnumRegistryCorruptedError",
    "EnumTypeConflictError",
]
