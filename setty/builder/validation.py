"""
Ordered blueprint validation for `EnumBuilder.store_from_array`.

Checks run in a fixed order so the same bad blueprint always produces the same
error: missing keys, name type/empty, name characters, duplicate name,
constants type/empty, then per constant (insertion order) key type/empty,
key characters, value type/empty, value duplicate.
"""

from __future__ import annotations

import re
from collections.abc import Mapping as AbcMapping
from typing import Any, Callable, Dict, Mapping, Tuple

from setty.enums import BlueprintErrorCode
from setty.errors import EnumBlueprintInvalidError

NAME_KEY = "name"
CONSTANT_KEY = "constant"
REQUIRED_KEYS = (NAME_KEY, CONSTANT_KEY)

ENUM_NAME_PATTERN = re.compile(r"[A-Za-z_]+")
CONSTANT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def _fail(code: BlueprintErrorCode, message: str, field: str) -> EnumBlueprintInvalidError:
    return EnumBlueprintInvalidError(code, message, field=field)


def duplicate_name_error(name: str) -> EnumBlueprintInvalidError:
    return _fail(
        BlueprintErrorCode.BLUEPRINT_DUPLICATE_NAME,
        f"The enum type passed, {name}, has already been stored",
        NAME_KEY,
    )


def validate_enum_name(name: Any) -> str:
    if not isinstance(name, str) or not name:
        raise _fail(
            BlueprintErrorCode.BLUEPRINT_INVALID_NAME,
            "The value stored in the 'name' key of the blueprint must be a non-empty string",
            NAME_KEY,
        )
    if ENUM_NAME_PATTERN.fullmatch(name) is None:
        raise _fail(
            BlueprintErrorCode.BLUEPRINT_INVALID_NAME,
            f"The value stored in the 'name' key of the blueprint, {name!r}, may only have letter and underscore characters",
            NAME_KEY,
        )
    return name


def validate_constants(name: str, constants: Any) -> Dict[str, str]:
    if not isinstance(constants, AbcMapping) or not constants:
        raise _fail(
            BlueprintErrorCode.BLUEPRINT_INVALID_CONSTANTS,
            f"The value stored in the 'constant' key of the blueprint for {name} must be a non-empty mapping",
            CONSTANT_KEY,
        )

    valid: Dict[str, str] = {}
    seen_values: Dict[str, str] = {}
    for const_name, const_value in constants.items():
        field = f"{CONSTANT_KEY}.{const_name}"
        if not isinstance(const_name, str) or not const_name:
            raise _fail(
                BlueprintErrorCode.BLUEPRINT_INVALID_CONSTANT_KEY,
                f"The keys stored in the 'constant' mapping of the blueprint for {name} must be non-empty strings",
                field,
            )
        if CONSTANT_NAME_PATTERN.fullmatch(const_name) is None:
            raise _fail(
                BlueprintErrorCode.BLUEPRINT_INVALID_CONSTANT_KEY,
                f"The constant {const_name!r} in the blueprint for {name} may only have letters, numbers and underscore characters",
                field,
            )
        if not isinstance(const_value, str) or not const_value:
            raise _fail(
                BlueprintErrorCode.BLUEPRINT_INVALID_CONSTANT_VALUE,
                f"The value of the constant {const_name} in the blueprint for {name} must be a non-empty string",
                field,
            )
        if const_value in seen_values:
            raise _fail(
                BlueprintErrorCode.BLUEPRINT_DUPLICATE_VALUE,
                f"The enum {name} maps both {seen_values[const_value]} and {const_name} to the value '{const_value}'",
                field,
            )
        seen_values[const_value] = const_name
        valid[const_name] = const_value
    return valid


def validate_blueprint(
    blueprint: Mapping[str, Any],
    *,
    is_stored: Callable[[str], bool],
) -> Tuple[str, Dict[str, str]]:
    """
    Return `(name, constants)` for a well-formed blueprint.

    `is_stored` reports whether a name is already registered; it is consulted
    after the name checks so that a duplicate name wins over bad constants.
    Raises `EnumBlueprintInvalidError` on the first failed check.
    """
    if not isinstance(blueprint, AbcMapping) or any(key not in blueprint for key in REQUIRED_KEYS):
        raise _fail(
            BlueprintErrorCode.BLUEPRINT_MISSING_KEYS,
            "The blueprint must have 'name' and 'constant' keys set",
            ",".join(REQUIRED_KEYS),
        )

    name = validate_enum_name(blueprint[NAME_KEY])
    if is_stored(name):
        raise duplicate_name_error(name)

    return name, validate_constants(name, blueprint[CONSTANT_KEY])


__all__ = [
    "NAME_KEY",
    "CONSTANT_KEY",
    "REQUIRED_KEYS",
    "ENUM_NAME_PATTERN",
    "CONSTANT_NAME_PATTERN",
    "duplicate_name_error",
    "validate_enum_name",
    "validate_constants",
    "validate_blueprint",
]
