from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from setty import BlueprintErrorCode, EnumBlueprintInvalidError, EnumBuilder, LifecycleState


def _compass_blueprint() -> dict:
    return {
        "name": "Compass",
        "constant": {"NORTH": "north", "SOUTH": "south", "EAST": "east", "WEST": "west"},
    }


def _store_error(builder: EnumBuilder, blueprint: object) -> EnumBlueprintInvalidError:
    with pytest.raises(EnumBlueprintInvalidError) as excinfo:
        builder.store_from_array(blueprint)  # type: ignore[arg-type]
    return excinfo.value


def test_valid_blueprint_is_stored(enum_builder: EnumBuilder) -> None:
    enum_builder.store_from_array(_compass_blueprint())

    assert enum_builder.is_stored("Compass")
    assert enum_builder.stored_names() == ["Compass"]
    assert enum_builder.stored_constants("Compass") == _compass_blueprint()["constant"]
    assert enum_builder.lifecycle_state("Compass") == LifecycleState.STORED


@pytest.mark.parametrize(
    "blueprint",
    [
        {"noNameKey": "does not matter", "noConstant": {}},
        {"name": "Valid"},
        {"constant": {"VALID": "constants"}},
        "not a mapping",
    ],
)
def test_missing_keys_are_rejected(enum_builder: EnumBuilder, blueprint: object) -> None:
    err = _store_error(enum_builder, blueprint)
    assert err.code == BlueprintErrorCode.BLUEPRINT_MISSING_KEYS
    assert "'name' and 'constant'" in str(err)
    assert enum_builder.stored_names() == []


@pytest.mark.parametrize("name", [None, "", 42, ["Compass"]])
def test_non_string_or_empty_name_is_rejected(enum_builder: EnumBuilder, name: object) -> None:
    err = _store_error(enum_builder, {"name": name, "constant": {"VALID": "constants"}})
    assert err.code == BlueprintErrorCode.BLUEPRINT_INVALID_NAME
    assert err.field == "name"
    assert "non-empty string" in str(err)


@pytest.mark.parametrize("name", ["I have spaces and other {} invalid ch4rs!", "Compass2", "Com-pass", "Compass\n"])
def test_name_with_invalid_characters_is_rejected(enum_builder: EnumBuilder, name: str) -> None:
    err = _store_error(enum_builder, {"name": name, "constant": {"VALID": "constants"}})
    assert err.code == BlueprintErrorCode.BLUEPRINT_INVALID_NAME
    assert "letter and underscore" in str(err)


def test_duplicate_name_is_rejected_regardless_of_constants(enum_builder: EnumBuilder) -> None:
    enum_builder.store_from_array(_compass_blueprint())

    err = _store_error(enum_builder, {"name": "Compass", "constant": {"UP": "u"}})
    assert err.code == BlueprintErrorCode.BLUEPRINT_DUPLICATE_NAME
    assert "Compass" in str(err)
    assert enum_builder.stored_constants("Compass") == _compass_blueprint()["constant"]


def test_duplicate_name_is_reported_before_bad_constants(enum_builder: EnumBuilder) -> None:
    enum_builder.store_from_array(_compass_blueprint())

    err = _store_error(enum_builder, {"name": "Compass", "constant": "I am not a mapping"})
    assert err.code == BlueprintErrorCode.BLUEPRINT_DUPLICATE_NAME


@pytest.mark.parametrize("constants", ["I am not a mapping", {}, [("NORTH", "n")], None])
def test_non_mapping_or_empty_constants_are_rejected(enum_builder: EnumBuilder, constants: object) -> None:
    err = _store_error(enum_builder, {"name": "Valid", "constant": constants})
    assert err.code == BlueprintErrorCode.BLUEPRINT_INVALID_CONSTANTS
    assert err.field == "constant"
    assert not enum_builder.is_stored("Valid")


@pytest.mark.parametrize("key", ["", 0, None])
def test_empty_or_non_string_constant_key_is_rejected(enum_builder: EnumBuilder, key: object) -> None:
    err = _store_error(enum_builder, {"name": "Valid", "constant": {key: "value"}})
    assert err.code == BlueprintErrorCode.BLUEPRINT_INVALID_CONSTANT_KEY
    assert "non-empty strings" in str(err)


@pytest.mark.parametrize("key", ["NOT VALID", "dash-ed", "dot.ted", "TRAILING\n"])
def test_constant_key_with_invalid_characters_is_rejected(enum_builder: EnumBuilder, key: str) -> None:
    err = _store_error(enum_builder, {"name": "Valid", "constant": {key: "value"}})
    assert err.code == BlueprintErrorCode.BLUEPRINT_INVALID_CONSTANT_KEY
    assert "letters, numbers and underscore" in str(err)


def test_constant_keys_may_contain_digits(enum_builder: EnumBuilder) -> None:
    enum_builder.store_from_array({"name": "Http_Status", "constant": {"OK_200": "200", "E404": "404"}})
    assert enum_builder.stored_constants("Http_Status") == {"OK_200": "200", "E404": "404"}


@pytest.mark.parametrize("value", ["", None, 1, ["n"]])
def test_empty_or_non_string_constant_value_is_rejected(enum_builder: EnumBuilder, value: object) -> None:
    err = _store_error(enum_builder, {"name": "Valid", "constant": {"GOOD": "g", "BAD": value}})
    assert err.code == BlueprintErrorCode.BLUEPRINT_INVALID_CONSTANT_VALUE
    assert err.field == "constant.BAD"
    assert not enum_builder.is_stored("Valid")


def test_duplicate_constant_value_is_rejected(enum_builder: EnumBuilder) -> None:
    err = _store_error(enum_builder, {"name": "YesNo", "constant": {"YES": "dupe", "NO": "dupe"}})

    assert err.code == BlueprintErrorCode.BLUEPRINT_DUPLICATE_VALUE
    assert "YesNo" in str(err)
    assert "dupe" in str(err)
    assert not enum_builder.is_stored("YesNo")
    assert "YesNo" not in enum_builder.types
    assert enum_builder.lifecycle_state("YesNo") == LifecycleState.UNREGISTERED


def test_constants_are_checked_in_insertion_order(enum_builder: EnumBuilder) -> None:
    err = _store_error(enum_builder, {"name": "Mixed", "constant": {"bad key": "x", "GOOD": ""}})
    assert err.code == BlueprintErrorCode.BLUEPRINT_INVALID_CONSTANT_KEY

    err = _store_error(enum_builder, {"name": "Mixed", "constant": {"GOOD": "", "bad key": "x"}})
    assert err.code == BlueprintErrorCode.BLUEPRINT_INVALID_CONSTANT_VALUE


def test_failed_store_leaves_name_free(enum_builder: EnumBuilder) -> None:
    _store_error(enum_builder, {"name": "Compass", "constant": {"NORTH": "n", "SOUTH": "n"}})

    enum_builder.store_from_array(_compass_blueprint())
    assert enum_builder.is_stored("Compass")


def test_stored_blueprint_is_not_affected_by_caller_mutation(enum_builder: EnumBuilder) -> None:
    blueprint = _compass_blueprint()
    enum_builder.store_from_array(blueprint)

    blueprint["constant"]["UP"] = "up"
    blueprint["constant"]["NORTH"] = "changed"

    assert enum_builder.stored_constants("Compass") == _compass_blueprint()["constant"]


def test_concurrent_stores_of_one_name_register_it_once(enum_builder: EnumBuilder) -> None:
    def store(index: int) -> bool:
        try:
            enum_builder.store_from_array({"name": "Compass", "constant": {f"C{index}": f"v{index}"}})
        except EnumBlueprintInvalidError as err:
            assert err.code == BlueprintErrorCode.BLUEPRINT_DUPLICATE_NAME
            return False
        return True

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(store, range(32)))

    assert outcomes.count(True) == 1
    assert enum_builder.stored_names() == ["Compass"]
    assert len(enum_builder.registry) == 1
    assert len(enum_builder.stored_constants("Compass")) == 1
