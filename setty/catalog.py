"""
Blueprint catalogs: JSON files that declare several enums at once.

    {
      "schema_version": "1.0.0",
      "enums": [
        {"name": "Compass", "constant": {"NORTH": "n", "SOUTH": "s"}}
      ]
    }

Catalogs are read-only input; the schema check only screens the file shape,
`EnumBuilder.store_from_array` still validates every blueprint.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from setty.builder.enum_builder import EnumBuilder
from setty.schema_validation import CATALOG_SCHEMA, schema_errors

logger = logging.getLogger(__name__)

CATALOG_SCHEMA_VERSION = "1.0.0"

PathLike = Union[str, os.PathLike[str], Path]


def read_json_object(path: PathLike) -> dict:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Expected JSON object at {path}")
    return payload


def validate_catalog(catalog: Mapping[str, Any]) -> list[str]:
    return schema_errors(catalog, CATALOG_SCHEMA)


def load_blueprint_catalog(path: PathLike) -> Dict[str, Any]:
    payload = read_json_object(path)
    errors = validate_catalog(payload)
    if errors:
        raise ValueError("; ".join(errors[:3]))
    return payload


def store_catalog(builder: EnumBuilder, catalog: Mapping[str, Any]) -> list[str]:
    """
    Store every blueprint of `catalog` in file order and return their names.

    The first invalid blueprint propagates its `EnumBlueprintInvalidError`;
    blueprints before it remain stored.
    """
    stored: list[str] = []
    for blueprint in catalog.get("enums", []):
        builder.store_from_array(blueprint)
        stored.append(blueprint["name"])
    logger.debug("Stored %d blueprints from catalog", len(stored))
    return stored


def load_into(builder: EnumBuilder, path: PathLike) -> list[str]:
    return store_catalog(builder, load_blueprint_catalog(path))


__all__ = [
    "CATALOG_SCHEMA_VERSION",
    "read_json_object",
    "validate_catalog",
    "load_blueprint_catalog",
    "store_catalog",
    "load_into",
]
