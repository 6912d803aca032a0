"""JSON Schema screening for the files setty reads."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError


SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"

CATALOG_SCHEMA = "enum_catalog.schema.json"


def _location(err: ValidationError) -> str:
    return "".join(f".{part}" for part in err.absolute_path)


@lru_cache(maxsize=None)
def _validator(schema_name: str) -> Draft202012Validator:
    schema = json.loads((SCHEMAS_DIR / schema_name).read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def schema_errors(payload: Mapping[str, Any], schema_name: str = CATALOG_SCHEMA) -> list[str]:
    """Return `$.path: message` strings for every schema violation, ordered by path."""
    errors = sorted(
        _validator(schema_name).iter_errors(payload),
        key=lambda err: [str(part) for part in err.absolute_path],
    )
    return [f"${_location(err)}: {err.message}" for err in errors]
