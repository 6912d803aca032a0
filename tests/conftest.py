"""Test bootstrap so the repo-level `setty` package is always importable."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent
REPO_ROOT = ROOT_DIR.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from setty import EnumBuilder, EnumValueBuilder  # noqa: E402


@pytest.fixture
def value_builder() -> EnumValueBuilder:
    return EnumValueBuilder()


@pytest.fixture
def enum_builder(value_builder: EnumValueBuilder) -> EnumBuilder:
    return EnumBuilder(value_builder)
