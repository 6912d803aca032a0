#!/usr/bin/env python3
"""Build the Compass enum and print its members."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from setty import EnumBuilder, EnumValueBuilder  # noqa: E402


def main() -> int:
    builder = EnumBuilder(EnumValueBuilder())
    builder.store_from_array(
        {
            "name": "Compass",
            "constant": {"NORTH": "n", "SOUTH": "s", "EAST": "e", "WEST": "w"},
        }
    )
    compass = builder.build_stored("Compass")

    for name in compass:
        value = compass.member(name)
        print(f"{compass.name}.{name} = {value!r} -> {value}")
    print(compass.constants())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
