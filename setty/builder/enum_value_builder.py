from __future__ import annotations

import logging
import threading
from typing import Dict, Optional, Tuple

from setty.registry import TypeRegistry
from setty.value import EnumValue

logger = logging.getLogger(__name__)


class EnumValueBuilder:
    """
    Hands out the `EnumValue` for an `(enum type, value)` pair.

    The first request for a pair creates the value (and the enum's value
    class, if needed); every later request returns that same object.
    Any string is accepted as a value; blueprint rules are enforced upstream.
    """

    def __init__(self, types: Optional[TypeRegistry] = None) -> None:
        self.types = types if types is not None else TypeRegistry()
        self._lock = threading.Lock()
        self._cache: Dict[Tuple[str, str], EnumValue] = {}

    def build_enum_value(self, enum_type: str, value: str) -> EnumValue:
        key = (str(enum_type), str(value))
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._cache.get(key)
            if cached is None:
                value_class = self.types.value_class(key[0])
                cached = value_class(key[1])
                self._cache[key] = cached
                logger.debug("Cached %s value %r", key[0], key[1])
        return cached

    def is_cached(self, enum_type: str, value: str) -> bool:
        return (enum_type, value) in self._cache

    def cached_count(self, enum_type: Optional[str] = None) -> int:
        if enum_type is None:
            return len(self._cache)
        return sum(1 for name, _ in list(self._cache) if name == enum_type)


__all__ = ["EnumValueBuilder"]
