from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from setty.enums import EnumErrorCode
from setty.errors import EnumValueNotFoundError
from setty.value import EnumValue


class Enum:
    """
    A built enum: named members in blueprint order.

    Instances come from `EnumBuilder.build_stored`. Each call yields a fresh
    `Enum`, but members are the builder's cached `EnumValue` objects, so
    `a.member("X") is b.member("X")` for two builds of the same enum.

    Member access is an explicit lookup; unknown names raise
    `EnumValueNotFoundError` rather than falling back to attribute magic.
    """

    __slots__ = ("_name", "_members", "_constants")

    def __init__(
        self,
        name: str,
        members: Optional[Mapping[str, EnumValue]] = None,
        constants: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._name = str(name)
        self._members: Dict[str, EnumValue] = dict(members or {})
        if constants is None:
            constants = {k: str(v) for k, v in self._members.items()}
        self._constants: Mapping[str, str] = MappingProxyType(dict(constants))

    @property
    def name(self) -> str:
        return self._name

    def NAME(self) -> str:
        return self._name

    def member(self, name: str) -> EnumValue:
        if not self._members:
            raise EnumValueNotFoundError(
                EnumErrorCode.ENUM_MEMBER_NOT_CONFIGURED,
                f"The appropriate values have not been set for the enum '{self._name}'",
                enum_name=self._name,
                member_name=name,
            )
        try:
            return self._members[name]
        except KeyError:
            raise EnumValueNotFoundError(
                EnumErrorCode.ENUM_MEMBER_NOT_FOUND,
                f"The enum '{self._name}' has no member named '{name}'",
                enum_name=self._name,
                member_name=name,
            ) from None

    def constants(self) -> Dict[str, str]:
        return dict(self._constants)

    def CONSTANTS(self) -> Dict[str, str]:
        return self.constants()

    def names(self) -> list[str]:
        return list(self._members)

    def members(self) -> Dict[str, EnumValue]:
        return dict(self._members)

    def __getitem__(self, name: str) -> EnumValue:
        return self.member(name)

    def __contains__(self, name: object) -> bool:
        return name in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"Enum({self._name!r}, {list(self._members)!r})"


__all__ = ["Enum"]
