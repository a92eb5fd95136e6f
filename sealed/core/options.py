"""Enumeration versus sealed hierarchy.

With an enumeration every member has the same shape: if one constant needs
an extra field, all of them must declare it. `Options` can only carry a
`percent`.

With a sealed hierarchy each variant declares its own fields while sharing
the root's `value`: `VolumeOption` has a percent, `HighlightOption` has
nothing, `EnergyOption` has an id.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, assert_never

from .sealed import Sealed

__all__ = [
    "Options",
    "Option",
    "VolumeOption",
    "HighlightOption",
    "EnergyOption",
    "AnyOption",
    "option_for",
]


class Options(Enum):
    VOLUME = 12
    HIGHLIGHT = 23
    ENERGY = 25

    @property
    def percent(self) -> int:
        return self.value


class Option(Sealed):
    __slots__ = ()

    value: ClassVar[int]


@dataclass(frozen=True, slots=True)
class VolumeOption(Option):
    value: ClassVar[int] = 12

    percent: int


@dataclass(frozen=True, slots=True)
class HighlightOption(Option):
    value: ClassVar[int] = 23


@dataclass(frozen=True, slots=True)
class EnergyOption(Option):
    value: ClassVar[int] = 25

    id: int


type AnyOption = VolumeOption | HighlightOption | EnergyOption


def option_for(member: Options) -> type[AnyOption]:
    """Return the sealed variant sharing `member`'s value."""
    match member:
        case Options.VOLUME:
            return VolumeOption
        case Options.HIGHLIGHT:
            return HighlightOption
        case Options.ENERGY:
            return EnergyOption
        case _:
            assert_never(member)
