"""Core types for the timeunit library."""

from __future__ import annotations

from enum import Enum
from typing import Final

from timeunit.errors import UnsupportedUnitSuffixError

MILLISECONDS_IN_SECOND: Final[int] = 1_000
MILLISECONDS_IN_MINUTE: Final[int] = 60_000
MILLISECONDS_IN_HOUR: Final[int] = 3_600_000
MILLISECONDS_IN_DAY: Final[int] = 86_400_000
MILLISECONDS_IN_WEEK: Final[int] = 604_800_000


class TimeUnitType(Enum):
    """Units a TimeUnit can be expressed in.

    Each member carries its compact suffix, its size in milliseconds and
    the long name used by ``TimeUnit.long_text``. Months and years are
    unsupported since their length is not fixed.
    """

    MILLISECONDS = ("S", 1, "Milliseconds")
    SECONDS = ("s", MILLISECONDS_IN_SECOND, "Seconds")
    MINUTES = ("m", MILLISECONDS_IN_MINUTE, "Minutes")
    HOURS = ("h", MILLISECONDS_IN_HOUR, "Hours")
    DAYS = ("d", MILLISECONDS_IN_DAY, "Days")
    WEEKS = ("w", MILLISECONDS_IN_WEEK, "Weeks")

    def __init__(self, suffix: str, multiplier: int, label: str) -> None:
        self.suffix = suffix
        self.multiplier = multiplier
        self.label = label

    @classmethod
    def from_suffix(cls, suffix: str) -> TimeUnitType:
        """Look up a unit by its single-character suffix (case-sensitive)."""
        unit = _BY_SUFFIX.get(suffix) if isinstance(suffix, str) else None
        if unit is None:
            raise UnsupportedUnitSuffixError(suffix)
        return unit


_BY_SUFFIX: dict[str, TimeUnitType] = {unit.suffix: unit for unit in TimeUnitType}

# Allowed suffix characters: S=ms, s=seconds, m, h, d, w
UNIT_SUFFIXES: Final[frozenset[str]] = frozenset(_BY_SUFFIX)

# Largest first; normalization returns on the first exact match
UNITS_LARGEST_FIRST: Final[tuple[TimeUnitType, ...]] = tuple(
    sorted(TimeUnitType, key=lambda unit: unit.multiplier, reverse=True)
)
