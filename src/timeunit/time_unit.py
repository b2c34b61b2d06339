"""TimeUnit value type.

A TimeUnit is an immutable, non-negative span of time stored as an exact
count of milliseconds plus a preferred display unit:
- Parsing and formatting of the compact ``<number><unit>`` form (``90m``)
- Exact integer extraction in any unit
- Arithmetic that re-normalizes to the largest whole unit
- Ordering, equality and hashing on milliseconds only
- Shifting datetimes and epoch-millisecond timestamps
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TypeVar

import structlog

from timeunit.duration import normalize, normalized_value, split_duration
from timeunit.errors import NegativeValueError, TimeUnitError
from timeunit.types import TimeUnitType

log = structlog.get_logger(__name__)

TimestampT = TypeVar("TimestampT", datetime, int, float)


@dataclass(frozen=True, slots=True, eq=False)
class TimeUnit:
    """A human-friendly duration such as ``6m``, ``14h`` or ``104d``.

    ``unit_type`` only affects how the value is displayed. Two TimeUnits
    are equal when their millisecond counts are, so ``120s == 2m``.

    Example:
        TimeUnit.parse("90m").long_text          # "90 Minutes"
        (TimeUnit.parse("60s") + "59m").value    # "1h"
        TimeUnit.parse("2h").add_seconds(-7201)  # TimeUnit('0S')
    """

    milliseconds: int
    unit_type: TimeUnitType = TimeUnitType.MILLISECONDS

    def __post_init__(self) -> None:
        if isinstance(self.milliseconds, bool) or not isinstance(self.milliseconds, int):
            raise TypeError(f"Expected int milliseconds, got {type(self.milliseconds).__name__}")
        if not isinstance(self.unit_type, TimeUnitType):
            raise TypeError(f"Expected TimeUnitType, got {type(self.unit_type).__name__}")
        if self.milliseconds < 0:
            raise NegativeValueError(self.milliseconds)
        # The compact form is the only persisted field, so it must be exact
        if self.milliseconds % self.unit_type.multiplier:
            raise TimeUnitError(
                f"Invalid duration: {self.milliseconds} milliseconds is not a whole "
                f"number of {self.unit_type.label}"
            )

    @classmethod
    def parse(cls, text: str) -> TimeUnit:
        """Create a TimeUnit from compact text such as ``7m`` or ``3h``.

        The suffix becomes the preferred unit.
        """
        number, unit = split_duration(text)
        return cls(number * unit.multiplier, unit)

    @classmethod
    def normalized(cls, milliseconds: int) -> TimeUnit:
        """Create a TimeUnit displayed in the largest whole unit."""
        _, unit = normalize(milliseconds)
        return cls(milliseconds, unit)

    @classmethod
    def of(cls, value: DurationLike) -> TimeUnit:
        """Coerce a TimeUnit, compact string or millisecond count."""
        if isinstance(value, TimeUnit):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        return cls(value)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> TimeUnit:
        """Create a TimeUnit from a timedelta, dropping sub-millisecond parts."""
        milliseconds = delta // timedelta(milliseconds=1)
        if milliseconds < 0:
            raise NegativeValueError(milliseconds)
        return cls.normalized(milliseconds)

    @property
    def value(self) -> str:
        """Compact form in the preferred unit, e.g. ``6m``."""
        return f"{self.value_as_numeric}{self.unit_type.suffix}"

    @property
    def value_as_numeric(self) -> int:
        """Number of preferred units; 9 for ``9m``."""
        return self.in_units(self.unit_type)

    @property
    def value_as_whole_number(self) -> str:
        """Compact form in the largest whole unit: ``60m`` gives ``1h``."""
        return normalized_value(self.milliseconds)

    @property
    def long_text(self) -> str:
        """Long form, e.g. ``6 Minutes``."""
        return f"{self.value_as_numeric} {self.unit_type.label}"

    def in_units(self, unit: TimeUnitType) -> int:
        """Whole number of ``unit`` in this duration (truncated)."""
        return self.milliseconds // unit.multiplier

    def in_units_as_string(self, unit: TimeUnitType) -> str:
        return f"{self.in_units(unit)}{unit.suffix}"

    def as_float(self, unit: TimeUnitType) -> float:
        """Fractional number of ``unit``; 90s is 1.5 minutes."""
        return self.milliseconds / unit.multiplier

    @property
    def in_milliseconds(self) -> int:
        return self.milliseconds

    @property
    def in_milliseconds_as_string(self) -> str:
        return self.in_units_as_string(TimeUnitType.MILLISECONDS)

    @property
    def in_seconds(self) -> int:
        return self.in_units(TimeUnitType.SECONDS)

    @property
    def in_seconds_as_string(self) -> str:
        return self.in_units_as_string(TimeUnitType.SECONDS)

    @property
    def in_seconds_float(self) -> float:
        return self.as_float(TimeUnitType.SECONDS)

    @property
    def in_minutes(self) -> int:
        return self.in_units(TimeUnitType.MINUTES)

    @property
    def in_minutes_as_string(self) -> str:
        return self.in_units_as_string(TimeUnitType.MINUTES)

    @property
    def in_hours(self) -> int:
        return self.in_units(TimeUnitType.HOURS)

    @property
    def in_hours_as_string(self) -> str:
        return self.in_units_as_string(TimeUnitType.HOURS)

    @property
    def in_days(self) -> int:
        return self.in_units(TimeUnitType.DAYS)

    @property
    def in_days_as_string(self) -> str:
        return self.in_units_as_string(TimeUnitType.DAYS)

    @property
    def in_weeks(self) -> int:
        return self.in_units(TimeUnitType.WEEKS)

    @property
    def in_weeks_as_string(self) -> str:
        return self.in_units_as_string(TimeUnitType.WEEKS)

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.milliseconds)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"TimeUnit({self.value!r})"

    def __int__(self) -> int:
        return self.milliseconds

    def __bool__(self) -> bool:
        return self.milliseconds != 0

    def __reduce__(self) -> tuple[object, tuple[str]]:
        return (parse_time_unit, (self.value,))

    def add(self, other: DurationLike) -> TimeUnit:
        """Sum of both durations, displayed in the largest whole unit.

        ``60s`` plus ``59m`` is ``1h``.
        """
        return TimeUnit.normalized(self.milliseconds + TimeUnit.of(other).milliseconds)

    def subtract(self, other: DurationLike) -> TimeUnit:
        """Difference of both durations; results below zero become ``0S``."""
        subtrahend = TimeUnit.of(other).milliseconds
        remaining = self.milliseconds - subtrahend
        if remaining < 0:
            log.debug(
                "time_unit_clamped",
                minuend_ms=self.milliseconds,
                subtrahend_ms=subtrahend,
            )
            remaining = 0
        return TimeUnit.normalized(remaining)

    def add_units(self, amount: int, unit: TimeUnitType) -> TimeUnit:
        """Add ``amount`` of ``unit``. Negative amounts subtract."""
        _check_amount(amount)
        if amount < 0:
            return self.subtract_units(-amount, unit)
        return self.add(amount * unit.multiplier)

    def subtract_units(self, amount: int, unit: TimeUnitType) -> TimeUnit:
        """Subtract ``amount`` of ``unit``, clamping at zero. Negative amounts add."""
        _check_amount(amount)
        if amount < 0:
            return self.add_units(-amount, unit)
        return self.subtract(amount * unit.multiplier)

    def add_milliseconds(self, milliseconds: int) -> TimeUnit:
        return self.add_units(milliseconds, TimeUnitType.MILLISECONDS)

    def add_seconds(self, seconds: int) -> TimeUnit:
        return self.add_units(seconds, TimeUnitType.SECONDS)

    def add_minutes(self, minutes: int) -> TimeUnit:
        return self.add_units(minutes, TimeUnitType.MINUTES)

    def add_hours(self, hours: int) -> TimeUnit:
        return self.add_units(hours, TimeUnitType.HOURS)

    def add_days(self, days: int) -> TimeUnit:
        return self.add_units(days, TimeUnitType.DAYS)

    def add_weeks(self, weeks: int) -> TimeUnit:
        return self.add_units(weeks, TimeUnitType.WEEKS)

    def subtract_milliseconds(self, milliseconds: int) -> TimeUnit:
        return self.subtract_units(milliseconds, TimeUnitType.MILLISECONDS)

    def subtract_seconds(self, seconds: int) -> TimeUnit:
        return self.subtract_units(seconds, TimeUnitType.SECONDS)

    def subtract_minutes(self, minutes: int) -> TimeUnit:
        return self.subtract_units(minutes, TimeUnitType.MINUTES)

    def subtract_hours(self, hours: int) -> TimeUnit:
        return self.subtract_units(hours, TimeUnitType.HOURS)

    def subtract_days(self, days: int) -> TimeUnit:
        return self.subtract_units(days, TimeUnitType.DAYS)

    def subtract_weeks(self, weeks: int) -> TimeUnit:
        return self.subtract_units(weeks, TimeUnitType.WEEKS)

    def __add__(self, other: object) -> TimeUnit:
        if not _is_coercible(other):
            return NotImplemented
        return self.add(other)  # type: ignore[arg-type]

    def __radd__(self, other: object) -> object:
        if isinstance(other, datetime):
            return self.add_to(other)
        return self.__add__(other)

    def __sub__(self, other: object) -> TimeUnit:
        if not _is_coercible(other):
            return NotImplemented
        return self.subtract(other)  # type: ignore[arg-type]

    def __rsub__(self, other: object) -> object:
        if isinstance(other, datetime):
            return self.subtract_from(other)
        if not _is_coercible(other):
            return NotImplemented
        return TimeUnit.of(other).subtract(self)  # type: ignore[arg-type]

    def add_to(self, timestamp: TimestampT) -> TimestampT:
        """Shift a datetime or epoch-millisecond timestamp forward."""
        if isinstance(timestamp, datetime):
            return timestamp + self.to_timedelta()
        _check_timestamp(timestamp)
        return timestamp + self.milliseconds

    def subtract_from(self, timestamp: TimestampT) -> TimestampT:
        """Shift a datetime or epoch-millisecond timestamp backward."""
        if isinstance(timestamp, datetime):
            return timestamp - self.to_timedelta()
        _check_timestamp(timestamp)
        return timestamp - self.milliseconds

    def equals(self, other: object) -> bool:
        """Compare by milliseconds, converting strings and ints first.

        Values that cannot be read as a TimeUnit are simply unequal.
        """
        if isinstance(other, TimeUnit):
            return self.milliseconds == other.milliseconds
        try:
            converted = TimeUnit.of(other)  # type: ignore[arg-type]
        except (TypeError, TimeUnitError):
            return False
        return self.milliseconds == converted.milliseconds

    def compare(self, other: DurationLike) -> int:
        """-1, 0 or 1 as this duration is shorter, equal or longer."""
        other = TimeUnit.of(other)
        return (self.milliseconds > other.milliseconds) - (self.milliseconds < other.milliseconds)

    def __eq__(self, other: object) -> bool:
        if not _is_coercible(other):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.milliseconds)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.milliseconds < other.milliseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.milliseconds <= other.milliseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.milliseconds > other.milliseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.milliseconds >= other.milliseconds


# Anything a TimeUnit can be built from: TimeUnit, "30s", "5m" or milliseconds
DurationLike = TimeUnit | str | int


def _is_coercible(value: object) -> bool:
    return isinstance(value, (TimeUnit, str, int)) and not isinstance(value, bool)


def _check_amount(amount: object) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"Expected int amount, got {type(amount).__name__}")


def _check_timestamp(timestamp: object) -> None:
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        raise TypeError(
            f"Expected datetime or epoch milliseconds, got {type(timestamp).__name__}"
        )


def parse_time_unit(text: str) -> TimeUnit:
    """Parse compact text such as ``90m`` into a TimeUnit."""
    return TimeUnit.parse(text)


def compare(a: TimeUnit, b: TimeUnit) -> int:
    """-1, 0 or 1 as ``a`` is shorter, equal to or longer than ``b``."""
    return a.compare(b)
