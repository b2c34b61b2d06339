"""Duration parsing and normalization utilities."""

import re

import structlog

from timeunit.errors import InvalidFormatError, NegativeValueError, UnsupportedUnitSuffixError
from timeunit.types import UNIT_SUFFIXES, UNITS_LARGEST_FIRST, TimeUnitType

log = structlog.get_logger(__name__)

_DURATION_PATTERN = re.compile(r"([0-9]+)(\D)")

# Duration type alias
Duration = str | int  # "30s", "5m", "2h", "1d", "250S" or milliseconds


def is_valid_unit_suffix(suffix: object) -> bool:
    """Check that ``suffix`` is exactly one of S, s, m, h, d, w."""
    return isinstance(suffix, str) and suffix in UNIT_SUFFIXES


def _invalid(text: str, reason: str) -> InvalidFormatError:
    log.debug("time_unit_parse_rejected", value=text, reason=reason)
    return InvalidFormatError(text, reason)


def split_duration(text: str) -> tuple[int, TimeUnitType]:
    """Split compact text such as ``90m`` into ``(90, TimeUnitType.MINUTES)``.

    The number is rendered back with its suffix and must reproduce ``text``
    exactly, which rejects leading zeros, signs, whitespace and anything
    trailing the unit character.

    Raises:
        TypeError: ``text`` is not a string.
        InvalidFormatError: ``text`` is not ``<digits><one character>``
            in canonical form.
        UnsupportedUnitSuffixError: the unit character is not one of
            S, s, m, h, d, w.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    if len(text) < 2:
        raise _invalid(text, "too short")

    match = _DURATION_PATTERN.fullmatch(text)
    if match is None:
        raise _invalid(text, "no valid numeric prefix or multi-character unit")

    digits, suffix = match.groups()
    number = int(digits)
    if f"{number}{suffix}" != text:
        raise _invalid(text, "not in canonical form")

    if not is_valid_unit_suffix(suffix):
        log.debug("time_unit_parse_rejected", value=text, reason="unsupported suffix")
        raise UnsupportedUnitSuffixError(suffix, text)

    return number, TimeUnitType.from_suffix(suffix)


def parse_duration(duration: Duration) -> int:
    """Parse duration string to milliseconds. Passthrough if already int."""
    if isinstance(duration, bool):
        raise TypeError("Expected duration string or milliseconds, got bool")
    if isinstance(duration, int):
        if duration < 0:
            raise NegativeValueError(duration)
        return duration

    number, unit = split_duration(duration)
    return number * unit.multiplier


def normalize(milliseconds: int) -> tuple[int, TimeUnitType]:
    """Express ``milliseconds`` in the largest unit that divides it exactly.

    Units are tried from weeks down to seconds and the first exact match
    wins, so 3_600_000 gives ``(1, HOURS)`` and not ``(60, MINUTES)``.
    Counts no larger unit divides, and zero, stay in milliseconds.
    """
    if milliseconds < 0:
        raise NegativeValueError(milliseconds)

    for unit in UNITS_LARGEST_FIRST:
        if milliseconds >= unit.multiplier and milliseconds % unit.multiplier == 0:
            return milliseconds // unit.multiplier, unit
    return milliseconds, TimeUnitType.MILLISECONDS


def normalized_value(milliseconds: int) -> str:
    """Compact form of ``milliseconds`` in its largest whole unit, e.g. ``1h``."""
    number, unit = normalize(milliseconds)
    return f"{number}{unit.suffix}"
