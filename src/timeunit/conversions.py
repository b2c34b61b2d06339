"""Explicit conversions to and from TimeUnit.

The ``from_*`` functions never raise: they return a ``(value, error)`` pair
where exactly one side is None. JSON helpers write a TimeUnit as its compact
string, which is the only field ever persisted.
"""

from __future__ import annotations

import json
from typing import Any

import structlog

from timeunit.errors import InvalidFormatError, TimeUnitError
from timeunit.time_unit import TimeUnit

log = structlog.get_logger(__name__)

ConversionResult = tuple[TimeUnit, None] | tuple[None, TimeUnitError]


def from_string(text: object) -> ConversionResult:
    """Parse compact text such as ``7d`` without raising."""
    if not isinstance(text, str):
        error: TimeUnitError = InvalidFormatError(text, f"expected str, got {type(text).__name__}")
    else:
        try:
            return TimeUnit.parse(text), None
        except TimeUnitError as e:
            error = e
    log.debug("time_unit_conversion_failed", source="string", value=text, error=str(error))
    return None, error


def from_millis(milliseconds: object) -> ConversionResult:
    """Build a TimeUnit from a millisecond count without raising."""
    try:
        return TimeUnit(milliseconds), None  # type: ignore[arg-type]
    except TypeError as e:
        error = TimeUnitError(f"Invalid duration: {milliseconds!r} ({e})")
    except TimeUnitError as e:
        error = e
    log.debug("time_unit_conversion_failed", source="millis", value=milliseconds, error=str(error))
    return None, error


def to_string(time_unit: TimeUnit) -> str:
    """Compact form, e.g. ``7d``."""
    return time_unit.value


def to_millis(time_unit: TimeUnit) -> int:
    return time_unit.milliseconds


class TimeUnitJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes TimeUnit values as compact strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, TimeUnit):
            return o.value
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """``json.dumps`` with TimeUnit support."""
    kwargs.setdefault("cls", TimeUnitJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads(data: bytes | str) -> TimeUnit:
    """Decode a JSON string literal such as ``"7d"`` into a TimeUnit."""
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    decoded = json.loads(data)
    if not isinstance(decoded, str):
        raise InvalidFormatError(decoded, "expected a JSON string")
    return TimeUnit.parse(decoded)
