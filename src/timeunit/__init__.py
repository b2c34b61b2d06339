"""timeunit - Human-friendly, immutable durations for Python."""

# Conversions
from timeunit.conversions import (
    TimeUnitJSONEncoder,
    from_millis,
    from_string,
    to_millis,
    to_string,
)

# Parsing and normalization
from timeunit.duration import (
    Duration,
    is_valid_unit_suffix,
    normalize,
    normalized_value,
    parse_duration,
    split_duration,
)

# Errors
from timeunit.errors import (
    InvalidFormatError,
    NegativeValueError,
    TimeUnitError,
    UnsupportedUnitSuffixError,
)

# Value type
from timeunit.time_unit import DurationLike, TimeUnit, compare, parse_time_unit

# Core types
from timeunit.types import (
    MILLISECONDS_IN_DAY,
    MILLISECONDS_IN_HOUR,
    MILLISECONDS_IN_MINUTE,
    MILLISECONDS_IN_SECOND,
    MILLISECONDS_IN_WEEK,
    UNIT_SUFFIXES,
    TimeUnitType,
)

__version__ = "0.1.0"

__all__ = [
    "MILLISECONDS_IN_DAY",
    "MILLISECONDS_IN_HOUR",
    "MILLISECONDS_IN_MINUTE",
    "MILLISECONDS_IN_SECOND",
    "MILLISECONDS_IN_WEEK",
    "UNIT_SUFFIXES",
    "Duration",
    "DurationLike",
    "InvalidFormatError",
    "NegativeValueError",
    "TimeUnit",
    "TimeUnitError",
    "TimeUnitJSONEncoder",
    "TimeUnitType",
    "UnsupportedUnitSuffixError",
    "compare",
    "from_millis",
    "from_string",
    "is_valid_unit_suffix",
    "normalize",
    "normalized_value",
    "parse_duration",
    "parse_time_unit",
    "split_duration",
    "to_millis",
    "to_string",
]
