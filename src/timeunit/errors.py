"""Exceptions raised by the timeunit library."""


class TimeUnitError(ValueError):
    """Base class for every TimeUnit validation failure."""


class NegativeValueError(TimeUnitError):
    """A negative count was given where a duration was expected."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Invalid duration: {value!r} (time units cannot be negative)")
        self.value = value


class InvalidFormatError(TimeUnitError):
    """Text did not match ``<number><unit>`` exactly."""

    def __init__(self, value: object, reason: str) -> None:
        super().__init__(
            f"Invalid duration: {value!r} ({reason}; expected <number><unit> "
            "where unit is one of S, s, m, h, d, w)"
        )
        self.value = value
        self.reason = reason


class UnsupportedUnitSuffixError(InvalidFormatError):
    """The unit suffix is not one of S, s, m, h, d, w."""

    def __init__(self, suffix: object, value: object | None = None) -> None:
        super().__init__(
            suffix if value is None else value,
            f"unsupported unit suffix {suffix!r}",
        )
        self.suffix = suffix
