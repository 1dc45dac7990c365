"""Elapsed-time value type.

A Duration is a non-negative span split into whole seconds and a sub-second
nanosecond remainder, mirroring how monotonic clocks report elapsed time.

Usage:
    from eternity.formatting.duration import Duration, as_duration

    Duration.from_millis(2134)          # Duration(seconds=2, nanos=134000000)
    as_duration(timedelta(minutes=3))   # Duration(seconds=180, nanos=0)
    as_duration(21)                     # Duration(seconds=21, nanos=0)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Final

from eternity.core.exceptions import DurationError
from eternity.formatting.units import (
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)

__all__ = ["MAX_SECONDS", "MAX_TIMEDELTA_SECONDS", "Duration", "as_duration"]

# Whole seconds are an unsigned 64-bit quantity
MAX_SECONDS: Final[int] = 2**64 - 1
# Largest whole-second count a timedelta can hold
MAX_TIMEDELTA_SECONDS: Final[int] = timedelta.max.days * SECONDS_PER_DAY + timedelta.max.seconds


def _check_int(name: str, value: object) -> int:
    # bool is an int subclass but never a meaningful time value
    if isinstance(value, bool) or not isinstance(value, int):
        raise DurationError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise DurationError(f"{name} must be non-negative, got {value}")
    return value


@dataclass(frozen=True)
class Duration:
    """Non-negative elapsed time.

    Attributes:
        seconds: Whole seconds, 0 to MAX_SECONDS.
        nanos: Sub-second remainder in nanoseconds, 0 to 999_999_999.

    """

    seconds: int = 0
    nanos: int = 0

    def __post_init__(self) -> None:
        _check_int("seconds", self.seconds)
        _check_int("nanos", self.nanos)
        if self.seconds > MAX_SECONDS:
            raise DurationError(f"seconds exceeds {MAX_SECONDS}, got {self.seconds}")
        if self.nanos >= NANOS_PER_SECOND:
            raise DurationError(f"nanos must be below {NANOS_PER_SECOND}, got {self.nanos}")

    @classmethod
    def from_secs(cls, seconds: int) -> Duration:
        return cls(seconds=seconds)

    @classmethod
    def from_millis(cls, millis: int) -> Duration:
        return cls.from_nanos(_check_int("millis", millis) * NANOS_PER_MILLI)

    @classmethod
    def from_micros(cls, micros: int) -> Duration:
        return cls.from_nanos(_check_int("micros", micros) * NANOS_PER_MICRO)

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        seconds, remainder = divmod(_check_int("nanos", nanos), NANOS_PER_SECOND)
        return cls(seconds=seconds, nanos=remainder)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        """Build a Duration from a timedelta (microsecond precision).

        Raises:
            DurationError: If the timedelta is negative.

        """
        if delta < timedelta(0):
            raise DurationError(f"timedelta must be non-negative, got {delta}")
        # timedelta normalizes to days/seconds/microseconds, all non-negative here
        seconds = delta.days * SECONDS_PER_DAY + delta.seconds
        return cls(seconds=seconds, nanos=delta.microseconds * NANOS_PER_MICRO)

    @property
    def subsec_millis(self) -> int:
        """Whole milliseconds in the sub-second part."""
        return self.nanos // NANOS_PER_MILLI

    @property
    def subsec_micros(self) -> int:
        """Whole microseconds in the sub-second part."""
        return self.nanos // NANOS_PER_MICRO

    def as_nanos(self) -> int:
        """Total length in nanoseconds."""
        return self.seconds * NANOS_PER_SECOND + self.nanos

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating below microseconds.

        Raises:
            DurationError: If seconds exceed what a timedelta can hold
                (about 2.7 million years).

        """
        if self.seconds > MAX_TIMEDELTA_SECONDS:
            raise DurationError(
                f"Duration of {self.seconds}s exceeds the timedelta maximum "
                f"of {MAX_TIMEDELTA_SECONDS}s"
            )
        return timedelta(seconds=self.seconds, microseconds=self.subsec_micros)


def as_duration(value: Duration | timedelta | int) -> Duration:
    """Coerce a supported value into a Duration.

    Args:
        value: A Duration, a non-negative timedelta, or a non-negative int
            of whole seconds.

    Returns:
        The equivalent Duration (the same object if already a Duration).

    Raises:
        DurationError: If the value is negative or of an unsupported type.

    Examples:
        >>> as_duration(184)
        Duration(seconds=184, nanos=0)
        >>> as_duration(timedelta(milliseconds=1500))
        Duration(seconds=1, nanos=500000000)

    """
    if isinstance(value, Duration):
        return value
    if isinstance(value, timedelta):
        return Duration.from_timedelta(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Duration.from_secs(value)
    raise DurationError(
        f"Cannot convert {type(value).__name__} to Duration; "
        "expected Duration, timedelta or int seconds"
    )
