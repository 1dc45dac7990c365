"""Time unit descriptors and the two unit tiers.

Units are grouped into tiers that share a source field of a Duration:

- WHOLE_UNITS decompose whole seconds; intervals are in seconds.
- FRACTIONAL_UNITS decompose the sub-second remainder; intervals are in
  nanoseconds.

Both tiers are declared in strictly descending interval order, and each
interval evenly divides the one above it, so greedy extraction is exact.

Example:
    >>> from eternity.formatting.units import unit_by_suffix
    >>> unit_by_suffix("h")
    Unit(suffix='h', interval=3600)

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from eternity.core.exceptions import ProfileError

__all__ = [
    "FRACTIONAL_UNITS",
    "NANOS_PER_MICRO",
    "NANOS_PER_MILLI",
    "NANOS_PER_SECOND",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "WHOLE_UNITS",
    "Unit",
    "is_fractional",
    "is_whole",
    "unit_by_suffix",
]

# Conversion constants
SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_HOUR: Final[int] = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: Final[int] = 24 * SECONDS_PER_HOUR
NANOS_PER_MICRO: Final[int] = 1_000
NANOS_PER_MILLI: Final[int] = 1_000 * NANOS_PER_MICRO
NANOS_PER_SECOND: Final[int] = 1_000 * NANOS_PER_MILLI


@dataclass(frozen=True)
class Unit:
    """A single time unit.

    Attributes:
        suffix: Short label appended to the count (e.g., "h", "ms").
        interval: Magnitude of the unit in its tier's base (seconds for
            whole units, nanoseconds for fractional units).

    """

    suffix: str
    interval: int

    def __post_init__(self) -> None:
        if not self.suffix:
            raise ProfileError("Unit suffix must not be empty")
        if isinstance(self.interval, bool) or not isinstance(self.interval, int):
            raise ProfileError(f"Unit {self.suffix!r} interval must be an int")
        if self.interval <= 0:
            raise ProfileError(
                f"Unit {self.suffix!r} interval must be positive, got {self.interval}"
            )


WHOLE_UNITS: Final[tuple[Unit, ...]] = (
    Unit("d", SECONDS_PER_DAY),
    Unit("h", SECONDS_PER_HOUR),
    Unit("m", SECONDS_PER_MINUTE),
    Unit("s", 1),
)

FRACTIONAL_UNITS: Final[tuple[Unit, ...]] = (
    Unit("ms", NANOS_PER_MILLI),
    Unit("us", NANOS_PER_MICRO),
    Unit("ns", 1),
)

_BY_SUFFIX: Final[dict[str, Unit]] = {u.suffix: u for u in WHOLE_UNITS + FRACTIONAL_UNITS}


def is_whole(unit: Unit) -> bool:
    """Check whether unit belongs to the whole-seconds tier."""
    return unit in WHOLE_UNITS


def is_fractional(unit: Unit) -> bool:
    """Check whether unit belongs to the sub-second tier."""
    return unit in FRACTIONAL_UNITS


def unit_by_suffix(suffix: str) -> Unit:
    """Look up a built-in unit by its suffix.

    Args:
        suffix: Unit suffix, one of d, h, m, s, ms, us, ns.

    Returns:
        The matching Unit from WHOLE_UNITS or FRACTIONAL_UNITS.

    Raises:
        ProfileError: If no unit has that suffix.

    """
    try:
        return _BY_SUFFIX[suffix]
    except KeyError:
        raise ProfileError(
            f"Unknown unit suffix: {suffix!r}. Valid suffixes: {', '.join(_BY_SUFFIX)}"
        ) from None
