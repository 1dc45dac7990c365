"""Duration decomposition and rendering.

A duration is broken into one slot per profile unit by greedy mixed-radix
extraction, then rendered in one of two modes:

- humanize: only non-zero slots, e.g. "1h 1m 12s"
- robotize: every slot including zeros, e.g. "0d 1h 1m 12s 0ms"

Usage:
    from eternity import humanize, robotize

    humanize(3672)                      # '1h 1m 12s'
    robotize(21)                        # '0d 0h 0m 21s 0ms'
    humanize(Duration.from_millis(2134), "short")   # '2s 134ms'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from eternity.core.config import get_config
from eternity.core.types import DurationLike, ProfileRef
from eternity.formatting.duration import Duration, as_duration
from eternity.formatting.profiles import Profile, resolve_profile
from eternity.formatting.units import NANOS_PER_SECOND, Unit

logger = logging.getLogger(__name__)

__all__ = [
    "Decomposition",
    "Slot",
    "decompose",
    "humanize",
    "robotize",
    "zero_token",
]


@dataclass(frozen=True)
class Slot:
    """Decomposition result for a single unit.

    Attributes:
        suffix: Unit suffix.
        count: Number of whole units extracted (0 for an absent slot).
        interval: Unit interval, in seconds or nanoseconds by tier.
        fractional: True if the unit belongs to the sub-second tier.

    """

    suffix: str
    count: int
    interval: int
    fractional: bool = False

    @property
    def present(self) -> bool:
        return self.count > 0

    @property
    def nanos(self) -> int:
        """Span covered by this slot, in nanoseconds."""
        scale = 1 if self.fractional else NANOS_PER_SECOND
        return self.count * self.interval * scale

    def render(self) -> str:
        return f"{self.count}{self.suffix}"


@dataclass(frozen=True)
class Decomposition:
    """All slots for one duration under one profile.

    Attributes:
        profile: Profile used for the decomposition.
        slots: One slot per profile unit, in profile order.
        remainder_nanos: Part of the input no slot accounts for: whole
            seconds the profile discards, the sub-second part it discards,
            or nanoseconds below its smallest fractional unit.

    """

    profile: Profile
    slots: tuple[Slot, ...]
    remainder_nanos: int = 0

    @property
    def present(self) -> tuple[Slot, ...]:
        return tuple(s for s in self.slots if s.present)

    def total_nanos(self) -> int:
        """Reconstruct the input length from slots and remainder."""
        return sum(s.nanos for s in self.slots) + self.remainder_nanos


def _extract(accum: int, units: tuple[Unit, ...], fractional: bool) -> tuple[list[Slot], int]:
    slots: list[Slot] = []
    for unit in units:
        count = accum // unit.interval
        if count > 0:
            accum -= count * unit.interval
        slots.append(Slot(unit.suffix, count, unit.interval, fractional))
    return slots, accum


def decompose(duration: DurationLike, profile: ProfileRef | None = None) -> Decomposition:
    """Split a duration into one slot per unit of profile.

    Each tier is decomposed greedily from its largest unit down; the largest
    unit absorbs any overflow (the "medium" profile reports 25 hours as
    "25h"). Whole units read the seconds field and fractional units read the
    nanoseconds field. A field without units in the profile goes entirely to
    the remainder.

    Args:
        duration: Value to decompose (anything as_duration accepts).
        profile: Profile or registered profile name; defaults to the
            configured default profile.

    Returns:
        Decomposition with slots in profile order.

    Examples:
        >>> [s.render() for s in decompose(184).slots]
        ['0d', '0h', '3m', '4s', '0ms']

    """
    dur: Duration = as_duration(duration)
    prof = resolve_profile(profile if profile is not None else get_config().default_profile)

    whole, seconds_left = _extract(dur.seconds, prof.whole_units, fractional=False)
    frac, nanos_left = _extract(dur.nanos, prof.fractional_units, fractional=True)

    if not prof.whole_units and dur.seconds:
        logger.debug("Profile %s discards %d whole seconds", prof.name, dur.seconds)

    return Decomposition(
        profile=prof,
        slots=tuple(whole + frac),
        remainder_nanos=seconds_left * NANOS_PER_SECOND + nanos_left,
    )


def zero_token(profile: ProfileRef) -> str:
    """Canonical humanize output for a zero duration, e.g. "0ms" for full."""
    return f"0{resolve_profile(profile).smallest_unit.suffix}"


def humanize(
    duration: DurationLike,
    profile: ProfileRef | None = None,
    *,
    zero: str | None = None,
) -> str:
    """Format a duration omitting zero-valued units.

    Args:
        duration: Value to format (Duration, timedelta or int seconds).
        profile: Profile or profile name; defaults to the configured
            default profile ("full" unless configured otherwise).
        zero: Output when every slot is zero. None uses the configured
            zero token, falling back to the profile's canonical token
            ("0" plus its smallest suffix). Pass "" for an empty string.

    Returns:
        Space-separated non-zero components in profile order.

    Examples:
        >>> humanize(21)
        '21s'
        >>> humanize(90072)
        '1d 1h 1m 12s'
        >>> humanize(90072, "medium")
        '25h 1m 12s'
        >>> humanize(0)
        '0ms'

    """
    config = get_config()
    decomposition = decompose(duration, profile)
    tokens = [s.render() for s in decomposition.present]
    if tokens:
        return " ".join(tokens)
    if zero is None:
        zero = config.zero_token
    if zero is None:
        zero = zero_token(decomposition.profile)
    return zero


def robotize(duration: DurationLike, profile: ProfileRef | None = None) -> str:
    """Format a duration with every unit of the profile, zeros included.

    The output always has exactly one token per profile unit, which makes it
    suitable for parsing and aligned columns.

    Examples:
        >>> robotize(21)
        '0d 0h 0m 21s 0ms'
        >>> robotize(Duration.from_millis(2134), "short")
        '0m 2s 134ms'

    """
    return " ".join(s.render() for s in decompose(duration, profile).slots)
