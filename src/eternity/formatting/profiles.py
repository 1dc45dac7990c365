"""Formatting profiles: named selections of time units.

A Profile declares which units a duration is decomposed into. It draws a
run of units from the whole-seconds tier, the sub-second tier, or both, and
the tiers it uses determine which fields of a Duration are read. New
granularities are added by declaring a Profile, never by writing a new
formatting routine.

Built-in profiles:
    full     d h m s ms
    medium   h m s
    short    m s ms
    nano     ms us ns   (sub-second part only)
    precise  d h m s ms us ns

Example:
    >>> from eternity.formatting.profiles import get_profile
    >>> [u.suffix for u in get_profile("short").units]
    ['m', 's', 'ms']

"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Final

from eternity.core.exceptions import ProfileError, UnknownProfileError
from eternity.core.types import ProfileRef, SourceField
from eternity.formatting.units import FRACTIONAL_UNITS, NANOS_PER_SECOND, WHOLE_UNITS, Unit

logger = logging.getLogger(__name__)

__all__ = [
    "BUILTIN_PROFILES",
    "DEFAULT_PROFILE",
    "FULL",
    "MEDIUM",
    "NANO",
    "PRECISE",
    "SHORT",
    "Profile",
    "get_profile",
    "list_profiles",
    "register_profile",
    "resolve_profile",
    "unregister_custom_profiles",
]


def _check_descending(name: str, tier: str, units: Sequence[Unit]) -> None:
    for upper, lower in zip(units, units[1:], strict=False):
        if lower.interval >= upper.interval:
            raise ProfileError(
                f"Profile {name!r}: {tier} units must be strictly descending in interval, "
                f"but {lower.suffix!r} ({lower.interval}) follows "
                f"{upper.suffix!r} ({upper.interval})"
            )


@dataclass(frozen=True)
class Profile:
    """A named, ordered selection of time units.

    Attributes:
        name: Registry name (e.g., "full").
        whole_units: Units decomposing whole seconds, intervals in seconds.
        fractional_units: Units decomposing the sub-second part, intervals
            in nanoseconds (each below one second).
        description: Human-readable summary shown by the CLI.

    Raises:
        ProfileError: If the profile declares no units, a tier is not
            strictly descending, suffixes repeat, or a fractional unit spans
            a second or more.

    """

    name: str
    whole_units: tuple[Unit, ...] = ()
    fractional_units: tuple[Unit, ...] = ()
    description: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        # Accept any sequence but store tuples so the profile stays hashable
        object.__setattr__(self, "whole_units", tuple(self.whole_units))
        object.__setattr__(self, "fractional_units", tuple(self.fractional_units))

        if not self.name:
            raise ProfileError("Profile name must not be empty")
        if not self.whole_units and not self.fractional_units:
            raise ProfileError(f"Profile {self.name!r} must declare at least one unit")
        for unit in self.units:
            if not isinstance(unit, Unit):
                raise ProfileError(
                    f"Profile {self.name!r}: expected Unit, got {type(unit).__name__}"
                )
        for unit in self.fractional_units:
            if unit.interval >= NANOS_PER_SECOND:
                raise ProfileError(
                    f"Profile {self.name!r}: fractional unit {unit.suffix!r} must be "
                    f"shorter than one second ({unit.interval}ns)"
                )
        _check_descending(self.name, "whole", self.whole_units)
        _check_descending(self.name, "fractional", self.fractional_units)

        suffixes = [u.suffix for u in self.units]
        if len(set(suffixes)) != len(suffixes):
            raise ProfileError(f"Profile {self.name!r}: duplicate unit suffixes {suffixes}")

    @property
    def units(self) -> tuple[Unit, ...]:
        """All units in slot order (whole tier first)."""
        return self.whole_units + self.fractional_units

    @property
    def smallest_unit(self) -> Unit:
        return self.units[-1]

    @property
    def source(self) -> SourceField:
        """Which Duration field(s) this profile reads."""
        if self.whole_units and self.fractional_units:
            return "both"
        if self.whole_units:
            return "seconds"
        return "subsec"

    @property
    def suffixes(self) -> list[str]:
        return [u.suffix for u in self.units]


# =============================================================================
# Built-in profiles
# =============================================================================

FULL: Final[Profile] = Profile(
    name="full",
    whole_units=WHOLE_UNITS,
    fractional_units=FRACTIONAL_UNITS[:1],
    description="Days to seconds plus milliseconds",
)
MEDIUM: Final[Profile] = Profile(
    name="medium",
    whole_units=WHOLE_UNITS[1:],
    description="Hours to seconds",
)
SHORT: Final[Profile] = Profile(
    name="short",
    whole_units=WHOLE_UNITS[2:],
    fractional_units=FRACTIONAL_UNITS[:1],
    description="Minutes and seconds plus milliseconds",
)
NANO: Final[Profile] = Profile(
    name="nano",
    fractional_units=FRACTIONAL_UNITS,
    description="Milliseconds to nanoseconds of the sub-second part",
)
PRECISE: Final[Profile] = Profile(
    name="precise",
    whole_units=WHOLE_UNITS,
    fractional_units=FRACTIONAL_UNITS,
    description="Days to nanoseconds",
)

BUILTIN_PROFILES: Final[dict[str, Profile]] = {
    p.name: p for p in (FULL, MEDIUM, SHORT, NANO, PRECISE)
}
DEFAULT_PROFILE: Final[str] = FULL.name

_custom_profiles: dict[str, Profile] = {}


# =============================================================================
# Registry
# =============================================================================


def register_profile(profile: Profile, *, replace: bool = False) -> Profile:
    """Register a custom profile so it can be referenced by name.

    Args:
        profile: Profile to register.
        replace: Overwrite an existing custom profile with the same name.

    Returns:
        The registered profile.

    Raises:
        ProfileError: If the name belongs to a built-in profile, or is
            already registered and replace is False.

    """
    if profile.name in BUILTIN_PROFILES:
        raise ProfileError(f"Cannot replace built-in profile {profile.name!r}")
    if profile.name in _custom_profiles and not replace:
        raise ProfileError(f"Profile {profile.name!r} is already registered")
    _custom_profiles[profile.name] = profile
    logger.debug("Registered profile %s: %s", profile.name, " ".join(profile.suffixes))
    return profile


def unregister_custom_profiles(names: Iterable[str] | None = None) -> None:
    """Remove custom profiles (all of them when names is None)."""
    if names is None:
        _custom_profiles.clear()
        return
    for name in names:
        _custom_profiles.pop(name, None)


def list_profiles() -> list[Profile]:
    """Return built-in profiles followed by custom ones, in registration order."""
    return [*BUILTIN_PROFILES.values(), *_custom_profiles.values()]


def get_profile(name: str) -> Profile:
    """Look up a registered profile by name.

    Raises:
        UnknownProfileError: If no profile has that name.

    """
    profile = BUILTIN_PROFILES.get(name) or _custom_profiles.get(name)
    if profile is None:
        raise UnknownProfileError(name, [p.name for p in list_profiles()])
    return profile


def resolve_profile(ref: ProfileRef) -> Profile:
    """Return ref itself if it is a Profile, otherwise look it up by name."""
    if isinstance(ref, Profile):
        return ref
    return get_profile(ref)
