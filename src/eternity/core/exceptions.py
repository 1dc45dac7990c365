"""Exception hierarchy for eternity.

All library errors derive from EternityError so callers can catch a single
base class. Formatting itself never fails on valid input; every error here is
raised at construction or lookup time.
"""

from __future__ import annotations

from collections.abc import Iterable


class EternityError(Exception):
    """Base class for all eternity errors."""

    pass


class DurationError(EternityError, ValueError):
    """Invalid elapsed-time value.

    Raised when:
    - Seconds or nanoseconds are negative
    - Seconds exceed the unsigned 64-bit range
    - Nanoseconds fall outside [0, 999_999_999]
    - A value of an unsupported type is coerced to a Duration
    """

    pass


class ProfileError(EternityError, ValueError):
    """Malformed unit or profile definition.

    Raised when:
    - A profile declares no units at all
    - A tier's units are not strictly descending in interval
    - A unit belongs to the wrong tier or has an empty suffix
    - A profile name is registered twice
    """

    pass


class UnknownProfileError(ProfileError):
    """Profile name is not registered."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Unknown profile: {name!r}. Available profiles: {', '.join(self.available)}"
        )


class ConfigError(EternityError):
    """Configuration could not be loaded or validated."""

    pass
