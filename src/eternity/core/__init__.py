"""Core module for eternity: exceptions, type aliases and configuration.

Configuration lives in eternity.core.config and is imported from there;
it depends on the formatting package, so it is not re-exported here.
"""

from eternity.core.exceptions import (
    ConfigError,
    DurationError,
    EternityError,
    ProfileError,
    UnknownProfileError,
)
from eternity.core.types import DurationLike, InputUnit, ProfileRef, SourceField

__all__ = [
    # Exceptions
    "ConfigError",
    "DurationError",
    "EternityError",
    "ProfileError",
    "UnknownProfileError",
    # Types
    "DurationLike",
    "InputUnit",
    "ProfileRef",
    "SourceField",
]
