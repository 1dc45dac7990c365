"""eternity - format elapsed time as human- and machine-readable strings.

Example:
    >>> from eternity import humanize, robotize
    >>> humanize(3672)
    '1h 1m 12s'
    >>> robotize(21)
    '0d 0h 0m 21s 0ms'

"""

from importlib.metadata import PackageNotFoundError, version

from eternity.core.config import Config, get_config, load_config
from eternity.core.exceptions import (
    ConfigError,
    DurationError,
    EternityError,
    ProfileError,
    UnknownProfileError,
)
from eternity.formatting.duration import Duration, as_duration
from eternity.formatting.formatter import Decomposition, Slot, decompose, humanize, robotize
from eternity.formatting.profiles import Profile, get_profile, list_profiles, register_profile
from eternity.formatting.units import Unit

try:
    __version__ = version("eternity")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "Config",
    "ConfigError",
    "Decomposition",
    "Duration",
    "DurationError",
    "EternityError",
    "Profile",
    "ProfileError",
    "Slot",
    "Unit",
    "UnknownProfileError",
    "__version__",
    "as_duration",
    "decompose",
    "get_config",
    "get_profile",
    "humanize",
    "list_profiles",
    "load_config",
    "register_profile",
    "robotize",
]
