"""Duration decomposition and rendering.

Submodules:
- units: Unit descriptor and the whole/sub-second tiers
- duration: Duration value type
- profiles: Profile descriptor, built-in profiles and registry
- formatter: decompose(), humanize(), robotize()

The formatter reads eternity.core.config, which in turn needs profiles, so
it is imported from eternity.formatting.formatter (or the top-level
eternity package) rather than re-exported here.
"""

from eternity.formatting.duration import Duration, as_duration
from eternity.formatting.profiles import (
    BUILTIN_PROFILES,
    Profile,
    get_profile,
    list_profiles,
    register_profile,
    resolve_profile,
)
from eternity.formatting.units import FRACTIONAL_UNITS, WHOLE_UNITS, Unit, unit_by_suffix

__all__ = [
    "BUILTIN_PROFILES",
    "FRACTIONAL_UNITS",
    "WHOLE_UNITS",
    "Duration",
    "Profile",
    "Unit",
    "as_duration",
    "get_profile",
    "list_profiles",
    "register_profile",
    "resolve_profile",
    "unit_by_suffix",
]
