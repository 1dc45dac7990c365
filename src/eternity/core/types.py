"""Core type definitions for eternity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, TypeAlias

if TYPE_CHECKING:
    from datetime import timedelta

    from eternity.formatting.duration import Duration
    from eternity.formatting.profiles import Profile

# Which Duration field(s) a profile reads
# - seconds: whole seconds only, the sub-second part is discarded
# - subsec: sub-second nanoseconds only, whole seconds are discarded
# - both: whole seconds followed by the sub-second part
SourceField: TypeAlias = Literal["seconds", "subsec", "both"]

# Inputs accepted wherever a Duration is expected (int means whole seconds)
DurationLike: TypeAlias = "Duration | timedelta | int"

# A Profile instance or the name of a registered profile
ProfileRef: TypeAlias = "Profile | str"

# Base unit of CLI input values
InputUnit: TypeAlias = Literal["s", "ms", "us", "ns"]
