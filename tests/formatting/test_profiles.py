"""Tests for profile declaration, validation and the profile registry."""

import pytest

from eternity.core.exceptions import ProfileError, UnknownProfileError
from eternity.formatting.profiles import (
    BUILTIN_PROFILES,
    FULL,
    MEDIUM,
    NANO,
    PRECISE,
    SHORT,
    Profile,
    get_profile,
    list_profiles,
    register_profile,
    resolve_profile,
    unregister_custom_profiles,
)
from eternity.formatting.units import Unit, unit_by_suffix


def _units(*suffixes: str) -> tuple[Unit, ...]:
    return tuple(unit_by_suffix(s) for s in suffixes)


class TestBuiltinProfiles:
    """Test the built-in granularities."""

    @pytest.mark.parametrize(
        ("profile", "suffixes", "source"),
        [
            (FULL, ["d", "h", "m", "s", "ms"], "both"),
            (MEDIUM, ["h", "m", "s"], "seconds"),
            (SHORT, ["m", "s", "ms"], "both"),
            (NANO, ["ms", "us", "ns"], "subsec"),
            (PRECISE, ["d", "h", "m", "s", "ms", "us", "ns"], "both"),
        ],
    )
    def test_units_and_source(self, profile: Profile, suffixes: list[str], source: str) -> None:
        assert profile.suffixes == suffixes
        assert profile.source == source

    def test_builtin_names(self) -> None:
        assert set(BUILTIN_PROFILES) == {"full", "medium", "short", "nano", "precise"}

    def test_smallest_unit(self) -> None:
        assert FULL.smallest_unit.suffix == "ms"
        assert MEDIUM.smallest_unit.suffix == "s"
        assert NANO.smallest_unit.suffix == "ns"

    def test_profiles_are_hashable(self) -> None:
        assert len({FULL, MEDIUM, FULL}) == 2


class TestProfileValidation:
    """Test that malformed unit tables fail at construction."""

    def test_empty_profile_rejected(self) -> None:
        with pytest.raises(ProfileError, match="at least one unit"):
            Profile(name="empty")

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ProfileError, match="name"):
            Profile(name="", whole_units=_units("s"))

    def test_ascending_whole_units_rejected(self) -> None:
        with pytest.raises(ProfileError, match="strictly descending"):
            Profile(name="bad", whole_units=_units("s", "m"))

    def test_equal_intervals_rejected(self) -> None:
        with pytest.raises(ProfileError, match="strictly descending"):
            Profile(name="bad", whole_units=(Unit("m", 60), Unit("min", 60)))

    def test_ascending_fractional_units_rejected(self) -> None:
        with pytest.raises(ProfileError, match="strictly descending"):
            Profile(name="bad", fractional_units=_units("ns", "ms"))

    def test_fractional_unit_of_a_second_rejected(self) -> None:
        with pytest.raises(ProfileError, match="shorter than one second"):
            Profile(name="bad", fractional_units=(Unit("cs", 1_000_000_000),))

    def test_duplicate_suffix_rejected(self) -> None:
        with pytest.raises(ProfileError, match="duplicate"):
            Profile(
                name="bad",
                whole_units=(Unit("m", 60),),
                fractional_units=(Unit("m", 1_000_000),),
            )

    def test_non_unit_rejected(self) -> None:
        with pytest.raises(ProfileError, match="expected Unit"):
            Profile(name="bad", whole_units=("h", "m"))  # type: ignore[arg-type]

    def test_lists_are_stored_as_tuples(self) -> None:
        profile = Profile(name="hm", whole_units=list(_units("h", "m")))  # type: ignore[arg-type]
        assert profile.whole_units == _units("h", "m")

    def test_custom_units_allowed(self) -> None:
        """Profiles are not limited to the built-in tiers."""
        weeks = Profile(name="weeks", whole_units=(Unit("w", 604_800), Unit("d", 86_400)))
        assert weeks.suffixes == ["w", "d"]


class TestRegistry:
    """Test registration and lookup by name."""

    def test_get_builtin(self) -> None:
        assert get_profile("short") is SHORT

    def test_unknown_profile(self) -> None:
        with pytest.raises(UnknownProfileError) as exc_info:
            get_profile("hourly")
        assert exc_info.value.name == "hourly"
        assert "full" in exc_info.value.available
        assert "Available profiles" in str(exc_info.value)

    def test_unknown_profile_is_profile_error(self) -> None:
        with pytest.raises(ProfileError):
            get_profile("hourly")

    def test_register_and_get(self) -> None:
        profile = register_profile(Profile(name="hm", whole_units=_units("h", "m")))
        assert get_profile("hm") is profile
        assert list_profiles()[-1] is profile

    def test_register_duplicate_rejected(self) -> None:
        register_profile(Profile(name="hm", whole_units=_units("h", "m")))
        with pytest.raises(ProfileError, match="already registered"):
            register_profile(Profile(name="hm", whole_units=_units("h")))

    def test_register_replace(self) -> None:
        register_profile(Profile(name="hm", whole_units=_units("h", "m")))
        replacement = Profile(name="hm", whole_units=_units("h"))
        register_profile(replacement, replace=True)
        assert get_profile("hm") is replacement

    def test_builtin_cannot_be_replaced(self) -> None:
        with pytest.raises(ProfileError, match="built-in"):
            register_profile(Profile(name="full", whole_units=_units("s")), replace=True)

    def test_unregister(self) -> None:
        register_profile(Profile(name="hm", whole_units=_units("h", "m")))
        register_profile(Profile(name="ms", whole_units=_units("m", "s")))
        unregister_custom_profiles(["hm"])
        assert [p.name for p in list_profiles()][-1] == "ms"
        unregister_custom_profiles()
        assert list_profiles() == list(BUILTIN_PROFILES.values())

    def test_resolve_profile_instance(self) -> None:
        custom = Profile(name="unregistered", whole_units=_units("s"))
        assert resolve_profile(custom) is custom

    def test_resolve_profile_name(self) -> None:
        assert resolve_profile("nano") is NANO
