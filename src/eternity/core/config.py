"""Configuration models and loading for eternity.

Configuration is optional. Without it, formatting uses the "full" profile
and the canonical zero token. A YAML file can change those defaults and
declare custom profiles by unit suffix:

    default_profile: clock
    zero_token: "-"
    profiles:
      - name: clock
        units: [h, m, s]
        description: Wall-clock style

Usage:
    from eternity.core.config import get_config, load_config

    load_config(Path("eternity.yaml"))   # validates, registers profiles
    get_config().default_profile         # 'clock'
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Final, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from eternity.core.exceptions import ConfigError, ProfileError
from eternity.formatting.profiles import (
    BUILTIN_PROFILES,
    DEFAULT_PROFILE,
    Profile,
    register_profile,
    unregister_custom_profiles,
)
from eternity.formatting.units import is_whole, unit_by_suffix

logger = logging.getLogger(__name__)

__all__ = [
    "CONFIG_ENV_VAR",
    "GLOBAL_CONFIG_PATH",
    "MAX_CONFIG_SIZE",
    "Config",
    "ProfileConfig",
    "get_config",
    "load_config",
    "reload_config",
]

CONFIG_ENV_VAR: Final[str] = "ETERNITY_CONFIG"
GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".eternity" / "config.yaml"
# Config files are tiny; anything larger is almost certainly the wrong file
MAX_CONFIG_SIZE: Final[int] = 64 * 1024


class ProfileConfig(BaseModel):
    """Custom profile declared in the config file.

    Attributes:
        name: Profile name, must not collide with a built-in profile.
        units: Unit suffixes from largest to smallest, whole units first
            (e.g., ["h", "m", "s", "ms"]).
        description: Shown by `eternity profiles`.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, description="Profile name")
    units: list[str] = Field(min_length=1, description="Unit suffixes, largest first")
    description: str = Field(default="", description="Human-readable summary")

    @field_validator("name", mode="after")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names reserved by built-in profiles."""
        if v in BUILTIN_PROFILES:
            raise ValueError(f"profile name {v!r} is reserved by a built-in profile")
        return v

    @field_validator("units", mode="after")
    @classmethod
    def validate_units(cls, v: list[str]) -> list[str]:
        """Ensure suffixes are known and whole units precede fractional ones."""
        seen_fractional = False
        for suffix in v:
            unit = unit_by_suffix(suffix)
            if is_whole(unit):
                if seen_fractional:
                    raise ValueError(f"whole unit {suffix!r} must come before sub-second units")
            else:
                seen_fractional = True
        return v

    @model_validator(mode="after")
    def validate_profile(self) -> Self:
        """Build the profile once so ordering errors surface at load time."""
        self.to_profile()
        return self

    def to_profile(self) -> Profile:
        units = [unit_by_suffix(s) for s in self.units]
        return Profile(
            name=self.name,
            whole_units=tuple(u for u in units if is_whole(u)),
            fractional_units=tuple(u for u in units if not is_whole(u)),
            description=self.description,
        )


class Config(BaseModel):
    """Top-level eternity configuration.

    Attributes:
        default_profile: Profile used when a call does not name one.
        zero_token: humanize output for a zero duration; None means the
            profile's canonical token (e.g., "0ms").
        profiles: Custom profiles to register.

    default_profile is validated against the file alone: it must name a
    built-in profile or one declared under profiles. Profiles registered
    in code with register_profile() cannot be the configured default;
    pass them to humanize/robotize explicitly instead.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_profile: str = Field(default=DEFAULT_PROFILE, min_length=1)
    zero_token: str | None = Field(default=None)
    profiles: list[ProfileConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_profile_refs(self) -> Self:
        """Check profile names are unique and default_profile exists."""
        names = [p.name for p in self.profiles]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate profile names: {', '.join(duplicates)}")
        known = set(BUILTIN_PROFILES) | set(names)
        if self.default_profile not in known:
            raise ValueError(
                f"default_profile {self.default_profile!r} is not defined. "
                f"It must be a built-in profile or one declared under profiles. "
                f"Available: {', '.join(sorted(known))}"
            )
        return self


# Singleton; None until load_config() runs
_config: Config | None = None
# Names of profiles registered from the active config file
_config_profile_names: set[str] = set()
_DEFAULT_CONFIG: Final[Config] = Config()
_config_path: Path | None = None


def _resolve_config_path(path: Path | None) -> Path | None:
    if path is not None:
        return path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    if GLOBAL_CONFIG_PATH.is_file():
        return GLOBAL_CONFIG_PATH
    return None


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    size = path.stat().st_size
    if size > MAX_CONFIG_SIZE:
        raise ConfigError(f"Config file {path} is too large ({size} bytes, max {MAX_CONFIG_SIZE})")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _apply(config: Config, path: Path | None) -> Config:
    global _config, _config_path
    # Profiles registered in code stay; only the previous file's profiles go
    unregister_custom_profiles(_config_profile_names)
    _config_profile_names.clear()
    try:
        for profile_config in config.profiles:
            register_profile(profile_config.to_profile(), replace=True)
            _config_profile_names.add(profile_config.name)
    except ProfileError as e:
        raise ConfigError(str(e)) from e
    _config = config
    _config_path = path
    return config


def load_config(path: Path | None = None) -> Config:
    """Load, validate and activate configuration.

    The file is chosen in order: the path argument, the ETERNITY_CONFIG
    environment variable, then ~/.eternity/config.yaml if it exists. With
    no file, defaults are activated.

    Custom profiles from the file replace those loaded from an earlier
    file. Profiles registered in code with register_profile() are kept,
    unless the file declares a profile with the same name.

    Args:
        path: Explicit config file path.

    Returns:
        The active Config.

    Raises:
        ConfigError: If the file is missing, too large, not valid YAML,
            not a mapping, or fails validation.

    """
    resolved = _resolve_config_path(path)
    if resolved is None:
        logger.debug("No config file found, using defaults")
        return _apply(Config(), None)

    data = _read_yaml(resolved)
    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {resolved}:\n{e}") from e

    logger.debug(
        "Loaded config from %s (default_profile=%s, %d custom profiles)",
        resolved,
        config.default_profile,
        len(config.profiles),
    )
    return _apply(config, resolved)


def get_config() -> Config:
    """Return the active configuration, or defaults if none was loaded."""
    if _config is None:
        return _DEFAULT_CONFIG
    return _config


def reload_config() -> Config:
    """Reload configuration from the path used by the last load_config()."""
    return load_config(_config_path)


def _reset_config() -> None:
    """Reset the singleton and drop custom profiles. For tests."""
    global _config, _config_path
    _config = None
    _config_path = None
    _config_profile_names.clear()
    unregister_custom_profiles()
