"""Pytest configuration and fixtures for eternity tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from eternity.core.config import CONFIG_ENV_VAR, _reset_config


@pytest.fixture(autouse=True)
def reset_config_singleton(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Reset config singleton and custom profiles before and after each test.

    Also hides any real ~/.eternity/config.yaml and ETERNITY_CONFIG so tests
    never pick up the developer's configuration.
    """
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(
        "eternity.core.config.GLOBAL_CONFIG_PATH", tmp_path / "no-such-config.yaml"
    )
    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Create a config file writer for temporary directory.

    Returns:
        A function that writes content to a file and returns the path.

    """

    def _write(content: str, filename: str = "eternity.yaml") -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write
