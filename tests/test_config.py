"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from iocbox.core import ServiceContainer
from iocbox.core.config import load_app_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Ensure each test sees a fresh settings instance."""

    load_app_settings.cache_clear()


def test_defaults_loaded_without_env_file() -> None:
    """Default values should be returned when no overrides are present."""

    settings = load_app_settings(include_environment=False)
    assert settings.container.thread_safe is True
    assert settings.container.log_resolutions is False
    assert settings.logging.level == "INFO"


def test_env_file_overrides(tmp_path: Path) -> None:
    """Values defined in an env file should override defaults."""

    env_file = tmp_path / "test.env"
    env_file.write_text(
        "IOCBOX_CONTAINER__THREAD_SAFE=false\nIOCBOX_LOGGING__LEVEL=DEBUG\n",
        encoding="utf-8",
    )

    settings = load_app_settings(env_file=env_file, include_environment=False)
    assert settings.container.thread_safe is False
    assert settings.logging.level == "DEBUG"


def test_environment_wins_over_env_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Process environment values should take precedence over the env file."""

    env_file = tmp_path / "test.env"
    env_file.write_text("IOCBOX_CONTAINER__LOG_RESOLUTIONS=false\n", encoding="utf-8")
    monkeypatch.setenv("IOCBOX_CONTAINER__LOG_RESOLUTIONS", "TRUE")

    settings = load_app_settings(env_file=env_file)
    assert settings.container.log_resolutions is True


def test_container_built_from_settings() -> None:
    """from_settings should build a working container from loaded settings."""

    settings = load_app_settings(include_environment=False)
    container = ServiceContainer.from_settings(settings.container)

    container.fix("answer", lambda params: 42)
    assert container.get("answer") == 42
