"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from factfetch_project.settings import config
from factfetch_project.settings.config import DEFAULT_FACT_SOURCE_URL, AppSettings
from factfetch_project.settings.logging import LOGGING, build_logging_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "FACTFETCH_FACT_SOURCE_URL",
        "FACT_SOURCE_URL",
        "FACTFETCH_DISPLAY_DELAY_MS",
        "FACTFETCH_TIMEOUT_SECONDS",
        "FACTFETCH_ENV_FILE",
        "POSTHOG_PROJECT_API_KEY",
        "FACTFETCH_POSTHOG_PROJECT_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


def test_defaults():
    settings = AppSettings(_env_file=None)

    assert settings.fact_source_url == DEFAULT_FACT_SOURCE_URL
    assert settings.display_delay_ms == 300
    assert settings.display_delay_seconds == 0.3
    assert settings.timeout_seconds is None
    assert settings.posthog_project_api_key is None


def test_prefixed_environment_variables(monkeypatch):
    monkeypatch.setenv("FACTFETCH_FACT_SOURCE_URL", "https://facts.example.com/funfact")
    monkeypatch.setenv("FACTFETCH_DISPLAY_DELAY_MS", "0")
    monkeypatch.setenv("FACTFETCH_TIMEOUT_SECONDS", "4")

    settings = AppSettings(_env_file=None)

    assert settings.fact_source_url == "https://facts.example.com/funfact"
    assert settings.display_delay_ms == 0
    assert settings.timeout_seconds == 4.0


def test_unprefixed_aliases(monkeypatch):
    monkeypatch.setenv("FACT_SOURCE_URL", "https://alias.example.com/fact")
    monkeypatch.setenv("POSTHOG_PROJECT_API_KEY", "phc_test")

    settings = AppSettings(_env_file=None)

    assert settings.fact_source_url == "https://alias.example.com/fact"
    assert settings.posthog_project_api_key == "phc_test"


def test_blank_timeout_means_transport_default(monkeypatch):
    monkeypatch.setenv("FACTFETCH_TIMEOUT_SECONDS", "")

    assert AppSettings(_env_file=None).timeout_seconds is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"display_delay_ms": -1},
        {"timeout_seconds": 0},
        {"fact_source_url": "   "},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, **overrides)


def test_get_settings_reads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("FACTFETCH_FACT_SOURCE_URL=https://dotenv.example.com/fact\n")

    settings = config.get_settings(str(env_file))

    assert settings.fact_source_url == "https://dotenv.example.com/fact"


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_debug_logging_config_is_verbose():
    debug_config = build_logging_config(debug=True)

    assert debug_config["handlers"]["console"]["formatter"] == "verbose"
    assert debug_config["loggers"]["apps.factfetch"]["level"] == "DEBUG"
    assert LOGGING["loggers"]["apps.factfetch"]["level"] == "INFO"
    assert debug_config["root"]["level"] == "DEBUG"
