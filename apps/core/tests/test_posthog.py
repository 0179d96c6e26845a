"""Tests for the shared PostHog client helpers."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from apps.core import posthog as posthog_helpers
from factfetch_project.settings import AppSettings


@pytest.fixture(autouse=True)
def _reset_client():
    posthog_helpers.shutdown_posthog()
    yield
    posthog_helpers.shutdown_posthog()


def test_configure_posthog_without_key_returns_none():
    settings = AppSettings(_env_file=None, posthog_project_api_key=None)

    assert posthog_helpers.configure_posthog(settings, force=True) is None


@patch("apps.core.posthog.Posthog")
def test_configure_posthog_with_key(mock_posthog):
    settings = AppSettings(
        _env_file=None,
        posthog_project_api_key="phc_test",
        posthog_host="https://eu.i.posthog.com",
        posthog_disabled=True,
    )

    client = posthog_helpers.configure_posthog(settings, force=True)

    mock_posthog.assert_called_once_with("phc_test", host="https://eu.i.posthog.com")
    assert client is mock_posthog.return_value
    assert client.disabled is True


@patch("apps.core.posthog.Posthog")
def test_configure_posthog_is_cached_until_forced(mock_posthog):
    settings = AppSettings(_env_file=None, posthog_project_api_key="phc_test")

    first = posthog_helpers.configure_posthog(settings)
    second = posthog_helpers.configure_posthog(settings)

    assert first is second
    mock_posthog.assert_called_once()


@patch("apps.core.posthog.Posthog")
def test_shutdown_flushes_client(mock_posthog):
    settings = AppSettings(_env_file=None, posthog_project_api_key="phc_test")
    client = posthog_helpers.configure_posthog(settings, force=True)

    posthog_helpers.shutdown_posthog()

    client.shutdown.assert_called_once()
