"""PostHog configuration helpers."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Optional

from posthog import Posthog

from factfetch_project.settings import AppSettings, get_settings

logger = logging.getLogger(__name__)

_client: Optional[Posthog] = None
_configured = False
_lock = Lock()


def configure_posthog(
    settings: AppSettings | None = None,
    *,
    force: bool = False,
) -> Optional[Posthog]:
    """Initialize the shared PostHog client, or ``None`` when no key is configured."""

    global _client, _configured

    with _lock:
        if _configured and not force:
            return _client

        settings = settings or get_settings()
        api_key = settings.posthog_project_api_key
        if not api_key:
            logger.debug("PostHog API key not configured, analytics disabled")
            _client = None
            _configured = True
            return None

        client = Posthog(api_key, host=settings.posthog_host)

        if settings.posthog_debug:
            client.debug = True

        if settings.posthog_disabled:
            client.disabled = True

        logger.debug("PostHog client configured for %s", settings.posthog_host)
        _client = client
        _configured = True
        return _client


def get_posthog_client() -> Optional[Posthog]:
    """Return the shared PostHog client if configured."""

    return configure_posthog()


def shutdown_posthog() -> None:
    """Flush queued events and forget the shared client."""

    global _client, _configured

    with _lock:
        if _client is not None:
            _client.shutdown()
        _client = None
        _configured = False


__all__ = [
    "configure_posthog",
    "get_posthog_client",
    "shutdown_posthog",
]
