"""Analytics service helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from posthog import Posthog

logger = logging.getLogger(__name__)

FETCH_SUCCEEDED_EVENT = "fact_fetch_succeeded"
FETCH_FAILED_EVENT = "fact_fetch_failed"


@dataclass
class AnalyticsEvent:
    """Basic container for analytics events."""

    name: str
    properties: dict[str, Any] = field(default_factory=dict)


class PosthogClient:
    """Proxy for PostHog interactions.

    Capture failures are logged and swallowed so that analytics can never
    disturb the caller's control flow.
    """

    def __init__(self, client: Posthog, *, distinct_id: str) -> None:
        self._client = client
        self.distinct_id = distinct_id

    def capture(self, event: AnalyticsEvent) -> None:
        try:
            self._client.capture(
                distinct_id=self.distinct_id,
                event=event.name,
                properties=dict(event.properties),
            )
        except Exception:
            logger.warning("Failed to capture analytics event %s", event.name, exc_info=True)


def build_analytics_client(
    client: Optional[Posthog],
    *,
    distinct_id: str,
) -> Optional[PosthogClient]:
    if client is None:
        return None
    return PosthogClient(client, distinct_id=distinct_id)


__all__ = [
    "AnalyticsEvent",
    "FETCH_FAILED_EVENT",
    "FETCH_SUCCEEDED_EVENT",
    "PosthogClient",
    "build_analytics_client",
]
