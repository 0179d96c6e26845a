"""Tests for analytics services."""

from unittest.mock import MagicMock

from apps.analytics.services import (
    FETCH_SUCCEEDED_EVENT,
    AnalyticsEvent,
    PosthogClient,
    build_analytics_client,
)


def test_analytics_event_dataclass():
    event = AnalyticsEvent(name="test", properties={"key": "value"})
    assert event.properties["key"] == "value"
    assert AnalyticsEvent(name="empty").properties == {}


def test_capture_forwards_to_posthog():
    posthog = MagicMock()
    client = PosthogClient(posthog, distinct_id="terminal-1")

    client.capture(AnalyticsEvent(name=FETCH_SUCCEEDED_EVENT, properties={"duration_ms": 12}))

    posthog.capture.assert_called_once_with(
        distinct_id="terminal-1",
        event=FETCH_SUCCEEDED_EVENT,
        properties={"duration_ms": 12},
    )


def test_capture_errors_are_logged_not_raised(caplog):
    posthog = MagicMock()
    posthog.capture.side_effect = RuntimeError("network down")
    client = PosthogClient(posthog, distinct_id="terminal-1")

    client.capture(AnalyticsEvent(name="anything"))

    assert "Failed to capture analytics event anything" in caplog.text


def test_build_analytics_client_requires_posthog():
    assert build_analytics_client(None, distinct_id="x") is None
    assert isinstance(build_analytics_client(MagicMock(), distinct_id="x"), PosthogClient)
