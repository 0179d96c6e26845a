"""Request lifecycle controller for fetching a fun fact."""

from __future__ import annotations

import asyncio
import enum
import logging
import time
from typing import Any, Optional

from apps.analytics.services import (
    FETCH_FAILED_EVENT,
    FETCH_SUCCEEDED_EVENT,
    AnalyticsEvent,
    PosthogClient,
)
from apps.factfetch.services.fact_source import (
    FactFetchError,
    FactSourceClient,
    HttpStatusError,
)
from apps.factfetch.surfaces import FULL_OPACITY, DisplaySurface, TriggerSurface

logger = logging.getLogger(__name__)

RESTING_LABEL = "Generate Fun Fact"
WORKING_LABEL = "Loading..."
PLACEHOLDER_TEXT = "Click the button below to get a fun cloud fact!"
ERROR_TEXT = "Oops! Unable to fetch a fact right now. Please try again later."
DIMMED_OPACITY = 0.5
DEFAULT_DISPLAY_DELAY = 0.3


class InteractionState(str, enum.Enum):
    IDLE = "idle"
    BUSY = "busy"


class FactFetchController:
    """Mediates between a trigger, the fact source and a display surface.

    Only one fetch cycle runs at a time. The busy guard at the top of
    ``request_fact`` and the disabled trigger surface both hold for the whole
    cycle, including the display delay on the success path.
    """

    def __init__(
        self,
        *,
        fact_source: FactSourceClient,
        trigger: TriggerSurface | None = None,
        display: DisplaySurface | None = None,
        display_delay: float = DEFAULT_DISPLAY_DELAY,
        analytics: Optional[PosthogClient] = None,
    ) -> None:
        if display_delay < 0:
            raise ValueError("display_delay must not be negative")
        self.fact_source = fact_source
        self.trigger_surface = trigger or TriggerSurface(RESTING_LABEL)
        self.display = display or DisplaySurface()
        self.display_delay = display_delay
        self.analytics = analytics
        self.last_error: FactFetchError | None = None
        self._state = InteractionState.IDLE
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state is InteractionState.BUSY

    def initialize(self) -> None:
        """Show the placeholder and a ready trigger. No network call is made."""

        self.display.update(text=PLACEHOLDER_TEXT, opacity=FULL_OPACITY)
        self.trigger_surface.update(enabled=True, label=RESTING_LABEL)

    def trigger(self) -> asyncio.Task[None] | None:
        """Start a fetch cycle from a host event callback.

        Returns the scheduled task, or ``None`` when the trigger was ignored
        because a cycle is already running.
        """

        if self.busy or not self.trigger_surface.enabled:
            logger.debug("Trigger ignored while a fact fetch is in flight")
            return None
        loop = asyncio.get_running_loop()
        self._enter_busy()
        self._task = loop.create_task(self._run_cycle())
        return self._task

    async def request_fact(self) -> None:
        """Run one fetch cycle; failures end up on the display, never raised."""
        if self.busy:
            logger.debug("request_fact() called while busy; ignoring")
            return

        self._enter_busy()
        await self._run_cycle()

    async def _run_cycle(self) -> None:
        started = time.monotonic()
        try:
            payload = await self.fact_source.fetch_fact()
            await asyncio.sleep(self.display_delay)
        except asyncio.CancelledError:
            logger.debug("Fact fetch cancelled; restoring idle state")
            self._restore_idle()
            raise
        except FactFetchError as exc:
            self._handle_failure(exc, started)
            return
        except Exception as exc:
            error = FactFetchError(f"{type(exc).__name__}: {exc}")
            error.__cause__ = exc
            self._handle_failure(error, started)
            return

        self.last_error = None
        self._restore_idle(payload.fact)
        logger.info("Fetched fact from %s", self.fact_source.endpoint)
        self._capture(FETCH_SUCCEEDED_EVENT, started)

    def _enter_busy(self) -> None:
        self._state = InteractionState.BUSY
        self.trigger_surface.update(enabled=False, label=WORKING_LABEL)
        self.display.update(opacity=DIMMED_OPACITY)

    def _restore_idle(self, text: str | None = None) -> None:
        # Trigger surface goes last: re-enabling it is what lets a new cycle in.
        self._state = InteractionState.IDLE
        self.display.update(text=text, opacity=FULL_OPACITY)
        self.trigger_surface.update(enabled=True, label=RESTING_LABEL)

    def _handle_failure(self, exc: FactFetchError, started: float) -> None:
        self.last_error = exc
        self._restore_idle(ERROR_TEXT)
        logger.error("Error fetching fact (%s): %s", exc.kind, exc.detail, exc_info=exc)

        properties: dict[str, Any] = {"error_kind": exc.kind}
        if isinstance(exc, HttpStatusError):
            properties["status_code"] = exc.status_code
        self._capture(FETCH_FAILED_EVENT, started, properties)

    def _capture(
        self,
        name: str,
        started: float,
        properties: dict[str, Any] | None = None,
    ) -> None:
        if self.analytics is None:
            return
        event_properties = dict(properties or {})
        event_properties["duration_ms"] = round((time.monotonic() - started) * 1000)
        self.analytics.capture(AnalyticsEvent(name=name, properties=event_properties))


__all__ = [
    "DEFAULT_DISPLAY_DELAY",
    "DIMMED_OPACITY",
    "ERROR_TEXT",
    "FactFetchController",
    "InteractionState",
    "PLACEHOLDER_TEXT",
    "RESTING_LABEL",
    "WORKING_LABEL",
]
