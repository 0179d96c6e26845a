"""Terminal host: renders the surfaces and turns key presses into triggers."""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from typing import Callable, Optional, TextIO

import click

from apps.factfetch.controller import FactFetchController
from apps.factfetch.surfaces import DisplaySurface, TriggerSurface

logger = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"q", "quit", "exit"})
INSTRUCTIONS = "Press Enter to generate a fun fact, or q to quit."


class TerminalView:
    """Echoes surface changes to the terminal."""

    def __init__(self, *, echo: Callable[..., None] = click.echo) -> None:
        self._echo = echo
        self._last_display: Optional[tuple[str, bool]] = None
        self._last_trigger: Optional[tuple[bool, str]] = None

    def notice(self, message: str) -> None:
        self._echo(message)

    def attach(self, trigger: TriggerSurface, display: DisplaySurface) -> None:
        trigger.subscribe(self.render_trigger)
        display.subscribe(self.render_display)

    def render_trigger(self, trigger: TriggerSurface) -> None:
        current = (trigger.enabled, trigger.label)
        if current == self._last_trigger:
            return
        self._last_trigger = current
        style = {"fg": "cyan"} if trigger.enabled else {"dim": True}
        self._echo(click.style(f"[ {trigger.label} ]", **style))

    def render_display(self, display: DisplaySurface) -> None:
        current = (display.text, display.dimmed)
        if current == self._last_display:
            return
        self._last_display = current
        self._echo(click.style(display.text, dim=display.dimmed))


class TerminalHost:
    """Runs the controller on the current event loop, fed by a line-based input fd."""

    def __init__(
        self,
        controller: FactFetchController,
        *,
        view: Optional[TerminalView] = None,
        stdin: Optional[TextIO] = None,
    ) -> None:
        self.controller = controller
        self.view = view or TerminalView()
        self._fd = (stdin or sys.stdin).fileno()
        self._buffer = ""
        self._stopped: Optional[asyncio.Event] = None
        self._task: Optional[asyncio.Task[None]] = None

    async def run(self) -> None:
        loop = asyncio.get_running_loop()
        self._stopped = asyncio.Event()

        self.view.attach(self.controller.trigger_surface, self.controller.display)
        self.controller.initialize()
        self.view.notice(INSTRUCTIONS)

        loop.add_reader(self._fd, self._on_readable)
        try:
            await self._stopped.wait()
        finally:
            loop.remove_reader(self._fd)

        if self._task is not None and not self._task.done():
            logger.debug("Waiting for the in-flight fetch before exiting")
            await self._task

    def _on_readable(self) -> None:
        data = os.read(self._fd, 4096)
        if not data:
            self._stop()
            return

        self._buffer += data.decode("utf-8", errors="replace")
        while "\n" in self._buffer:
            line, self._buffer = self._buffer.split("\n", 1)
            self.handle_line(line)

    def handle_line(self, line: str) -> None:
        if self._stopped is not None and self._stopped.is_set():
            return
        command = line.strip().lower()
        if command in QUIT_COMMANDS:
            self._stop()
            return
        task = self.controller.trigger()
        if task is not None:
            self._task = task

    def _stop(self) -> None:
        if self._stopped is not None:
            self._stopped.set()


__all__ = ["INSTRUCTIONS", "QUIT_COMMANDS", "TerminalHost", "TerminalView"]
