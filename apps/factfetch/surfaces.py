"""The two UI surfaces the fetch controller drives."""

from __future__ import annotations

from typing import Any, Callable

FULL_OPACITY = 1.0


class _Surface:
    def __init__(self) -> None:
        self._listeners: list[Callable[[Any], None]] = []

    def subscribe(self, listener: Callable[[Any], None]) -> None:
        """Call ``listener`` with the surface after every state change."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)


class TriggerSurface(_Surface):
    """An activatable control with an enabled flag and a label."""

    def __init__(self, label: str = "", *, enabled: bool = True) -> None:
        super().__init__()
        self._label = label
        self._enabled = enabled

    @property
    def label(self) -> str:
        return self._label

    @property
    def enabled(self) -> bool:
        return self._enabled

    def update(self, *, enabled: bool | None = None, label: str | None = None) -> None:
        if enabled is not None:
            self._enabled = enabled
        if label is not None:
            self._label = label
        self._notify()

    def __repr__(self) -> str:
        return f"TriggerSurface(label={self._label!r}, enabled={self._enabled})"


class DisplaySurface(_Surface):
    """A region holding exactly one rendered string and an opacity."""

    def __init__(self, text: str = "", *, opacity: float = FULL_OPACITY) -> None:
        super().__init__()
        self._text = text
        self._opacity = opacity

    @property
    def text(self) -> str:
        return self._text

    @property
    def opacity(self) -> float:
        return self._opacity

    def update(self, *, text: str | None = None, opacity: float | None = None) -> None:
        if opacity is not None:
            if not 0.0 <= opacity <= 1.0:
                raise ValueError(f"opacity must be between 0 and 1, got {opacity}")
            self._opacity = opacity
        if text is not None:
            self._text = text
        self._notify()

    @property
    def dimmed(self) -> bool:
        return self._opacity < FULL_OPACITY

    def __repr__(self) -> str:
        return f"DisplaySurface(text={self._text!r}, opacity={self._opacity})"


__all__ = ["DisplaySurface", "FULL_OPACITY", "TriggerSurface"]
