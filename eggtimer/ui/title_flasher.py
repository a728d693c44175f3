"""Alternates a window's title a fixed number of times, then restores it."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer
from PyQt6.QtWidgets import QWidget

FLASH_TITLE = "🥚 Eggs Ready!"
FLASH_INTERVAL_MS = 500
FLASH_ALTERNATIONS = 10


class TitleFlasher(QObject):
    """Fire-and-forget title flash, independent of the countdown tick.

    Bounded by ``alternations``; ``stop()`` cancels early and puts the
    original title back.
    """

    def __init__(
        self,
        window: QWidget,
        *,
        flash_title: str = FLASH_TITLE,
        alternations: int = FLASH_ALTERNATIONS,
        interval_ms: int = FLASH_INTERVAL_MS,
    ) -> None:
        super().__init__(window)
        self._window = window
        self._flash_title = flash_title
        self._alternations = alternations
        self._count = 0
        self._original: str | None = None

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_tick)

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    @property
    def count(self) -> int:
        return self._count

    def start(self) -> None:
        """Begin flashing.  A flash already in flight starts over."""
        if self._original is None:
            self._original = self._window.windowTitle()
        else:
            self._window.setWindowTitle(self._original)
        self._count = 0
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        if self._original is not None:
            self._window.setWindowTitle(self._original)
            self._original = None
        self._count = 0

    def _on_tick(self) -> None:
        if self._original is None:
            self._timer.stop()
            return
        self._count += 1
        if self._count > self._alternations:
            self.stop()
            return
        # odd alternations show the flash text, even ones the original
        title = self._flash_title if self._count % 2 == 1 else self._original
        self._window.setWindowTitle(title)
