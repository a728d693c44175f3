"""Qt driver for the countdown session.

``CountdownEngine`` owns exactly one ``TimerSession`` and one 1-second
``QTimer``.  The session rules live in :mod:`.session`; this class only
schedules ticks, swaps in the new session after each transition, and
tells the UI about it through signals.

The tick timer is stopped before every preset change, reset, pause and
completion, so at most one tick source is ever active.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from . import session as fsm
from .presets import Preset
from .session import TimerSession, TimerState

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class CountdownEngine(QObject):
    """Qt-based countdown with preset selection and single-shot completion.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every one-second decrement.
    state_changed(new_state: TimerState)
        Emitted after every transition that changes the session.
    preset_changed(preset: Preset)
        Emitted when a new preset is selected.
    completed(label: str)
        Emitted once per run-to-zero, after the tick timer has stopped.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    preset_changed = pyqtSignal(object)
    completed = pyqtSignal(str)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._session = TimerSession()

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def session(self) -> TimerSession:
        return self._session

    @property
    def state(self) -> TimerState:
        return self._session.state

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._session.remaining_seconds

    @property
    def duration(self) -> int | None:
        """Seconds in the selected preset, or None while IDLE."""
        return self._session.preset_duration_seconds

    @property
    def label(self) -> str:
        return self._session.label

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the current preset."""
        return self._session.progress

    @property
    def is_running(self) -> bool:
        return self._session.running

    @property
    def is_paused(self) -> bool:
        return self._session.paused

    @property
    def is_complete(self) -> bool:
        return self._session.completed

    @property
    def tick_active(self) -> bool:
        """True while the 1-second timer is scheduled."""
        return self._qt_timer.isActive()

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def select_preset(self, preset: Preset) -> None:
        """Load a preset.  Cancels any countdown in progress."""
        self._qt_timer.stop()
        logger.info(
            "Preset selected: %s (%ds)", preset.label, preset.duration_seconds,
        )
        self._session = fsm.select_preset(
            self._session, preset.duration_seconds, preset.label,
        )
        self.preset_changed.emit(preset)
        self.state_changed.emit(self.state)

    def start(self) -> None:
        """Start or resume.  No-op in IDLE, COMPLETED or while running."""
        updated = fsm.start(self._session)
        if updated is self._session:
            return
        logger.debug("Starting at %ds remaining", updated.remaining_seconds)
        self._qt_timer.stop()
        self._session = updated
        self.state_changed.emit(self.state)
        self._qt_timer.start()

    def pause(self) -> None:
        """Freeze the countdown; ``remaining`` is kept as-is."""
        if not self._session.running:
            return
        self._qt_timer.stop()
        self._session = fsm.pause(self._session)
        logger.debug("Paused at %ds remaining", self.remaining)
        self.state_changed.emit(self.state)

    def toggle(self) -> None:
        """The single Start/Pause/Resume control."""
        if self._session.running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Restore the full preset duration and clear completion."""
        if self.state == TimerState.IDLE:
            return
        self._qt_timer.stop()
        self._session = fsm.reset(self._session)
        logger.debug("Reset to %ds", self.remaining)
        self.tick.emit(self.remaining)
        self.state_changed.emit(self.state)

    def shutdown(self) -> None:
        """Cancel the tick timer for good (window teardown)."""
        self._qt_timer.stop()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if not self._session.running:
            self._qt_timer.stop()
            return
        self._session, just_completed = fsm.tick(self._session)
        if just_completed:
            self._qt_timer.stop()
        self.tick.emit(self.remaining)
        if just_completed:
            self._finish()

    def _finish(self) -> None:
        # session and timer are already stopped; side effects come after
        logger.info("Countdown complete: %s", self.label)
        self.state_changed.emit(self.state)
        self.completed.emit(self.label)
