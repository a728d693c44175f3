"""Pure countdown session state machine.

Nothing in here knows about Qt.  Every transition takes a
``TimerSession`` and returns a new one, so the rules can be exercised
without a display or an event loop.

States
------
IDLE        No preset chosen yet.
READY       Preset chosen, not counting (fresh or paused).
RUNNING     Counting down, one tick per second.
COMPLETED   Reached 00:00 while running.

Transitions
-----------
any       → READY      (select_preset)
READY     → RUNNING    (start, only with time left)
RUNNING   → READY      (pause, keeps remaining)
RUNNING   → RUNNING    (tick, -1 second)
RUNNING   → COMPLETED  (tick that hits zero)
non-IDLE  → READY      (reset)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class TimerState(Enum):
    IDLE = "idle"
    READY = "ready"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass(frozen=True)
class TimerSession:
    """Snapshot of one countdown run."""

    preset_duration_seconds: int | None = None
    remaining_seconds: int = 0
    running: bool = False
    label: str = ""
    # presentation-only: drives the "Resume" copy
    paused: bool = False
    completed: bool = False

    @property
    def state(self) -> TimerState:
        if self.preset_duration_seconds is None:
            return TimerState.IDLE
        if self.running:
            return TimerState.RUNNING
        if self.completed:
            return TimerState.COMPLETED
        return TimerState.READY

    @property
    def progress(self) -> float:
        """0.0 → 1.0 progress through the preset."""
        if not self.preset_duration_seconds:
            return 0.0
        return progress_fraction(
            self.preset_duration_seconds, self.remaining_seconds,
        )


# ── presentation helpers ──────────────────────────────────────────────────


def format_time(seconds: int) -> str:
    """Render whole seconds as zero-padded ``MM:SS``."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def progress_fraction(duration: int, remaining: int) -> float:
    if duration <= 0:
        return 0.0
    elapsed = duration - remaining
    return max(0.0, min(1.0, elapsed / duration))


# ── transitions ───────────────────────────────────────────────────────────


def select_preset(
    session: TimerSession, duration: int, label: str,
) -> TimerSession:
    """Enter READY with a fresh preset, from any state."""
    return TimerSession(
        preset_duration_seconds=duration,
        remaining_seconds=duration,
        running=False,
        label=label,
    )


def start(session: TimerSession) -> TimerSession:
    """Begin counting.  No-op in IDLE, while running, or with no time left."""
    if session.preset_duration_seconds is None:
        return session
    if session.running or session.remaining_seconds <= 0:
        return session
    return replace(session, running=True, completed=False)


def pause(session: TimerSession) -> TimerSession:
    """Stop counting but keep the remaining time."""
    if not session.running:
        return session
    return replace(session, running=False, paused=True)


def toggle(session: TimerSession) -> TimerSession:
    return pause(session) if session.running else start(session)


def tick(session: TimerSession) -> tuple[TimerSession, bool]:
    """Advance one second.

    Returns ``(new_session, just_completed)``.  Only a running session
    moves, so a stray tick after completion cannot complete twice.
    """
    if not session.running:
        return session, False
    remaining = max(0, session.remaining_seconds - 1)
    if remaining == 0:
        return replace(
            session,
            remaining_seconds=0,
            running=False,
            paused=False,
            completed=True,
        ), True
    return replace(session, remaining_seconds=remaining), False


def reset(session: TimerSession) -> TimerSession:
    """Back to the full preset duration.  No-op in IDLE."""
    if session.preset_duration_seconds is None:
        return session
    return replace(
        session,
        remaining_seconds=session.preset_duration_seconds,
        running=False,
        paused=False,
        completed=False,
    )
