"""Main timer card: preset picker, progress ring, and controls.

Layout (top → bottom):
    - Preset buttons (one per catalog entry, exclusive)
    - ProgressRing (large, centred)
    - Status line ("Done!" on completion)
    - Reset + Start/Pause/Resume row

The widget only renders engine state and forwards clicks; every rule
about what a click does lives in ``CountdownEngine``.
"""

from __future__ import annotations

from typing import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QButtonGroup, QSizePolicy,
)

from ..timer.engine import CountdownEngine
from ..timer.presets import Preset
from ..timer.session import TimerState, format_time
from .progress_ring import ProgressRing, RING_RADIUS

DONE_TEXT = "Done! 🎉"
IDLE_CAPTION = "Pick your eggs"

START_TEXT = "▶  Start"
PAUSE_TEXT = "⏸  Pause"
RESUME_TEXT = "▶  Resume"


def toggle_text(engine: CountdownEngine) -> str:
    """Copy for the single Start/Pause/Resume button."""
    if engine.is_running:
        return PAUSE_TEXT
    if engine.is_paused:
        return RESUME_TEXT
    return START_TEXT


class TimerWidget(QWidget):
    """The egg timer card."""

    def __init__(
        self,
        engine: CountdownEngine,
        presets: Sequence[Preset],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._presets = tuple(presets)
        self._build_ui()
        self._connect_signals()
        self._on_state_changed(engine.state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 20, 24, 24)
        layout.setSpacing(0)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # ── preset picker ────────────────────────────────────────────
        preset_row = QHBoxLayout()
        preset_row.setSpacing(8)
        self._preset_group = QButtonGroup(self)
        self._preset_group.setExclusive(True)
        self._preset_buttons: list[QPushButton] = []
        for index, preset in enumerate(self._presets):
            btn = QPushButton(f"🥚 {preset.label}\n{preset.minutes_text}", self)
            btn.setObjectName("presetButton")
            btn.setCheckable(True)
            self._preset_group.addButton(btn, index)
            self._preset_buttons.append(btn)
            preset_row.addWidget(btn)
        layout.addLayout(preset_row)

        layout.addSpacing(16)

        # ── progress ring (centrepiece) ──────────────────────────────
        ring_container = QHBoxLayout()
        ring_container.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring = ProgressRing(self)
        self._ring.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        side = RING_RADIUS * 2 + 40
        self._ring.setFixedSize(side, side)
        ring_container.addWidget(self._ring)
        layout.addLayout(ring_container)

        # ── status line ──────────────────────────────────────────────
        self._status_label = QLabel("", self)
        self._status_label.setObjectName("statusLabel")
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status_label.setMinimumHeight(32)
        layout.addWidget(self._status_label)

        layout.addSpacing(12)

        # ── main controls ────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("↺  Reset", self)
        self._reset_btn.setObjectName("secondaryButton")

        self._start_pause_btn = QPushButton(START_TEXT, self)
        self._start_pause_btn.setObjectName("primaryButton")

        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._start_pause_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._preset_group.idClicked.connect(self._on_preset_clicked)
        self._start_pause_btn.clicked.connect(self._engine.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)

        self._engine.tick.connect(self._refresh_display)
        self._engine.state_changed.connect(self._on_state_changed)

    # ── read-only accessors (tests, keyboard shortcuts) ───────────────────

    @property
    def ring(self) -> ProgressRing:
        return self._ring

    @property
    def start_pause_button(self) -> QPushButton:
        return self._start_pause_btn

    @property
    def reset_button(self) -> QPushButton:
        return self._reset_btn

    @property
    def preset_buttons(self) -> list[QPushButton]:
        return list(self._preset_buttons)

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_preset_clicked(self, index: int) -> None:
        self._engine.select_preset(self._presets[index])

    def _on_state_changed(self, state: TimerState) -> None:
        # Reset needs a preset; Start also needs time left on the clock
        has_preset = state != TimerState.IDLE
        self._start_pause_btn.setEnabled(
            has_preset and state != TimerState.COMPLETED
        )
        self._reset_btn.setEnabled(has_preset)
        self._start_pause_btn.setText(toggle_text(self._engine))

        self._status_label.setText(DONE_TEXT if state == TimerState.COMPLETED else "")
        self._ring.set_caption(self._engine.label or IDLE_CAPTION)
        self._ring.apply_state(state)

        self._refresh_display(self._engine.remaining)

    def _refresh_display(self, remaining: int) -> None:
        self._ring.set_time_text(format_time(remaining))
        self._ring.set_progress(self._engine.percent_complete)
