"""Main application window for the egg timer."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QWidget

from .audio.sounds import AlarmPlayer
from .settings import Settings
from .shell import PresentationShell, make_egg_icon
from .timer.engine import CountdownEngine
from .timer.session import TimerState
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget
from .ui.title_flasher import TitleFlasher

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Egg Timer"
WINDOW_WIDTH = 400
WINDOW_HEIGHT = 650


class EggTimerWindow(QMainWindow):
    """Single timer window.  Each instance starts with a fresh session."""

    def __init__(
        self,
        shell: PresentationShell,
        settings: Settings | None = None,
        *,
        alarm: AlarmPlayer | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._shell = shell
        self._settings = settings or Settings()

        self.setWindowTitle(WINDOW_TITLE)
        self.setWindowIcon(make_egg_icon())
        self.setFixedSize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.setStyleSheet(build_stylesheet())

        # ── engine + completion effects ───────────────────────────────
        self._engine = CountdownEngine(self)

        if alarm is None:
            alarm_path = (
                Path(self._settings.alarm_sound).expanduser()
                if self._settings.alarm_sound else None
            )
            alarm = AlarmPlayer(
                self,
                alarm_path=alarm_path,
                volume=self._settings.sound_volume,
                enabled=self._settings.sound_enabled,
            )
        self._alarm = alarm
        self._flasher = TitleFlasher(self)

        # ── central widget ────────────────────────────────────────────
        self._timer_widget = TimerWidget(
            self._engine, self._settings.preset_catalog(), self,
        )
        self.setCentralWidget(self._timer_widget)

        self._build_menu_bar()

        # ── wire signals ──────────────────────────────────────────────
        self._engine.completed.connect(self._on_completed)
        self._engine.state_changed.connect(self._on_state_changed)

    # ── accessors ─────────────────────────────────────────────────────

    @property
    def engine(self) -> CountdownEngine:
        return self._engine

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def flasher(self) -> TitleFlasher:
        return self._flasher

    # ══════════════════════════════════════════════════════════════════
    #  MENU BAR
    # ══════════════════════════════════════════════════════════════════

    def _build_menu_bar(self) -> None:
        menu_bar = self.menuBar()

        timer_menu = menu_bar.addMenu("Timer")

        toggle_action = QAction("Start / Pause", self)
        toggle_action.triggered.connect(self._engine.toggle)
        timer_menu.addAction(toggle_action)

        reset_action = QAction("Reset", self)
        reset_action.triggered.connect(self._engine.reset)
        timer_menu.addAction(reset_action)

        timer_menu.addSeparator()

        quit_action = QAction("Quit Egg Timer", self)
        quit_action.setMenuRole(QAction.MenuRole.QuitRole)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self._shell.quit_requested.emit)
        timer_menu.addAction(quit_action)

        window_menu = menu_bar.addMenu("Window")

        hide_action = QAction("Hide Window", self)
        hide_action.setShortcut(QKeySequence("Ctrl+H"))
        hide_action.triggered.connect(self.minimize_to_tray)
        window_menu.addAction(hide_action)

        close_action = QAction("Close Window", self)
        close_action.setShortcut(QKeySequence("Ctrl+W"))
        close_action.triggered.connect(self.close)
        window_menu.addAction(close_action)

        # Shortcuts must survive a hidden menu bar
        self.addActions([toggle_action, reset_action, quit_action,
                         hide_action, close_action])
        # macOS uses the global menu bar; elsewhere it stays hidden until Alt
        menu_bar.setVisible(sys.platform == "darwin")

    # ══════════════════════════════════════════════════════════════════
    #  TIMER SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_state_changed(self, state: TimerState) -> None:
        # Leaving COMPLETED (reset / new preset) ends the celebration
        if state != TimerState.COMPLETED:
            self._flasher.stop()
            self._alarm.stop()

    def _on_completed(self, label: str) -> None:
        """Alarm, notification, title flash, and attention request."""
        self._alarm.play()
        self._shell.notify_completion(label)
        if self._settings.flash_title:
            self._flasher.start()
        if not self.isActiveWindow():
            self._shell.bring_to_front(self)

    def minimize_to_tray(self) -> None:
        self._shell.minimize_to_tray(self)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Cancel every scheduled callback; state dies with the window."""
        self._engine.shutdown()
        self._flasher.stop()
        self._alarm.stop()
        logger.debug("Window closed")
        event.accept()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/pause), Escape (reset) and Alt (menu bar)."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._engine.toggle()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._engine.reset()
            event.accept()
            return
        if key == Qt.Key.Key_Alt and sys.platform != "darwin":
            menu_bar = self.menuBar()
            menu_bar.setVisible(not menu_bar.isVisibleTo(self))
            event.accept()
            return
        super().keyPressEvent(event)
