"""Presentation shell: tray icon, OS notifications, and window focus.

The countdown never talks to the platform directly.  It asks the shell
to notify, to hide the window, or to pull the window forward, and the
shell quietly does nothing where the platform can't oblige (no system
tray, notifications disabled, and so on).
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QObject, pyqtSignal
from PyQt6.QtGui import QIcon, QImage, QPainter, QColor, QPixmap
from PyQt6.QtWidgets import QApplication, QMenu, QSystemTrayIcon, QWidget

logger = logging.getLogger(__name__)

NOTIFICATION_TITLE = "🥚 Egg Timer Complete!"
NOTIFICATION_TIMEOUT_MS = 10_000
ALERT_DURATION_MS = 0  # 0 = until the window is activated


def notification_body(label: str) -> str:
    return f"Your {label} eggs are ready!" if label else "Your eggs are ready!"


# ── icon image generation ─────────────────────────────────────────────────


def make_egg_icon(size: int = 256) -> QIcon:
    """Draw the app icon: a cream egg with a yolk-coloured outline."""
    img = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    img.fill(Qt.GlobalColor.transparent)
    p = QPainter(img)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    p.setBrush(QColor("#FFF7ED"))
    p.setPen(QColor("#F59E0B"))
    margin_x = size * 0.18
    margin_y = size * 0.06
    p.drawEllipse(
        int(margin_x), int(margin_y),
        int(size - 2 * margin_x), int(size - 2 * margin_y),
    )
    p.end()
    return QIcon(QPixmap.fromImage(img))


class PresentationShell(QObject):
    """Owns the tray icon and relays one-way requests to the platform.

    Signals
    -------
    show_requested()
        The user asked to see the window (tray click or menu).
    quit_requested()
        The user chose Quit from the tray menu.
    """

    show_requested = pyqtSignal()
    quit_requested = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        notifications_enabled: bool = True,
        use_tray: bool = True,
    ) -> None:
        super().__init__(parent)
        self._notifications_enabled = notifications_enabled
        self._tray_icon: QSystemTrayIcon | None = None

        if use_tray and QSystemTrayIcon.isSystemTrayAvailable():
            self._tray_icon = QSystemTrayIcon(make_egg_icon(64), self)
            self._tray_icon.setToolTip("Egg Timer")
            self._tray_icon.activated.connect(self._on_tray_activated)
            self._build_tray_menu()
            self._tray_icon.show()
        else:
            logger.debug("System tray unavailable; notifications disabled")

    # ── tray ──────────────────────────────────────────────────────────

    @property
    def has_tray(self) -> bool:
        return self._tray_icon is not None

    def _build_tray_menu(self) -> None:
        # QSystemTrayIcon does not take ownership of the menu
        self._tray_menu = QMenu()
        show_action = self._tray_menu.addAction("Show Egg Timer")
        show_action.triggered.connect(self.show_requested.emit)
        self._tray_menu.addSeparator()
        quit_action = self._tray_menu.addAction("Quit")
        quit_action.triggered.connect(self.quit_requested.emit)
        self._tray_icon.setContextMenu(self._tray_menu)

    def _on_tray_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        """Left-click on tray icon → show the window."""
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self.show_requested.emit()

    def hide_tray(self) -> None:
        if self._tray_icon is not None:
            self._tray_icon.hide()

    # ── one-way requests ──────────────────────────────────────────────

    def notify_completion(self, label: str) -> bool:
        """Show the "eggs are ready" notification.  Returns True if sent."""
        if not self._notifications_enabled:
            logger.debug("Notifications disabled; skipping")
            return False
        if self._tray_icon is None or not QSystemTrayIcon.supportsMessages():
            logger.debug("Platform cannot show notifications; skipping")
            return False
        self._tray_icon.showMessage(
            NOTIFICATION_TITLE,
            notification_body(label),
            QSystemTrayIcon.MessageIcon.Information,
            NOTIFICATION_TIMEOUT_MS,
        )
        return True

    def minimize_to_tray(self, window: QWidget) -> None:
        """Hide the window; falls back to minimizing when there's no tray."""
        if self._tray_icon is None:
            window.showMinimized()
            return
        window.hide()

    def bring_to_front(self, window: QWidget) -> None:
        """Flash the taskbar/dock entry and raise the window."""
        QApplication.alert(window, ALERT_DURATION_MS)
        if window.isMinimized():
            window.showNormal()
        else:
            window.show()
        window.raise_()
        window.activateWindow()
