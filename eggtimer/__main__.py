"""Allow running the egg timer as a module: python -m eggtimer."""

from __future__ import annotations

import logging
import sys
from functools import partial

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtWidgets import QApplication

from .app import EggTimerWindow
from .settings import APP_NAME, Settings, load_settings
from .shell import PresentationShell, make_egg_icon

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


class Launcher(QObject):
    """Keeps at most one window alive and re-creates it on demand.

    A closed window takes its timer with it; the next one starts IDLE.
    """

    def __init__(
        self,
        app: QApplication,
        shell: PresentationShell,
        settings: Settings,
    ) -> None:
        super().__init__(app)
        self._app = app
        self._shell = shell
        self._settings = settings
        self._window: EggTimerWindow | None = None

        shell.show_requested.connect(self.show_window)
        shell.quit_requested.connect(self.quit)
        app.applicationStateChanged.connect(self._on_app_state_changed)

    @property
    def window(self) -> EggTimerWindow | None:
        return self._window

    def show_window(self) -> EggTimerWindow:
        if self._window is None:
            logger.debug("Creating window")
            window = EggTimerWindow(self._shell, self._settings)
            window.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
            window.destroyed.connect(partial(self._on_window_destroyed, window))
            self._window = window
        self._window.showNormal()
        self._window.raise_()
        self._window.activateWindow()
        return self._window

    def quit(self) -> None:
        if self._window is not None:
            self._window.close()
        self._shell.hide_tray()
        self._app.quit()

    def _on_window_destroyed(self, window: EggTimerWindow, *_args) -> None:
        if self._window is window:
            self._window = None

    def _on_app_state_changed(self, state: Qt.ApplicationState) -> None:
        # macOS dock click with no window open
        if state == Qt.ApplicationState.ApplicationActive and self._window is None:
            self.show_window()


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_NAME)
    app.setQuitOnLastWindowClosed(settings.should_quit_on_last_window_closed())
    app.setWindowIcon(make_egg_icon())

    shell = PresentationShell(
        app, notifications_enabled=settings.notifications_enabled,
    )
    launcher = Launcher(app, shell, settings)
    launcher.show_window()
    logger.info("Egg Timer ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
