"""PySide6 application entry point."""

import platform
import sys

from PySide6 import __version__ as pyside_version
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication

from .. import __version__, log
from ..config import Config
from .main_window import MainWindow


class PlaygroundApp:
    """Main application."""

    def __init__(self, config: Config):
        self._config = config
        self._app: QApplication | None = None
        self._window: MainWindow | None = None

    @property
    def window(self) -> MainWindow | None:
        return self._window

    def setup(self, argv: list[str] | None = None):
        """Set up the application."""
        self._app = QApplication.instance()
        if self._app is None:
            # Rounding policy must be set before the QApplication exists
            QApplication.setHighDpiScaleFactorRoundingPolicy(Qt.HighDpiScaleFactorRoundingPolicy.PassThrough)
            self._app = QApplication(argv if argv is not None else sys.argv)
        self._app.setApplicationName("Playground")
        self._app.setApplicationVersion(__version__)

        self._window = MainWindow(self._config)

        self._app.aboutToQuit.connect(self._on_quit)

    def _on_quit(self):
        """Handle application quit."""
        logger = log.get_logger()

        if self._window:
            # Remember the window size for next time
            size = self._window.size()
            logger.debug("saving window size", width=size.width(), height=size.height())
            self._config.window_width = size.width()
            self._config.window_height = size.height()
            self._window.cleanup()

        self._config.save()

    def run(self) -> int:
        """Run the application.

        Returns:
            Exit code.
        """
        self._window.show()
        return self._app.exec()


def run(config: Config) -> int:
    """Create the Qt application for config and run it until quit."""
    logger = log.get_logger()
    logger.info(
        "system",
        platform=platform.system(),
        python=platform.python_version(),
        pyside=pyside_version,
    )

    app = PlaygroundApp(config)
    app.setup()
    return app.run()
