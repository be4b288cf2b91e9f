"""Application entry point and setup for the WordTiles sentence puzzle."""

import logging
import random
import sys
from typing import Optional

from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QApplication

from wordtiles.config import Settings
from wordtiles.core.levels import LevelCatalog
from wordtiles.core.session import GameSession
from wordtiles.core.speech import Speaker
from wordtiles.ui.main_window import MainWindow
from wordtiles.ui.speech import QtSpeaker


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_session(settings: Settings, speaker: Optional[Speaker] = None) -> GameSession:
    """Load the level catalog and start a fresh session at level 1."""
    catalog = LevelCatalog.from_directory(settings.levels_dir)
    rng = random.Random(settings.seed) if settings.seed is not None else None
    return GameSession(catalog, speaker=speaker, rng=rng)


def run() -> None:
    """Initialize the application, build the session, and show the main window."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = QApplication(sys.argv)
    app.setApplicationName("WordTiles")
    app.setApplicationDisplayName("WordTiles")

    app_font = QFont(app.font())
    app_font.setPointSize(11)
    app.setFont(app_font)

    speaker = QtSpeaker(locale=settings.speech_locale, enabled=settings.speech_enabled, parent=app)
    session = build_session(settings, speaker=speaker)

    window = MainWindow(session)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(1100, geometry.width()), min(800, geometry.height()))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
