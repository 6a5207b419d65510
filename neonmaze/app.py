"""Application entry point and setup for Neon Maze."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from neonmaze.core.config import GameConfig
from neonmaze.core.progress import ProgressStore
from neonmaze.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load the difficulty table and saved progress, then start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Neon Maze")
    app.setApplicationDisplayName("Neon Maze")

    config = GameConfig.load()
    progress_store = ProgressStore(config.keys(), config.total_levels)
    logging.info("Loaded progress from %s: %s", progress_store.file_path, progress_store.record())

    window = MainWindow(config=config, progress_store=progress_store)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
