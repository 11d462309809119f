"""Allow running JetCounter as a module: python -m jetcounter."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import CountdownScreen
from .settings import load_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    if not isinstance(level, str):
        level = "INFO"
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)
    logging.getLogger(__name__).info("JetCounter ready")

    app = QApplication(sys.argv)
    app.setApplicationName("JetCounter")
    app.setOrganizationName("JetCounter")

    window = CountdownScreen(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
