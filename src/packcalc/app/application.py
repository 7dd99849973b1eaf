from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import logging
import os
import sys

from packcalc.config import STYLESHEET_PATH

ORG_ID = "packcalc"
APP_ID = "unit-calculator"

VISIBLE_APP_NAME = "Unit Calculator"

logger = logging.getLogger(__name__)


def load_stylesheet(app: QApplication, path: str = STYLESHEET_PATH) -> bool:
    """Apply the application stylesheet. A missing file leaves Qt's default look."""
    if not os.path.isfile(path):
        logger.warning("Stylesheet not found at %s, using default style.", path)
        return False

    with open(path, encoding="utf-8") as f:
        app.setStyleSheet(f.read())
    return True


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    load_stylesheet(app)

    return app
