from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import logging
import os
import sys

from desktopcalc.config import APP_ID, ORG_ID, STYLESHEET_PATH, VISIBLE_APP_NAME

logger = logging.getLogger(__name__)


def load_stylesheet(app: QApplication, path: str = STYLESHEET_PATH) -> bool:
    """Apply the keypad stylesheet if it exists."""
    if not os.path.exists(path):
        logger.warning(f"Stylesheet not found at {path}")
        return False

    with open(path, encoding="utf-8") as f:
        app.setStyleSheet(f.read())
    return True


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication(sys.argv)

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    load_stylesheet(app)

    return app
