"""
Logging Configuration
Sets up the application logger and routes Qt's own diagnostics into it.
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

from desktopcalc.config import LOG_FILE, LOG_LEVEL

LOGGER_NAME = "desktopcalc"
QT_LOGGER_NAME = f"{LOGGER_NAME}.qt"


def setup_logging(level: int = LOG_LEVEL, log_file: Optional[str] = LOG_FILE) -> logging.Logger:
    """
    Configures the logger for the 'desktopcalc' namespace.

    Args:
        level: Logging level, DESKTOPCALC_LOG_LEVEL by default.
        log_file: Optional path to save logs to, DESKTOPCALC_LOG_FILE by default.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info(f"Writing log to {log_file}")

    logger.info("Logging initialized.")
    return logger


def qt_message_level(msg_type: QtMsgType) -> int:
    """Logging level for a Qt message type."""
    match msg_type:
        case QtMsgType.QtDebugMsg:
            return logging.DEBUG
        case QtMsgType.QtInfoMsg:
            return logging.INFO
        case QtMsgType.QtWarningMsg:
            return logging.WARNING
        case QtMsgType.QtCriticalMsg | QtMsgType.QtFatalMsg:
            return logging.CRITICAL
    return logging.WARNING


def _qt_message_handler(msg_type: QtMsgType, context, message: str) -> None:
    logging.getLogger(QT_LOGGER_NAME).log(qt_message_level(msg_type), message)


def route_qt_messages() -> None:
    """Send qDebug/qWarning output (e.g. stylesheet parse errors) to the app logger."""
    qInstallMessageHandler(_qt_message_handler)
