"""
Logging Configuration
Sets up the global logger for the application and routes Qt's own
diagnostics (stylesheet parse errors, QPA plugin warnings, ...) into it,
so they end up in the same console/file output as ours.
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

QT_LOGGER_NAME = "packcalc.qt"

_QT_LEVELS: dict[QtMsgType, int] = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def qt_message_handler(mode: QtMsgType, context, message: str) -> None:
    """Forward a Qt message to the 'packcalc.qt' logger at the matching level."""
    level = _QT_LEVELS.get(mode, logging.WARNING)
    category = getattr(context, "category", None)
    if category and category != "default":
        message = f"[{category}] {message}"
    logging.getLogger(QT_LOGGER_NAME).log(level, message)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the root logger for the 'packcalc' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("packcalc")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    qInstallMessageHandler(qt_message_handler)

    logger.info("Logging initialized.")
