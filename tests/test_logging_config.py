"""Tests for setup_logging."""

import logging
from pathlib import Path

import pytest

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

from packcalc.logging_config import QT_LOGGER_NAME, qt_message_handler, setup_logging


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger("packcalc")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    qInstallMessageHandler(None)


class TestSetupLogging:
    def test_console_handler(self) -> None:
        setup_logging(level=logging.DEBUG)
        logger = logging.getLogger("packcalc")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_repeat_call_does_not_duplicate(self) -> None:
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("packcalc").handlers) == 1

    def test_file_handler(self, tmp_path: Path) -> None:
        log_file = tmp_path / "packcalc.log"
        setup_logging(level=logging.INFO, log_file=str(log_file))
        logging.getLogger("packcalc.model.calculator").info("hello")
        for handler in logging.getLogger("packcalc").handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "packcalc.model.calculator - INFO - hello" in text


class _Context:
    def __init__(self, category: str) -> None:
        self.category = category


class TestQtMessageHandler:
    def test_warning_is_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger=QT_LOGGER_NAME):
            qt_message_handler(QtMsgType.QtWarningMsg, None, "Could not parse stylesheet")
        record = caplog.records[-1]
        assert record.name == QT_LOGGER_NAME
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "Could not parse stylesheet"

    def test_critical_maps_to_error(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger=QT_LOGGER_NAME):
            qt_message_handler(QtMsgType.QtCriticalMsg, None, "boom")
        assert caplog.records[-1].levelno == logging.ERROR

    def test_category_prefix(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger=QT_LOGGER_NAME):
            qt_message_handler(QtMsgType.QtDebugMsg, _Context("qt.qpa.fonts"), "no fonts")
            qt_message_handler(QtMsgType.QtInfoMsg, _Context("default"), "plain")
        messages = [r.getMessage() for r in caplog.records]
        assert messages[-2:] == ["[qt.qpa.fonts] no fonts", "plain"]
