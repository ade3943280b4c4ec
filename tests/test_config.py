import logging

from PySide6.QtCore import QtMsgType

from desktopcalc import config
from desktopcalc.logging_config import QT_LOGGER_NAME, _qt_message_handler, qt_message_level, setup_logging


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("DESKTOPCALC_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG


def test_unknown_log_level_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("DESKTOPCALC_LOG_LEVEL", "chatty")
    assert config.get_log_level(default=logging.WARNING) == logging.WARNING


def test_missing_log_level_uses_default(monkeypatch):
    monkeypatch.delenv("DESKTOPCALC_LOG_LEVEL", raising=False)
    assert config.get_log_level() == logging.INFO


def test_stylesheet_lives_in_assets():
    assert config.STYLESHEET_PATH.startswith(config.ASSETS_PATH)
    assert config.STYLESHEET_PATH.endswith("calculator.qss")


def _reset_logger(logger):
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "calc.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
    try:
        assert logger is logging.getLogger("desktopcalc")
        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG
    finally:
        _reset_logger(logger)


def test_log_file_receives_engine_messages(tmp_path):
    log_file = tmp_path / "calc.log"
    logger = setup_logging(level=logging.INFO, log_file=str(log_file))
    try:
        logging.getLogger("desktopcalc.model.engine").warning("Division by zero, resetting calculator.")
        for handler in logger.handlers:
            handler.flush()
        assert "Division by zero" in log_file.read_text(encoding="utf-8")
    finally:
        _reset_logger(logger)


def test_qt_message_levels():
    assert qt_message_level(QtMsgType.QtDebugMsg) == logging.DEBUG
    assert qt_message_level(QtMsgType.QtInfoMsg) == logging.INFO
    assert qt_message_level(QtMsgType.QtWarningMsg) == logging.WARNING
    assert qt_message_level(QtMsgType.QtCriticalMsg) == logging.CRITICAL
    assert qt_message_level(QtMsgType.QtFatalMsg) == logging.CRITICAL


def test_qt_messages_go_to_app_logger(caplog):
    with caplog.at_level(logging.WARNING, logger=QT_LOGGER_NAME):
        _qt_message_handler(QtMsgType.QtWarningMsg, None, "Could not parse stylesheet")
    assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
        (QT_LOGGER_NAME, logging.WARNING, "Could not parse stylesheet"),
    ]
