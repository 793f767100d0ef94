"""
Tests for logging setup.
"""

import logging
import logging.handlers

from lnxconfig.logging import (
    ColoredFormatter,
    LogConfig,
    get_log_level,
    get_logger,
    setup_logging,
)


def test_get_logger_prefixes_package_name() -> None:
    assert get_logger("config.parser").name == "lnxconfig.config.parser"
    assert get_logger("lnxconfig.main").name == "lnxconfig.main"


def test_get_log_level() -> None:
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("WARN") == logging.WARNING
    assert get_log_level("bogus") == logging.INFO


def test_setup_logging_console_only() -> None:
    setup_logging(LogConfig(console_level="error"))

    root = logging.getLogger("lnxconfig")
    assert len(root.handlers) == 1
    assert root.handlers[0].level == logging.ERROR

    root.handlers.clear()


def test_setup_logging_with_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "lnx.log"
    setup_logging(LogConfig(file_enabled=True, file_path=str(log_file)))

    get_logger("test").debug("hello from test")
    root = logging.getLogger("lnxconfig")
    for handler in root.handlers:
        handler.flush()

    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
    assert "hello from test" in log_file.read_text()

    for handler in root.handlers:
        handler.close()
    root.handlers.clear()


def test_colored_formatter_restores_record() -> None:
    formatter = ColoredFormatter("%(levelname)s %(name)s %(message)s", use_colors=True)
    record = logging.LogRecord("lnxconfig.config.parser", logging.WARNING, "", 0, "msg", None, None)

    output = formatter.format(record)

    assert "\033[" in output
    assert record.levelname == "WARNING"
    assert record.name == "lnxconfig.config.parser"
