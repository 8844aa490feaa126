"""
Tests for logging setup.
"""

import logging

from loginsrv_config.logging import (
    RESET,
    ColoredFormatter,
    LogConfig,
    PlainFormatter,
    get_log_level,
    get_logger,
    setup_logging,
)


def _record(name: str, level: int = logging.WARNING) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "message", None, None)


def test_get_logger_prefix() -> None:
    assert get_logger("config.builder").name == "loginsrv_config.config.builder"
    assert get_logger("loginsrv_config.main").name == "loginsrv_config.main"


def test_get_log_level() -> None:
    assert get_log_level("warn") == logging.WARNING
    assert get_log_level("DEBUG") == logging.DEBUG
    assert get_log_level("bogus") == logging.INFO


def test_colored_formatter() -> None:
    record = _record("loginsrv_config.config.loader")
    text = ColoredFormatter("%(levelname)s %(name)s %(message)s").format(record)

    assert RESET in text
    assert "loginsrv_config.config.loader" in text
    # Record is restored for other handlers
    assert record.levelname == "WARNING"
    assert record.name == "loginsrv_config.config.loader"


def test_colored_formatter_without_colors() -> None:
    text = ColoredFormatter("%(levelname)s %(message)s", use_colors=False).format(_record("x"))

    assert text == "WARNING message"


def test_plain_formatter_pads_level() -> None:
    text = PlainFormatter("%(levelname)s|%(message)s").format(_record("x", logging.INFO))

    assert text == "INFO    |message"


def test_setup_logging_with_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "build.log"
    setup_logging(LogConfig(console_level="error", file_enabled=True, file_path=str(log_file)))

    get_logger("config.loader").info("written to file")
    for handler in logging.getLogger("loginsrv_config").handlers:
        handler.flush()

    assert "written to file" in log_file.read_text()
