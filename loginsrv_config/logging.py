"""
Logging setup for loginsrv-config.

Console output goes to stderr (stdout carries the validation summary),
optionally colored; a rotating log file can be added from the command line.
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path


ROOT_LOGGER = "loginsrv_config"

RESET = "\033[0m"

# Log level colors
LEVEL_COLORS = {
    logging.DEBUG: "\033[2m\033[36m",     # dim cyan
    logging.INFO: "\033[32m",             # green
    logging.WARNING: "\033[33m",          # yellow
    logging.ERROR: "\033[31m",            # red
    logging.CRITICAL: "\033[1m\033[91m",  # bold bright red
}

# Component colors, matched against the logger name
COMPONENT_COLORS = {
    "builder": "\033[35m",
    "loader": "\033[34m",
    "main": "\033[32m",
}


class ColoredFormatter(logging.Formatter):
    """Formatter coloring the level and component name of each record."""

    def __init__(self, fmt: str | None = None, datefmt: str | None = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        levelname, name = record.levelname, record.name
        record.levelname = f"{LEVEL_COLORS.get(record.levelno, '')}{levelname:8}{RESET}"
        component = next((key for key in COMPONENT_COLORS if key in name), None)
        if component:
            record.name = f"{COMPONENT_COLORS[component]}{name}{RESET}"

        try:
            return super().format(record)
        finally:
            record.levelname, record.name = levelname, name


class PlainFormatter(logging.Formatter):
    """Plain formatter without colors for file output."""

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        record.levelname = f"{levelname:8}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


@dataclass
class LogConfig:
    """Logging configuration."""

    console_level: str = "warning"
    console_colors: bool = True

    file_enabled: bool = False
    file_path: str = "loginsrv-config.log"
    file_level: str = "debug"
    file_max_bytes: int = 1024 * 1024
    file_backup_count: int = 3

    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


def get_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "warn": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return levels.get(level_str.lower(), logging.INFO)


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Install console (and optionally file) handlers on the package logger.

    Args:
        config: Logging configuration (uses defaults if None)
    """
    config = config or LogConfig()

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG)  # handlers filter
    root_logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(get_log_level(config.console_level))
    console.setFormatter(
        ColoredFormatter(
            config.format,
            config.date_format,
            use_colors=config.console_colors and sys.stderr.isatty(),
        )
    )
    root_logger.addHandler(console)

    if config.file_enabled:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
        )
        file_handler.setLevel(get_log_level(config.file_level))
        file_handler.setFormatter(PlainFormatter(config.format, config.date_format))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name (will be prefixed with loginsrv_config)
    """
    if name.startswith(ROOT_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
