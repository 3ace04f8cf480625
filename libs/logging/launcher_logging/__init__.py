"""Launcher centralized logging with logfmt format."""

from launcher_logging.logger import LauncherLogger, configure, get_logger
from launcher_logging.formatters import LogfmtFormatter
from launcher_logging.handlers import (
    create_file_handler,
    create_console_handler,
    create_syslog_handler
)

__all__ = [
    "LauncherLogger",
    "configure",
    "get_logger",
    "LogfmtFormatter",
    "create_file_handler",
    "create_console_handler",
    "create_syslog_handler",
]
