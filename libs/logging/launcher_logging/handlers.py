"""Log handlers for the launcher."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TextIO

# Local syslog sockets tried in order before giving up.
SYSLOG_SOCKETS = ('/dev/log', '/var/run/syslog')


def create_file_handler(
    log_file: Path,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    formatter: logging.Formatter | None = None
) -> logging.Handler:
    """Create a rotating file handler, creating its directory if needed.

    Args:
        log_file: Path to log file
        max_bytes: Maximum file size before rotation
        backup_count: Number of backup files to keep
        formatter: Log formatter to use

    Returns:
        Configured file handler
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    if formatter:
        handler.setFormatter(formatter)
    return handler


def create_console_handler(
    formatter: logging.Formatter | None = None,
    stream: TextIO | None = None
) -> logging.Handler:
    """Create a console handler writing to stderr unless a stream is given."""
    handler = logging.StreamHandler(stream or sys.stderr)
    if formatter:
        handler.setFormatter(formatter)
    return handler


def create_syslog_handler(
    formatter: logging.Formatter | None = None,
    facility: int = logging.handlers.SysLogHandler.LOG_USER
) -> logging.Handler | None:
    """Create a handler for the first local syslog socket that exists.

    Returns:
        Configured syslog handler, or None if no local syslog is available
    """
    for address in SYSLOG_SOCKETS:
        if not Path(address).exists():
            continue
        try:
            handler = logging.handlers.SysLogHandler(address=address, facility=facility)
        except OSError:
            continue
        if formatter:
            handler.setFormatter(formatter)
        return handler
    return None
