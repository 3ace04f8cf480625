"""Launcher centralized logger."""

import logging
from pathlib import Path

from launcher_logging.formatters import LogfmtFormatter
from launcher_logging.handlers import (
    create_console_handler,
    create_file_handler,
    create_syslog_handler,
)

# Process-wide defaults, changed through configure()
_default_level = "WARNING"
_default_log_dir: Path | None = None
_default_syslog = False


class LauncherLogger:
    """Logger that turns keyword arguments into logfmt fields."""

    def __init__(
        self,
        name: str,
        log_dir: Path | None = None,
        level: str = "WARNING",
        max_file_size: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        enable_syslog: bool = False,
        enable_console: bool = True
    ):
        """Initialize the logger.

        Args:
            name: Logger name (will be prefixed with 'launcher.')
            log_dir: Directory for log files; no file handler when None
            level: Log level (DEBUG, INFO, WARNING, ERROR)
            max_file_size: Maximum log file size before rotation
            backup_count: Number of backup files to keep
            enable_syslog: Whether to enable syslog handler
            enable_console: Whether to enable console handler
        """
        self.name = f'launcher.{name}'
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.propagate = False

        self.log_dir = log_dir
        self.formatter = LogfmtFormatter()

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if log_dir is not None:
            self._setup_file_handler(max_file_size, backup_count)

        if enable_console:
            self._setup_console_handler()

        if enable_syslog:
            self._setup_syslog_handler()

    def _setup_file_handler(self, max_bytes: int, backup_count: int):
        log_file = self.log_dir / f'{self.name}.log'
        handler = create_file_handler(
            log_file,
            max_bytes=max_bytes,
            backup_count=backup_count,
            formatter=self.formatter
        )
        self.logger.addHandler(handler)

    def _setup_console_handler(self):
        self.logger.addHandler(create_console_handler(formatter=self.formatter))

    def _setup_syslog_handler(self):
        handler = create_syslog_handler(formatter=self.formatter)
        if handler:
            self.logger.addHandler(handler)

    def _log(self, level: int, msg: str, **kwargs):
        self.logger.log(level, msg, extra=kwargs, stacklevel=3)

    def debug(self, msg: str, **kwargs):
        """Log debug message."""
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        """Log info message."""
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        """Log warning message."""
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        """Log error message."""
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs):
        """Log exception with traceback."""
        self.logger.exception(msg, extra=kwargs, stacklevel=2)


# Global logger cache
_loggers: dict[str, LauncherLogger] = {}


def get_logger(
    name: str,
    log_dir: Path | None = None,
    level: str | None = None,
    **kwargs
) -> LauncherLogger:
    """Get or create a launcher logger.

    Args:
        name: Logger name
        log_dir: Log directory, defaults to the configured one
        level: Log level, defaults to the configured one
        **kwargs: Additional LauncherLogger arguments

    Returns:
        Cached logger instance
    """
    if name not in _loggers:
        kwargs.setdefault("enable_syslog", _default_syslog)
        _loggers[name] = LauncherLogger(
            name,
            log_dir=log_dir if log_dir is not None else _default_log_dir,
            level=level or _default_level,
            **kwargs
        )
    return _loggers[name]


def configure(
    level: str | None = None,
    log_dir: Path | str | None = None,
    syslog: bool | None = None
):
    """Set process-wide logging defaults.

    Loggers created earlier are rebuilt so the new settings apply to them too.

    Args:
        level: Default log level
        log_dir: Default directory for log files
        syslog: Whether loggers also send to the local syslog
    """
    global _default_level, _default_log_dir, _default_syslog
    if level:
        if not isinstance(logging.getLevelName(level.upper()), int):
            raise ValueError(f"Unknown log level: {level}")
        _default_level = level.upper()
    if log_dir:
        _default_log_dir = Path(log_dir).expanduser()
    if syslog is not None:
        _default_syslog = syslog

    for name in list(_loggers):
        del _loggers[name]
        get_logger(name)
