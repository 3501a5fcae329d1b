"""
Logging setup and configuration utilities.

This module configures loguru sinks and routes the standard library
``logging`` records emitted by the busline modules into loguru.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger as loguru_logger

from ..config.models import LoggingConfig
from ...core.interfaces.lifecycle import IComponent

PACKAGE_LOGGER = "busline"


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: Any = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller outside the logging module so loguru reports the right origin
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        loguru_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(config: LoggingConfig) -> None:
    """
    Setup application logging with the given configuration.

    Args:
        config: Logging configuration
    """
    loguru_logger.remove()

    if config.console_enabled:
        loguru_logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                   "<level>{level: <8}</level> | "
                   "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                   "<level>{message}</level>",
            level=config.level.upper(),
            colorize=True,
            backtrace=True,
            diagnose=False
        )

    if config.file_enabled:
        log_dir = Path(config.log_directory)
        log_dir.mkdir(parents=True, exist_ok=True)

        loguru_logger.add(
            log_dir / "busline.log",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
                   "{name}:{function}:{line} - {message}",
            level=config.level.upper(),
            rotation=config.max_file_size,
            retention=config.backup_count,
            compression="zip",
            backtrace=True,
            diagnose=False
        )

    _intercept_standard_logging(config.level.upper())


def _intercept_standard_logging(level: str) -> None:
    """Attach a single InterceptHandler to the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler, InterceptHandler):
            package_logger.removeHandler(handler)

    package_logger.addHandler(InterceptHandler())
    # loguru-only levels (TRACE, SUCCESS) have no stdlib number
    numeric_level = logging.getLevelName(level)
    package_logger.setLevel(numeric_level if isinstance(numeric_level, int) else logging.DEBUG)


class LoggingManager(IComponent):
    """
    Logging manager for runtime logging configuration.

    Applies the loguru configuration on start and re-applies it whenever
    the configuration changes.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        self._config = LoggingConfig(**config)
        self._started = False
        self._logger = logging.getLogger(__name__)

    @property
    def name(self) -> str:
        """Get component name."""
        return "LoggingManager"

    @property
    def version(self) -> str:
        """Get component version."""
        return "1.0.0"

    @property
    def config(self) -> LoggingConfig:
        return self._config

    async def start(self) -> None:
        """Start the logging manager."""
        if self._started:
            return

        setup_logging(self._config)
        self._started = True

        self._logger.info("Logging manager started")
        self._logger.info(f"Log level: {self._config.level}")

    async def stop(self) -> None:
        """Stop the logging manager."""
        if not self._started:
            return

        self._logger.info("Logging manager stopped")
        self._started = False

    async def configure(self, config: Dict[str, Any]) -> None:
        """Configure the logging manager."""
        self._config = LoggingConfig(**config)
        if self._started:
            setup_logging(self._config)
            self._logger.info("Logging configuration updated")

    async def check_health(self) -> Dict[str, Any]:
        """Check logging manager health."""
        log_dir = Path(self._config.log_directory)

        return {
            'healthy': True,
            'status': 'running' if self._started else 'stopped',
            'details': {
                'log_level': self._config.level,
                'log_directory': str(log_dir),
                'log_directory_exists': log_dir.exists(),
                'console_enabled': self._config.console_enabled,
                'file_enabled': self._config.file_enabled,
            }
        }

    def get_logger(self, name: str) -> Any:
        """Get a loguru logger bound to ``name``."""
        return loguru_logger.bind(name=name)

    def log_error(self, message: str, error: Optional[Exception] = None, **kwargs: Any) -> None:
        """
        Log an error message with optional exception.

        Aggregate dispatch errors are expanded so each handler failure
        appears in the log.
        """
        bound = loguru_logger.bind(**kwargs)
        if error is None:
            bound.error(message)
            return

        bound.opt(exception=error).error(f"{message}: {error}")
        for index, handler_error in enumerate(getattr(error, 'errors', ()), start=1):
            bound.error(f"  [{index}] {type(handler_error).__name__}: {handler_error}")
