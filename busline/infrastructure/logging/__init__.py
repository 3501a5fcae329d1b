"""
Logging infrastructure.
"""

from .setup import setup_logging, InterceptHandler, LoggingManager

__all__ = [
    "setup_logging",
    "InterceptHandler",
    "LoggingManager",
]
