"""
Configuration infrastructure.
"""

from .models import ApplicationConfig, EventBusConfig, LoggingConfig
from .loader import ConfigLoader

__all__ = [
    "ApplicationConfig",
    "EventBusConfig",
    "LoggingConfig",
    "ConfigLoader",
]
