"""
Application layer wiring configuration, logging and the event bus.
"""

from .startup import ApplicationStartup

__all__ = [
    "ApplicationStartup",
]
