"""
Core interfaces defining the contracts of the event bus components.
"""

from .lifecycle import IStartable, IStoppable, IHealthCheckable, IConfigurable, IComponent
from .messaging import IEventBus

__all__ = [
    "IStartable",
    "IStoppable",
    "IHealthCheckable",
    "IConfigurable",
    "IComponent",
    "IEventBus",
]
