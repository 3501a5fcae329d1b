"""
Core module containing the event bus, its domain models and interfaces.

This module is independent of logging and configuration infrastructure.
"""

from .interfaces.lifecycle import IStartable, IStoppable, IHealthCheckable, IComponent
from .interfaces.messaging import IEventBus
from .domain.subscriptions import WILDCARD, Subscription
from .domain.errors import EventBusError, AggregateDispatchError, WaitForTimeoutError
from .services.event_bus import EventBus

__all__ = [
    "IStartable",
    "IStoppable",
    "IHealthCheckable",
    "IComponent",
    "IEventBus",
    "WILDCARD",
    "Subscription",
    "EventBusError",
    "AggregateDispatchError",
    "WaitForTimeoutError",
    "EventBus",
]
