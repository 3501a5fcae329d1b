"""
Busline - In-process asyncio event bus.

This package provides a publish/subscribe event bus with priority-ordered
handlers, one-shot and wildcard subscriptions, aggregated failure reporting
and a deadline-bounded wait helper.
"""

__version__ = "0.1.0"

# Public API exports
from .core.interfaces.lifecycle import IStartable, IStoppable, IHealthCheckable, IComponent
from .core.interfaces.messaging import IEventBus
from .core.domain.subscriptions import WILDCARD, Subscription
from .core.domain.errors import EventBusError, AggregateDispatchError, WaitForTimeoutError
from .core.services.event_bus import EventBus

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
