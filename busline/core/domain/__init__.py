"""
Domain models for the event bus.
"""

from .subscriptions import WILDCARD, EventHandler, Subscription, SubscriptionList, insert_sorted
from .errors import EventBusError, AggregateDispatchError, WaitForTimeoutError

__all__ = [
    "WILDCARD",
    "EventHandler",
    "Subscription",
    "SubscriptionList",
    "insert_sorted",
    "EventBusError",
    "AggregateDispatchError",
    "WaitForTimeoutError",
]
