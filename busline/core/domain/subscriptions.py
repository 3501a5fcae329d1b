"""
Subscription domain model for the event bus.

A subscription binds a handler to an event name (or to the wildcard marker)
together with its ordering priority and its once flag.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Tuple, Union

WILDCARD = "*"
"""Default event name whose subscribers receive every emitted event."""

EventHandler = Callable[..., Union[None, Awaitable[Any]]]


@dataclass(frozen=True, eq=False)
class Subscription:
    """
    Immutable registration of a handler.

    Subscriptions compare by identity so that two registrations of the
    same handler remain distinct entries in the registry.
    """

    handler: EventHandler
    """Callable invoked with the emitted arguments."""

    priority: int = 0
    """Higher priority handlers run earlier."""

    once: bool = False
    """Remove the subscription after its first invocation attempt."""

    def __post_init__(self) -> None:
        if self.handler is None or not callable(self.handler):
            raise TypeError(f"Event handler must be callable, got {self.handler!r}")

    def matches(self, handler: EventHandler) -> bool:
        """Check whether this subscription was registered for ``handler``."""
        return self.handler is handler


SubscriptionList = Tuple[Subscription, ...]


def insert_sorted(subscriptions: SubscriptionList, subscription: Subscription) -> SubscriptionList:
    """
    Return a new sequence with ``subscription`` added in priority order.

    The sort is stable, so subscriptions of equal priority keep their
    registration order.
    """
    return tuple(sorted(subscriptions + (subscription,),
                        key=lambda s: s.priority, reverse=True))
