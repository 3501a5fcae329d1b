"""
Messaging interface for the in-process event bus.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from ..domain.subscriptions import EventHandler


class IEventBus(ABC):
    """Interface for publish/subscribe event bus implementations."""

    @abstractmethod
    def on(self, event: str, handler: EventHandler, priority: int = 0) -> Callable[[], None]:
        """
        Subscribe ``handler`` to ``event``.

        Args:
            event: Event name, or the wildcard marker to receive every event
            handler: Callable invoked with the emitted arguments
            priority: Higher priority handlers run earlier

        Returns:
            Callable that removes every subscription of ``handler`` on ``event``
        """
        pass

    @abstractmethod
    def once(self, event: str, handler: EventHandler, priority: int = 0) -> Callable[[], None]:
        """Subscribe ``handler`` for a single invocation attempt."""
        pass

    @abstractmethod
    def off(self, event: str, handler: EventHandler) -> None:
        """Remove every subscription of ``handler`` on ``event``."""
        pass

    @abstractmethod
    async def emit(self, event: str, *args: Any) -> None:
        """
        Deliver an event to its subscribers, then to wildcard subscribers.

        Raises:
            AggregateDispatchError: If one or more handlers failed
        """
        pass

    @abstractmethod
    def wait_for(self, event: str, timeout_ms: Optional[float] = None) -> "asyncio.Future[List[Any]]":
        """
        Wait for the next emission of ``event``.

        Returns:
            Future resolved with the emitted arguments, or failed with
            WaitForTimeoutError when the deadline passes first
        """
        pass

    @abstractmethod
    def listener_count(self, event: str) -> int:
        """Number of subscriptions registered for ``event``."""
        pass

    @abstractmethod
    def remove_all_listeners(self, event: Optional[str] = None) -> None:
        """Remove subscriptions for ``event``, or every subscription if omitted."""
        pass

    @abstractmethod
    async def get_metrics(self) -> Dict[str, Any]:
        """Get event bus metrics."""
        pass
