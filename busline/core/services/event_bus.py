"""
Event bus implementation for in-process publish-subscribe messaging.

This module provides an asyncio event bus with priority-ordered handlers,
one-shot subscriptions, wildcard fan-out, per-handler failure isolation
and a deadline-bounded ``wait_for`` helper.
"""

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Set

from ..interfaces.messaging import IEventBus
from ..interfaces.lifecycle import IComponent
from ..domain.subscriptions import (
    WILDCARD, EventHandler, Subscription, SubscriptionList, insert_sorted
)
from ..domain.errors import AggregateDispatchError, WaitForTimeoutError

if TYPE_CHECKING:
    from ...infrastructure.config.models import EventBusConfig

logger = logging.getLogger(__name__)


class EventBus(IComponent, IEventBus):
    """
    In-process event bus.

    Subscriber sequences are stored as tuples and replaced on every change,
    so a dispatch iterating a snapshot is never affected by handlers that
    subscribe or unsubscribe while it runs.

    Starting the bus is optional; registration and dispatch work in either
    state. ``stop()`` cancels pending waiters and drops all subscriptions.
    """

    def __init__(self, wildcard: str = WILDCARD, default_timeout_ms: float = 5000) -> None:
        self._validate_settings(wildcard, default_timeout_ms)
        self._wildcard = wildcard
        self._default_timeout_ms = default_timeout_ms
        self._listeners: Dict[str, SubscriptionList] = {}
        self._wildcard_listeners: SubscriptionList = ()
        self._waiters: Set["asyncio.Future[List[Any]]"] = set()
        self._running = False

        # Metrics
        self._metrics: Dict[str, int] = {
            'events_emitted': 0,
            'handlers_invoked': 0,
            'handler_failures': 0,
            'dispatch_failures': 0,
        }

    @property
    def name(self) -> str:
        """Get component name."""
        return "EventBus"

    @property
    def version(self) -> str:
        """Get component version."""
        return "1.0.0"

    @property
    def wildcard(self) -> str:
        """Event name that subscribes to every event."""
        return self._wildcard

    @property
    def default_timeout_ms(self) -> float:
        return self._default_timeout_ms

    @classmethod
    def from_config(cls, config: "EventBusConfig") -> "EventBus":
        """Create an event bus from an EventBusConfig."""
        return cls(wildcard=config.wildcard, default_timeout_ms=config.default_timeout_ms)

    async def start(self) -> None:
        """Start the event bus."""
        if self._running:
            return

        self._running = True
        logger.info("Event bus started")

    async def stop(self) -> None:
        """Stop the event bus, cancelling waiters and clearing subscriptions."""
        logger.info("Stopping event bus...")
        self._running = False

        for waiter in list(self._waiters):
            if not waiter.done():
                waiter.cancel()
        self._waiters.clear()

        self.remove_all_listeners()
        logger.info("Event bus stopped")

    async def configure(self, config: Dict[str, Any]) -> None:
        """
        Configure the wildcard marker and the default ``wait_for`` timeout.

        Raises:
            ValueError: If a setting is invalid, or if the wildcard marker
                changes while subscriptions are registered
        """
        wildcard = config.get('wildcard', self._wildcard)
        default_timeout_ms = config.get('default_timeout_ms', self._default_timeout_ms)
        self._validate_settings(wildcard, default_timeout_ms)

        if wildcard != self._wildcard:
            if self._subscriptions_count():
                raise ValueError(
                    f"Cannot change wildcard marker from '{self._wildcard}' to '{wildcard}' "
                    f"while {self._subscriptions_count()} subscription(s) are registered")
            logger.info(f"Updating wildcard marker from '{self._wildcard}' to '{wildcard}'")
            self._wildcard = wildcard
        self._default_timeout_ms = default_timeout_ms

    async def check_health(self) -> Dict[str, Any]:
        """Check event bus health."""
        return {
            'healthy': True,
            'status': 'running' if self._running else 'stopped',
            'details': {
                'events_count': len(self._listeners),
                'subscriptions_count': self._subscriptions_count(),
                'wildcard_subscriptions_count': len(self._wildcard_listeners),
                'pending_waiters': len(self._waiters),
                'events_emitted': self._metrics['events_emitted'],
                'handler_failures': self._metrics['handler_failures'],
            }
        }

    async def get_metrics(self) -> Dict[str, Any]:
        """Get event bus metrics."""
        return {
            **self._metrics,
            'subscriptions_count': self._subscriptions_count(),
            'pending_waiters': len(self._waiters),
        }

    # Registry

    def on(self, event: str, handler: EventHandler, priority: int = 0) -> Callable[[], None]:
        """Subscribe ``handler`` to ``event``; returns an unsubscribe callable."""
        return self._register(event, Subscription(handler, priority, once=False))

    def once(self, event: str, handler: EventHandler, priority: int = 0) -> Callable[[], None]:
        """Subscribe ``handler`` for its next invocation only."""
        return self._register(event, Subscription(handler, priority, once=True))

    def off(self, event: str, handler: EventHandler) -> None:
        """Remove every subscription of ``handler`` on ``event``. Unknown pairs are ignored."""
        self._replace(event, lambda s: not s.matches(handler))

    def listener_count(self, event: str) -> int:
        if event == self._wildcard:
            return len(self._wildcard_listeners)
        return len(self._listeners.get(event, ()))

    def remove_all_listeners(self, event: Optional[str] = None) -> None:
        """
        Remove subscriptions in bulk.

        Args:
            event: The wildcard marker clears wildcard subscribers only, an
                event name clears that event only, None clears everything
        """
        if event == self._wildcard:
            self._wildcard_listeners = ()
        elif event is not None:
            self._listeners.pop(event, None)
        else:
            self._listeners = {}
            self._wildcard_listeners = ()
        logger.debug(f"Removed all listeners for '{event if event is not None else '<all>'}'")

    # Dispatch

    async def emit(self, event: str, *args: Any) -> None:
        """
        Emit ``event`` to its subscribers, then to wildcard subscribers.

        Handlers run one at a time in priority order; awaitable results are
        awaited before the next handler starts. A failing handler does not
        stop delivery. Once subscriptions are pruned after their pass.

        Raises:
            AggregateDispatchError: If any handler raised
        """
        self._metrics['events_emitted'] += 1
        errors: List[Exception] = []

        subscriptions = self._listeners.get(event, ())
        await self._dispatch(event, subscriptions, args, errors)
        self._prune(event, subscriptions)

        wildcard_subscriptions = self._wildcard_listeners
        await self._dispatch(event, wildcard_subscriptions, (event,) + args, errors)
        self._prune(self._wildcard, wildcard_subscriptions)

        if errors:
            self._metrics['dispatch_failures'] += 1
            raise AggregateDispatchError(event, errors)

    def wait_for(self, event: str, timeout_ms: Optional[float] = None) -> "asyncio.Future[List[Any]]":
        """
        Wait for the next emission of ``event``.

        The subscription is registered immediately, so the returned future
        observes emissions made right after this call. Must be called while
        an event loop is running.

        Args:
            event: Event name to wait for
            timeout_ms: Deadline in milliseconds, defaults to the configured value

        Returns:
            Future resolved with the emitted arguments as a list, or failed
            with WaitForTimeoutError
        """
        if timeout_ms is None:
            timeout_ms = self._default_timeout_ms

        loop = asyncio.get_running_loop()
        future: "asyncio.Future[List[Any]]" = loop.create_future()

        def handler(*args: Any) -> None:
            timer.cancel()
            if not future.done():
                future.set_result(list(args))

        def on_timeout() -> None:
            self.off(event, handler)
            if not future.done():
                logger.debug(f"wait_for('{event}') timed out after {timeout_ms}ms")
                future.set_exception(WaitForTimeoutError(event, timeout_ms))

        def on_done(fut: "asyncio.Future[List[Any]]") -> None:
            self._waiters.discard(fut)
            if fut.cancelled():
                timer.cancel()
                self.off(event, handler)

        timer = loop.call_later(timeout_ms / 1000, on_timeout)
        self.once(event, handler)
        self._waiters.add(future)
        future.add_done_callback(on_done)
        return future

    # Internals

    def _register(self, event: str, subscription: Subscription) -> Callable[[], None]:
        if not isinstance(event, str) or not event:
            raise ValueError(f"Event name must be a non-empty string, got {event!r}")

        if event == self._wildcard:
            self._wildcard_listeners = insert_sorted(self._wildcard_listeners, subscription)
        else:
            self._listeners[event] = insert_sorted(self._listeners.get(event, ()), subscription)

        logger.debug(
            f"Added {'once ' if subscription.once else ''}subscription for '{event}' "
            f"(priority: {subscription.priority})")

        handler = subscription.handler
        return lambda: self.off(event, handler)

    def _replace(self, event: str, keep: Callable[[Subscription], bool]) -> None:
        """Store a filtered copy of the sequence for ``event``."""
        if event == self._wildcard:
            current = self._wildcard_listeners
        else:
            current = self._listeners.get(event, ())

        remaining = tuple(s for s in current if keep(s))
        if len(remaining) == len(current):
            return

        if event == self._wildcard:
            self._wildcard_listeners = remaining
        elif remaining:
            self._listeners[event] = remaining
        else:
            del self._listeners[event]
        logger.debug(f"Removed {len(current) - len(remaining)} subscription(s) for '{event}'")

    def _prune(self, event: str, dispatched: SubscriptionList) -> None:
        """Unsubscribe the handlers of once subscriptions that took part in a pass."""
        for subscription in dispatched:
            if subscription.once:
                self.off(event, subscription.handler)

    async def _dispatch(self, event: str, subscriptions: SubscriptionList,
                        args: tuple, errors: List[Exception]) -> None:
        for subscription in subscriptions:
            self._metrics['handlers_invoked'] += 1
            try:
                result = subscription.handler(*args)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                self._metrics['handler_failures'] += 1
                logger.error(f"Handler error for event {event}: {e}")
                errors.append(e)

    def _subscriptions_count(self) -> int:
        return sum(len(subs) for subs in self._listeners.values()) + len(self._wildcard_listeners)

    @staticmethod
    def _validate_settings(wildcard: Any, default_timeout_ms: Any) -> None:
        if not isinstance(wildcard, str) or not wildcard:
            raise ValueError(f"Wildcard marker must be a non-empty string, got {wildcard!r}")
        if not isinstance(default_timeout_ms, (int, float)) or default_timeout_ms <= 0:
            raise ValueError(f"Default timeout must be positive, got {default_timeout_ms!r}")
