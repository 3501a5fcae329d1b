"""
Tests for the subscription and error domain models.
"""

import pytest
from dataclasses import FrozenInstanceError
from unittest.mock import Mock

from busline.core.domain.subscriptions import Subscription, insert_sorted
from busline.core.domain.errors import (
    AggregateDispatchError, EventBusError, WaitForTimeoutError
)


class TestSubscription:
    """Test cases for Subscription."""

    def test_defaults(self) -> None:
        handler = Mock()
        subscription = Subscription(handler)

        assert subscription.handler is handler
        assert subscription.priority == 0
        assert subscription.once is False

    def test_is_immutable(self) -> None:
        subscription = Subscription(Mock())

        with pytest.raises(FrozenInstanceError):
            subscription.priority = 5  # type: ignore[misc]

    def test_rejects_missing_handler(self) -> None:
        with pytest.raises(TypeError):
            Subscription(None)  # type: ignore[arg-type]

    def test_rejects_non_callable_handler(self) -> None:
        with pytest.raises(TypeError):
            Subscription("not callable")  # type: ignore[arg-type]

    def test_same_handler_registrations_are_distinct(self) -> None:
        handler = Mock()
        first = Subscription(handler)
        second = Subscription(handler)

        assert first != second
        assert first.matches(handler) and second.matches(handler)
        assert not first.matches(Mock())


class TestInsertSorted:
    """Test cases for priority-ordered insertion."""

    def test_returns_new_tuple(self) -> None:
        original = (Subscription(Mock()),)

        updated = insert_sorted(original, Subscription(Mock()))

        assert len(original) == 1
        assert len(updated) == 2

    def test_descending_priority_and_stability(self) -> None:
        low = Subscription(Mock(), priority=1)
        high = Subscription(Mock(), priority=10)
        first_default = Subscription(Mock())
        second_default = Subscription(Mock())

        subscriptions: tuple = ()
        for subscription in (low, first_default, high, second_default):
            subscriptions = insert_sorted(subscriptions, subscription)

        assert subscriptions == (high, low, first_default, second_default)


class TestErrors:
    """Test cases for bus error types."""

    def test_aggregate_message_and_errors(self) -> None:
        errors = [ValueError("a"), RuntimeError("b")]

        error = AggregateDispatchError("ping", errors)

        assert str(error) == '2 handler(s) threw during "ping"'
        assert error.errors == errors
        assert error.event_name == "ping"
        assert isinstance(error, EventBusError)

    def test_timeout_message(self) -> None:
        error = WaitForTimeoutError("done", 1000)

        assert str(error) == 'waitFor("done") timed out after 1000ms'
        assert isinstance(error, TimeoutError)
        assert isinstance(error, EventBusError)

    def test_timeout_message_drops_whole_float_fraction(self) -> None:
        assert str(WaitForTimeoutError("done", 10.0)) == 'waitFor("done") timed out after 10ms'
        assert str(WaitForTimeoutError("done", 2.5)) == 'waitFor("done") timed out after 2.5ms'
