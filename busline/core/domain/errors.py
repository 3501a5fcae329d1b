"""
Error types raised by the event bus.
"""

from typing import List, Sequence


class EventBusError(Exception):
    """Base class for errors raised by the event bus itself."""


class AggregateDispatchError(EventBusError):
    """
    Raised by ``emit`` when one or more handlers failed.

    Carries every handler failure of the emission in invocation order,
    specific-event handlers before wildcard handlers.
    """

    def __init__(self, event_name: str, errors: Sequence[Exception]) -> None:
        self.event_name = event_name
        self.errors: List[Exception] = list(errors)
        self.message = f'{len(self.errors)} handler(s) threw during "{event_name}"'
        super().__init__(self.message)


class WaitForTimeoutError(EventBusError, TimeoutError):
    """Raised when ``wait_for`` sees no matching emission before its deadline."""

    def __init__(self, event_name: str, timeout_ms: float) -> None:
        self.event_name = event_name
        self.timeout_ms = timeout_ms
        super().__init__(f'waitFor("{event_name}") timed out after {_format_ms(timeout_ms)}ms')


def _format_ms(value: float) -> str:
    """Render whole-number milliseconds without a fractional part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
