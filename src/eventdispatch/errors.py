"""Errors raised while dispatching events to listeners."""
from __future__ import annotations

from typing import Any


class InvocationError(TypeError):
    """A registered listener could not be invoked."""

    def __init__(self, message: str, event_name: str) -> None:
        super().__init__(f"EventDispatcher: {message}")
        self.event_name = event_name


class UnresolvedMethodError(InvocationError):
    """A string listener did not resolve to a callable member of its context."""

    def __init__(self, event_name: str, method_name: str) -> None:
        super().__init__(f'Method "{method_name}" does not exist in this context.', event_name)
        self.method_name = method_name


class InvalidCallableError(InvocationError):
    """A listener method is neither a callable nor a member name."""

    def __init__(self, event_name: str, method: Any) -> None:
        received = "None" if method is None else type(method).__name__
        super().__init__(
            f'"{event_name}" event handler type mismatch: expected string or callable, got {received}',
            event_name,
        )
        self.received_type = received
