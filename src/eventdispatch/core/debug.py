"""Debug side channel describing what the dispatcher is doing."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from .records import ListenerRecord

logger = logging.getLogger(__name__)


class LogEventKind(str, Enum):
    REGISTER = "register"
    UNREGISTER = "unregister"
    DISPATCH_BEGIN = "dispatch_begin"
    DISPATCH_END = "dispatch_end"
    CALL = "call"


@dataclass(frozen=True)
class DispatchLogEvent:
    kind: LogEventKind
    event_name: str
    listener: ListenerRecord | None = None
    payload: Any = None


LogHook = Callable[[DispatchLogEvent], None]


class IndentedLogHook:
    """Default debug hook rendering one indented line per event.

    Nested dispatches are indented one level deeper than the dispatch that
    triggered them. Lines go to the ``eventdispatch.core.debug`` logger at
    DEBUG level; ``sink`` may replace it (the demo CLI prints instead).
    """

    def __init__(self, indent_text: str = "    ", sink: Callable[[str], None] | None = None) -> None:
        self.indent_text = indent_text
        self.depth = 0
        self._sink = sink

    def __call__(self, event: DispatchLogEvent) -> None:
        message = self.describe(event)
        if event.kind is LogEventKind.DISPATCH_BEGIN:
            indent = self.indent_text * self.depth
            self.depth += 1
        elif event.kind is LogEventKind.DISPATCH_END:
            self.depth = max(self.depth - 1, 0)
            indent = self.indent_text * self.depth
        else:
            indent = self.indent_text * self.depth

        line = f"EventDispatcher: {indent}{message}"
        if self._sink is not None:
            self._sink(line)
            return
        logger.debug(
            line,
            extra={
                "dispatch_kind": event.kind.value,
                "event_name": event.event_name,
                "listener_name": event.listener.name if event.listener else None,
            },
        )

    @staticmethod
    def describe(event: DispatchLogEvent) -> str:
        listener = event.listener
        if event.kind is LogEventKind.REGISTER:
            return f'Adding listener "{listener.name}" to listen for "{event.event_name}".'
        if event.kind is LogEventKind.UNREGISTER:
            return f'Removing listener "{listener.name}".'
        if event.kind is LogEventKind.DISPATCH_BEGIN:
            return f'Dispatching "{event.event_name}".'
        if event.kind is LogEventKind.DISPATCH_END:
            return f'Finished dispatching "{event.event_name}".'
        if listener is not None and listener.by_name:
            return f'Calling "{listener.name}" by string.'
        return f'Calling "{listener.name if listener else None}" by reference.'
