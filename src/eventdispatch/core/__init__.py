"""Core listener registry and dispatch."""

from .debug import DispatchLogEvent, IndentedLogHook, LogEventKind
from .dispatcher import EventDispatcher
from .naming import ListenerNamer
from .records import ListenerRecord

__all__ = [
    "DispatchLogEvent",
    "EventDispatcher",
    "IndentedLogHook",
    "ListenerNamer",
    "ListenerRecord",
    "LogEventKind",
]
