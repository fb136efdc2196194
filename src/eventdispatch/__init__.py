"""In-process, priority ordered publish/subscribe event dispatcher."""
from __future__ import annotations

__version__ = "1.8.5"

from .core import DispatchLogEvent, EventDispatcher, IndentedLogHook, ListenerRecord, LogEventKind
from .errors import InvalidCallableError, InvocationError, UnresolvedMethodError

__all__ = [
    "DispatchLogEvent",
    "EventDispatcher",
    "IndentedLogHook",
    "InvalidCallableError",
    "InvocationError",
    "ListenerRecord",
    "LogEventKind",
    "UnresolvedMethodError",
]
