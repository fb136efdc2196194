"""Synchronous, priority ordered event dispatcher."""
from __future__ import annotations

import logging
import types
from typing import Any, Dict, List

from ..config.settings import DispatcherConfig
from ..errors import InvalidCallableError, UnresolvedMethodError
from .debug import DispatchLogEvent, IndentedLogHook, LogEventKind, LogHook
from .naming import ListenerNamer
from .records import ListenerRecord

logger = logging.getLogger(__name__)


def _is_function(value: Any) -> bool:
    return callable(value) and not isinstance(value, type)


def _is_priority(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class EventDispatcher:
    """Maps event names to listeners and calls them in priority order.

    Listeners with a higher priority run first; listeners with equal priority
    run in the order they were registered. A listener is either a callable or
    the name of a member of its context, looked up only when the event is
    dispatched.
    """

    def __init__(
        self,
        debug: bool | None = None,
        log_hook: LogHook | None = None,
        config: DispatcherConfig | None = None,
    ) -> None:
        self.config = config or DispatcherConfig.from_env()
        self.debug = self.config.debug if debug is None else debug
        self.log_hook: LogHook = log_hook or IndentedLogHook(self.config.log_indent_text)
        self.namer = ListenerNamer()
        self._listeners: Dict[str, List[ListenerRecord]] = {}

    def register(
        self,
        event_name: str,
        context: Any = None,
        method: Any = None,
        priority: Any = 0,
        name: Any = None,
    ) -> "EventDispatcher":
        """Add a listener for ``event_name``.

        Args:
            event_name: Event to listen for.
            context: Receiver of the call, and the namespace ``method`` is looked
                up in when it is a string. May be omitted: a callable given here
                is taken as ``method`` and the remaining arguments shift left.
            method: Callable, or member name resolved on ``context`` at dispatch
                time. The member does not have to exist yet.
            priority: Higher runs earlier. A non-integer here is taken as the
                listener name and the priority falls back to 0.
            name: Label used in debug output. Generated in debug mode if missing.
        """
        if _is_function(context):
            context, method, priority, name = None, context, method, priority
        if not _is_priority(priority):
            priority, name = 0, priority
        if not isinstance(name, str):
            name = self.namer.name_for(context, method) if self.debug else None

        record = ListenerRecord(context=context, method=method, priority=priority, name=name)
        self._emit(LogEventKind.REGISTER, event_name, listener=record)

        listeners = self._listeners.setdefault(event_name, [])
        index = len(listeners)
        while index > 0 and listeners[index - 1].priority < priority:
            index -= 1
        listeners.insert(index, record)
        return self

    def unregister(self, event_name: str, context: Any = None, method: Any = None) -> "EventDispatcher":
        """Remove the most recently added listener matching ``context`` and ``method``.

        ``context`` may be omitted the same way as in :meth:`register`.
        Unknown events and listeners are ignored.
        """
        if _is_function(context) or isinstance(context, str):
            context, method = None, context

        listeners = self._listeners.get(event_name)
        if not listeners:
            return self
        for index in range(len(listeners) - 1, -1, -1):
            record = listeners[index]
            if record.context is context and record.method == method:
                self._emit(LogEventKind.UNREGISTER, event_name, listener=record)
                del listeners[index]
                if not listeners:
                    del self._listeners[event_name]
                break
        return self

    def list_listeners(self, event_name: str) -> tuple[ListenerRecord, ...]:
        """Listeners of ``event_name`` in call order; :meth:`dispatch` calls exactly these."""
        return tuple(self._listeners.get(event_name, ()))

    def has_listeners(self, event_name: str) -> bool:
        return event_name in self._listeners

    def event_names(self) -> list[str]:
        return list(self._listeners)

    def dispatch(self, event_name: str, payload: Any = None) -> "EventDispatcher":
        """Call every listener of ``event_name`` with ``payload``, highest priority first.

        Raises:
            UnresolvedMethodError: A member name did not resolve to a callable.
            InvalidCallableError: A listener is neither callable nor a member name.

        Either error, and anything raised by a listener itself, stops the
        dispatch; the remaining listeners are not called.
        """
        self._emit(LogEventKind.DISPATCH_BEGIN, event_name, payload=payload)

        for record in self.list_listeners(event_name):
            self._invoke(event_name, record, payload)

        self._emit(LogEventKind.DISPATCH_END, event_name, payload=payload)
        return self

    def _invoke(self, event_name: str, record: ListenerRecord, payload: Any) -> None:
        method = record.method
        if isinstance(method, str):
            target = getattr(record.context, method, None)
            if not callable(target):
                raise UnresolvedMethodError(event_name, method)
        elif callable(method):
            target = method
            if record.context is not None and isinstance(method, types.FunctionType):
                target = types.MethodType(method, record.context)
        else:
            raise InvalidCallableError(event_name, method)

        self._emit(LogEventKind.CALL, event_name, listener=record, payload=payload)
        target(payload)

    def _emit(
        self,
        kind: LogEventKind,
        event_name: str,
        listener: ListenerRecord | None = None,
        payload: Any = None,
    ) -> None:
        if not self.debug:
            return
        self.log_hook(DispatchLogEvent(kind=kind, event_name=event_name, listener=listener, payload=payload))
