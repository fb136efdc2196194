"""Best-effort, human readable labels for listeners in debug output.

Labels take the form ``<context class>#<member>``. When a function is
registered against a context it is not an attribute of, the separator is
``~`` to mark it as a helper private to that context. Functions that cannot
be named at all become ``anonymous(<n>)``.

Labels are for logging only. A function shared by several attributes of the
same context may be labelled with any of them.
"""
from __future__ import annotations

import itertools
import logging
from typing import Any, Iterator

logger = logging.getLogger(__name__)


def _context_label(context: Any) -> str:
    if context is None:
        return ""
    if isinstance(context, type):
        return context.__name__
    return type(context).__name__ or "anonymous"


def _function_name(method: Any) -> str | None:
    name = getattr(method, "__name__", None)
    if not isinstance(name, str) or name == "<lambda>":
        return None
    return name


def _member_name(context: Any, method: Any) -> str | None:
    """Find the attribute of ``context`` (or its class hierarchy) holding ``method``."""
    target = getattr(method, "__func__", method)
    namespaces = [getattr(context, "__dict__", {})]
    klass = context if isinstance(context, type) else type(context)
    namespaces.extend(vars(base) for base in klass.__mro__)
    for namespace in namespaces:
        for attr, value in namespace.items():
            if value is method or value is target or getattr(value, "__func__", None) is target:
                return attr
    return None


class ListenerNamer:
    def __init__(self) -> None:
        self._anonymous: Iterator[int] = itertools.count(1)

    def anonymous(self) -> str:
        return f"anonymous({next(self._anonymous)})"

    def name_for(self, context: Any, method: Any) -> str:
        try:
            return self._name_for(context, method)
        except Exception:  # pragma: no cover
            logger.debug("Unable to derive a listener name for %r", method, exc_info=True)
            return self.anonymous()

    def _name_for(self, context: Any, method: Any) -> str:
        context_name = _context_label(context)
        separator = "#" if context_name else ""

        if isinstance(method, str):
            return f"{context_name}{separator}{method}"

        if context is not None:
            member = _member_name(context, method)
            if member is not None:
                return f"{context_name}{separator}{member}"
            function_name = _function_name(method)
            if function_name is not None:
                return f"{context_name}~{function_name}"
            return f"{context_name}{separator}{self.anonymous()}"

        function_name = _function_name(method) if callable(method) else None
        return function_name or self.anonymous()
