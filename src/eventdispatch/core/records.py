"""Listener records stored by the dispatcher."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ListenerRecord:
    context: Any
    method: Any
    priority: int = 0
    name: str | None = None

    @property
    def by_name(self) -> bool:
        """True when ``method`` is a member name looked up on ``context`` at dispatch time."""
        return isinstance(self.method, str)
