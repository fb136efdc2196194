"""Runtime settings for the event dispatcher."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_INDENT_TEXT = "    "
_TRUTHY = {"1", "true", "yes", "on"}


def debug_enabled() -> bool:
    return os.environ.get("EVENTDISPATCH_DEBUG", "").strip().lower() in _TRUTHY


def log_level() -> str:
    return os.environ.get("EVENTDISPATCH_LOG_LEVEL", "INFO").upper()


def config_path() -> str | None:
    return os.environ.get("EVENTDISPATCH_CONFIG_PATH")


class DispatcherConfig(BaseModel):
    """Dispatcher configuration."""

    debug: bool = Field(False, description="Emit debug log events for every dispatcher operation")
    log_indent_text: str = Field(
        DEFAULT_INDENT_TEXT,
        description="Text repeated once per nesting level in debug output",
    )
    log_level: str = Field("INFO", description="Root log level used by the CLI")

    @field_validator("log_indent_text")
    @classmethod
    def validate_indent(cls, v: str) -> str:
        if v.strip():
            raise ValueError("log_indent_text must contain whitespace only")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def load(cls, path: str | Path) -> "DispatcherConfig":
        """Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If YAML is empty or invalid
        """
        from . import loaders

        return cls(**loaders.read_yaml(path))

    @classmethod
    def from_env(cls) -> "DispatcherConfig":
        """Build configuration from ``EVENTDISPATCH_*`` variables.

        Values from the file named by ``EVENTDISPATCH_CONFIG_PATH`` are read
        first; variables that are set take precedence over them.
        """
        from . import loaders

        data: dict[str, Any] = dict(loaders.read_optional_yaml(config_path()))
        if "EVENTDISPATCH_DEBUG" in os.environ:
            data["debug"] = debug_enabled()
        if "EVENTDISPATCH_LOG_LEVEL" in os.environ:
            data["log_level"] = log_level()
        return cls(**data)

    def save(self, path: str | Path) -> None:
        from . import loaders

        loaders.write_yaml(path, self.model_dump())

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
