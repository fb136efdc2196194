"""Configuration for the event dispatcher."""

from .settings import DispatcherConfig

__all__ = ["DispatcherConfig"]
