"""Data models for the hook registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

DEFAULT_PRIORITY = 10


@dataclass(frozen=True)
class HookHandler:
    """A callable subscribed to a named hook."""
    callback: Callable[..., Any]
    priority: int = DEFAULT_PRIORITY
    sequence: int = 0  # insertion order within the registry

    @property
    def name(self) -> str:
        return getattr(self.callback, "__qualname__", repr(self.callback))

    def sort_key(self) -> tuple[int, int]:
        return (self.priority, self.sequence)
