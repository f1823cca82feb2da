"""Hook Registry: named filters and actions owned by the host.

Filters fold a value through every handler subscribed to a name, by
ascending priority and then subscription order. Actions call their
handlers in the same order for side effects only.

Usage:
    hooks = HookRegistry()
    hooks.add_filter("excerpt_length", lambda length: 40)
    hooks.apply_filters("excerpt_length", 55)   # 40
"""

from __future__ import annotations

import itertools
from collections import defaultdict
from typing import Any, Callable, Optional

from uwtheme.common.logging import setup_logging

from .models import DEFAULT_PRIORITY, HookHandler

logger = setup_logging(module_name="hooks")


class HookRegistry:
    """Ordered, named event subscriptions for filters and actions."""

    def __init__(self):
        self._filters: dict[str, list[HookHandler]] = defaultdict(list)
        self._actions: dict[str, list[HookHandler]] = defaultdict(list)
        self._action_counts: dict[str, int] = defaultdict(int)
        self._sequence = itertools.count()

    # --- Registration ---

    def _add(
        self,
        table: dict[str, list[HookHandler]],
        name: str,
        callback: Callable[..., Any],
        priority: int,
    ) -> HookHandler:
        if not name:
            raise ValueError("Hook name must not be empty")
        if not callable(callback):
            raise TypeError(f"Handler for '{name}' must be callable")

        handler = HookHandler(callback=callback, priority=priority, sequence=next(self._sequence))
        table[name].append(handler)
        table[name].sort(key=HookHandler.sort_key)
        logger.debug("Registered %s on '%s' (priority %d)", handler.name, name, priority)
        return handler

    @staticmethod
    def _remove(
        table: dict[str, list[HookHandler]],
        name: str,
        callback: Callable[..., Any],
        priority: Optional[int],
    ) -> bool:
        handlers = table.get(name, [])
        for handler in handlers:
            if handler.callback == callback and (priority is None or handler.priority == priority):
                handlers.remove(handler)
                return True
        return False

    def add_filter(
        self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ) -> HookHandler:
        return self._add(self._filters, name, callback, priority)

    def remove_filter(
        self, name: str, callback: Callable[..., Any], priority: Optional[int] = None
    ) -> bool:
        """Unsubscribe a filter. Returns False when it was not registered."""
        return self._remove(self._filters, name, callback, priority)

    def has_filter(self, name: str, callback: Optional[Callable[..., Any]] = None) -> bool:
        handlers = self._filters.get(name, [])
        if callback is None:
            return bool(handlers)
        return any(h.callback == callback for h in handlers)

    def add_action(
        self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ) -> HookHandler:
        return self._add(self._actions, name, callback, priority)

    def remove_action(
        self, name: str, callback: Callable[..., Any], priority: Optional[int] = None
    ) -> bool:
        return self._remove(self._actions, name, callback, priority)

    def has_action(self, name: str, callback: Optional[Callable[..., Any]] = None) -> bool:
        handlers = self._actions.get(name, [])
        if callback is None:
            return bool(handlers)
        return any(h.callback == callback for h in handlers)

    # --- Dispatch ---

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Fold value through every filter subscribed to name."""
        for handler in list(self._filters.get(name, [])):
            try:
                value = handler.callback(value, *args)
            except Exception:
                logger.error("Filter %s on '%s' failed", handler.name, name)
                raise
        return value

    def do_action(self, name: str, *args: Any) -> None:
        """Call every action subscribed to name."""
        self._action_counts[name] += 1
        for handler in list(self._actions.get(name, [])):
            try:
                handler.callback(*args)
            except Exception:
                logger.error("Action %s on '%s' failed", handler.name, name)
                raise

    def did_action(self, name: str) -> int:
        """Number of times an action has fired."""
        return self._action_counts.get(name, 0)

    def handlers(self, name: str) -> list[HookHandler]:
        """Filters then actions subscribed to name, in call order."""
        return list(self._filters.get(name, [])) + list(self._actions.get(name, []))
