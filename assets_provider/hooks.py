"""Lifecycle hooks fired by the host application."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

# Fired once per page render when the page collects its assets
ENQUEUE_ASSETS = "enqueue_assets"


class Hooks:
    """Named actions with ordered callbacks."""

    def __init__(self) -> None:
        self._actions: defaultdict[str, list[Callable[..., Any]]] = defaultdict(list)

    def add_action(self, hook: str, callback: Callable[..., Any]) -> None:
        self._actions[hook].append(callback)
        logger.debug("hooks.action_added", extra={"hook": hook})

    def has_action(self, hook: str) -> bool:
        return bool(self._actions.get(hook))

    def actions(self, hook: str) -> list[Callable[..., Any]]:
        return list(self._actions.get(hook, []))

    def do_action(self, hook: str, *args: Any) -> None:
        for callback in self.actions(hook):
            callback(*args)
