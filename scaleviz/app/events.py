from __future__ import annotations

"""Tiny pub/sub event bus."""

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

SELECTION_CHANGED = "selection_changed"
NOTE_CLICKED = "note_clicked"


class EventBus:
    def __init__(self) -> None:
        self._subs: Dict[str, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        self._subs.setdefault(event, []).append(handler)

    def unsubscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        handlers = self._subs.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: str, payload: Any) -> None:
        for h in list(self._subs.get(event, [])):
            try:
                h(payload)
            except Exception:
                # One bad subscriber must not starve the rest
                logger.exception("Handler for %r failed", event)
