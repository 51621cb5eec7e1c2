"""In-process event bus.

Handlers run synchronously in emit order. A failing handler is logged and
never propagates to the caller.
"""

import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], None]


class EventBus(ABC):
    @abstractmethod
    def emit(self, event_name: str, payload: Any) -> None:
        raise NotImplementedError


class InMemoryEventBus(EventBus):
    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)
        self._history: list[tuple[str, Any]] = []

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        if handler not in self._handlers[event_name]:
            self._handlers[event_name].append(handler)

    def emit(self, event_name: str, payload: Any) -> None:
        self._history.append((event_name, payload))
        for handler in self._handlers.get(event_name, []):
            try:
                handler(payload)
            except Exception:
                logger.exception("Handler %r failed for event %s", handler, event_name)

    @property
    def history(self) -> list[tuple[str, Any]]:
        return list(self._history)

    def clear_history(self) -> None:
        self._history.clear()


event_bus = InMemoryEventBus()
