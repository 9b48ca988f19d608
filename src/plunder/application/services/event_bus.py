from collections import defaultdict
import logging
from typing import Callable, DefaultDict, List, Type

Handler = Callable[[object], None]


class EventBus:
    """Synchronous publish/subscribe. Handlers run by priority, then in subscription order."""

    def __init__(self) -> None:
        self._subscribers: DefaultDict[Type[object], List[tuple[int, int, Handler]]] = defaultdict(list)
        self._catch_all: List[tuple[int, int, Handler]] = []
        self._next_order = 0
        self._last_publish_errors: List[Exception] = []
        self._logger = logging.getLogger(__name__)

    def _register(self, rows: List[tuple[int, int, Handler]], handler: Handler, priority: int) -> None:
        rows.append((int(priority), self._next_order, handler))
        self._next_order += 1
        rows.sort(key=lambda row: (row[0], row[1]))

    def subscribe(self, event_type: Type[object], handler: Handler, *, priority: int = 100) -> None:
        self._register(self._subscribers[event_type], handler, priority)

    def subscribe_all(self, handler: Handler, *, priority: int = 100) -> None:
        self._register(self._catch_all, handler, priority)

    def publish(self, event: object) -> None:
        self._last_publish_errors = []
        event_type = type(event)
        rows = sorted(self._subscribers[event_type] + self._catch_all, key=lambda row: (row[0], row[1]))
        for priority, _, handler in rows:
            try:
                handler(event)
            except Exception as exc:
                self._last_publish_errors.append(exc)
                handler_name = getattr(handler, "__qualname__", getattr(handler, "__name__", repr(handler)))
                self._logger.exception(
                    "Event handler failed and was isolated",
                    extra={
                        "event_type": event_type.__name__,
                        "handler": handler_name,
                        "priority": priority,
                    },
                )

    def last_publish_errors(self) -> List[Exception]:
        return list(self._last_publish_errors)
