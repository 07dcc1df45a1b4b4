"""UI click events and region-scoped subscriptions."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle in screen coordinates."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


@dataclass(frozen=True)
class ClickEvent:
    x: float
    y: float
    target: str | None = None


ClickHandler = Callable[[ClickEvent], None]


class EventBus:
    """Fan-out of click events to subscribed handlers."""

    def __init__(self) -> None:
        self._handlers: list[ClickHandler] = []

    def subscribe(self, handler: ClickHandler) -> Callable[[], None]:
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def emit(self, event: ClickEvent) -> None:
        for handler in list(self._handlers):
            handler(event)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)


class ClickOutsideWatcher:
    """Calls ``on_outside`` for clicks that land outside ``region``.

    Only listens between ``start()`` and ``stop()``, which the edit modal ties
    to its own open/close.
    """

    def __init__(self, bus: EventBus, region: Region, on_outside: Callable[[], None]) -> None:
        self._bus = bus
        self.region = region
        self._on_outside = on_outside
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def active(self) -> bool:
        return self._unsubscribe is not None

    def start(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self._bus.subscribe(self._handle)

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _handle(self, event: ClickEvent) -> None:
        if not self.region.contains(event.x, event.y):
            logger.debug("Click at (%s, %s) outside %s", event.x, event.y, self.region)
            self._on_outside()
