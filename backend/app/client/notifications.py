"""Transient success/error notifications shown to the user."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    message: str


class Notifier:
    """Collects notifications and forwards them to an optional sink (e.g. a toast view)."""

    def __init__(self, sink: Callable[[Notification], None] | None = None) -> None:
        self._sink = sink
        self.history: list[Notification] = []

    def _push(self, notification: Notification) -> None:
        self.history.append(notification)
        if self._sink is not None:
            self._sink(notification)

    def success(self, message: str) -> None:
        logger.info(message)
        self._push(Notification(NotificationKind.SUCCESS, message))

    def error(self, message: str) -> None:
        logger.warning(message)
        self._push(Notification(NotificationKind.ERROR, message))
