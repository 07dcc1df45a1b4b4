"""Client side of the task manager: API client, UI state and controller."""

from app.client.api import ApiError, TaskApiClient
from app.client.controller import TaskApp
from app.client.events import ClickEvent, EventBus, Region
from app.client.notifications import Notification, NotificationKind, Notifier
from app.client.state import ClientState, StateStore

__all__ = [
    "ApiError",
    "ClickEvent",
    "ClientState",
    "EventBus",
    "Notification",
    "NotificationKind",
    "Notifier",
    "Region",
    "StateStore",
    "TaskApiClient",
    "TaskApp",
]
