"""Client UI state: one immutable snapshot updated through a reducer.

Views never mutate state directly. They dispatch actions to ``StateStore``,
which runs ``reduce`` and hands the new snapshot to subscribers, so only one
version of the state is ever visible.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from app.models.task import TaskStatus
from app.schemas.task import TaskResponse

logger = logging.getLogger(__name__)

LOADING_FLAGS = (
    "server_up",
    "add_task",
    "update_status",
    "edit_title",
    "update_title",
    "delete_task",
)


@dataclass(frozen=True)
class LoadingFlags:
    """Composite busy flags, one per kind of operation."""

    server_up: bool = False
    add_task: bool = False
    update_status: bool = False
    edit_title: bool = False
    update_title: bool = False
    delete_task: bool = False


@dataclass(frozen=True)
class EditBuffer:
    """Draft buffer for an in-progress title edit."""

    task_id: int | None = None
    title: str = ""
    draft_title: str = ""
    status: TaskStatus = TaskStatus.PENDING

    @property
    def is_active(self) -> bool:
        return self.task_id is not None


@dataclass(frozen=True)
class ClientState:
    tasks: tuple[TaskResponse, ...] = ()
    loading: LoadingFlags = field(default_factory=LoadingFlags)
    new_title: str = ""
    edit: EditBuffer = field(default_factory=EditBuffer)


# Actions


@dataclass(frozen=True)
class TasksLoaded:
    tasks: tuple[TaskResponse, ...]


@dataclass(frozen=True)
class SetLoading:
    flag: str
    value: bool

    def __post_init__(self) -> None:
        if self.flag not in LOADING_FLAGS:
            raise ValueError(f"Unknown loading flag: {self.flag}")


@dataclass(frozen=True)
class SetNewTitle:
    title: str


@dataclass(frozen=True)
class OpenEdit:
    task: TaskResponse


@dataclass(frozen=True)
class SetDraftTitle:
    title: str


@dataclass(frozen=True)
class CloseEdit:
    """Close the edit modal and clear the draft buffer."""


Action = TasksLoaded | SetLoading | SetNewTitle | OpenEdit | SetDraftTitle | CloseEdit


def reduce(state: ClientState, action: Action) -> ClientState:
    """Return the state that results from applying ``action``."""
    if isinstance(action, TasksLoaded):
        return replace(state, tasks=tuple(action.tasks))
    if isinstance(action, SetLoading):
        return replace(state, loading=replace(state.loading, **{action.flag: action.value}))
    if isinstance(action, SetNewTitle):
        return replace(state, new_title=action.title)
    if isinstance(action, OpenEdit):
        return replace(
            state,
            loading=replace(state.loading, edit_title=True),
            edit=EditBuffer(
                task_id=action.task.id,
                title=action.task.title,
                draft_title="",
                status=action.task.status,
            ),
        )
    if isinstance(action, SetDraftTitle):
        if not state.edit.is_active:
            return state
        return replace(state, edit=replace(state.edit, draft_title=action.title))
    if isinstance(action, CloseEdit):
        return replace(
            state,
            loading=replace(state.loading, edit_title=False, update_title=False),
            edit=EditBuffer(),
        )
    raise TypeError(f"Unknown action: {action!r}")


Listener = Callable[[ClientState], None]


class StateStore:
    """Holds the current ``ClientState`` and applies dispatched actions."""

    def __init__(self, initial: ClientState | None = None) -> None:
        self._state = initial or ClientState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ClientState:
        return self._state

    def dispatch(self, action: Action) -> ClientState:
        self._state = reduce(self._state, action)
        logger.debug("Dispatched %s", type(action).__name__)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
