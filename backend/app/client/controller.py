"""Client application controller.

Every user action validates locally, calls the API, and on success refetches
the full task list instead of patching local state. Failures are reported once
through the notifier and the matching busy flag is always cleared.
"""

import asyncio
import contextlib
import logging

from app.client.api import ApiError, TaskApiClient
from app.client.events import ClickOutsideWatcher, EventBus, Region
from app.client.notifications import Notifier
from app.client.state import (
    ClientState,
    CloseEdit,
    OpenEdit,
    SetDraftTitle,
    SetLoading,
    SetNewTitle,
    StateStore,
    TasksLoaded,
)
from app.core.errors import TaskValidationError
from app.core.settings import get_settings
from app.schemas.task import TaskResponse, validate_task

logger = logging.getLogger(__name__)

SERVER_STARTING_MESSAGE = "Server is yet to start, wait a min"
DEFAULT_MODAL_REGION = Region(x=0, y=0, width=480, height=208)


class TaskApp:
    """Drives the task list UI state against the REST API."""

    def __init__(
        self,
        api: TaskApiClient,
        *,
        store: StateStore | None = None,
        notifier: Notifier | None = None,
        bus: EventBus | None = None,
        modal_region: Region = DEFAULT_MODAL_REGION,
        poll_interval: float | None = None,
    ) -> None:
        self.api = api
        self.store = store or StateStore()
        self.notifier = notifier or Notifier()
        self.bus = bus or EventBus()
        self.modal_region = modal_region
        self.poll_interval = (
            poll_interval if poll_interval is not None else get_settings().health_poll_interval
        )
        self._poll_task: asyncio.Task | None = None
        self._edit_watcher: ClickOutsideWatcher | None = None

    @property
    def state(self) -> ClientState:
        return self.store.state

    def _set_loading(self, flag: str, value: bool) -> None:
        self.store.dispatch(SetLoading(flag, value))

    # ---- lifecycle ----

    async def start(self) -> None:
        """Initial load; falls back to health polling when the server is down."""
        await self.load()

    async def close(self) -> None:
        self.cancel_edit()
        await self.stop_health_polling()

    # ---- list + health ----

    async def load(self) -> bool:
        """Refetch the whole task list; start health polling if that fails."""
        if await self._fetch_tasks():
            return True
        self.start_health_polling()
        return False

    async def _fetch_tasks(self) -> bool:
        try:
            tasks = await self.api.list_tasks()
        except ApiError as exc:
            self.notifier.error(exc.message)
            self._set_loading("server_up", False)
            return False
        self.store.dispatch(TasksLoaded(tuple(tasks)))
        self._set_loading("server_up", True)
        return True

    @property
    def is_polling(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    def start_health_polling(self) -> asyncio.Task:
        """Schedule the liveness poller unless one is already running."""
        if not self.is_polling:
            logger.info("Server unavailable, polling health every %ss", self.poll_interval)
            self._poll_task = asyncio.create_task(self._poll_health())
        return self._poll_task

    async def stop_health_polling(self) -> None:
        task, self._poll_task = self._poll_task, None
        if task is None or task.done():
            return
        if task is asyncio.current_task():
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _poll_health(self) -> None:
        # Runs until a health check succeeds and the following reload works.
        while True:
            await asyncio.sleep(self.poll_interval)
            if not await self.api.health():
                self.notifier.error(SERVER_STARTING_MESSAGE)
                continue
            logger.info("Server is up, reloading tasks")
            self._set_loading("server_up", True)
            if await self._fetch_tasks():
                return

    # ---- add ----

    def set_new_title(self, title: str) -> None:
        self.store.dispatch(SetNewTitle(title))

    async def add_task(self) -> bool:
        if self.state.loading.add_task:
            return False
        self._set_loading("add_task", True)
        try:
            try:
                payload = validate_task({"title": self.state.new_title})
            except TaskValidationError as exc:
                self.notifier.error(exc.message)
                return False
            try:
                await self.api.create_task(payload.title)
            except ApiError as exc:
                self.notifier.error(exc.message)
                return False
            await self.load()
            self.store.dispatch(SetNewTitle(""))
            self.notifier.success("Task added successfully")
            return True
        finally:
            self._set_loading("add_task", False)

    # ---- status toggle ----

    async def toggle_status(self, task: TaskResponse) -> bool:
        """Flip a task between pending and completed."""
        if self.state.loading.update_status:
            return False
        self._set_loading("update_status", True)
        try:
            try:
                payload = validate_task({"title": task.title, "status": task.status})
            except TaskValidationError as exc:
                self.notifier.error(exc.message)
                return False
            try:
                await self.api.update_task(task.id, payload.title, payload.status.toggled())
            except ApiError as exc:
                self.notifier.error(exc.message)
                return False
            await self.load()
            self.notifier.success("Task status updated successfully")
            return True
        finally:
            self._set_loading("update_status", False)

    # ---- title edit modal ----

    def open_edit(self, task: TaskResponse) -> None:
        """Open the edit modal for ``task`` and start watching for outside clicks."""
        self.cancel_edit()
        self.store.dispatch(OpenEdit(task))
        self._edit_watcher = ClickOutsideWatcher(self.bus, self.modal_region, self.cancel_edit)
        self._edit_watcher.start()

    def set_draft_title(self, title: str) -> None:
        self.store.dispatch(SetDraftTitle(title))

    def cancel_edit(self) -> None:
        """Close the modal and discard the draft (close control or outside click)."""
        if self._edit_watcher is not None:
            self._edit_watcher.stop()
            self._edit_watcher = None
        if self.state.edit.is_active or self.state.loading.edit_title:
            self.store.dispatch(CloseEdit())

    async def submit_edit(self) -> bool:
        edit = self.state.edit
        if not edit.is_active or self.state.loading.update_title:
            return False
        self._set_loading("update_title", True)
        try:
            payload = validate_task({"title": edit.draft_title, "status": edit.status})
        except TaskValidationError as exc:
            # Keep the modal open so the user can retype.
            self.notifier.error(exc.message)
            self.store.dispatch(SetDraftTitle(""))
            self._set_loading("update_title", False)
            return False

        try:
            await self.api.update_task(edit.task_id, payload.title, payload.status)
        except ApiError as exc:
            self.notifier.error(exc.message)
            return False
        else:
            await self.load()
            self.notifier.success("Task Title updated successfully")
            return True
        finally:
            self.cancel_edit()

    # ---- delete ----

    async def delete_task(self, task_id: int) -> bool:
        if self.state.loading.delete_task:
            return False
        self._set_loading("delete_task", True)
        try:
            try:
                await self.api.delete_task(task_id)
            except ApiError as exc:
                self.notifier.error(exc.message)
                return False
            await self.load()
            self.notifier.success("Task deleted successfully")
            return True
        finally:
            self._set_loading("delete_task", False)
