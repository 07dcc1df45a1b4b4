"""Async HTTP client for the tasks REST API."""

import logging
from typing import Any

import httpx

from app.core.settings import get_settings
from app.models.task import TaskStatus
from app.schemas.task import TaskResponse

logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = "Unable to reach the server"
BAD_RESPONSE_MESSAGE = "Unexpected response from the server"


class ApiError(Exception):
    """A failed API call; ``message`` is the server's error text when it sent one."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"Request failed with status {response.status_code}"


class TaskApiClient:
    """Thin wrapper over ``httpx.AsyncClient`` bound to the tasks base URL."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.tasks_api_url).rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.client_timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "TaskApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _url(self, task_id: int | str | None = None) -> str:
        if task_id is None:
            return self.base_url
        return f"{self.base_url}/{task_id}"

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(CONNECTION_ERROR_MESSAGE) from exc
        if response.is_error:
            message = _error_message(response)
            logger.info("%s %s -> %s: %s", method, url, response.status_code, message)
            raise ApiError(message, response.status_code)
        return response

    @staticmethod
    def _task(response: httpx.Response) -> TaskResponse:
        try:
            return TaskResponse.model_validate(response.json())
        except ValueError as exc:
            logger.warning("Could not parse task from %s: %s", response.url, exc)
            raise ApiError(BAD_RESPONSE_MESSAGE, response.status_code) from exc

    @staticmethod
    def _tasks(response: httpx.Response) -> list[TaskResponse]:
        try:
            body = response.json()
            if not isinstance(body, list):
                raise ValueError(f"expected a list, got {type(body).__name__}")
            return [TaskResponse.model_validate(item) for item in body]
        except ValueError as exc:
            logger.warning("Could not parse task list from %s: %s", response.url, exc)
            raise ApiError(BAD_RESPONSE_MESSAGE, response.status_code) from exc

    async def health(self) -> bool:
        """Return True when the health endpoint answers 200."""
        try:
            response = await self._client.get(self._url("healthz"))
        except httpx.HTTPError as exc:
            logger.debug("Health check failed: %s", exc)
            return False
        return response.status_code == httpx.codes.OK

    async def list_tasks(self) -> list[TaskResponse]:
        response = await self._request("GET", self._url())
        return self._tasks(response)

    async def get_task(self, task_id: int | str) -> TaskResponse:
        response = await self._request("GET", self._url(task_id))
        return self._task(response)

    async def create_task(self, title: str, status: TaskStatus | None = None) -> TaskResponse:
        payload: dict[str, Any] = {"title": title}
        if status is not None:
            payload["status"] = status.value
        response = await self._request("POST", self._url(), json=payload)
        return self._task(response)

    async def update_task(
        self, task_id: int | str, title: str, status: TaskStatus
    ) -> TaskResponse | None:
        response = await self._request(
            "PUT", self._url(task_id), json={"title": title, "status": status.value}
        )
        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        return self._task(response)

    async def delete_task(self, task_id: int | str) -> None:
        await self._request("DELETE", self._url(task_id))

    async def delete_all_tasks(self) -> None:
        await self._request("DELETE", self._url())
