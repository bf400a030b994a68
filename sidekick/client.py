"""HTTP client for the Side daemon's workspace API.

``WorkspaceClient.fetch`` is the read path used for status checks: it makes
exactly one synchronous request and flattens every failure (bad base URL,
connection refused, timeout, non-200 status, undecodable body) into ``None``.
Callers only ever need to know whether the daemon produced a usable answer.

Everything else (workspace creation, the per-workspace task endpoints)
raises ``SideApiError`` so the caller can show what went wrong.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from sidekick.models.enums import TaskStatus
from sidekick.models.task import Task, TaskEnvelope, TaskListResponse, TaskRequest
from sidekick.models.workspace import (
    ErrorResponse,
    WorkspaceCreate,
    WorkspaceEnvelope,
    WorkspaceListResponse,
    WorkspaceRecord,
)
from sidekick.settings import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = 5.0
# httpx's own default for read / write / pool
_TRANSPORT_DEFAULT_TIMEOUT = 5.0

# InvalidURL is raised while building the request and is not an HTTPError
_REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL)

# Older daemons return single objects without the envelope
_CREATED_ADAPTER: TypeAdapter[WorkspaceEnvelope | WorkspaceRecord] = TypeAdapter(
    WorkspaceEnvelope | WorkspaceRecord
)
_TASK_ADAPTER: TypeAdapter[TaskEnvelope | Task] = TypeAdapter(TaskEnvelope | Task)
_TASK_LIST_ADAPTER: TypeAdapter[TaskListResponse] = TypeAdapter(TaskListResponse)


class SideApiError(RuntimeError):
    """The daemon rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class WorkspaceClient:
    """Talks to ``{base_url}/workspaces``.

    A fresh ``httpx.Client`` is opened per call and closed before returning,
    so instances hold no connection state and may be shared across threads.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.connect_timeout = connect_timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(_TRANSPORT_DEFAULT_TIMEOUT, connect=self.connect_timeout),
            transport=self._transport,
        )

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send one request; transport failures and non-2xx become ``SideApiError``."""
        try:
            with self._client() as client:
                response = client.request(method, url, **kwargs)
        except _REQUEST_ERRORS as exc:
            raise SideApiError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise SideApiError(_error_message(response), status_code=response.status_code)
        return response

    # -- Workspaces ------------------------------------------------------------

    def fetch(self) -> WorkspaceListResponse | None:
        """GET ``/workspaces/`` once; ``None`` means the daemon is unavailable."""
        try:
            with self._client() as client:
                response = client.get("/workspaces/")
        except _REQUEST_ERRORS as exc:
            logger.debug("Workspace fetch failed: %r", exc)
            return None

        if response.status_code != 200:
            logger.debug("Workspace fetch returned HTTP %d", response.status_code)
            return None

        try:
            return WorkspaceListResponse.model_validate_json(response.content)
        except ValidationError as exc:
            logger.debug("Workspace response could not be decoded: %s", exc)
            return None

    def list_workspaces(self) -> list[WorkspaceRecord] | None:
        """Workspaces in daemon order, or ``None`` when unavailable."""
        result = self.fetch()
        return None if result is None else list(result.workspaces)

    def create_workspace(self, name: str, local_repo_dir: str) -> WorkspaceRecord:
        """Register *local_repo_dir* as a new workspace called *name*.

        Raises:
            SideApiError: On transport failure, an error status, or an
                undecodable success body.
        """
        body = WorkspaceCreate(name=name, local_repo_dir=local_repo_dir)
        response = self._send("POST", "/workspaces", json=body.model_dump(by_alias=True))
        created = _decode(_CREATED_ADAPTER, response, "workspace")
        return created.workspace if isinstance(created, WorkspaceEnvelope) else created

    # -- Tasks -----------------------------------------------------------------

    def list_tasks(
        self,
        workspace_id: str,
        statuses: Iterable[TaskStatus | str] | None = None,
    ) -> list[Task]:
        """Tasks of a workspace, optionally filtered to *statuses*."""
        params: dict[str, str] = {}
        if statuses:
            params["statuses"] = ",".join(str(s) for s in statuses)
        response = self._send("GET", f"/workspaces/{workspace_id}/tasks", params=params)
        return _decode(_TASK_LIST_ADAPTER, response, "task list").tasks

    def create_task(self, workspace_id: str, request: TaskRequest) -> Task:
        response = self._send(
            "POST",
            f"/workspaces/{workspace_id}/tasks",
            json=request.model_dump(by_alias=True, mode="json"),
        )
        return _unwrap_task(response)

    def get_task(self, workspace_id: str, task_id: str) -> Task:
        return _unwrap_task(self._send("GET", f"/workspaces/{workspace_id}/tasks/{task_id}"))

    def update_task(self, workspace_id: str, task_id: str, request: TaskRequest) -> Task:
        response = self._send(
            "PUT",
            f"/workspaces/{workspace_id}/tasks/{task_id}",
            json=request.model_dump(by_alias=True, mode="json"),
        )
        return _unwrap_task(response)

    def delete_task(self, workspace_id: str, task_id: str) -> None:
        self._send("DELETE", f"/workspaces/{workspace_id}/tasks/{task_id}")


def _decode(adapter: TypeAdapter[Any], response: httpx.Response, what: str) -> Any:
    try:
        return adapter.validate_json(response.content)
    except ValidationError as exc:
        msg = f"Daemon returned an unreadable {what}"
        raise SideApiError(msg, status_code=response.status_code) from exc


def _unwrap_task(response: httpx.Response) -> Task:
    decoded = _decode(_TASK_ADAPTER, response, "task")
    return decoded.task if isinstance(decoded, TaskEnvelope) else decoded


def _error_message(response: httpx.Response) -> str:
    try:
        return ErrorResponse.model_validate_json(response.content).error
    except ValidationError:
        return f"Unexpected error: {response.status_code}"
