"""Data models for the Side workspace API."""

from sidekick.models.enums import AgentType, StatusKind, TaskStatus
from sidekick.models.status import DEFAULT_TEMPLATES, WorkspaceStatus
from sidekick.models.task import Task, TaskEnvelope, TaskListResponse, TaskRequest
from sidekick.models.workspace import (
    ErrorResponse,
    WorkspaceCreate,
    WorkspaceEnvelope,
    WorkspaceListResponse,
    WorkspaceRecord,
)

__all__ = [
    "DEFAULT_TEMPLATES",
    "AgentType",
    "ErrorResponse",
    "StatusKind",
    "Task",
    "TaskEnvelope",
    "TaskListResponse",
    "TaskRequest",
    "TaskStatus",
    "WorkspaceCreate",
    "WorkspaceEnvelope",
    "WorkspaceListResponse",
    "WorkspaceRecord",
    "WorkspaceStatus",
]
