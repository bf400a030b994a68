"""Shared enumerations."""

from __future__ import annotations

from enum import StrEnum


class StatusKind(StrEnum):
    """Outcome of a workspace status check."""

    DAEMON_UNAVAILABLE = "daemon_unavailable"
    WORKSPACE_FOUND = "workspace_found"
    NO_WORKSPACE = "no_workspace"


class TaskStatus(StrEnum):
    """Lifecycle of a task inside a workspace."""

    DRAFTING = "drafting"
    TO_DO = "to_do"
    BLOCKED = "blocked"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"
    CANCELED = "canceled"
    FAILED = "failed"


class AgentType(StrEnum):
    """Who is expected to work on a task."""

    HUMAN = "human"
    LLM = "llm"
    NONE = "none"
