"""Task data model -- units of work the daemon tracks per workspace."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sidekick.models.enums import AgentType, TaskStatus

DEFAULT_FLOW_TYPE = "basic_dev"


class Task(BaseModel):
    """One task of ``GET /workspaces/{workspace_id}/tasks``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    workspace_id: str = Field(alias="workspaceId")
    status: TaskStatus
    description: str = ""
    agent_type: AgentType | None = Field(default=None, alias="agentType")
    flow_type: str | None = Field(default=None, alias="flowType")
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class TaskListResponse(BaseModel):
    """Body of ``GET /workspaces/{workspace_id}/tasks``."""

    tasks: list[Task]


class TaskEnvelope(BaseModel):
    """Body of a single-task response.  Attached flows are not modelled."""

    task: Task


class TaskRequest(BaseModel):
    """Body of task create / update."""

    model_config = ConfigDict(populate_by_name=True)

    description: str
    status: TaskStatus = TaskStatus.TO_DO
    agent_type: AgentType = Field(default=AgentType.LLM, alias="agentType")
    flow_type: str = Field(default=DEFAULT_FLOW_TYPE, alias="flowType")
