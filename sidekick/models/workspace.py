"""Workspace data model as served by the Side daemon.

A workspace binds an identifier to a local repository directory.  The daemon
speaks camelCase on the wire (``localRepoDir``); Python code uses snake_case
and the aliases take care of the mapping in both directions.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WorkspaceRecord(BaseModel):
    """One entry of ``GET /workspaces/``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str | None = None
    local_repo_dir: str | None = Field(default=None, alias="localRepoDir")
    """Absolute path the workspace is bound to.  ``None`` never matches a project."""

    created: str | None = None
    updated: str | None = None


class WorkspaceListResponse(BaseModel):
    """Body of ``GET /workspaces/``.  Order is the daemon's and is significant."""

    model_config = ConfigDict(frozen=True)

    workspaces: list[WorkspaceRecord]

    def find_by_repo_dir(self, repo_dir: str | None) -> WorkspaceRecord | None:
        """Return the first workspace whose ``local_repo_dir`` equals *repo_dir*.

        Comparison is exact: no path normalisation, no case folding, no
        trailing-slash tolerance.
        """
        if repo_dir is None:
            return None
        for workspace in self.workspaces:
            if workspace.local_repo_dir == repo_dir:
                return workspace
        return None


class WorkspaceCreate(BaseModel):
    """Body of ``POST /workspaces``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    local_repo_dir: str = Field(alias="localRepoDir")


class WorkspaceEnvelope(BaseModel):
    """Body of a successful ``POST /workspaces``."""

    workspace: WorkspaceRecord


class ErrorResponse(BaseModel):
    """Error body returned by the daemon on 4xx/5xx."""

    error: str
