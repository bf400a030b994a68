"""Workspace status -- the classification handed back to the caller."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, model_validator

from sidekick.models.enums import StatusKind

DEFAULT_TEMPLATES: dict[StatusKind, str] = {
    StatusKind.DAEMON_UNAVAILABLE: "Side is not running. Please run `side start`",
    StatusKind.WORKSPACE_FOUND: "Found workspace {workspace_id}",
    StatusKind.NO_WORKSPACE: "No workspace set up yet",
}


class WorkspaceStatus(BaseModel):
    """Semantic status; ``workspace_id`` is set only for ``WORKSPACE_FOUND``."""

    model_config = ConfigDict(frozen=True)

    kind: StatusKind
    workspace_id: str | None = None

    @model_validator(mode="after")
    def _check_workspace_id(self) -> WorkspaceStatus:
        if self.kind == StatusKind.WORKSPACE_FOUND and self.workspace_id is None:
            msg = "workspace_id is required for workspace_found"
            raise ValueError(msg)
        if self.kind != StatusKind.WORKSPACE_FOUND and self.workspace_id is not None:
            msg = f"workspace_id must be empty for {self.kind}"
            raise ValueError(msg)
        return self

    # -- Constructors ----------------------------------------------------------

    @classmethod
    def daemon_unavailable(cls) -> WorkspaceStatus:
        return cls(kind=StatusKind.DAEMON_UNAVAILABLE)

    @classmethod
    def workspace_found(cls, workspace_id: str) -> WorkspaceStatus:
        return cls(kind=StatusKind.WORKSPACE_FOUND, workspace_id=workspace_id)

    @classmethod
    def no_workspace(cls) -> WorkspaceStatus:
        return cls(kind=StatusKind.NO_WORKSPACE)

    # -- Rendering -------------------------------------------------------------

    def render(self, templates: Mapping[StatusKind, str] | None = None) -> str:
        """Format the status for display.

        *templates* overrides the default English strings per kind; the
        ``{workspace_id}`` placeholder is available to every template.
        """
        template = (templates or {}).get(self.kind, DEFAULT_TEMPLATES[self.kind])
        return template.format(workspace_id=self.workspace_id or "")
