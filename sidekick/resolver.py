"""Status resolver -- classifies a project path against the daemon's workspaces.

Resolution order:

1. Fetch the workspace list once.  If the daemon is unavailable the answer is
   ``DAEMON_UNAVAILABLE`` whatever the project path is.
2. Scan the workspaces in daemon order and return ``WORKSPACE_FOUND`` for the
   first whose ``local_repo_dir`` equals the project path exactly.
3. Otherwise (including when there is no project path) ``NO_WORKSPACE``.

The call blocks for up to the client's connect timeout.  Run it off any
latency-sensitive thread; ``sidekick.background`` does that for async hosts.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sidekick.models.status import WorkspaceStatus

if TYPE_CHECKING:
    from sidekick.client import WorkspaceClient

logger = logging.getLogger(__name__)


class StatusResolver:
    """Resolves ``WorkspaceStatus`` for a project path.  Holds no state between calls."""

    def __init__(self, client: WorkspaceClient) -> None:
        self.client = client

    def resolve(self, project_path: str | None) -> WorkspaceStatus:
        response = self.client.fetch()
        if response is None:
            return WorkspaceStatus.daemon_unavailable()

        workspace = response.find_by_repo_dir(project_path)
        if workspace is None:
            logger.debug("No workspace bound to %r among %d", project_path, len(response.workspaces))
            return WorkspaceStatus.no_workspace()
        return WorkspaceStatus.workspace_found(workspace.id)
