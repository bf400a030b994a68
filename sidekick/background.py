"""Run status checks off the event loop.

The resolver is synchronous and blocks on the network.  Hosts with an event
loop (a UI, a watcher) call these helpers instead: the resolve runs in a
worker thread and the result comes back on the caller's loop.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from anyio import to_thread

from sidekick.models.status import WorkspaceStatus
from sidekick.resolver import StatusResolver

StatusCallback = Callable[[WorkspaceStatus], Awaitable[None] | None]


async def resolve_in_background(resolver: StatusResolver, project_path: str | None) -> WorkspaceStatus:
    """Resolve in a worker thread; cancellation abandons the wait, not the request."""
    return await to_thread.run_sync(resolver.resolve, project_path, abandon_on_cancel=True)


async def check_status(
    resolver: StatusResolver,
    project_path: str | None,
    on_result: StatusCallback,
) -> WorkspaceStatus:
    """Resolve in the background, then deliver the status to *on_result* on this loop.

    *on_result* may be a plain function or a coroutine function.
    """
    status = await resolve_in_background(resolver, project_path)
    result = on_result(status)
    if result is not None:
        await result
    return status
