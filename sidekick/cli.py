import os

import click

from sidekick.client import SideApiError, WorkspaceClient
from sidekick.models.enums import AgentType, TaskStatus
from sidekick.models.status import WorkspaceStatus
from sidekick.models.task import DEFAULT_FLOW_TYPE, TaskRequest
from sidekick.resolver import StatusResolver


@click.group()
@click.option("--base-url", default=None, help="Daemon API root (default: from SIDE_BASE_URL).")
@click.option("--log-level", default=None, help="Log level for stderr (default: from SIDE_LOG_LEVEL).")
@click.pass_context
def main(ctx: click.Context, base_url: str | None, log_level: str | None) -> None:
    """Sidekick - check whether a project is a registered Side workspace."""
    from sidekick.log import setup_logging
    from sidekick.settings import get_settings

    settings = get_settings()
    setup_logging(log_level or settings.log_level)

    if ctx.obj is None:
        ctx.obj = WorkspaceClient(
            base_url=base_url or settings.base_url,
            connect_timeout=settings.connect_timeout,
        )


def _project_path(path: str | None) -> str:
    # The daemon stores absolute paths; compare against the same form.
    return os.path.abspath(path) if path is not None else os.getcwd()


@main.command()
@click.argument("path", required=False)
@click.option("--no-project", is_flag=True, default=False, help="Resolve with no project directory.")
@click.pass_obj
def status(client: WorkspaceClient, path: str | None, no_project: bool) -> None:
    """Print the workspace status of PATH (default: current directory)."""
    project_path = None if no_project else _project_path(path)
    click.echo(StatusResolver(client).resolve(project_path).render())


@main.command()
@click.pass_obj
def workspaces(client: WorkspaceClient) -> None:
    """List the workspaces known to the daemon."""
    records = client.list_workspaces()
    if records is None:
        raise click.ClickException(WorkspaceStatus.daemon_unavailable().render())
    for record in records:
        click.echo(f"{record.id}\t{record.name or ''}\t{record.local_repo_dir or ''}")


@main.command()
@click.argument("path", required=False)
@click.option("--name", default=None, help="Workspace name (default: directory name).")
@click.pass_obj
def init(client: WorkspaceClient, path: str | None, name: str | None) -> None:
    """Register PATH (default: current directory) as a workspace."""
    project_path = _project_path(path)
    try:
        record = client.create_workspace(name or os.path.basename(project_path), project_path)
    except SideApiError as exc:
        raise click.ClickException(exc.message) from exc
    click.echo(WorkspaceStatus.workspace_found(record.id).render())


@main.command()
@click.argument("path", required=False)
@click.option("--interval", default=None, type=float, help="Seconds between checks (default: from SIDE_POLL_INTERVAL).")
@click.option("--count", default=0, type=int, help="Stop after this many checks (default: 0, run forever).")
@click.pass_obj
def watch(client: WorkspaceClient, path: str | None, interval: float | None, count: int) -> None:
    """Poll the workspace status of PATH and print it whenever it changes."""
    import anyio

    from sidekick.background import check_status
    from sidekick.settings import get_settings

    resolver = StatusResolver(client)
    project_path = _project_path(path)
    delay = interval if interval is not None else get_settings().poll_interval

    async def _poll() -> None:
        previous: WorkspaceStatus | None = None

        def _show(current: WorkspaceStatus) -> None:
            nonlocal previous
            if current != previous:
                click.echo(current.render())
            previous = current

        checks = 0
        while True:
            await check_status(resolver, project_path, _show)
            checks += 1
            if count and checks >= count:
                return
            await anyio.sleep(delay)

    anyio.run(_poll)


# ---------------------------------------------------------------------------
# Tasks (run against the workspace bound to PATH)
# ---------------------------------------------------------------------------


def _workspace_id(client: WorkspaceClient, path: str | None) -> str:
    status = StatusResolver(client).resolve(_project_path(path))
    if status.workspace_id is None:
        raise click.ClickException(status.render())
    return status.workspace_id


_STATUS_CHOICE = click.Choice([s.value for s in TaskStatus])


@main.command()
@click.argument("path", required=False)
@click.option("--status", "statuses", multiple=True, type=_STATUS_CHOICE, help="Only tasks in this status (repeatable).")
@click.pass_obj
def tasks(client: WorkspaceClient, path: str | None, statuses: tuple[str, ...]) -> None:
    """List tasks of the workspace bound to PATH (default: current directory)."""
    workspace_id = _workspace_id(client, path)
    try:
        found = client.list_tasks(workspace_id, statuses or None)
    except SideApiError as exc:
        raise click.ClickException(exc.message) from exc
    for task in found:
        click.echo(f"{task.id}\t{task.status}\t{task.description}")


@main.command("task-add")
@click.argument("description")
@click.option("--path", default=None, help="Project directory (default: current directory).")
@click.option("--status", default=TaskStatus.TO_DO.value, type=_STATUS_CHOICE, show_default=True)
@click.option("--agent-type", default=AgentType.LLM.value, type=click.Choice([a.value for a in AgentType]), show_default=True)
@click.option("--flow-type", default=DEFAULT_FLOW_TYPE, show_default=True, help="e.g. basic_dev, planned_dev.")
@click.pass_obj
def task_add(
    client: WorkspaceClient,
    description: str,
    path: str | None,
    status: str,
    agent_type: str,
    flow_type: str,
) -> None:
    """Create a task in the workspace bound to the project directory."""
    workspace_id = _workspace_id(client, path)
    request = TaskRequest(
        description=description,
        status=TaskStatus(status),
        agent_type=AgentType(agent_type),
        flow_type=flow_type,
    )
    try:
        task = client.create_task(workspace_id, request)
    except SideApiError as exc:
        raise click.ClickException(exc.message) from exc
    click.echo(f"Created task {task.id}")


@main.command("task-delete")
@click.argument("task_id")
@click.option("--path", default=None, help="Project directory (default: current directory).")
@click.pass_obj
def task_delete(client: WorkspaceClient, task_id: str, path: str | None) -> None:
    """Delete a task from the workspace bound to the project directory."""
    workspace_id = _workspace_id(client, path)
    try:
        client.delete_task(workspace_id, task_id)
    except SideApiError as exc:
        raise click.ClickException(exc.message) from exc
    click.echo(f"Deleted task {task_id}")


if __name__ == "__main__":
    main()
