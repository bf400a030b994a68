"""Tests for workspace status resolution against a fake daemon."""

from __future__ import annotations

import httpx
import pytest
from fakes import listing, refused, status_code, timed_out, workspace

from sidekick.client import WorkspaceClient
from sidekick.models import StatusKind, WorkspaceStatus
from sidekick.resolver import StatusResolver

PROJ = "/home/u/proj"

# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def test_daemon_down(make_client) -> None:
    status = StatusResolver(make_client(refused)).resolve(PROJ)
    assert status == WorkspaceStatus.daemon_unavailable()


def test_empty_listing(make_client) -> None:
    status = StatusResolver(make_client(listing())).resolve(PROJ)
    assert status.kind == StatusKind.NO_WORKSPACE


def test_matching_workspace(make_client) -> None:
    status = StatusResolver(make_client(listing(workspace("w1", PROJ)))).resolve(PROJ)
    assert status == WorkspaceStatus.workspace_found("w1")
    assert status.render() == "Found workspace w1"


def test_other_project(make_client) -> None:
    status = StatusResolver(make_client(listing(workspace("w1", PROJ)))).resolve("/home/u/other")
    assert status == WorkspaceStatus.no_workspace()


def test_server_error(make_client) -> None:
    status = StatusResolver(make_client(status_code(500))).resolve(PROJ)
    assert status.kind == StatusKind.DAEMON_UNAVAILABLE


# ---------------------------------------------------------------------------
# Matching rules
# ---------------------------------------------------------------------------


def test_first_of_duplicates_wins(make_client) -> None:
    client = make_client(listing(workspace("w0", "/x"), workspace("w1", PROJ), workspace("w2", PROJ)))
    assert StatusResolver(client).resolve(PROJ).workspace_id == "w1"


@pytest.mark.parametrize("path", [PROJ + "/", "/home/U/proj", "home/u/proj", "/home/u/./proj"])
def test_no_normalisation(make_client, path: str) -> None:
    client = make_client(listing(workspace("w1", PROJ)))
    assert StatusResolver(client).resolve(path).kind == StatusKind.NO_WORKSPACE


def test_record_without_dir_is_ignored(make_client) -> None:
    client = make_client(listing(workspace("w0", None), workspace("w1", PROJ)))
    assert StatusResolver(client).resolve(PROJ).workspace_id == "w1"


def test_absent_path_never_matches(make_client) -> None:
    client = make_client(listing(workspace("w0", None), workspace("w1", PROJ)))
    assert StatusResolver(client).resolve(None) == WorkspaceStatus.no_workspace()


@pytest.mark.parametrize("handler", [refused, timed_out, status_code(500), status_code(200, "{")])
@pytest.mark.parametrize("path", [PROJ, None])
def test_unavailable_regardless_of_path(make_client, handler, path) -> None:
    assert StatusResolver(make_client(handler)).resolve(path).kind == StatusKind.DAEMON_UNAVAILABLE


@pytest.mark.parametrize("base_url", ["http://[::1", "http://localhost:8855/\x00"])
def test_malformed_base_url_is_unavailable(base_url: str) -> None:
    status = StatusResolver(WorkspaceClient(base_url)).resolve(PROJ)
    assert status == WorkspaceStatus.daemon_unavailable()


# ---------------------------------------------------------------------------
# Call pattern
# ---------------------------------------------------------------------------


def test_one_request_per_resolve(make_client) -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(200, json={"workspaces": [workspace("w1", PROJ)]})

    resolver = StatusResolver(make_client(handler))
    first = resolver.resolve(PROJ)
    second = resolver.resolve(PROJ)

    assert first == second == WorkspaceStatus.workspace_found("w1")
    assert calls == 2


def test_reflects_daemon_changes_between_calls(make_client) -> None:
    responses = iter([httpx.Response(503), httpx.Response(200, json={"workspaces": [workspace("w1", PROJ)]})])

    resolver = StatusResolver(make_client(lambda request: next(responses)))

    assert resolver.resolve(PROJ).kind == StatusKind.DAEMON_UNAVAILABLE
    assert resolver.resolve(PROJ).workspace_id == "w1"
