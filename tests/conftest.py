"""Shared fixtures: settings isolation and a client factory for the fake daemon."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator

import httpx
import pytest
from fakes import BASE_URL, Handler

from sidekick.client import WorkspaceClient
from sidekick.settings import _get_settings_cached


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Hide SIDE_* variables from the developer's shell and reset the settings cache."""
    for key in list(os.environ):
        if key.upper().startswith("SIDE_"):
            monkeypatch.delenv(key)
    _get_settings_cached.cache_clear()
    yield
    _get_settings_cached.cache_clear()


@pytest.fixture
def make_client() -> Callable[[Handler], WorkspaceClient]:
    """Factory for a ``WorkspaceClient`` whose requests go to *handler*."""

    def _make(handler: Handler) -> WorkspaceClient:
        return WorkspaceClient(BASE_URL, transport=httpx.MockTransport(handler))

    return _make
