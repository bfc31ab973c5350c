"""Shared fixtures: an isolated project root and a stubbed compose runner."""

from __future__ import annotations

import subprocess
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from homectl.core import docker_ops
from homectl.core.groups import GROUPS


@pytest.fixture(autouse=True)
def reset_docker_client() -> Iterator[None]:
    """Never reuse a client between tests."""
    docker_ops._docker_client = None
    yield
    docker_ops._docker_client = None


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    """Project root with a directory for every service group."""
    for group in GROUPS:
        (tmp_path / group.value).mkdir()
    return tmp_path


@pytest.fixture()
def fake_run() -> Iterator[MagicMock]:
    """Replace subprocess.run in the compose module; every call succeeds."""
    with patch("homectl.core.compose.subprocess.run") as run:
        run.side_effect = lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 0)
        yield run


@pytest.fixture()
def docker_client() -> Iterator[MagicMock]:
    """Mocked Docker SDK client returned by get_docker_client."""
    client = MagicMock()
    with patch("homectl.core.docker_ops.get_docker_client", return_value=client):
        yield client

