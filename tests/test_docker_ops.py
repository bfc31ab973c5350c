"""Tests for Docker SDK operations: network creation and pruning."""

from unittest.mock import MagicMock, patch

import docker
import pytest

from homectl.core import docker_ops
from homectl.core.docker_ops import ensure_network, get_docker_client, prune_resources
from homectl.core.errors import DockerUnavailableError


def test_get_docker_client_reports_unreachable_daemon() -> None:
    with patch("homectl.core.docker_ops.docker.from_env", side_effect=docker.errors.DockerException("refused")):
        with pytest.raises(DockerUnavailableError, match="Is Docker running"):
            get_docker_client()


def test_get_docker_client_is_cached() -> None:
    with patch("homectl.core.docker_ops.docker.from_env") as from_env:
        assert get_docker_client() is get_docker_client()
    from_env.assert_called_once()


class TestEnsureNetwork:
    def test_existing_network_is_left_alone(self) -> None:
        client = MagicMock()

        assert ensure_network("shared-network", client=client) is False
        client.networks.create.assert_not_called()

    def test_missing_network_is_created(self) -> None:
        client = MagicMock()
        client.networks.get.side_effect = docker.errors.NotFound("missing")

        assert ensure_network("shared-network", client=client) is True
        client.networks.create.assert_called_once_with("shared-network", driver="bridge")

    def test_conflict_on_create_counts_as_existing(self) -> None:
        client = MagicMock()
        client.networks.get.side_effect = docker.errors.NotFound("missing")
        client.networks.create.side_effect = docker.errors.APIError(
            "conflict", response=MagicMock(status_code=409)
        )

        assert ensure_network("shared-network", client=client) is False

    def test_other_api_errors_propagate(self) -> None:
        client = MagicMock()
        client.networks.get.side_effect = docker.errors.NotFound("missing")
        client.networks.create.side_effect = docker.errors.APIError(
            "boom", response=MagicMock(status_code=500)
        )

        with pytest.raises(docker.errors.APIError):
            ensure_network("shared-network", client=client)


class TestPruneResources:
    def test_prunes_in_order_and_counts(self) -> None:
        client = MagicMock()
        client.containers.prune.return_value = {"ContainersDeleted": ["a", "b"], "SpaceReclaimed": 2048}
        client.images.prune.return_value = {"ImagesDeleted": None, "SpaceReclaimed": 0}
        client.volumes.prune.return_value = {"VolumesDeleted": ["v"], "SpaceReclaimed": 10}
        client.networks.prune.return_value = {"NetworksDeleted": ["n1"]}

        reports = prune_resources(client)

        assert [(r.resource, r.removed, r.space_reclaimed) for r in reports] == [
            ("containers", 2, 2048),
            ("images", 0, 0),
            ("volumes", 1, 10),
            ("networks", 1, 0),
        ]
        assert not any(r.failed for r in reports)

    def test_failed_step_does_not_stop_the_rest(self) -> None:
        client = MagicMock()
        client.images.prune.side_effect = docker.errors.APIError("a prune operation is already running")
        client.containers.prune.return_value = {}
        client.volumes.prune.return_value = {}
        client.networks.prune.return_value = {}

        reports = prune_resources(client)

        assert [r.failed for r in reports] == [False, True, False, False]
        client.networks.prune.assert_called_once()

    def test_uses_shared_client_by_default(self, docker_client: MagicMock) -> None:
        docker_client.containers.prune.return_value = {}
        docker_client.images.prune.return_value = {}
        docker_client.volumes.prune.return_value = {}
        docker_client.networks.prune.return_value = {}

        prune_resources()

        docker_client.containers.prune.assert_called_once_with()
        assert docker_ops._docker_client is None
