"""
Docker operations for CLI
Handles the Docker API calls that are not scoped to a compose group
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import docker

from .errors import DockerUnavailableError

logger = logging.getLogger(__name__)

_docker_client = None


def get_docker_client():
    """Return a shared Docker client, connecting on first use"""
    global _docker_client
    if _docker_client is None:
        try:
            _docker_client = docker.from_env()
        except docker.errors.DockerException as e:
            raise DockerUnavailableError(f"Could not connect to Docker. Is Docker running? ({e})")
    return _docker_client


def ensure_network(name: str, client=None) -> bool:
    """
    Ensure the shared network exists
    Returns True when the network was created, False when it already existed
    """
    client = client or get_docker_client()
    try:
        client.networks.get(name)
        return False
    except docker.errors.NotFound:
        pass

    try:
        client.networks.create(name, driver="bridge")
    except docker.errors.APIError as e:
        # Lost a race with another creator
        if getattr(e, "status_code", None) == 409:
            return False
        raise
    logger.debug("Created network %s", name)
    return True


@dataclass
class PruneReport:
    """Outcome of one prune step"""

    resource: str
    removed: int = 0
    space_reclaimed: int = 0
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


# (resource label, client attribute, key listing the deleted items)
PRUNE_STEPS = (
    ("containers", "containers", "ContainersDeleted"),
    ("images", "images", "ImagesDeleted"),
    ("volumes", "volumes", "VolumesDeleted"),
    ("networks", "networks", "NetworksDeleted"),
)


def prune_resources(client=None) -> List[PruneReport]:
    """Prune stopped containers, dangling images, unused volumes and networks"""
    client = client or get_docker_client()
    reports = []

    for resource, attr, deleted_key in PRUNE_STEPS:
        try:
            result = getattr(client, attr).prune() or {}
        except docker.errors.APIError as e:
            logger.error("Failed to prune %s: %s", resource, e)
            reports.append(PruneReport(resource, error=str(e)))
            continue

        deleted = result.get(deleted_key) or []
        reports.append(PruneReport(
            resource,
            removed=len(deleted),
            space_reclaimed=result.get("SpaceReclaimed") or 0
        ))

    return reports
