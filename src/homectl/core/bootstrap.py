"""
First-time setup
Creates the shared network, the config directory tree and Plane permissions
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .config import Settings
from .docker_ops import ensure_network
from .errors import SetupError

logger = logging.getLogger(__name__)

# Relative to the project root
SETUP_DIRECTORIES = (
    "infrastructure/config",
    "media/config",
    "productivity/config",
    # Media
    "media/config/deluge",
    "media/config/plex",
    "media/config/sonarr",
    "media/config/radarr",
    "media/config/prowlarr",
    "media/config/threadfin",
    # Productivity
    "productivity/space",
    "productivity/config/plane/redis-data",
    "productivity/config/plane/pgdata",
    "productivity/config/plane/uploads",
    "productivity/config/plane/logs",
    # Infrastructure (Caddy)
    "infrastructure/config/caddy/data",
    "infrastructure/config/caddy/config",
    "infrastructure/config/caddy/sites",
    "infrastructure/config/ssl",
)

PLANE_DIRECTORY = "productivity/config/plane"
PLANE_MODE = 0o755


@dataclass
class PermissionResult:
    path: Path
    mode: int
    applied: bool
    error: Optional[str] = None


@dataclass
class OwnershipResult:
    path: Path
    owner: Tuple[int, int]
    applied: bool
    error: Optional[str] = None


@dataclass
class SetupReport:
    network: str
    network_created: bool
    created_directories: List[Path] = field(default_factory=list)
    permissions: Optional[PermissionResult] = None
    ownership: Optional[OwnershipResult] = None


def _walk(path: Path):
    yield path
    for dirpath, dirnames, filenames in os.walk(path):
        for name in dirnames + filenames:
            yield Path(dirpath) / name


def create_directories(root: Path) -> List[Path]:
    """Create the directory tree, returning the directories that were new"""
    created = []
    for relative in SETUP_DIRECTORIES:
        path = root / relative
        if path.is_dir():
            continue
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SetupError(f"Could not create {path}: {e}")
        created.append(path)
    return created


def set_permissions(path: Path, mode: int = PLANE_MODE) -> PermissionResult:
    """chmod -R on a subtree, best effort"""
    try:
        for entry in _walk(path):
            entry.chmod(mode)
    except OSError as e:
        return PermissionResult(path, mode, applied=False, error=str(e))
    return PermissionResult(path, mode, applied=True)


def set_ownership(path: Path, owner: Tuple[int, int]) -> OwnershipResult:
    """
    chown -R on a subtree, best effort

    The host may not allow ownership changes (rootless runs, some
    filesystems), so failures are returned instead of raised.
    """
    uid, gid = owner
    try:
        for entry in _walk(path):
            os.chown(entry, uid, gid)
    except (OSError, AttributeError) as e:
        return OwnershipResult(path, owner, applied=False, error=str(e))
    return OwnershipResult(path, owner, applied=True)


def run_setup(settings: Settings, client=None) -> SetupReport:
    """Idempotent bootstrap of a home server project root"""
    root = Path(settings.root)

    logger.info("Creating shared network...")
    created = ensure_network(settings.network, client=client)
    if not created:
        logger.warning("Network %s already exists", settings.network)

    report = SetupReport(network=settings.network, network_created=created)

    logger.info("Creating directory structure...")
    report.created_directories = create_directories(root)

    logger.info("Setting permissions...")
    plane = root / PLANE_DIRECTORY
    report.permissions = set_permissions(plane)
    if not report.permissions.applied:
        logger.warning(
            "Could not set mode %o on %s: %s",
            PLANE_MODE, plane, report.permissions.error
        )

    report.ownership = set_ownership(plane, settings.owner)
    if not report.ownership.applied:
        uid, gid = settings.owner
        logger.warning(
            "Could not change ownership of %s to %d:%d: %s",
            plane, uid, gid, report.ownership.error
        )

    return report
