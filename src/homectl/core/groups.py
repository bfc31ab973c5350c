"""
Service group table and resolver
Maps a service token to the group directories a command operates on
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import MissingDirectoryError, UnknownServiceError

ALL_SERVICES = "all"


class ServiceGroup(str, Enum):
    """Fixed deployment categories, each backed by a compose directory"""

    INFRASTRUCTURE = "infrastructure"
    MEDIA = "media"
    PRODUCTIVITY = "productivity"

    @property
    def description(self) -> str:
        return GROUP_DESCRIPTIONS[self]

    def directory(self, root: Path) -> Path:
        return Path(root) / self.value


GROUP_DESCRIPTIONS = {
    ServiceGroup.INFRASTRUCTURE: "DNS and reverse proxy",
    ServiceGroup.MEDIA: "Plex, Sonarr, Radarr, etc.",
    ServiceGroup.PRODUCTIVITY: "Plane, SilverBullet",
}

# Declared order is the processing order for "all"
GROUPS = (
    ServiceGroup.INFRASTRUCTURE,
    ServiceGroup.MEDIA,
    ServiceGroup.PRODUCTIVITY,
)


@dataclass(frozen=True)
class Target:
    """A group paired with the directory the compose tool runs in"""

    group: ServiceGroup
    directory: Path

    @property
    def name(self) -> str:
        return self.group.value


def resolve_groups(
    service: Optional[str],
    groups: Sequence[ServiceGroup]
) -> List[ServiceGroup]:
    """Resolve a service token to groups, raising on unknown names"""
    if service is None or service == ALL_SERVICES:
        return list(groups)

    for group in groups:
        if group.value == service:
            return [group]

    raise UnknownServiceError(service, service_names(groups))


def resolve_targets(
    service: Optional[str],
    root: Path,
    groups: Sequence[ServiceGroup]
) -> List[Target]:
    """
    Resolve a service token to compose targets under root

    A named group must have its directory already; for "all" the
    existence check is left to the invoker so missing groups are skipped.
    """
    resolved = resolve_groups(service, groups)
    targets = [Target(group, group.directory(root)) for group in resolved]

    if service is not None and service != ALL_SERVICES:
        target = targets[0]
        if not target.directory.is_dir():
            raise MissingDirectoryError(target.name, target.directory)

    return targets


def service_names(groups: Sequence[ServiceGroup] = GROUPS) -> List[str]:
    """Valid service tokens, for help and error messages"""
    return [ALL_SERVICES] + [group.value for group in groups]
