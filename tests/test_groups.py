"""Unit tests for the service group table and resolver."""

from pathlib import Path

import pytest

from homectl.core.errors import MissingDirectoryError, UnknownServiceError
from homectl.core.groups import (
    GROUPS,
    ServiceGroup,
    resolve_groups,
    resolve_targets,
    service_names,
)


class TestResolveGroups:
    def test_all_returns_every_group_in_declared_order(self) -> None:
        assert resolve_groups("all", GROUPS) == [
            ServiceGroup.INFRASTRUCTURE,
            ServiceGroup.MEDIA,
            ServiceGroup.PRODUCTIVITY,
        ]

    def test_absent_token_means_all(self) -> None:
        assert resolve_groups(None, GROUPS) == list(GROUPS)

    @pytest.mark.parametrize("name", ["infrastructure", "media", "productivity"])
    def test_named_group(self, name: str) -> None:
        assert resolve_groups(name, GROUPS) == [ServiceGroup(name)]

    @pytest.mark.parametrize("name", ["plane", "Media", "", " media"])
    def test_unknown_token_raises(self, name: str) -> None:
        with pytest.raises(UnknownServiceError) as exc_info:
            resolve_groups(name, GROUPS)
        assert exc_info.value.service == name

    def test_uses_the_table_it_is_given(self) -> None:
        table = (ServiceGroup.MEDIA,)
        assert resolve_groups("all", table) == [ServiceGroup.MEDIA]
        with pytest.raises(UnknownServiceError):
            resolve_groups("infrastructure", table)


class TestResolveTargets:
    def test_named_group_points_at_its_directory(self, project_root: Path) -> None:
        targets = resolve_targets("media", project_root, GROUPS)

        assert len(targets) == 1
        assert targets[0].group is ServiceGroup.MEDIA
        assert targets[0].directory == project_root / "media"

    def test_named_group_without_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(MissingDirectoryError) as exc_info:
            resolve_targets("infrastructure", tmp_path, GROUPS)
        assert exc_info.value.group == "infrastructure"

    def test_all_does_not_require_directories(self, tmp_path: Path) -> None:
        targets = resolve_targets("all", tmp_path, GROUPS)

        assert [t.name for t in targets] == ["infrastructure", "media", "productivity"]
        assert [t.directory for t in targets] == [
            tmp_path / "infrastructure",
            tmp_path / "media",
            tmp_path / "productivity",
        ]

    def test_unknown_service_is_checked_before_directories(self, tmp_path: Path) -> None:
        with pytest.raises(UnknownServiceError):
            resolve_targets("plane", tmp_path, GROUPS)


def test_service_names_lead_with_all() -> None:
    assert service_names() == ["all", "infrastructure", "media", "productivity"]


def test_groups_have_descriptions() -> None:
    assert ServiceGroup.INFRASTRUCTURE.description == "DNS and reverse proxy"
    assert all(group.description for group in GROUPS)
