"""Unit tests for mapping build contexts to local directories."""

from __future__ import annotations

import builtins
import os
from pathlib import Path

import pytest

from src.common.errors import CannotDeriveName
from src.compose.config import LayoutConfig
from src.compose.context import Dir, GitUrl
from src.compose.local_dirs import git_to_local


def test_git_to_local_fixes_local_directory_paths_as_needed() -> None:
    assert git_to_local(Dir("/src/foo")) == Path("pods") / "/src/foo"
    assert git_to_local(Dir("/src/foo")) == Path("/src/foo")
    assert git_to_local(Dir("../src/foo")) == Path("pods/../src/foo")


def test_relative_directory_keeps_parent_segments() -> None:
    local_dir = git_to_local(Dir("../src/foo"))

    assert local_dir.parts == ("pods", "..", "src", "foo")


@pytest.mark.parametrize(
    ("url", "name"),
    [
        # Example URLs accepted by docker-compose.
        ("git://github.com/docker/docker", "docker"),
        ("git@github.com:docker/docker.git", "docker"),
        ("git@bitbucket.org:atlassianlabs/atlassian-docker.git", "atlassian-docker"),
        ("https://github.com/docker/docker.git", "docker"),
        ("http://github.com/docker/docker.git", "docker"),
        ("github.com/docker/docker.git", "docker"),
    ],
)
def test_git_to_local_extracts_directory_part_of_git_urls(url: str, name: str) -> None:
    local_dir = git_to_local(GitUrl(url))

    assert local_dir == Path("src") / name
    assert local_dir.parts[-2:] == ("src", name)


def test_git_to_local_rejects_url_without_repository_name() -> None:
    with pytest.raises(CannotDeriveName) as exc_info:
        git_to_local(GitUrl("http://www.example.com/"))

    assert "http://www.example.com/" in str(exc_info.value)
    assert exc_info.value.url == "http://www.example.com/"


def test_directory_mapping_is_idempotent() -> None:
    ctx = Dir("services/web")

    assert git_to_local(ctx) == git_to_local(ctx)


def test_layout_overrides_prefixes() -> None:
    layout = LayoutConfig(git_checkout_dir="checkouts", pods_dir="compose", project_root="/work")

    assert git_to_local(GitUrl("https://github.com/docker/docker.git"), layout) == Path("checkouts/docker")
    assert git_to_local(Dir("web"), layout) == Path("compose/web")


def test_mapping_does_not_touch_filesystem(monkeypatch: pytest.MonkeyPatch) -> None:
    def _forbidden(*args, **kwargs):
        raise AssertionError("filesystem access during mapping")

    monkeypatch.setattr(builtins, "open", _forbidden)
    monkeypatch.setattr(os, "stat", _forbidden)
    monkeypatch.setattr(os, "listdir", _forbidden)
    monkeypatch.setattr(os, "scandir", _forbidden)

    assert git_to_local(GitUrl("git://github.com/docker/docker")) == Path("src/docker")
    assert git_to_local(Dir("../src/foo")) == Path("pods/../src/foo")
    with pytest.raises(CannotDeriveName):
        git_to_local(GitUrl("http://www.example.com/"))


def test_unknown_context_type_is_rejected() -> None:
    with pytest.raises(TypeError):
        git_to_local("docker")  # type: ignore[arg-type]
