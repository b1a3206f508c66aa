"""Unit tests for build context classification."""

from __future__ import annotations

import dataclasses

import pytest

from src.compose.context import Dir, GitUrl, parse_build_context


@pytest.mark.parametrize(
    "raw",
    [
        "git://github.com/docker/docker",
        "git@github.com:docker/docker.git",
        "https://github.com/docker/docker.git",
        "http://www.example.com/",
        "github.com/docker/docker.git",
    ],
)
def test_remote_prefixes_are_git_urls(raw: str) -> None:
    assert parse_build_context(raw) == GitUrl(raw)


@pytest.mark.parametrize("raw", [".", "./web", "../src/foo", "/src/foo", "gitlab.com/owner/repo"])
def test_other_values_are_directories(raw: str) -> None:
    assert parse_build_context(raw) == Dir(raw)


def test_contexts_reject_empty_payloads() -> None:
    with pytest.raises(ValueError):
        GitUrl("")
    with pytest.raises(ValueError):
        Dir("")


def test_contexts_are_immutable() -> None:
    ctx = Dir("web")

    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.path = "api"  # type: ignore[misc]

    assert ctx.value == "web"
    assert GitUrl("git://github.com/docker/docker").value == "git://github.com/docker/docker"
