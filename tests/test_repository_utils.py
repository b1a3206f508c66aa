"""Unit tests for repository name extraction."""

from __future__ import annotations

import pytest

from src.common.errors import CannotDeriveName
from src.utils.repository_utils import extract_repo_name


def test_extract_repo_name_strips_git_suffix() -> None:
    assert extract_repo_name("https://github.com/owner/repo-1.git") == "repo-1"
    assert extract_repo_name("https://github.com/owner/repo-1") == "repo-1"


@pytest.mark.parametrize(
    "url",
    [
        "http://www.example.com/",
        "https://github.com/owner/repo/",
        "https://example.com/index.html",
        "https://github.com/owner/my.tool.git",
        "docker",
        "https://github.com/owner/repo.git\n",
    ],
)
def test_extract_repo_name_rejects_unusable_urls(url: str) -> None:
    with pytest.raises(CannotDeriveName):
        extract_repo_name(url)


def test_cannot_derive_name_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="Can't get dir name from Git URL"):
        extract_repo_name("http://www.example.com/")
