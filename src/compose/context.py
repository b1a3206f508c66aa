"""Build context variants for compose service definitions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# Prefixes compose tooling treats as remote Git build contexts.
GIT_URL_PREFIXES = ("http://", "https://", "git://", "github.com/", "git@")


@dataclass(frozen=True, slots=True)
class GitUrl:
    """Build context pointing at a remote Git repository."""

    url: str

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("Git URL build context cannot be empty.")

    @property
    def value(self) -> str:
        return self.url


@dataclass(frozen=True, slots=True)
class Dir:
    """Build context pointing at a directory, usually relative."""

    path: str

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Directory build context cannot be empty.")

    @property
    def value(self) -> str:
        return self.path


BuildContext = Union[GitUrl, Dir]


def parse_build_context(raw: str) -> BuildContext:
    """
    Classify a raw compose build context string.

    Strings starting with a known remote prefix (http, https, git protocol,
    github.com shorthand or scp-like git@host) become GitUrl; anything else
    is treated as a directory.
    """
    if raw.startswith(GIT_URL_PREFIXES):
        return GitUrl(raw)
    return Dir(raw)


__all__ = ["GitUrl", "Dir", "BuildContext", "GIT_URL_PREFIXES", "parse_build_context"]
