"""Exceptions shared by the compose document helpers and repository utilities."""
from __future__ import annotations

from typing import Optional


class ComposeError(Exception):
    """Base class for errors raised by the compose helpers."""


class CannotDeriveName(ComposeError, ValueError):
    """A Git URL build context has no usable repository name."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Can't get dir name from Git URL: {url}")


class ContextReadError(ComposeError):
    """The build context of a Build record could not be read."""

    def __init__(self, message: str, raw: Optional[str] = None) -> None:
        self.raw = raw
        super().__init__(message)
