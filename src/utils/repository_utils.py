"""Utility functions for repository operations."""

import re

from ..common.errors import CannotDeriveName

# Last path segment of a Git URL, without an optional ".git" suffix.
_SHORT_NAME_PATTERN = re.compile(r"/([^./]+)(?:\.git)?\Z")


def extract_repo_name(repo_url: str) -> str:
    """Extract the repository short name from a Git URL.

    Args:
        repo_url: Repository URL (e.g., 'git@github.com:docker/docker.git')

    Returns:
        The final path segment of the URL with any trailing '.git' removed,
        e.g. 'docker'. The name never contains '/' or '.'.

    Raises:
        CannotDeriveName: If the URL does not end with such a segment
            (for example 'http://www.example.com/').
    """
    match = _SHORT_NAME_PATTERN.search(repo_url)
    if match is None:
        raise CannotDeriveName(repo_url)
    return match.group(1)
