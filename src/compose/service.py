"""Local build directory lookup for compose services."""
from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from .config import LayoutConfig
from .document import Service
from .local_dirs import git_to_local


def local_build_dir(
    service: Service,
    env: Optional[Mapping[str, str]] = None,
    layout: Optional[LayoutConfig] = None,
) -> Optional[Path]:
    """
    Get the local build directory used for a service.

    Normally this is derived from the service's Git URL. Services without a
    build section have no local build directory and return None.

    Raises:
        ContextReadError: If the build context cannot be read.
        CannotDeriveName: If a Git URL context has no usable repository name.
    """
    if service.build is None:
        return None
    return git_to_local(service.build.read_context(env), layout)


__all__ = ["local_build_dir"]
