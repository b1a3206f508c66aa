"""Map build contexts to the local directories that hold their sources."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..utils.repository_utils import extract_repo_name
from .config import LayoutConfig
from .context import BuildContext, Dir, GitUrl

logger = logging.getLogger(__name__)

GIT_CHECKOUT_DIR = "src"
PODS_DIR = "pods"


def git_to_local(ctx: BuildContext, layout: Optional[LayoutConfig] = None) -> Path:
    """
    Given a build context, return the local directory for its sources.

    Git URLs are checked out under ``src/<repo name>``. Directory contexts
    are relative to ``pods``, where the main compose documents live; the
    path is joined as-is, so ``..`` segments survive and an absolute path
    replaces the prefix.

    Args:
        ctx: GitUrl or Dir build context
        layout: Optional layout overriding the ``src`` / ``pods`` prefixes

    Returns:
        Relative (or, for absolute Dir contexts, absolute) local path

    Raises:
        CannotDeriveName: If a Git URL has no usable repository name.
    """
    git_checkout_dir = layout.git_checkout_dir if layout is not None else GIT_CHECKOUT_DIR
    pods_dir = layout.pods_dir if layout is not None else PODS_DIR

    if isinstance(ctx, GitUrl):
        local_dir = Path(git_checkout_dir) / extract_repo_name(ctx.url)
    elif isinstance(ctx, Dir):
        local_dir = Path(pods_dir) / ctx.path
    else:
        raise TypeError(f"Unsupported build context: {ctx!r}")

    logger.debug("Mapped build context %s to %s", ctx.value, local_dir)
    return local_dir


__all__ = ["git_to_local", "GIT_CHECKOUT_DIR", "PODS_DIR"]
