"""Compose document helpers mapping service build contexts to local directories."""

from ..common.errors import CannotDeriveName, ComposeError, ContextReadError
from .config import LayoutConfig
from .context import BuildContext, Dir, GitUrl, parse_build_context
from .document import Build, ComposeFile, Service, load_compose_file
from .local_dirs import git_to_local
from .planner import BuildDirPlan, BuildDirPlanner, ServiceBuildDir
from .service import local_build_dir

__all__ = [
    "ComposeError",
    "CannotDeriveName",
    "ContextReadError",
    "LayoutConfig",
    "BuildContext",
    "GitUrl",
    "Dir",
    "parse_build_context",
    "Build",
    "Service",
    "ComposeFile",
    "load_compose_file",
    "git_to_local",
    "local_build_dir",
    "BuildDirPlanner",
    "BuildDirPlan",
    "ServiceBuildDir",
]
