"""Plan local build directories for every service of a compose document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ..common.errors import CannotDeriveName, ContextReadError
from .config import LayoutConfig
from .context import BuildContext, GitUrl
from .document import ComposeFile
from .issues import PlanIssue
from .local_dirs import git_to_local


@dataclass(slots=True)
class ServiceBuildDir:
    """Planned build directory for a single service."""

    service: str
    context: Optional[BuildContext] = None
    local_dir: Optional[Path] = None
    issues: List[PlanIssue] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not any(issue.is_error() for issue in self.issues)

    def to_dict(self) -> Dict[str, Any]:
        context_kind = None
        if self.context is not None:
            context_kind = "git" if isinstance(self.context, GitUrl) else "dir"
        return {
            "service": self.service,
            "context": self.context.value if self.context is not None else None,
            "context_kind": context_kind,
            "local_dir": str(self.local_dir) if self.local_dir is not None else None,
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass(slots=True)
class BuildDirPlan:
    """Aggregate plan over all services of a compose document."""

    services: List[ServiceBuildDir] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(entry.success for entry in self.services)

    @property
    def issues(self) -> List[PlanIssue]:
        return [issue for entry in self.services for issue in entry.issues]

    def local_dirs(self) -> Dict[str, Path]:
        """Return service name -> local directory for services that have one."""
        return {
            entry.service: entry.local_dir
            for entry in self.services
            if entry.local_dir is not None
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "services": [entry.to_dict() for entry in self.services],
        }


class BuildDirPlanner:
    """Compute local build directories for compose services, collecting failures per service."""

    def __init__(
        self,
        layout: Optional[LayoutConfig] = None,
        env: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.layout = layout
        self.env = env
        self.logger = logger or logging.getLogger(__name__)

    def plan(self, compose_file: ComposeFile) -> BuildDirPlan:
        """
        Plan build directories for every service in document order.

        A failure for one service is recorded as an issue on that service
        and does not stop the remaining services.
        """
        plan = BuildDirPlan()
        for name, service in compose_file.services.items():
            entry = ServiceBuildDir(service=name)
            plan.services.append(entry)

            if service.build is None:
                self.logger.debug("Service %s has no build section", name)
                continue

            try:
                entry.context = service.build.read_context(self.env)
                entry.local_dir = git_to_local(entry.context, self.layout)
            except ContextReadError as exc:
                self.logger.warning("Cannot read build context of service %s: %s", name, exc)
                entry.issues.append(PlanIssue(code="context_read_error", message=str(exc), subject=name))
            except CannotDeriveName as exc:
                self.logger.warning("Cannot derive build directory of service %s: %s", name, exc)
                entry.issues.append(PlanIssue(code="cannot_derive_name", message=str(exc), subject=name))
            else:
                self.logger.info("Service %s builds in %s", name, entry.local_dir)

        return plan


__all__ = ["BuildDirPlanner", "BuildDirPlan", "ServiceBuildDir"]
