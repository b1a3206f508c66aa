"""Issue representation for build directory planning."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

IssueSeverity = Literal["error", "warning", "info"]


@dataclass(slots=True)
class PlanIssue:
    """Problem found while planning one service's build directory."""

    code: str
    message: str
    severity: IssueSeverity = "error"
    subject: Optional[str] = None

    def is_error(self) -> bool:
        """Return True when the issue is considered an error."""
        return self.severity == "error"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "severity": self.severity,
            "subject": self.subject,
        }
