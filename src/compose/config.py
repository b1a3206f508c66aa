import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class LayoutConfig(BaseModel):
    """Project layout used to place service sources on disk."""

    # Directory settings
    git_checkout_dir: str = Field(default="src", description="Top-level directory holding Git checkouts.")
    pods_dir: str = Field(default="pods", description="Directory containing the main compose documents.")
    project_root: str = Field(default_factory=lambda: os.environ.get('PROJECT_ROOT', '.'))

    @field_validator("git_checkout_dir", "pods_dir", "project_root")
    @classmethod
    def _validate_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Layout directories cannot be empty.")
        return value.strip()

    def resolve(self, local_dir: Path) -> Path:
        """
        Place a local build directory under the project root.

        Args:
            local_dir: Directory returned by the context mapper

        Returns:
            Path joined onto project_root (absolute local_dir values win)
        """
        return Path(self.project_root) / local_dir
