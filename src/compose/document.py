"""Models and loader for compose documents."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..common.errors import ContextReadError
from .context import BuildContext, parse_build_context
from .interpolation import interpolate


class Build(BaseModel):
    """Build section of a compose service."""

    context: str = Field(description="Raw build context: a Git URL or a directory, may contain ${VAR} references.")
    dockerfile: Optional[str] = Field(default=None, description="Alternate Dockerfile inside the context.")
    args: Dict[str, Optional[str]] = Field(default_factory=dict, description="Build arguments.")
    target: Optional[str] = Field(default=None, description="Build stage to target.")

    @field_validator("context")
    @classmethod
    def _validate_context(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Build context cannot be empty.")
        return value

    @field_validator("args", mode="before")
    @classmethod
    def _normalize_args(cls, value: Any) -> Any:
        """Accept the list form (``["KEY=value", "KEY"]``) as well as a mapping."""
        if value is None:
            return {}
        if isinstance(value, list):
            normalized: Dict[str, Optional[str]] = {}
            for item in value:
                key, sep, arg_value = str(item).partition("=")
                normalized[key] = arg_value if sep else None
            return normalized
        if isinstance(value, dict):
            return {str(key): (None if item is None else str(item)) for key, item in value.items()}
        return value

    def read_context(self, env: Optional[Mapping[str, str]] = None) -> BuildContext:
        """
        Interpolate and classify the build context.

        Args:
            env: Variables used for ${VAR} substitution (defaults to os.environ)

        Returns:
            GitUrl or Dir build context

        Raises:
            ContextReadError: If interpolation fails or yields an empty value
        """
        value = interpolate(self.context, os.environ if env is None else env)
        if not value:
            raise ContextReadError(f"Build context {self.context!r} is empty after interpolation", raw=self.context)
        return parse_build_context(value)


class Service(BaseModel):
    """Single service definition. Keys other than image and build are ignored."""

    image: Optional[str] = Field(default=None, description="Image name for the service.")
    build: Optional[Build] = Field(default=None, description="Optional build section.")

    @field_validator("build", mode="before")
    @classmethod
    def _expand_short_build(cls, value: Any) -> Any:
        """Expand the ``build: ./dir`` short form into a mapping."""
        if isinstance(value, str):
            return {"context": value}
        return value


class ComposeFile(BaseModel):
    """Top-level compose document."""

    version: Optional[str] = Field(default=None)
    services: Dict[str, Service] = Field(default_factory=dict)

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> Any:
        # YAML reads `version: 2` as an integer
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("services", mode="before")
    @classmethod
    def _default_empty_services(cls, services: Any) -> Any:
        """Services declared with no body (``web:``) load as empty mappings."""
        if services is None:
            return {}
        if isinstance(services, dict):
            return {name: ({} if body is None else body) for name, body in services.items()}
        return services

    def service_names(self) -> List[str]:
        return list(self.services)


def load_compose_file(path: str | Path) -> ComposeFile:
    """Load a compose document from a YAML or JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Compose file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise ValueError(f"Unsupported compose file format: {suffix}")

    raw_text = path.read_text(encoding="utf-8")
    try:
        if suffix == ".json":
            data = json.loads(raw_text) if raw_text.strip() else None
        else:
            data = yaml.safe_load(raw_text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ValueError(f"Failed to parse compose file {path}: {exc}") from exc

    if data is None:
        raise ValueError(f"Compose file {path} is empty.")

    return ComposeFile.model_validate(data)


__all__ = ["Build", "Service", "ComposeFile", "load_compose_file"]
