"""Command line entry point printing local build directories for a compose file."""

from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Sequence

from dotenv import dotenv_values

from .config import LayoutConfig
from .document import load_compose_file
from .planner import BuildDirPlan, BuildDirPlanner


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)
    logging.getLogger("src").setLevel(logging.DEBUG if verbose else logging.INFO)


def load_environment(env_file: Optional[Path]) -> Dict[str, str]:
    """
    Build the variable mapping used for build context interpolation.

    Values from the process environment take precedence over the .env file.
    """
    env: Dict[str, str] = {}
    if env_file is not None and env_file.is_file():
        logger.debug("Loading variables from %s", env_file)
        env.update({key: value for key, value in dotenv_values(env_file).items() if value is not None})
    env.update(os.environ)
    return env


def render_plan(plan: BuildDirPlan, layout: LayoutConfig) -> str:
    """Render a plan as ``service: path`` lines."""
    lines = []
    for entry in plan.services:
        if entry.local_dir is not None:
            lines.append(f"{entry.service}: {layout.resolve(entry.local_dir)}")
        elif entry.issues:
            messages = "; ".join(issue.message for issue in entry.issues)
            lines.append(f"{entry.service}: ERROR {messages}")
        else:
            lines.append(f"{entry.service}: (no build)")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Show the local build directory of each compose service.")
    parser.add_argument(
        "--file",
        "-f",
        default="docker-compose.yml",
        help="Path to the compose YAML/JSON file.",
    )
    parser.add_argument(
        "--project-root",
        default=None,
        help="Project root the src/ and pods/ directories live in (defaults to PROJECT_ROOT or '.').",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Optional .env file for ${VAR} interpolation (defaults to <project-root>/.env).",
    )
    parser.add_argument("--json", action="store_true", help="Print the plan as JSON.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    layout = LayoutConfig(project_root=args.project_root) if args.project_root else LayoutConfig()
    env_file = Path(args.env_file) if args.env_file else Path(layout.project_root) / ".env"

    try:
        compose_file = load_compose_file(args.file)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Failed to load compose file %s: %s", args.file, e)
        return 1

    planner = BuildDirPlanner(layout=layout, env=load_environment(env_file))
    plan = planner.plan(compose_file)

    if args.json:
        print(json.dumps(plan.to_dict(), indent=2))
    else:
        print(render_plan(plan, layout))

    return 0 if plan.success else 1


__all__ = ["main", "load_environment", "render_plan"]


if __name__ == "__main__":
    raise SystemExit(main())
