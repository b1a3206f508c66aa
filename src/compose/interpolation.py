"""Compose-style variable substitution for raw document values."""
from __future__ import annotations

import re
from typing import Mapping

from ..common.errors import ContextReadError

_NAME = r"[_a-zA-Z][_a-zA-Z0-9]*"

_VARIABLE_PATTERN = re.compile(
    rf"""
    \$(?:
        (?P<escaped>\$)
        | (?P<named>{_NAME})
        | \{{(?P<braced>[^}}]*)\}}
        | (?P<invalid>)
    )
    """,
    re.VERBOSE,
)

_BRACED_PATTERN = re.compile(rf"(?P<name>{_NAME})(?:(?P<separator>:?-)(?P<default>.*))?\Z", re.DOTALL)


def interpolate(value: str, env: Mapping[str, str]) -> str:
    """
    Substitute ``$NAME`` / ``${NAME}`` references in ``value`` from ``env``.

    Supported forms:
        ``$$``                -> literal ``$``
        ``${NAME:-default}``  -> default when NAME is unset or empty
        ``${NAME-default}``   -> default when NAME is unset

    Raises:
        ContextReadError: If a variable is unset and has no default, or the
            expression is malformed.
    """

    def _replace(match: re.Match) -> str:
        if match.group("escaped") is not None:
            return "$"
        if match.group("named") is not None:
            return _lookup(match.group("named"), env, value)
        if match.group("braced") is not None:
            return _resolve_braced(match.group("braced"), env, value)
        raise ContextReadError(f"Invalid interpolation format in {value!r}", raw=value)

    return _VARIABLE_PATTERN.sub(_replace, value)


def _resolve_braced(expression: str, env: Mapping[str, str], raw: str) -> str:
    parsed = _BRACED_PATTERN.match(expression)
    if parsed is None:
        raise ContextReadError(f"Invalid interpolation format for ${{{expression}}} in {raw!r}", raw=raw)

    name = parsed.group("name")
    separator = parsed.group("separator")
    if separator is None:
        return _lookup(name, env, raw)

    current = env.get(name)
    if current is None or (separator == ":-" and current == ""):
        return parsed.group("default")
    return current


def _lookup(name: str, env: Mapping[str, str], raw: str) -> str:
    try:
        return env[name]
    except KeyError:
        raise ContextReadError(f"Environment variable {name} is not defined (in {raw!r})", raw=raw) from None


__all__ = ["interpolate"]
