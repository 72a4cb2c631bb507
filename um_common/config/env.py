"""Environment variable parsing utilities."""

from __future__ import annotations

import shlex


def parse_bool_env(value: str | None) -> bool | None:
    """Parse a boolean from an environment variable string.

    Returns True for "1", "true", "yes", "on" (case-insensitive).
    Returns None if value is None.
    """
    if value is None:
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_command_env(value: str | None) -> tuple[str, ...] | None:
    """Split a command line from an environment variable string.

    Returns None if value is None, blank, or not valid shell syntax.
    """
    if value is None or not value.strip():
        return None
    try:
        words = shlex.split(value)
    except ValueError:
        return None
    return tuple(words) or None
