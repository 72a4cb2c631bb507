"""Configuration helpers for um_common."""

from .env import parse_bool_env, parse_command_env

__all__ = ["parse_bool_env", "parse_command_env"]
