"""Shared helpers for unicode-menu."""

from um_common.api import UMError, configure_logging

__all__ = ["configure_logging", "UMError"]
