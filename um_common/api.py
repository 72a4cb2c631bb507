"""Public API surface for um_common."""

from um_common.errors import (
    ClipboardError,
    ConfigError,
    CyclicIncludeError,
    LoadError,
    MarkupError,
    NotFoundInSearchPathError,
    UMError,
)
from um_common.logging import configure_logging

__all__ = [
    "ClipboardError",
    "ConfigError",
    "configure_logging",
    "CyclicIncludeError",
    "LoadError",
    "MarkupError",
    "NotFoundInSearchPathError",
    "UMError",
]
