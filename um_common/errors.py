"""Shared error taxonomy for unicode-menu."""

from __future__ import annotations

from typing import Any, Mapping


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class UMError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def add_context(self, **values: Any) -> None:
        """Attach extra context without overwriting keys already present."""
        for key, value in normalize_context(values).items():
            self.context.setdefault(key, value)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class LoadError(UMError):
    """Failure reading a configuration or fragment file."""


class NotFoundInSearchPathError(LoadError):
    """A relative fragment reference exists under none of the search bases."""


class ConfigError(UMError):
    """Failure due to an invalid configuration document."""


class CyclicIncludeError(ConfigError):
    """A fragment includes itself, directly or through other fragments."""


class MarkupError(ConfigError):
    """An item display name contains invalid inline markup."""


class ClipboardError(UMError):
    """Failure handing a payload to the clipboard helper."""


def error_to_payload(error: UMError) -> dict[str, Any]:
    """Convert a UMError to a log payload."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
