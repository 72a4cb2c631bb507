"""Tests for shared error helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from um_common.errors import (
    ConfigError,
    CyclicIncludeError,
    LoadError,
    MarkupError,
    NotFoundInSearchPathError,
    error_to_payload,
)


pytestmark = pytest.mark.unit_common


def test_error_to_payload_normalizes_context() -> None:
    err = LoadError(
        "boom",
        context={
            "path": Path("/tmp/test"),
            "nested": {"value": Path("nested")},
            "bases": (Path("a"), "b"),
        },
    )
    payload = error_to_payload(err)
    assert payload["error_type"] == "LoadError"
    assert payload["error"] == "boom"
    assert payload["error_context"]["path"].endswith("test")
    assert payload["error_context"]["nested"]["value"] == "nested"
    assert payload["error_context"]["bases"] == ["a", "b"]


def test_add_context_keeps_existing_keys() -> None:
    err = ConfigError("bad", context={"item": "inner"})
    err.add_context(item="outer", path=Path("config.yaml"))
    assert err.context == {"item": "inner", "path": "config.yaml"}


def test_cause_is_chained() -> None:
    cause = OSError("denied")
    err = LoadError("failed", cause=cause)
    assert err.__cause__ is cause
    assert err.to_dict()["type"] == "LoadError"


def test_taxonomy() -> None:
    assert issubclass(NotFoundInSearchPathError, LoadError)
    assert issubclass(CyclicIncludeError, ConfigError)
    assert issubclass(MarkupError, ConfigError)
    assert not issubclass(LoadError, ConfigError)
