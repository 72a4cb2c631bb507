"""Tests for the clipboard helper process wrapper."""

from __future__ import annotations

import subprocess

import pytest

from um_common.errors import ClipboardError
from um_core.clipboard import DEFAULT_COMMAND, CommandClipboard


pytestmark = pytest.mark.unit_core


class _FakeStdin:
    def __init__(self, fail: bool = False) -> None:
        self.data = b""
        self.closed = False
        self._fail = fail

    def write(self, data: bytes) -> int:
        if self._fail:
            raise BrokenPipeError("pipe closed")
        self.data += data
        return len(data)

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "_FakeStdin":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class _FakeProc:
    def __init__(self, stdin: _FakeStdin) -> None:
        self.stdin = stdin


def test_from_env_default_and_override() -> None:
    assert CommandClipboard.from_env({}).command == DEFAULT_COMMAND
    custom = CommandClipboard.from_env({"UM_CLIPBOARD_COMMAND": "wl-copy -n"})
    assert custom.command == ("wl-copy", "-n")


def test_copy_writes_utf8_and_closes_stdin(monkeypatch) -> None:
    calls: list[tuple[list[str], dict]] = []
    stdin = _FakeStdin()

    def fake_popen(args, **kwargs):
        calls.append((args, kwargs))
        return _FakeProc(stdin)

    monkeypatch.setattr(subprocess, "Popen", fake_popen)

    CommandClipboard().copy("→ é")

    (args, kwargs), = calls
    assert args == list(DEFAULT_COMMAND)
    assert kwargs["cwd"] == "/"
    assert kwargs["stdin"] is subprocess.PIPE
    assert kwargs["stdout"] is subprocess.DEVNULL
    assert stdin.data == "→ é".encode("utf-8")
    assert stdin.closed


def test_spawn_failure_is_clipboard_error(monkeypatch) -> None:
    def fake_popen(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(subprocess, "Popen", fake_popen)

    with pytest.raises(ClipboardError, match="failed to spawn xclip") as excinfo:
        CommandClipboard().copy("x")
    assert excinfo.value.context["command"] == list(DEFAULT_COMMAND)


def test_write_failure_is_clipboard_error(monkeypatch) -> None:
    monkeypatch.setattr(
        subprocess, "Popen", lambda args, **kwargs: _FakeProc(_FakeStdin(fail=True))
    )
    with pytest.raises(ClipboardError, match="failed to write"):
        CommandClipboard().copy("x")
