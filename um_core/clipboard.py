"""Copy payloads to the clipboard through an external helper process."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Mapping, Protocol

from um_common.config.env import parse_command_env
from um_common.errors import ClipboardError

logger = logging.getLogger(__name__)

DEFAULT_COMMAND: tuple[str, ...] = ("xclip", "-selection", "clipboard", "-quiet")


class Clipboard(Protocol):
    def copy(self, text: str) -> None:
        ...


@dataclass(frozen=True)
class CommandClipboard:
    """Pipe the payload into a clipboard utility's stdin.

    The helper is not waited on: ``xclip -quiet`` stays alive to serve the
    selection after the picker has exited.
    """

    command: tuple[str, ...] = DEFAULT_COMMAND

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CommandClipboard":
        env = os.environ if environ is None else environ
        command = parse_command_env(env.get("UM_CLIPBOARD_COMMAND"))
        return cls(command or DEFAULT_COMMAND)

    def copy(self, text: str) -> None:
        context = {"command": list(self.command)}
        try:
            proc = subprocess.Popen(
                list(self.command),
                cwd="/",
                stdin=subprocess.PIPE,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise ClipboardError(
                f"failed to spawn {self.command[0]}", context=context, cause=exc
            ) from exc

        assert proc.stdin is not None
        try:
            with proc.stdin:
                proc.stdin.write(text.encode("utf-8"))
        except OSError as exc:
            raise ClipboardError(
                f"failed to write to {self.command[0]}", context=context, cause=exc
            ) from exc
        logger.debug("Handed %d characters to %s", len(text), self.command[0])
