"""Search-path discovery and fragment loading."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

from um_common.errors import ConfigError, LoadError, NotFoundInSearchPathError

logger = logging.getLogger(__name__)

PRODUCT_DIR = "unicode-menu"
CONFIG_FILE_NAME = "config.yaml"
DEFAULT_CONFIG_DIRS = "/etc/xdg"


@dataclass(frozen=True)
class LoadedSource:
    """Text of a configuration file together with where it was found."""

    reference: str
    path: Path
    text: str


@dataclass(frozen=True)
class SearchPaths:
    """Ordered base directories used to resolve relative references.

    The first base is the user-writable config home; the rest are the
    system-wide directories, each already suffixed with the product
    subdirectory.
    """

    bases: tuple[Path, ...]

    def __post_init__(self) -> None:
        if not self.bases:
            raise ValueError("SearchPaths requires at least one base directory.")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SearchPaths":
        env = os.environ if environ is None else environ

        xdg_home = env.get("XDG_CONFIG_HOME")
        if xdg_home:
            user_base = Path(xdg_home)
        else:
            home = env.get("HOME")
            if not home:
                raise ConfigError("$HOME environment variable is not set")
            user_base = Path(home) / ".config"

        config_dirs = env.get("XDG_CONFIG_DIRS") or DEFAULT_CONFIG_DIRS
        system_bases = [Path(entry) for entry in config_dirs.split(":") if entry]

        return cls.from_bases([user_base, *system_bases])

    @classmethod
    def from_bases(cls, bases: Sequence[Path]) -> "SearchPaths":
        return cls(tuple(Path(base) / PRODUCT_DIR for base in bases))

    @property
    def config_home(self) -> Path:
        return self.bases[0]

    @property
    def default_config(self) -> Path:
        return self.config_home / CONFIG_FILE_NAME

    def load(self, reference: str | Path) -> LoadedSource:
        """Read ``reference`` directly when absolute, else from the first base that has it."""
        path = Path(reference)
        if path.is_absolute():
            return LoadedSource(str(reference), path, _read_text(path, reference))

        for base in self.bases:
            candidate = base / path
            try:
                text = candidate.read_text(encoding="utf-8")
            except FileNotFoundError:
                continue
            except (OSError, UnicodeDecodeError) as exc:
                raise LoadError(
                    f"failed to read file {candidate}",
                    context={"reference": str(reference), "path": candidate},
                    cause=exc,
                ) from exc
            logger.debug("Resolved %s to %s", reference, candidate)
            return LoadedSource(str(reference), candidate, text)

        raise NotFoundInSearchPathError(
            f"could not resolve path {reference} in any of: "
            + ", ".join(str(base) for base in self.bases),
            context={"reference": str(reference), "bases": list(self.bases)},
        )


def _read_text(path: Path, reference: str | Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(
            f"failed to read file {path}",
            context={"reference": str(reference), "path": path},
            cause=exc,
        ) from exc


def resolve_config_source(
    paths: SearchPaths,
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> LoadedSource:
    """Load the root configuration file.

    An explicit path wins, then ``UM_CONFIG_PATH``, then ``config.yaml``
    looked up through the search path.
    """
    env = os.environ if environ is None else environ
    if config_path is not None:
        explicit = Path(config_path).expanduser()
        return LoadedSource(str(config_path), explicit, _read_text(explicit, config_path))

    env_path = env.get("UM_CONFIG_PATH")
    if env_path:
        explicit = Path(env_path).expanduser()
        return LoadedSource(env_path, explicit, _read_text(explicit, env_path))

    return paths.load(CONFIG_FILE_NAME)
