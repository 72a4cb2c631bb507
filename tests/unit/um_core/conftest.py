from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from tests.helpers.menu_fakes import FakeClipboard
from um_core.paths import PRODUCT_DIR, SearchPaths


@dataclass
class ConfigDirs:
    """A user base and one system base, both under tmp_path."""

    user: Path
    system: Path
    paths: SearchPaths

    def write_user(self, name: str, text: str) -> Path:
        return _write(self.user / PRODUCT_DIR / name, text)

    def write_system(self, name: str, text: str) -> Path:
        return _write(self.system / PRODUCT_DIR / name, text)


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def config_dirs(tmp_path: Path) -> ConfigDirs:
    user = tmp_path / "home" / ".config"
    system = tmp_path / "etc" / "xdg"
    return ConfigDirs(user=user, system=system, paths=SearchPaths.from_bases([user, system]))


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()
