"""Tests for search-path discovery and fragment loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from um_common.errors import ConfigError, LoadError, NotFoundInSearchPathError
from um_core.paths import SearchPaths, resolve_config_source


pytestmark = pytest.mark.unit_core


def test_from_env_uses_xdg_dirs() -> None:
    paths = SearchPaths.from_env(
        {"XDG_CONFIG_HOME": "/home/u/.cfg", "XDG_CONFIG_DIRS": "/etc/a::/etc/b"}
    )
    assert paths.bases == (
        Path("/home/u/.cfg/unicode-menu"),
        Path("/etc/a/unicode-menu"),
        Path("/etc/b/unicode-menu"),
    )
    assert paths.config_home == Path("/home/u/.cfg/unicode-menu")


def test_from_env_falls_back_to_home_and_etc_xdg() -> None:
    paths = SearchPaths.from_env({"HOME": "/home/u"})
    assert paths.bases == (
        Path("/home/u/.config/unicode-menu"),
        Path("/etc/xdg/unicode-menu"),
    )


def test_from_env_without_home_fails() -> None:
    with pytest.raises(ConfigError, match="HOME"):
        SearchPaths.from_env({})


def test_load_prefers_first_base(config_dirs) -> None:
    config_dirs.write_system("emoji.yaml", "system")
    user_file = config_dirs.write_user("emoji.yaml", "user")

    loaded = config_dirs.paths.load("emoji.yaml")

    assert loaded.text == "user"
    assert loaded.path == user_file


def test_load_falls_through_to_system_base(config_dirs) -> None:
    system_file = config_dirs.write_system("emoji.yaml", "system")
    loaded = config_dirs.paths.load("emoji.yaml")
    assert loaded.path == system_file


def test_load_absolute_reference(config_dirs, tmp_path) -> None:
    target = tmp_path / "elsewhere.yaml"
    target.write_text("abs", encoding="utf-8")
    assert config_dirs.paths.load(str(target)).text == "abs"


def test_load_missing_absolute_reference_is_io_error(config_dirs, tmp_path) -> None:
    with pytest.raises(LoadError) as excinfo:
        config_dirs.paths.load(str(tmp_path / "nope.yaml"))
    assert not isinstance(excinfo.value, NotFoundInSearchPathError)


def test_load_missing_everywhere_names_reference_and_bases(config_dirs) -> None:
    with pytest.raises(NotFoundInSearchPathError) as excinfo:
        config_dirs.paths.load("missing.yaml")

    err = excinfo.value
    assert "missing.yaml" in str(err)
    assert err.context["reference"] == "missing.yaml"
    assert err.context["bases"] == [str(base) for base in config_dirs.paths.bases]


def test_load_stops_on_non_not_found_errors(config_dirs) -> None:
    (config_dirs.user / "unicode-menu" / "emoji.yaml").mkdir(parents=True)
    config_dirs.write_system("emoji.yaml", "system")
    with pytest.raises(LoadError, match="failed to read file"):
        config_dirs.paths.load("emoji.yaml")


def test_resolve_config_source_order(config_dirs, tmp_path) -> None:
    config_dirs.write_system("config.yaml", "from search path")
    explicit = tmp_path / "explicit.yaml"
    explicit.write_text("explicit", encoding="utf-8")
    env_file = tmp_path / "env.yaml"
    env_file.write_text("env", encoding="utf-8")

    assert resolve_config_source(config_dirs.paths, environ={}).text == "from search path"
    env = {"UM_CONFIG_PATH": str(env_file)}
    assert resolve_config_source(config_dirs.paths, environ=env).text == "env"
    assert resolve_config_source(config_dirs.paths, explicit, environ=env).text == "explicit"
