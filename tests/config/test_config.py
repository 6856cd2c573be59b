"""Tests for TOML configuration loading and saving."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from shapewrap.config.config import DEFAULT_SCENE, Config


def test_load_creates_default_file(isolated_config: Path) -> None:
    config = Config.load()

    assert isolated_config.exists()
    assert config.log_file is None
    assert config.default_scene == list(DEFAULT_SCENE)

    with open(isolated_config, "rb") as f:
        written = tomllib.load(f)
    assert written == {"default_scene": list(DEFAULT_SCENE)}


def test_load_returns_cached_instance() -> None:
    assert Config.load() is Config.load()


def test_load_reads_existing_file(isolated_config: Path, tmp_path: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text(
        f'log_file = "{tmp_path / "logs" / "app.log"}"\n'
        'default_scene = ["square=2.0", "circle=1.0@filled"]\n',
        encoding="utf-8",
    )

    config = Config.load()

    assert config.log_file == tmp_path / "logs" / "app.log"
    assert config.default_scene == ["square=2.0", "circle=1.0@filled"]


def test_empty_log_file_means_default(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('log_file = ""\n', encoding="utf-8")

    config = Config.load()

    assert config.log_file is None
    assert config.default_scene == list(DEFAULT_SCENE)


def test_invalid_scene_raises(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text("default_scene = [1, 2]\n", encoding="utf-8")

    with pytest.raises(ValueError, match="default_scene"):
        _ = Config.load()


def test_unknown_keys_are_ignored_with_warning(isolated_config: Path, mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("shapewrap.config.config.logger")
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('colour = "red"\n', encoding="utf-8")

    config = Config.load()

    assert config.default_scene == list(DEFAULT_SCENE)
    mock_logger.warning.assert_called_once()


def test_save_round_trips_through_load(isolated_config: Path, tmp_path: Path) -> None:
    Config(log_file=tmp_path / "x.log", default_scene=["circle=9"]).save()

    loaded = Config.load()

    assert loaded.log_file == tmp_path / "x.log"
    assert loaded.default_scene == ["circle=9"]
