"""Shared pytest fixtures for the shapewrap test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from shapewrap.config.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary file and reset the cached instance."""

    config_file = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("SHAPEWRAP_CONFIG_FILE", str(config_file))
    Config.reset()
    try:
        yield config_file
    finally:
        Config.reset()
