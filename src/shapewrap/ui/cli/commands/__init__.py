"""Command execution package for CLI."""

from shapewrap.ui.cli.commands.scene import SceneCommand
from shapewrap.ui.cli.commands.strategies import StrategiesCommand

__all__ = ["SceneCommand", "StrategiesCommand"]
