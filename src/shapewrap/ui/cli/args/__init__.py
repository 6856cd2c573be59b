"""Command line argument handling package."""

from shapewrap.ui.cli.args.parser import ArgumentParser
from shapewrap.ui.cli.args.options import CLIArgs, SceneArgs, StrategiesArgs

__all__ = ["ArgumentParser", "CLIArgs", "SceneArgs", "StrategiesArgs"]
