"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

SceneCommandName = Literal["draw", "serialize", "show", "demo"]


@final
@dataclass(slots=True)
class SceneArgs:
    """Command line arguments for the scene subcommands (``draw``, ``serialize``, ``show``, ``demo``)."""

    command: SceneCommandName
    tokens: list[str]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class StrategiesArgs:
    """Command line arguments for the ``strategies`` subcommand."""

    command: Literal["strategies"]
    verbose: bool
    quiet: bool


CLIArgs = SceneArgs | StrategiesArgs

__all__ = ["CLIArgs", "SceneArgs", "SceneCommandName", "StrategiesArgs"]
