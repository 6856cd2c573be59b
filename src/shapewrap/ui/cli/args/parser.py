"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from shapewrap.config.config import Config
from shapewrap.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from shapewrap.ui.cli.args.options import CLIArgs, SceneArgs, StrategiesArgs

_SCENE_COMMANDS: dict[str, str] = {
    "draw": "Draw every shape in the scene",
    "serialize": "Serialize every shape in the scene",
    "show": "Print every shape in the scene",
    "demo": "Draw, then serialize, every shape in the scene",
}


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="shapewrap",
            description="shapewrap - Draw and serialize heterogeneous shapes through one wrapper.",
            epilog="Shape tokens look like circle=2.0, square=1.5 or circle=4.2@outline.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        for name, help_text in _SCENE_COMMANDS.items():
            scene_parser = subparsers.add_parser(name, help=help_text)
            _ = scene_parser.add_argument(
                "tokens",
                nargs="*",
                metavar="TOKEN",
                help="Shape tokens (KIND=SIZE[@STRATEGY]); defaults to the configured scene",
            )
            ArgumentParser._add_verbosity_flags(scene_parser)

        strategies_parser = subparsers.add_parser(
            "strategies",
            help="List the registered draw strategies",
        )
        ArgumentParser._add_verbosity_flags(strategies_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging, including wrapper lifecycle events",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If parsing fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command in _SCENE_COMMANDS:
            tokens: list[str] = list(parsed_args.tokens) or list(configuration.default_scene)
            return SceneArgs(
                command=command,  # pyright: ignore[reportArgumentType]
                tokens=tokens,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "strategies":
            return StrategiesArgs(command="strategies", verbose=is_verbose, quiet=is_quiet)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)


__all__ = ["ArgumentParser"]
