"""Command line interface for shapewrap."""

import sys
from typing import final

from shapewrap.features.erasure import ShapeWrapError
from shapewrap.features.shapes import ShapeTokenError, UnknownShapeKindError, UnknownStrategyError
from shapewrap.platform.logging import logger
from shapewrap.ui.cli.args import ArgumentParser
from shapewrap.ui.cli.args.options import CLIArgs, SceneArgs
from shapewrap.ui.cli.commands import SceneCommand, StrategiesCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, SceneArgs):
                _ = SceneCommand(args).execute()
                return

            _ = StrategiesCommand(args).execute()
            return

        except (ShapeTokenError, UnknownShapeKindError, UnknownStrategyError) as e:
            logger.error("%s", e)
            sys.exit(2)
        except ShapeWrapError as e:
            logger.error("Shape error: %s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
