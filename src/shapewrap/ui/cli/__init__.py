"""Command line interface package."""

from shapewrap.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
