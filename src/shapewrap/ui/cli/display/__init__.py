"""Display management for CLI interface."""

from shapewrap.ui.cli.display.scene import SceneDisplay

__all__ = ["SceneDisplay"]
