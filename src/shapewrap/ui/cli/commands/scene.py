"""src/shapewrap/ui/cli/commands/scene.py
What: Run draw, serialize, show and demo over a scene of wrapped shapes.
Why: Keep the CLI a thin caller that only builds shapes and invokes their operations.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import final

from shapewrap.features.erasure import Shape
from shapewrap.features.shapes import build_scene, draw_all, serialize_all
from shapewrap.platform.logging import logger
from shapewrap.ui.cli.args.options import SceneArgs
from shapewrap.ui.cli.display.scene import SceneDisplay


@final
class SceneCommand:
    """Build the scene described by the arguments and run one operation over it."""

    def __init__(
        self,
        args: SceneArgs,
        *,
        scene_builder: Callable[[Iterable[str]], list[Shape]] | None = None,
        display: SceneDisplay | None = None,
    ) -> None:
        self._args = args
        self._scene_builder = scene_builder or build_scene
        self._display = display or SceneDisplay()

    def execute(self) -> list[Shape]:
        """Execute the command.

        Returns:
            list[Shape]: The scene the command operated on.
        """
        shapes = self._scene_builder(self._args.tokens)
        logger.debug("Running %s over %d shapes", self._args.command, len(shapes))

        match self._args.command:
            case "draw":
                draw_all(shapes)
            case "serialize":
                serialize_all(shapes)
            case "show":
                self._display.show_shapes(shapes)
            case "demo":
                self._display.show_heading("Drawing all shapes:")
                draw_all(shapes)
                self._display.show_heading("Serializing all shapes:")
                serialize_all(shapes)

        return shapes


__all__ = ["SceneCommand"]
