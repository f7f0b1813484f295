"""Keeps the current scene and switches to the one it hands back."""

from __future__ import annotations

from collections.abc import Callable

from arenagame.pad import Pad
from arenagame.scene_base import Canvas, GameContext, SceneBase
from arenagame.scene_title import SceneTitle


class SceneManager:
    """Runs one scene at a time, starting from the title screen by default."""

    def __init__(
        self,
        context: GameContext | None = None,
        first_scene: Callable[[GameContext], SceneBase] | None = None,
    ) -> None:
        self.context = context if context is not None else GameContext()
        self._first_scene = first_scene if first_scene is not None else SceneTitle
        self._scene: SceneBase | None = None

    @property
    def scene(self) -> SceneBase | None:
        """The current scene, or None before :meth:`init`."""
        return self._scene

    def _current(self) -> SceneBase:
        if self._scene is None:
            raise RuntimeError("scene manager has not been initialised")
        return self._scene

    def init(self) -> None:
        """Create and start the first scene."""
        self._scene = self._first_scene(self.context)
        self._scene.init()

    def update(self, pad: Pad) -> None:
        """Advance the current scene; switch scenes when it returns another."""
        current = self._current()
        next_scene = current.update(pad)
        if next_scene is not current:
            current.end()
            self._scene = next_scene
            next_scene.init()

    def draw(self, canvas: Canvas) -> None:
        """Draw the current scene."""
        self._current().draw(canvas)

    def end(self) -> None:
        """End the current scene."""
        self._current().end()