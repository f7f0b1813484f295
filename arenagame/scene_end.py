"""Screens shown when a stage ends: game clear and game over."""

from __future__ import annotations

from arenagame.pad import Pad
from arenagame.scene_base import (
    FADE_MAX,
    Canvas,
    GameContext,
    QuitGame,
    SceneBase,
    SoundCue,
    step_fade,
)
from arenagame.scene_select import SceneSelect

CLEAR_IMAGE = "data/BG/GameClear.png"
GAME_OVER_IMAGE = "data/BG/GameOver.png"


class _EndScene(SceneBase):
    """A still picture that waits for A (back to the menu) or B (quit)."""

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.is_title = False

    def _start(self, image: str, music: SoundCue) -> None:
        self.background = image
        self.context.play(music)
        self.fade_alpha = FADE_MAX
        self.is_title = False

    def _advance(self, pad: Pad) -> SceneBase:
        self.fade_alpha = step_fade(self.fade_alpha, self.is_title)
        if pad.is_trigger("A"):
            self.context.play(SoundCue.DETERMINATION_SE)
            self.is_title = True
        if pad.is_trigger("B"):
            raise QuitGame
        if self.is_title and self.fade_alpha >= FADE_MAX:
            return SceneSelect(self.context)
        return self

    def _render(self, canvas: Canvas) -> None:
        if self.background is not None:
            canvas.draw_image(self.background, 0, 0)
        self._draw_fade(canvas)


class SceneClear(_EndScene):
    """Shown after a stage is cleared."""

    def init(self) -> None:
        """Show the clear picture, start its music and begin fading in."""
        self._start(CLEAR_IMAGE, SoundCue.CLEAR_BGM)

    def update(self, pad: Pad) -> SceneBase:
        """Advance one frame; once faded out after A, go to the select menu.

        Raises QuitGame when B is pressed.
        """
        return self._advance(pad)

    def draw(self, canvas: Canvas) -> None:
        """Draw the picture and the fade over it."""
        self._render(canvas)

    def end(self) -> None:
        """Leave the scene, releasing its picture."""
        self.background = None


class SceneResult(_EndScene):
    """Shown after the player is defeated."""

    def init(self) -> None:
        """Show the game-over picture, start its music and begin fading in."""
        self._start(GAME_OVER_IMAGE, SoundCue.GAME_OVER_BGM)

    def update(self, pad: Pad) -> SceneBase:
        """Advance one frame; once faded out after A, go to the select menu.

        Raises QuitGame when B is pressed.
        """
        return self._advance(pad)

    def draw(self, canvas: Canvas) -> None:
        """Draw the picture and the fade over it."""
        self._render(canvas)

    def end(self) -> None:
        """Leave the scene, releasing its picture."""
        self.background = None