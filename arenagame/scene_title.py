"""The title screen: new game, continue or quit."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable

from arenagame.font import FontId
from arenagame.pad import Pad
from arenagame.scene_base import (
    BLACK,
    FADE_MAX,
    Canvas,
    Color,
    GameContext,
    QuitGame,
    SceneBase,
    SoundCue,
    step_fade,
)
from arenagame.scene_select import SceneSelect

BACKGROUND_IMAGE = "data/BG/title.png"
CURSOR_MOVE_TIME = 25
WAVE_PERIOD = 60
WAVE_AMPLITUDE = 2.0
WAVE_RESET = 180
TEXT_X = 700.0
HIGHLIGHT: Color = (150, 150, 150)


class TitleItem(enum.IntEnum):
    """Title menu entries from top to bottom."""

    NEW_GAME = 0
    LOAD_GAME = 1
    EXIT_GAME = 2


LABELS: dict[TitleItem, str] = {
    TitleItem.NEW_GAME: "NewGame",
    TitleItem.LOAD_GAME: "LoadGame",
    TitleItem.EXIT_GAME: "ExitGame",
}

BASE_Y: dict[TitleItem, float] = {
    TitleItem.NEW_GAME: 650.0,
    TitleItem.LOAD_GAME: 800.0,
    TitleItem.EXIT_GAME: 950.0,
}


class SceneTitle(SceneBase):
    """Title menu; the cursor starts on LoadGame.

    ``on_new_game`` is called when a new game is chosen, to wipe saved progress.
    """

    def __init__(
        self,
        context: GameContext | None = None,
        on_new_game: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(context)
        self.on_new_game = on_new_game
        self.count = 0
        self.cursor_count = 0
        self.is_select = False
        self.is_press_pad = False
        self._cursor_step = int(TitleItem.LOAD_GAME)
        self.item_y: dict[TitleItem, float] = {item: 0.0 for item in TitleItem}

    @property
    def cursor(self) -> TitleItem | None:
        """The highlighted entry, or None while the cursor is between wraps."""
        if 0 <= self._cursor_step < len(TitleItem):
            return TitleItem(self._cursor_step)
        return None

    def init(self) -> None:
        """Show the title, start its music and begin fading in."""
        self.background = BACKGROUND_IMAGE
        self.context.play(SoundCue.TITLE_BGM)
        self.item_y = dict(BASE_Y)
        self.cursor_count = CURSOR_MOVE_TIME
        self.fade_alpha = FADE_MAX
        self.is_select = False

    def update(self, pad: Pad) -> SceneBase:
        """Advance one frame; once faded out after a choice, go to the select menu."""
        self.fade_alpha = step_fade(self.fade_alpha, self.is_select)
        self._move_cursor(pad)
        if self.is_select and self.fade_alpha >= FADE_MAX:
            return SceneSelect(self.context)
        return self

    def draw(self, canvas: Canvas) -> None:
        """Draw the background, the menu entries and the fade."""
        if self.background is not None:
            canvas.draw_image(self.background, 0, 0)
        self._draw_entries(canvas)
        self._draw_fade(canvas)

    def end(self) -> None:
        """Leave the title, releasing its background picture."""
        self.background = None

    def _repeat_step(self, pad: Pad, with_sound: bool) -> None:
        if self.cursor_count >= CURSOR_MOVE_TIME:
            if pad.is_press("up"):
                self._cursor_step -= 1
                if with_sound:
                    self.context.play(SoundCue.MOVE_CURSOR_SE)
            elif pad.is_press("down"):
                self._cursor_step += 1
                if with_sound:
                    self.context.play(SoundCue.MOVE_CURSOR_SE)
            self.cursor_count = 0

    def _move_cursor(self, pad: Pad) -> None:
        if pad.is_press("up") or pad.is_press("down"):
            self.is_press_pad = True

        if self.is_press_pad:
            self._repeat_step(pad, with_sound=True)
            if pad.is_release("up") or pad.is_release("down"):
                self.is_press_pad = False
            self.cursor_count += 1
        else:
            self.cursor_count = CURSOR_MOVE_TIME

        if self._cursor_step < 0:
            self._cursor_step = int(TitleItem.EXIT_GAME)
        if self._cursor_step > int(TitleItem.EXIT_GAME):
            self._cursor_step = int(TitleItem.NEW_GAME)

        if self.is_press_pad:
            self._repeat_step(pad, with_sound=False)
            self.cursor_count += 1

        if not pad.is_trigger("A"):
            return
        cursor = self.cursor
        if cursor is TitleItem.NEW_GAME:
            if self.on_new_game is not None:
                self.on_new_game()
            self.context.play(SoundCue.DETERMINATION_SE)
            self.is_select = True
        elif cursor is TitleItem.LOAD_GAME:
            self.context.play(SoundCue.DETERMINATION_SE)
            self.is_select = True
        elif cursor is TitleItem.EXIT_GAME:
            raise QuitGame

    def _draw_entries(self, canvas: Canvas) -> None:
        wave = math.sin(math.pi * 2 / WAVE_PERIOD * self.count) * WAVE_AMPLITUDE
        cursor = self.cursor
        for item in TitleItem:
            if item is cursor:
                canvas.draw_text(LABELS[item], TEXT_X, self.item_y[item], HIGHLIGHT, FontId.SIZE96_4)
                self.item_y[item] += wave
            else:
                self.item_y[item] = BASE_Y[item]
                canvas.draw_text(LABELS[item], TEXT_X, self.item_y[item], BLACK, FontId.SIZE96_4)
        self.count += 1
        if self.count > WAVE_RESET:
            self.count = 0