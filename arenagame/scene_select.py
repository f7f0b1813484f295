"""The stage-select menu shown between the title and the game."""

from __future__ import annotations

import enum
import math

from arenagame.font import FontId
from arenagame.pad import Pad
from arenagame.scene_base import (
    FADE_MAX,
    WHITE,
    Canvas,
    GameContext,
    QuitGame,
    SceneBase,
    SoundCue,
    step_fade,
)

CURSOR_MOVE_TIME = 25
WAVE_PERIOD = 60
WAVE_AMPLITUDE = 2.0
EXPLANATORY_TEXT_Y = 950.0
DESCRIPTION_START_X = 650.0
DESCRIPTION_MOVE = 20.0


class Destination(enum.Enum):
    """Scenes the select menu can lead to."""

    STAGE1 = "stage1"
    STAGE2 = "stage2"
    STATUS = "status"


class MenuItem(enum.IntEnum):
    """Menu entries from top to bottom."""

    STAGE1 = 0
    STAGE2 = 1
    STATUS = 2
    EXPLANATION = 3
    GAME_END = 4


BACKGROUND_IMAGE = "data/BG/SelectBG.png"
ITEM_IMAGES: dict[MenuItem, str] = {
    MenuItem.STAGE1: "data/UI/Stage1.png",
    MenuItem.STAGE2: "data/UI/Stage2.png",
    MenuItem.STATUS: "data/UI/status.png",
    MenuItem.EXPLANATION: "data/UI/operationInstructions.png",
    MenuItem.GAME_END: "data/UI/gameover.png",
}
DESCRIPTION_IMAGES: dict[MenuItem, str] = {
    MenuItem.STAGE1: "data/BG/Stage1.png",
    MenuItem.STAGE2: "data/BG/Stage2.png",
    MenuItem.STATUS: "data/BG/Status.png",
    MenuItem.EXPLANATION: "data/BG/Operation.png",
}
OPERATION_INSTRUCTIONS_IMAGE = "data/BG/OperationInstructions.png"
CAUTIONARY_NOTE_IMAGE = "data/BG/CautionaryNote.png"

EXPLANATIONS: dict[MenuItem, str] = {
    MenuItem.STAGE1: "初心者におすすめ。敵を倒してステータスポイントを獲得しよう！！",
    MenuItem.STAGE2: "ステータスを上げて挑戦しよう！！",
    MenuItem.STATUS: "敵を倒して獲得したポイントでステータスを強化しよう！",
    MenuItem.EXPLANATION: "ゲームプレイ中の操作説明が書かれているよ！",
    MenuItem.GAME_END: "ゲーム終了するよ！",
}

_SLIDING_ON_INIT = (MenuItem.STAGE1, MenuItem.STAGE2, MenuItem.STATUS)


class SceneSelect(SceneBase):
    """Menu to pick a stage, the status screen, the controls sheet or quit.

    Outside debug builds the second stage is locked and shows a notice.
    """

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.debug = self.context.debug
        self.cursor = MenuItem.STAGE1
        self.count = 0
        self.cursor_count = 0
        self.chosen: set[Destination] = set()
        self.is_explanation = False
        self.is_cautionary_note = False
        self.is_push_a_button = False
        self.is_press_pad = False
        self.item_offsets: dict[MenuItem, float] = {item: 0.0 for item in MenuItem}
        self.description_x: dict[MenuItem, float] = {item: 0.0 for item in DESCRIPTION_IMAGES}
        self.cautionary_image: str | None = None

    def init(self) -> None:
        """Reset the menu, start fading in and play the select music."""
        self.background = BACKGROUND_IMAGE
        self.cautionary_image = None if self.debug else CAUTIONARY_NOTE_IMAGE
        self.cursor = MenuItem.STAGE1
        for item in _SLIDING_ON_INIT:
            self.description_x[item] = DESCRIPTION_START_X
        self.fade_alpha = FADE_MAX
        self.context.play(SoundCue.SELECT_BGM)
        self.chosen.clear()
        self.is_explanation = False
        self.is_push_a_button = False
        self.cursor_count = CURSOR_MOVE_TIME

    def update(self, pad: Pad) -> SceneBase:
        """Advance one frame and return the scene to show next."""
        self._fade()
        self._move_cursor(pad)
        self._move_items()
        return self._change_scene(pad)

    def draw(self, canvas: Canvas) -> None:
        """Draw the menu, the descriptions, any overlay and the fade."""
        if self.background is not None:
            canvas.draw_image(self.background, 0, 0)
        for item in MenuItem:
            canvas.draw_image(ITEM_IMAGES[item], 0.0, self.item_offsets[item])
        canvas.draw_text(
            EXPLANATIONS[self.cursor], 0.0, EXPLANATORY_TEXT_Y, WHITE, FontId.SIZE55_4
        )
        self._draw_descriptions(canvas)
        if self.is_explanation:
            canvas.draw_image(OPERATION_INSTRUCTIONS_IMAGE, 0, 0)
        if self.is_cautionary_note and self.cautionary_image is not None:
            canvas.draw_image(self.cautionary_image, 0, 0)
        self._draw_fade(canvas)

    def end(self) -> None:
        """Leave the menu, releasing its background and notice images."""
        self.background = None
        self.cautionary_image = None

    def _fade(self) -> None:
        if not self.chosen:
            self.fade_alpha = step_fade(self.fade_alpha, False)
        for _ in self.chosen:
            self.fade_alpha = step_fade(self.fade_alpha, True)

    def _step_cursor(self, delta: int) -> None:
        self.cursor = MenuItem((self.cursor + delta) % len(MenuItem))
        self.context.play(SoundCue.MOVE_CURSOR_SE)

    def _move_cursor(self, pad: Pad) -> None:
        if self.is_explanation:
            return
        if pad.is_press("up") or pad.is_press("down"):
            self.is_press_pad = True
        if self.is_press_pad:
            if self.cursor_count >= CURSOR_MOVE_TIME:
                if pad.is_press("up"):
                    self._step_cursor(-1)
                elif pad.is_press("down"):
                    self._step_cursor(1)
                self.cursor_count = 0
            if pad.is_release("up") or pad.is_release("down"):
                self.is_press_pad = False
            self.cursor_count += 1
        else:
            self.cursor_count = CURSOR_MOVE_TIME

    def _move_items(self) -> None:
        wave = math.sin(math.pi * 2 / WAVE_PERIOD * self.count) * WAVE_AMPLITUDE
        for item in MenuItem:
            self.item_offsets[item] = (
                self.item_offsets[item] + wave if item is self.cursor else 0.0
            )
        self.count += 1
        if self.count > WAVE_PERIOD:
            self.count = 0

    def _draw_descriptions(self, canvas: Canvas) -> None:
        for item, image in DESCRIPTION_IMAGES.items():
            if item is self.cursor:
                canvas.draw_image(image, self.description_x[item], 0.0)
                self.description_x[item] = max(self.description_x[item] - DESCRIPTION_MOVE, 0.0)
            else:
                self.description_x[item] = DESCRIPTION_START_X

    def _choose(self, destination: Destination) -> None:
        self.context.play(SoundCue.DETERMINATION_SE)
        self.chosen.add(destination)

    def _transition(self, destination: Destination) -> SceneBase | None:
        if destination not in self.chosen or self.fade_alpha < FADE_MAX:
            return None
        factory = self.context.scene_factories.get(destination)
        if factory is None:
            raise LookupError(f"no scene registered for {destination.name}")
        return factory(self.context)

    def _change_scene(self, pad: Pad) -> SceneBase:
        pressed_a = pad.is_trigger("A")

        if self.cursor is MenuItem.STAGE1 and pressed_a:
            self._choose(Destination.STAGE1)
        scene = self._transition(Destination.STAGE1)
        if scene is not None:
            return scene

        if self.debug:
            if self.cursor is MenuItem.STAGE2 and pressed_a:
                self._choose(Destination.STAGE2)
            scene = self._transition(Destination.STAGE2)
            if scene is not None:
                return scene
        elif not self.is_push_a_button and self.cursor is MenuItem.STAGE2 and pressed_a:
            self.context.play(SoundCue.FAILURE_SE)
            self.is_cautionary_note = True

        if self.cursor is MenuItem.STATUS and pressed_a:
            self._choose(Destination.STATUS)
        scene = self._transition(Destination.STATUS)
        if scene is not None:
            return scene

        if not self.is_push_a_button and self.cursor is MenuItem.EXPLANATION and pressed_a:
            self.is_explanation = True

        if self.cursor is MenuItem.GAME_END and pressed_a:
            raise QuitGame

        if (self.is_explanation or self.is_cautionary_note) and pad.is_release("A"):
            self.is_push_a_button = True

        if self.is_push_a_button and pressed_a:
            self.is_cautionary_note = False
            self.is_explanation = False
            self.is_push_a_button = False

        return self