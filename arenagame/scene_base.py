"""Shared pieces of every game scene: context, drawing surface and fades."""

from __future__ import annotations

import abc
import enum
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Union

from arenagame.font import FontId
from arenagame.pad import Pad

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
COLOR_DEPTH = 32

FADE_MAX = 255
FADE_STEP = 8

Color = tuple[int, int, int]
BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)


class SoundCue(enum.Enum):
    """Music tracks and sound effects a scene can ask for."""

    TITLE_BGM = "title_bgm"
    SELECT_BGM = "select_bgm"
    GAME_PLAY_BGM = "game_play_bgm"
    CLEAR_BGM = "clear_bgm"
    GAME_OVER_BGM = "game_over_bgm"
    STATUS_BGM = "status_bgm"
    DETERMINATION_SE = "determination_se"
    MOVE_CURSOR_SE = "move_cursor_se"
    FAILURE_SE = "failure_se"


class QuitGame(Exception):
    """Raised when the player chooses to leave the game."""


@dataclass(frozen=True)
class ImageCommand:
    """An image drawn with its top-left corner at ``(x, y)``."""

    name: str
    x: float
    y: float


@dataclass(frozen=True)
class TextCommand:
    """A line of text drawn at ``(x, y)``."""

    text: str
    x: float
    y: float
    color: Color
    font: FontId


@dataclass(frozen=True)
class FillCommand:
    """A translucent rectangle covering the whole screen."""

    color: Color
    alpha: int
    width: int
    height: int


DrawCommand = Union[ImageCommand, TextCommand, FillCommand]


class Canvas:
    """A drawing surface that records what is drawn on it, in order."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def draw_image(self, name: str, x: float, y: float) -> None:
        """Draw the image ``name`` at ``(x, y)``."""
        self.commands.append(ImageCommand(name, x, y))

    def draw_text(self, text: str, x: float, y: float, color: Color, font: FontId) -> None:
        """Draw ``text`` at ``(x, y)`` in ``color`` with ``font``."""
        self.commands.append(TextCommand(text, x, y, color, FontId(font)))

    def fill_screen(self, color: Color, alpha: int) -> None:
        """Cover the screen with ``color`` blended at ``alpha`` (0-255)."""
        self.commands.append(FillCommand(color, alpha, SCREEN_WIDTH, SCREEN_HEIGHT))


@dataclass
class GameContext:
    """What scenes share: build mode, sound output and how to build other scenes."""

    debug: bool = False
    scene_factories: dict[Hashable, Callable[[GameContext], SceneBase]] = field(
        default_factory=dict
    )
    on_sound: Callable[[SoundCue], None] | None = None
    played: list[SoundCue] = field(default_factory=list)

    def play(self, cue: SoundCue) -> None:
        """Play ``cue`` and remember that it was played."""
        self.played.append(cue)
        if self.on_sound is not None:
            self.on_sound(cue)


def step_fade(alpha: int, rising: bool, step: int = FADE_STEP) -> int:
    """Move a fade value one step up or down, kept within 0..FADE_MAX."""
    if rising:
        return min(alpha + step, FADE_MAX)
    return max(alpha - step, 0)


class SceneBase(abc.ABC):
    """One screen of the game, driven a frame at a time."""

    def __init__(self, context: GameContext | None = None) -> None:
        self.context = context if context is not None else GameContext()
        self.fade_alpha = FADE_MAX
        self.background: str | None = None

    @abc.abstractmethod
    def init(self) -> None:
        """Prepare the scene when it becomes the current one."""

    @abc.abstractmethod
    def update(self, pad: Pad) -> SceneBase:
        """Advance one frame; return self to stay, or the scene to switch to."""

    @abc.abstractmethod
    def draw(self, canvas: Canvas) -> None:
        """Draw the current frame onto ``canvas``."""

    @abc.abstractmethod
    def end(self) -> None:
        """Clean up when the scene stops being the current one."""

    def _draw_fade(self, canvas: Canvas, color: Color = BLACK) -> None:
        canvas.fill_screen(color, self.fade_alpha)