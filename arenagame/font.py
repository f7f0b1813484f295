"""Font definitions and a registry that loads them through a drawing backend."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol

FONT_NAME = "Makinas-4-Square"
FONT_PATHS: tuple[str, ...] = ("data/font/Makinas-4-Square.ttf",)
ANTIALIAS_8X8 = "antialiasing_8x8"


class FontId(enum.Enum):
    """The font sizes used by the game, named by size and thickness."""

    SIZE100_4 = 0
    SIZE96_4 = 1
    SIZE64_4 = 2
    SIZE55_4 = 3


@dataclass(frozen=True)
class FontSpec:
    """Parameters for creating one font."""

    name: str
    size: int
    thick: int
    type: str


_SPECS: dict[FontId, FontSpec] = {
    FontId.SIZE100_4: FontSpec(FONT_NAME, 100, 4, ANTIALIAS_8X8),
    FontId.SIZE96_4: FontSpec(FONT_NAME, 96, 4, ANTIALIAS_8X8),
    FontId.SIZE64_4: FontSpec(FONT_NAME, 64, 4, ANTIALIAS_8X8),
    FontId.SIZE55_4: FontSpec(FONT_NAME, 55, 4, ANTIALIAS_8X8),
}


class FontLoadError(RuntimeError):
    """Raised when a font file cannot be registered or removed."""


def font_spec(font_id: FontId) -> FontSpec:
    """Return the creation parameters of ``font_id``."""
    return _SPECS[FontId(font_id)]


class FontBackend(Protocol):
    def add_font_resource(self, path: str) -> bool: ...

    def remove_font_resource(self, path: str) -> bool: ...

    def create_font(self, name: str, size: int, thick: int, type: str) -> int: ...

    def delete_font(self, handle: int) -> None: ...


class FontRegistry:
    """Holds the handles of the loaded fonts, one per :class:`FontId`."""

    def __init__(self) -> None:
        self._handles: dict[FontId, int] = {}

    def load(self, backend: FontBackend) -> None:
        """Register the font files and create a handle for every font id."""
        for path in FONT_PATHS:
            if not backend.add_font_resource(path):
                raise FontLoadError(f"failed to load font file {path}")
        for font_id in FontId:
            spec = font_spec(font_id)
            self._handles[font_id] = backend.create_font(
                spec.name, spec.size, spec.thick, spec.type
            )

    def unload(self, backend: FontBackend) -> None:
        """Remove the font files and delete every created handle."""
        failed = [path for path in FONT_PATHS if not backend.remove_font_resource(path)]
        for handle in self._handles.values():
            backend.delete_font(handle)
        self._handles.clear()
        if failed:
            raise FontLoadError(f"failed to remove font files: {', '.join(failed)}")

    def handle(self, font_id: FontId) -> int:
        """Return the handle created for ``font_id``."""
        try:
            return self._handles[FontId(font_id)]
        except KeyError:
            raise KeyError(f"font {font_id!r} is not loaded") from None