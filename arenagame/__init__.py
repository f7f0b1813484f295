"""Game logic for a small 3D action role-playing game: input, collision, data tables and menu scenes."""

__version__ = "0.1.0"