"""Basic 3D vector and axis-aligned box used for collision checks."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: float) -> Vec3:
        """Return this vector multiplied by ``factor``."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


@dataclass
class Box:
    """An axis-aligned box given by its origin corner and its far corner."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    x_max: float = 0.0
    y_max: float = 0.0
    z_max: float = 0.0

    def set_center(
        self,
        x: float,
        y: float,
        z: float,
        width: float,
        height: float,
        depth: float,
    ) -> None:
        """Place the box at ``(x, y, z)`` extending by width, height and depth."""
        self.x = x
        self.y = y
        self.z = z
        self.x_max = x + width
        self.y_max = y + height
        self.z_max = z + depth

    def corners(self) -> tuple[Vec3, ...]:
        """Return the eight corners: front face first, then the back face.

        Within each face the order is top-left, bottom-left, top-right,
        bottom-right.
        """
        return (
            Vec3(self.x, self.y, self.z),
            Vec3(self.x, self.y_max, self.z),
            Vec3(self.x_max, self.y, self.z),
            Vec3(self.x_max, self.y_max, self.z),
            Vec3(self.x, self.y, self.z_max),
            Vec3(self.x, self.y_max, self.z_max),
            Vec3(self.x_max, self.y, self.z_max),
            Vec3(self.x_max, self.y_max, self.z_max),
        )

    def edges(self) -> list[tuple[Vec3, Vec3]]:
        """Return the twelve edges of the box as pairs of corners."""
        p1, p2, p3, p4, p5, p6, p7, p8 = self.corners()
        return [
            (p1, p3),
            (p1, p2),
            (p1, p5),
            (p3, p4),
            (p3, p7),
            (p2, p6),
            (p2, p4),
            (p4, p8),
            (p5, p7),
            (p5, p6),
            (p8, p7),
            (p8, p6),
        ]

    def collides(self, other: Box) -> bool:
        """Return True when the two boxes overlap or touch."""
        return not (
            self.x > other.x_max
            or self.y > other.y_max
            or self.x_max < other.x
            or self.y_max < other.y
            or self.z > other.z_max
            or self.z_max < other.z
        )