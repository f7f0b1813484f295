"""Stage placement, warp points and collision against stage polygons."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from arenagame.geometry import Vec3
from arenagame.loadcsv import CsvLoader, StagePos, WarpPointPos
from arenagame.pad import Pad

DEFAULT_SIZE = 50.0
HIT_WIDTH = 8.0
HIT_HEIGHT = 40.0
HIT_BOTTOM = 20.0
HIT_BOTTOM2 = -20.0
HIT_TRY_NUM = 16
HIT_SLIDE_LENGTH = 5.0
WALL_NORMAL_Y_LIMIT = 0.1
WALL_MIN_HEIGHT = 1.0
MAX_HIT_COLL = 2048

WARP_POINT_NUM = 8
WARP_POINT_SPHERE_RADIUS = 100.0

STAGE_INFO_NAME = "stage1"
BACKGROUND_PATH = "data/BG/bg.png"

_EPSILON = 1e-12


class StageKind(enum.IntEnum):
    """The playable stages."""

    STAGE1 = 0
    STAGE2 = 1


STAGE_MODEL_PATHS: dict[StageKind, str] = {
    StageKind.STAGE1: "data/model/stage/stage.mv1",
    StageKind.STAGE2: "data/model/stage/BossStage.mv1",
}


@dataclass(frozen=True)
class Polygon:
    """A stage triangle with its surface normal."""

    a: Vec3
    b: Vec3
    c: Vec3
    normal: Vec3

    @property
    def vertices(self) -> tuple[Vec3, Vec3, Vec3]:
        return (self.a, self.b, self.c)


def _dot(u: Vec3, v: Vec3) -> float:
    return u.x * v.x + u.y * v.y + u.z * v.z


def _cross(u: Vec3, v: Vec3) -> Vec3:
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


def _closest_point_on_triangle(p: Vec3, a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    ab = b - a
    ac = c - a
    ap = p - a
    d1 = _dot(ab, ap)
    d2 = _dot(ac, ap)
    if d1 <= 0.0 and d2 <= 0.0:
        return a

    bp = p - b
    d3 = _dot(ab, bp)
    d4 = _dot(ac, bp)
    if d3 >= 0.0 and d4 <= d3:
        return b

    vc = d1 * d4 - d3 * d2
    if vc <= 0.0 and d1 >= 0.0 and d3 <= 0.0 and d1 - d3 != 0.0:
        return a + ab.scaled(d1 / (d1 - d3))

    cp = p - c
    d5 = _dot(ab, cp)
    d6 = _dot(ac, cp)
    if d6 >= 0.0 and d5 <= d6:
        return c

    vb = d5 * d2 - d1 * d6
    if vb <= 0.0 and d2 >= 0.0 and d6 <= 0.0 and d2 - d6 != 0.0:
        return a + ac.scaled(d2 / (d2 - d6))

    va = d3 * d6 - d5 * d4
    if va <= 0.0 and d4 - d3 >= 0.0 and d5 - d6 >= 0.0:
        total = (d4 - d3) + (d5 - d6)
        if total != 0.0:
            return b + (c - b).scaled((d4 - d3) / total)

    total = va + vb + vc
    if total == 0.0:
        return a
    return a + ab.scaled(vb / total) + ac.scaled(vc / total)


def _segment_segment_distance(p1: Vec3, q1: Vec3, p2: Vec3, q2: Vec3) -> float:
    d1 = q1 - p1
    d2 = q2 - p2
    r = p1 - p2
    a = _dot(d1, d1)
    e = _dot(d2, d2)
    f = _dot(d2, r)

    if a <= _EPSILON and e <= _EPSILON:
        s = t = 0.0
    elif a <= _EPSILON:
        s = 0.0
        t = _clamp01(f / e)
    else:
        c = _dot(d1, r)
        if e <= _EPSILON:
            t = 0.0
            s = _clamp01(-c / a)
        else:
            b = _dot(d1, d2)
            denom = a * e - b * b
            s = _clamp01((b * f - c * e) / denom) if denom != 0.0 else 0.0
            t = (b * s + f) / e
            if t < 0.0:
                t = 0.0
                s = _clamp01(-c / a)
            elif t > 1.0:
                t = 1.0
                s = _clamp01((b - c) / a)

    closest1 = p1 + d1.scaled(s)
    closest2 = p2 + d2.scaled(t)
    return (closest1 - closest2).length()


def _point_triangle_distance(p: Vec3, a: Vec3, b: Vec3, c: Vec3) -> float:
    return (p - _closest_point_on_triangle(p, a, b, c)).length()


def segment_hits_triangle(start: Vec3, end: Vec3, a: Vec3, b: Vec3, c: Vec3) -> Vec3 | None:
    """Return where the segment crosses the triangle, or None if it does not."""
    direction = end - start
    edge1 = b - a
    edge2 = c - a
    p = _cross(direction, edge2)
    det = _dot(edge1, p)
    if abs(det) < _EPSILON:
        return None
    inv = 1.0 / det
    s = start - a
    u = _dot(s, p) * inv
    if u < 0.0 or u > 1.0:
        return None
    q = _cross(s, edge1)
    v = _dot(direction, q) * inv
    if v < 0.0 or u + v > 1.0:
        return None
    t = _dot(edge2, q) * inv
    if t < 0.0 or t > 1.0:
        return None
    return start + direction.scaled(t)


def capsule_hits_triangle(
    start: Vec3, end: Vec3, radius: float, a: Vec3, b: Vec3, c: Vec3
) -> bool:
    """Return True when the capsule around segment start-end touches the triangle."""
    if segment_hits_triangle(start, end, a, b, c) is not None:
        return True
    distance = min(
        _point_triangle_distance(start, a, b, c),
        _point_triangle_distance(end, a, b, c),
        _segment_segment_distance(start, end, a, b),
        _segment_segment_distance(start, end, b, c),
        _segment_segment_distance(start, end, c, a),
    )
    return distance <= radius


class StageCollider:
    """Pushes a moving body out of stage walls and onto stage floors."""

    def __init__(self) -> None:
        self.walls: list[Polygon] = []
        self.floors: list[Polygon] = []

    def analyze(self, polygons: Iterable[Polygon], position: Vec3) -> None:
        """Sort polygons into walls and floors around ``position``.

        A polygon whose normal is nearly horizontal is a wall, kept only when
        one of its vertices rises above ``position``; any other polygon is a
        floor. Each list holds at most ``MAX_HIT_COLL`` polygons.
        """
        self.walls = []
        self.floors = []
        for poly in polygons:
            is_vertical = -WALL_NORMAL_Y_LIMIT < poly.normal.y < WALL_NORMAL_Y_LIMIT
            if is_vertical:
                if any(v.y > position.y + WALL_MIN_HEIGHT for v in poly.vertices):
                    if len(self.walls) < MAX_HIT_COLL:
                        self.walls.append(poly)
            elif len(self.floors) < MAX_HIT_COLL:
                self.floors.append(poly)

    def push_out_of_walls(self, position: Vec3) -> Vec3:
        """Slide ``position`` along wall normals until no wall touches it."""
        fixed = position
        if not self.walls:
            return fixed
        for _ in range(HIT_TRY_NUM):
            hit_any = False
            for poly in self.walls:
                top = fixed + Vec3(0.0, HIT_HEIGHT, 0.0)
                if capsule_hits_triangle(fixed, top, HIT_WIDTH, poly.a, poly.b, poly.c):
                    fixed = fixed + poly.normal.scaled(HIT_SLIDE_LENGTH)
                    hit_any = True
            if not hit_any:
                break
        return fixed

    def snap_to_floor(self, position: Vec3) -> Vec3:
        """Put ``position`` on the highest floor found just above or below it."""
        if not self.floors:
            return position
        top = position + Vec3(0.0, HIT_HEIGHT, 0.0)
        bottom = position + Vec3(0.0, HIT_BOTTOM2, 0.0)
        heights = [
            hit.y
            for poly in self.floors
            if (hit := segment_hits_triangle(top, bottom, poly.a, poly.b, poly.c)) is not None
        ]
        if not heights:
            return position
        return Vec3(position.x, max(heights), position.z)

    def resolve(self, position: Vec3, move: Vec3, polygons: Iterable[Polygon]) -> Vec3:
        """Return where a body at ``position`` ends up after moving by ``move``."""
        next_pos = position + move
        search_radius = DEFAULT_SIZE + move.length()
        nearby = [
            poly
            for poly in polygons
            if _point_triangle_distance(position, poly.a, poly.b, poly.c) <= search_radius
        ]
        self.analyze(nearby, position)
        next_pos = self.push_out_of_walls(next_pos)
        return self.snap_to_floor(next_pos)


class WarpablePlayer(Protocol):
    pos: Vec3
    sphere_radius: float

    def warp(self, pad: Pad, target: Vec3) -> None: ...


class Stage:
    """A stage's placement, its warp points and its collider."""

    def __init__(self, kind: StageKind | int, loader: CsvLoader) -> None:
        self.kind = StageKind(kind)
        self.model_path = STAGE_MODEL_PATHS[self.kind]
        self.background_path = BACKGROUND_PATH
        self.warp_points: list[WarpPointPos] = []
        if self.kind is StageKind.STAGE1:
            self.warp_points = [
                loader.load_warp_point_pos(f"WarpPoint{i}") for i in range(WARP_POINT_NUM)
            ]
        self.info: StagePos = loader.load_stage_info(STAGE_INFO_NAME)
        self.position = Vec3(self.info.pos_x, -self.info.pos_y, self.info.pos_z)
        self.size = self.info.size
        self.collider = StageCollider()

    def warp_point(self, player: WarpablePlayer, pad: Pad) -> None:
        """Offer the player a warp at every warp entrance or exit it stands on."""
        player_pos = player.pos
        reach = WARP_POINT_SPHERE_RADIUS + player.sphere_radius
        for point in self.warp_points:
            if (player_pos - point.source).length() < reach:
                player.warp(pad, point.target)
        for point in self.warp_points:
            if (player_pos - point.target).length() < reach:
                player.warp(pad, point.source)