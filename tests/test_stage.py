import pytest

from arenagame.geometry import Vec3
from arenagame.loadcsv import CsvLoader
from arenagame.pad import Pad
from arenagame.stage import (
    HIT_HEIGHT,
    HIT_SLIDE_LENGTH,
    HIT_TRY_NUM,
    HIT_WIDTH,
    MAX_HIT_COLL,
    Polygon,
    Stage,
    StageCollider,
    StageKind,
    capsule_hits_triangle,
    segment_hits_triangle,
)

UP = Vec3(0.0, 1.0, 0.0)


def floor_at(y):
    return Polygon(
        Vec3(-1000.0, y, -1000.0),
        Vec3(-1000.0, y, 3000.0),
        Vec3(3000.0, y, -1000.0),
        UP,
    )


def wall_x0(normal):
    return Polygon(
        Vec3(0.0, -1000.0, -1000.0),
        Vec3(0.0, 3000.0, -1000.0),
        Vec3(0.0, -1000.0, 3000.0),
        normal,
    )


def test_segment_crosses_triangle_at_plane_height():
    poly = floor_at(7.0)
    hit = segment_hits_triangle(Vec3(1, 20, 1), Vec3(1, -20, 1), poly.a, poly.b, poly.c)
    assert hit.y == pytest.approx(7.0)
    assert hit.x == pytest.approx(1.0)


def test_segment_missing_triangle():
    poly = floor_at(7.0)
    assert segment_hits_triangle(Vec3(1, 20, 1), Vec3(1, 10, 1), poly.a, poly.b, poly.c) is None
    assert segment_hits_triangle(Vec3(5000, 20, 1), Vec3(5000, -20, 1), poly.a, poly.b, poly.c) is None


def test_capsule_near_and_far():
    poly = wall_x0(Vec3(1, 0, 0))
    assert capsule_hits_triangle(Vec3(3, 0, 0), Vec3(3, 40, 0), 8.0, poly.a, poly.b, poly.c)
    assert not capsule_hits_triangle(Vec3(30, 0, 0), Vec3(30, 40, 0), 8.0, poly.a, poly.b, poly.c)


def test_capsule_crossing_triangle_hits():
    poly = floor_at(10.0)
    assert capsule_hits_triangle(Vec3(0, 0, 0), Vec3(0, 40, 0), 0.0, poly.a, poly.b, poly.c)


def test_analyze_sorts_walls_and_floors():
    collider = StageCollider()
    tall_wall = wall_x0(Vec3(1, 0, 0))
    low_wall = Polygon(Vec3(0, -10, 0), Vec3(0, 0, 0), Vec3(0, -10, 10), Vec3(1, 0, 0))
    floor = floor_at(0.0)
    collider.analyze([tall_wall, low_wall, floor], Vec3(0, 0, 0))
    assert collider.walls == [tall_wall]
    assert collider.floors == [floor]


def test_analyze_caps_polygon_count():
    collider = StageCollider()
    collider.analyze([floor_at(float(i)) for i in range(MAX_HIT_COLL + 5)], Vec3())
    assert len(collider.floors) == MAX_HIT_COLL


def test_no_walls_leaves_position():
    collider = StageCollider()
    collider.analyze([], Vec3())
    assert collider.push_out_of_walls(Vec3(3, 4, 5)) == Vec3(3, 4, 5)


def test_push_out_of_wall_clears_contact():
    collider = StageCollider()
    wall = wall_x0(Vec3(1, 0, 0))
    collider.analyze([wall], Vec3(3, 0, 0))
    fixed = collider.push_out_of_walls(Vec3(3, 0, 0))
    top = fixed + Vec3(0, HIT_HEIGHT, 0)
    assert not capsule_hits_triangle(fixed, top, HIT_WIDTH, wall.a, wall.b, wall.c)
    assert fixed.x > 3
    assert (fixed.x - 3) % HIT_SLIDE_LENGTH == pytest.approx(0.0)
    assert fixed.y == 0 and fixed.z == 0


def test_push_out_stops_after_try_limit():
    collider = StageCollider()
    collider.analyze([wall_x0(Vec3(0, 0, 1))], Vec3(3, 0, 0))
    fixed = collider.push_out_of_walls(Vec3(3, 0, 0))
    assert fixed.z == pytest.approx(HIT_TRY_NUM * HIT_SLIDE_LENGTH)
    assert fixed.x == 3


def test_snap_to_highest_floor():
    collider = StageCollider()
    collider.analyze([floor_at(5.0), floor_at(15.0)], Vec3())
    assert collider.snap_to_floor(Vec3(1, 0, 1)).y == pytest.approx(15.0)


def test_snap_ignores_floor_out_of_range():
    collider = StageCollider()
    collider.analyze([floor_at(100.0)], Vec3())
    assert collider.snap_to_floor(Vec3(1, 0, 1)) == Vec3(1, 0, 1)


def test_resolve_moves_onto_floor():
    collider = StageCollider()
    result = collider.resolve(Vec3(0, 5, 0), Vec3(1, 0, 2), [floor_at(0.0)])
    assert result.x == pytest.approx(1.0)
    assert result.y == pytest.approx(0.0)
    assert result.z == pytest.approx(2.0)


def test_resolve_skips_distant_polygons():
    collider = StageCollider()
    far = Polygon(Vec3(9000, 0, 0), Vec3(9000, 0, 10), Vec3(9010, 0, 0), UP)
    result = collider.resolve(Vec3(0, 5, 0), Vec3(), [far])
    assert collider.floors == []
    assert result == Vec3(0, 5, 0)


class FakePlayer:
    def __init__(self, pos, radius=10.0):
        self.pos = pos
        self.sphere_radius = radius
        self.warps = []

    def warp(self, pad, target):
        self.warps.append(target)


@pytest.fixture
def loader(tmp_path):
    (tmp_path / "StageInformation.csv").write_text("name,x,y,z,size\nstage1,10,20,30,2\n")
    rows = [f"WarpPoint{i},{i * 1000},0,0,{i * 1000},0,500" for i in range(8)]
    (tmp_path / "WarpPoint.csv").write_text("\n".join(rows) + "\n")
    return CsvLoader(tmp_path)


def test_stage_loads_placement(loader):
    stage = Stage(StageKind.STAGE1, loader)
    assert stage.position == Vec3(10, -20, 30)
    assert stage.size == 2
    assert len(stage.warp_points) == 8


def test_warp_from_source_to_target(loader):
    stage = Stage(StageKind.STAGE1, loader)
    player = FakePlayer(Vec3(0, 0, 0))
    stage.warp_point(player, Pad())
    assert player.warps == [Vec3(0, 0, 500)]


def test_warp_from_target_back_to_source(loader):
    stage = Stage(StageKind.STAGE1, loader)
    player = FakePlayer(Vec3(2000, 0, 500))
    stage.warp_point(player, Pad())
    assert player.warps == [Vec3(2000, 0, 0)]


def test_no_warp_away_from_points(loader):
    stage = Stage(StageKind.STAGE1, loader)
    player = FakePlayer(Vec3(500, 0, 250))
    stage.warp_point(player, Pad())
    assert player.warps == []


def test_second_stage_has_no_warp_points(tmp_path):
    (tmp_path / "StageInformation.csv").write_text("stage1,1,2,3,4\n")
    stage = Stage(StageKind.STAGE2, CsvLoader(tmp_path))
    player = FakePlayer(Vec3())
    stage.warp_point(player, Pad())
    assert stage.warp_points == []
    assert player.warps == []


def test_missing_stage_row_raises(tmp_path):
    (tmp_path / "StageInformation.csv").write_text("other,1,2,3,4\n")
    with pytest.raises(LookupError):
        Stage(StageKind.STAGE2, CsvLoader(tmp_path))