import pytest

from arenagame.geometry import Vec3
from arenagame.loadcsv import (
    AnimInfo,
    CharacterPos,
    CsvLoader,
    EffectData,
    StagePos,
    Status,
    StatusUpValue,
    split_fields,
)


@pytest.fixture
def loader(tmp_path):
    return CsvLoader(tmp_path)


def write(tmp_path, name, text):
    (tmp_path / name).write_text(text, encoding="utf-8")


def test_split_fields_basic():
    assert split_fields("a,b,c", ",") == ["a", "b", "c"]


def test_split_fields_drops_trailing_empty_only():
    assert split_fields("a,,b,", ",") == ["a", "", "b"]


def test_split_fields_empty_line():
    assert split_fields("", ",") == []


def test_split_fields_round_trip():
    fields = ["x", "1", "2.5", "name"]
    assert split_fields(",".join(fields), ",") == fields


def test_load_status_finds_named_row(tmp_path, loader):
    write(
        tmp_path,
        "CharaStatus.csv",
        "name,hp,mp,atk,matk,def,walk,run\n"
        "Enemy,1,2,3,4,5,6,7\n"
        "Player,100,50,10,12,8,2.5,4.5\n",
    )
    status = loader.load_status("Player")
    assert status == Status(100.0, 50.0, 10.0, 12.0, 8.0, 2.5, 4.5)


def test_load_status_missing_name(tmp_path, loader):
    write(tmp_path, "CharaStatus.csv", "Enemy,1,2,3,4,5,6,7\n")
    with pytest.raises(LookupError):
        loader.load_status("Player")


def test_load_status_short_row(tmp_path, loader):
    write(tmp_path, "CharaStatus.csv", "Player,1,2\n")
    with pytest.raises(ValueError):
        loader.load_status("Player")


def test_missing_file_raises(loader):
    with pytest.raises(FileNotFoundError):
        loader.load_stage_info("stage1")


def test_load_collision_info(tmp_path, loader):
    values = [str(i) for i in range(1, 29)]
    write(tmp_path, "CollisionInfo.csv", "Player," + ",".join(values) + "\n")
    info = loader.load_collision_info("Player")
    assert info.capsule_start_point == Vec3(1.0, 2.0, 3.0)
    assert info.capsule_end_point == Vec3(4.0, 5.0, 6.0)
    assert info.radius == 7.0
    assert info.attack_capsule_end_point == Vec3(11.0, 12.0, 13.0)
    assert info.magic_radius == 21.0
    assert info.special_move_end_point == Vec3(25.0, 26.0, 27.0)
    assert info.special_move_radius == 28.0


def test_anim_data_skips_header(tmp_path, loader):
    write(
        tmp_path,
        "AnimData.csv",
        "name,number,loop,end,speed\nIdle,0,10,40,0.5\nRun,3,5,30,1\n",
    )
    data = loader.load_player_anim_data()
    assert data == {
        "Idle": AnimInfo(0, 10.0, 40.0, 0.5),
        "Run": AnimInfo(3, 5.0, 30.0, 1.0),
    }


@pytest.mark.parametrize(
    ("file_name", "method"),
    [
        ("ShortDistanceEnemyAnimData.csv", "load_short_distance_enemy_anim_data"),
        ("LongDistanceEnemyAnimData.csv", "load_long_distance_enemy_anim_data"),
        ("BossAnimData.csv", "load_boss_anim_data"),
    ],
)
def test_enemy_anim_tables(tmp_path, loader, file_name, method):
    write(tmp_path, file_name, "name,number,loop,end,speed\nAttack,2,1,20,0.75\n")
    assert getattr(loader, method)() == {"Attack": AnimInfo(2, 1.0, 20.0, 0.75)}


def test_load_character_pos_truncates_to_int(tmp_path, loader):
    write(tmp_path, "CharacterPos.csv", "Player,12.9,-4,7\n")
    assert loader.load_character_pos("Player") == CharacterPos(12, -4, 7)


def test_load_enemy_pos(tmp_path, loader):
    values = [str(i) for i in range(24)]
    write(tmp_path, "EnemyPosOnStage.csv", "Short," + ",".join(values) + "\n")
    positions = loader.load_enemy_pos("Short")
    assert len(positions) == 8
    assert positions[0] == Vec3(0.0, 1.0, 2.0)
    assert positions[7] == Vec3(21.0, 22.0, 23.0)


def test_load_stage_info(tmp_path, loader):
    write(tmp_path, "StageInformation.csv", "stage1,10,-20,30,1.5\n")
    assert loader.load_stage_info("stage1") == StagePos(10.0, -20.0, 30.0, 1.5)


def test_load_warp_point_pos(tmp_path, loader):
    write(
        tmp_path,
        "WarpPoint.csv",
        "WarpPoint0,1,2,3,4,5,6\nWarpPoint1,7,8,9,10,11,12\n",
    )
    warp = loader.load_warp_point_pos("WarpPoint1")
    assert warp.source == Vec3(7.0, 8.0, 9.0)
    assert warp.target == Vec3(10.0, 11.0, 12.0)


def test_load_status_up_uses_last_valid_row(tmp_path, loader):
    write(
        tmp_path,
        "StatusUP.csv",
        "point,hp,hpT,atk,atkT,matk,matkT,def,defT,gauge,bonus\n"
        "1,2,3,4,5,6,7,8,9,10,11\n"
        "20,21,22,23,24,25,26,27,28,29,30\n",
    )
    value = loader.load_status_up()
    assert value == StatusUpValue(20, 21, 22, 23, 24, 25, 26, 27, 28, 29, 30)


def test_load_status_up_without_data_gives_defaults(tmp_path, loader):
    write(tmp_path, "StatusUP.csv", "point,hp\n")
    assert loader.load_status_up() == StatusUpValue()


def test_load_effect_data(tmp_path, loader):
    write(tmp_path, "EffectData.csv", "Hit,30,2.5,-10\n")
    assert loader.load_effect_data("Hit") == EffectData(30.0, 2.5, -10.0)


def test_non_numeric_value_raises(tmp_path, loader):
    write(tmp_path, "EffectData.csv", "Hit,abc,2.5,-10\n")
    with pytest.raises(ValueError):
        loader.load_effect_data("Hit")