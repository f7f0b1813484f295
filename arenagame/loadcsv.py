"""Readers for the game's CSV data tables."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

from arenagame.geometry import Vec3

CHARA_STATUS_FILE = "CharaStatus.csv"
CHARA_ANIM_DATA_FILE = "AnimData.csv"
CHARACTER_POS_FILE = "CharacterPos.csv"
STAGE_INFORMATION_FILE = "StageInformation.csv"
SHORT_DISTANCE_ENEMY_ANIM_FILE = "ShortDistanceEnemyAnimData.csv"
LONG_DISTANCE_ENEMY_ANIM_FILE = "LongDistanceEnemyAnimData.csv"
BOSS_ANIM_FILE = "BossAnimData.csv"
COLLISION_INFO_FILE = "CollisionInfo.csv"
ENEMY_POS_ON_STAGE_FILE = "EnemyPosOnStage.csv"
WARP_POINT_POS_FILE = "WarpPoint.csv"
STATUS_UP_FILE = "StatusUP.csv"
EFFECT_DATA_FILE = "EffectData.csv"

DEFAULT_DATA_DIR = "data/csv"

ENEMY_SPAWN_COUNT = 8

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

T = TypeVar("T")


def split_fields(line: str, delimiter: str = ",") -> list[str]:
    """Split ``line`` on ``delimiter``; a trailing empty field is dropped."""
    parts = line.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _parse_int(text: str) -> int:
    """Parse the leading integer of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group())


def _parse_float(text: str) -> float:
    """Parse the leading number of ``text``, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group())


@dataclass
class Status:
    """A character's base statistics."""

    max_hp: float = 0.0
    max_mp: float = 0.0
    attack_power: float = 0.0
    magic_attack_power: float = 0.0
    defense_power: float = 0.0
    walk_speed: float = 0.0
    run_speed: float = 0.0


@dataclass
class CollisionInfo:
    """Capsules used for a character's body, attack, magic and special move."""

    capsule_start_point: Vec3 = field(default_factory=Vec3)
    capsule_end_point: Vec3 = field(default_factory=Vec3)
    radius: float = 0.0
    attack_capsule_start_point: Vec3 = field(default_factory=Vec3)
    attack_capsule_end_point: Vec3 = field(default_factory=Vec3)
    attack_radius: float = 0.0
    magic_capsule_start_point: Vec3 = field(default_factory=Vec3)
    magic_capsule_end_point: Vec3 = field(default_factory=Vec3)
    magic_radius: float = 0.0
    special_move_start_point: Vec3 = field(default_factory=Vec3)
    special_move_end_point: Vec3 = field(default_factory=Vec3)
    special_move_radius: float = 0.0


@dataclass
class AnimInfo:
    """One animation clip: its index and playback frames."""

    number: int = 0
    loop_frame: float = 0.0
    end_frame: float = 0.0
    play_speed: float = 0.0


@dataclass
class CharacterPos:
    """A character's starting position in whole units."""

    pos_x: int = 0
    pos_y: int = 0
    pos_z: int = 0


@dataclass
class StagePos:
    """Placement and scale of a stage model."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    pos_z: float = 0.0
    size: float = 0.0


@dataclass
class WarpPointPos:
    """A warp entrance and the place it leads to."""

    source: Vec3 = field(default_factory=Vec3)
    target: Vec3 = field(default_factory=Vec3)


@dataclass
class StatusUpValue:
    """Saved status points and upgrade counts of the player."""

    status_point: int = 0
    hp_up: int = 0
    hp_up_times: int = 0
    attack_power_up: int = 0
    attack_power_up_times: int = 0
    magic_attack_power_up: int = 0
    magic_attack_power_up_times: int = 0
    defense_power_up: int = 0
    defense_power_up_times: int = 0
    special_move_gauge: int = 0
    custom_bonus: int = 0


@dataclass
class EffectData:
    """Timing, scale and vertical offset of an effect."""

    effect_time: float = 0.0
    effect_size: float = 0.0
    effect_adj_pos_y: float = 0.0


def _require(fields: list[str], count: int, name: str) -> list[str]:
    if len(fields) < count:
        raise ValueError(
            f"row {name!r} has {len(fields) - 1} values, expected {count - 1}"
        )
    return fields


def _vec(fields: list[str], start: int) -> Vec3:
    return Vec3(*(_parse_float(text) for text in fields[start : start + 3]))


class CsvLoader:
    """Loads game tables from CSV files in one directory."""

    def __init__(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
        self.data_dir = Path(data_dir)

    def _rows(self, file_name: str) -> Iterator[list[str]]:
        with open(self.data_dir / file_name, encoding="utf-8") as stream:
            for line in stream:
                fields = split_fields(line.rstrip("\r\n"))
                if fields:
                    yield fields

    def _find_row(self, file_name: str, name: str, count: int) -> list[str]:
        for fields in self._rows(file_name):
            if fields[0] == name:
                return _require(fields, count, name)
        raise LookupError(f"no row named {name!r} in {file_name}")

    def _parse_rows(
        self, file_name: str, parse: Callable[[list[str]], T]
    ) -> Iterator[tuple[list[str], T]]:
        """Yield each row that parses; rows that do not (headers) are skipped."""
        for fields in self._rows(file_name):
            try:
                yield fields, parse(fields)
            except (ValueError, IndexError):
                continue

    def load_status(self, name: str) -> Status:
        """Return the statistics of the character called ``name``."""
        fields = self._find_row(CHARA_STATUS_FILE, name, 8)
        return Status(*(_parse_float(text) for text in fields[1:8]))

    def load_collision_info(self, name: str) -> CollisionInfo:
        """Return the collision capsules of the character called ``name``."""
        f = self._find_row(COLLISION_INFO_FILE, name, 29)
        return CollisionInfo(
            capsule_start_point=_vec(f, 1),
            capsule_end_point=_vec(f, 4),
            radius=_parse_float(f[7]),
            attack_capsule_start_point=_vec(f, 8),
            attack_capsule_end_point=_vec(f, 11),
            attack_radius=_parse_float(f[14]),
            magic_capsule_start_point=_vec(f, 15),
            magic_capsule_end_point=_vec(f, 18),
            magic_radius=_parse_float(f[21]),
            special_move_start_point=_vec(f, 22),
            special_move_end_point=_vec(f, 25),
            special_move_radius=_parse_float(f[28]),
        )

    def _load_anim_table(self, file_name: str) -> dict[str, AnimInfo]:
        def parse(fields: list[str]) -> AnimInfo:
            return AnimInfo(
                number=_parse_int(fields[1]),
                loop_frame=_parse_float(fields[2]),
                end_frame=_parse_float(fields[3]),
                play_speed=_parse_float(fields[4]),
            )

        return {fields[0]: info for fields, info in self._parse_rows(file_name, parse)}

    def load_player_anim_data(self) -> dict[str, AnimInfo]:
        """Return the player's animations keyed by name."""
        return self._load_anim_table(CHARA_ANIM_DATA_FILE)

    def load_character_pos(self, name: str) -> CharacterPos:
        """Return the starting position of the character called ``name``."""
        fields = self._find_row(CHARACTER_POS_FILE, name, 4)
        return CharacterPos(*(_parse_int(text) for text in fields[1:4]))

    def load_short_distance_enemy_anim_data(self) -> dict[str, AnimInfo]:
        """Return the melee enemy's animations keyed by name."""
        return self._load_anim_table(SHORT_DISTANCE_ENEMY_ANIM_FILE)

    def load_long_distance_enemy_anim_data(self) -> dict[str, AnimInfo]:
        """Return the ranged enemy's animations keyed by name."""
        return self._load_anim_table(LONG_DISTANCE_ENEMY_ANIM_FILE)

    def load_boss_anim_data(self) -> dict[str, AnimInfo]:
        """Return the boss's animations keyed by name."""
        return self._load_anim_table(BOSS_ANIM_FILE)

    def load_enemy_pos(self, name: str) -> tuple[Vec3, ...]:
        """Return the eight spawn positions of the enemy kind called ``name``."""
        fields = self._find_row(ENEMY_POS_ON_STAGE_FILE, name, 1 + 3 * ENEMY_SPAWN_COUNT)
        return tuple(_vec(fields, 1 + 3 * i) for i in range(ENEMY_SPAWN_COUNT))

    def load_stage_info(self, name: str) -> StagePos:
        """Return the placement of the stage called ``name``."""
        fields = self._find_row(STAGE_INFORMATION_FILE, name, 5)
        return StagePos(*(_parse_float(text) for text in fields[1:5]))

    def load_warp_point_pos(self, name: str) -> WarpPointPos:
        """Return the warp point called ``name``."""
        fields = self._find_row(WARP_POINT_POS_FILE, name, 7)
        return WarpPointPos(source=_vec(fields, 1), target=_vec(fields, 4))

    def load_status_up(self) -> StatusUpValue:
        """Return the last valid row of the status-up table."""
        def parse(fields: list[str]) -> StatusUpValue:
            return StatusUpValue(*(_parse_int(text) for text in fields[:11]))

        result = StatusUpValue()
        for fields, value in self._parse_rows(STATUS_UP_FILE, parse):
            _require(fields, 11, fields[0])
            result = value
        return result

    def load_effect_data(self, name: str) -> EffectData:
        """Return the parameters of the effect called ``name``."""
        fields = self._find_row(EFFECT_DATA_FILE, name, 4)
        return EffectData(*(_parse_float(text) for text in fields[1:4]))