"""A healing apple dropped where an enemy falls."""

from __future__ import annotations

from typing import Protocol

from arenagame.geometry import Vec3

SPHERE_RADIUS = 20.0
RECOVERY_QUANTITY = 10
MODEL_SCALE = 0.55
MODEL_PATH = "data/model/item/Fruit.mv1"


class HealablePlayer(Protocol):
    pos: Vec3
    sphere_radius: float

    def recover_hp(self, amount: int) -> None: ...


class Apple:
    """An item that restores the player's HP when touched."""

    def __init__(self, enemy_pos: Vec3) -> None:
        self.pos = enemy_pos
        self.is_hit_player = False

    def hit_player(self, player: HealablePlayer) -> None:
        """Heal the player and mark the apple taken if the player touches it."""
        distance = player.pos - self.pos
        if distance.length() < SPHERE_RADIUS + player.sphere_radius:
            player.recover_hp(RECOVERY_QUANTITY)
            self.is_hit_player = True