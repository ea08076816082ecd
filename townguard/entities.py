"""Things that move on the board: the player and the enemies."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from townguard.buildings import Building, ElixirCollector, GoldMine, TownHall, Wall
from townguard.position import Position
from townguard.resources import Resources


class Entity:
    """Something with a position and an icon."""

    def __init__(self, x: int, y: int, icon: str) -> None:
        self.position = Position(x, y)
        self.icon = icon

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position!r})"


class Npc(Entity):
    """An entity not controlled by the player."""


class Player(Entity):
    """The builder controlled from the keyboard."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x, y, "👷")
        self.resources = Resources(400, 400)


class Enemy(Npc):
    """A raider that walks toward the town hall, attacking what it stands on."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x, y, "👹")
        self.damage = 10
        self.speed = 3
        self.speed_counter = 0
        self.is_attacking = False
        self.target_building: Optional[Building] = None

    def _strike(self, building: Building) -> None:
        self.is_attacking = True
        self.target_building = building
        building.take_damage(self.damage)
        if building.health <= 0:
            self.is_attacking = False
            self.target_building = None

    def update(
        self,
        target: Position,
        walls: Sequence[Wall],
        gold_mines: Sequence[GoldMine],
        elixir_collectors: Sequence[ElixirCollector],
        townhall: TownHall,
    ) -> bool:
        """Advance one tick; return True once the enemy has reached the town hall."""
        self.speed_counter += 1
        if self.speed_counter < self.speed:
            return False
        self.speed_counter = 0

        pos = self.position
        if townhall.contains(pos):
            return True

        for group in (walls, gold_mines, elixir_collectors):
            for building in group:
                if building.contains(pos) and building.health > 0:
                    self._strike(building)
                    return False

        x, y = pos.x, pos.y
        if x < target.x:
            x += 1
        elif x > target.x:
            x -= 1
        if y < target.y:
            y += 1
        elif y > target.y:
            y -= 1
        self.position = Position(x, y)
        return False