"""The playing field: buildings, the player, enemies and the frame drawn each tick."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Optional

from townguard.buildings import (
    Building,
    ElixirCollector,
    GoldMine,
    ResourceGenerator,
    TownHall,
    Wall,
)
from townguard.entities import Enemy, Player
from townguard.position import Position

CLEAR_SCREEN = "\033[H\033[2J"


def _move_to(x: int, y: int) -> str:
    return f"\033[{y};{x}H"


class Board:
    """Holds the whole game state and advances it one tick at a time."""

    WIDTH = 147
    HEIGHT = 33
    MARGIN = 30
    SPAWN_RATE = 30
    GAME_OVER_MESSAGE = "GAME OVER - Town Hall Destroyed!"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.player = Player(self.MARGIN + 2, self.HEIGHT // 2)
        self.townhall = TownHall(80, self.HEIGHT // 2)
        self.walls: list[Wall] = []
        self.gold_mines: list[GoldMine] = []
        self.elixir_collectors: list[ElixirCollector] = []
        self.enemies: list[Enemy] = []
        self.spawn_counter = 0
        self.game_over = False
        self._rng = rng if rng is not None else random.Random()

    # ------------------------------------------------------------------ rules

    def _structures(self) -> Iterable[Building]:
        yield from self.walls
        yield from self.gold_mines
        yield from self.elixir_collectors

    def can_build(self, building: Building) -> bool:
        """Whether ``building`` fits without overlapping anything already built."""
        if any(building.collides_with(other) for other in self._structures()):
            return False
        return not building.collides_with(self.townhall)

    def is_position_occupied(self, pos: Position) -> bool:
        """Whether a wall stands on ``pos``."""
        return any(wall.contains(pos) for wall in self.walls)

    def try_move_player(self, direction: str) -> bool:
        """Step the player U, D, L or R; return whether the move was allowed."""
        x, y = self.player.position.x, self.player.position.y
        if direction == "U":
            if y > 1:
                y -= 1
        elif direction == "D":
            if y < self.HEIGHT - 2:
                y += 1
        elif direction == "L":
            if x > self.MARGIN + 2:
                x -= 2
        elif direction == "R":
            if x < self.WIDTH - 4:
                x += 2
        else:
            return False

        target = Position(x, y)
        if self.is_position_occupied(target):
            return False
        self.player.position = target
        return True

    def _centered_on_player(self, kind: type[ResourceGenerator]) -> ResourceGenerator:
        template = kind(0, 0)
        pos = self.player.position
        return kind(pos.x - template.size_x // 2, pos.y - template.size_y // 2)

    def place_wall(self) -> bool:
        """Build a wall under the player if space, limit and funds allow."""
        pos = self.player.position
        wall = Wall(pos.x, pos.y)
        if not self.can_build(wall) or len(self.walls) >= wall.max_instances:
            return False
        funds = self.player.resources
        if funds.gold < wall.cost_gold or funds.elixir < wall.cost_elixir:
            return False
        funds.spend_gold(wall.cost_gold)
        funds.spend_elixir(wall.cost_elixir)
        self.walls.append(wall)
        return True

    def place_gold_mine(self) -> bool:
        """Build a gold mine centred on the player, paid for in elixir."""
        mine = self._centered_on_player(GoldMine)
        if not self.can_build(mine) or len(self.gold_mines) >= mine.max_instances:
            return False
        funds = self.player.resources
        if funds.elixir < mine.cost_elixir:
            return False
        funds.spend_elixir(mine.cost_elixir)
        self.gold_mines.append(mine)
        return True

    def place_elixir_collector(self) -> bool:
        """Build an elixir collector centred on the player, paid for in gold."""
        collector = self._centered_on_player(ElixirCollector)
        if (
            not self.can_build(collector)
            or len(self.elixir_collectors) >= collector.max_instances
        ):
            return False
        funds = self.player.resources
        if funds.gold < collector.cost_gold:
            return False
        funds.spend_gold(collector.cost_gold)
        self.elixir_collectors.append(collector)
        return True

    @staticmethod
    def _harvest(generators: Iterable[ResourceGenerator], pos: Position) -> int:
        for generator in generators:
            if generator.contains(pos):
                collected = generator.collect()
                if collected > 0:
                    return collected
        return 0

    def collect_resources(self) -> None:
        """Empty the full mine and collector the player stands on, if any."""
        pos = self.player.position
        self.player.resources.gold += self._harvest(self.gold_mines, pos)
        self.player.resources.elixir += self._harvest(self.elixir_collectors, pos)

    def update_resources(self) -> None:
        """Let every generator produce for one tick."""
        for generator in (*self.gold_mines, *self.elixir_collectors):
            generator.update()

    def _spawn_enemy(self) -> None:
        self.spawn_counter += 1
        if self.spawn_counter < self.SPAWN_RATE:
            return
        self.spawn_counter = 0
        y = self._rng.randint(1, self.HEIGHT - 2)
        x = self.MARGIN + 1 if self._rng.randint(0, 1) else self.WIDTH - 2
        self.enemies.append(Enemy(x, y))

    def _update_enemies(self) -> None:
        for enemy in self.enemies:
            if enemy.update(
                self.townhall.position,
                self.walls,
                self.gold_mines,
                self.elixir_collectors,
                self.townhall,
            ):
                self.game_over = True
                return
        self.walls = [w for w in self.walls if w.health > 0]
        self.gold_mines = [m for m in self.gold_mines if m.health > 0]
        self.elixir_collectors = [c for c in self.elixir_collectors if c.health > 0]

    def update(self) -> None:
        """Advance the world one tick; does nothing once the game is over."""
        if self.game_over:
            return
        self._spawn_enemy()
        self._update_enemies()
        self.update_resources()

    # -------------------------------------------------------------- drawing

    def _horizontal_border(self, left: str, joint: str, right: str) -> str:
        inner = "".join(
            joint if x == self.MARGIN else "═" for x in range(1, self.WIDTH - 1)
        )
        return f"{left}{inner}{right}\n"

    def _status_lines(self) -> dict[int, str]:
        funds = self.player.resources
        return {
            1: f"Gold = {funds.gold}",
            2: f"Elixir = {funds.elixir}",
            3: f"Walls = {len(self.walls)}/200",
            4: f"Gold Mines = {len(self.gold_mines)}/3",
            5: f"Elixir Generators = {len(self.elixir_collectors)}/3",
            6: f"Town Hall HP = {self.townhall.health}",
            7: f"Enemies = {len(self.enemies)}",
        }

    def _middle(self) -> str:
        status = self._status_lines()
        field = " " * (self.WIDTH - self.MARGIN - 2)
        rows = (
            f"║{status.get(y, '').ljust(self.MARGIN - 1)}║{field}║\n"
            for y in range(1, self.HEIGHT - 1)
        )
        return "".join(rows)

    @staticmethod
    def _draw_building(building: Building) -> str:
        x, y = building.position.x, building.position.y
        if not building.has_border:
            return _move_to(x, y) + building.icon

        width, height = building.size_x, building.size_y
        inner = width - 2
        edge = "─" * max(inner, 0)
        parts = [_move_to(x, y), "┌", edge, "┐"]
        icon_col, icon_row = width // 2, height // 2
        for row in range(1, height - 1):
            if row == icon_row and 1 <= icon_col <= inner:
                # The icon is two cells wide, so it takes the place of two spaces.
                after = max(width - 3 - icon_col, 0)
                body = " " * (icon_col - 1) + building.icon + " " * after
            else:
                body = " " * max(inner, 0)
            parts += [_move_to(x, y + row), "│", body, "│"]
        parts += [_move_to(x, y + height - 1), "└", edge, "┘"]
        return "".join(parts)

    def render(self) -> str:
        """Return the full terminal frame for the current state."""
        parts = [
            CLEAR_SCREEN,
            self._horizontal_border("╔", "╦", "╗"),
            self._middle(),
            self._horizontal_border("╚", "╩", "╝"),
            self._draw_building(self.townhall),
        ]
        parts.extend(self._draw_building(b) for b in self._structures())
        parts.extend(
            _move_to(e.position.x, e.position.y) + e.icon for e in self.enemies
        )
        parts.append(
            _move_to(self.player.position.x, self.player.position.y) + self.player.icon
        )
        if self.game_over:
            message = self.GAME_OVER_MESSAGE
            parts.append(
                _move_to((self.WIDTH - len(message)) // 2, self.HEIGHT // 2) + message
            )
            parts.append(_move_to(0, self.HEIGHT))
        return "".join(parts)