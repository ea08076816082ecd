"""Buildings that can stand on the board."""

from __future__ import annotations

from townguard.position import Position


class Building:
    """A rectangular structure with a cost, hit points and an icon."""

    def __init__(
        self,
        x: int,
        y: int,
        size_x: int,
        size_y: int,
        cost_gold: int,
        cost_elixir: int,
        health: int,
        max_instances: int,
        icon: str,
        has_border: bool = True,
    ) -> None:
        self.position = Position(x, y)
        self.size_x = size_x
        self.size_y = size_y
        self.cost_gold = cost_gold
        self.cost_elixir = cost_elixir
        self.health = health
        self.max_instances = max_instances
        self.icon = icon
        self.has_border = has_border

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position!r}, "
            f"size=({self.size_x}, {self.size_y}), health={self.health})"
        )

    def take_damage(self, damage: int) -> None:
        """Lose ``damage`` hit points."""
        self.health -= damage

    def contains(self, pos: Position) -> bool:
        """Whether ``pos`` lies within this building's footprint."""
        origin = self.position
        return (
            origin.x <= pos.x < origin.x + self.size_x
            and origin.y <= pos.y < origin.y + self.size_y
        )

    def collides_with(self, other: Building) -> bool:
        """Whether the footprints of the two buildings overlap."""
        a, b = self.position, other.position
        separated = (
            a.x + self.size_x <= b.x
            or b.x + other.size_x <= a.x
            or a.y + self.size_y <= b.y
            or b.y + other.size_y <= a.y
        )
        return not separated


class ResourceGenerator(Building):
    """A building that slowly fills up and can be emptied by the player."""

    RATE = 5

    def __init__(
        self,
        x: int,
        y: int,
        size_x: int,
        size_y: int,
        cost_gold: int,
        cost_elixir: int,
        health: int,
        max_instances: int,
        empty_icon: str,
        full_icon: str,
        capacity: int,
    ) -> None:
        super().__init__(
            x, y, size_x, size_y, cost_gold, cost_elixir, health, max_instances, empty_icon
        )
        self.empty_icon = empty_icon
        self.full_icon = full_icon
        self.capacity = capacity
        self.current_amount = 0

    @property
    def is_full(self) -> bool:
        return self.current_amount >= self.capacity

    def update(self) -> None:
        """Produce one tick's worth of resource, switching icon once full."""
        if self.current_amount < self.capacity:
            self.current_amount += self.RATE
            if self.current_amount >= self.capacity:
                self.icon = self.full_icon

    def collect(self) -> int:
        """Empty the store if it is full and return what it held, else 0."""
        if not self.is_full:
            return 0
        collected = self.current_amount
        self.current_amount = 0
        self.icon = self.empty_icon
        return collected


class GoldMine(ResourceGenerator):
    """Produces gold; costs elixir to build."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x, y, 7, 3, 0, 100, 100, 3, "🪨", "🪙", 100)


class ElixirCollector(ResourceGenerator):
    """Produces elixir; costs gold to build."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x, y, 7, 3, 100, 0, 100, 3, "💧", "🧪", 100)


class TownHall(Building):
    """The building the enemies march on; its loss ends the game."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x, y, 9, 5, 0, 0, 500, 1, "🏰")


class Wall(Building):
    """A single-cell barrier drawn without a border."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x, y, 1, 1, 10, 0, 100, 200, "🧱", has_border=False)