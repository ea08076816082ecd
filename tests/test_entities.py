from townguard.buildings import ElixirCollector, GoldMine, TownHall, Wall
from townguard.entities import Enemy, Entity, Npc, Player
from townguard.position import Position


def _far_hall():
    return TownHall(80, 16)


def _tick(enemy, target, walls=(), mines=(), collectors=(), hall=None):
    return enemy.update(target, list(walls), list(mines), list(collectors), hall or _far_hall())


def test_entity_keeps_position_and_icon():
    ent = Entity(2, 3, "x")
    assert ent.position == Position(2, 3)
    assert ent.icon == "x"


def test_npc_is_entity():
    npc = Npc(1, 1, "n")
    assert isinstance(npc, Entity)
    assert npc.icon == "n"


def test_player_starts_with_resources():
    player = Player(32, 16)
    assert player.icon == "👷"
    assert (player.resources.gold, player.resources.elixir) == (400, 400)


def test_enemy_defaults():
    enemy = Enemy(31, 5)
    assert enemy.icon == "👹"
    assert enemy.damage == 10
    assert enemy.is_attacking is False
    assert enemy.target_building is None


def test_enemy_moves_only_every_third_tick():
    enemy = Enemy(40, 5)
    target = Position(80, 16)
    start = enemy.position
    for _ in range(enemy.speed - 1):
        assert _tick(enemy, target) is False
        assert enemy.position == start
    assert _tick(enemy, target) is False
    assert enemy.position == Position(start.x + 1, start.y + 1)


def test_enemy_moves_toward_target_from_the_other_side():
    enemy = Enemy(140, 20)
    target = Position(80, 16)
    for _ in range(enemy.speed):
        _tick(enemy, target)
    assert enemy.position == Position(139, 19)


def test_enemy_stays_when_on_target_axis():
    enemy = Enemy(50, 16)
    target = Position(80, 16)
    for _ in range(enemy.speed):
        _tick(enemy, target)
    assert enemy.position.y == 16
    assert enemy.position.x == 51


def test_enemy_reaching_town_hall_reports_true():
    hall = TownHall(80, 16)
    enemy = Enemy(82, 17)
    results = [_tick(enemy, hall.position, hall=hall) for _ in range(enemy.speed)]
    assert results[-1] is True
    assert not any(results[:-1])


def test_enemy_attacks_wall_it_stands_on():
    wall = Wall(40, 5)
    enemy = Enemy(40, 5)
    for _ in range(enemy.speed):
        _tick(enemy, Position(80, 16), walls=[wall])
    assert wall.health == 100 - enemy.damage
    assert enemy.position == Position(40, 5)
    assert enemy.is_attacking is True
    assert enemy.target_building is wall


def test_enemy_stops_attacking_when_building_destroyed():
    wall = Wall(40, 5)
    wall.health = 10
    enemy = Enemy(40, 5)
    for _ in range(enemy.speed):
        _tick(enemy, Position(80, 16), walls=[wall])
    assert wall.health <= 0
    assert enemy.is_attacking is False
    assert enemy.target_building is None


def test_enemy_ignores_dead_wall_and_walks_on():
    wall = Wall(40, 5)
    wall.health = 0
    enemy = Enemy(40, 5)
    for _ in range(enemy.speed):
        _tick(enemy, Position(80, 16), walls=[wall])
    assert wall.health == 0
    assert enemy.position == Position(41, 6)


def test_enemy_attacks_gold_mine_footprint():
    mine = GoldMine(40, 5)
    enemy = Enemy(40 + mine.size_x - 1, 5 + mine.size_y - 1)
    for _ in range(enemy.speed):
        _tick(enemy, Position(80, 16), mines=[mine])
    assert mine.health == 100 - enemy.damage


def test_enemy_attacks_elixir_collector_footprint():
    col = ElixirCollector(40, 5)
    enemy = Enemy(41, 6)
    for _ in range(enemy.speed):
        _tick(enemy, Position(80, 16), collectors=[col])
    assert col.health == 100 - enemy.damage
    assert enemy.target_building is col


def test_wall_takes_priority_over_mine():
    mine = GoldMine(40, 5)
    wall = Wall(41, 6)
    enemy = Enemy(41, 6)
    for _ in range(enemy.speed):
        _tick(enemy, Position(80, 16), walls=[wall], mines=[mine])
    assert wall.health == 100 - enemy.damage
    assert mine.health == 100