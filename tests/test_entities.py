import random

import pytest

from starshooter.entities import (
    ASTEROID_LIMIT,
    ASTEROID_SPAWN_DELAY,
    WINDOW_WIDTH,
    Asteroids,
    Body,
    Direction,
    Enemy,
    Player,
    Projectile,
)
from starshooter.state import GameState


def test_body_bounds_round_trip():
    body = Body(1.5, 2.5, 3.0, 4.0)
    assert body.bounds() == (1.5, 2.5, 3.0, 4.0)


def test_body_intersects_overlap_and_symmetry():
    a = Body(0, 0, 10, 10)
    b = Body(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_body_touching_edges_do_not_intersect():
    a = Body(0, 0, 10, 10)
    b = Body(10, 0, 10, 10)
    assert not a.intersects(b)


def test_body_shift_and_back():
    body = Body(3, 4, 1, 1)
    body.shift(2, -1)
    body.shift(-2, 1)
    assert (body.x, body.y) == (3, 4)


def test_asteroid_waits_for_timer():
    rocks = Asteroids(random.Random(0))
    results = [rocks.spawn() for _ in range(ASTEROID_SPAWN_DELAY)]
    assert results == [None] * ASTEROID_SPAWN_DELAY
    rock = rocks.spawn()
    assert rock is rocks.rocks[0]
    assert 0 <= rock.x < WINDOW_WIDTH
    assert rock.y == 0
    assert rocks.spawn_timer == 0


def test_asteroid_limit():
    rocks = Asteroids(random.Random(1))
    for _ in range((ASTEROID_SPAWN_DELAY + 1) * (ASTEROID_LIMIT + 3)):
        rocks.spawn()
    assert len(rocks.rocks) == ASTEROID_LIMIT


def test_asteroids_fall_and_leave():
    rocks = Asteroids(random.Random(2))
    rocks.rocks = [Body(0, 0, 5, 5), Body(0, 100, 5, 5)]
    rocks.move(50)
    assert len(rocks.rocks) == 1
    assert rocks.rocks[0].y == pytest.approx(0.1)


def test_enemy_turns_at_edges():
    enemy = Enemy()
    enemy.body.x = 0
    enemy.move(1140)
    assert enemy.heading is Direction.RIGHT
    assert enemy.body.x == pytest.approx(0.2)
    enemy.body.x = 1040
    enemy.move(1140)
    assert enemy.heading is Direction.LEFT
    assert enemy.body.x == pytest.approx(1039.8)


def test_enemy_health_bar_follows():
    enemy = Enemy()
    enemy.move(1140)
    assert enemy.health_bar.x == pytest.approx(510)
    assert enemy.health_bar.y == pytest.approx(180)


def test_enemy_fire_interval():
    enemy = Enemy()
    assert enemy.fire(1.0) is None
    shot = enemy.fire(1.8)
    assert isinstance(shot, Projectile)
    assert (shot.origin_x, shot.origin_y) == (500, 70)
    assert enemy.since_last_fire == 1.2
    assert enemy.fire(1.0) is None
    assert enemy.fire(0.6) is not None
    assert len(enemy.shots) == 2


def test_enemy_status_lines():
    state = GameState()
    assert Enemy().status_lines(state) == ["ENEMY", "Health - 15"]


def test_player_start_and_fire():
    player = Player()
    shot = player.fire()
    assert (shot.origin_x, shot.origin_y) == (500, 550)
    assert player.shots == [shot]
    rocket = player.special_fire()
    assert player.rockets == [rocket]
    assert rocket.origin_y == 550


def test_player_left_limit():
    player = Player()
    player.body.x = -5.0
    player.move(Direction.LEFT)
    assert player.body.x == pytest.approx(-5.35)
    player.move(Direction.LEFT)
    assert player.body.x == pytest.approx(-5.35)


def test_player_right_limit():
    player = Player()
    player.body.x = 1030.0
    player.move(Direction.RIGHT)
    assert player.body.x == pytest.approx(1030.35)
    player.move(Direction.RIGHT)
    assert player.body.x == pytest.approx(1030.35)


def test_player_vertical_limits():
    player = Player()
    player.body.y = 450.0
    player.move(Direction.UP)
    player.move(Direction.UP)
    assert player.body.y == pytest.approx(449.65)
    player.body.y = 570.0
    player.move(Direction.DOWN)
    player.move(Direction.DOWN)
    assert player.body.y == pytest.approx(570.35)


def test_player_no_direction_stays():
    player = Player()
    player.move(None)
    assert (player.body.x, player.body.y) == (500, 550)
    assert (player.health_bar.x, player.health_bar.y) == (503, 544)


def test_player_status_lines():
    state = GameState()
    lines = Player().status_lines(state)
    assert lines == [
        "PLAYER",
        "Health - 10",
        "Points - 0",
        "Ammo - 10",
        "Power - 5",
        "Level - 1",
    ]