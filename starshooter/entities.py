"""The moving things in a battle: the player, the enemy, shots and asteroids."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from .state import GameState

WINDOW_WIDTH = 1140

PLAYER_START = (500.0, 550.0)
PLAYER_SIZE = (94.0, 100.0)
PLAYER_STEP = 0.35
PLAYER_LEFT_LIMIT = -5.0
PLAYER_RIGHT_LIMIT = 1030.0
PLAYER_TOP_LIMIT = 450.0
PLAYER_BOTTOM_LIMIT = 570.0
PLAYER_BAR_SIZE = (88.0, 10.0)
PLAYER_BAR_OFFSET = (3.0, -6.0)

ENEMY_START = (500.0, 70.0)
ENEMY_SIZE = (100.0, 100.0)
ENEMY_STEP = 0.2
ENEMY_FIRE_INTERVAL = 2.8
ENEMY_FIRE_RESTART = 1.2
ENEMY_BAR_SIZE = (100.0, 10.0)
ENEMY_BAR_OFFSET = (10.0, 110.0)

BULLET_SIZE = (20.0, 40.0)
ROCKET_SIZE = (30.0, 60.0)
ENEMY_BULLET_SIZE = (20.0, 40.0)

ASTEROID_SIZE = (60.0, 60.0)
ASTEROID_SPAWN_DELAY = 500
ASTEROID_LIMIT = 5
ASTEROID_SPEED = 0.1


@dataclass
class Body:
    """An axis-aligned rectangle with a position."""

    x: float
    y: float
    width: float
    height: float

    def bounds(self) -> tuple[float, float, float, float]:
        """The rectangle as (left, top, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def intersects(self, other: Body) -> bool:
        """Whether the two rectangles overlap by a non-zero area."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.x + self.width, other.x + other.width)
        bottom = min(self.y + self.height, other.y + other.height)
        return left < right and top < bottom

    def shift(self, dx: float, dy: float) -> None:
        """Move the rectangle by an offset."""
        self.x += dx
        self.y += dy


@dataclass
class Projectile(Body):
    """A shot in flight.

    ``origin_x`` and ``origin_y`` track the point the shot is flying
    along; ``x`` and ``y`` are where it is drawn and tested for hits.
    """

    origin_x: float = 0.0
    origin_y: float = 0.0


class Direction(Enum):
    """A direction the player can steer in."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class Asteroids:
    """Asteroids that appear at the top of the screen and fall down."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.spawn_timer = 0
        self.rocks: list[Body] = []

    def spawn(self) -> Body | None:
        """Advance the spawn timer; add and return an asteroid when it runs out."""
        if self.spawn_timer < ASTEROID_SPAWN_DELAY:
            self.spawn_timer += 1
            return None
        self.spawn_timer = 0
        if len(self.rocks) >= ASTEROID_LIMIT:
            return None
        rock = Body(float(self.rng.randrange(WINDOW_WIDTH)), 0.0, *ASTEROID_SIZE)
        self.rocks.append(rock)
        return rock

    def move(self, window_height: float) -> None:
        """Let every asteroid fall and drop those below the window."""
        for rock in self.rocks:
            rock.shift(0.0, ASTEROID_SPEED)
        self.rocks = [rock for rock in self.rocks if rock.y <= window_height]


class Enemy:
    """The enemy ship that patrols the top of the screen and fires down."""

    def __init__(self) -> None:
        self.body = Body(*ENEMY_START, *ENEMY_SIZE)
        self.health_bar = Body(
            self.body.x + ENEMY_BAR_OFFSET[0],
            self.body.y + ENEMY_BAR_OFFSET[1],
            *ENEMY_BAR_SIZE,
        )
        self.heading = Direction.LEFT
        self.fire_interval = ENEMY_FIRE_INTERVAL
        self.since_last_fire = 0.0
        self.shots: list[Projectile] = []

    def move(self, window_width: float) -> None:
        """Sweep one step sideways, turning at the window edges."""
        self.health_bar.x = self.body.x + ENEMY_BAR_OFFSET[0]
        self.health_bar.y = self.body.y + ENEMY_BAR_OFFSET[1]
        if self.body.x <= 0:
            self.heading = Direction.RIGHT
        elif self.body.x + ENEMY_SIZE[0] >= window_width:
            self.heading = Direction.LEFT
        step = -ENEMY_STEP if self.heading is Direction.LEFT else ENEMY_STEP
        self.body.shift(step, 0.0)

    def fire(self, elapsed: float) -> Projectile | None:
        """Let time pass; fire and return a shot once the interval is reached."""
        self.since_last_fire += elapsed
        if self.since_last_fire < self.fire_interval:
            return None
        self.since_last_fire = ENEMY_FIRE_RESTART
        shot = Projectile(
            0.0, 0.0, *ENEMY_BULLET_SIZE, origin_x=self.body.x, origin_y=self.body.y
        )
        self.shots.append(shot)
        return shot

    def status_lines(self, state: GameState) -> list[str]:
        """The labels shown in the enemy's status box."""
        return ["ENEMY", f"Health - {state.enemy_health}"]


class Player:
    """The player's ship at the bottom of the screen."""

    def __init__(self) -> None:
        self.body = Body(*PLAYER_START, *PLAYER_SIZE)
        self.health_bar = Body(
            self.body.x + PLAYER_BAR_OFFSET[0],
            self.body.y + PLAYER_BAR_OFFSET[1],
            *PLAYER_BAR_SIZE,
        )
        self.shots: list[Projectile] = []
        self.rockets: list[Projectile] = []

    def move(self, direction: Direction | None) -> None:
        """Take one step in a direction, staying inside the play area."""
        dx = dy = 0.0
        if direction is Direction.LEFT and self.body.x >= PLAYER_LEFT_LIMIT:
            dx = -PLAYER_STEP
        elif direction is Direction.RIGHT and self.body.x <= PLAYER_RIGHT_LIMIT:
            dx = PLAYER_STEP
        elif direction is Direction.UP and self.body.y >= PLAYER_TOP_LIMIT:
            dy = -PLAYER_STEP
        elif direction is Direction.DOWN and self.body.y <= PLAYER_BOTTOM_LIMIT:
            dy = PLAYER_STEP
        self.body.shift(dx, dy)
        self.health_bar.x = self.body.x + PLAYER_BAR_OFFSET[0]
        self.health_bar.y = self.body.y + PLAYER_BAR_OFFSET[1]

    def _launch(self, size: tuple[float, float]) -> Projectile:
        return Projectile(0.0, 0.0, *size, origin_x=self.body.x, origin_y=self.body.y)

    def fire(self) -> Projectile:
        """Fire a normal shot from the ship's position and return it."""
        shot = self._launch(BULLET_SIZE)
        self.shots.append(shot)
        return shot

    def special_fire(self) -> Projectile:
        """Launch a power-up rocket from the ship's position and return it."""
        rocket = self._launch(ROCKET_SIZE)
        self.rockets.append(rocket)
        return rocket

    def status_lines(self, state: GameState) -> list[str]:
        """The labels shown in the player's status box."""
        return [
            "PLAYER",
            f"Health - {state.player_health}",
            f"Points - {state.points}",
            f"Ammo - {state.ammo}",
            f"Power - {state.power}",
            f"Level - {state.level}",
        ]