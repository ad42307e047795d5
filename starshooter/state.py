"""Shared game state: the current screen, resources, health and score."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Screen(IntEnum):
    """Every screen the game can show."""

    MENU = 0
    BATTLE_ONE = 1
    HIGH_SCORES = 2
    INSTRUCTIONS = 3
    CREDITS = 4
    EXIT = 5
    BATTLE_TWO = 6
    WINNER = 7
    GAME_OVER = 8
    INTRO = 9
    TITLE = 10
    NAME_ENTRY = 11


@dataclass
class GameState:
    """Mutable state shared by the menu, the battle and the score board."""

    screen: Screen = Screen.INTRO
    enemy_shot_timer: float = 0.0
    enemy_shot_delay: float = 2.0
    max_ammo: int = 10
    ammo: int = 10
    power: int = 5
    player_health: int = 10
    enemy_health: int = 15
    enemy_spawn_timer: int = 0
    max_char_health: int = 200
    enemy_health_full: int = 30
    enemy_main_health_full: int = 500
    points: int = 0
    needs_score_update: bool = True
    score_show: int = 0
    reset: bool = False
    level: int = 1
    new_game_start: bool = True
    player_name: str = " "
    player_name_file: str = " "

    def reload(self) -> None:
        """Refill the ammunition to its maximum."""
        self.ammo = self.max_ammo

    def reset_game(self) -> None:
        """Restore the values a fresh game starts with.

        The screen, the displayed score, the maximum ammunition and the
        name used for the score file are left as they are.
        """
        self.enemy_shot_timer = 0.0
        self.enemy_shot_delay = 2.0
        self.ammo = 10
        self.player_health = 10
        self.enemy_health = 15
        self.power = 5
        self.enemy_spawn_timer = 0
        self.max_char_health = 200
        self.enemy_health_full = 30
        self.enemy_main_health_full = 500
        self.reset = True
        self.points = 0
        self.level = 1
        self.player_name = " "

    def add_points(self, amount: int) -> int:
        """Add to the points and return the new total."""
        self.points += amount
        return self.points

    def in_battle(self) -> bool:
        """Whether one of the two battle screens is showing."""
        return self.screen in (Screen.BATTLE_ONE, Screen.BATTLE_TWO)