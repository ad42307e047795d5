"""The battle rules and the window that runs the game."""

from __future__ import annotations

import argparse
import os
import random
import sys
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from .background import Backdrops, intro_frame_paths
from .entities import Asteroids, Body, Direction, Enemy, Player, Projectile
from .menu import Menu
from .scores import HighScoreFile, erase_character, submit_name, type_character
from .state import GameState, Screen

WINDOW_WIDTH = 1140
WINDOW_HEIGHT = 670

SHOT_SPEED = 0.6
SHOT_TOP_LIMIT = -60.0
PLAYER_SHOT_OFFSET = (30.0, 5.0)
ENEMY_SHOT_OFFSET = (30.0, 15.0)
PLAYER_SHOT_NUDGE = -2.0
ENEMY_SHOT_NUDGE = 2.0
SHOT_DAMAGE = 1
ROCKET_DAMAGE = 3
AMMO_RELOAD_COST = 5
POWER_RELOAD_COST = 10
POWER_REFILL = 5

FIRE_SOUND = "Audio/fire1.wav"
ROCKET_SOUND = "Audio/fire3.wav"
RELOAD_SOUND = "Audio/reload_main.wav"
MOUSE_SOUND = "Audio/mouse.wav"
HOVER_SOUND = "Audio/pos1.wav"
FONT_FILE = "Fonts/batmfa__.ttf"

_MENU_MUSIC_SCREENS = (Screen.INTRO, Screen.MENU, Screen.WINNER, Screen.GAME_OVER)


class Battle:
    """The player, the enemy and the asteroids, and the rules between them."""

    def __init__(
        self,
        state: GameState,
        scores: HighScoreFile,
        rng: random.Random | None = None,
    ) -> None:
        self.state = state
        self.scores = scores
        self.player = Player()
        self.enemy = Enemy()
        self.asteroids = Asteroids(rng)

    def press_fire(self) -> Projectile | None:
        """Fire a shot if there is ammunition left."""
        if self.state.ammo <= 0:
            return None
        self.state.ammo -= 1
        self.state.reset = False
        return self.player.fire()

    def press_power(self) -> Projectile | None:
        """Launch a rocket if there is power left."""
        if self.state.power <= 0:
            return None
        self.state.power -= 1
        self.state.reset = False
        return self.player.special_fire()

    def reload_ammo(self) -> bool:
        """Buy a full magazine for points once the ammunition is spent."""
        state = self.state
        if state.ammo != 0 or state.points < AMMO_RELOAD_COST:
            return False
        state.reload()
        state.points -= AMMO_RELOAD_COST
        state.score_show -= AMMO_RELOAD_COST
        return True

    def reload_power(self) -> bool:
        """Buy new rockets for points once the power is spent."""
        state = self.state
        if state.power != 0 or state.points < POWER_RELOAD_COST:
            return False
        state.power = POWER_REFILL
        state.points -= POWER_RELOAD_COST
        state.score_show -= POWER_RELOAD_COST
        return True

    def step(
        self,
        window_width: float,
        window_height: float,
        elapsed: float,
        direction: Direction | None = None,
    ) -> None:
        """Advance one frame of the battle; nothing happens off the battle screens."""
        if not self.state.in_battle():
            return
        self.player.move(direction)
        self.enemy.move(window_width)
        self.enemy.fire(elapsed)
        self.asteroids.spawn()
        self.asteroids.move(window_height)
        self.player.shots = self._advance_volley(self.player.shots, SHOT_DAMAGE)
        self._advance_enemy_shots(window_height)
        self.player.rockets = self._advance_volley(self.player.rockets, ROCKET_DAMAGE)
        self._check_asteroids()

    def check_exhausted(self) -> bool:
        """End the game when ammunition, power and points for reloading are gone."""
        state = self.state
        if state.ammo == 0 and state.power == 0 and state.points < AMMO_RELOAD_COST:
            state.reset_game()
            state.screen = Screen.GAME_OVER
            state.new_game_start = True
            return True
        return False

    def _advance_volley(self, volley: list[Projectile], damage: int) -> list[Projectile]:
        state = self.state
        remaining: list[Projectile] = []
        for index, shot in enumerate(volley):
            shot.origin_y -= SHOT_SPEED
            if shot.origin_y <= SHOT_TOP_LIMIT:
                continue
            shot.x = shot.origin_x + PLAYER_SHOT_OFFSET[0]
            shot.y = shot.origin_y + PLAYER_SHOT_OFFSET[1] + PLAYER_SHOT_NUDGE
            if not shot.intersects(self.enemy.body):
                remaining.append(shot)
                continue
            if not state.reset:
                state.enemy_health -= damage
                state.add_points(damage)
                state.score_show += damage
            if state.enemy_health <= 0:
                if state.screen is Screen.BATTLE_ONE:
                    state.enemy_health = state.enemy_health_full
                    state.screen = Screen.BATTLE_TWO
                    state.level = 2
                else:
                    self._win()
                remaining.append(shot)
                remaining.extend(volley[index + 1:])
                return remaining
        return remaining

    def _advance_enemy_shots(self, window_height: float) -> None:
        state = self.state
        shots = self.enemy.shots
        remaining: list[Projectile] = []
        for index, shot in enumerate(shots):
            shot.origin_y += SHOT_SPEED
            shot.x = shot.origin_x + ENEMY_SHOT_OFFSET[0]
            shot.y = shot.origin_y + ENEMY_SHOT_OFFSET[1] + ENEMY_SHOT_NUDGE
            if shot.intersects(self.player.body):
                state.player_health -= 1
                if state.player_health <= 0:
                    self._lose()
                    remaining.extend(shots[index + 1:])
                    break
                continue
            if shot.y <= window_height:
                remaining.append(shot)
        self.enemy.shots = remaining

    def _check_asteroids(self) -> None:
        state = self.state
        rocks = self.asteroids.rocks
        survivors: list[Body] = []
        for index, rock in enumerate(rocks):
            if rock.intersects(self.player.body):
                state.player_health -= 1
                if state.player_health <= 0:
                    self._lose()
                    survivors.extend(rocks[index + 1:])
                    break
                continue
            survivors.append(rock)
        self.asteroids.rocks = survivors

    def _record_score(self) -> None:
        try:
            self.scores.update(self.state.player_name_file, self.state.score_show)
        except OSError:
            print("Error opening highscore file.", file=sys.stderr)
            return
        self.state.needs_score_update = False

    def _win(self) -> None:
        state = self.state
        state.screen = Screen.WINNER
        state.score_show += state.player_health
        self._record_score()
        state.reset_game()
        state.new_game_start = True

    def _lose(self) -> None:
        state = self.state
        self._record_score()
        state.reset_game()
        state.screen = Screen.GAME_OVER
        state.new_game_start = True


class _Renderer:
    """Draws the game state into the window."""

    CYAN = (0, 255, 255)
    YELLOW = (255, 255, 0)
    GREEN = (0, 255, 0)
    RED = (255, 0, 0)

    def __init__(self, window: pygame.Surface, backdrops: Backdrops) -> None:
        self.window = window
        self.backdrops = backdrops
        font_path = backdrops.root / FONT_FILE
        self._font_file = str(font_path) if font_path.is_file() else None
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(self._font_file, size)
        return self._fonts[size]

    def text(self, message, size, color, x, y, centred=False) -> None:
        font = self._font(size)
        for line in message.split("\n"):
            rendered = font.render(line, True, color)
            left = x - rendered.get_width() / 2 if centred else x
            self.window.blit(rendered, (left, y))
            y += font.get_linesize()

    def sprite(self, body: Body, relative: str, color) -> None:
        image = self.backdrops.load_image(relative)
        if image is not None:
            self.window.blit(image, (body.x, body.y))
        else:
            pygame.draw.rect(self.window, color, pygame.Rect(*body.bounds()))

    def backdrop(self, screen: Screen) -> None:
        image = self.backdrops.image_for(screen)
        if image is not None:
            self.window.blit(image, (0, 0))

    def score_screens(self, state: GameState, scores: HighScoreFile) -> None:
        centre = WINDOW_WIDTH / 2
        if state.screen is Screen.NAME_ENTRY:
            self.text("Write your name- ", 35, self.CYAN, centre, 150, centred=True)
            self.text(state.player_name, 35, self.CYAN, centre - 90, 250)
        if state.screen is Screen.HIGH_SCORES:
            self.text("HIGH SCORES", 50, self.CYAN, centre - 200, 100)
            try:
                listing = scores.listing()
            except OSError:
                print("Error opening highscore file.", file=sys.stderr)
            else:
                self.text(listing, 35, self.CYAN, centre, 200, centred=True)

    def menu(self, menu: Menu, state: GameState) -> None:
        centre = WINDOW_WIDTH / 2
        screen = state.screen
        if screen not in (Screen.MENU, Screen.TITLE):
            back = pygame.Rect(*menu.back.box.bounds())
            pygame.draw.rect(self.window, self.CYAN, back)
            pygame.draw.rect(self.window, self.RED, back, 4)
        texts = menu.overlay_texts(state)
        if screen is Screen.MENU:
            self.text(texts[0], 54, self.YELLOW, centre, 50, centred=True)
            for item in menu.items:
                box = item.box
                self.text(item.label, 40, item.text_color, box.x + box.width / 2, box.y + 4,
                          centred=True)
            return
        if screen in (Screen.BATTLE_ONE, Screen.BATTLE_TWO):
            for left in (35, 940):
                pygame.draw.rect(self.window, self.CYAN, pygame.Rect(left, 10, 165, 165), 4)
            return
        tops = {
            Screen.INSTRUCTIONS: 100,
            Screen.CREDITS: 150,
            Screen.WINNER: 200,
            Screen.GAME_OVER: 200,
            Screen.TITLE: 550,
            Screen.HIGH_SCORES: 600,
        }
        for message in texts:
            self.text(message, 35, self.CYAN, centre, tops.get(screen, 100), centred=True)

    def battle(self, battle: Battle, state: GameState) -> None:
        second = state.screen is Screen.BATTLE_TWO
        self.sprite(battle.player.body, "Image/plane4.png" if second else "Image/plane3.png",
                    self.GREEN)
        self.sprite(battle.enemy.body, "Image/enemy4.png" if second else "Image/enemy2.png",
                    self.RED)
        for rock in battle.asteroids.rocks:
            self.sprite(rock, "Image/meteor.png", (120, 100, 80))
        for shot in battle.player.shots:
            self.sprite(shot, "Image/fire1.png", self.YELLOW)
        for shot in battle.enemy.shots:
            self.sprite(shot, "Image/bullet2.png", self.RED)
        for rocket in battle.player.rockets:
            self.sprite(rocket, "Image/rocket.png", self.CYAN)
        name, *stats, level = battle.player.status_lines(state)
        self.text(name, 20, self.YELLOW, 60, 20)
        for row, line in enumerate(stats):
            self.text(line, 20, self.GREEN, 40, 50 + 30 * row)
        self.text(level, 30, self.CYAN, WINDOW_WIDTH / 2 - 70, 20)
        enemy_name, enemy_health = battle.enemy.status_lines(state)
        self.text(enemy_name, 20, self.YELLOW, 970, 20)
        self.text(enemy_health, 20, self.GREEN, 945, 50)


def _play_intro(window: pygame.Surface, root: Path) -> None:
    for relative in intro_frame_paths():
        pygame.event.pump()
        try:
            frame = pygame.image.load(str(root / relative))
        except (pygame.error, OSError):
            print(f"Error loading image {relative}", file=sys.stderr)
        else:
            window.blit(frame, (0, 0))
        pygame.display.flip()
        pygame.time.wait(8)
        window.fill((0, 0, 0))


def _held_direction() -> Direction | None:
    keys = pygame.key.get_pressed()
    for key, direction in (
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_UP, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
    ):
        if keys[key]:
            return direction
    return None


def _run(asset_root: Path, scores_path: Path) -> None:
    window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("Space Shooter")
    state = GameState()
    scores = HighScoreFile(scores_path)
    backdrops = Backdrops(asset_root)
    menu = Menu(WINDOW_WIDTH)
    battle = Battle(state, scores)
    renderer = _Renderer(window, backdrops)
    clock = pygame.time.Clock()
    music_playing = False
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if not state.in_battle():
                    backdrops.play_effect(MOUSE_SOUND)
                if menu.click(state, *event.pos) == "exit":
                    running = False
            elif event.type == pygame.MOUSEMOTION:
                if menu.hover(state, *event.pos):
                    backdrops.play_effect(HOVER_SOUND)

            if state.screen is Screen.NAME_ENTRY:
                if event.type == pygame.TEXTINPUT:
                    for char in event.text:
                        type_character(state, char)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_BACKSPACE:
                        erase_character(state)
                    elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        submit_name(state)

            if event.type != pygame.KEYDOWN:
                continue
            if state.screen is Screen.TITLE and event.key == pygame.K_SPACE:
                state.screen = Screen.MENU
            if state.in_battle():
                if event.key == pygame.K_SPACE and battle.press_fire() is not None:
                    backdrops.play_effect(FIRE_SOUND)
                if event.key == pygame.K_p and battle.press_power() is not None:
                    backdrops.play_effect(ROCKET_SOUND)
            if event.key == pygame.K_r and battle.reload_ammo():
                backdrops.play_effect(RELOAD_SOUND)
            if event.key == pygame.K_b and battle.reload_power():
                backdrops.play_effect(RELOAD_SOUND)

        if not running:
            break
        elapsed = clock.tick(1000) / 1000.0
        window.fill((0, 0, 0))

        if state.screen is Screen.INTRO:
            backdrops.start_intro_sound()
            _play_intro(window, asset_root)
            state.screen = Screen.TITLE
        if state.screen not in (Screen.INTRO, Screen.TITLE):
            backdrops.stop_intro_sound()

        renderer.backdrop(state.screen)
        renderer.score_screens(state, scores)
        renderer.menu(menu, state)

        if state.in_battle() and music_playing:
            backdrops.play_game_music()
            music_playing = False
        elif state.screen in _MENU_MUSIC_SCREENS and not music_playing:
            backdrops.play_menu_music()
            music_playing = True

        if state.in_battle():
            battle.step(WINDOW_WIDTH, WINDOW_HEIGHT, elapsed, _held_direction())
            if state.in_battle():
                renderer.battle(battle, state)

        battle.check_exhausted()
        pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="starshooter", description="A space shooter game.")
    parser.add_argument("--assets", default=".", help="directory holding Image/, Audio/, Fonts/")
    parser.add_argument("--scores", default="highscores.txt", help="high-score file")
    args = parser.parse_args(argv)
    pygame.init()
    try:
        _run(Path(args.assets), Path(args.scores))
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())