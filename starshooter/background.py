"""Backdrop images, the intro animation frames and the background sounds."""

from __future__ import annotations

import logging
import os
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from .state import Screen

log = logging.getLogger(__name__)

MENU_MUSIC = "Audio/back.wav"
GAME_MUSIC = "Audio/space.wav"
INTRO_SOUND = "Audio/new.wav"
ENEMY_ENTRY_SOUND = "Audio/entry_enemy.wav"

INTRO_FRAME_COUNT = 80
_FIRST_INTRO_FRAME = 25

_BACKDROPS = {
    Screen.MENU: "Image/back_menu.jpg",
    Screen.BATTLE_ONE: "Image/game3.jpg",
    Screen.HIGH_SCORES: "Image/game2.jpg",
    Screen.INSTRUCTIONS: "Image/i3.jpg",
    Screen.CREDITS: "Image/credit.jpg",
    Screen.BATTLE_TWO: "Image/5.jpg",
    Screen.WINNER: "Image/11.jpg",
    Screen.GAME_OVER: "Image/gameover.jpg",
    Screen.TITLE: "Image/start.jpg",
    Screen.NAME_ENTRY: "Image/1.jpg",
}


def intro_frame_paths() -> list[str]:
    """Relative paths of the intro animation frames, in playing order."""
    return [
        f"video/1 ({number}).jpg"
        for number in range(_FIRST_INTRO_FRAME, _FIRST_INTRO_FRAME + INTRO_FRAME_COUNT)
    ]


def backdrop_path(screen: Screen | int) -> str | None:
    """Relative path of the backdrop for a screen, or None if it has none.

    Raises ValueError for a number that is not a screen.
    """
    return _BACKDROPS.get(Screen(screen))


def _mixer_ready() -> bool:
    try:
        return bool(pygame.mixer.get_init())
    except (NotImplementedError, pygame.error):
        return False


class Backdrops:
    """Loads images and sounds from an asset directory and plays the music."""

    def __init__(self, asset_root: str | Path) -> None:
        self.root = Path(asset_root)
        self.current_music: Path | None = None
        self._images: dict[str, pygame.Surface | None] = {}
        self._sounds: dict[str, pygame.mixer.Sound | None] = {}

    def load_image(self, relative: str) -> pygame.Surface | None:
        """Load an image below the asset root once; None if it cannot be read."""
        if relative not in self._images:
            path = self.root / relative
            try:
                image = pygame.image.load(str(path))
            except (pygame.error, OSError):
                log.warning("Background error: failed to load %s", path)
                image = None
            else:
                if pygame.display.get_init() and pygame.display.get_surface() is not None:
                    image = image.convert()
            self._images[relative] = image
        return self._images[relative]

    def image_for(self, screen: Screen | int) -> pygame.Surface | None:
        """The backdrop image for a screen, or None if there is none to show."""
        relative = backdrop_path(screen)
        return None if relative is None else self.load_image(relative)

    def _sound(self, relative: str) -> pygame.mixer.Sound | None:
        if not _mixer_ready():
            return None
        if relative not in self._sounds:
            path = self.root / relative
            try:
                self._sounds[relative] = pygame.mixer.Sound(str(path))
            except (pygame.error, OSError):
                log.warning("Background error: failed to load %s", path)
                self._sounds[relative] = None
        return self._sounds[relative]

    def play_effect(self, relative: str) -> None:
        """Play a sound once, if the audio device and the file are available."""
        sound = self._sound(relative)
        if sound is not None:
            sound.play()

    def _switch_music(self, start: str, stop: str) -> Path:
        stopping = self._sound(stop)
        if stopping is not None:
            stopping.stop()
        starting = self._sound(start)
        if starting is not None:
            starting.play(loops=-1)
        self.current_music = self.root / start
        return self.current_music

    def play_menu_music(self) -> Path:
        """Loop the menu music and stop the battle music; return the track."""
        return self._switch_music(MENU_MUSIC, GAME_MUSIC)

    def play_game_music(self) -> Path:
        """Loop the battle music and stop the menu music; return the track."""
        return self._switch_music(GAME_MUSIC, MENU_MUSIC)

    def start_intro_sound(self) -> None:
        """Start the looping intro sound."""
        sound = self._sound(INTRO_SOUND)
        if sound is not None:
            sound.play(loops=-1)

    def stop_intro_sound(self) -> None:
        """Stop the intro sound."""
        sound = self._sound(INTRO_SOUND)
        if sound is not None:
            sound.stop()