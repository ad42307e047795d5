import pygame
import pytest

from starshooter.background import (
    GAME_MUSIC,
    INTRO_FRAME_COUNT,
    MENU_MUSIC,
    Backdrops,
    backdrop_path,
    intro_frame_paths,
)
from starshooter.state import Screen


def test_intro_frames_follow_the_source_sequence():
    frames = intro_frame_paths()
    assert len(frames) == INTRO_FRAME_COUNT
    assert frames[0] == "video/1 (25).jpg"
    assert frames[1] == "video/1 (26).jpg"
    assert len(set(frames)) == len(frames)


def test_backdrop_paths_for_known_screens():
    assert backdrop_path(Screen.MENU) == "Image/back_menu.jpg"
    assert backdrop_path(Screen.GAME_OVER) == "Image/gameover.jpg"
    assert backdrop_path(10) == "Image/start.jpg"


def test_intro_and_exit_have_no_backdrop():
    assert backdrop_path(Screen.INTRO) is None
    assert backdrop_path(Screen.EXIT) is None


def test_other_screens_have_distinct_backdrops():
    paths = [backdrop_path(s) for s in Screen if s not in (Screen.INTRO, Screen.EXIT)]
    assert all(path is not None for path in paths)
    assert len(set(paths)) == len(paths)


def test_backdrop_path_rejects_unknown_screen():
    with pytest.raises(ValueError):
        backdrop_path(42)


def test_missing_image_gives_none(tmp_path):
    backdrops = Backdrops(tmp_path)
    assert backdrops.image_for(Screen.MENU) is None


def test_screen_without_backdrop_gives_none(tmp_path):
    backdrops = Backdrops(tmp_path)
    assert backdrops.image_for(Screen.INTRO) is None


def test_load_image_round_trip_and_cache(tmp_path):
    (tmp_path / "Image").mkdir()
    surface = pygame.Surface((4, 3))
    pygame.image.save(surface, str(tmp_path / "Image" / "pic.bmp"))
    backdrops = Backdrops(tmp_path)
    first = backdrops.load_image("Image/pic.bmp")
    assert first.get_size() == (4, 3)
    assert backdrops.load_image("Image/pic.bmp") is first


def test_music_switches_between_tracks(tmp_path):
    backdrops = Backdrops(tmp_path)
    assert backdrops.current_music is None
    assert backdrops.play_menu_music() == tmp_path / MENU_MUSIC
    assert backdrops.current_music == tmp_path / MENU_MUSIC
    assert backdrops.play_game_music() == tmp_path / GAME_MUSIC
    assert backdrops.current_music == tmp_path / GAME_MUSIC