import pytest

from starshooter.state import GameState, Screen


def test_defaults_match_the_opening_values():
    state = GameState()
    assert state.screen is Screen.INTRO
    assert state.ammo == 10
    assert state.max_ammo == 10
    assert state.power == 5
    assert state.player_health == 10
    assert state.enemy_health == 15
    assert state.enemy_health_full == 30
    assert state.level == 1
    assert state.points == 0
    assert state.new_game_start is True


def test_screen_numbers_follow_the_trigger_values():
    assert Screen(0) is Screen.MENU
    assert Screen(6) is Screen.BATTLE_TWO
    assert Screen(11) is Screen.NAME_ENTRY


def test_reload_refills_to_maximum():
    state = GameState(ammo=0, max_ammo=12)
    state.reload()
    assert state.ammo == state.max_ammo


def test_add_points_returns_running_total():
    state = GameState()
    first = state.add_points(1)
    second = state.add_points(3)
    assert first == 1
    assert second == first + 3
    assert state.points == second


def test_reset_game_restores_values_and_marks_reset():
    state = GameState(
        ammo=2,
        power=0,
        player_health=1,
        enemy_health=4,
        points=40,
        level=2,
        player_name=" pilot",
        enemy_shot_timer=7.5,
    )
    state.reset_game()
    fresh = GameState()
    assert state.ammo == fresh.ammo
    assert state.power == fresh.power
    assert state.player_health == fresh.player_health
    assert state.enemy_health == fresh.enemy_health
    assert state.points == 0
    assert state.level == 1
    assert state.player_name == " "
    assert state.enemy_shot_timer == 0.0
    assert state.reset is True


def test_reset_game_keeps_screen_score_and_file_name():
    state = GameState(
        screen=Screen.WINNER,
        score_show=25,
        player_name_file=" pilot",
        max_ammo=20,
        new_game_start=False,
    )
    state.reset_game()
    assert state.screen is Screen.WINNER
    assert state.score_show == 25
    assert state.player_name_file == " pilot"
    assert state.max_ammo == 20
    assert state.new_game_start is False


@pytest.mark.parametrize(
    ("screen", "expected"),
    [
        (Screen.BATTLE_ONE, True),
        (Screen.BATTLE_TWO, True),
        (Screen.MENU, False),
        (Screen.NAME_ENTRY, False),
        (Screen.GAME_OVER, False),
    ],
)
def test_in_battle(screen, expected):
    assert GameState(screen=screen).in_battle() is expected