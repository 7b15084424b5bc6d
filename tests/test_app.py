import random

import pytest

from flapbird.app import Game
from flapbird.scene import (
    MODEL_EXTENTS,
    PIPE_COLUMNS,
    CollisionState,
    GameObject,
    load_highscore,
)


@pytest.fixture
def game(tmp_path):
    return Game(tmp_path / "highscore.txt", random.Random(0))


def test_highscore_loaded_from_file(tmp_path):
    path = tmp_path / "hs.txt"
    path.write_text("42", encoding="utf-8")
    assert Game(path, random.Random(1)).state.highscore == 42


def test_missing_highscore_file_starts_at_zero(game):
    assert game.state.highscore == 0
    assert game.state.score == 0


def test_scene_is_set_up(game):
    pipes = [o for o in game.state.objects if "PIPE" in o.name]
    coins = [o for o in game.state.objects if "COIN" in o.name]
    assert len(pipes) == 2 * len(PIPE_COLUMNS)
    assert len(coins) == len(PIPE_COLUMNS)
    assert game.state.get_object("PLAYER").transform.position == (0.0, 0.0, 0.0)


def test_music_starts_looping(game):
    assert "music" in game.state.looping


def test_space_jumps(game):
    player = game.state.get_object("PLAYER")
    before = player.transform.position[1]
    assert game.handle_key("space") is True
    assert player.transform.position[1] > before
    assert game.state.played[-1] == "wush"


def test_escape_toggles_pause(game):
    assert game.handle_key("escape") is True
    assert game.state.paused is True
    assert "music" in game.state.paused_audio
    game.handle_key("Escape")
    assert game.state.paused is False
    assert "music" not in game.state.paused_audio


def test_unbound_key_is_ignored(game):
    player = game.state.get_object("PLAYER")
    before = player.transform.position
    assert game.handle_key("a") is False
    assert player.transform.position == before
    assert game.state.played == []


def test_step_makes_player_fall(game):
    player = game.state.get_object("PLAYER")
    before = player.transform.position[1]
    assert game.step() is CollisionState.NONE
    assert player.transform.position[1] < before


def test_step_while_paused_changes_nothing(game):
    game.handle_key("escape")
    player = game.state.get_object("PLAYER")
    before = player.transform.position
    game.state.well_done_timer = 3
    assert game.step() is CollisionState.NONE
    assert player.transform.position == before
    assert game.state.well_done_timer == 3


def test_step_counts_timers_down(game):
    game.state.well_done_timer = 3
    game.step()
    assert game.state.well_done_timer == 2


def test_step_collects_coin_and_saves_highscore(game):
    game.state.add_object(GameObject("COIN", MODEL_EXTENTS["coin"]))
    assert game.step() is CollisionState.COIN
    assert game.state.score == 1
    assert game.state.highscore == 1
    assert load_highscore(game.highscore_path) == 1
    assert game.state.played[-1] == "collect"