import random

import pytest

from flapbird.scene import (
    BoundingBox,
    GameObject,
    GameState,
    PIPE_COLUMNS,
    PIPE_SPACING,
    Transform,
    load_highscore,
    new_game_state,
    save_highscore,
    setup_scene,
    spawn_pipes,
)


def _state_with_scene(seed=1):
    state = new_game_state(0)
    setup_scene(state, random.Random(seed))
    return state


def test_boxes_overlap():
    a = BoundingBox((0.0, 0.0, 0.0), (2.0, 2.0, 2.0))
    b = BoundingBox((1.0, 1.0, 1.0), (3.0, 3.0, 3.0))
    assert a.intersects(b)
    assert b.intersects(a)


def test_boxes_apart_on_one_axis():
    a = BoundingBox((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
    b = BoundingBox((0.0, 5.0, 0.0), (1.0, 6.0, 1.0))
    assert not a.intersects(b)


def test_translate_and_rotate_accumulate():
    t = Transform()
    t.translate((1.0, 2.0, 3.0))
    t.translate((1.0, -2.0, 0.0))
    t.rotate((0.0, 0.0, 35.0))
    t.rotate((0.0, 0.0, -5.0))
    assert t.position == (2.0, 0.0, 3.0)
    assert t.rotation == (0.0, 0.0, 30.0)


def test_bounding_box_follows_position_and_scale():
    obj = GameObject("X", (1.0, 1.0, 1.0))
    obj.transform.position = (10.0, 0.0, 0.0)
    obj.transform.scale = (2.0, 1.0, 1.0)
    box = obj.bounding_box()
    assert box.minimum == (8.0, -1.0, -1.0)
    assert box.maximum == (12.0, 1.0, 1.0)


def test_zero_scale_box_is_a_point():
    obj = GameObject("X", (1.0, 1.0, 1.0))
    obj.transform.position = (3.0, 4.0, 5.0)
    obj.transform.scale = (0.0, 0.0, 0.0)
    box = obj.bounding_box()
    assert box.minimum == box.maximum == (3.0, 4.0, 5.0)


def test_copy_is_independent():
    obj = GameObject("PIPE1", (1.0, 1.0, 1.0))
    other = obj.copy("PIPE2")
    other.transform.translate((1.0, 0.0, 0.0))
    assert other.name == "PIPE2"
    assert obj.transform.position == (0.0, 0.0, 0.0)


def test_new_game_state_defaults():
    state = new_game_state(17)
    assert state.highscore == 17
    assert state.score == 0
    assert state.lives == 3
    assert (state.well_done_timer, state.try_again_timer, state.safe_timer) == (0, 0, 0)
    assert state.paused is False


def test_get_object_missing_is_none():
    state = GameState()
    state.add_object(GameObject("PLAYER", (1.0, 1.0, 1.0)))
    assert state.get_object("PLAYER").name == "PLAYER"
    assert state.get_object("NOPE") is None


def test_audio_once_and_unknown_clip():
    state = new_game_state()
    state.play_audio_once("wush")
    state.play_audio_once("hit")
    assert state.played == ["wush", "hit"]
    with pytest.raises(KeyError):
        state.play_audio_once("not-a-clip")


def test_audio_loop_and_toggle_pause():
    state = new_game_state()
    state.play_audio_loop("music")
    assert "music" in state.looping
    state.toggle_pause_audio("music")
    assert "music" in state.paused_audio
    state.toggle_pause_audio("music")
    assert "music" not in state.paused_audio


def test_setup_scene_object_counts():
    state = _state_with_scene()
    names = [obj.name for obj in state.objects]
    assert names.count("PLAYER") == 1
    assert names.count("BACKGROUND") == 1
    assert names.count("COIN") == len(PIPE_COLUMNS)
    assert names.count("PIPE1") == len(PIPE_COLUMNS)
    assert names.count("PIPE2") == len(PIPE_COLUMNS)


def test_setup_scene_player_and_background():
    state = _state_with_scene()
    player = state.get_object("PLAYER")
    assert player.transform.position == (0.0, 0.0, 0.0)
    assert player.transform.scale == (2.0, 2.0, 2.0)
    assert state.get_object("BACKGROUND").transform.position == (0.0, 0.0, -8.0)


def test_spawn_pipes_column_layout():
    state = GameState()
    spawn_pipes(state, 10.0, random.Random(5))
    coin, pipe1, pipe2 = state.objects
    assert [o.name for o in state.objects] == ["COIN", "PIPE1", "PIPE2"]
    y = coin.transform.position[1]
    assert -2.0 <= y <= 2.0
    assert pipe1.transform.position == (15.0, PIPE_SPACING + y, 0.0)
    assert pipe2.transform.position == (15.0, -PIPE_SPACING + y, 0.0)
    assert coin.transform.scale == (0.5, 0.5, 0.5)
    assert pipe1.transform.scale == (1.0, 1.0, 0.5)


def test_columns_are_spread_along_x():
    state = _state_with_scene(3)
    xs = sorted(o.transform.position[0] for o in state.objects_named("COIN"))
    assert xs == [5.0 + offset for offset in PIPE_COLUMNS]


def test_player_does_not_start_inside_a_coin_gap_pipe():
    state = _state_with_scene(7)
    player_box = state.get_object("PLAYER").bounding_box()
    assert not any(
        player_box.intersects(o.bounding_box()) for o in state.objects_named("PIPE")
    )


def test_highscore_round_trip(tmp_path):
    path = tmp_path / "hs.txt"
    save_highscore(42, path)
    assert load_highscore(path) == 42


def test_highscore_missing_file(tmp_path):
    assert load_highscore(tmp_path / "absent.txt") == 0


@pytest.mark.parametrize("content", ["abc", "", "1.5", "1_000", "99999999999"])
def test_highscore_bad_content(tmp_path, content):
    path = tmp_path / "hs.txt"
    path.write_text(content)
    assert load_highscore(path) == 0


def test_highscore_trims_whitespace(tmp_path):
    path = tmp_path / "hs.txt"
    path.write_text("  12\n")
    assert load_highscore(path) == 12


def test_save_highscore_into_missing_directory_is_silent(tmp_path):
    path = tmp_path / "nope" / "hs.txt"
    save_highscore(5, path)
    assert not path.exists()