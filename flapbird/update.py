"""Per-frame updates: player gravity, scrolling pipes and collisions."""

from __future__ import annotations

from pathlib import Path

from flapbird.scene import (
    DEFAULT_LIVES,
    HIGHSCORE_FILE,
    CollisionState,
    GameState,
    save_highscore,
)

GRAVITY_STEP = (0.0, -0.05, 0.0)
FALL_SPIN = (0.0, 0.0, -0.7)
FLOOR_Y = -5.0
SCROLL_STEP = (-0.05, 0.0, 0.0)
WRAP_X = -20.0
WRAP_SHIFT = (40.0, 0.0, 0.0)
COIN_SPIN = (0.0, 5.0, 0.0)
COIN_SCALE = (0.5, 0.5, 0.5)
COIN_HIDE_LIFT = 10.0
PLAYER_SCALE = (2.0, 2.0, 2.0)
HIDDEN_SCALE = (0.0, 0.0, 0.0)
TIMER_FRAMES = 120


def player_update(state: GameState) -> None:
    """Let the player fall and tilt; blink it while it is immune."""
    if state.paused:
        return
    player = state.get_object("PLAYER")
    if player is None:
        return
    timer = state.safe_timer
    if timer > 0:
        visible = (timer // 5) % 2 == 0
        player.transform.scale = PLAYER_SCALE if visible else HIDDEN_SCALE
    if player.transform.position[1] > FLOOR_Y:
        player.transform.translate(GRAVITY_STEP)
        player.transform.rotate(FALL_SPIN)


def update_pipes(state: GameState) -> None:
    """Scroll pipes and coins left, wrapping them round to the right."""
    if state.paused:
        return
    for obj in state.objects:
        is_coin = "COIN" in obj.name
        if is_coin or "PIPE" in obj.name:
            obj.transform.translate(SCROLL_STEP)
            if obj.transform.position[0] < WRAP_X:
                obj.transform.translate(WRAP_SHIFT)
                if is_coin:
                    obj.transform.scale = COIN_SCALE
                    if obj.transform.position[1] > 5.0:
                        obj.transform.translate((0.0, -COIN_HIDE_LIFT, 0.0))
        if is_coin:
            obj.transform.rotate(COIN_SPIN)


def _detect(state: GameState) -> CollisionState:
    player = state.get_object("PLAYER")
    if player is None:
        return CollisionState.NONE
    is_safe = state.safe_timer > 0
    player_box = player.bounding_box()
    result = CollisionState.NONE
    for obj in state.objects:
        if "COIN" in obj.name and player_box.intersects(obj.bounding_box()):
            obj.transform.scale = HIDDEN_SCALE
            obj.transform.translate((0.0, COIN_HIDE_LIFT, 0.0))
            result = CollisionState.COIN
            continue
        if not is_safe and "PIPE" in obj.name:
            if player_box.intersects(obj.bounding_box()):
                return CollisionState.PIPE
    return result


def check_collision(
    state: GameState, highscore_path: str | Path = HIGHSCORE_FILE
) -> CollisionState:
    """Resolve coin pickups and pipe hits for this frame and return what was hit."""
    if state.paused:
        return CollisionState.NONE
    colliding = _detect(state)

    if colliding is CollisionState.PIPE:
        player = state.get_object("PLAYER")
        if player is not None:
            player.transform.position = (0.0, 0.0, 0.0)
            player.transform.rotation = (0.0, 0.0, 0.0)
        state.lives -= 1
        game_over = state.lives <= 0
        if game_over:
            state.score = 0
            state.lives = DEFAULT_LIVES
            state.play_audio_once("game-over")
            state.try_again_timer = TIMER_FRAMES
        else:
            state.play_audio_once("hit")
            state.safe_timer = TIMER_FRAMES
    elif colliding is CollisionState.COIN:
        state.score += 1
        if state.score > state.highscore:
            state.highscore = state.score
            save_highscore(state.highscore, highscore_path)
        if state.score > 0 and state.score % 10 == 0:
            state.play_audio_once("collect-ten")
            state.well_done_timer = TIMER_FRAMES
        else:
            state.play_audio_once("collect")

    return colliding