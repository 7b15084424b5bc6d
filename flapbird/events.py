"""Handlers for the player's key presses."""

from __future__ import annotations

from flapbird.scene import GameState

JUMP = (0.0, 1.0, 0.0)
JUMP_TILT = (0.0, 0.0, 35.0)
CEILING_Y = 5.0


def player_jump(state: GameState) -> None:
    """Flap: play the sound and lift the player unless it is at the top."""
    if state.paused:
        return
    state.play_audio_once("wush")
    player = state.get_object("PLAYER")
    if player is not None and player.transform.position[1] < CEILING_Y:
        player.transform.translate(JUMP)
        player.transform.rotation = JUMP_TILT


def toggle_pause(state: GameState) -> None:
    """Pause or resume the game and its music."""
    state.paused = not state.paused
    state.toggle_pause_audio("music")