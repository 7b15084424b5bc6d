"""What the heads-up display shows for a given game state."""

from __future__ import annotations

from dataclasses import dataclass

from flapbird.scene import GameState

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
GOLD: Color = (255, 215, 0, 255)
ORANGE: Color = (255, 128, 0, 255)
HEADER_FILL: Color = (0, 0, 0, 45)
HEADER_TEXT_SIZE = 40.0
POPUP_TEXT_SIZE = 50.0
HEART_SIZE = 35.0


@dataclass(frozen=True)
class Label:
    """A piece of text with its colour and size."""

    text: str
    color: Color
    size: float
    strong: bool = False


@dataclass(frozen=True)
class Header:
    """The top bar: score labels on the left, hearts on the right."""

    labels: tuple[Label, ...]
    hearts: int
    fill: Color = HEADER_FILL


def header(state: GameState) -> Header:
    """Build the top bar for the current score, highscore and lives."""
    labels = (
        Label("SCORE", WHITE, HEADER_TEXT_SIZE),
        Label(str(state.score), WHITE, HEADER_TEXT_SIZE, strong=True),
        Label("HIGHSCORE", WHITE, HEADER_TEXT_SIZE),
        Label(str(state.highscore), WHITE, HEADER_TEXT_SIZE, strong=True),
    )
    return Header(labels=labels, hearts=max(state.lives, 0))


def pause_label(state: GameState) -> Label | None:
    """The centred pause text, or None while the game runs."""
    if not state.paused:
        return None
    return Label("Pause", BLACK, POPUP_TEXT_SIZE, strong=True)


def popup_label(state: GameState) -> Label | None:
    """The centred celebration or game-over text, if one is due."""
    if state.well_done_timer > 0 and state.score > 0:
        return Label("Well Done!", GOLD, POPUP_TEXT_SIZE, strong=True)
    if state.try_again_timer > 0 and state.score == 0:
        return Label("Oh no! Try Again!", ORANGE, POPUP_TEXT_SIZE, strong=True)
    return None


def update_ui_timers(state: GameState) -> None:
    """Count the popup and immunity timers down by one frame."""
    if state.paused:
        return
    state.well_done_timer = max(state.well_done_timer - 1, 0) if state.well_done_timer > 0 else state.well_done_timer
    state.try_again_timer = max(state.try_again_timer - 1, 0) if state.try_again_timer > 0 else state.try_again_timer
    state.safe_timer = max(state.safe_timer - 1, 0) if state.safe_timer > 0 else state.safe_timer