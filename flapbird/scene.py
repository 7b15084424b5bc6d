"""Scene objects, game state, level setup and highscore persistence."""

from __future__ import annotations

import dataclasses
import enum
import random
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

Vec3 = tuple[float, float, float]

HIGHSCORE_FILE = "enigma-3d_flappy_bird_highscore.txt"

AUDIO_CLIPS = frozenset({"music", "hit", "collect", "collect-ten", "wush", "game-over"})

# Half extents of each model at scale 1.
MODEL_EXTENTS: dict[str, Vec3] = {
    "bird": (0.25, 0.25, 0.25),
    "pipe": (0.5, 5.0, 1.0),
    "coin": (0.5, 0.5, 0.1),
    "background": (20.0, 12.0, 0.1),
}

PIPE_SPACING = 7.0
PIPE_COLUMNS = (0.0, 5.0, 10.0, 15.0, 20.0, 25.0, 30.0, 35.0)
DEFAULT_LIVES = 3

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class CollisionState(enum.Enum):
    """What the player hit during one frame."""

    COIN = "coin"
    PIPE = "pipe"
    NONE = "none"


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box given by its minimum and maximum corners."""

    minimum: Vec3
    maximum: Vec3

    def intersects(self, other: BoundingBox) -> bool:
        """Return True if the two boxes overlap on every axis."""
        return all(
            lo_a <= hi_b and lo_b <= hi_a
            for lo_a, hi_a, lo_b, hi_b in zip(
                self.minimum, self.maximum, other.minimum, other.maximum
            )
        )


@dataclass
class Transform:
    """Position, rotation in degrees and scale of an object."""

    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)

    def translate(self, delta: Vec3) -> None:
        """Move the object by ``delta``."""
        self.position = _add(self.position, delta)

    def rotate(self, delta: Vec3) -> None:
        """Add ``delta`` degrees to the rotation."""
        self.rotation = _add(self.rotation, delta)


def _add(a: Vec3, b: Vec3) -> Vec3:
    x, y, z = (p + d for p, d in zip(a, b))
    return (x, y, z)


@dataclass
class GameObject:
    """A named object in the scene."""

    name: str
    half_extents: Vec3
    transform: Transform = field(default_factory=Transform)
    color: Vec3 | None = None

    def bounding_box(self) -> BoundingBox:
        """World-space box of the object, following position and scale."""
        half = [e * abs(s) for e, s in zip(self.half_extents, self.transform.scale)]
        lo = tuple(p - h for p, h in zip(self.transform.position, half))
        hi = tuple(p + h for p, h in zip(self.transform.position, half))
        return BoundingBox(lo, hi)  # type: ignore[arg-type]

    def copy(self, name: str | None = None) -> GameObject:
        """Return an independent copy, optionally renamed."""
        return dataclasses.replace(
            self,
            name=self.name if name is None else name,
            transform=dataclasses.replace(self.transform),
        )


@dataclass
class GameState:
    """Everything a running game keeps between frames."""

    score: int = 0
    highscore: int = 0
    lives: int = DEFAULT_LIVES
    well_done_timer: int = 0
    try_again_timer: int = 0
    safe_timer: int = 0
    paused: bool = False
    objects: list[GameObject] = field(default_factory=list)
    audio_clips: frozenset[str] = AUDIO_CLIPS
    looping: set[str] = field(default_factory=set)
    paused_audio: set[str] = field(default_factory=set)
    played: list[str] = field(default_factory=list)

    def add_object(self, obj: GameObject) -> None:
        """Add an object to the scene."""
        self.objects.append(obj)

    def get_object(self, name: str) -> GameObject | None:
        """Return the first object with exactly this name, or None."""
        return next((obj for obj in self.objects if obj.name == name), None)

    def objects_named(self, fragment: str) -> Iterator[GameObject]:
        """Yield objects whose name contains ``fragment``."""
        return (obj for obj in self.objects if fragment in obj.name)

    def _require_clip(self, name: str) -> None:
        if name not in self.audio_clips:
            raise KeyError(f"unknown audio clip: {name!r}")

    def play_audio_once(self, name: str) -> None:
        """Play a clip one time."""
        self._require_clip(name)
        self.played.append(name)

    def play_audio_loop(self, name: str) -> None:
        """Start a clip playing in a loop."""
        self._require_clip(name)
        self.looping.add(name)
        self.paused_audio.discard(name)

    def toggle_pause_audio(self, name: str) -> None:
        """Pause a clip if it is playing, resume it if it is paused."""
        self._require_clip(name)
        if name in self.paused_audio:
            self.paused_audio.remove(name)
        else:
            self.paused_audio.add(name)


def new_game_state(highscore: int = 0) -> GameState:
    """Fresh state: no score, full lives, timers at zero, not paused."""
    return GameState(highscore=highscore)


def setup_scene(state: GameState, rng: random.Random | None = None) -> None:
    """Place the background, the player and the pipe columns."""
    rng = rng or random.Random()

    background = GameObject("BACKGROUND", MODEL_EXTENTS["background"])
    background.transform.position = (0.0, 0.0, -8.0)
    state.add_object(background)

    player = GameObject("PLAYER", MODEL_EXTENTS["bird"])
    player.transform = Transform(
        position=(0.0, 0.0, 0.0), rotation=(0.0, 0.0, 0.0), scale=(2.0, 2.0, 2.0)
    )
    state.add_object(player)

    for x_offset in PIPE_COLUMNS:
        spawn_pipes(state, x_offset, rng)


def spawn_pipes(
    state: GameState, x_offset: float, rng: random.Random | None = None
) -> None:
    """Add one column: a coin between an upper and a lower pipe."""
    rng = rng or random.Random()
    y_offset = rng.uniform(-2.0, 2.0)
    x = 5.0 + x_offset

    pipe1 = GameObject("PIPE1", MODEL_EXTENTS["pipe"], color=(0.0, 1.0, 0.0))
    pipe1.transform.position = (x, PIPE_SPACING + y_offset, 0.0)
    pipe1.transform.scale = (1.0, 1.0, 0.5)

    pipe2 = pipe1.copy("PIPE2")
    pipe2.transform.position = (x, -PIPE_SPACING + y_offset, 0.0)
    pipe2.transform.scale = (1.0, 1.0, 0.5)

    coin = GameObject("COIN", MODEL_EXTENTS["coin"], color=(1.0, 0.8, 0.0))
    coin.transform.scale = (0.5, 0.5, 0.5)
    coin.transform.position = (x, y_offset, 0.0)

    state.add_object(coin)
    state.add_object(pipe1)
    state.add_object(pipe2)


def load_highscore(path: str | Path = HIGHSCORE_FILE) -> int:
    """Read the stored highscore; 0 if missing or unreadable."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return 0
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return 0
    value = int(text)
    return value if _I32_MIN <= value <= _I32_MAX else 0


def save_highscore(score: int, path: str | Path = HIGHSCORE_FILE) -> None:
    """Write the highscore; failures to write are ignored."""
    try:
        Path(path).write_text(str(score), encoding="utf-8")
    except OSError:
        pass