"""The game loop: wiring state, updates, key handlers and a pygame window."""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Callable

from flapbird.events import player_jump, toggle_pause
from flapbird.hud import (
    HEART_SIZE,
    Label,
    header,
    pause_label,
    popup_label,
    update_ui_timers,
)
from flapbird.scene import (
    HIGHSCORE_FILE,
    CollisionState,
    GameState,
    load_highscore,
    new_game_state,
    setup_scene,
)
from flapbird.update import check_collision, player_update, update_pipes

TITLE = "Flappy Bird"
WINDOW_SIZE = (1080, 720)
FPS = 60
# Visible half height of the play plane, in world units.
VIEW_HALF_HEIGHT = 5.0

KeyHandler = Callable[[GameState], None]

_SKY = (120, 190, 230)
_PLAYER_COLOR = (250, 210, 40)


class Game:
    """A running game: its state and the fixed order of per-frame work."""

    def __init__(
        self,
        highscore_path: str | Path = HIGHSCORE_FILE,
        rng: random.Random | None = None,
    ) -> None:
        self.highscore_path = Path(highscore_path)
        self.state = new_game_state(load_highscore(self.highscore_path))
        setup_scene(self.state, rng or random.Random())
        self.key_bindings: dict[str, KeyHandler] = {
            "space": player_jump,
            "escape": toggle_pause,
        }
        self.state.play_audio_loop("music")

    def step(self) -> CollisionState:
        """Advance one frame and return what the player hit in it."""
        player_update(self.state)
        update_pipes(self.state)
        hit = check_collision(self.state, self.highscore_path)
        update_ui_timers(self.state)
        return hit

    def handle_key(self, key: str) -> bool:
        """Run the handler bound to ``key``; return False if none is bound."""
        handler = self.key_bindings.get(key.lower())
        if handler is None:
            return False
        handler(self.state)
        return True


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flapbird", description="Play Flappy Bird.")
    parser.add_argument(
        "--highscore-file",
        default=HIGHSCORE_FILE,
        help="where the highscore is kept",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe heights")
    return parser.parse_args(argv)


def _run_window(game: Game) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        fonts: dict[int, pygame.font.Font] = {}

        def font(size: float) -> pygame.font.Font:
            px = int(size)
            if px not in fonts:
                fonts[px] = pygame.font.Font(None, px)
            return fonts[px]

        def render_label(label: Label) -> pygame.Surface:
            f = font(label.size)
            f.set_bold(label.strong)
            return f.render(label.text, True, label.color[:3])

        width, height = WINDOW_SIZE
        unit = height / 2 / VIEW_HALF_HEIGHT

        def to_screen(x: float, y: float) -> tuple[float, float]:
            return width / 2 + x * unit, height / 2 - y * unit

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_key(pygame.key.name(event.key))

            game.step()

            screen.fill(_SKY)
            for obj in game.state.objects:
                if obj.name == "BACKGROUND":
                    continue
                box = obj.bounding_box()
                left, top = to_screen(box.minimum[0], box.maximum[1])
                right, bottom = to_screen(box.maximum[0], box.minimum[1])
                rect = pygame.Rect(int(left), int(top), int(right - left), int(bottom - top))
                if rect.width <= 0 or rect.height <= 0:
                    continue
                if obj.color is not None:
                    color = tuple(int(c * 255) for c in obj.color)
                else:
                    color = _PLAYER_COLOR
                if "COIN" in obj.name:
                    pygame.draw.ellipse(screen, color, rect)
                else:
                    pygame.draw.rect(screen, color, rect)

            top_bar = header(game.state)
            surfaces = [render_label(label) for label in top_bar.labels]
            bar_height = max(s.get_height() for s in surfaces) + 20
            bar = pygame.Surface((width, bar_height), pygame.SRCALPHA)
            bar.fill(top_bar.fill)
            screen.blit(bar, (0, 0))
            x = 10
            for index, surface in enumerate(surfaces):
                screen.blit(surface, (x, 10))
                x += surface.get_width() + (30 if index == 1 else 10)
            radius = int(HEART_SIZE / 2)
            hx = width - 10 - radius
            for _ in range(top_bar.hearts):
                pygame.draw.circle(screen, (220, 30, 50), (hx, bar_height // 2), radius)
                hx -= int(HEART_SIZE) + 5

            for label in (pause_label(game.state), popup_label(game.state)):
                if label is not None:
                    surface = render_label(label)
                    screen.blit(surface, surface.get_rect(center=(width // 2, height // 2)))

            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game in a window and run until it is closed."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    game = Game(args.highscore_file, rng)
    _run_window(game)
    return 0