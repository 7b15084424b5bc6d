# flapbird

A small side-scrolling arcade game in the flappy-bird style. Keep the bird up
with the space bar and fly it through the gaps between the pipes. Pick up the
coins along the way to score points.

## Installing

```
pip install .
```

## Playing

```
flapbird
```

Options:

- `--highscore-file PATH`: where the highscore is read from and written to
  (default `enigma-3d_flappy_bird_highscore.txt` in the current directory).
- `--seed N`: seed for the random pipe heights, for a repeatable level.

| Key    | Action                           |
|--------|----------------------------------|
| Space  | Flap (move the bird up)          |
| Escape | Pause or resume the game         |

### Rules

- The bird falls and tilts down every frame. A flap lifts it one unit and tilts
  it up. It cannot flap above the top of the screen or fall below the bottom.
- Each coin you collect scores one point. Every tenth point shows a
  "Well Done!" message.
- You start with three lives, shown as hearts in the top bar. When you hit a
  pipe, the bird goes back to the centre and you lose a life. For two seconds
  (120 frames) you cannot be hit again, and the bird blinks while this lasts.
- When you lose your last life, the score goes back to zero and you get three
  new lives. The game shows "Oh no! Try Again!".
- A new highscore is saved as soon as it is reached and is read back the next
  time the game starts.

## Using it as a library

The game logic does not depend on the window, so you can drive it yourself:

```python
import random

from flapbird.scene import new_game_state, setup_scene
from flapbird.update import player_update, update_pipes, check_collision
from flapbird.hud import update_ui_timers, header

state = new_game_state(highscore=0)
setup_scene(state, random.Random(1))
player_update(state)
update_pipes(state)
hit = check_collision(state, "highscore.txt")  # a CollisionState
update_ui_timers(state)
print(header(state))
```

- `flapbird.scene` holds the objects (`GameObject`, `Transform`,
  `BoundingBox`), the `GameState`, level setup (`setup_scene`, `spawn_pipes`)
  and `load_highscore` / `save_highscore`.
- `flapbird.update` has the per-frame steps `player_update`, `update_pipes`
  and `check_collision`.
- `flapbird.events` has the key handlers `player_jump` and `toggle_pause`.
- `flapbird.hud` describes what the display shows: `header`, `pause_label`,
  `popup_label`, and `update_ui_timers` to count the timers down.
- `flapbird.app.Game` ties these together. `Game.step()` moves the game forward
  one frame and returns what the bird hit; `Game.handle_key(key)` runs the
  handler for a key name such as `"space"` or `"escape"` and returns `False` if
  the key is not bound.

## What it does not do

- No sound is played. The game keeps track of which clips it would play
  (`GameState.played`, `looping` and `paused_audio`), but nothing is sent to
  the speakers.
- The scene is drawn flat: pipes are green rectangles, coins are gold ellipses,
  the bird is a yellow box and the lives are red circles, with pygame's default
  font. There are no models, textures or background image.

## Running the tests

```
pip install .[test]
pytest
```