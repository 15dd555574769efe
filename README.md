# ponggame

The game logic of a small two-paddle arcade game: a paddle steered by the
player, a computer paddle that follows the ball, a ball that bounces off the
walls and paddles and speeds up on each paddle hit, a start menu with three
difficulty buttons, and a background thread that collects what is to be
drawn each frame. Everything is plain Python with no dependencies.

## Installing

```
pip install .
```

## Modules

- `ponggame.geometry`: `Vec2` (immutable vector with `+`, `-`, `*`,
  `length()`, `normalized()`), `Rect` (`right()`, `bottom()`, `contains()`,
  `translated()`), and the drawables `RectangleShape`, `CircleShape` and
  `TextShape`, each with `local_bounds()`.
- `ponggame.types`: `Color`, the settings dataclasses `WindowSettings`,
  `MenuSettings` and `GameSettings`, `GameDifficulty`, the enumerations
  `GamePhase`, `DifficultyLevel`, `SubsystemKind`, `UserInput` and
  `MouseInput`, and `RenderTarget` / `RenderData` for frame buffers.
- `ponggame.delegate`: `Delegate`, a list of callbacks keyed by the object
  that bound them (`bind`, `remove`, `broadcast`, `clear`, `is_bound`).
- `ponggame.ticker`: `Ticker`, which measures seconds between `elapsed()`
  calls; the clock can be passed in.
- `ponggame.actor`: the base classes `Actor`, `Pawn` (receives movement and
  mouse events from a controller) and `Character` (speed, direction,
  movement bounds, difficulty changes from its world).
- `ponggame.player_controller`: `PlayerController` turns `InputEvent`s and a
  set of held key names into escape, mouse and movement broadcasts. `w`/`s`
  move forward/back, `a`/`d` left/right, `escape` fires `on_escape`.
- `ponggame.controlled`: `ControlledCharacter`, the player's paddle, clamped
  to its movement bounds.
- `ponggame.enemy`: `EnemyCharacter`, which moves towards the ball's height
  with a small dead zone.
- `ponggame.ball`: `BounceBall` and `circle_intersects_rect`. The ball
  broadcasts `on_bounce`, `on_player_scored` and `on_enemy_scored`, and
  resets to its start point with a random launch direction.
- `ponggame.widget`: `Widget`, a menu rectangle with a text label that
  reports mouse releases inside it and shows a hover outline.
- `ponggame.scene`: `build_menu` and `build_game` lay out a `MenuScene` and
  a `GameScene` for a given window size.
- `ponggame.render`: `Renderer` copies the visible render targets of a
  viewport's actors into a double buffer, once with `build_frame()` or
  repeatedly on a thread with `start_parallel()` / `stop()`.

## Examples

```python
from ponggame.ball import circle_intersects_rect
from ponggame.geometry import Rect, Vec2

hit, pushed_out = circle_intersects_rect(Vec2(5, 5), 2, Rect(0, 6, 10, 10))
print(hit, pushed_out)   # True Vec2(x=5.0, y=4.0)
```

Setting up a level needs a world object with a `window_size` and an
`on_game_difficulty_changed` delegate:

```python
from types import SimpleNamespace

from ponggame.delegate import Delegate
from ponggame.geometry import Vec2
from ponggame.scene import build_game
from ponggame.types import GameDifficulty, GameSettings

size = Vec2(1280, 720)
world = SimpleNamespace(window_size=size, on_game_difficulty_changed=Delegate())
scene = build_game(GameSettings(ball_default_position_x=0.5,
                                ball_default_position_y=0.5), size, world)

world.on_game_difficulty_changed.broadcast(GameDifficulty(300.0, 500.0, 1.1))
for actor in scene.actors:
    actor.tick(1 / 60)
print(scene.ball.render_target.position)
```

## What this package does not do

It opens no window, draws nothing to the screen, plays no sound and reads
no settings file: settings are the dataclasses in `ponggame.types`, filled
in by the caller. There is no command to start a game; keeping score,
switching between menu and game and feeding window input into a
`PlayerController` are left to the code that uses these modules.

## Running the tests

```
pip install .[test]
pytest
```