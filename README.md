# sanselgames

Two small arcade games built on pygame: a grid snake and an animated dino.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Sansel's Big Snake

```
sansels-snake [--walls N] [--apples N] [--seed N]
```

The snake moves around a 15 × 15 arena, one tile every 0.3 seconds. A tile
for the next object is picked in advance at random among the free tiles. While
the game runs, an apple is placed there when the 3-second food timer allows
and fewer than `--apples` apples (default 1, at most 15) are on the field; a
white wall is placed there when the 15-second wall timer allows and fewer than
`--walls` walls (default 25, at most 85) are on the field. `--seed` makes the
placement repeatable.

Eating an apple adds a segment where the tail was before the last step. The
game ends, and the window closes, when the head lands on a wall or on the
snake's own body, when it moves more than one tile past the edge of the arena,
or when no free tile is left.

Controls:

- Arrow keys steer. The snake cannot turn straight back on itself.
- Escape pauses and resumes. The game starts paused.

### Using the game without a window

`sanselgames.snake.SnakeGame` holds the whole game state and runs one frame
per call to `update(delta)`, with `delta` in seconds. It raises
`sanselgames.snake.GameOver` when the snake dies. Settings live in
`sanselgames.snake.Rules` (`pause`, `next`, `spawn_food_timer`,
`spawn_obstruction_timer`, `apples_at_once`, `obstruction_at_once`); out-of-range
counts raise `ValueError`. The smaller steps are available on their own:
`steer`, `toggle_pause`, `choose_next_position`, `move`, `eat`, `grow`,
`check_collisions` and `spawn_objects`. `sanselgames.snake_app.draw` paints a
game onto any pygame surface.

## Sansel's Cute Dino

```
sansels-dino [--sheet PATH]
```

Shows the dino looping through its six-frame run cycle at 10 frames per
second. `--sheet` names a one-row sprite sheet of 24 × 24 pixel frames
(default `assets/dino/move.png`, relative to the current directory); if the
file is not there, a plain rectangle is drawn in its place. Holding Space lifts
the dino to jump height.

The game state is `sanselgames.dino.DinoGame`, stepped with
`update(delta, jump_pressed)`; the frame cycling is
`sanselgames.dino.AnimationConfig.advance`.

## Shared pieces

- `sanselgames.timer.Timer` and `TimerMode`: a countdown timer, one-shot or
  repeating, advanced by explicit time deltas.
- `sanselgames.geometry.tile_scale` and `to_screen`: conversion from arena
  tiles to window sizes and centred window coordinates.

## What it does not do

- The dino game has no obstacles, no score and no gravity: once lifted by a
  jump the dino stays at jump height, and `DinoGame.dash` does not move it.
- The snake game keeps no score and shows no text; it has no settings screen
  beyond the command-line options.
- No game saves any state between runs.