"""Window, input and drawing for the snake game."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

import pygame

from sanselgames.geometry import tile_scale, to_screen
from sanselgames.snake import (
    APPLE_COLOR,
    ARENA_HEIGHT,
    ARENA_WIDTH,
    BACKGROUND_COLOR,
    HEAD_SIZE,
    OBJECT_SIZE,
    SEGMENT_SIZE,
    SNAKE_HEAD_COLOR,
    SNAKE_SEGMENT_COLOR,
    WALL_COLOR,
    Direction,
    GameOver,
    Position,
    Rules,
    SnakeGame,
)

WINDOW_SIZE = (500, 500)
TITLE = "Sansel's Big Snake!"
FPS = 60

# Checked in this order; the first held key wins.
_KEY_DIRECTIONS = (
    (pygame.K_LEFT, Direction.LEFT),
    (pygame.K_DOWN, Direction.DOWN),
    (pygame.K_UP, Direction.UP),
    (pygame.K_RIGHT, Direction.RIGHT),
)


def key_direction(pressed) -> Direction | None:
    """Return the direction asked for by the held arrow keys, if any."""
    return next(
        (direction for key, direction in _KEY_DIRECTIONS if pressed[key]), None
    )


def _rgb(color: tuple[float, float, float]) -> tuple[int, int, int]:
    r, g, b = (round(channel * 255) for channel in color)
    return (r, g, b)


def _tile_rect(
    position: Position, side: float, surface_size: tuple[int, int]
) -> pygame.Rect:
    width, height = surface_size
    sx, sy = to_screen(
        position.x, position.y, width, height, ARENA_WIDTH, ARENA_HEIGHT
    )
    tw, th = tile_scale(side, side, width, height, ARENA_WIDTH, ARENA_HEIGHT)
    rect = pygame.Rect(0, 0, round(tw), round(th))
    rect.center = (round(width / 2 + sx), round(height / 2 - sy))
    return rect


def draw(surface: pygame.Surface, game: SnakeGame) -> None:
    """Paint the arena, walls, apples and snake onto ``surface``."""
    surface.fill(_rgb(BACKGROUND_COLOR))
    size = surface.get_size()
    layers = (
        (game.walls, WALL_COLOR, OBJECT_SIZE),
        (game.foods, APPLE_COLOR, OBJECT_SIZE),
        (game.segments, SNAKE_SEGMENT_COLOR, SEGMENT_SIZE),
        ([game.head], SNAKE_HEAD_COLOR, HEAD_SIZE),
    )
    for positions, color, side in layers:
        for position in positions:
            pygame.draw.rect(surface, _rgb(color), _tile_rect(position, side, size))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sansels-snake", description="Play Sansel's Big Snake."
    )
    parser.add_argument(
        "--walls", type=int, default=25, help="walls on the field at once"
    )
    parser.add_argument(
        "--apples", type=int, default=1, help="apples on the field at once"
    )
    parser.add_argument("--seed", type=int, help="seed for object placement")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the snake game in a window until it is closed or the snake dies."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        rules = Rules(obstruction_at_once=args.walls, apples_at_once=args.apples)
    except ValueError as error:
        parser.error(str(error))
    game = SnakeGame(rules, random.Random(args.seed))

    pygame.display.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    game.toggle_pause()
            direction = key_direction(pygame.key.get_pressed())
            if direction is not None:
                game.steer(direction)
            delta = clock.tick(FPS) / 1000.0
            try:
                game.update(delta)
            except GameOver:
                return 0
            draw(screen, game)
            pygame.display.flip()
    finally:
        pygame.display.quit()