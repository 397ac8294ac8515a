import random
from collections import defaultdict

import pygame
import pytest

from sanselgames import snake_app
from sanselgames.snake import (
    APPLE_COLOR,
    BACKGROUND_COLOR,
    HEAD_SIZE,
    OBJECT_SIZE,
    SEGMENT_SIZE,
    SNAKE_HEAD_COLOR,
    SNAKE_SEGMENT_COLOR,
    WALL_COLOR,
    Direction,
    Position,
    SnakeGame,
)


def _pressed(*keys):
    state = defaultdict(bool)
    for key in keys:
        state[key] = True
    return state


def _pixel(surface, point):
    return tuple(surface.get_at(point))[:3]


@pytest.mark.parametrize(
    "keys, expected",
    [
        ((pygame.K_LEFT,), Direction.LEFT),
        ((pygame.K_RIGHT,), Direction.RIGHT),
        ((pygame.K_UP,), Direction.UP),
        ((pygame.K_DOWN,), Direction.DOWN),
        ((pygame.K_LEFT, pygame.K_RIGHT), Direction.LEFT),
        ((pygame.K_DOWN, pygame.K_UP), Direction.DOWN),
        ((pygame.K_UP, pygame.K_RIGHT), Direction.UP),
    ],
)
def test_key_direction_priority(keys, expected):
    assert snake_app.key_direction(_pressed(*keys)) is expected


def test_key_direction_without_arrows():
    assert snake_app.key_direction(_pressed(pygame.K_SPACE)) is None


def test_rgb_full_red():
    assert snake_app._rgb(APPLE_COLOR) == (255, 0, 0)


def test_draw_paints_snake_and_background():
    game = SnakeGame(rng=random.Random(1))
    surface = pygame.Surface(snake_app.WINDOW_SIZE)
    snake_app.draw(surface, game)
    size = surface.get_size()

    head = snake_app._tile_rect(game.head, HEAD_SIZE, size)
    tail = snake_app._tile_rect(game.segments[0], SEGMENT_SIZE, size)
    assert _pixel(surface, head.center) == snake_app._rgb(SNAKE_HEAD_COLOR)
    assert _pixel(surface, tail.center) == snake_app._rgb(SNAKE_SEGMENT_COLOR)
    assert _pixel(surface, (0, 0)) == snake_app._rgb(BACKGROUND_COLOR)


def test_draw_paints_apples_and_walls():
    game = SnakeGame(rng=random.Random(1))
    game.foods.append(Position(7, 7))
    game.walls.append(Position(10, 3))
    surface = pygame.Surface(snake_app.WINDOW_SIZE)
    snake_app.draw(surface, game)
    size = surface.get_size()

    apple = snake_app._tile_rect(Position(7, 7), OBJECT_SIZE, size)
    wall = snake_app._tile_rect(Position(10, 3), OBJECT_SIZE, size)
    assert _pixel(surface, apple.center) == snake_app._rgb(APPLE_COLOR)
    assert _pixel(surface, wall.center) == snake_app._rgb(WALL_COLOR)


def test_tile_rects_do_not_overlap_between_neighbours():
    size = snake_app.WINDOW_SIZE
    left = snake_app._tile_rect(Position(3, 3), OBJECT_SIZE, size)
    right = snake_app._tile_rect(Position(4, 3), OBJECT_SIZE, size)
    assert left.right <= right.left
    assert left.centery == right.centery


def test_main_returns_zero_when_window_closed(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setattr(
        pygame.event, "get", lambda *a, **k: [pygame.event.Event(pygame.QUIT)]
    )
    assert snake_app.main(["--seed", "3"]) == 0


def test_main_rejects_too_many_walls():
    with pytest.raises(SystemExit) as excinfo:
        snake_app.main(["--walls", "100"])
    assert excinfo.value.code == 2