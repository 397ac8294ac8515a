"""Window, input and drawing for the dino game."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

import pygame

from sanselgames.dino import ARENA_HEIGHT, ARENA_WIDTH, DinoGame, Size
from sanselgames.geometry import tile_scale, to_screen
from sanselgames.snake import Position

WINDOW_SIZE = (1200, 750)
TITLE = "Sansel's Cute Dino!"
FPS = 60
FRAME_SIZE = 24
DEFAULT_SHEET = Path("assets") / "dino" / "move.png"
BACKGROUND_COLOR = (43, 44, 47)
PLACEHOLDER_COLOR = (90, 170, 90)


def frame_rect(index: int, frame_size: int = FRAME_SIZE) -> pygame.Rect:
    """Return the area of frame ``index`` in a one-row sprite sheet."""
    return pygame.Rect(index * frame_size, 0, frame_size, frame_size)


def _screen_rect(
    position: Position, size: Size, surface_size: tuple[int, int]
) -> pygame.Rect:
    width, height = surface_size
    sx, sy = to_screen(
        position.x, position.y, width, height, ARENA_WIDTH, ARENA_HEIGHT
    )
    tw, th = tile_scale(size.width, size.height, width, height, ARENA_WIDTH, ARENA_HEIGHT)
    rect = pygame.Rect(0, 0, max(1, round(tw)), max(1, round(th)))
    rect.center = (round(width / 2 + sx), round(height / 2 - sy))
    return rect


def draw(
    surface: pygame.Surface, game: DinoGame, sheet: pygame.Surface | None = None
) -> pygame.Rect:
    """Paint the dino's current frame and return the area it covers."""
    surface.fill(BACKGROUND_COLOR)
    rect = _screen_rect(game.position, game.size, surface.get_size())
    if sheet is None:
        pygame.draw.rect(surface, PLACEHOLDER_COLOR, rect)
    else:
        frame = sheet.subsurface(frame_rect(game.frame))
        surface.blit(pygame.transform.scale(frame, rect.size), rect)
    return rect


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dino game in a window until it is closed."""
    parser = argparse.ArgumentParser(
        prog="sansels-dino", description="Play Sansel's Cute Dino."
    )
    parser.add_argument(
        "--sheet",
        type=Path,
        default=DEFAULT_SHEET,
        help="sprite sheet with the running frames",
    )
    args = parser.parse_args(argv)
    game = DinoGame()

    pygame.display.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        sheet = None
        if args.sheet.is_file():
            sheet = pygame.image.load(str(args.sheet)).convert_alpha()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
            pressed = pygame.key.get_pressed()
            delta = clock.tick(FPS) / 1000.0
            game.update(delta, bool(pressed[pygame.K_SPACE]))
            draw(screen, game, sheet)
            pygame.display.flip()
    finally:
        pygame.display.quit()