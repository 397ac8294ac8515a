"""Conversion between arena tiles and window coordinates."""

from __future__ import annotations


def tile_scale(
    width: float,
    height: float,
    window_width: float,
    window_height: float,
    arena_width: float,
    arena_height: float,
) -> tuple[float, float]:
    """Return the on-screen size of an object measured in arena tiles."""
    return (
        width / arena_width * window_width,
        height / arena_height * window_height,
    )


def _convert(pos: float, bound_window: float, bound_game: float) -> float:
    tile_size = bound_window / bound_game
    return pos / bound_game * bound_window - bound_window / 2.0 + tile_size / 2.0


def to_screen(
    x: float,
    y: float,
    window_width: float,
    window_height: float,
    arena_width: float,
    arena_height: float,
) -> tuple[float, float]:
    """Map a tile to the centre of its cell, with the window centre at the origin."""
    return (
        _convert(x, window_width, arena_width),
        _convert(y, window_height, arena_height),
    )