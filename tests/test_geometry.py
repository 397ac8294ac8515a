import pytest

from sanselgames.geometry import tile_scale, to_screen


def test_tile_scale_of_one_tile_is_one_cell():
    sx, sy = tile_scale(1.0, 1.0, 500.0, 400.0, 10.0, 8.0)
    assert sx == pytest.approx(500.0 / 10.0)
    assert sy == pytest.approx(400.0 / 8.0)


def test_tile_scale_is_proportional_to_size():
    small = tile_scale(0.5, 0.5, 500.0, 500.0, 15.0, 15.0)
    large = tile_scale(1.0, 1.0, 500.0, 500.0, 15.0, 15.0)
    assert large[0] == pytest.approx(2 * small[0])
    assert large[1] == pytest.approx(2 * small[1])


def test_centre_tile_of_odd_arena_maps_to_origin():
    x, y = to_screen(7, 7, 500.0, 500.0, 15, 15)
    assert x == pytest.approx(0.0)
    assert y == pytest.approx(0.0)


def test_opposite_corners_are_symmetric():
    first = to_screen(0, 0, 1200.0, 750.0, 255, 255)
    last = to_screen(254, 254, 1200.0, 750.0, 255, 255)
    assert first[0] == pytest.approx(-last[0])
    assert first[1] == pytest.approx(-last[1])


def test_first_tile_sits_half_a_cell_inside_the_edge():
    x, y = to_screen(0, 0, 500.0, 300.0, 10, 6)
    assert x == pytest.approx(-500.0 / 2 + 500.0 / 10 / 2)
    assert y == pytest.approx(-300.0 / 2 + 300.0 / 6 / 2)


def test_neighbouring_tiles_are_one_cell_apart():
    a = to_screen(3, 4, 500.0, 500.0, 15, 15)
    b = to_screen(4, 5, 500.0, 500.0, 15, 15)
    assert b[0] - a[0] == pytest.approx(500.0 / 15)
    assert b[1] - a[1] == pytest.approx(500.0 / 15)