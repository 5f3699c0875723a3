# tests/test_rasterize.py

import numpy as np
import pytest

from meta2png.errors import EmptyInputError, IndexOutOfRangeError
from meta2png.rasterize import rasterize, source_index

RED, GREEN, BLUE, WHITE = "FF0000", "00FF00", "0000FF", "FFFFFF"


def rgba(code: str) -> tuple:
    return (int(code[0:2], 16), int(code[2:4], 16), int(code[4:6], 16), 255)


def cell(grid: np.ndarray, x: int, row: int) -> tuple:
    return tuple(int(c) for c in grid[row, x])


@pytest.mark.parametrize("k", [1, 2, 3, 5, 8])
def test_square_counts_fill_every_cell(k: int) -> None:
    colors = [f"{i:06X}" for i in range(1, k * k + 1)]
    grid = rasterize(colors)
    assert grid.shape == (k, k, 4)
    assert grid.dtype == np.uint8
    # every source color appears once and alpha is opaque everywhere
    seen = {cell(grid, x, y)[:3] for y in range(k) for x in range(k)}
    assert len(seen) == k * k
    assert (grid[:, :, 3] == 255).all()


def test_two_by_two_orientation() -> None:
    a, b, c, d = RED, GREEN, BLUE, WHITE
    grid = rasterize([a, b, c, d])
    assert [cell(grid, 0, 0), cell(grid, 1, 0)] == [rgba(c), rgba(d)]
    assert [cell(grid, 0, 1), cell(grid, 1, 1)] == [rgba(a), rgba(b)]


def test_three_by_three_mapping() -> None:
    colors = [f"{i:02X}{i:02X}{i:02X}" for i in range(9)]
    grid = rasterize(colors)
    assert grid.shape == (3, 3, 4)
    for y in range(1, 4):
        for x in range(3):
            idx = 9 - (y * 3) + x
            assert cell(grid, x, y - 1) == rgba(colors[idx])
    assert cell(grid, 0, 0) == rgba("060606")
    assert cell(grid, 2, 2) == rgba("020202")


def test_single_color() -> None:
    grid = rasterize([RED])
    assert grid.shape == (1, 1, 4)
    assert cell(grid, 0, 0) == (255, 0, 0, 255)


def test_rasterize_is_idempotent() -> None:
    colors = [f"{i * 7:06X}" for i in range(16)]
    first = rasterize(colors)
    second = rasterize(colors)
    assert np.array_equal(first, second)
    assert first.tobytes() == second.tobytes()


def test_does_not_mutate_input() -> None:
    colors = [RED, GREEN, BLUE, WHITE]
    rasterize(colors)
    assert colors == [RED, GREEN, BLUE, WHITE]


def test_empty_list_raises() -> None:
    with pytest.raises(EmptyInputError):
        rasterize([])


@pytest.mark.parametrize("n", [2, 3, 5, 10])
def test_non_square_count_raises(n: int) -> None:
    with pytest.raises(IndexOutOfRangeError):
        rasterize([RED] * n)


def test_malformed_color_writes_zero_channel() -> None:
    grid = rasterize(["ZZ8040"])
    assert cell(grid, 0, 0) == (0, 0x80, 0x40, 255)


def test_strict_propagates_malformed_color() -> None:
    from meta2png.errors import MalformedColorError

    with pytest.raises(MalformedColorError):
        rasterize([RED, GREEN, "nothex", WHITE], strict=True)


def test_source_index() -> None:
    assert source_index(4, 2, 0, 1) == 2
    assert source_index(4, 2, 1, 2) == 1
    with pytest.raises(IndexOutOfRangeError):
        source_index(4, 2, 0, 3)
    with pytest.raises(IndexOutOfRangeError):
        source_index(4, 2, 2, 1)
