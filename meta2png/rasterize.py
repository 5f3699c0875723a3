import math
from typing import Sequence

import numpy as np

from .colors import channel_byte, decode_color
from .errors import EmptyInputError, IndexOutOfRangeError


def grid_side(count: int) -> int:
    return math.isqrt(count)


def source_index(count: int, side: int, x: int, y: int) -> int:
    """
    Index into the color list for output column x of 1-based row y.

    Row y=1 is the top of the image and reads the last `side` colors, so the
    list is laid out bottom-up: first colors on the bottom row.
    """
    idx = count - (y * side) + x
    if not 0 <= idx < count:
        raise IndexOutOfRangeError(
            f"Color index {idx} out of range for {count} color(s) (x={x}, y={y}, side={side})"
        )
    return idx


def rasterize(colors: Sequence[str], strict: bool = False) -> np.ndarray:
    """
    Lay out an ordered list of RRGGBB codes as a square RGBA grid.

    Returns a uint8 array of shape (side, side, 4), row 0 at the top, where
    side = sqrt(len(colors)). The color count must be a perfect square.
    """
    count = len(colors)
    if count == 0:
        raise EmptyInputError("No materials found")

    side = grid_side(count)
    if side * side != count:
        raise IndexOutOfRangeError(
            f"{count} material(s) do not form a square grid "
            f"(nearest is {side}x{side} = {side * side})"
        )

    grid = np.zeros((side, side, 4), dtype=np.uint8)
    for y in range(1, side + 1):
        for x in range(side):
            pixel = decode_color(colors[source_index(count, side, x, y)], strict=strict)
            grid[y - 1, x] = [channel_byte(c) for c in pixel]
    return grid
