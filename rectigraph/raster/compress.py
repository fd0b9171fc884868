# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Region compression.

Turns a pixel grid into axis-aligned, uniformly colored rectangles.

Scan order is row-major over the vertically flipped grid (row 0 = visual
bottom), left to right within a row. Rectangle order is observable: the
synthesizer derives expression ids from it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

from rectigraph.errors import InvalidColorError
from rectigraph.raster.grid import PixelGrid, as_pixel_grid, empty_mask, flip_rows
from rectigraph.schema import Rectangle

logger = logging.getLogger(__name__)


class CompressionMode(Enum):
    """Rectangle decomposition strategy."""

    LEGACY = "legacy"  # Greedy runs, overlap allowed, isolated pixels dropped
    DISJOINT = "disjoint"  # Consumed cells skipped, no overlap, isolated pixels dropped
    PIXELS = "pixels"  # One 1x1 rectangle per non-empty pixel


def compress(
    grid: Union[NDArray[Any], Sequence],
    mode: CompressionMode = CompressionMode.LEGACY,
) -> list[Rectangle]:
    """
    Compress a pixel grid into same-color rectangles.

    LEGACY (default) is the greedy scan existing graphs were built with.
    For every non-empty anchor cell:

    1. Width is the run of cells equal to the anchor color going right
       along the anchor row, anchor included.
    2. Height is the run of cells equal to the anchor color going up the
       anchor column only, anchor included.
    3. A 1x1 result is dropped (isolated pixels are lost).

    No cell is ever marked as consumed, so later anchors re-cover cells of
    earlier rectangles and the output overlaps. Rectangles are not
    guaranteed to be uniformly colored beyond their anchor row and column.

    DISJOINT marks covered cells, grows height only while the full anchor
    run matches in the next row, and never overlaps. PIXELS emits every
    non-empty pixel as its own 1x1 rectangle.

    Args:
        grid: Pixel grid (see :func:`as_pixel_grid`); not modified.
        mode: Decomposition strategy.

    Returns:
        Rectangles in scan order.
    """
    pixels = flip_rows(as_pixel_grid(grid))
    empty = empty_mask(pixels)
    keys = _color_keys(pixels)

    if mode == CompressionMode.LEGACY:
        rectangles = _compress_legacy(pixels, keys, empty)
    elif mode == CompressionMode.DISJOINT:
        rectangles = _compress_disjoint(pixels, keys, empty)
    elif mode == CompressionMode.PIXELS:
        rectangles = _pixel_rectangles(pixels, empty)
    else:
        raise ValueError(f"Unknown compression mode: {mode!r}")

    logger.debug(
        "Compressed %dx%d grid into %d rectangles (%s)",
        pixels.shape[1],
        pixels.shape[0],
        len(rectangles),
        mode.value,
    )
    return rectangles


def pixel_rectangles(grid: Union[NDArray[Any], Sequence]) -> list[Rectangle]:
    """Shorthand for ``compress(grid, CompressionMode.PIXELS)``."""
    return compress(grid, CompressionMode.PIXELS)


# =============================================================================
# Strategies
# =============================================================================


def _compress_legacy(
    pixels: PixelGrid,
    keys: NDArray[np.int64],
    empty: NDArray[np.bool_],
) -> list[Rectangle]:
    height, width = empty.shape
    rectangles: list[Rectangle] = []

    for row in range(height):
        for col in range(width):
            if empty[row, col]:
                continue

            key = keys[row, col]
            run_width = _run_length(keys[row, col:], empty[row, col:], key)
            run_height = _run_length(keys[row:, col], empty[row:, col], key)

            if run_width == 1 and run_height == 1:
                continue

            rectangles.append(Rectangle(
                x=col,
                y=row,
                width=run_width,
                height=run_height,
                color=_color_tuple(pixels[row, col]),
            ))

    return rectangles


def _compress_disjoint(
    pixels: PixelGrid,
    keys: NDArray[np.int64],
    empty: NDArray[np.bool_],
) -> list[Rectangle]:
    height, width = empty.shape
    # Consumed cells behave like empty ones for every later anchor
    blocked = empty.copy()
    rectangles: list[Rectangle] = []

    for row in range(height):
        for col in range(width):
            if blocked[row, col]:
                continue

            key = keys[row, col]
            run_width = _run_length(keys[row, col:], blocked[row, col:], key)

            run_height = 1
            for above in range(row + 1, height):
                span = slice(col, col + run_width)
                if blocked[above, span].any() or (keys[above, span] != key).any():
                    break
                run_height += 1

            blocked[row:row + run_height, col:col + run_width] = True

            if run_width == 1 and run_height == 1:
                continue

            rectangles.append(Rectangle(
                x=col,
                y=row,
                width=run_width,
                height=run_height,
                color=_color_tuple(pixels[row, col]),
            ))

    return rectangles


def _pixel_rectangles(pixels: PixelGrid, empty: NDArray[np.bool_]) -> list[Rectangle]:
    rows, cols = np.nonzero(~empty)
    return [
        Rectangle(x=int(col), y=int(row), width=1, height=1, color=_color_tuple(pixels[row, col]))
        for row, col in zip(rows, cols)
    ]


# =============================================================================
# Helpers
# =============================================================================


def _color_keys(pixels: PixelGrid) -> NDArray[np.int64]:
    """
    Pack each pixel into one integer so equality is a single comparison.

    Channels are 0-255 (or 256 after unclamped quantization), so 10 bits per
    channel keeps keys collision-free.
    """
    if pixels.size and pixels.max() >= 1024:
        raise InvalidColorError(f"Channel value {int(pixels.max())} out of range")
    return (
        (pixels[..., 0] << 30)
        | (pixels[..., 1] << 20)
        | (pixels[..., 2] << 10)
        | pixels[..., 3]
    )


def _run_length(
    keys: NDArray[np.int64],
    blocked: NDArray[np.bool_],
    key: np.int64,
) -> int:
    """Length of the leading run of non-blocked cells equal to ``key``."""
    match = (keys == key) & ~blocked
    if match.all():
        return len(match)
    return int(np.argmin(match))


def _color_tuple(pixel: NDArray[np.int64]) -> tuple[int, ...]:
    return tuple(int(c) for c in pixel)
