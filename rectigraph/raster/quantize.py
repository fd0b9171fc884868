# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Color quantization.

Rounds RGB channels to a fixed granularity so that near-identical colors
become exact matches and merge into larger rectangles. Alpha is untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

from rectigraph.raster.grid import PixelGrid, as_pixel_grid

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 4


def quantize(
    grid: Union[NDArray[Any], Sequence],
    precision: int = DEFAULT_PRECISION,
    *,
    clamp: bool = True,
) -> PixelGrid:
    """
    Round each RGB channel to the nearest multiple of ``precision``.

    Rounding is half-up: ``floor(c / precision + 0.5) * precision``, so a
    channel exactly ``precision / 2`` above a multiple goes to the next one.

    Args:
        grid: Pixel grid (see :func:`as_pixel_grid`)
        precision: Rounding granularity, a positive integer. 1 is the
            identity on RGB.
        clamp: If True (default), saturate rounded channels at 255.
            If False, let channels overflow past 255
            (254 at precision 4 becomes 256); such colors are later
            rejected by the expression synthesizer.

    Returns:
        New (H, W, 4) grid; the input is not modified.
    """
    if isinstance(precision, bool) or not isinstance(precision, (int, np.integer)):
        raise ValueError(f"precision must be an integer, got {precision!r}")
    if precision < 1:
        raise ValueError(f"precision must be >= 1, got {precision}")

    pixels = as_pixel_grid(grid)
    before = _count_colors(pixels) if logger.isEnabledFor(logging.DEBUG) else 0

    rgb = pixels[..., :3]
    rounded = np.floor(rgb / precision + 0.5).astype(np.int64) * precision
    if clamp:
        rounded = np.minimum(rounded, 255)

    pixels[..., :3] = rounded

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Quantized at precision %d: %d -> %d distinct colors",
            precision,
            before,
            _count_colors(pixels),
        )

    return pixels


def _count_colors(pixels: PixelGrid) -> int:
    return len(np.unique(pixels.reshape(-1, 4), axis=0))
