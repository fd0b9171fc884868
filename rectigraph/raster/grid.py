# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Pixel grid handling.

A pixel grid is a NumPy integer array of shape (H, W, 4) holding RGBA
channels. Row 0 is the top of the image as stored; the compressor works on
a flipped copy so that row 0 becomes the visual bottom.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

from rectigraph.errors import DimensionMismatchError, InvalidColorError

logger = logging.getLogger(__name__)

# Padding used when an image is fitted into a square canvas.
# Transparent white. Its channel sum is non-zero, so padding is drawn
# rather than skipped by the compressor.
DEFAULT_BACKGROUND = (255, 255, 255, 0)

PixelGrid = NDArray[np.int64]


def as_pixel_grid(grid: Union[NDArray[Any], Sequence]) -> PixelGrid:
    """
    Normalize a pixel grid to a fresh (H, W, 4) int64 array.

    The input is never aliased: the result is always a copy.

    Args:
        grid: NumPy array of shape (H, W, 3|4), or nested sequences
            ``rows -> pixels -> channels``. 3-channel input gets an opaque
            alpha of 255 appended.

    Raises:
        DimensionMismatchError: Rows (or pixels) have unequal lengths.
        InvalidColorError: Channels are not integers, or are negative.
        ValueError: The grid is not three-dimensional, or has the wrong
            channel count.
        TypeError: The input is neither an array nor a sequence.
    """
    if isinstance(grid, np.ndarray):
        arr = grid
    elif isinstance(grid, Sequence) and not isinstance(grid, (str, bytes)):
        arr = _sequence_to_array(grid)
    else:
        raise TypeError(f"Expected numpy array or nested sequence, got {type(grid)}")

    if arr.ndim != 3:
        raise ValueError(f"Expected (H, W, 4) grid, got shape {arr.shape}")

    if arr.shape[2] not in (3, 4):
        raise ValueError(
            f"Expected 3 or 4 channels per pixel, got {arr.shape[2]}"
        )

    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise InvalidColorError(f"Expected integer channels, got {arr.dtype}")

    pixels = arr.astype(np.int64)

    if pixels.shape[2] == 3:
        alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=np.int64)
        pixels = np.concatenate([pixels, alpha], axis=2)

    if pixels.size and pixels.min() < 0:
        raise InvalidColorError(
            f"Channel values must be non-negative, got {int(pixels.min())}"
        )

    return pixels


def _sequence_to_array(rows: Sequence) -> NDArray[Any]:
    """Convert nested rows to an array, rejecting ragged input explicitly."""
    if len(rows) == 0:
        return np.zeros((0, 0, 4), dtype=np.int64)

    if not all(_is_sequence(row) for row in rows):
        raise ValueError("Expected (H, W, 4) grid, got rows that are not sequences")

    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise DimensionMismatchError(
            f"All rows must have equal length, got lengths {sorted(widths)}"
        )

    width = widths.pop()
    if width == 0:
        return np.zeros((len(rows), 0, 4), dtype=np.int64)

    if not all(_is_sequence(pixel) for row in rows for pixel in row):
        raise ValueError("Expected (H, W, 4) grid, got pixels that are not sequences")

    channels = {len(pixel) for row in rows for pixel in row}
    if len(channels) > 1:
        raise DimensionMismatchError(
            f"All pixels must have the same channel count, got {sorted(channels)}"
        )

    return np.array(rows)


def _is_sequence(obj: Any) -> bool:
    if isinstance(obj, np.ndarray):
        return obj.ndim >= 1
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes))


def empty_mask(grid: PixelGrid) -> NDArray[np.bool_]:
    """
    Boolean (H, W) mask of empty pixels.

    A pixel is empty when R+G+B+A == 0. Known defect kept for output
    compatibility: emptiness is a channel-sum test, not an alpha test, so
    transparent pixels that carry color (e.g. (255, 255, 255, 0)) are drawn
    while only all-zero black is skipped.
    """
    return grid.sum(axis=2) == 0


def flip_rows(grid: PixelGrid) -> PixelGrid:
    """Return a vertically flipped copy (row 0 becomes the visual bottom)."""
    return grid[::-1].copy()


# =============================================================================
# Image loading
# =============================================================================


def load_grid(
    image: Union[str, Path, NDArray[Any], Sequence, Any],
    *,
    size: int = 0,
    background: tuple[int, int, int, int] = DEFAULT_BACKGROUND,
) -> PixelGrid:
    """
    Load an image into an RGBA pixel grid.

    Args:
        image: One of:
            - Path to an image file (str or Path)
            - A PIL ``Image.Image``
            - A pixel grid accepted by :func:`as_pixel_grid`
        size: When > 0, fit the image inside a ``size x size`` canvas
            (aspect preserved, scaled up or down), anchored at the
            left-bottom corner and padded with ``background``.
            0 keeps the native dimensions.
        background: RGBA padding color for the fitted canvas.

    Returns:
        (H, W, 4) int64 pixel grid
    """
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")

    if isinstance(image, (str, Path)):
        Image = _require_pil()
        with Image.open(image) as img:
            img = img.convert("RGBA")
    elif _is_pil_image(image):
        img = image.convert("RGBA")
    else:
        pixels = as_pixel_grid(image)
        if size == 0:
            return pixels
        Image = _require_pil()
        img = Image.fromarray(np.clip(pixels, 0, 255).astype(np.uint8))

    if size > 0:
        img = _fit_contain(img, size, background)

    return as_pixel_grid(np.array(img, dtype=np.uint8))


def _fit_contain(img: Any, size: int, background: tuple[int, int, int, int]) -> Any:
    """Scale into a square canvas, keeping aspect, anchored left-bottom."""
    Image = _require_pil()

    width, height = img.size
    if width == 0 or height == 0:
        raise ValueError(f"Cannot fit an empty image ({width}x{height})")

    scale = min(size / width, size / height)
    new_width = max(1, round(width * scale))
    new_height = max(1, round(height * scale))

    logger.debug("Fitting %dx%d image into %dx%d canvas", width, height, size, size)

    resized = img.resize((new_width, new_height), Image.Resampling.LANCZOS)
    canvas = Image.new("RGBA", (size, size), tuple(background))
    canvas.paste(resized, (0, size - new_height))
    return canvas


def _is_pil_image(obj: Any) -> bool:
    try:
        from PIL import Image
    except ImportError:
        return False
    return isinstance(obj, Image.Image)


def _require_pil():
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for image loading. "
            "Install with: pip install Pillow"
        ) from e
    return Image
