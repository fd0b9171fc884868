# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Pixel space → graph space conversion.

One pixel spans 0.1 graph units. Every graph coordinate is rounded to one
decimal with round-half-up, so ``round1(0.05) == 0.1`` and
``round1(0.15) == 0.2`` (Python's built-in ``round`` would give 0.0 and
0.2 here).
"""

from __future__ import annotations

import math
from typing import NamedTuple

from rectigraph.schema import Rectangle

# Graph units per pixel
PIXEL_SCALE = 0.1


class GraphBounds(NamedTuple):
    """Inclusive graph-space bounds of a rectangle."""
    xmin: float
    xmax: float
    ymin: float
    ymax: float


def round1(value: float) -> float:
    """Round to one decimal place, halves rounding up."""
    return math.floor(value * 10 + 0.5) / 10


def to_graph_bounds(rect: Rectangle, scale: float = PIXEL_SCALE) -> GraphBounds:
    """Convert a pixel-space rectangle to rounded graph-space bounds."""
    return GraphBounds(
        xmin=round1(rect.x * scale),
        xmax=round1((rect.x + rect.width) * scale),
        ymin=round1(rect.y * scale),
        ymax=round1((rect.y + rect.height) * scale),
    )


def format_number(value: float) -> str:
    """
    Format a coordinate the way the calculator's parser expects it.

    Integral values drop the decimal point (``0``, ``3``); everything else
    uses the shortest round-trip form (``0.2``, ``12.5``).
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
