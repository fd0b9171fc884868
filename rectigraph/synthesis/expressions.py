# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Expression synthesis.

Maps each rectangle to a boolean region expression for the graphing
calculator. Expression ids are the rectangles' positions in the input,
so the compressor's scan order is preserved end to end.

Region syntax (single literal backslashes)::

    0\\le x\\le0.2\\left\\{0\\le y\\le0.2\\right\\}
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable
from typing import Any, Optional

import numpy as np

from rectigraph.errors import InvalidColorError
from rectigraph.schema import Expression, Rectangle
from rectigraph.synthesis.coordinates import (
    PIXEL_SCALE,
    GraphBounds,
    format_number,
    to_graph_bounds,
)

logger = logging.getLogger(__name__)

OPAQUE = 255


def synthesize(
    rectangles: Iterable[Rectangle],
    *,
    scale: float = PIXEL_SCALE,
) -> list[Expression]:
    """
    Build one region expression per rectangle.

    Args:
        rectangles: Rectangles in compressor order
        scale: Graph units per pixel (default 0.1)

    Returns:
        Expressions with ``id`` equal to the rectangle's index.

    Raises:
        InvalidColorError: A rectangle carries an invalid color. Nothing is
            returned for the other rectangles in that case.
    """
    expressions = [
        Expression(
            id=index,
            color=rgb_to_hex(rect.color),
            region=region_latex(to_graph_bounds(rect, scale)),
        )
        for index, rect in enumerate(rectangles)
    ]
    logger.debug("Synthesized %d expressions", len(expressions))
    return expressions


def region_latex(bounds: GraphBounds) -> str:
    """Encode ``xmin <= x <= xmax AND ymin <= y <= ymax`` in calculator LaTeX."""
    xmin, xmax, ymin, ymax = (format_number(v) for v in bounds)
    return f"{xmin}\\le x\\le{xmax}\\left\\{{{ymin}\\le y\\le{ymax}\\right\\}}"


def rgb_to_hex(color: Any) -> str:
    """
    Format an RGB or RGBA color as ``#rrggbb`` (lowercase, alpha dropped).

    Raises:
        InvalidColorError: Fewer than 3 or more than 4 channels, a
            non-numeric or fractional channel, or a channel outside 0-255.
    """
    r, g, b, _alpha = normalize_color(color)
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_color(color: Any) -> tuple[int, int, int, int]:
    """Validate a color and return it as an RGBA int tuple (alpha defaults to 255)."""
    try:
        channels = tuple(color)
    except TypeError:
        raise InvalidColorError(f"Color must be a sequence of channels, got {color!r}") from None

    if len(channels) < 3:
        raise InvalidColorError(f"Color is missing channels: {channels!r}")
    if len(channels) > 4:
        raise InvalidColorError(f"Color has too many channels: {channels!r}")

    values = tuple(_channel_value(c, channels) for c in channels)
    if len(values) == 3:
        values = values + (OPAQUE,)
    return values


def _channel_value(channel: Any, color: tuple) -> int:
    if isinstance(channel, (bool, np.bool_)) or not isinstance(channel, numbers.Real):
        raise InvalidColorError(f"Non-numeric channel {channel!r} in color {color!r}")

    as_float = float(channel)
    if not math.isfinite(as_float) or not as_float.is_integer():
        raise InvalidColorError(f"Channel {channel!r} in color {color!r} is not an integer")

    value = int(as_float)
    if not 0 <= value <= 255:
        raise InvalidColorError(f"Channel {value} in color {color!r} is outside 0-255")
    return value


# =============================================================================
# Demo curves
# =============================================================================


def wave_expressions(
    columns: int,
    rows: int,
    *,
    seed: Optional[int] = None,
) -> list[Expression]:
    """
    Generate a ``columns x rows`` family of implicit sine curves.

    Expression ``(i, j)`` is ``(i+1)y/x = sin((j+1)x^2 + y^2)`` with a random
    color. Useful as a quick way to populate a graph without an image.
    """
    if columns < 0 or rows < 0:
        raise ValueError(f"columns and rows must be >= 0, got {columns}x{rows}")

    rng = np.random.default_rng(seed)
    expressions = []
    for i in range(columns):
        for j in range(rows):
            expressions.append(Expression(
                id=len(expressions),
                color="#" + rng.bytes(3).hex(),
                region=f"\\frac{{{i + 1}y}}{{x}}=\\sin\\left({j + 1}x^{{2}}+y^{{2}}\\right)",
            ))
    return expressions
