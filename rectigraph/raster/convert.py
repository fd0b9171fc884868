# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Main conversion API.

This is the primary entry point: image in, graph document out.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional, Union

from numpy.typing import NDArray

from rectigraph.raster.compress import CompressionMode, compress
from rectigraph.raster.grid import DEFAULT_BACKGROUND, load_grid
from rectigraph.raster.quantize import DEFAULT_PRECISION, quantize
from rectigraph.runtime.serializers.document import build_document
from rectigraph.schema import GraphDocument, Viewport
from rectigraph.synthesis import synthesize

logger = logging.getLogger(__name__)


def image_to_graph(
    image: Union[str, Path, NDArray[Any], Sequence, Any],
    *,
    size: int = 0,  # 0 = keep native dimensions
    background: tuple[int, int, int, int] = DEFAULT_BACKGROUND,
    quantize_colors: bool = False,
    precision: int = DEFAULT_PRECISION,
    clamp: bool = True,
    mode: CompressionMode = CompressionMode.LEGACY,
    viewport: Optional[Viewport] = None,
    random_seed: Optional[str] = None,
) -> GraphDocument:
    """
    Convert an image into a graph document of colored rectangles.

    Pipeline: load → (quantize) → compress → synthesize → document.

    Args:
        image: One of:
            - Path to image file (str or Path)
            - A PIL image
            - An RGBA pixel grid (NumPy array or nested sequences)
        size: Fit the image inside a ``size x size`` canvas anchored at the
            left-bottom corner. 0 (default) keeps native dimensions.
            Every pixel becomes up to one expression, so large images make
            very large documents; 125 is a practical size.
        background: RGBA padding for the fitted canvas.
        quantize_colors: Round RGB channels before compression so that
            near-identical colors merge (default: False).
        precision: Quantization granularity (default: 4).
        clamp: Saturate quantized channels at 255 (default: True).
        mode: Rectangle decomposition strategy (default: LEGACY).
        viewport: Visible graph window (default: service portrait view).
        random_seed: Seed stored with the graph (default: random).

    Returns:
        GraphDocument whose expression ids follow compressor order.

    Example:
        >>> from rectigraph import image_to_graph
        >>> doc = image_to_graph("logo.png", size=125, quantize_colors=True)
        >>> len(doc.expressions)
        412
    """
    pixels = load_grid(image, size=size, background=background)
    height, width = pixels.shape[:2]

    if quantize_colors:
        pixels = quantize(pixels, precision, clamp=clamp)

    rectangles = compress(pixels, mode)
    expressions = synthesize(rectangles)

    logger.info(
        "Converted %dx%d image into %d expressions (%s%s)",
        width,
        height,
        len(expressions),
        mode.value,
        f", quantized at {precision}" if quantize_colors else "",
    )

    return build_document(expressions, viewport=viewport, random_seed=random_seed)
