# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Rectigraph -- Draw raster images as graphing-calculator regions.

Compresses pixels into same-color rectangles and writes each one as a
boolean region expression (``xmin <= x <= xmax`` restricted to
``ymin <= y <= ymax``) that a graphing calculator fills in.

Quick start::

    from rectigraph import image_to_graph, to_form_data, generate_graph_hash

    doc = image_to_graph("image.png", size=125)
    doc.to_json()                                   # calc_state JSON
    to_form_data(doc, generate_graph_hash(), thumbnail="image.png")
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from rectigraph.errors import (
    DimensionMismatchError,
    InvalidColorError,
    InvalidIdError,
    RectigraphError,
)
from rectigraph.raster import CompressionMode, compress, image_to_graph, quantize
from rectigraph.runtime import (
    build_document,
    generate_graph_hash,
    to_calc_state,
    to_form_data,
)
from rectigraph.schema import Expression, GraphDocument, Rectangle, Viewport
from rectigraph.synthesis import round1, rgb_to_hex, synthesize

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "image_to_graph",
    "quantize",
    "compress",
    "CompressionMode",
    "synthesize",
    "build_document",
    # Delivery
    "to_calc_state",
    "to_form_data",
    "generate_graph_hash",
    # Utilities
    "round1",
    "rgb_to_hex",
    # Types
    "Rectangle",
    "Expression",
    "Viewport",
    "GraphDocument",
    # Errors
    "RectigraphError",
    "InvalidColorError",
    "InvalidIdError",
    "DimensionMismatchError",
    # Version
    "__version__",
]
