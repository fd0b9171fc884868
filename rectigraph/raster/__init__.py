# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Raster core for Rectigraph.

Deterministic pixel-grid operations: loading, quantization and rectangle
compression. All functions copy their input; none mutate it.
"""

from rectigraph.raster.compress import CompressionMode, compress, pixel_rectangles
from rectigraph.raster.convert import image_to_graph
from rectigraph.raster.grid import as_pixel_grid, empty_mask, flip_rows, load_grid
from rectigraph.raster.quantize import quantize

__all__ = [
    "image_to_graph",
    "compress",
    "pixel_rectangles",
    "CompressionMode",
    "quantize",
    "load_grid",
    "as_pixel_grid",
    "empty_mask",
    "flip_rows",
]
