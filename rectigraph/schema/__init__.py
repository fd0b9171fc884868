# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Schema definitions for rectangles, expressions and graph documents.

All types in this module are immutable (frozen dataclasses).
"""

from rectigraph.schema.graph_document import (
    CALC_STATE_VERSION,
    EXPRESSION_TYPE,
    FILL_OPACITY,
    LINE_OPACITY,
    LINE_WIDTH,
    Expression,
    GraphDocument,
    Rectangle,
    Viewport,
)

__all__ = [
    # Constants
    "CALC_STATE_VERSION",
    "EXPRESSION_TYPE",
    "FILL_OPACITY",
    "LINE_OPACITY",
    "LINE_WIDTH",
    # Compression output
    "Rectangle",
    # Calculator types
    "Expression",
    "Viewport",
    # Top-level container
    "GraphDocument",
]
