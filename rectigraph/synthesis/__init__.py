# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""Rectangle → calculator expression synthesis."""

from rectigraph.synthesis.coordinates import PIXEL_SCALE, GraphBounds, round1, to_graph_bounds
from rectigraph.synthesis.expressions import (
    region_latex,
    rgb_to_hex,
    synthesize,
    wave_expressions,
)

__all__ = [
    "synthesize",
    "rgb_to_hex",
    "region_latex",
    "wave_expressions",
    "round1",
    "to_graph_bounds",
    "GraphBounds",
    "PIXEL_SCALE",
]
