# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Graph document schema.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same pixels → same rectangles → same expressions
- Serializable: JSON-ready for the graphing service's saved-state format

Coordinate systems:
    Pixel space: integer cells, x left→right, y bottom→top (the grid is
    flipped before scanning, so row 0 is the visual bottom).
    Graph space: 0.1 units per pixel, rounded to one decimal.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# Constants
# =============================================================================

# Saved-state format version understood by the graphing service
CALC_STATE_VERSION = 9

# Fixed styling fields carried by every region expression
FILL_OPACITY = "1"
LINE_OPACITY = "1"
LINE_WIDTH = "2"

EXPRESSION_TYPE = "expression"


# =============================================================================
# Compression Output
# =============================================================================


@dataclass(frozen=True, slots=True)
class Rectangle:
    """
    An axis-aligned, uniformly colored run of pixels.

    Anchored at the pixel where growth began. Produced by the region
    compressor and consumed by the expression synthesizer.

    Attributes:
        x: Anchor column (0 = left)
        y: Anchor row in the flipped grid (0 = visual bottom)
        width: Cells covered to the right, anchor included (>= 1)
        height: Cells covered upward, anchor included (>= 1)
        color: Anchor pixel value, 3 or 4 integer channels
    """
    x: int
    y: int
    width: int
    height: int
    color: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate geometry."""
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Rectangle anchor must be non-negative, got ({self.x}, {self.y})")
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Rectangle size must be at least 1x1, got {self.width}x{self.height}"
            )

    @property
    def area(self) -> int:
        """Number of pixels covered."""
        return self.width * self.height

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "color": list(self.color),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Rectangle:
        """Deserialize from dictionary."""
        return cls(
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
            color=tuple(data["color"]),
        )


# =============================================================================
# Expressions
# =============================================================================


@dataclass(frozen=True, slots=True)
class Expression:
    """
    A single graphing-calculator expression.

    Attributes:
        id: Position in the expression list
        color: ``#rrggbb`` lowercase hex (never carries alpha)
        region: Boolean region predicate in the calculator's LaTeX dialect
        fill_opacity, line_opacity, line_width: Fixed styling strings
    """
    id: int
    color: str
    region: str
    fill_opacity: str = FILL_OPACITY
    line_opacity: str = LINE_OPACITY
    line_width: str = LINE_WIDTH

    def to_dict(self) -> dict:
        """Serialize to the calculator's expression shape."""
        return {
            "type": EXPRESSION_TYPE,
            "id": self.id,
            "color": self.color,
            "latex": self.region,
            "fillOpacity": self.fill_opacity,
            "lineOpacity": self.line_opacity,
            "lineWidth": self.line_width,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Expression:
        """Deserialize from the calculator's expression shape."""
        return cls(
            id=data["id"],
            color=data["color"],
            region=data["latex"],
            fill_opacity=data.get("fillOpacity", FILL_OPACITY),
            line_opacity=data.get("lineOpacity", LINE_OPACITY),
            line_width=data.get("lineWidth", LINE_WIDTH),
        )


# =============================================================================
# Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Viewport:
    """Visible graph-space window. Defaults match the service's portrait view."""
    xmin: float = -100
    ymin: float = -170.88827258320127
    xmax: float = 100
    ymax: float = 170.88827258320127

    def __post_init__(self) -> None:
        if self.xmin >= self.xmax or self.ymin >= self.ymax:
            raise ValueError(
                f"Viewport bounds must be increasing, got "
                f"x=[{self.xmin}, {self.xmax}] y=[{self.ymin}, {self.ymax}]"
            )

    def to_dict(self) -> dict:
        return {"xmin": self.xmin, "ymin": self.ymin, "xmax": self.xmax, "ymax": self.ymax}

    @classmethod
    def from_dict(cls, data: dict) -> Viewport:
        return cls(
            xmin=data["xmin"],
            ymin=data["ymin"],
            xmax=data["xmax"],
            ymax=data["ymax"],
        )


@dataclass(frozen=True, slots=True)
class GraphDocument:
    """
    Complete saved-state payload for the graphing service.

    Attributes:
        random_seed: 32 hex characters, opaque to us
        viewport: Visible window
        expressions: Ordered expressions; ids equal their positions
        version: Saved-state format version
    """
    random_seed: str
    viewport: Viewport = field(default_factory=Viewport)
    expressions: tuple[Expression, ...] = ()
    version: int = CALC_STATE_VERSION

    def to_dict(self) -> dict:
        """
        Serialize to the service's ``calc_state`` structure.

        Example output::

            {
              "version": 9,
              "randomSeed": "5d0b...",
              "graph": {"viewport": {"xmin": -100, ...}},
              "expressions": {"list": [{"type": "expression", ...}]}
            }
        """
        return {
            "version": self.version,
            "randomSeed": self.random_seed,
            "graph": {"viewport": self.viewport.to_dict()},
            "expressions": {"list": [e.to_dict() for e in self.expressions]},
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string (compact by default, as the service stores it)."""
        if indent is None:
            return json.dumps(self.to_dict(), separators=(",", ":"))
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> GraphDocument:
        """Deserialize from dictionary."""
        return cls(
            version=data.get("version", CALC_STATE_VERSION),
            random_seed=data["randomSeed"],
            viewport=Viewport.from_dict(data["graph"]["viewport"]),
            expressions=tuple(
                Expression.from_dict(e) for e in data["expressions"]["list"]
            ),
        )

    @classmethod
    def from_json(cls, json_str: str) -> GraphDocument:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
