# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""Tests for rectangle compression (legacy greedy, disjoint, per-pixel)."""

import numpy as np
import pytest

from rectigraph import DimensionMismatchError, Rectangle
from rectigraph.raster.compress import CompressionMode, compress, pixel_rectangles


EMPTY = (0, 0, 0, 0)
RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
TEAL = (10, 20, 30, 255)


def _uniform_grid(color, height, width):
    return [[color] * width for _ in range(height)]


def _random_grid(seed, height=12, width=15):
    """Small-palette random grid with some empty cells, so runs actually form."""
    rng = np.random.default_rng(seed)
    palette = np.array([EMPTY, RED, BLUE, TEAL])
    return palette[rng.integers(0, len(palette), size=(height, width))]


class TestLegacyBasics:

    def test_empty_grid(self):
        assert compress([]) == []

    def test_all_empty_grid(self):
        assert compress(np.zeros((4, 5, 4), dtype=np.uint8)) == []

    def test_isolated_pixel_is_dropped(self):
        """Single pixels with no same-color neighbor are lost on purpose."""
        grid = _uniform_grid(EMPTY, 3, 3)
        grid[1][1] = RED
        assert compress(grid) == []

    def test_horizontal_pair(self):
        assert compress([[TEAL, TEAL]]) == [
            Rectangle(x=0, y=0, width=2, height=1, color=TEAL),
        ]

    def test_uniform_2x2_overlaps(self):
        """No cell is consumed: later anchors re-cover earlier rectangles."""
        assert compress(_uniform_grid(TEAL, 2, 2)) == [
            Rectangle(x=0, y=0, width=2, height=2, color=TEAL),
            Rectangle(x=1, y=0, width=1, height=2, color=TEAL),
            Rectangle(x=0, y=1, width=2, height=1, color=TEAL),
        ]

    def test_vertical_column(self):
        grid = [[RED], [RED], [RED]]
        assert compress(grid) == [
            Rectangle(x=0, y=0, width=1, height=3, color=RED),
            Rectangle(x=0, y=1, width=1, height=2, color=RED),
        ]

    def test_height_checks_anchor_column_only(self):
        # Stored top row first: bottom row is all red, top-right is blue
        grid = [
            [RED, BLUE],
            [RED, RED],
        ]
        assert compress(grid) == [
            Rectangle(x=0, y=0, width=2, height=2, color=RED),
        ]

    def test_empty_cell_breaks_run(self):
        assert compress([[RED, EMPTY, RED]]) == []

    def test_alpha_difference_breaks_run(self):
        assert compress([[RED, (255, 0, 0, 128)]]) == []

    def test_opaque_black_is_not_empty(self):
        black = (0, 0, 0, 255)
        assert compress([[black, black]]) == [
            Rectangle(x=0, y=0, width=2, height=1, color=black),
        ]

    def test_transparent_white_is_not_empty(self):
        clear = (255, 255, 255, 0)
        assert len(compress([[clear, clear]])) == 1


class TestFlip:

    def test_first_stored_row_is_visual_top(self):
        grid = [
            [RED, RED],    # top
            [BLUE, BLUE],  # bottom
        ]
        assert compress(grid) == [
            Rectangle(x=0, y=0, width=2, height=1, color=BLUE),
            Rectangle(x=0, y=1, width=2, height=1, color=RED),
        ]

    def test_array_input_not_mutated(self):
        grid = np.array([[RED, RED], [BLUE, BLUE]], dtype=np.uint8)
        before = grid.copy()
        compress(grid)
        np.testing.assert_array_equal(grid, before)

    def test_list_input_not_mutated(self):
        grid = [[RED, RED], [BLUE, BLUE]]
        compress(grid)
        assert grid == [[RED, RED], [BLUE, BLUE]]

    def test_repeated_calls_agree(self):
        grid = _random_grid(3)
        assert compress(grid) == compress(grid)


class TestDisjoint:

    def test_uniform_2x2_is_one_rectangle(self):
        assert compress(_uniform_grid(TEAL, 2, 2), CompressionMode.DISJOINT) == [
            Rectangle(x=0, y=0, width=2, height=2, color=TEAL),
        ]

    def test_height_requires_whole_run(self):
        grid = [
            [RED, BLUE],
            [RED, RED],
        ]
        assert compress(grid, CompressionMode.DISJOINT) == [
            Rectangle(x=0, y=0, width=2, height=1, color=RED),
        ]

    def test_isolated_pixel_still_dropped(self):
        grid = _uniform_grid(EMPTY, 3, 3)
        grid[1][1] = RED
        assert compress(grid, CompressionMode.DISJOINT) == []

    @pytest.mark.parametrize("seed", range(5))
    def test_no_overlap_and_uniform_color(self, seed):
        grid = _random_grid(seed)
        flipped = np.asarray(grid)[::-1]
        coverage = np.zeros(flipped.shape[:2], dtype=int)

        for rect in compress(grid, CompressionMode.DISJOINT):
            block = flipped[rect.y:rect.y + rect.height, rect.x:rect.x + rect.width]
            assert (block == np.array(rect.color)).all()
            coverage[rect.y:rect.y + rect.height, rect.x:rect.x + rect.width] += 1

        assert coverage.max() <= 1


class TestPixels:

    def test_one_rectangle_per_non_empty_pixel(self):
        grid = [
            [TEAL, EMPTY],
            [EMPTY, RED],
        ]
        assert pixel_rectangles(grid) == [
            Rectangle(x=1, y=0, width=1, height=1, color=RED),
            Rectangle(x=0, y=1, width=1, height=1, color=TEAL),
        ]

    def test_nothing_dropped(self):
        grid = _random_grid(7)
        non_empty = int((np.asarray(grid).sum(axis=2) != 0).sum())
        assert len(compress(grid, CompressionMode.PIXELS)) == non_empty


class TestInvariants:

    @pytest.mark.parametrize("mode", list(CompressionMode))
    @pytest.mark.parametrize("seed", range(5))
    def test_rectangles_within_bounds(self, mode, seed):
        grid = _random_grid(seed)
        height, width = np.asarray(grid).shape[:2]
        for rect in compress(grid, mode):
            assert rect.width >= 1 and rect.height >= 1
            assert 0 <= rect.x and rect.x + rect.width <= width
            assert 0 <= rect.y and rect.y + rect.height <= height

    @pytest.mark.parametrize("seed", range(5))
    def test_color_matches_anchor(self, seed):
        grid = _random_grid(seed)
        flipped = np.asarray(grid)[::-1]
        for rect in compress(grid):
            assert rect.color == tuple(flipped[rect.y, rect.x])
            assert sum(rect.color) > 0

    def test_colors_are_plain_ints(self):
        rect = compress(np.array([[TEAL, TEAL]], dtype=np.uint8))[0]
        assert all(type(c) is int for c in rect.color)


class TestInputValidation:

    def test_ragged_rows_raise(self):
        with pytest.raises(DimensionMismatchError):
            compress([[RED, RED], [RED]])

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError, match="Unknown compression mode"):
            compress([[RED, RED]], mode="fast")

    def test_flat_nested_list_raises_value_error(self):
        with pytest.raises(ValueError, match="Expected \\(H, W, 4\\)"):
            compress([[1, 2, 3]])
