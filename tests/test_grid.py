# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""Tests for pixel grid normalization and image loading."""

import numpy as np
import pytest
from PIL import Image

from rectigraph import DimensionMismatchError, InvalidColorError
from rectigraph.raster.grid import (
    DEFAULT_BACKGROUND,
    as_pixel_grid,
    empty_mask,
    flip_rows,
    load_grid,
)


def _save_png(path, rgba, width, height):
    Image.new("RGBA", (width, height), rgba).save(path)
    return path


class TestAsPixelGrid:

    def test_nested_lists(self):
        grid = as_pixel_grid([[(1, 2, 3, 4), (5, 6, 7, 8)]])
        assert grid.shape == (1, 2, 4)
        assert grid.dtype == np.int64

    def test_rgb_array_gets_opaque_alpha(self):
        grid = as_pixel_grid(np.zeros((2, 3, 3), dtype=np.uint8))
        assert grid.shape == (2, 3, 4)
        assert (grid[..., 3] == 255).all()

    def test_returns_copy(self):
        src = np.ones((2, 2, 4), dtype=np.int64)
        grid = as_pixel_grid(src)
        grid[0, 0, 0] = 99
        assert src[0, 0, 0] == 1

    def test_empty_list(self):
        assert as_pixel_grid([]).shape == (0, 0, 4)

    def test_rows_without_pixels(self):
        assert as_pixel_grid([[], []]).shape == (2, 0, 4)

    def test_ragged_rows(self):
        with pytest.raises(DimensionMismatchError, match="equal length"):
            as_pixel_grid([[(1, 1, 1, 1), (1, 1, 1, 1)], [(1, 1, 1, 1)]])

    def test_ragged_pixels(self):
        with pytest.raises(DimensionMismatchError, match="channel count"):
            as_pixel_grid([[(1, 1, 1, 1), (1, 1, 1)]])

    def test_float_channels(self):
        with pytest.raises(InvalidColorError, match="integer"):
            as_pixel_grid(np.zeros((2, 2, 4), dtype=np.float32))

    def test_non_numeric_channels(self):
        with pytest.raises(InvalidColorError):
            as_pixel_grid([[(1, "x", 1, 1)]])

    def test_negative_channels(self):
        with pytest.raises(InvalidColorError, match="non-negative"):
            as_pixel_grid([[(1, -1, 1, 1)]])

    def test_two_dimensional(self):
        with pytest.raises(ValueError, match="Expected \\(H, W, 4\\)"):
            as_pixel_grid(np.zeros((4, 4), dtype=np.uint8))

    @pytest.mark.parametrize("grid", [[[1, 2, 3]], [1, 2], [[1], [2]], ["ab"]])
    def test_nested_list_not_three_dimensional(self, grid):
        with pytest.raises(ValueError, match="Expected \\(H, W, 4\\)"):
            as_pixel_grid(grid)

    def test_wrong_channel_count(self):
        with pytest.raises(ValueError, match="3 or 4 channels"):
            as_pixel_grid(np.zeros((2, 2, 2), dtype=np.uint8))

    def test_invalid_type(self):
        with pytest.raises(TypeError, match="Expected numpy array or nested sequence"):
            as_pixel_grid(42)


class TestEmptiness:

    def test_empty_mask(self):
        grid = as_pixel_grid([[(0, 0, 0, 0), (0, 0, 0, 255), (255, 255, 255, 0)]])
        assert empty_mask(grid).tolist() == [[True, False, False]]

    def test_flip_rows_copies(self):
        grid = as_pixel_grid([[(1, 1, 1, 1)], [(2, 2, 2, 2)]])
        flipped = flip_rows(grid)
        assert flipped[0, 0, 0] == 2
        flipped[0, 0, 0] = 9
        assert grid[1, 0, 0] == 2


class TestLoadGrid:

    def test_native_size_from_file(self, tmp_path):
        path = _save_png(tmp_path / "red.png", (255, 0, 0, 255), 3, 2)
        grid = load_grid(path)
        assert grid.shape == (2, 3, 4)
        assert (grid == [255, 0, 0, 255]).all()

    def test_string_path(self, tmp_path):
        path = _save_png(tmp_path / "red.png", (255, 0, 0, 255), 3, 2)
        assert load_grid(str(path)).shape == (2, 3, 4)

    def test_pil_image(self):
        img = Image.new("RGB", (4, 1), (1, 2, 3))
        grid = load_grid(img)
        assert grid.shape == (1, 4, 4)
        assert grid[0, 0].tolist() == [1, 2, 3, 255]

    def test_array_passthrough(self):
        pixels = np.full((2, 2, 4), 7, dtype=np.uint8)
        np.testing.assert_array_equal(load_grid(pixels), pixels)

    def test_fit_anchors_left_bottom(self, tmp_path):
        # 4 wide x 2 tall, scaled x2 into an 8x8 canvas: occupies rows 4-7
        path = _save_png(tmp_path / "wide.png", (255, 0, 0, 255), 4, 2)
        grid = load_grid(path, size=8)

        assert grid.shape == (8, 8, 4)
        assert (grid[:4] == DEFAULT_BACKGROUND).all()
        assert (grid[4:, :, 3] >= 250).all()
        assert (grid[4:, :, 0] >= 250).all()

    def test_fit_tall_image_pads_right(self, tmp_path):
        path = _save_png(tmp_path / "tall.png", (0, 0, 255, 255), 1, 4)
        grid = load_grid(path, size=4, background=(0, 0, 0, 0))

        assert grid.shape == (4, 4, 4)
        assert (grid[:, 1:] == 0).all()
        assert (grid[:, 0, 3] == 255).all()

    def test_fit_array_input(self):
        pixels = np.full((1, 1, 4), [9, 9, 9, 255], dtype=np.uint8)
        grid = load_grid(pixels, size=2)
        assert grid.shape == (2, 2, 4)

    def test_negative_size(self):
        with pytest.raises(ValueError, match="size must be >= 0"):
            load_grid([[(1, 1, 1, 1)]], size=-1)
