"""Tests for the cell grid"""

import pytest
from pixart.config import PixelArtConfig
from pixart.grid import PixelGrid

BRUSH = 0x33CCBBFF
BG = 0xCCCCCCFF


@pytest.fixture
def grid() -> PixelGrid:
    return PixelGrid(PixelArtConfig())


def snapshot(grid: PixelGrid) -> list[int]:
    return grid.canvas.pixels()


class TestPixelGrid:
    def test_dimensions(self, grid: PixelGrid):
        assert (grid.grid_width, grid.grid_height) == (40, 30)
        assert len(grid.canvas.array) == 40 * 30

    def test_starts_with_background(self, grid: PixelGrid):
        assert all(color == BG for _, _, color in grid.cells())

    def test_paint_maps_pixels_to_cells(self, grid: PixelGrid):
        grid.paint(45, 61, BRUSH)

        assert grid.cell(2, 3) == BRUSH
        changed = [(c, r) for c, r, color in grid.cells() if color != BG]
        assert changed == [(2, 3)]

    def test_paint_does_not_touch_other_cells(self, grid: PixelGrid):
        grid.paint(0, 0, 0x11111111)
        grid.paint(20, 0, 0x22222222)
        grid.paint(0, 20, 0x33333333)

        assert grid.cell(0, 0) == 0x11111111
        assert grid.cell(1, 0) == 0x22222222
        assert grid.cell(0, 1) == 0x33333333

    @pytest.mark.parametrize(
        "x, y", [(-1, 0), (0, -1), (-20, -20), (800, 0), (0, 600), (10_000, 10_000)]
    )
    def test_paint_out_of_bounds_is_noop(self, grid: PixelGrid, x: int, y: int):
        grid.paint(5, 5, BRUSH)
        before = snapshot(grid)

        grid.paint(x, y, 0x12345678)

        assert snapshot(grid) == before

    def test_paint_is_idempotent(self, grid: PixelGrid):
        grid.paint(100, 100, BRUSH)
        once = snapshot(grid)
        grid.paint(100, 100, BRUSH)

        assert snapshot(grid) == once

    def test_last_pixel_paints_last_cell(self, grid: PixelGrid):
        grid.paint(799, 599, BRUSH)

        assert grid.cell(39, 29) == BRUSH

    def test_non_square_cells(self):
        grid = PixelGrid(
            PixelArtConfig(window_width=40, window_height=30, cell_width=10, cell_height=5)
        )

        grid.paint(15, 12, BRUSH)

        assert (grid.grid_width, grid.grid_height) == (4, 6)
        assert grid.cell(1, 2) == BRUSH

    def test_cells_are_row_major(self):
        grid = PixelGrid(
            PixelArtConfig(window_width=6, window_height=4, cell_width=2, cell_height=2)
        )

        assert [(c, r) for c, r, _ in grid.cells()] == [
            (0, 0),
            (1, 0),
            (2, 0),
            (0, 1),
            (1, 1),
            (2, 1),
        ]
