from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from queens.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    CONTROL_BUTTON_GAP,
    CONTROL_BUTTON_WIDTH,
    MIN_TILE_SIZE,
    SIDE_GAP,
    THUMBNAIL_CELL,
    THUMBNAIL_GAP,
    TOP_MARGIN,
)


@dataclass(slots=True)
class BoardGeometry:
    """Screen placement of an N x N board. Row 0 is drawn at the top."""
    size: int
    tile_size: int
    left: float
    bottom: float

    @property
    def width(self) -> float:
        return self.tile_size * self.size

    @property
    def top(self) -> float:
        return self.bottom + self.width

    @property
    def right(self) -> float:
        return self.left + self.width

    def cell_center(self, row: int, col: int) -> Tuple[float, float]:
        x = self.left + col * self.tile_size + self.tile_size / 2
        y = self.bottom + (self.size - 1 - row) * self.tile_size + self.tile_size / 2
        return x, y


def compute_board_geometry(window_width: int, window_height: int, size: int) -> BoardGeometry:
    """Fit the board into the left part of the window above the control bar."""
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - TOP_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / size, max_board_h / size))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    free_h = window_height - BOTTOM_MARGIN - TOP_MARGIN - tile_size * size
    bottom = BOTTOM_MARGIN + max(0.0, free_h / 2)
    return BoardGeometry(size=size, tile_size=tile_size, left=float(SIDE_GAP), bottom=float(bottom))


def compute_control_positions(count: int, center_x: float, y: float) -> List[Tuple[float, float]]:
    """Centres for ``count`` buttons laid out in one row around ``center_x``."""
    if count <= 0:
        return []
    step = CONTROL_BUTTON_WIDTH + CONTROL_BUTTON_GAP
    first = center_x - step * (count - 1) / 2
    return [(first + i * step, y) for i in range(count)]


def compute_thumbnail_layout(
    count: int,
    size: int,
    area_left: float,
    area_top: float,
    area_width: float,
    *,
    cell: int = THUMBNAIL_CELL,
    gap: int = THUMBNAIL_GAP,
) -> List[Tuple[float, float]]:
    """Top-left corners of solution thumbnails, filled row by row.

    At least one thumbnail goes on each row even if the area is narrower than it.
    """
    thumb = cell * size
    per_row = max(1, int((area_width + gap) // (thumb + gap)))
    positions: List[Tuple[float, float]] = []
    for index in range(count):
        r, c = divmod(index, per_row)
        positions.append((area_left + c * (thumb + gap), area_top - r * (thumb + gap)))
    return positions
