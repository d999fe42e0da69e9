from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from queens.constants import (
    CURRENT_TINT,
    DARK_CELL,
    LIGHT_CELL,
    QUEEN_COLOR,
    QUEEN_GLYPH,
    SAFE_TINT,
    THUMBNAIL_CELL,
    UNSAFE_TINT,
)

if TYPE_CHECKING:
    from queens.components.board_view import BoardView
    from queens.ui.layout import BoardGeometry

HIGHLIGHT_TINTS = {
    'current': CURRENT_TINT,
    'safe': SAFE_TINT,
    'unsafe': UNSAFE_TINT,
}


def cell_color(row: int, col: int) -> tuple[int, int, int]:
    return LIGHT_CELL if (row + col) % 2 == 0 else DARK_CELL


class BoardRenderer:
    """Draws the live board and the thumbnails of found solutions."""

    def __init__(self, outline_width: int = 4):
        self._outline_width = outline_width

    def render(self, arcade, view: BoardView, geometry: BoardGeometry) -> None:
        tile = geometry.tile_size
        for row in range(view.size):
            for col in range(view.size):
                cx, cy = geometry.cell_center(row, col)
                arcade.draw_lbwh_rectangle_filled(cx - tile / 2, cy - tile / 2, tile, tile, cell_color(row, col))

        highlight = view.highlight
        if highlight is not None and 0 <= highlight.row < view.size:
            tint = HIGHLIGHT_TINTS.get(highlight.kind, CURRENT_TINT)
            cx, cy = geometry.cell_center(highlight.row, highlight.col)
            r, g, b = tint
            arcade.draw_lbwh_rectangle_filled(cx - tile / 2, cy - tile / 2, tile, tile, (r, g, b, 110))
            arcade.draw_lbwh_rectangle_outline(
                cx - tile / 2, cy - tile / 2, tile, tile, tint, border_width=self._outline_width
            )

        # Queens go last so they sit on top of the highlight.
        for row in range(view.size):
            for col in range(view.size):
                if not view.has_queen(row, col):
                    continue
                cx, cy = geometry.cell_center(row, col)
                arcade.draw_text(
                    QUEEN_GLYPH,
                    cx,
                    cy,
                    QUEEN_COLOR,
                    tile * 0.55,
                    anchor_x="center",
                    anchor_y="center",
                )

    def render_thumbnail(self, arcade, snapshot: Sequence[int], left: float, top: float) -> None:
        size = len(snapshot)
        cell = THUMBNAIL_CELL
        for row in range(size):
            for col in range(size):
                bottom = top - (row + 1) * cell
                color = QUEEN_COLOR if snapshot[row] == col else cell_color(row, col)
                arcade.draw_lbwh_rectangle_filled(left + col * cell, bottom, cell, cell, color)
