from __future__ import annotations

from typing import Optional, Sequence


def format_board(columns: Sequence[Optional[int]], size: int | None = None, *, queen: str = "Q", empty: str = ".") -> str:
    """Render one row per line, ``queen`` where a column is assigned.

    ``columns`` may be a finished solution or a partial board with ``None``
    for unassigned rows.
    """
    size = len(columns) if size is None else size
    lines = []
    for row in range(size):
        col = columns[row] if row < len(columns) else None
        cells = [queen if col == c else empty for c in range(size)]
        lines.append(" ".join(cells))
    return "\n".join(lines)


def format_solution(index: int, snapshot: Sequence[int]) -> str:
    header = f"Solution {index + 1}: {tuple(snapshot)}"
    return f"{header}\n{format_board(snapshot)}"
