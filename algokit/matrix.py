"""Grid puzzles: spiral traversal and sudoku validation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def spiral_order(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Elements of ``matrix`` in clockwise spiral order from the top-left corner."""
    rows = [list(row) for row in matrix]
    order: list[T] = []
    while rows:
        order.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return order


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """True if no digit repeats in any row, column or 3x3 box; ``.`` marks an empty cell."""
    seen: set[tuple] = set()
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == ".":
                continue
            keys = (("row", r, cell), ("col", c, cell), ("box", r // 3, c // 3, cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True