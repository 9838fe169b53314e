# board.py
# Rectangular board geometry, cell <-> bit index maps

from __future__ import annotations

from typing import Iterable

import config

BOARD_ROWS = config.PENTOMINO_HEIGHT
BOARD_COLS = config.PENTOMINO_WIDTH

EMPTY = "-"


def all_cells(rows: int = BOARD_ROWS, cols: int = BOARD_COLS) -> list[tuple[int, int]]:
    return [(r, c) for r in range(rows) for c in range(cols)]


def cell_bit(cell: tuple[int, int], cols: int = BOARD_COLS) -> int:
    r, c = cell
    return r * cols + c


def cells_mask(cells: Iterable[tuple[int, int]], cols: int = BOARD_COLS) -> int:
    mask = 0
    for cell in cells:
        mask |= 1 << cell_bit(cell, cols)
    return mask


def mask_cells(mask: int, rows: int = BOARD_ROWS, cols: int = BOARD_COLS) -> list[tuple[int, int]]:
    return [(p // cols, p % cols) for p in range(rows * cols) if mask >> p & 1]


def render_masks(
    masks: Iterable[tuple[str, int]],
    rows: int = BOARD_ROWS,
    cols: int = BOARD_COLS,
) -> list[str]:
    """Paint (label, bit-board) pairs onto a text board, one string per board row."""
    text = [EMPTY] * (rows * cols)
    for label, mask in masks:
        for p in range(rows * cols):
            if mask >> p & 1:
                text[p] = label
    return ["".join(text[r * cols:(r + 1) * cols]) for r in range(rows)]
