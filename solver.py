# solver.py
# Combines everything; tiles a rectangle with the twelve pentominoes

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

import config
from board import BOARD_ROWS, BOARD_COLS, all_cells, mask_cells, render_masks
from dlx import Matrix, build_matrix, solve, search
from pieces import PIECE_NAMES, all_piece_orientations
from placements import generate_placements, Placement
from sinks import CollectSink, LimitSink
from text_format import encode_row

logger = logging.getLogger(__name__)


def _cover_rows(
    rows: int,
    cols: int,
    fixed_piece: Optional[str],
) -> tuple[List[str], List[Tuple[str, List[int]]], Dict[str, Placement]]:
    if rows * cols != 5 * len(PIECE_NAMES):
        raise ValueError(f"a {rows}x{cols} board cannot hold exactly twelve pentominoes")

    piece_orients = all_piece_orientations(fixed=fixed_piece or None)
    placements = generate_placements(piece_orients, rows, cols)
    logger.info("Generated %d placements for a %dx%d board", len(placements), rows, cols)

    # Column mapping:
    # First piece columns, then cell columns.
    num_pieces = len(PIECE_NAMES)
    piece_index: Dict[str, int] = {name: idx for idx, name in enumerate(PIECE_NAMES)}
    cells_sorted = all_cells(rows, cols)
    cell_index: Dict[Tuple[int, int], int] = {
        coord: num_pieces + i for i, coord in enumerate(cells_sorted)
    }
    column_labels = PIECE_NAMES + [f"({r},{c})" for r, c in cells_sorted]

    # Row names are "<piece>-<n>", n counting that piece's placements.
    by_name: Dict[str, Placement] = {}
    matrix_rows: List[Tuple[str, List[int]]] = []
    counters: Dict[str, int] = {name: 0 for name in PIECE_NAMES}
    for placement in placements:
        name = f"{placement.piece}-{counters[placement.piece]}"
        counters[placement.piece] += 1
        by_name[name] = placement
        cols_for_row = [piece_index[placement.piece]]
        cols_for_row.extend(cell_index[c] for c in mask_cells(placement.mask, rows, cols))
        matrix_rows.append((name, cols_for_row))

    return column_labels, matrix_rows, by_name


def build_exact_cover(
    rows: int = BOARD_ROWS,
    cols: int = BOARD_COLS,
    fixed_piece: Optional[str] = config.PENTOMINO_FIXED_PIECE,
) -> tuple[Matrix, Dict[str, Placement]]:
    column_labels, matrix_rows, by_name = _cover_rows(rows, cols, fixed_piece)
    return build_matrix(column_labels, matrix_rows), by_name


def problem_text(
    rows: int = BOARD_ROWS,
    cols: int = BOARD_COLS,
    fixed_piece: Optional[str] = config.PENTOMINO_FIXED_PIECE,
) -> str:
    """The board as "<name> <bits>" lines: twelve piece bits, then one bit per cell."""
    column_labels, matrix_rows, _ = _cover_rows(rows, cols, fixed_piece)
    width = len(column_labels)
    return "".join(encode_row(name, columns, width) + "\n" for name, columns in matrix_rows)


def solve_board(
    rows: int = BOARD_ROWS,
    cols: int = BOARD_COLS,
    limit: int = config.SOLUTION_LIMIT,
    fixed_piece: Optional[str] = config.PENTOMINO_FIXED_PIECE,
) -> List[List[Placement]]:
    matrix, by_name = build_exact_cover(rows, cols, fixed_piece)
    collected = CollectSink()
    sink = LimitSink(limit, collected) if limit > 0 else collected
    result = search(matrix, sink)
    logger.info(
        "Found %d solutions%s", result.solutions, " (stopped at limit)" if result.cancelled else ""
    )
    return [[by_name[name] for name in sol] for sol in collected.solutions]


def count_solutions(
    rows: int = BOARD_ROWS,
    cols: int = BOARD_COLS,
    fixed_piece: Optional[str] = config.PENTOMINO_FIXED_PIECE,
) -> int:
    matrix, _ = build_exact_cover(rows, cols, fixed_piece)
    return sum(1 for _ in solve(matrix))


def render_solution(solution: List[Placement], rows: int = BOARD_ROWS, cols: int = BOARD_COLS) -> List[str]:
    return render_masks(((p.piece, p.mask) for p in solution), rows, cols)
