# placements.py
# Generate all valid piece placements on the board

from __future__ import annotations

from dataclasses import dataclass

from board import BOARD_ROWS, BOARD_COLS, cells_mask


@dataclass(frozen=True)
class Placement:
    piece: str
    cells: tuple[tuple[int, int], ...]  # board coordinates covered by this placement
    mask: int  # same cells as a bit-board, bit = row * cols + col


def generate_placements(
    piece_orientations: dict[str, list[set[tuple[int, int]]]],
    rows: int = BOARD_ROWS,
    cols: int = BOARD_COLS,
) -> list[Placement]:
    """Generate all placements of all pieces that fit inside the board."""
    placements: list[Placement] = []

    for piece_name, orientations in piece_orientations.items():
        seen: set[int] = set()
        for shape in orientations:
            max_r = max(r for r, _ in shape)
            max_c = max(c for _, c in shape)

            # Slide shape over the board
            for dr in range(rows - max_r):
                for dc in range(cols - max_c):
                    placed = tuple(sorted((r + dr, c + dc) for r, c in shape))
                    mask = cells_mask(placed, cols)
                    if mask in seen:
                        continue
                    seen.add(mask)
                    placements.append(Placement(piece=piece_name, cells=placed, mask=mask))

    return placements
