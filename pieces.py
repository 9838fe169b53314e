# pieces.py
# Pentomino definitions + rotations/flips

from __future__ import annotations

from typing import Iterable

# Canonical piece shapes as sets of (row, col)
PIECE_SHAPES: dict[str, set[tuple[int, int]]] = {
    "f": {(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)},
    "i": {(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)},
    "l": {(0, 0), (0, 1), (0, 2), (0, 3), (1, 3)},
    "n": {(0, 0), (0, 1), (1, 1), (1, 2), (1, 3)},
    "p": {(0, 0), (0, 1), (0, 2), (1, 1), (1, 2)},
    "t": {(0, 0), (0, 1), (0, 2), (1, 1), (2, 1)},
    "u": {(0, 0), (0, 2), (1, 0), (1, 1), (1, 2)},
    "v": {(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)},
    "w": {(0, 0), (1, 0), (1, 1), (2, 1), (2, 2)},
    "x": {(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)},
    "y": {(0, 0), (0, 1), (0, 2), (0, 3), (1, 1)},
    "z": {(0, 0), (0, 1), (1, 1), (2, 1), (2, 2)},
}

PIECE_NAMES: list[str] = sorted(PIECE_SHAPES)


def _normalize(shape: Iterable[tuple[int, int]]) -> frozenset[tuple[int, int]]:
    shape = list(shape)
    min_r = min(r for r, _ in shape)
    min_c = min(c for _, c in shape)
    return frozenset((r - min_r, c - min_c) for r, c in shape)


def _rotate90(shape: Iterable[tuple[int, int]]) -> set[tuple[int, int]]:
    # (r, c) -> (c, -r)
    return {(c, -r) for r, c in shape}


def _flip_horizontal(shape: Iterable[tuple[int, int]]) -> set[tuple[int, int]]:
    # (r, c) -> (r, -c)
    return {(r, -c) for r, c in shape}


def generate_orientations(shape: set[tuple[int, int]]) -> list[set[tuple[int, int]]]:
    """All unique rotations + horizontal flip orientations, normalized to (0,0)."""
    seen: set[frozenset[tuple[int, int]]] = set()
    result: list[set[tuple[int, int]]] = []

    variants = [shape]
    for _ in range(3):
        variants.append(_rotate90(variants[-1]))

    # Flips (flip base shape, then rotate)
    variants.append(_flip_horizontal(shape))
    for _ in range(3):
        variants.append(_rotate90(variants[-1]))

    for v in variants:
        norm = _normalize(v)
        if norm not in seen:
            seen.add(norm)
            result.append(set(norm))

    return result


def all_piece_orientations(fixed: str | None = None) -> dict[str, list[set[tuple[int, int]]]]:
    """
    Orientations for every piece. The `fixed` piece keeps only its
    canonical shape, which removes rotated and mirrored copies of each
    solution on a rectangular board.
    """
    result: dict[str, list[set[tuple[int, int]]]] = {}
    for name in PIECE_NAMES:
        shape = PIECE_SHAPES[name]
        if name == fixed:
            result[name] = [set(_normalize(shape))]
        else:
            result[name] = generate_orientations(shape)
    return result
