from collections import Counter

import pytest

from board import all_cells, cell_bit, cells_mask, mask_cells, render_masks
from main import main
from pieces import PIECE_NAMES, all_piece_orientations, generate_orientations, PIECE_SHAPES
from placements import generate_placements
from dlx import solve
from solver import build_exact_cover, count_solutions, problem_text, render_solution, solve_board
from text_format import load_problem


def test_orientation_counts():
    counts = {name: len(generate_orientations(shape)) for name, shape in PIECE_SHAPES.items()}
    assert counts == {
        "f": 8, "i": 2, "l": 8, "n": 8, "p": 8, "t": 4,
        "u": 4, "v": 4, "w": 4, "x": 1, "y": 8, "z": 4,
    }


def test_fixed_piece_keeps_one_orientation():
    orients = all_piece_orientations(fixed="v")
    assert orients["v"] == [PIECE_SHAPES["v"]]
    assert len(orients["f"]) == 8


def test_cell_bits_round_trip_board():
    cells = [(0, 0), (1, 3), (5, 9)]
    mask = cells_mask(cells, 10)
    assert mask == (1 << 0) | (1 << 13) | (1 << 59)
    assert mask_cells(mask, 6, 10) == cells
    assert cell_bit((2, 4), 10) == 24


def test_render_masks():
    lines = render_masks([("a", 0b11), ("b", 0b1100)], rows=2, cols=3)
    assert lines == ["aab", "b--"]


def test_placements_fit_the_board():
    placements = generate_placements(all_piece_orientations(fixed="v"), 6, 10)
    board = set(all_cells(6, 10))
    masks = set()
    for p in placements:
        assert len(p.cells) == 5
        assert set(p.cells) <= board
        assert bin(p.mask).count("1") == 5
        assert p.mask == cells_mask(p.cells, 10)
        masks.add((p.piece, p.mask))
    assert len(masks) == len(placements)
    # The square piece sits on every cell whose 3x3 neighbourhood is on the board.
    assert sum(1 for p in placements if p.piece == "x") == 4 * 8
    assert sum(1 for p in placements if p.piece == "v") == 4 * 8


def test_exact_cover_columns():
    matrix, by_name = build_exact_cover(3, 20)
    assert matrix.column_count == 12 + 60
    assert matrix.names[1:13] == PIECE_NAMES
    assert matrix.row_count == len(by_name)
    assert "v-0" in by_name
    for idx, piece in enumerate(PIECE_NAMES):
        assert matrix.size[idx + 1] == sum(1 for p in by_name.values() if p.piece == piece)
    matrix.check_integrity()


def test_board_must_hold_sixty_cells():
    with pytest.raises(ValueError):
        build_exact_cover(5, 10)


def test_three_by_twenty_without_symmetric_copies():
    assert count_solutions(3, 20) == 2


def test_three_by_twenty_with_all_orientations():
    assert count_solutions(3, 20, fixed_piece=None) == 8


def test_solutions_tile_the_board():
    solutions = solve_board(3, 20)
    assert len(solutions) == 2
    for sol in solutions:
        assert sorted(p.piece for p in sol) == PIECE_NAMES
        lines = render_solution(sol, 3, 20)
        assert len(lines) == 3
        assert all(len(line) == 20 for line in lines)
        letters = Counter("".join(lines))
        assert "-" not in letters
        assert all(letters[name] == 5 for name in PIECE_NAMES)


def test_solve_board_limit():
    assert len(solve_board(3, 20, limit=1)) == 1


def test_text_mode_prints_solutions(capsys):
    main(["--rows", "3", "--cols", "20", "--text"])
    out = capsys.readouterr().out.strip().splitlines()
    assert out[0] == "Solving 3x20..."
    assert out[1] == "Solution 1:"
    assert out[-1] == "2 solutions"


@pytest.mark.slow
def test_six_by_ten_regression():
    assert count_solutions(6, 10) == 2339


def test_problem_text_encodes_every_placement():
    text = problem_text(3, 20)
    lines = text.splitlines()
    matrix, by_name = build_exact_cover(3, 20)
    assert len(lines) == matrix.row_count == len(by_name)

    name, bits = lines[0].split()
    assert name == "f-0"
    assert len(bits) == 12 + 60
    assert bits[:12] == "1" + "0" * 11
    assert bits.count("1") == 6
    placed = by_name[name]
    assert [i - 12 for i, bit in enumerate(bits) if bit == "1" and i >= 12] == sorted(
        cell_bit(cell, 20) for cell in placed.cells
    )


def test_problem_text_solves_like_the_matrix():
    from_text = {frozenset(s) for s in solve(load_problem(problem_text(3, 20)))}
    matrix, _ = build_exact_cover(3, 20)
    assert from_text == {frozenset(s) for s in solve(matrix)}
    assert len(from_text) == 2


def test_problem_mode_prints_rows(capsys):
    main(["--rows", "3", "--cols", "20", "--problem"])
    out = capsys.readouterr().out
    assert out == problem_text(3, 20)
