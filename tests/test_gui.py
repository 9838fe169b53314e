import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from gui import BG, CELL_SIZE, PIECE_COLORS, TOP_BAR_HEIGHT, cell_rect, draw_solution_grid, window_size
from placements import Placement


def _solution():
    return [
        Placement("i", ((0, 0), (0, 1), (0, 2), (0, 3), (0, 4)), 0b11111),
        Placement("x", ((1, 1), (2, 0), (2, 1), (2, 2), (3, 1)), 0),
    ]


def test_window_size():
    assert window_size(6, 10) == (10 * CELL_SIZE, 6 * CELL_SIZE + TOP_BAR_HEIGHT)


def test_pieces_are_painted_in_their_colours():
    surface = pygame.Surface(window_size(6, 10))
    draw_solution_grid(surface, None, _solution(), 6, 10)

    assert tuple(surface.get_at(cell_rect(0, 3).center))[:3] == PIECE_COLORS["i"]
    assert tuple(surface.get_at(cell_rect(2, 1).center))[:3] == PIECE_COLORS["x"]
    assert tuple(surface.get_at(cell_rect(5, 9).center))[:3] == BG


def test_hidden_pieces_are_not_drawn():
    surface = pygame.Surface(window_size(6, 10))
    draw_solution_grid(surface, None, _solution(), 6, 10, visible_pieces={"x"})

    assert tuple(surface.get_at(cell_rect(0, 3).center))[:3] == BG
    assert tuple(surface.get_at(cell_rect(3, 1).center))[:3] == PIECE_COLORS["x"]
