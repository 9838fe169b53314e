# gui.py

from __future__ import annotations

from typing import Dict, List, Tuple

import pygame

from board import BOARD_ROWS, BOARD_COLS
from placements import Placement

CELL_SIZE = 56
TOP_BAR_HEIGHT = 96

# Colors – dark mode
BG = (15, 15, 17)
CARD_BG = (30, 30, 34)
GRID = (90, 90, 95)
TEXT_MAIN = (245, 245, 250)
TEXT_SECONDARY = (230, 230, 235)

PIECE_COLORS: Dict[str, Tuple[int, int, int]] = {
    "f": (60, 200, 80),
    "i": (45, 140, 255),
    "l": (255, 190, 60),
    "n": (190, 70, 210),
    "p": (90, 220, 220),
    "t": (250, 80, 80),
    "u": (210, 145, 50),
    "v": (110, 120, 255),
    "w": (255, 160, 210),
    "x": (160, 230, 90),
    "y": (240, 120, 40),
    "z": (150, 150, 160),
}


def window_size(rows: int = BOARD_ROWS, cols: int = BOARD_COLS) -> Tuple[int, int]:
    return cols * CELL_SIZE, rows * CELL_SIZE + TOP_BAR_HEIGHT


def cell_rect(r: int, c: int) -> pygame.Rect:
    x = c * CELL_SIZE
    y = TOP_BAR_HEIGHT + r * CELL_SIZE
    return pygame.Rect(x + 2, y + 2, CELL_SIZE - 4, CELL_SIZE - 4)


def draw_top_bar(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    current_idx: int,
    total_solutions: int,
):
    width = screen.get_width()
    pygame.draw.rect(screen, BG, (0, 0, width, TOP_BAR_HEIGHT))

    card_rect = pygame.Rect(12, 12, width - 24, TOP_BAR_HEIGHT - 24)
    pygame.draw.rect(screen, CARD_BG, card_rect, border_radius=16)

    title_surf = title_font.render("Pentominoes", True, TEXT_MAIN)
    screen.blit(title_surf, (card_rect.x + 16, card_rect.y + 8))

    if total_solutions:
        sol_text = f"Solution {current_idx + 1} of {total_solutions}"
    else:
        sol_text = "No solutions"
    sol_surf = label_font.render(sol_text, True, TEXT_SECONDARY)
    screen.blit(sol_surf, (card_rect.x + 16, card_rect.y + 40))


def draw_solution_grid(
    screen: pygame.Surface,
    cell_font: pygame.font.Font | None,
    solution: List[Placement],
    rows: int = BOARD_ROWS,
    cols: int = BOARD_COLS,
    visible_pieces: set[str] | None = None,
):
    """
    Draws the board.
    visible_pieces: set of piece letters to draw. If None, draw all.
    cell_font: used for the piece letters; None draws colours only.
    """
    piece_map: Dict[Tuple[int, int], str] = {}
    for placement in solution:
        if visible_pieces is None or placement.piece in visible_pieces:
            for cell in placement.cells:
                piece_map[cell] = placement.piece

    for r in range(rows):
        for c in range(cols):
            rect = cell_rect(r, c)

            if (r, c) not in piece_map:
                # Empty cell
                pygame.draw.rect(screen, BG, rect, border_radius=10)
                pygame.draw.rect(screen, GRID, rect, width=1, border_radius=10)
                continue

            piece = piece_map[(r, c)]
            pygame.draw.rect(screen, PIECE_COLORS[piece], rect, border_radius=10)

            if cell_font is not None:
                text_surf = cell_font.render(piece.upper(), True, (255, 255, 255))
                screen.blit(
                    text_surf,
                    (
                        rect.centerx - text_surf.get_width() // 2,
                        rect.centery - text_surf.get_height() // 2,
                    ),
                )
