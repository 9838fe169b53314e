from __future__ import annotations

import argparse
import logging
from typing import List

import pygame

import config
from gui import BG, draw_top_bar, draw_solution_grid, window_size
from placements import Placement
from solver import problem_text, solve_board, render_solution

PIECE_DELAY = 0.12


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tile a rectangle with the twelve pentominoes.")
    parser.add_argument("--rows", type=int, default=config.PENTOMINO_HEIGHT)
    parser.add_argument("--cols", type=int, default=config.PENTOMINO_WIDTH)
    parser.add_argument("--limit", type=int, default=config.SOLUTION_LIMIT,
                        help="stop after this many solutions (0 = all)")
    parser.add_argument("--text", action="store_true", help="print solutions instead of opening a window")
    parser.add_argument("--problem", action="store_true", help="print the exact cover rows as text and exit")
    return parser.parse_args(argv)


def print_solutions(solutions: List[List[Placement]], rows: int, cols: int) -> None:
    for idx, sol in enumerate(solutions, start=1):
        print(f"Solution {idx}:")
        for line in render_solution(sol, rows, cols):
            print(line)
        print()
    print(f"{len(solutions)} solutions")


def run_viewer(solutions: List[List[Placement]], rows: int, cols: int) -> None:
    pygame.init()
    screen = pygame.display.set_mode(window_size(rows, cols))
    pygame.display.set_caption("Pentominoes")

    title_font = pygame.font.SysFont("SF Pro Display", 28, bold=True)
    label_font = pygame.font.SysFont("SF Pro Text", 20)
    cell_font = pygame.font.SysFont("SF Pro Text", 20, bold=True)

    clock = pygame.time.Clock()
    current_sol_idx = 0

    # Pieces appear one at a time whenever a solution is shown.
    visible_pieces: set[str] = set()
    pieces_sequence: List[str] = []
    piece_timer = 0.0

    def start_placing(idx: int) -> None:
        nonlocal pieces_sequence, piece_timer
        visible_pieces.clear()
        pieces_sequence = sorted(p.piece for p in solutions[idx]) if solutions else []
        piece_timer = 0.0

    start_placing(current_sol_idx)

    running = True
    while running:
        dt = clock.tick(60) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_RIGHT and current_sol_idx < len(solutions) - 1:
                    current_sol_idx += 1
                    start_placing(current_sol_idx)
                elif event.key == pygame.K_LEFT and current_sol_idx > 0:
                    current_sol_idx -= 1
                    start_placing(current_sol_idx)

        if pieces_sequence:
            piece_timer += dt
            if piece_timer >= PIECE_DELAY:
                piece_timer = 0.0
                visible_pieces.add(pieces_sequence.pop(0))

        screen.fill(BG)
        draw_top_bar(screen, title_font, label_font, current_sol_idx, len(solutions))
        if solutions:
            draw_solution_grid(
                screen, cell_font, solutions[current_sol_idx], rows, cols, visible_pieces=visible_pieces
            )
        pygame.display.flip()

    pygame.quit()


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    if args.problem:
        print(problem_text(args.rows, args.cols), end="")
        return

    print(f"Solving {args.rows}x{args.cols}...")
    solutions = solve_board(args.rows, args.cols, limit=args.limit)

    if args.text:
        print_solutions(solutions, args.rows, args.cols)
    else:
        run_viewer(solutions, args.rows, args.cols)


if __name__ == "__main__":
    main()
