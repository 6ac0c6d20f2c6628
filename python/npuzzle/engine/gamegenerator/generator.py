"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from npuzzle.engine.gameplay import GamePlay
from npuzzle.models.board import Board, Direction


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        flat = list(range(1, size * size)) + [0]
        return Board.from_flat(size, flat)

    @staticmethod
    def example() -> Board:
        """The classic 3×3 textbook instance, blank in the bottom-left."""
        return Board.from_rows([[8, 3, 2], [4, 7, 1], [0, 5, 6]])

    @staticmethod
    def scramble(
        board: Board, num_moves: int, rng: random.Random | None = None
    ) -> None:
        """Scramble *board* in-place using *num_moves* random legal moves.

        Only legal slides are played, so the result is always solvable.
        The walk never immediately undoes its previous step.
        """
        rng = rng or random.Random()
        game = GamePlay(board)
        prev: Direction | None = None

        for _ in range(num_moves):
            options = game.legal_moves()
            if prev is not None and prev.opposite in options and len(options) > 1:
                options.remove(prev.opposite)
            if not options:
                break  # 1×1 board
            prev = rng.choice(options)
            game.move(prev)

    @staticmethod
    def generate(
        size: int, num_moves: int | None = None, seed: int | None = None
    ) -> Board:
        """Return a random *solvable* board of the given size.

        Defaults to ``size * size * 100`` shuffle moves.  A fixed *seed*
        yields the same board every time.
        """
        if num_moves is None:
            num_moves = size * size * 100
        board = GameGenerator.solved(size)
        GameGenerator.scramble(board, num_moves, random.Random(seed))
        return board
