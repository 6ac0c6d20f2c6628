from __future__ import annotations

import random

import pytest

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gameplay import GamePlay
from npuzzle.engine.gamesolver import Solver
from npuzzle.models.board import Direction


@pytest.mark.parametrize("size", [1, 2, 3, 5])
def test_solved_board(size: int) -> None:
    board = GameGenerator.solved(size)
    assert board.is_solved()
    assert board.blank_pos == (size - 1, size - 1)
    assert sorted(board.flat()) == list(range(size * size))


def test_example_board() -> None:
    board = GameGenerator.example()
    assert board.tiles == [[8, 3, 2], [4, 7, 1], [0, 5, 6]]
    assert board.blank_pos == (2, 0)


def test_generate_is_seeded() -> None:
    assert GameGenerator.generate(4, seed=11) == GameGenerator.generate(4, seed=11)


@pytest.mark.parametrize("seed", range(10))
def test_generated_boards_are_solvable(seed: int) -> None:
    assert Solver.is_solvable(GameGenerator.generate(3, seed=seed))


def test_scramble_zero_moves_keeps_goal() -> None:
    board = GameGenerator.solved(3)
    GameGenerator.scramble(board, 0, random.Random(1))
    assert board.is_solved()


def test_scramble_never_backtracks_immediately() -> None:
    board = GameGenerator.solved(3)
    GameGenerator.scramble(board, 2, random.Random(3))
    assert not board.is_solved()


# -- replay -------------------------------------------------------------------


def test_replay_counts_moves_and_rejects_illegal() -> None:
    game = GamePlay.from_board(GameGenerator.solved(3))
    assert not game.move(Direction.UP)  # nothing below the blank
    assert game.move(Direction.RIGHT)
    assert game.moves == 1
    assert not game.is_won
    assert game.move(Direction.LEFT)
    assert game.is_won


def test_apply_stops_at_first_illegal_move() -> None:
    game = GamePlay.from_board(GameGenerator.solved(3))
    applied = game.apply([Direction.RIGHT, Direction.RIGHT, Direction.RIGHT])
    assert applied == 2
    assert game.board.blank_pos == (2, 0)


def test_from_board_copies() -> None:
    board = GameGenerator.solved(2)
    game = GamePlay.from_board(board)
    game.move(Direction.RIGHT)
    assert board.is_solved()


def test_generate_one_tile_board() -> None:
    assert GameGenerator.generate(1, seed=0).is_solved()


def test_legal_moves_from_corner() -> None:
    game = GamePlay.from_board(GameGenerator.solved(3))
    assert game.legal_moves() == [Direction.DOWN, Direction.RIGHT]
