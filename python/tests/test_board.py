from __future__ import annotations

import pytest

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import InvalidConfiguration


# -- Direction ----------------------------------------------------------------


@pytest.mark.parametrize(
    "direction, offset",
    [
        (Direction.UP, (1, 0)),
        (Direction.DOWN, (-1, 0)),
        (Direction.LEFT, (0, 1)),
        (Direction.RIGHT, (0, -1)),
    ],
)
def test_blank_offset_is_opposite_of_tile_motion(direction: Direction, offset) -> None:
    assert direction.blank_offset == offset
    assert Direction.from_blank_delta(*offset) is direction


def test_opposite_undoes_move() -> None:
    for direction in Direction:
        dr, dc = direction.blank_offset
        assert direction.opposite.blank_offset == (-dr, -dc)
        assert direction.opposite.opposite is direction


@pytest.mark.parametrize("delta", [(0, 0), (1, 1), (2, 0), (0, -2)])
def test_from_blank_delta_rejects_non_steps(delta) -> None:
    with pytest.raises(ValueError):
        Direction.from_blank_delta(*delta)


# -- Board construction -------------------------------------------------------


def test_from_flat_finds_blank() -> None:
    board = Board.from_flat(3, [8, 3, 2, 4, 7, 1, 0, 5, 6])
    assert board.blank_pos == (2, 0)
    assert board.tiles == [[8, 3, 2], [4, 7, 1], [0, 5, 6]]
    assert board.flat() == [8, 3, 2, 4, 7, 1, 0, 5, 6]


def test_from_rows_matches_from_flat() -> None:
    rows = [[1, 2], [0, 3]]
    assert Board.from_rows(rows) == Board.from_flat(2, [1, 2, 0, 3])


@pytest.mark.parametrize(
    "flat",
    [
        [1, 1, 2, 3, 4, 5, 6, 7, 8],  # duplicate, no blank
        [0, 1, 2, 3, 4, 5, 6, 7, 9],  # out of range
        [0, 1, 2, 3, 4, 5, 6, 7],     # too short
        [0, 0, 2, 3, 4, 5, 6, 7, 8],  # two blanks
    ],
)
def test_from_flat_rejects_non_permutations(flat: list[int]) -> None:
    with pytest.raises(InvalidConfiguration):
        Board.from_flat(3, flat)


def test_duplicate_message_names_offenders() -> None:
    with pytest.raises(InvalidConfiguration, match=r"duplicates: \[1\].*missing: \[0\]"):
        Board.from_flat(3, [1, 1, 2, 3, 4, 5, 6, 7, 8])


def test_from_rows_rejects_ragged_grid() -> None:
    with pytest.raises(InvalidConfiguration):
        Board.from_rows([[1, 2, 3], [0, 4]])


@pytest.mark.parametrize("rows", [[1, 2, 3, 0], 4, [[1, 2], 3]])
def test_from_rows_rejects_non_rows(rows) -> None:
    with pytest.raises(InvalidConfiguration, match="list of rows"):
        Board.from_rows(rows)


@pytest.mark.parametrize(
    "flat",
    [
        [0, 1, 2, "3"],
        [0, 1, 2, 3.0],
        [True, 0, 2, 3],
        [None, 1, 2, 3],
    ],
)
def test_from_flat_rejects_non_integers(flat) -> None:
    with pytest.raises(InvalidConfiguration, match="integers"):
        Board.from_flat(2, flat)


def test_invalid_configuration_is_value_error() -> None:
    with pytest.raises(ValueError):
        Board.from_flat(0, [])


# -- queries ------------------------------------------------------------------


def test_is_solved() -> None:
    assert GameGenerator.solved(3).is_solved()
    assert GameGenerator.solved(1).is_solved()
    assert not Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8]).is_solved()


def test_is_tile_correct() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.is_tile_correct(0, 0)
    assert board.is_tile_correct(2, 0)
    assert not board.is_tile_correct(2, 1)  # blank
    assert not board.is_tile_correct(2, 2)  # 8


def test_copy_is_independent() -> None:
    board = GameGenerator.solved(3)
    clone = board.copy()
    clone.tiles[0][0] = 99
    assert board.tiles[0][0] == 1
