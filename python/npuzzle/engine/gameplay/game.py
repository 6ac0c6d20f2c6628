"""Move replay — applies tile moves to a board and checks the goal."""

from __future__ import annotations

from collections.abc import Iterable

from npuzzle.models.board import Board, Direction


class GamePlay:
    """Replays a move sequence against a single board."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Start a replay on a copy of *board*, leaving the original intact."""
        return cls(board.copy())

    @property
    def size(self) -> int:
        return self.board.size

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        br, bc = self.board.blank_pos
        dr, dc = direction.blank_offset
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return False

        self._swap(self.board, (tr, tc))
        self.moves += 1
        return True

    def apply(self, directions: Iterable[Direction]) -> int:
        """Play *directions* in order; return how many were applied.

        Stops at the first illegal move.
        """
        applied = 0
        for direction in directions:
            if not self.move(direction):
                break
            applied += 1
        return applied

    # -- queries --------------------------------------------------------------

    def legal_moves(self) -> list[Direction]:
        br, bc = self.board.blank_pos
        moves: list[Direction] = []
        for direction in Direction:
            dr, dc = direction.blank_offset
            if 0 <= br + dr < self.size and 0 <= bc + dc < self.size:
                moves.append(direction)
        return moves

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, target: tuple[int, int]) -> None:
        br, bc = board.blank_pos
        tr, tc = target
        board.tiles[br][bc], board.tiles[tr][tc] = (
            board.tiles[tr][tc],
            board.tiles[br][bc],
        )
        board.blank_pos = (tr, tc)
