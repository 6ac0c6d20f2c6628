"""Board model for the sliding puzzle.

Goal layout is row-major ``1 .. N*N-1`` with the blank (0) in the
bottom-right cell.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from npuzzle.models.errors import InvalidConfiguration


class Direction(StrEnum):
    """Direction a *tile* slides into the blank.

    ``UP`` moves the tile below the blank upward, so the blank itself
    shifts one row down.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def blank_offset(self) -> tuple[int, int]:
        """Row/column offset the blank travels when this move is played."""
        return _BLANK_OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_blank_delta(cls, dr: int, dc: int) -> Direction:
        """Return the move that shifts the blank by ``(dr, dc)``."""
        for direction, offset in _BLANK_OFFSETS.items():
            if offset == (dr, dc):
                return direction
        raise ValueError(f"Blank delta ({dr}, {dc}) is not a single step.")


# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down → blank shifts up
# LEFT → tile at (br, bc+1) moves left → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right→ blank shifts left
_BLANK_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def validate_tiles(size: int, flat: Sequence[int]) -> None:
    """Raise ``InvalidConfiguration`` unless *flat* is a permutation of
    ``0 .. size*size-1``."""
    if size < 1:
        raise InvalidConfiguration(f"Board size must be positive, got {size}.")
    if len(flat) != size * size:
        raise InvalidConfiguration(
            f"Expected {size * size} tiles for a {size}×{size} board, "
            f"got {len(flat)}."
        )
    bad = [v for v in flat if not isinstance(v, int) or isinstance(v, bool)]
    if bad:
        raise InvalidConfiguration(f"Tiles must be integers, got {bad!r}.")
    if sorted(flat) != list(range(size * size)):
        dupes = sorted(v for v, n in Counter(flat).items() if n > 1)
        missing = sorted(set(range(size * size)) - set(flat))
        raise InvalidConfiguration(
            f"Tiles must be each of 0..{size * size - 1} exactly once "
            f"(duplicates: {dupes}, missing: {missing})."
        )


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a 2D list of ints. 0 represents the blank space.
    """

    size: int
    tiles: list[list[int]]
    blank_pos: tuple[int, int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        flat = list(flat)
        validate_tiles(size, flat)
        tiles: list[list[int]] = []
        blank_pos: tuple[int, int] = (0, 0)
        for r in range(size):
            row = flat[r * size : (r + 1) * size]
            for c, v in enumerate(row):
                if v == 0:
                    blank_pos = (r, c)
            tiles.append(row)
        return cls(size=size, tiles=tiles, blank_pos=blank_pos)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from a list of rows, e.g. ``[[1, 2], [3, 0]]``."""
        if not isinstance(rows, (list, tuple)) or not all(
            isinstance(row, (list, tuple)) for row in rows
        ):
            raise InvalidConfiguration("Tiles must be given as a list of rows.")
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise InvalidConfiguration(
                f"Rows must form a square grid; got row lengths "
                f"{[len(row) for row in rows]} for {size} rows."
            )
        return cls.from_flat(size, [v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )
