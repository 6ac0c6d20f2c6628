"""Immutable search node for the A* solver."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from npuzzle.models.board import Board, Direction, validate_tiles
from npuzzle.models.errors import InvalidConfiguration

# Fixed expansion order; only affects which of several optimal paths wins.
MOVE_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


def manhattan(size: int, grid: Sequence[int]) -> int:
    """Sum of Manhattan distances of every numbered tile from its goal cell.

    The blank is skipped: counting it would overestimate boards that are
    one move from the goal.
    """
    total = 0
    for idx, val in enumerate(grid):
        if val == 0:
            continue
        r, c = divmod(idx, size)
        gr, gc = divmod(val - 1, size)
        total += abs(gr - r) + abs(gc - c)
    return total


@dataclass(frozen=True, eq=False)
class State:
    """A snapshot of the grid plus its place in the search tree.

    Two states are equal when their grids are equal, regardless of depth
    or lineage; ``key`` is the value the visited set is keyed on.
    """

    size: int
    grid: tuple[int, ...]
    blank: tuple[int, int]
    parent: State | None = field(default=None, repr=False)
    depth: int = 0
    heuristic: int = field(init=False)

    def __post_init__(self) -> None:
        if self.parent is None:
            # Children come from a swap and stay permutations; only roots
            # can carry an arbitrary grid.
            validate_tiles(self.size, self.grid)
            found = divmod(self.grid.index(0), self.size)
            if tuple(self.blank) != found:
                raise InvalidConfiguration(
                    f"Blank given at {tuple(self.blank)} but 0 is at {found}."
                )
        object.__setattr__(self, "heuristic", manhattan(self.size, self.grid))

    # -- construction ---------------------------------------------------------

    @classmethod
    def root(
        cls,
        size: int,
        grid: Sequence[int],
        blank: tuple[int, int] | None = None,
    ) -> State:
        """Build the initial state of a search.

        *blank* is optional; when given it must match the position of 0.
        """
        grid = tuple(grid)
        validate_tiles(size, grid)
        if blank is None:
            blank = divmod(grid.index(0), size)
        return cls(size=size, grid=grid, blank=tuple(blank))

    @classmethod
    def from_board(cls, board: Board) -> State:
        return cls.root(board.size, board.flat(), board.blank_pos)

    def move(self, direction: Direction) -> State | None:
        """Return the child reached by sliding a tile in *direction*.

        ``None`` when the blank would leave the grid.
        """
        br, bc = self.blank
        dr, dc = direction.blank_offset
        nr, nc = br + dr, bc + dc
        if not (0 <= nr < self.size and 0 <= nc < self.size):
            return None

        grid = list(self.grid)
        src, dst = br * self.size + bc, nr * self.size + nc
        grid[src], grid[dst] = grid[dst], grid[src]
        return State(
            size=self.size,
            grid=tuple(grid),
            blank=(nr, nc),
            parent=self,
            depth=self.depth + 1,
        )

    def neighbors(self) -> Iterator[State]:
        for direction in MOVE_ORDER:
            child = self.move(direction)
            if child is not None:
                yield child

    # -- queries --------------------------------------------------------------

    @property
    def key(self) -> tuple[int, ...]:
        return self.grid

    @property
    def is_goal(self) -> bool:
        return self.heuristic == 0

    def move_from_parent(self) -> Direction | None:
        """Direction of the move that turned ``parent`` into this state."""
        if self.parent is None:
            return None
        pr, pc = self.parent.blank
        br, bc = self.blank
        return Direction.from_blank_delta(br - pr, bc - pc)

    def to_board(self) -> Board:
        return Board.from_flat(self.size, self.grid)

    # -- identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.grid == other.grid

    def __hash__(self) -> int:
        return hash(self.grid)
