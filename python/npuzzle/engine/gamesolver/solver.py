"""Sliding puzzle solver — A* over the implicit state graph.

The frontier is a binary heap ordered by ``f = depth + heuristic``; the
visited set holds the keys of states that have already been expanded.
With the admissible Manhattan heuristic the first goal popped is at
minimal depth.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from enum import StrEnum
from time import perf_counter

from npuzzle.engine.gamestate import State
from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import SearchLimitExceeded

logger = logging.getLogger(__name__)


class TieBreak(StrEnum):
    """Ordering among frontier entries with equal ``f``."""

    FIFO = "fifo"
    LIFO = "lifo"
    H = "h"


class SearchStatus(StrEnum):
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"


@dataclass
class SolverConfig:
    """Knobs for a single search call.

    ``max_expansions`` bounds the work done on hopeless inputs and
    ``check_solvability`` rejects odd-parity boards before searching.
    Neither changes the answer for a solvable board.
    """

    max_expansions: int | None = None
    check_solvability: bool = False
    tie_break: TieBreak = TieBreak.FIFO


@dataclass
class SearchResult:
    status: SearchStatus
    moves: list[Direction] | None
    expanded: int = 0
    generated: int = 0
    max_frontier: int = 0
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED


def reconstruct_moves(goal: State) -> list[Direction]:
    """Walk parent links back to the root and return root-to-goal moves."""
    moves: list[Direction] = []
    node = goal
    while node.parent is not None:
        moves.append(node.move_from_parent())  # type: ignore[arg-type]
        node = node.parent
    moves.reverse()
    return moves


def _priority(state: State, tie_break: TieBreak, ctr: int) -> tuple[int, ...]:
    # (f, [h,] insertion counter); the counter is unique, so heap entries
    # never fall through to comparing States.
    f = state.depth + state.heuristic
    if tie_break is TieBreak.LIFO:
        return (f, -ctr)
    if tie_break is TieBreak.H:
        return (f, state.heuristic, ctr)
    return (f, ctr)


def a_star(root: State, config: SolverConfig | None = None) -> SearchResult:
    """Run A* from *root*.

    Returns a ``SOLVED`` result with the move list, or ``NO_SOLUTION``
    once the frontier is exhausted.  Raises ``SearchLimitExceeded`` when
    ``config.max_expansions`` is reached first.
    """
    config = config or SolverConfig()
    t0 = perf_counter()
    counter = itertools.count()

    frontier: list[tuple[tuple[int, ...], State]] = []
    heapq.heappush(frontier, (_priority(root, config.tie_break, next(counter)), root))
    visited: set[tuple[int, ...]] = set()

    expanded = 0
    generated = 0
    max_frontier = 1

    logger.debug(
        "A* start: size=%d h=%d tie_break=%s", root.size, root.heuristic, config.tie_break
    )

    while frontier:
        _, current = heapq.heappop(frontier)
        if current.key in visited:
            continue

        if current.is_goal:
            moves = reconstruct_moves(current)
            elapsed = perf_counter() - t0
            logger.info(
                "Solved in %d moves (%d expanded, %d generated, %.3fs)",
                len(moves), expanded, generated, elapsed,
            )
            return SearchResult(
                status=SearchStatus.SOLVED,
                moves=moves,
                expanded=expanded,
                generated=generated,
                max_frontier=max_frontier,
                elapsed=elapsed,
            )

        if config.max_expansions is not None and expanded >= config.max_expansions:
            logger.info("Expansion limit %d reached", config.max_expansions)
            raise SearchLimitExceeded(config.max_expansions, expanded)

        visited.add(current.key)
        expanded += 1

        for child in current.neighbors():
            if child.key in visited:
                continue
            generated += 1
            heapq.heappush(
                frontier, (_priority(child, config.tie_break, next(counter)), child)
            )
        max_frontier = max(max_frontier, len(frontier))

    elapsed = perf_counter() - t0
    logger.info("Frontier exhausted after %d expansions: no solution", expanded)
    return SearchResult(
        status=SearchStatus.NO_SOLUTION,
        moves=None,
        expanded=expanded,
        generated=generated,
        max_frontier=max_frontier,
        elapsed=elapsed,
    )


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(
        board: Board | State, config: SolverConfig | None = None
    ) -> SearchResult:
        """Search from *board* and return the full result record."""
        config = config or SolverConfig()
        root = board if isinstance(board, State) else State.from_board(board)

        if config.check_solvability and not Solver.is_solvable(root.to_board()):
            logger.info("Parity check failed: board is unsolvable")
            return SearchResult(status=SearchStatus.NO_SOLUTION, moves=None)

        return a_star(root, config)

    @staticmethod
    def solve(
        board: Board, config: SolverConfig | None = None
    ) -> list[Direction] | None:
        """Return a shortest move sequence for *board*, ``[]`` if it is
        already solved, or ``None`` if it is unsolvable."""
        return Solver.search(board, config).moves

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None

        moves = Solver.solve(board, SolverConfig(check_solvability=True))
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Odd sizes: the inversion count must be even.  Even sizes: the
        inversion count plus the blank's row counted 1-based from the
        bottom must be odd.
        """
        tiles = [v for v in board.flat() if v != 0]
        inversions = sum(
            1
            for i in range(len(tiles))
            for j in range(i + 1, len(tiles))
            if tiles[i] > tiles[j]
        )
        if board.size % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = board.size - board.blank_pos[0]
        return (inversions + blank_row_from_bottom) % 2 == 1
