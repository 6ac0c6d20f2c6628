"""Exception hierarchy for the puzzle solver."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all solver errors."""


class InvalidConfiguration(PuzzleError, ValueError):
    """The supplied grid is not a permutation of ``0..N*N-1``.

    Raised while building a board or root state, before any search runs.
    """


class SearchLimitExceeded(PuzzleError):
    """The expansion bound was reached before a goal or exhaustion.

    Unlike an exhausted frontier this proves nothing about solvability.
    """

    def __init__(self, limit: int, expanded: int) -> None:
        super().__init__(
            f"Search stopped after {expanded} expansions (limit {limit})."
        )
        self.limit = limit
        self.expanded = expanded
