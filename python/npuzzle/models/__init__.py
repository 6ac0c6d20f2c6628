from npuzzle.models.board import Board, Direction, validate_tiles
from npuzzle.models.errors import (
    InvalidConfiguration,
    PuzzleError,
    SearchLimitExceeded,
)

__all__ = [
    "Board",
    "Direction",
    "InvalidConfiguration",
    "PuzzleError",
    "SearchLimitExceeded",
    "validate_tiles",
]
