from npuzzle.engine.gamesolver.solver import (
    SearchResult,
    SearchStatus,
    Solver,
    SolverConfig,
    TieBreak,
    a_star,
    reconstruct_moves,
)

__all__ = [
    "SearchResult",
    "SearchStatus",
    "Solver",
    "SolverConfig",
    "TieBreak",
    "a_star",
    "reconstruct_moves",
]
