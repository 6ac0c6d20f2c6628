"""N-puzzle solver.

Usage::

    npuzzle                               # prompt for a 3×3 board
    npuzzle --example                     # classic 8-puzzle instance
    npuzzle -t "8,3,2;4,7,1;0,5,6" -f rich
    npuzzle --random 40 --seed 7 -s 4     # scrambled 4×4
    npuzzle --file board.json --steps
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gamesolver import SearchStatus, Solver, SolverConfig, TieBreak
from npuzzle.frontend.cli.reader import load_board, parse_tiles, prompt_board
from npuzzle.models.board import Board
from npuzzle.models.errors import InvalidConfiguration, SearchLimitExceeded

logger = logging.getLogger(__name__)

EXIT_NO_SOLUTION = 1
EXIT_INVALID = 2
EXIT_LIMIT = 3


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _read_board(
    tiles: Optional[str],
    file: Optional[Path],
    example: bool,
    random_moves: Optional[int],
    seed: Optional[int],
    size: int,
) -> Board:
    sources = [tiles is not None, file is not None, example, random_moves is not None]
    if sum(sources) > 1:
        raise typer.BadParameter(
            "Use only one of --tiles, --file, --example, --random."
        )
    if tiles is not None:
        return parse_tiles(tiles)
    if file is not None:
        return load_board(file)
    if example:
        return GameGenerator.example()
    if random_moves is not None:
        return GameGenerator.generate(size, num_moves=random_moves, seed=seed)
    return prompt_board(size, lambda text: typer.prompt(text, type=str))


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    tiles: Optional[str] = typer.Option(
        None, "-t", "--tiles",
        help='Board as row-major numbers, e.g. "8,3,2;4,7,1;0,5,6".',
    ),
    file: Optional[Path] = typer.Option(
        None, "--file",
        exists=True, dir_okay=False, readable=True,
        help="JSON file with {\"size\": N, \"tiles\": [[...]]} or a list of rows.",
    ),
    example: bool = typer.Option(
        False, "--example",
        help="Solve the classic [[8,3,2],[4,7,1],[0,5,6]] board.",
    ),
    random_moves: Optional[int] = typer.Option(
        None, "--random",
        min=0,
        help="Solve a board scrambled by this many random moves.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=1, max=8,
        help="Grid size for --random and the interactive prompt.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=0,
        help="Give up after expanding this many states.",
    ),
    check_solvability: bool = typer.Option(
        False, "--check-solvability",
        help="Reject odd-parity boards before searching.",
    ),
    tie_break: TieBreak = typer.Option(
        TieBreak.FIFO, "--tie-break",
        help="Order among frontier entries with equal cost.",
    ),
    steps: bool = typer.Option(
        False, "--steps",
        help="Print every intermediate board.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Find a shortest solution for an N-puzzle board."""
    _configure_logging(verbose)

    try:
        board = _read_board(tiles, file, example, random_moves, seed, size)
    except InvalidConfiguration as exc:
        typer.echo(f"Invalid board: {exc}", err=True)
        raise typer.Exit(code=EXIT_INVALID) from exc

    config = SolverConfig(
        max_expansions=max_expansions,
        check_solvability=check_solvability,
        tie_break=tie_break,
    )
    logger.debug("Solving %d×%d board with %s", board.size, board.size, config)

    try:
        result = Solver.search(board, config)
    except SearchLimitExceeded as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=EXIT_LIMIT) from exc

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.show_result(board, result, steps=steps)

    if result.status is SearchStatus.NO_SOLUTION:
        raise typer.Exit(code=EXIT_NO_SOLUTION)


if __name__ == "__main__":
    app()
