"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes) to show the board and the solution.
"""

from __future__ import annotations

import sys

from npuzzle.engine.gameplay import GamePlay
from npuzzle.engine.gamesolver import SearchResult
from npuzzle.models.board import Board


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


def _palette(color: bool) -> dict[str, str]:
    if color:
        return {"g": _G, "y": _Y, "c": _C, "dim": _DIM, "bold": _BOLD, "r": _R}
    return dict.fromkeys(("g", "y", "c", "dim", "bold", "r"), "")


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, color: bool = True) -> str:
    """Return an ANSI-coloured text representation of the board."""
    a = _palette(color)
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{a['dim']} {'·':>{width}} {a['r']}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{a['g']} {val:>{width}} {a['r']}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def render_result(result: SearchResult, color: bool = True) -> str:
    """Return the move list and search statistics as text."""
    a = _palette(color)
    if not result.solved:
        return f"{a['y']}No solution found.{a['r']}"
    if not result.moves:
        return f"{a['g']}Already solved!{a['r']}"

    moves = " ".join(m.value.upper() for m in result.moves)
    return (
        f"  {a['c']}Moves:{a['r']} {moves}\n"
        f"  {a['g']}Found solution in {len(result.moves)} moves{a['r']}  "
        f"{a['dim']}({result.expanded} expanded, {result.elapsed:.2f}s){a['r']}"
    )


# -- public entry point -------------------------------------------------------


def show_result(
    board: Board,
    result: SearchResult,
    steps: bool = False,
) -> None:
    """Print the start board and the solution.

    With *steps* every intermediate board is printed as the moves are
    replayed.
    """
    color = sys.stdout.isatty()
    print()
    print(render_board(board, color))
    print()

    if steps and result.moves:
        game = GamePlay.from_board(board)
        for direction in result.moves:
            game.move(direction)
            print(f"  Move {game.moves}/{len(result.moves)}  ({direction.value})")
            print(render_board(game.board, color))
            print()
            sys.stdout.flush()

    print(render_result(result, color))
