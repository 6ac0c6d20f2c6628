"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output; shares the solver and
replay engine with the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.gameplay import GamePlay
from npuzzle.engine.gamesolver import SearchResult
from npuzzle.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_result(result: SearchResult) -> Text:
    if not result.solved:
        return Text("No solution found.", style="bold red")
    if not result.moves:
        return Text("Already solved!", style="bold green")

    text = Text()
    text.append("Moves: ", style="dim")
    text.append(" ".join(m.value.upper() for m in result.moves), style="bold cyan")
    text.append("\n")
    text.append(f"Found solution in {len(result.moves)} moves", style="bold green")
    text.append(
        f"  ({result.expanded} expanded, {result.elapsed:.2f}s)", style="dim"
    )
    return text


# -- public entry point -------------------------------------------------------


def show_result(
    board: Board,
    result: SearchResult,
    steps: bool = False,
) -> None:
    """Show the start board and the solution in a panel.

    With *steps* the moves are replayed one board at a time.
    """
    size = board.size
    panel = Panel(
        Align.center(render_board(board)),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))

    if steps and result.moves:
        game = GamePlay.from_board(board)
        for direction in result.moves:
            game.move(direction)
            progress = Text()
            progress.append(f"Move {game.moves}/{len(result.moves)} ", style="bold cyan")
            progress.append(f"({direction.value})", style="dim")
            console.print(
                Align.center(Group(Align.center(progress), render_board(game.board)))
            )

    console.print(Align.center(render_result(result)))
