"""Board sources for the CLI: inline text, JSON files, interactive prompt.

Every reader returns a validated ``Board`` or raises
``InvalidConfiguration``.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Callable
from pathlib import Path

from npuzzle.models.board import Board
from npuzzle.models.errors import InvalidConfiguration

_SEPARATORS = re.compile(r"[\s,;/]+")


def parse_tiles(text: str, size: int | None = None) -> Board:
    """Parse a board from text such as ``"8,3,2; 4,7,1; 0,5,6"``.

    Values may be separated by commas, whitespace, ``;`` or ``/``.  When
    *size* is omitted it is inferred from the number of values.
    """
    parts = [p for p in _SEPARATORS.split(text.strip()) if p]
    try:
        flat = [int(p) for p in parts]
    except ValueError as exc:
        raise InvalidConfiguration(f"Tiles must be integers: {exc}") from exc

    if size is None:
        size = math.isqrt(len(flat))
        if size * size != len(flat):
            raise InvalidConfiguration(
                f"{len(flat)} tiles do not form a square board."
            )
    return Board.from_flat(size, flat)


def load_board(path: Path) -> Board:
    """Load a board from a JSON file.

    Accepts either ``{"size": 3, "tiles": [[...], ...]}`` (the fixture
    format) or a bare list of rows.
    """
    try:
        data = json.loads(Path(path).read_text())
    except json.JSONDecodeError as exc:
        raise InvalidConfiguration(f"{path}: not valid JSON ({exc})") from exc

    if isinstance(data, dict):
        if "tiles" not in data:
            raise InvalidConfiguration(f"{path}: missing 'tiles' key.")
        board = Board.from_rows(data["tiles"])
        if "size" in data and data["size"] != board.size:
            raise InvalidConfiguration(
                f"{path}: size {data['size']} does not match "
                f"{board.size}×{board.size} tiles."
            )
        return board
    if isinstance(data, list):
        return Board.from_rows(data)
    raise InvalidConfiguration(f"{path}: expected an object or a list of rows.")


def prompt_board(size: int, ask: Callable[[str], str]) -> Board:
    """Ask for every cell in row-major order.

    *ask* receives a prompt and returns the raw answer, e.g. ``input`` or
    ``typer.prompt``.
    """
    flat: list[int] = []
    for r in range(size):
        for c in range(size):
            raw = str(ask(f"Row {r} and column {c}")).strip()
            try:
                flat.append(int(raw))
            except ValueError as exc:
                raise InvalidConfiguration(
                    f"Row {r}, column {c}: {raw!r} is not an integer."
                ) from exc
    return Board.from_flat(size, flat)
