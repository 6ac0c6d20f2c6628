"""Shared fixtures: a breadth-first distance oracle for small boards."""

from __future__ import annotations

from collections import deque

import pytest

from npuzzle.engine.gamegenerator import GameGenerator


def bfs_distances(size: int) -> dict[tuple[int, ...], int]:
    """Exact distance to the goal for every state reachable from it."""
    goal = tuple(GameGenerator.solved(size).flat())
    dist = {goal: 0}
    queue = deque([goal])
    while queue:
        s = queue.popleft()
        z = s.index(0)
        r, c = divmod(z, size)
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nr, nc = r + dr, c + dc
            if not (0 <= nr < size and 0 <= nc < size):
                continue
            j = nr * size + nc
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            t = tuple(lst)
            if t not in dist:
                dist[t] = dist[s] + 1
                queue.append(t)
    return dist


@pytest.fixture(scope="session")
def oracle_3x3() -> dict[tuple[int, ...], int]:
    return bfs_distances(3)


@pytest.fixture(scope="session")
def oracle_2x2() -> dict[tuple[int, ...], int]:
    return bfs_distances(2)
