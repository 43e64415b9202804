"""
Conway's Game of Life Rules

The B3/S23 transition rule applied to a single cell. Kept apart from the
board so the rule can be checked without building a grid.
"""

from typing import FrozenSet


SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})
BIRTH_SET: FrozenSet[int] = frozenset({3})


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Decide whether a cell is alive in the next generation.

    A live cell stays alive with a neighbor count in ``SURVIVAL_SET``; a dead
    cell comes alive with a count in ``BIRTH_SET``.
    """
    return live_neighbors in (SURVIVAL_SET if alive else BIRTH_SET)
