"""Classic seed patterns for Conway's Game of Life.

Used to start a simulation when no input description is supplied. Patterns
are 2D boolean arrays indexed ``[row, column]``.
"""

from typing import Dict

import numpy as np

from .board import Board


# Glider heading down and to the right
GLIDER: np.ndarray = np.array([
    [False, True, False],
    [False, False, True],
    [True, True, True]
], dtype=bool)

# Horizontal blinker (period 2 oscillator)
BLINKER: np.ndarray = np.array([[True, True, True]], dtype=bool)

# 2x2 block still life
BLOCK: np.ndarray = np.array([
    [True, True],
    [True, True]
], dtype=bool)

PATTERNS: Dict[str, np.ndarray] = {
    "glider": GLIDER,
    "blinker": BLINKER,
    "block": BLOCK,
}


def get_pattern(name: str) -> np.ndarray:
    """Look up a seed pattern by name.

    Args:
        name: Pattern name (case-insensitive)

    Returns:
        Copy of the pattern array

    Raises:
        KeyError: If no pattern has that name
    """
    key = name.lower()
    if key not in PATTERNS:
        available = ", ".join(sorted(PATTERNS))
        raise KeyError(f"Unknown pattern '{name}' (available: {available})")
    return PATTERNS[key].copy()


def seed_board(name: str, width: int, height: int, x: int = 1, y: int = 1) -> Board:
    """Create a board holding a single named pattern.

    Args:
        name: Pattern name, see ``PATTERNS``
        width: Board width
        height: Board height
        x: Column of the pattern's top-left cell
        y: Row of the pattern's top-left cell

    Returns:
        Board with the pattern placed at (x, y)
    """
    return Board.from_pattern(get_pattern(name), width, height, x, y)
