"""Toroidal board for Conway's Game of Life.

The board holds the set of live cells on a fixed ``width x height`` grid whose
edges wrap around, and computes each following generation as a brand-new
board. Coordinates are 1-based ``(x, y)`` pairs: ``x`` is the column and ``y``
the row, so ``(1, 1)`` is the top-left cell.
"""

import logging
from typing import Callable, FrozenSet, Iterable, Iterator, List, Tuple

import numpy as np

from .conway_rules import update_cell

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

# Moore neighborhood offsets, row by row starting top-left
NEIGHBOR_OFFSETS: Tuple[Position, ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


class Board:
    """Immutable set of live cells on a toroidal grid.

    Cells are kept in insertion order so that ``walk`` and serialization are
    deterministic, and mirrored in a frozenset for constant-time liveness
    checks. Every stored position is wrapped into ``[1, width] x [1, height]``
    on construction; positions that collapse onto the same cell are kept once.

    Attributes:
        width: Grid width in cells
        height: Grid height in cells
        cells: Live positions in walk order
    """

    def __init__(self, width: int, height: int, cells: Iterable[Position] = ()):
        """Create a board.

        Args:
            width: Grid width (cells), at least 1
            height: Grid height (cells), at least 1
            cells: Live positions; any integers, wrapped onto the torus

        Raises:
            ValueError: If either dimension is smaller than 1
        """
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")

        self._width = int(width)
        self._height = int(height)

        # dict keeps first occurrence order while dropping duplicates
        ordered = dict.fromkeys(self.wrap(pos) for pos in cells)
        self._cells: Tuple[Position, ...] = tuple(ordered)
        self._alive: FrozenSet[Position] = frozenset(self._cells)

    @classmethod
    def from_pattern(cls, pattern: np.ndarray, width: int, height: int,
                     x: int = 1, y: int = 1) -> 'Board':
        """Create a board with a boolean pattern placed at a position.

        Args:
            pattern: 2D array, rows are y and columns are x; truthy cells live
            width: Board width
            height: Board height
            x: Column of the pattern's top-left cell
            y: Row of the pattern's top-left cell

        Returns:
            Board: New board containing the pattern, wrapped at the edges
        """
        pattern = np.asarray(pattern, dtype=bool)
        if pattern.ndim != 2:
            raise ValueError(f"Pattern must be 2D, got shape {pattern.shape}")

        rows, cols = np.nonzero(pattern)
        cells = [(x + int(col), y + int(row)) for row, col in zip(rows, cols)]
        return cls(width, height, cells)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cells(self) -> Tuple[Position, ...]:
        return self._cells

    @property
    def population(self) -> int:
        """Number of live cells."""
        return len(self._cells)

    def wrap(self, pos: Position) -> Position:
        """Map any integer position onto the torus.

        Python's ``%`` takes the sign of the divisor, so the result is always
        within ``[1, width] x [1, height]`` even for negative inputs.
        """
        x, y = pos
        return ((int(x) - 1) % self._width + 1, (int(y) - 1) % self._height + 1)

    def neighbors(self, pos: Position) -> List[Position]:
        """Get the 8 Moore neighbors of a position, wrapped.

        On grids narrower than 3 cells in either direction the same cell may
        appear more than once, and a cell can be its own neighbor.

        Args:
            pos: Center position

        Returns:
            List of exactly 8 wrapped positions
        """
        x, y = pos
        return [self.wrap((x + dx, y + dy)) for dx, dy in NEIGHBOR_OFFSETS]

    def is_alive(self, pos: Position) -> bool:
        return self.wrap(pos) in self._alive

    def live_neighbors(self, pos: Position) -> int:
        """Count live cells among the neighbors of ``pos`` (0-8)."""
        return sum(1 for neighbor in self.neighbors(pos) if neighbor in self._alive)

    def is_extinct(self) -> bool:
        """Check if no cell is alive."""
        return not self._cells

    def survivors(self) -> List[Position]:
        """Live cells that stay alive in the next generation, in walk order."""
        return [pos for pos in self._cells
                if update_cell(True, self.live_neighbors(pos))]

    def births(self) -> List[Position]:
        """Dead cells that come alive in the next generation.

        Only dead cells adjacent to a live cell can reach three live
        neighbors, so the scan is limited to the neighborhoods of live cells.
        Births are returned in the order they are discovered.
        """
        born = []
        examined = set()

        for pos in self._cells:
            for candidate in self.neighbors(pos):
                if candidate in examined or candidate in self._alive:
                    continue
                examined.add(candidate)

                if update_cell(False, self.live_neighbors(candidate)):
                    born.append(candidate)

        return born

    def next_gen(self) -> 'Board':
        """Compute the next generation.

        Returns:
            New board with the same dimensions; this board is left unchanged
        """
        survivors = self.survivors()
        births = self.births()

        logger.debug(f"Next generation on {self._width}x{self._height}: "
                     f"{len(survivors)} survivors, {len(births)} births, "
                     f"{self.population - len(survivors)} deaths")

        return Board(self._width, self._height, survivors + births)

    def step(self, generations: int = 1) -> 'Board':
        """Advance several generations, stopping early once extinct.

        Args:
            generations: Number of ``next_gen`` applications

        Returns:
            Board after the requested number of generations
        """
        board = self
        for _ in range(generations):
            if board.is_extinct():
                break
            board = board.next_gen()
        return board

    def walk(self, visit: Callable[[Position], None]) -> None:
        """Call ``visit`` once for every live cell, in insertion order."""
        for pos in self._cells:
            visit(pos)

    def to_array(self) -> np.ndarray:
        """Get board as numpy bool array of shape (height, width).

        Cell ``(x, y)`` is stored at ``array[y - 1, x - 1]``.
        """
        state = np.zeros((self._height, self._width), dtype=bool)
        for x, y in self._cells:
            state[y - 1, x - 1] = True
        return state

    def __iter__(self) -> Iterator[Position]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, pos: object) -> bool:
        return pos in self._alive

    def __eq__(self, other: object) -> bool:
        """Boards are equal when dimensions and live-cell sets match; order is ignored."""
        if not isinstance(other, Board):
            return NotImplemented
        return (self._width == other._width and
                self._height == other._height and
                self._alive == other._alive)

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._alive))

    def __str__(self) -> str:
        """String representation showing live cells as X."""
        lines = []
        for y in range(1, self._height + 1):
            line = ""
            for x in range(1, self._width + 1):
                line += "X" if (x, y) in self._alive else "."
            lines.append(line)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board({self._width}x{self._height}, alive={self.population})"
