"""ANSI terminal renderer for boards.

Each frame clears the screen, draws one marker per live cell at its
1-based (x, y) terminal position and leaves the cursor below the grid.
"""

import logging
import sys
from typing import Optional, TextIO

from ..core.board import Board, Position

logger = logging.getLogger(__name__)

ESC = "\033["
CLEAR_SCREEN = f"{ESC}2J"
CURSOR_HOME = f"{ESC}H"


def cursor_to(x: int, y: int) -> str:
    """Escape sequence moving the cursor to column x, row y (1-based)."""
    return f"{ESC}{y};{x}H"


class TerminalRenderer:
    """Draws boards on an ANSI terminal stream.

    The renderer is handed to the board as a ``walk`` callback, so the board
    itself never touches the terminal.
    """

    def __init__(self, stream: Optional[TextIO] = None, marker: str = "#"):
        """Initialize renderer.

        Args:
            stream: Output stream (defaults to sys.stdout at render time)
            marker: Single character drawn for a live cell

        Raises:
            ValueError: If marker is not exactly one character
        """
        if len(marker) != 1:
            raise ValueError(f"Marker must be a single character, got {marker!r}")

        self._stream = stream
        self.marker = marker
        self.frames = 0

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def clear(self) -> None:
        self.stream.write(CLEAR_SCREEN + CURSOR_HOME)

    def draw(self, pos: Position) -> None:
        x, y = pos
        self.stream.write(cursor_to(x, y) + self.marker)

    def finish(self, board: Board) -> None:
        """Park the cursor on the line below the grid and flush the frame."""
        self.stream.write(cursor_to(1, board.height + 1))
        self.stream.flush()

    def render(self, board: Board) -> None:
        """Draw one complete frame."""
        self.clear()
        board.walk(self.draw)
        self.finish(board)

        self.frames += 1
        logger.debug(f"Rendered frame {self.frames} with {board.population} cells")
