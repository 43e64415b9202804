"""Plain-text grid description codec.

Reads and writes the initial-state format::

    <width> <height>
    <cell_count>
    <x1> <y1>
    ...

Pairs are separated by exactly one space and integers may be negative;
coordinates are not bounds-checked here, the board wraps them. Anything
after the declared cell lines is left unconsumed and returned as the
description's remainder.
"""

import logging
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from ..core.board import Board, Position

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"

_PAIR_LINE = re.compile(r"(-?[0-9]+) (-?[0-9]+)")
_COUNT_LINE = re.compile(r"[0-9]+")


class ParseError(ValueError):
    """Description text does not follow the grid format."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class InputSourceError(OSError):
    """Input source could not be opened or read."""

    def __init__(self, source: str, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(str(cause))


@dataclass(frozen=True)
class InputDescription:
    """Parsed initial state, used once to build the first board."""
    width: int
    height: int
    cell_count: int
    cells: List[Position] = field(default_factory=list)
    remainder: str = ""   # Unconsumed text after the declared cells

    def to_board(self) -> Board:
        """Build the initial board from this description."""
        return Board(self.width, self.height, self.cells)


class _LineReader:
    """Consumes text one line at a time while tracking line numbers."""

    def __init__(self, text: str):
        self.text = text
        self.offset = 0
        self.line_no = 0

    def read(self, what: str) -> str:
        if self.offset >= len(self.text):
            raise ParseError(f"missing {what}", self.line_no + 1)

        end = self.text.find("\n", self.offset)
        if end == -1:
            line = self.text[self.offset:]
            self.offset = len(self.text)
        else:
            line = self.text[self.offset:end]
            self.offset = end + 1

        self.line_no += 1
        return line[:-1] if line.endswith("\r") else line

    @property
    def remainder(self) -> str:
        return self.text[self.offset:]


def _to_int(token: str, what: str, reader: _LineReader) -> int:
    # int() still refuses tokens past the interpreter's digit limit
    try:
        return int(token)
    except ValueError as e:
        raise ParseError(f"malformed {what}: integer too large ({len(token)} characters)",
                         reader.line_no) from e


def _parse_pair(reader: _LineReader, what: str) -> Tuple[int, int]:
    line = reader.read(what)
    match = _PAIR_LINE.fullmatch(line)
    if match is None:
        raise ParseError(f"malformed {what}: {line[:40]!r} (expected two integers)", reader.line_no)
    return _to_int(match.group(1), what, reader), _to_int(match.group(2), what, reader)


def parse(text: str) -> InputDescription:
    """Parse a grid description.

    Args:
        text: Description text

    Returns:
        InputDescription with the declared cells and any trailing text

    Raises:
        ParseError: If the dimension line, the cell count or any of the
            declared coordinate lines is missing or malformed
    """
    reader = _LineReader(text)

    width, height = _parse_pair(reader, "dimension line")
    if width < 1 or height < 1:
        raise ParseError(f"grid dimensions must be positive, got {width}x{height}", reader.line_no)

    count_line = reader.read("cell count")
    if _COUNT_LINE.fullmatch(count_line) is None:
        raise ParseError(f"malformed cell count: {count_line[:40]!r} (expected non-negative integer)",
                         reader.line_no)
    cell_count = _to_int(count_line, "cell count", reader)

    cells = []
    for index in range(cell_count):
        cells.append(_parse_pair(reader, f"cell {index + 1} of {cell_count}"))

    description = InputDescription(width, height, cell_count, cells, reader.remainder)
    logger.debug(f"Parsed {width}x{height} description with {cell_count} cells "
                 f"({len(description.remainder)} trailing characters)")
    return description


def dumps(board: Board) -> str:
    """Serialize a board to the description format, cells in walk order."""
    lines = [f"{board.width} {board.height}", str(board.population)]
    board.walk(lambda pos: lines.append(f"{pos[0]} {pos[1]}"))
    return "\n".join(lines) + "\n"


def source_name(source: str) -> str:
    """Human-readable name of an input source."""
    return "<stdin>" if source == STDIN_SOURCE else source


def read_source(source: str) -> str:
    """Read the whole text of an input source.

    Args:
        source: File path, or ``"-"`` for standard input

    Returns:
        Source text

    Raises:
        InputSourceError: If the source cannot be opened, read or decoded
    """
    try:
        if source == STDIN_SOURCE:
            return sys.stdin.read()
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputSourceError(source, e) from e


def load_board(source: str) -> Board:
    """Read, parse and build the initial board from an input source.

    Raises:
        InputSourceError: If the source cannot be read
        ParseError: If its text is not a valid description
    """
    description = parse(read_source(source))

    if description.remainder.strip():
        logger.debug(f"Ignoring trailing content after {description.cell_count} cells in {source_name(source)}")

    board = description.to_board()
    logger.info(f"Loaded {board.width}x{board.height} board with {board.population} "
                f"live cells from {source_name(source)}")
    return board
