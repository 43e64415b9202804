"""
Command-line entry point.

Loads the initial board from a grid description (a file, or stdin with
``-``) or from a seed pattern, then animates it in the terminal.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import SimulationConfig
from .core.board import Board
from .core.patterns import PATTERNS, seed_board
from .codec.grid_codec import InputSourceError, ParseError, load_board, source_name
from .render.terminal import TerminalRenderer
from .simulation import Simulation

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _marker(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"marker must be a single character, got {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lifer",
        description="Conway's Game of Life on a toroidal grid, drawn in the terminal"
    )
    parser.add_argument("-f", "--filename", default=None,
                        help="Grid description file ('-' for stdin); omit to start from a seed pattern")
    parser.add_argument("-s", "--sleepmillis", type=int, default=100,
                        help="Delay between generations in milliseconds")
    parser.add_argument("-c", "--char", type=_marker, default="#",
                        help="Character drawn for a live cell")
    parser.add_argument("--width", type=int, default=40, help="Grid width without a description file")
    parser.add_argument("--height", type=int, default=20, help="Grid height without a description file")
    parser.add_argument("-p", "--pattern", default="glider", choices=sorted(PATTERNS),
                        help="Seed pattern without a description file")
    parser.add_argument("-g", "--generations", type=int, default=None,
                        help="Stop after this many generations")
    parser.add_argument("-t", "--seconds", type=float, default=None,
                        help="Stop after this many seconds")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS,
                        help="Logging level (logs go to stderr)")
    return parser


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, stream=sys.stderr)


def initial_board(source: Optional[str], config: SimulationConfig) -> Board:
    """Load the board from ``source``, or seed one when no source is given.

    Seed patterns are centered on a ``config.width x config.height`` grid.

    Raises:
        InputSourceError: If the source cannot be read
        ParseError: If the source text is malformed
    """
    if source is None:
        pattern = PATTERNS[config.pattern]
        rows, cols = pattern.shape
        x = max(1, (config.width - cols) // 2 + 1)
        y = max(1, (config.height - rows) // 2 + 1)
        logger.info(f"No input file, seeding {config.pattern} at ({x}, {y})")
        return seed_board(config.pattern, config.width, config.height, x, y)

    return load_board(source)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line.

    Returns:
        Process exit code: 0 on success, 1 when the input cannot be read or
        parsed, 130 when interrupted
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    config = SimulationConfig.from_args(args)

    try:
        board = initial_board(args.filename, config)
    except (InputSourceError, ParseError) as e:
        logger.debug(f"Failed to load initial board: {e!r}")
        print(f"{source_name(args.filename)}: {e}", file=sys.stderr)
        return 1

    simulation = Simulation(config, TerminalRenderer(marker=config.marker))

    try:
        simulation.run(board)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    return 0
