"""
lifer: Conway's Game of Life on a toroidal grid

Immutable boards compute each generation as a new value; a plain-text codec
loads initial states and an ANSI renderer draws frames in the terminal.
"""

from .core.board import Board, Position
from .core.patterns import seed_board
from .codec.grid_codec import InputDescription, InputSourceError, ParseError, dumps, load_board, parse
from .config import SimulationConfig
from .simulation import Simulation, SimulationResult

__version__ = "0.1.0"

__all__ = [
    'Board',
    'Position',
    'seed_board',
    'InputDescription',
    'InputSourceError',
    'ParseError',
    'parse',
    'dumps',
    'load_board',
    'SimulationConfig',
    'Simulation',
    'SimulationResult'
]
