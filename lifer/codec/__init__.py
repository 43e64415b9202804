"""Plain-text grid description codec."""

from .grid_codec import (
    InputDescription, InputSourceError, ParseError,
    dumps, load_board, parse, read_source
)

__all__ = ['InputDescription', 'InputSourceError', 'ParseError', 'dumps', 'load_board', 'parse', 'read_source']
