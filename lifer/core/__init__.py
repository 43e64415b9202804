"""Simulation engine: board, transition rule and seed patterns."""

from .board import Board, Position
from .conway_rules import BIRTH_SET, SURVIVAL_SET, update_cell

__all__ = ['Board', 'Position', 'BIRTH_SET', 'SURVIVAL_SET', 'update_cell']
