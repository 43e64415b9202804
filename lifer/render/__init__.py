"""Terminal output."""

from .terminal import TerminalRenderer

__all__ = ['TerminalRenderer']
