"""
Generation Loop

Drives a board forward one generation at a time, rendering each frame and
pausing between them, until the population dies out or a generation or
time budget is spent. Runs on the calling thread; it can only stop between
generations.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .config import SimulationConfig
from .core.board import Board

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Outcome of a simulation run."""
    final_board: Board
    generations: int      # Number of next_gen applications
    extinct: bool
    elapsed: float        # Wall-clock seconds


class Simulation:
    """Runs boards through successive generations.

    The renderer is any object with a ``render(board)`` method; sleeping and
    time measurement are injectable so runs can be tested without waiting.
    """

    def __init__(self,
                 config: Optional[SimulationConfig] = None,
                 renderer=None,
                 sleep: Callable[[float], None] = time.sleep,
                 clock: Callable[[], float] = time.monotonic):
        """Initialize simulation.

        Args:
            config: Delay and budget settings (defaults if None)
            renderer: Frame sink with a ``render(board)`` method, or None to run headless
            sleep: Function pausing for a number of seconds
            clock: Monotonic clock in seconds
        """
        self.config = config or SimulationConfig()
        self.renderer = renderer
        self._sleep = sleep
        self._clock = clock

    def _budget_spent(self, generations: int, started: float) -> bool:
        max_generations = self.config.max_generations
        if max_generations is not None and generations >= max_generations:
            logger.debug(f"Generation budget of {max_generations} reached")
            return True

        max_seconds = self.config.max_seconds
        if max_seconds is not None and self._clock() - started >= max_seconds:
            logger.debug(f"Time budget of {max_seconds}s reached")
            return True

        return False

    def run(self, board: Board) -> SimulationResult:
        """Run the simulation from an initial board.

        Args:
            board: Initial generation

        Returns:
            SimulationResult with the last computed board
        """
        logger.info(f"Starting simulation on {board.width}x{board.height} board "
                    f"with {board.population} live cells ({self.config})")

        started = self._clock()
        generations = 0

        while not board.is_extinct():
            if self.renderer is not None:
                self.renderer.render(board)

            if self._budget_spent(generations, started):
                break

            if self.config.delay_ms > 0:
                self._sleep(self.config.delay_seconds)

            board = board.next_gen()
            generations += 1
            logger.debug(f"Generation {generations}: {board.population} live cells")

        result = SimulationResult(
            final_board=board,
            generations=generations,
            extinct=board.is_extinct(),
            elapsed=self._clock() - started
        )

        if result.extinct:
            logger.info(f"Population extinct after {generations} generations")
        else:
            logger.info(f"Stopped after {generations} generations with {board.population} live cells")

        return result
