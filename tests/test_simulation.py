"""Tests for the generation loop and its configuration."""

import itertools

import pytest
from lifer.config import SimulationConfig
from lifer.core.board import Board
from lifer.simulation import Simulation, SimulationResult


class RecordingRenderer:
    """Collects every board it is asked to render."""

    def __init__(self):
        self.frames = []

    def render(self, board):
        self.frames.append(board)


BLINKER = Board(6, 6, [(2, 3), (3, 3), (4, 3)])
BLOCK = Board(6, 6, [(2, 2), (3, 2), (2, 3), (3, 3)])


class TestSimulationConfig:
    """Test configuration defaults and bounds."""

    def test_defaults(self):
        config = SimulationConfig()
        assert config.delay_ms == 100
        assert config.delay_seconds == 0.1
        assert config.max_generations is None
        assert config.max_seconds is None
        assert config.marker == "#"
        assert (config.width, config.height) == (40, 20)
        assert config.pattern == "glider"

    def test_values_are_clamped(self):
        """Negative delays, budgets and dimensions are clamped."""
        config = SimulationConfig(delay_ms=-5, max_generations=-1, max_seconds=-2.0,
                                  width=0, height=-3)
        assert config.delay_ms == 0
        assert config.max_generations == 0
        assert config.max_seconds == 0.0
        assert (config.width, config.height) == (1, 1)

    def test_copy(self):
        config = SimulationConfig(delay_ms=250, max_generations=7, marker="o")
        copied = config.copy()

        assert copied is not config
        assert copied.delay_ms == 250
        assert copied.max_generations == 7
        assert copied.marker == "o"


class TestSimulation:
    """Test running boards through the loop."""

    def setup_method(self):
        """Fresh renderer and recorded sleeps for each test."""
        self.renderer = RecordingRenderer()
        self.sleeps = []

    def make_simulation(self, **config):
        return Simulation(SimulationConfig(**config), self.renderer, sleep=self.sleeps.append)

    def test_extinct_board_never_runs(self):
        """Empty initial board stops before rendering anything."""
        result = self.make_simulation().run(Board(5, 5))

        assert result.generations == 0
        assert result.extinct
        assert self.renderer.frames == []
        assert self.sleeps == []

    def test_runs_until_extinct(self):
        """Lone cell is drawn once, then dies out."""
        result = self.make_simulation(delay_ms=100).run(Board(5, 5, [(3, 3)]))

        assert isinstance(result, SimulationResult)
        assert result.generations == 1
        assert result.extinct
        assert result.final_board.is_extinct()
        assert len(self.renderer.frames) == 1
        assert self.sleeps == [0.1]

    def test_generation_budget(self):
        """Loop stops after the requested number of generations."""
        result = self.make_simulation(delay_ms=20, max_generations=4).run(BLINKER)

        assert result.generations == 4
        assert not result.extinct
        assert result.final_board == BLINKER
        assert len(self.renderer.frames) == 5
        assert self.renderer.frames[1] == Board(6, 6, [(3, 2), (3, 3), (3, 4)])
        assert self.sleeps == [0.02] * 4

    def test_zero_generation_budget(self):
        """Budget of 0 draws the initial board only."""
        result = self.make_simulation(max_generations=0).run(BLINKER)

        assert result.generations == 0
        assert result.final_board is BLINKER
        assert self.renderer.frames == [BLINKER]

    def test_time_budget(self):
        """Loop stops once the clock passes the time budget."""
        ticks = itertools.count()
        simulation = Simulation(SimulationConfig(max_seconds=2.5), self.renderer,
                                sleep=self.sleeps.append, clock=lambda: next(ticks))

        result = simulation.run(BLOCK)

        assert result.generations == 2
        assert result.final_board == BLOCK
        assert result.elapsed == 4
        assert len(self.renderer.frames) == 3

    def test_no_delay_no_sleep(self):
        self.make_simulation(delay_ms=0, max_generations=3).run(BLOCK)
        assert self.sleeps == []

    def test_headless(self):
        """Simulation runs without a renderer."""
        simulation = Simulation(SimulationConfig(delay_ms=0, max_generations=32))
        glider = Board(8, 8, [(3, 2), (4, 3), (2, 4), (3, 4), (4, 4)])

        result = simulation.run(glider)

        assert result.generations == 32
        assert result.final_board == glider

    def test_initial_board_unchanged(self):
        cells = BLINKER.cells
        self.make_simulation(delay_ms=0, max_generations=5).run(BLINKER)
        assert BLINKER.cells == cells
