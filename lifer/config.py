"""Simulation configuration."""

from typing import Optional


class SimulationConfig:
    """Configuration for running and drawing a simulation."""

    def __init__(self,
                 delay_ms: int = 100,
                 max_generations: Optional[int] = None,
                 max_seconds: Optional[float] = None,
                 marker: str = "#",
                 width: int = 40,
                 height: int = 20,
                 pattern: str = "glider"):
        """Initialize simulation configuration.

        Args:
            delay_ms: Pause between generations in milliseconds (0+)
            max_generations: Stop after this many generations (None = until extinct)
            max_seconds: Stop once this much wall-clock time has passed (None = no limit)
            marker: Character drawn for a live cell
            width: Grid width when no input description is used (1+)
            height: Grid height when no input description is used (1+)
            pattern: Seed pattern name when no input description is used
        """
        self.delay_ms = max(0, int(delay_ms))
        self.max_generations = None if max_generations is None else max(0, int(max_generations))
        self.max_seconds = None if max_seconds is None else max(0.0, float(max_seconds))
        self.marker = marker
        self.width = max(1, int(width))
        self.height = max(1, int(height))
        self.pattern = pattern

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0

    @classmethod
    def from_args(cls, args) -> 'SimulationConfig':
        """Build configuration from parsed command-line arguments."""
        return cls(
            delay_ms=args.sleepmillis,
            max_generations=args.generations,
            max_seconds=args.seconds,
            marker=args.char,
            width=args.width,
            height=args.height,
            pattern=args.pattern
        )

    def copy(self) -> 'SimulationConfig':
        """Create a copy of the configuration."""
        return SimulationConfig(
            delay_ms=self.delay_ms,
            max_generations=self.max_generations,
            max_seconds=self.max_seconds,
            marker=self.marker,
            width=self.width,
            height=self.height,
            pattern=self.pattern
        )

    def __repr__(self) -> str:
        return (f"SimulationConfig(delay_ms={self.delay_ms}, max_generations={self.max_generations}, "
                f"max_seconds={self.max_seconds}, marker={self.marker!r}, "
                f"size={self.width}x{self.height}, pattern={self.pattern!r})")
