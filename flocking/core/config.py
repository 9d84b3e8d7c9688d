"""
Configuration classes and defaults for the flocking simulation.
"""

from dataclasses import dataclass, field
from typing import List, Optional


# Marker size of a boid on screen; radii and speed limit scale with it
BOID_SIZE = 7.0
BOID_RADIUS = BOID_SIZE / 2.0
MAX_SPEED = BOID_SIZE * 4.0

# Rule radii
ALIGNMENT_RADIUS = BOID_SIZE * 8.0
COHESION_RADIUS = BOID_SIZE * 8.0
SEPARATION_RADIUS = BOID_SIZE * 5.0

# Rule weights
ALIGNMENT_WEIGHT = 1.0
COHESION_WEIGHT = 0.2
SEPARATION_WEIGHT = 1.0


@dataclass
class SimulationConfig:
    """Configuration for the flocking simulation."""

    # Canvas
    screenWidth: int = 600
    screenHeight: int = 600

    # Population and timing
    boidCount: int = 80
    ticksPerSecond: int = 120
    seed: Optional[int] = None

    # Visualization
    backgroundColor: List[int] = field(default_factory=lambda: [255, 255, 255])
    boidColor: List[int] = field(default_factory=lambda: [255, 0, 0])

    # Statistics
    statsInterval: int = 10
    scoreOutputFile: str = "flocking_score.json"

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "screenWidth": self.screenWidth,
            "screenHeight": self.screenHeight,
            "boidCount": self.boidCount,
            "ticksPerSecond": self.ticksPerSecond,
            "seed": self.seed,
            "backgroundColor": list(self.backgroundColor),
            "boidColor": list(self.boidColor),
            "statsInterval": self.statsInterval,
            "scoreOutputFile": self.scoreOutputFile,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})

    def validate(self) -> None:
        """
        Reject configurations that would produce degenerate geometry.

        Raises:
            ValueError: If the canvas, population or tick rate is invalid
        """
        validate_geometry(self.screenWidth, self.screenHeight, self.boidCount, self.ticksPerSecond)
        if self.statsInterval <= 0:
            raise ValueError(f"statsInterval must be positive, got {self.statsInterval}")


def validate_geometry(width: float, height: float, count: int, ticks_per_second: float) -> None:
    """
    Check the values a flock is constructed from.

    Boundary wrapping moves an agent back by a single canvas dimension, so the
    largest per-tick displacement must stay below both dimensions.

    Raises:
        ValueError: If any value is out of range
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas dimensions must be positive, got {width}x{height}")
    if count < 0:
        raise ValueError(f"population count must not be negative, got {count}")
    if ticks_per_second <= 0:
        raise ValueError(f"ticks per second must be positive, got {ticks_per_second}")

    step = MAX_SPEED / ticks_per_second
    if step >= min(width, height):
        raise ValueError(
            f"per-tick displacement {step:.2f} must be smaller than the canvas "
            f"({width}x{height}); raise the tick rate or enlarge the canvas"
        )


# Default configuration for the interactive window
DEFAULT_CONFIG = SimulationConfig()

# Seeded configuration for reproducible headless runs
BENCHMARK_CONFIG = SimulationConfig(seed=42)
