"""
Boids flocking simulation on a wrapping 2D canvas.
"""

from .core.agents.boid import Boid
from .core.config import SimulationConfig
from .core.flock import Flock

__version__ = "0.1.0"

__all__ = ['Boid', 'Flock', 'SimulationConfig']
