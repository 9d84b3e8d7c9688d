"""
Core module containing configuration, the boid agent and the flock.
"""

from .config import SimulationConfig, DEFAULT_CONFIG, BENCHMARK_CONFIG
from .flock import Flock

__all__ = ['SimulationConfig', 'DEFAULT_CONFIG', 'BENCHMARK_CONFIG', 'Flock']
