"""
Agent classes for the flocking simulation.
"""

from .boid import Boid

__all__ = ['Boid']
