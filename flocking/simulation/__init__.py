"""
Simulation module containing interactive and headless drivers.
"""

from .interactive import Simulation
from .headless import HeadlessSimulation, run_trials

__all__ = ['Simulation', 'HeadlessSimulation', 'run_trials']
