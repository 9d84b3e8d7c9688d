"""
Flock statistics computed from position and velocity snapshots.
"""

from typing import Dict, Sequence, Tuple

import numpy as np


def flock_statistics(positions: Sequence[Tuple[float, float]],
                     velocities: Sequence[Tuple[float, float]]) -> Dict[str, float]:
    """
    Summarize the flock at one point in time.

    Args:
        positions: (x, y) of every boid
        velocities: (vx, vy) of every boid, same order as positions

    Returns:
        Dictionary with avg_speed, max_speed, cohesion (mean distance to the
        centroid) and polarization (length of the mean unit heading, 1 when
        every boid flies the same way)
    """
    if len(positions) == 0:
        return {"avg_speed": 0.0, "max_speed": 0.0, "cohesion": 0.0, "polarization": 0.0}

    pos = np.asarray(positions, dtype=float)
    vel = np.asarray(velocities, dtype=float)

    speeds = np.linalg.norm(vel, axis=1)
    centroid = pos.mean(axis=0)
    cohesion = np.linalg.norm(pos - centroid, axis=1).mean()

    moving = speeds > 0
    if moving.any():
        headings = vel[moving] / speeds[moving][:, np.newaxis]
        polarization = float(np.linalg.norm(headings.mean(axis=0)))
    else:
        polarization = 0.0

    return {
        "avg_speed": float(speeds.mean()),
        "max_speed": float(speeds.max()),
        "cohesion": float(cohesion),
        "polarization": polarization,
    }
