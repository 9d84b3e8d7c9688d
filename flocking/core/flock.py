"""
Flock: owns every boid and advances the whole population one tick at a time.
"""

import random
from typing import List, Sequence, Tuple

import pygame

from .agents.boid import Boid
from .config import (
    ALIGNMENT_RADIUS, ALIGNMENT_WEIGHT,
    COHESION_RADIUS, COHESION_WEIGHT,
    SEPARATION_RADIUS, SEPARATION_WEIGHT,
    MAX_SPEED, SimulationConfig, validate_geometry
)


def limit_speed(v: float) -> float:
    """Clip a single velocity component to [-MAX_SPEED, MAX_SPEED]."""
    if v > MAX_SPEED:
        return MAX_SPEED
    if v < -MAX_SPEED:
        return -MAX_SPEED
    return v


def clamp_velocity(velocity: pygame.Vector2) -> pygame.Vector2:
    """
    Clip each axis of a velocity independently.

    Clipping per axis can change the direction of the vector; the result
    is not rescaled.
    """
    return pygame.Vector2(limit_speed(velocity.x), limit_speed(velocity.y))


def wrap_coordinate(value: float, dimension: float) -> float:
    """
    Wrap one coordinate into [0, dimension) by at most one dimension.

    Args:
        value: Coordinate after integration
        dimension: Canvas width or height

    Returns:
        Wrapped coordinate
    """
    if value >= dimension:
        value -= dimension
    elif value < 0:
        value += dimension
        # -1e-17 + 600.0 rounds to 600.0
        if value >= dimension:
            value = 0.0
    return value


class Flock:
    """
    A fixed population of boids on a width x height canvas.

    Each tick every boid's new velocity is computed from the state of all
    boids before the tick:

    - Alignment: average velocity of neighbors within ALIGNMENT_RADIUS
    - Cohesion: offset to the average position of neighbors within COHESION_RADIUS
    - Separation: sum of offsets away from neighbors within SEPARATION_RADIUS

    Separation is summed rather than averaged, so the push grows with crowding.
    """

    def __init__(self, width: float, height: float, count: int, ticks_per_second: float,
                 rng=None):
        """
        Initialize the flock with randomly placed boids.

        Args:
            width: Canvas width
            height: Canvas height
            count: Number of boids (0 gives an empty, no-op simulation)
            ticks_per_second: Tick rate; velocities are per second
            rng: Random source with a random() method (defaults to random.Random())

        Raises:
            ValueError: If the geometry or tick rate is invalid
        """
        validate_geometry(width, height, count, ticks_per_second)

        self.width = width
        self.height = height
        self.ticks_per_second = ticks_per_second
        self.tick_count = 0

        rng = rng if rng is not None else random.Random()
        self._boids: List[Boid] = [Boid.random(width, height, rng) for _ in range(count)]

    @classmethod
    def from_config(cls, config: SimulationConfig, rng=None) -> "Flock":
        """
        Create a flock from a SimulationConfig.

        A configured seed is used when no random source is given.
        """
        config.validate()
        if rng is None and config.seed is not None:
            rng = random.Random(config.seed)
        return cls(config.screenWidth, config.screenHeight, config.boidCount,
                   config.ticksPerSecond, rng=rng)

    def __len__(self) -> int:
        return len(self._boids)

    @property
    def boids(self) -> Tuple[Boid, ...]:
        """Copies of the current boids, in stable order."""
        return tuple(b.copy() for b in self._boids)

    def set_boids(self, boids: Sequence[Boid]) -> None:
        """
        Replace the state of every boid.

        Args:
            boids: One boid per existing slot, in order

        Raises:
            ValueError: If the population size would change
        """
        if len(boids) != len(self._boids):
            raise ValueError(f"flock holds {len(self._boids)} boids, got {len(boids)}")
        self._boids = [b.copy() for b in boids]

    def snapshot(self) -> Tuple[Tuple[float, float], ...]:
        """Positions of all boids as an immutable tuple of (x, y)."""
        return tuple((b.position.x, b.position.y) for b in self._boids)

    def velocities(self) -> Tuple[Tuple[float, float], ...]:
        """Velocities of all boids as an immutable tuple of (vx, vy)."""
        return tuple((b.velocity.x, b.velocity.y) for b in self._boids)

    def step(self) -> None:
        """Advance the simulation by exactly one tick."""
        current = self._boids
        updated = []

        for boid in current:
            velocity = self.flock(boid, current)
            position = boid.position + velocity / self.ticks_per_second
            x, y = self.stay_in_view(position.x, position.y)
            updated.append(Boid(x, y, velocity.x, velocity.y))

        self._boids = updated
        self.tick_count += 1

    def flock(self, boid: Boid, boids: Sequence[Boid]) -> pygame.Vector2:
        """
        Combine the three rules into the boid's next velocity.

        Args:
            boid: The acting boid
            boids: All boids in their pre-tick state

        Returns:
            New velocity, clipped per axis to MAX_SPEED
        """
        alignment = self.alignment(boid, boids)
        cohesion = self.cohesion(boid, boids)
        separation = self.separation(boid, boids)

        velocity = (boid.velocity
                    + alignment * ALIGNMENT_WEIGHT
                    + cohesion * COHESION_WEIGHT
                    + separation * SEPARATION_WEIGHT)
        return clamp_velocity(velocity)

    def alignment(self, boid: Boid, boids: Sequence[Boid]) -> pygame.Vector2:
        """Average velocity of neighbors within ALIGNMENT_RADIUS."""
        steering = pygame.Vector2(0, 0)
        total = 0

        for other in boids:
            dist = boid.distance_to(other)
            if 0 < dist < ALIGNMENT_RADIUS:
                steering += other.velocity
                total += 1

        if total > 0:
            steering /= total
        return steering

    def cohesion(self, boid: Boid, boids: Sequence[Boid]) -> pygame.Vector2:
        """Offset from the boid to the average position of neighbors within COHESION_RADIUS."""
        center = pygame.Vector2(0, 0)
        total = 0

        for other in boids:
            dist = boid.distance_to(other)
            if 0 < dist < COHESION_RADIUS:
                center += other.position
                total += 1

        if total == 0:
            return pygame.Vector2(0, 0)
        return center / total - boid.position

    def separation(self, boid: Boid, boids: Sequence[Boid]) -> pygame.Vector2:
        """
        Repulsion from neighbors within SEPARATION_RADIUS.

        Offsets are summed and not normalized, so more numerous
        neighbors push harder.
        """
        steering = pygame.Vector2(0, 0)

        for other in boids:
            dist = boid.distance_to(other)
            if 0 < dist < SEPARATION_RADIUS:
                steering += boid.position - other.position
        return steering

    def stay_in_view(self, x: float, y: float) -> Tuple[float, float]:
        """Wrap a position back into the canvas."""
        return wrap_coordinate(x, self.width), wrap_coordinate(y, self.height)
