"""
Boid agent: a position and a velocity on the canvas.
"""

import pygame

from ..config import BOID_SIZE


class Boid:
    """
    A single flocking agent.

    Holds only state. All changes to position and velocity are made by the
    owning Flock as part of a tick.
    """

    __slots__ = ("position", "velocity")

    def __init__(self, x: float, y: float, vx: float = 0.0, vy: float = 0.0):
        """
        Initialize a boid.

        Args:
            x: Initial x position
            y: Initial y position
            vx: Initial x velocity
            vy: Initial y velocity
        """
        self.position = pygame.Vector2(x, y)
        self.velocity = pygame.Vector2(vx, vy)

    @classmethod
    def random(cls, width: float, height: float, rng) -> "Boid":
        """
        Create a boid somewhere inside the given rectangle.

        Args:
            width: Canvas width
            height: Canvas height
            rng: Random source with a random() method returning [0, 1)

        Returns:
            New boid with velocity components in [0, BOID_SIZE)
        """
        return cls(
            rng.random() * width,
            rng.random() * height,
            rng.random() * BOID_SIZE,
            rng.random() * BOID_SIZE,
        )

    def distance_to(self, other: "Boid") -> float:
        """Euclidean distance between this boid and another."""
        return self.position.distance_to(other.position)

    def copy(self) -> "Boid":
        return Boid(self.position.x, self.position.y, self.velocity.x, self.velocity.y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Boid):
            return NotImplemented
        return (tuple(self.position), tuple(self.velocity)) == (tuple(other.position), tuple(other.velocity))

    # Mutable, so not hashable
    __hash__ = None

    def __repr__(self) -> str:
        return (f"Boid(x={self.position.x!r}, y={self.position.y!r}, "
                f"vx={self.velocity.x!r}, vy={self.velocity.y!r})")
