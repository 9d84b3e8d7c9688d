"""
Drawing of flock snapshots onto pygame surfaces.
"""

from typing import List, Sequence, Tuple

import pygame

from ..core.config import BOID_RADIUS, SimulationConfig


def draw_flock(surface: pygame.Surface, positions: Sequence[Tuple[float, float]],
               config: SimulationConfig) -> None:
    """
    Clear the surface and draw one marker per boid.

    Args:
        surface: Target surface
        positions: Snapshot of boid positions
        config: Supplies background and boid colors
    """
    surface.fill(config.backgroundColor)
    for x, y in positions:
        pygame.draw.circle(surface, config.boidColor, (x, y), BOID_RADIUS)


def draw_stats(surface: pygame.Surface, lines: List[str], font: pygame.font.Font) -> None:
    """Draw a text overlay in the top-left corner."""
    y_offset = 10
    for text in lines:
        rendered = font.render(text, True, (60, 60, 60))
        surface.blit(rendered, (10, y_offset))
        y_offset += 25
