"""
Interactive simulation with pygame GUI.
"""

import json
import sys
from typing import Optional

import pygame

from ..analysis.metrics import flock_statistics
from ..core.config import SimulationConfig, DEFAULT_CONFIG
from ..core.flock import Flock
from .render import draw_flock, draw_stats


class Simulation:
    """
    Interactive flocking simulation with pygame visualization.

    Ticks the flock at the configured rate and draws a fresh snapshot
    after every tick.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, rng=None):
        """
        Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
            rng: Random source for the initial flock
        """
        self.config = config if config else DEFAULT_CONFIG
        self.flock = Flock.from_config(self.config, rng=rng)

        pygame.init()
        self.screen = pygame.display.set_mode((self.config.screenWidth, self.config.screenHeight))
        pygame.display.set_caption("flocking")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 24)

        self.running = True
        self.paused = False
        self.stats = flock_statistics((), ())

    def update(self) -> None:
        """Advance one tick and refresh statistics."""
        if self.paused:
            return
        self.flock.step()
        if self.flock.tick_count % self.config.statsInterval == 0:
            self.stats = flock_statistics(self.flock.snapshot(), self.flock.velocities())

    def draw(self) -> None:
        """Render the current frame."""
        draw_flock(self.screen, self.flock.snapshot(), self.config)
        draw_stats(self.screen, [
            f"FPS: {int(self.clock.get_fps())}",
            f"Tick: {self.flock.tick_count}",
            f"Boids: {len(self.flock)}",
            f"Avg Speed: {self.stats['avg_speed']:.2f}",
            f"Cohesion: {self.stats['cohesion']:.1f}",
        ] + (["PAUSED"] if self.paused else []), self.font)
        pygame.display.flip()

    def save_score(self) -> None:
        """Save current statistics to JSON file."""
        score_data = {
            "tick_count": self.flock.tick_count,
            "boid_count": len(self.flock),
            "statistics": self.stats,
            "config": self.config.to_dict()
        }

        try:
            with open(self.config.scoreOutputFile, 'w') as f:
                json.dump(score_data, f, indent=4)
            print(f"Score saved to {self.config.scoreOutputFile}")
        except OSError as e:
            print(f"Error saving score: {e}")

    def run(self) -> None:
        """Run the simulation main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event.key)

            self.update()
            self.draw()
            self.clock.tick(self.config.ticksPerSecond)

        pygame.quit()
        sys.exit()

    def _handle_keydown(self, key: int) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_p:
            self.paused = not self.paused
        elif key == pygame.K_SPACE:
            self.save_score()
