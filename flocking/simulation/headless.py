"""
Headless simulation for data collection and optional video recording.
"""

import random
import time
from typing import Dict, Any, Optional

import cv2
import numpy as np
import pygame

from ..analysis.metrics import flock_statistics
from ..core.config import SimulationConfig
from ..core.flock import Flock
from .render import draw_flock, draw_stats


PROGRESS_INTERVAL = 1000


class HeadlessSimulation:
    """
    Runs a flock for a fixed number of ticks without a window.

    Samples flock statistics every statsInterval ticks. When video is
    enabled, frames are drawn to an off-screen surface and written with
    OpenCV.
    """

    def __init__(self, config: SimulationConfig, enable_video: bool = False,
                 video_filename: Optional[str] = None, video_fps: int = 30, rng=None):
        """
        Initialize headless simulation.

        Args:
            config: Simulation configuration
            enable_video: Whether to record video
            video_filename: Output video filename
            video_fps: Video frame rate
            rng: Random source for the initial flock (seeded from config if None)
        """
        self.config = config
        self.flock = Flock.from_config(config, rng=rng)

        self.enable_video = enable_video
        self.video_filename = video_filename or "flocking_recording.mp4"
        self.frame_skip = max(1, config.ticksPerSecond // video_fps)
        self.video_writer = None
        self.surface = None
        self.font = None

        if self.enable_video:
            pygame.font.init()
            self.surface = pygame.Surface((config.screenWidth, config.screenHeight))
            self.font = pygame.font.Font(None, 24)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.video_writer = cv2.VideoWriter(
                self.video_filename, fourcc, video_fps, (config.screenWidth, config.screenHeight)
            )
            print(f"  Recording video to: {self.video_filename}")

        self.start_time = time.time()
        self.stats_over_time = []

    def _sample(self) -> Dict[str, Any]:
        """Record statistics for the current tick."""
        sample = flock_statistics(self.flock.snapshot(), self.flock.velocities())
        sample["tick"] = self.flock.tick_count
        sample["boid_count"] = len(self.flock)
        self.stats_over_time.append(sample)
        return sample

    def run(self, max_ticks: int) -> Dict[str, Any]:
        """
        Run the simulation for a number of ticks.

        Args:
            max_ticks: Ticks to simulate

        Returns:
            Results dictionary with all statistics
        """
        if max_ticks < 0:
            raise ValueError(f"max_ticks must not be negative, got {max_ticks}")

        print(f"Running headless simulation for {max_ticks} ticks...")
        self._sample()

        try:
            while self.flock.tick_count < max_ticks:
                self.flock.step()

                if self.flock.tick_count % self.config.statsInterval == 0:
                    self._sample()

                if self.video_writer and self.flock.tick_count % self.frame_skip == 0:
                    self._capture_frame()

                if self.flock.tick_count % PROGRESS_INTERVAL == 0:
                    elapsed = time.time() - self.start_time
                    progress = (self.flock.tick_count / max_ticks) * 100
                    print(f"  Progress: {progress:.1f}% ({self.flock.tick_count}/{max_ticks} ticks, "
                          f"{elapsed:.1f}s elapsed)")
        finally:
            if self.video_writer:
                self.video_writer.release()
                self.video_writer = None
                print("  Video saved successfully!")

        if self.stats_over_time[-1]["tick"] != self.flock.tick_count:
            self._sample()

        return self.get_results()

    def _capture_frame(self) -> None:
        """Draw the current state and append it to the video."""
        draw_flock(self.surface, self.flock.snapshot(), self.config)
        draw_stats(self.surface, [f"Tick: {self.flock.tick_count}"], self.font)

        frame = pygame.surfarray.array3d(self.surface)
        frame = np.transpose(frame, (1, 0, 2))
        frame = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)
        self.video_writer.write(frame)

    def get_results(self) -> Dict[str, Any]:
        """
        Get run results.

        Returns:
            Dictionary containing the time series and summary metrics
        """
        elapsed = time.time() - self.start_time
        samples = self.stats_over_time
        final = samples[-1] if samples else flock_statistics((), ())

        def mean_of(key):
            return sum(s[key] for s in samples) / len(samples) if samples else 0.0

        return {
            "ticks": self.flock.tick_count,
            "boid_count": len(self.flock),
            "avg_speed": mean_of("avg_speed"),
            "avg_cohesion": mean_of("cohesion"),
            "final_cohesion": final["cohesion"],
            "avg_polarization": mean_of("polarization"),
            "final_polarization": final["polarization"],
            "elapsed_time_seconds": elapsed,
            "stats_over_time": samples,
            "config": self.config.to_dict(),
        }


def run_trials(config: SimulationConfig, num_runs: int, max_ticks: int) -> list:
    """
    Run several independent headless simulations.

    Run i uses seed config.seed + i when a seed is configured, otherwise a
    fresh unseeded random source.
    """
    results = []
    for run in range(num_runs):
        print(f"\nRun {run + 1}/{num_runs}")
        rng = random.Random(config.seed + run) if config.seed is not None else random.Random()
        sim = HeadlessSimulation(config, rng=rng)
        result = sim.run(max_ticks)
        result["run"] = run + 1
        results.append(result)
    return results
