"""
Main entry point for the flocking simulation.

Run with:
    python -m flocking.main                          # Interactive window
    python -m flocking.main --headless --ticks 6000  # Headless run with statistics
    python -m flocking.main --headless --runs 10     # Several seeded runs, aggregated
"""

import os


def set_headless():
    """Enable headless mode for pygame."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


def run_interactive(config):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation

    print("=" * 60)
    print("Boids Flocking Simulation")
    print("=" * 60)
    print("\nControls:")
    print("  ESC   - Quit")
    print("  P     - Pause / resume")
    print("  SPACE - Save score to JSON")
    print(f"\n{config.boidCount} boids on {config.screenWidth}x{config.screenHeight}, "
          f"{config.ticksPerSecond} ticks per second")
    print("\nStarting simulation...")

    sim = Simulation(config)
    sim.run()


def run_headless(config, num_ticks: int = 6000, num_runs: int = 1,
                 record_video: bool = False, plot: bool = False):
    """
    Run the simulation without a window and export statistics.

    Args:
        config: Simulation configuration
        num_ticks: Ticks per run
        num_runs: Number of independent runs
        record_video: Record the first run to mp4
        plot: Save a statistics plot of the first run
    """
    set_headless()

    from .simulation.headless import HeadlessSimulation, run_trials
    from .analysis.export import export_timeseries_to_csv, export_results_to_json, calculate_aggregate_stats

    print("=" * 60)
    print("HEADLESS FLOCKING RUN")
    print("=" * 60)
    print(f"Ticks per run: {num_ticks}")
    print(f"Runs: {num_runs}")
    print(f"Boids: {config.boidCount}")
    if record_video:
        print("Video recording: ENABLED (run 1)")
    print()

    if num_runs == 1:
        sim = HeadlessSimulation(config, enable_video=record_video)
        results = [sim.run(num_ticks)]
        results[0]["run"] = 1
    else:
        if record_video:
            print("Video recording is only supported for single runs; skipping.")
        results = run_trials(config, num_runs, num_ticks)

    aggregates = calculate_aggregate_stats(results)
    export_results_to_json({"runs": results, "aggregates": aggregates})
    export_timeseries_to_csv(results[0])

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    print(f"   Avg Speed: {aggregates.get('avg_speed_mean', 0):.2f} ± {aggregates.get('avg_speed_std', 0):.2f}")
    print(f"   Final Cohesion: {aggregates.get('final_cohesion_mean', 0):.2f} "
          f"± {aggregates.get('final_cohesion_std', 0):.2f}")
    print(f"   Final Polarization: {aggregates.get('final_polarization_mean', 0):.3f}")

    if plot:
        import matplotlib
        matplotlib.use("Agg")
        from .analysis.plotting import plot_statistics

        print("\nGenerating statistics plot...")
        plot_statistics(results[0])

    return results, aggregates


def build_config(args):
    """Create a validated SimulationConfig from parsed arguments."""
    from .core.config import SimulationConfig

    config = SimulationConfig(
        screenWidth=args.width,
        screenHeight=args.height,
        boidCount=args.count,
        ticksPerSecond=args.tps,
        seed=args.seed,
    )
    config.validate()
    return config


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Boids Flocking Simulation")
    parser.add_argument("--headless", action="store_true", help="Run without a window and export statistics")
    parser.add_argument("--ticks", type=int, default=6000, help="Ticks per headless run")
    parser.add_argument("--runs", type=int, default=1, help="Number of headless runs")
    parser.add_argument("--width", type=int, default=600, help="Canvas width")
    parser.add_argument("--height", type=int, default=600, help="Canvas height")
    parser.add_argument("--count", type=int, default=80, help="Number of boids")
    parser.add_argument("--tps", type=int, default=120, help="Ticks per second")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the initial flock")
    parser.add_argument("--record-video", action="store_true", help="Record video during a headless run")
    parser.add_argument("--plot", action="store_true", help="Save a statistics plot after a headless run")

    args = parser.parse_args(argv)
    if args.runs < 1:
        parser.error("--runs must be at least 1")
    if args.ticks < 0:
        parser.error("--ticks must not be negative")

    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))

    if args.headless:
        run_headless(
            config,
            num_ticks=args.ticks,
            num_runs=args.runs,
            record_video=args.record_video,
            plot=args.plot
        )
    else:
        run_interactive(config)


if __name__ == "__main__":
    main()
