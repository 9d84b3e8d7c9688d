"""
Plotting functions for visualizing flock statistics.
"""

from typing import Dict, Any

import matplotlib.pyplot as plt


def plot_statistics(results: Dict[str, Any], output_file: str = "flocking_statistics.png",
                    show: bool = False) -> str:
    """
    Plot cohesion and average speed over time for one run.

    Args:
        results: Results dictionary from HeadlessSimulation.run
        output_file: Output filename for the plot
        show: Open an interactive window after saving

    Returns:
        Path to saved plot file
    """
    samples = results["stats_over_time"]
    ticks = [s["tick"] for s in samples]
    cohesion = [s["cohesion"] for s in samples]
    speed = [s["avg_speed"] for s in samples]
    polarization = [s["polarization"] for s in samples]

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    ax1.plot(ticks, cohesion, linewidth=2, color='#4ECDC4', label='Cohesion')
    ax1.set_ylabel('Avg distance to centroid', fontsize=10)
    ax1.set_title('Flock Cohesion Over Time (lower = tighter flock)', fontsize=12, fontweight='bold')
    ax1.grid(True, alpha=0.3, linestyle='--')

    ax2.plot(ticks, speed, linewidth=2, color='#FF6B6B', label='Avg speed')
    ax2.set_xlabel('Tick', fontsize=10)
    ax2.set_ylabel('Avg speed (px/s)', fontsize=10)
    ax2.grid(True, alpha=0.3, linestyle='--')

    ax3 = ax2.twinx()
    ax3.plot(ticks, polarization, linewidth=1.5, color='#FFB347', alpha=0.8, label='Polarization')
    ax3.set_ylabel('Polarization', fontsize=10)
    ax3.set_ylim(0, 1.05)

    lines = ax2.get_lines() + ax3.get_lines()
    ax2.legend(lines, [l.get_label() for l in lines], fontsize=9, loc='lower right')

    if cohesion:
        ax1.annotate(f'{cohesion[-1]:.0f}', xy=(ticks[-1], cohesion[-1]),
                     xytext=(5, 5), textcoords='offset points', fontsize=8, color='#4ECDC4')

    plt.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"\nPlot saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)
    return output_file
