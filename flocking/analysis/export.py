"""
Export functions for saving simulation results to CSV and JSON.
"""

import csv
import json
import math
from typing import Dict, List, Any


TIMESERIES_FIELDS = ['tick', 'boid_count', 'avg_speed', 'max_speed', 'cohesion', 'polarization']


def export_timeseries_to_csv(results: Dict[str, Any], filename: str = "flocking_timeseries.csv") -> str:
    """
    Export the sampled statistics of one run to CSV.

    Args:
        results: Results dictionary from HeadlessSimulation.run
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=TIMESERIES_FIELDS)
        writer.writeheader()

        for sample in results["stats_over_time"]:
            writer.writerow({
                'tick': sample['tick'],
                'boid_count': sample['boid_count'],
                'avg_speed': f"{sample['avg_speed']:.4f}",
                'max_speed': f"{sample['max_speed']:.4f}",
                'cohesion': f"{sample['cohesion']:.4f}",
                'polarization': f"{sample['polarization']:.4f}",
            })

    print(f"  Time-series saved to: {filename}")
    return filename


def export_results_to_json(results: Any, filename: str = "flocking_results.json") -> str:
    """
    Export a results dictionary (or list of them) to JSON.

    Args:
        results: JSON-serializable results
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(results, f, indent=2)

    print(f"\nResults saved to: {filename}")
    return filename


def calculate_aggregate_stats(run_results: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across runs.

    Args:
        run_results: List of result dictionaries from multiple runs

    Returns:
        Dictionary with mean and std for each metric
    """
    if not run_results:
        return {}

    metrics = ["avg_speed", "avg_cohesion", "final_cohesion", "avg_polarization",
               "final_polarization", "elapsed_time_seconds"]

    aggregates = {}

    for metric in metrics:
        values = [r[metric] for r in run_results if r.get(metric) is not None]
        if values:
            mean = sum(values) / len(values)
            aggregates[f"{metric}_mean"] = mean
            if len(values) > 1:
                variance = sum((x - mean) ** 2 for x in values) / (len(values) - 1)
                aggregates[f"{metric}_std"] = math.sqrt(variance)
            else:
                aggregates[f"{metric}_std"] = 0

    return aggregates
