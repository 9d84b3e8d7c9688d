"""
Analysis module for flock statistics and exporting results.

Plotting lives in .plotting and is imported on demand, after the caller
has picked a matplotlib backend.
"""

from .metrics import flock_statistics
from .export import export_timeseries_to_csv, export_results_to_json, calculate_aggregate_stats

__all__ = [
    'flock_statistics',
    'export_timeseries_to_csv',
    'export_results_to_json',
    'calculate_aggregate_stats',
]
