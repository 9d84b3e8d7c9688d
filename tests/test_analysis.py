import csv
import json

import pytest

from flocking.analysis.export import (
    calculate_aggregate_stats, export_results_to_json, export_timeseries_to_csv,
)
from flocking.analysis.metrics import flock_statistics
from flocking.analysis.plotting import plot_statistics


def sample(tick, cohesion=10.0):
    return {"tick": tick, "boid_count": 3, "avg_speed": 2.0, "max_speed": 3.0,
            "cohesion": cohesion, "polarization": 0.5}


def test_statistics_of_aligned_pair():
    stats = flock_statistics([(0.0, 0.0), (2.0, 0.0)], [(1.0, 0.0), (1.0, 0.0)])
    assert stats["avg_speed"] == pytest.approx(1.0)
    assert stats["max_speed"] == pytest.approx(1.0)
    assert stats["cohesion"] == pytest.approx(1.0)
    assert stats["polarization"] == pytest.approx(1.0)


def test_opposite_headings_have_no_polarization():
    stats = flock_statistics([(0.0, 0.0), (0.0, 4.0)], [(3.0, 4.0), (-3.0, -4.0)])
    assert stats["avg_speed"] == pytest.approx(5.0)
    assert stats["cohesion"] == pytest.approx(2.0)
    assert stats["polarization"] == pytest.approx(0.0)


def test_statistics_of_empty_or_resting_flock():
    assert flock_statistics([], []) == {
        "avg_speed": 0.0, "max_speed": 0.0, "cohesion": 0.0, "polarization": 0.0}
    assert flock_statistics([(1.0, 1.0)], [(0.0, 0.0)])["polarization"] == 0.0


def test_export_timeseries_to_csv(tmp_path):
    path = tmp_path / "series.csv"
    results = {"stats_over_time": [sample(0), sample(10, 7.5)]}
    assert export_timeseries_to_csv(results, str(path)) == str(path)

    with open(path, newline='') as f:
        rows = list(csv.DictReader(f))
    assert [r["tick"] for r in rows] == ["0", "10"]
    assert float(rows[1]["cohesion"]) == pytest.approx(7.5)


def test_export_results_to_json(tmp_path):
    path = tmp_path / "results.json"
    export_results_to_json({"runs": [{"avg_speed": 1.5}]}, str(path))
    assert json.loads(path.read_text()) == {"runs": [{"avg_speed": 1.5}]}


def test_aggregate_stats():
    runs = [{"avg_speed": 2.0, "final_cohesion": 10.0},
            {"avg_speed": 4.0, "final_cohesion": None}]
    agg = calculate_aggregate_stats(runs)
    assert agg["avg_speed_mean"] == pytest.approx(3.0)
    assert agg["avg_speed_std"] == pytest.approx(2 ** 0.5)
    assert agg["final_cohesion_mean"] == pytest.approx(10.0)
    assert agg["final_cohesion_std"] == 0
    assert "avg_polarization_mean" not in agg
    assert calculate_aggregate_stats([]) == {}


def test_plot_statistics_writes_file(tmp_path):
    path = tmp_path / "stats.png"
    results = {"stats_over_time": [sample(t, 20.0 - t / 10) for t in range(0, 100, 10)]}
    assert plot_statistics(results, str(path)) == str(path)
    assert path.exists() and path.stat().st_size > 0


def test_package_does_not_export_plotting():
    import flocking.analysis
    assert "plot_statistics" not in flocking.analysis.__all__
