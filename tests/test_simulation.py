import random

import pygame
import pytest

from flocking.core.config import SimulationConfig
from flocking.main import build_config, main
from flocking.simulation.headless import HeadlessSimulation, run_trials
from flocking.simulation.render import draw_flock


def test_headless_run_samples_statistics(small_config):
    sim = HeadlessSimulation(small_config)
    results = sim.run(50)

    assert results["ticks"] == 50
    assert results["boid_count"] == 12
    assert [s["tick"] for s in results["stats_over_time"]] == [0, 10, 20, 30, 40, 50]
    assert results["final_cohesion"] == results["stats_over_time"][-1]["cohesion"]
    assert results["config"]["seed"] == 7


def test_headless_samples_final_tick_off_interval(small_config):
    results = HeadlessSimulation(small_config).run(25)
    assert [s["tick"] for s in results["stats_over_time"]] == [0, 10, 20, 25]


def test_headless_runs_are_reproducible(small_config):
    a = HeadlessSimulation(small_config).run(30)
    b = HeadlessSimulation(small_config).run(30)
    assert a["stats_over_time"] == b["stats_over_time"]


def test_headless_rejects_negative_ticks(small_config):
    with pytest.raises(ValueError):
        HeadlessSimulation(small_config).run(-1)


def test_headless_empty_flock():
    config = SimulationConfig(screenWidth=100, screenHeight=100, boidCount=0)
    results = HeadlessSimulation(config, rng=random.Random(0)).run(20)
    assert results["boid_count"] == 0
    assert results["avg_cohesion"] == 0.0


def test_run_trials_uses_offset_seeds(small_config):
    results = run_trials(small_config, 2, 10)
    assert [r["run"] for r in results] == [1, 2]
    assert results[0]["stats_over_time"][0] != results[1]["stats_over_time"][0]


def test_draw_flock_marks_positions():
    config = SimulationConfig(screenWidth=50, screenHeight=40)
    surface = pygame.Surface((50, 40))
    draw_flock(surface, [(25.0, 20.0)], config)
    assert tuple(surface.get_at((25, 20)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((2, 2)))[:3] == (255, 255, 255)


def test_build_config_from_arguments():
    import argparse
    args = argparse.Namespace(width=300, height=200, count=10, tps=60, seed=4)
    config = build_config(args)
    assert (config.screenWidth, config.screenHeight, config.boidCount) == (300, 200, 10)
    assert config.seed == 4


def test_main_rejects_invalid_canvas():
    with pytest.raises(SystemExit):
        main(["--headless", "--width", "0"])


def test_main_headless_writes_results(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main(["--headless", "--ticks", "20", "--count", "5", "--width", "120",
          "--height", "120", "--seed", "1", "--runs", "2"])
    assert (tmp_path / "flocking_results.json").exists()
    assert (tmp_path / "flocking_timeseries.csv").exists()


@pytest.fixture
def window_sim(tmp_path):
    from flocking.simulation.interactive import Simulation
    config = SimulationConfig(screenWidth=120, screenHeight=100, boidCount=4, seed=1,
                              scoreOutputFile=str(tmp_path / "score.json"))
    sim = Simulation(config)
    yield sim
    pygame.quit()


def test_save_score_writes_json(window_sim, tmp_path):
    import json
    window_sim.update()
    window_sim.save_score()
    data = json.loads((tmp_path / "score.json").read_text())
    assert data["boid_count"] == 4
    assert data["tick_count"] == 1


def test_save_score_reports_unwritable_path(window_sim, tmp_path, capsys):
    window_sim.config.scoreOutputFile = str(tmp_path / "missing" / "score.json")
    window_sim.save_score()
    assert "Error saving score" in capsys.readouterr().out


def test_pause_key_freezes_ticks(window_sim):
    window_sim._handle_keydown(pygame.K_p)
    window_sim.update()
    assert window_sim.flock.tick_count == 0

    window_sim._handle_keydown(pygame.K_p)
    window_sim.update()
    assert window_sim.flock.tick_count == 1


def test_space_saves_and_escape_stops(window_sim, tmp_path):
    window_sim._handle_keydown(pygame.K_SPACE)
    assert (tmp_path / "score.json").exists()
    window_sim._handle_keydown(pygame.K_ESCAPE)
    assert window_sim.running is False


def test_draw_renders_without_error(window_sim):
    window_sim.update()
    window_sim.draw()


def test_headless_records_video(small_config, tmp_path):
    path = tmp_path / "flock.mp4"
    sim = HeadlessSimulation(small_config, enable_video=True, video_filename=str(path))
    results = sim.run(40)
    assert results["ticks"] == 40
    assert sim.video_writer is None
    assert path.exists() and path.stat().st_size > 0


def test_main_rejects_negative_ticks():
    with pytest.raises(SystemExit):
        main(["--headless", "--ticks", "-5"])
