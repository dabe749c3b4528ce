import json

from collector import collect_stats, run_once
from showcase import metrics


def test_run_once_records_history():
    stats = run_once(seed=13, generations=2)
    assert stats["seed"] == 13
    assert 1 <= stats["generations"] <= 2
    assert len(stats["history"]) == stats["generations"]
    assert stats["ticks"] > 0


def test_collect_stats_writes_json(tmp_path):
    path = tmp_path / "stats.json"
    out = collect_stats(runs=2, generations=1, seed_base=100, path=str(path),
                        predator_count=3, prey_count=10)

    assert out == str(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert [r["seed"] for r in data] == [100, 101]
    for run in data:
        assert len(run["history"]) == 1


def test_metrics_average_per_generation():
    def rec(pop, speed):
        return dict(population=pop, survivors=1, kills=2, mean_speed=speed,
                    mean_sense=20, ticks=100)

    runs = [
        dict(extinct=False, history=[rec(5, 3.0), rec(4, 3.3)]),
        dict(extinct=True, history=[rec(3, 3.0)]),
    ]
    m = metrics(runs)

    assert m["generation"] == [0, 1]
    assert m["population"] == [4.0, 4.0]
    assert m["mean_speed"][1] == 3.3
    assert m["alive_runs"] == [2, 1]
    assert m["extinct"] == 1
    assert m["runs"] == 2


def test_metrics_empty():
    m = metrics([])
    assert m["generation"] == []
    assert m["runs"] == 0
