import csv

import pytest

from knight_aco import ACOConfig
from knight_aco.experiments import run_parameter_sweep, run_repeated_trials


def test_repeated_trials_use_consecutive_seeds():
    stats, results = run_repeated_trials(ACOConfig(), n_runs=2, base_seed=42, n_cycles=2)
    assert [r.config.seed for r in results] == [42, 43]
    assert stats["n_runs"] == 2
    assert stats["min_complete"] <= stats["mean_complete"] <= stats["max_complete"]
    assert all(r.complete + r.incomplete == 128 for r in results)


def test_sweep_writes_one_row_per_combination(tmp_path):
    out = tmp_path / "grid.csv"
    rows = run_parameter_sweep({"rho": [0.1, 0.5]}, n_runs=1, n_cycles=1, csv_path=str(out))
    assert [r["rho"] for r in rows] == [0.1, 0.5]
    with open(out, newline="") as f:
        written = list(csv.DictReader(f))
    assert len(written) == 2
    assert float(written[1]["rho"]) == 0.5


def test_sweep_rejects_unknown_parameter():
    with pytest.raises(ValueError):
        run_parameter_sweep({"beta": [1.0]}, n_runs=1, n_cycles=1)


def test_sweep_refuses_file_with_other_columns(tmp_path):
    out = tmp_path / "grid.csv"
    run_parameter_sweep({"rho": [0.1]}, n_runs=1, n_cycles=1, csv_path=str(out))
    run_parameter_sweep({"rho": [0.2]}, n_runs=1, n_cycles=1, csv_path=str(out))
    with open(out, newline="") as f:
        assert len(list(csv.DictReader(f))) == 2
    with pytest.raises(ValueError):
        run_parameter_sweep({"tau0": [1.0]}, n_runs=1, n_cycles=1, csv_path=str(out))
