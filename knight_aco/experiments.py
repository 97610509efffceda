from __future__ import annotations
import itertools, statistics, os
from typing import Dict, Any, List, Optional
from dataclasses import asdict, fields
import csv
from .aco_base import ACOConfig, ColonyResult
from .colony import TourFinder


def run_repeated_trials(cfg: ACOConfig, n_runs: int = 10, base_seed: int = 42, n_cycles: Optional[int] = None):
    results: List[ColonyResult] = []
    for r in range(n_runs):
        cfg_r = ACOConfig(**{**asdict(cfg), "seed": base_seed + r})
        results.append(TourFinder(cfg_r).run(n_cycles))
    completes = [res.complete for res in results]
    rates = [res.completion_rate for res in results]
    stats = {
        "mean_complete": statistics.mean(completes),
        "std_complete": statistics.stdev(completes) if len(completes) > 1 else 0.0,
        "min_complete": min(completes),
        "max_complete": max(completes),
        "median_complete": statistics.median(completes),
        "mean_completion_rate": statistics.mean(rates),
        "mean_time": statistics.mean(res.elapsed_sec for res in results),
        "n_runs": n_runs,
    }
    return stats, results

def _append_row(csv_path: str, row: Dict[str, Any]):
    # refuse to mix sweeps with different columns in one file
    columns = list(row.keys())
    existing = None
    if os.path.exists(csv_path) and os.path.getsize(csv_path) > 0:
        with open(csv_path, newline="") as f:
            existing = next(csv.reader(f), None)
    if existing is not None and existing != columns:
        raise ValueError(f"{csv_path} has columns {existing}, sweep writes {columns}")
    with open(csv_path, "a", newline="") as f:
        w = csv.DictWriter(f, fieldnames=columns)
        if existing is None:
            w.writeheader()
        w.writerow(row)

def run_parameter_sweep(param_grid: Dict[str, List[Any]], base_cfg: Optional[ACOConfig] = None,
                        n_runs: int = 5, base_seed: int = 100, n_cycles: Optional[int] = None,
                        csv_path: Optional[str] = None):
    base_cfg = base_cfg or ACOConfig()
    known = {f.name for f in fields(ACOConfig)}
    for k in param_grid:
        if k not in known or k == "seed":
            raise ValueError(f"Cannot sweep over {k!r}")
    keys = sorted(param_grid.keys())
    rows = []
    for values in itertools.product(*[param_grid[k] for k in keys]):
        cfg = ACOConfig(**{**asdict(base_cfg), **dict(zip(keys, values))})
        stats, _ = run_repeated_trials(cfg, n_runs=n_runs, base_seed=base_seed, n_cycles=n_cycles)
        row = {**{k: getattr(cfg, k) for k in keys}, **stats}
        rows.append(row)
        if csv_path is not None:
            _append_row(csv_path, row)
    return rows
