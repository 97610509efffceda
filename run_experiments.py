# run_experiments.py
import os, json, argparse
from pathlib import Path
import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from knight_aco import ACOConfig
from knight_aco.experiments import run_repeated_trials, run_parameter_sweep

OUTDIR = os.path.dirname(os.path.abspath(__file__))


def ensure(path: str) -> str:
    """Create the parent folder of an output file and return the path unchanged."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    return path


def plot_convergence(results, save_path, window=10):
    """Mean complete tours per cycle across runs, with a moving average."""
    hist = np.array([res.history_complete for res in results], dtype=float)
    mean = hist.mean(axis=0)
    plt.figure()
    plt.plot(mean, alpha=0.4, label="mean per cycle")
    if len(mean) >= window:
        smooth = np.convolve(mean, np.ones(window) / window, mode="valid")
        plt.plot(np.arange(window - 1, len(mean)), smooth, label=f"{window}-cycle average")
    plt.xlabel("Cycle")
    plt.ylabel("Complete tours (of 64 ants)")
    plt.title("Knight's tour colony convergence")
    plt.legend()
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_longest(results, save_path):
    plt.figure()
    for i, res in enumerate(results):
        plt.plot(res.history_longest, "-", linewidth=0.8, label=f"seed {res.config.seed}" if i < 5 else None)
    plt.axhline(63, color="k", linestyle="--", linewidth=0.8)
    plt.xlabel("Cycle")
    plt.ylabel("Longest tour (moves)")
    plt.title("Longest tour per cycle")
    plt.legend()
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--runs", type=int, default=5)
    ap.add_argument("--cycles", type=int, default=500)
    ap.add_argument("--tau0", type=float, default=0.000001)
    ap.add_argument("--rho", type=float, default=0.25)
    ap.add_argument("--seed", type=int, default=42, help="seed of the first run")
    ap.add_argument("--sweep", action="store_true", help="also sweep rho and tau0")
    ap.add_argument("--sweep-runs", type=int, default=3, help="runs per sweep grid point")
    ap.add_argument("--outdir", default=OUTDIR)
    args = ap.parse_args(argv)

    cfg = ACOConfig(rho=args.rho, tau0=args.tau0, n_cycles=args.cycles)

    # repeated trials
    print(f"Running {args.runs} runs of {args.cycles} cycles...", flush=True)
    stats, results = run_repeated_trials(cfg, n_runs=args.runs, base_seed=args.seed)
    print(json.dumps(stats, indent=2))

    records = [{"seed": res.config.seed, "complete": res.complete, "incomplete": res.incomplete,
                "completion_rate": res.completion_rate, "elapsed_sec": res.elapsed_sec}
               for res in results]
    summary_csv = ensure(os.path.join(args.outdir, "results_summary.csv"))
    pd.DataFrame.from_records(records).to_csv(summary_csv, index=False)
    print("Saved:", summary_csv)

    conv_png = os.path.join(args.outdir, "convergence.png")
    plot_convergence(results, conv_png)
    print("Saved:", conv_png)
    longest_png = os.path.join(args.outdir, "longest_tour.png")
    plot_longest(results, longest_png)
    print("Saved:", longest_png)

    if args.sweep:
        grid = {"rho": [0.05, 0.25, 0.5], "tau0": [0.000001, 0.01, 1.0]}
        rows = run_parameter_sweep(
            grid, base_cfg=cfg, n_runs=args.sweep_runs, base_seed=500,
            csv_path=ensure(os.path.join(args.outdir, "sweep_grid.csv"))
        )
        print("Grid search evaluated:", len(rows))


if __name__ == "__main__":
    main()
