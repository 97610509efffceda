import os, argparse
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import imageio

from knight_aco import ACOConfig, TourFinder
from knight_aco.board import BOARD_SIZE


def heat_grid(board):
    """Outgoing pheromone per square as an 8x8 array, row = rank (y)."""
    return np.array(board.heat(), dtype=float).reshape(BOARD_SIZE, BOARD_SIZE)


def visualize(cfg, outdir, step=5):
    os.makedirs(outdir, exist_ok=True)
    finder = TourFinder(cfg)

    frames = []
    for c in range(1, cfg.n_cycles + 1):
        finder.cycle()
        if c % step and c != cfg.n_cycles:
            continue
        grid = heat_grid(finder.board)

        plt.figure(figsize=(5, 5))
        plt.imshow(grid, origin="lower", cmap="viridis")
        plt.colorbar(label="outgoing pheromone")
        plt.title(f"Pheromone after cycle {c}\ncomplete so far={finder.complete}")
        plt.xticks(range(BOARD_SIZE))
        plt.yticks(range(BOARD_SIZE))
        plt.tight_layout()
        frame_path = os.path.join(outdir, f"pheromone_frame_{c:05d}.png")
        plt.savefig(frame_path, dpi=120, bbox_inches="tight")
        plt.close()
        frames.append(frame_path)

    gif_path = os.path.join(outdir, "pheromone.gif")
    with imageio.get_writer(gif_path, mode="I", duration=0.6) as writer:
        for fp in frames:
            writer.append_data(imageio.v2.imread(fp))

    print("Saved:", gif_path)
    return gif_path

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("--cycles", type=int, default=200)
    p.add_argument("--tau0", type=float, default=0.000001)
    p.add_argument("--rho", type=float, default=0.25)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--outdir", default="viz")
    p.add_argument("--step", type=int, default=5, help="frame every k cycles")
    args = p.parse_args(argv)
    if args.step < 1:
        p.error("--step must be >= 1")

    cfg = ACOConfig(rho=args.rho, tau0=args.tau0, n_cycles=args.cycles, seed=args.seed)
    visualize(cfg, args.outdir, step=args.step)

if __name__ == "__main__":
    main()
