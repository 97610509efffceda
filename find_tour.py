# find_tour.py
import argparse

from knight_aco import ACOConfig, TourFinder


def build_parser():
    p = argparse.ArgumentParser(description="Search for knight's tours with an ant colony.")
    p.add_argument("--cycles", type=int, default=10000)
    p.add_argument("--tau0", type=float, default=0.000001, help="initial pheromone level")
    p.add_argument("--rho", type=float, default=0.25, help="evaporation rate in [0, 1)")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--progress", type=int, default=None, help="print counters every k cycles")
    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    try:
        cfg = ACOConfig(rho=args.rho, tau0=args.tau0, n_cycles=args.cycles, seed=args.seed)
    except ValueError as e:
        p.error(str(e))
    finder = TourFinder(cfg)
    finder.run(verbose_every=args.progress)
    print(f"Complete: {finder.complete}, Incomplete: {finder.incomplete}")


if __name__ == "__main__":
    main()
