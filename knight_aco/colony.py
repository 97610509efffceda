from __future__ import annotations
import random
import time
from typing import List, Optional

from .aco_base import ACOConfig, ColonyResult
from .ant import Ant
from .board import KnightBoard, NUM_SQUARES


class TourFinder:
    """Ant colony searching for knight's tours, one ant per start square per cycle."""
    def __init__(self, cfg: Optional[ACOConfig] = None):
        self.cfg = cfg or ACOConfig()
        self.rng = random.Random(self.cfg.seed)
        self.board = KnightBoard(self.cfg.tau0)

        self.complete = 0
        self.incomplete = 0
        self.cycles_run = 0
        # per-cycle history for plots
        self.history_complete: List[int] = []
        self.history_longest: List[int] = []

    def cycle(self) -> int:
        ants = [Ant(i) for i in range(NUM_SQUARES)]

        # every ant sees the pheromone left by the previous cycle only
        n_complete = 0
        for ant in ants:
            if ant.tour(self.board, self.rng, self.cfg.alpha):
                n_complete += 1
        self.complete += n_complete
        self.incomplete += len(ants) - n_complete

        for ant in ants:
            ant.lay_pheromone(self.board, self.cfg.deposit_rate)

        self.board.evaporate(self.cfg.rho)

        self.cycles_run += 1
        self.history_complete.append(n_complete)
        self.history_longest.append(max(len(ant.moves) for ant in ants))
        return n_complete

    def run(self, n_cycles: Optional[int] = None, verbose_every: Optional[int] = None) -> ColonyResult:
        n_cycles = self.cfg.n_cycles if n_cycles is None else n_cycles
        start = time.time()
        for c in range(1, n_cycles + 1):
            self.cycle()
            if verbose_every and c % verbose_every == 0:
                print(f"[cycle {c}/{n_cycles}] complete={self.complete} incomplete={self.incomplete}",
                      flush=True)
        elapsed = time.time() - start
        return ColonyResult(complete=self.complete, incomplete=self.incomplete, cycles=self.cycles_run,
                            history_complete=list(self.history_complete),
                            history_longest=list(self.history_longest),
                            config=self.cfg, elapsed_sec=elapsed)
