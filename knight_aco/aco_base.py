from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

PHEROMONE_EXPONENT = 1.0   # alpha in w_k = tau_k ** alpha
DEPOSIT_RATE = 1.0         # scale of the per-step deposit


def weighted_choice(rng: random.Random, pairs: Sequence[Tuple[T, float]]) -> T:
    """Roulette-wheel pick over (item, weight) pairs, in list order.

    Falls back to a uniform pick when no weight is positive.
    """
    if not pairs:
        raise ValueError("weighted_choice needs at least one candidate.")
    total = sum(w for _, w in pairs)
    if not total > 0.0:
        return rng.choice([item for item, _ in pairs])
    x = rng.random()
    for item, w in pairs:
        x -= w / total
        if x <= 0.0:
            return item
    # rounding left a sliver past the last bucket
    return pairs[-1][0]


@dataclass
class ACOConfig:
    alpha: float = PHEROMONE_EXPONENT   # pheromone influence
    deposit_rate: float = DEPOSIT_RATE  # pheromone deposit factor
    rho: float = 0.25                   # evaporation rate
    tau0: float = 0.000001              # initial pheromone
    n_cycles: int = 10000
    seed: Optional[int] = None

    def __post_init__(self):
        if not 0.0 <= self.rho < 1.0:
            raise ValueError("rho must be in [0, 1).")
        if self.tau0 < 0.0:
            raise ValueError("tau0 must be >= 0.")
        if self.alpha < 0.0:
            raise ValueError("alpha must be >= 0.")
        if self.deposit_rate < 0.0:
            raise ValueError("deposit_rate must be >= 0.")
        if self.n_cycles < 0:
            raise ValueError("n_cycles must be >= 0.")


@dataclass
class ColonyResult:
    complete: int
    incomplete: int
    cycles: int
    history_complete: List[int]
    history_longest: List[int]
    config: ACOConfig
    elapsed_sec: float = 0.0

    @property
    def completion_rate(self) -> float:
        tours = self.complete + self.incomplete
        return self.complete / tours if tours else 0.0
