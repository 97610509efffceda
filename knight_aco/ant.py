from __future__ import annotations
import random
from typing import List

from .aco_base import DEPOSIT_RATE, PHEROMONE_EXPONENT, weighted_choice
from .board import KnightBoard, TOUR_LENGTH


class Ant:
    """One tour attempt starting from a given square.

    `visited` is the tabu list (squares in the order reached) and `moves`
    holds, per step, the index of the move taken within the square's move list.
    """
    def __init__(self, start: int):
        self.start = start
        self.current = start
        self.visited: List[int] = [start]
        self.moves: List[int] = []

    @property
    def is_complete(self) -> bool:
        return len(self.moves) == TOUR_LENGTH

    def path(self) -> List[int]:
        return list(self.visited)

    def tour(self, board: KnightBoard, rng: random.Random, alpha: float = PHEROMONE_EXPONENT) -> bool:
        """Walk until no unvisited square is reachable. True for a full 63-move tour."""
        tabu = set(self.visited)
        while True:
            square = board.square(self.current)
            candidates = [(k, mv.pheromone ** alpha)
                          for k, mv in enumerate(square.moves) if mv.target not in tabu]
            if not candidates:
                break
            k = weighted_choice(rng, candidates)
            self.current = square.moves[k].target
            tabu.add(self.current)
            self.visited.append(self.current)
            self.moves.append(k)
        return self.is_complete

    def lay_pheromone(self, board: KnightBoard, rate: float = DEPOSIT_RATE):
        # early moves of long tours earn the most; moves just before a dead end the least
        n = len(self.moves)
        current = self.start
        for i, k in enumerate(self.moves):
            mv = board.move(current, k)
            mv.pheromone += rate * (n - i) / (TOUR_LENGTH - i)
            current = mv.target
