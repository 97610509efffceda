from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

BOARD_SIZE = 8
NUM_SQUARES = BOARD_SIZE * BOARD_SIZE
TOUR_LENGTH = NUM_SQUARES - 1   # moves in a complete tour
KNIGHT_DISTANCE_SQ = 5          # 1^2 + 2^2


@dataclass
class Move:
    """A knight move from its owning square to `target`."""
    target: int
    pheromone: float


@dataclass
class Square:
    index: int
    moves: List[Move] = field(default_factory=list)

    @property
    def x(self) -> int:
        return self.index % BOARD_SIZE

    @property
    def y(self) -> int:
        return self.index // BOARD_SIZE


class KnightBoard:
    """The 64 squares of a chess board linked by knight moves.

    Structure is fixed at construction; only the pheromone on each move
    changes afterwards.
    """
    def __init__(self, initial_pheromone: float):
        self.squares: List[Square] = []
        for i in range(NUM_SQUARES):
            sq = Square(i)
            # a knight never lands more than two files or ranks away
            min_x, max_x = max(0, sq.x - 2), min(BOARD_SIZE - 1, sq.x + 2)
            min_y, max_y = max(0, sq.y - 2), min(BOARD_SIZE - 1, sq.y + 2)
            for x in range(min_x, max_x + 1):
                for y in range(min_y, max_y + 1):
                    if (sq.x - x) ** 2 + (sq.y - y) ** 2 == KNIGHT_DISTANCE_SQ:
                        sq.moves.append(Move(target=y * BOARD_SIZE + x, pheromone=initial_pheromone))
            self.squares.append(sq)

    def square(self, index: int) -> Square:
        return self.squares[index]

    def move(self, index: int, k: int) -> Move:
        return self.squares[index].moves[k]

    def moves(self) -> Iterator[Tuple[int, int, Move]]:
        for sq in self.squares:
            for k, mv in enumerate(sq.moves):
                yield sq.index, k, mv

    def evaporate(self, rate: float):
        """Decay every move's pheromone by `rate` so unrewarded moves fade out."""
        for sq in self.squares:
            for mv in sq.moves:
                mv.pheromone *= (1.0 - rate)

    def total_pheromone(self) -> float:
        return sum(mv.pheromone for _, _, mv in self.moves())

    def heat(self) -> List[float]:
        # outgoing pheromone per square, indexed like the board
        return [sum(mv.pheromone for mv in sq.moves) for sq in self.squares]
