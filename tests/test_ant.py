import math
import random

import pytest

from knight_aco.aco_base import weighted_choice
from knight_aco.ant import Ant
from knight_aco.board import KnightBoard, TOUR_LENGTH


class FixedRng:
    """Returns a fixed draw from random(); records uniform fallbacks."""
    def __init__(self, value):
        self.value = value
        self.choices = 0

    def random(self):
        return self.value

    def choice(self, seq):
        self.choices += 1
        return seq[-1]


def test_weighted_choice_equal_weights_is_uniform_by_position():
    pairs = [("a", 1.0), ("b", 1.0)]
    assert weighted_choice(FixedRng(0.0), pairs) == "a"
    assert weighted_choice(FixedRng(0.5), pairs) == "a"
    assert weighted_choice(FixedRng(0.75), pairs) == "b"


def test_weighted_choice_follows_weights():
    pairs = [(0, 1.0), (1, 3.0)]
    assert weighted_choice(FixedRng(0.2), pairs) == 0
    assert weighted_choice(FixedRng(0.3), pairs) == 1


def test_weighted_choice_falls_back_to_last_item():
    assert weighted_choice(FixedRng(1.5), [(0, 1.0), (1, 1.0), (2, 1.0)]) == 2


def test_weighted_choice_zero_weights_uses_uniform_choice():
    rng = FixedRng(0.0)
    assert weighted_choice(rng, [(0, 0.0), (1, 0.0), (2, 0.0)]) == 2
    assert rng.choices == 1


def test_weighted_choice_empty():
    with pytest.raises(ValueError):
        weighted_choice(random.Random(0), [])


def test_tour_visits_each_square_once():
    board = KnightBoard(1.0)
    rng = random.Random(7)
    for start in (0, 27, 63):
        ant = Ant(start)
        done = ant.tour(board, rng)
        assert len(set(ant.visited)) == len(ant.visited)
        assert len(ant.moves) <= TOUR_LENGTH
        assert len(ant.visited) == len(ant.moves) + 1
        assert done == (len(ant.moves) == TOUR_LENGTH and len(ant.visited) == 64)
        # replaying the recorded move indices reproduces the path
        current = start
        for k, nxt in zip(ant.moves, ant.visited[1:]):
            current = board.move(current, k).target
            assert current == nxt
        assert ant.current == ant.visited[-1]
        assert ant.path() == ant.visited
        assert ant.path() is not ant.visited


def test_tour_ends_at_dead_end():
    board = KnightBoard(1.0)
    ant = Ant(0)
    ant.tour(board, random.Random(3))
    last = board.square(ant.current)
    assert all(mv.target in ant.visited for mv in last.moves)


def test_equal_pheromone_picks_uniformly_among_open_moves():
    board = KnightBoard(1.0)
    ant = Ant(0)
    ant.tour(board, FixedRng(0.3))
    visited = [0]
    for k in ant.moves:
        sq = board.square(visited[-1])
        open_moves = [j for j, mv in enumerate(sq.moves) if mv.target not in visited]
        assert k == open_moves[int(0.3 * len(open_moves))]
        visited.append(sq.moves[k].target)
    assert visited == ant.visited


def test_complete_flag():
    ant = Ant(0)
    ant.moves = [0] * TOUR_LENGTH
    assert ant.is_complete
    ant.moves.pop()
    assert not ant.is_complete


def test_lay_pheromone_rewards_early_moves():
    board = KnightBoard(0.0)
    ant = Ant(0)
    first = board.move(0, 0)
    second_k = next(k for k, mv in enumerate(board.square(first.target).moves) if mv.target != 0)
    ant.moves = [0, second_k]
    ant.lay_pheromone(board)
    assert first.pheromone == pytest.approx(2 / 63)
    assert board.move(first.target, second_k).pheromone == pytest.approx(1 / 62)
    assert board.move(0, 1).pheromone == 0.0


def test_lay_pheromone_never_decreases_and_accumulates():
    board = KnightBoard(0.5)
    rng = random.Random(11)
    ants = [Ant(i) for i in range(64)]
    for ant in ants:
        ant.tour(board, rng)
    before = [mv.pheromone for _, _, mv in board.moves()]
    for ant in ants:
        ant.lay_pheromone(board)
    after = [mv.pheromone for _, _, mv in board.moves()]
    assert all(a >= b for a, b in zip(after, before))

    expected = sum(sum((len(a.moves) - i) / (63 - i) for i in range(len(a.moves))) for a in ants)
    assert math.isclose(sum(after) - sum(before), expected, rel_tol=1e-9)


def test_equal_pheromone_first_move_splits_evenly():
    board = KnightBoard(1.0)
    rng = random.Random(2024)
    counts = {17: 0, 10: 0}
    for _ in range(2000):
        ant = Ant(0)
        ant.tour(board, rng)
        counts[ant.visited[1]] += 1
    assert counts[17] + counts[10] == 2000
    assert 900 <= counts[17] <= 1100
