from __future__ import annotations

import random

from geneticdecipher.genetic.candidate import Candidate
from geneticdecipher.genetic.population import Population
from geneticdecipher.genetic.selection import TOURNAMENT_SKIP, run_tournament, select_elites


def _ranked(n):
    return Population(Candidate(key=f"k{i:02d}", fitness=i / 10) for i in range(n))


def test_elites_are_best_unique_keys():
    pop = Population(
        [
            Candidate("aaa", 0.1),
            Candidate("aaa", 0.1),
            Candidate("bbb", 0.2),
            Candidate("bbb", 0.2),
            Candidate("ccc", 0.3),
            Candidate("ddd", 0.4),
        ]
    )
    elites = select_elites(pop, 3)
    assert [e.key for e in elites] == ["aaa", "bbb", "ccc"]
    # duplicates stay behind, order kept
    assert pop.keys() == ["aaa", "bbb", "ddd"]


def test_elites_cap_at_available_unique_keys():
    pop = Population([Candidate("aaa", 0.1), Candidate("aaa", 0.1), Candidate("bbb", 0.5)])
    elites = select_elites(pop, 10)
    assert [e.key for e in elites] == ["aaa", "bbb"]
    assert pop.keys() == ["aaa"]

    assert select_elites(Population(), 4) == []


def test_tournament_never_draws_leading_slots():
    for seed in range(50):
        pop = _ranked(12)
        pool = run_tournament(pop, 5, random.Random(seed))
        assert len(pool) == 5
        assert pop.keys()[:TOURNAMENT_SKIP] == ["k00", "k01"]
        assert all(c.key not in ("k00", "k01") for c in pool)
        assert len(pop) == 7


def test_tournament_pool_sorted_winner_first():
    pop = _ranked(20)
    pool = run_tournament(pop, 4, random.Random(11))
    fits = [c.fitness for c in pool]
    assert fits == sorted(fits)
    assert pool[0].fitness == min(fits)


def test_tournament_caps_on_small_pools():
    pop = _ranked(3)
    pool = run_tournament(pop, 5, random.Random(1))
    assert len(pool) == 3
    assert len(pop) == 0

    pop = _ranked(2)
    assert len(run_tournament(pop, 3, random.Random(1))) == 2

    assert run_tournament(Population(), 3, random.Random(1)) == []
