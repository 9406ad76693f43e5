from __future__ import annotations

import random

import pytest

from geneticdecipher.classical.vigenere import encrypt
from geneticdecipher.core.scoring import key_fitness
from geneticdecipher.genetic.candidate import Candidate
from geneticdecipher.genetic.population import Population


def _pop(*pairs):
    return Population(Candidate(key=k, fitness=f) for k, f in pairs)


def test_candidate_evaluate_and_equality():
    ct = encrypt("thequickbrownfoxjumpsoverthelazydog", "abc")
    c = Candidate.evaluate("abc", ct)
    assert c.fitness == key_fitness("abc", ct)
    assert c == Candidate.evaluate("abc", ct)
    with pytest.raises(Exception):
        c.key = "zzz"


def test_random_candidate_uses_alphabet():
    rng = random.Random(5)
    c = Candidate.random(12, "hello", rng)
    assert len(c.key) == 12
    assert set(c.key) <= set("abcdefghijklmnopqrstuvwxyz-")


def test_remove_at_preserves_order():
    pop = _pop(("a", 0.1), ("b", 0.2), ("c", 0.3), ("d", 0.4))
    removed = pop.remove_at(1)
    assert removed.key == "b"
    assert pop.keys() == ["a", "c", "d"]
    assert len(pop) == 3


def test_sort_is_ascending_and_stable():
    pop = _pop(("x", 0.5), ("y", 0.1), ("z", 0.5), ("w", 0.2))
    pop.sort_by_fitness()
    assert pop.keys() == ["y", "w", "x", "z"]
    assert pop.best().key == "y"


def test_mean_append_clear():
    pop = _pop(("a", 1.0), ("b", 3.0))
    pop.append(Candidate("c", 2.0))
    pop.extend([Candidate("d", 2.0)])
    assert pop.mean_fitness() == pytest.approx(2.0)
    pop.clear()
    assert len(pop) == 0
    assert pop.mean_fitness() == 0.0
    with pytest.raises(ValueError):
        pop.best()
