from __future__ import annotations

import random

from geneticdecipher.classical.common import SYMBOLS
from geneticdecipher.core.config import CrossoverType, MutationType

_CONCRETE_TYPES = (CrossoverType.ONE_POINT, CrossoverType.TWO_POINT, CrossoverType.UNIFORM)


# ----------------------------
# Crossover
# ----------------------------

def _one_point(a: str, b: str, rng: random.Random) -> tuple[str, str]:
    n = len(a)
    if n < 2:
        return b, a
    # cut in 1..n-1 so both segments are non-empty
    cut = rng.randrange(1, n)
    return b[:cut] + a[cut:], a[:cut] + b[cut:]


def _two_point(a: str, b: str, rng: random.Random) -> tuple[str, str]:
    n = len(a)
    if n < 2:
        return b, a
    c1 = rng.randrange(1, n)
    c2 = rng.randrange(c1, n)
    child_a = b[:c1] + a[c1:c2] + b[c2:]
    child_b = a[:c1] + b[c1:c2] + a[c2:]
    return child_a, child_b


def _uniform(a: str, b: str, rng: random.Random) -> tuple[str, str]:
    child_a = []
    child_b = []
    for ga, gb in zip(a, b):
        if rng.randrange(2) == 1:
            child_a.append(gb)
            child_b.append(ga)
        else:
            child_a.append(ga)
            child_b.append(gb)
    return "".join(child_a), "".join(child_b)


_CROSSOVERS = {
    CrossoverType.ONE_POINT: _one_point,
    CrossoverType.TWO_POINT: _two_point,
    CrossoverType.UNIFORM: _uniform,
}


def crossover(
    parent_a: str,
    parent_b: str,
    crossover_type: CrossoverType,
    crossover_rate: float,
    rng: random.Random,
) -> tuple[str, str]:
    """
    Combine two equal-length parents into two children.

    With probability 1 - crossover_rate nothing is combined and the parents
    come back swapped: (parent_b, parent_a). RANDOM picks a concrete type for
    this call only.
    """
    if rng.random() >= crossover_rate:
        return parent_b, parent_a

    kind = CrossoverType(crossover_type)
    if kind is CrossoverType.RANDOM:
        kind = rng.choice(_CONCRETE_TYPES)
    return _CROSSOVERS[kind](parent_a, parent_b, rng)


# ----------------------------
# Mutation
# ----------------------------

def mutate(key: str, mutation_rate: float, rng: random.Random) -> str:
    """Replace each gene with a random symbol with probability mutation_rate."""
    out = []
    for gene in key:
        if rng.random() < mutation_rate:
            out.append(rng.choice(SYMBOLS))
        else:
            out.append(gene)
    return "".join(out)


class MutationSchedule:
    """
    Mutation rate over the course of a run.

    UNIFORM keeps the initial rate. NON_UNIFORM adds
    (1 - initial) / max_generations after every generation, capped at 1.0.
    """

    def __init__(self, mutation_type: MutationType, initial_rate: float, max_generations: int) -> None:
        self.mutation_type = MutationType(mutation_type)
        self.initial_rate = initial_rate
        self.max_generations = max(1, max_generations)
        self._rate = initial_rate

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def step(self) -> float:
        if self.mutation_type is MutationType.UNIFORM:
            return 0.0
        return (1.0 - self.initial_rate) / self.max_generations

    def advance(self) -> float:
        self._rate = min(1.0, self._rate + self.step)
        return self._rate
