from __future__ import annotations

import random
from dataclasses import dataclass

from geneticdecipher.classical.common import random_key
from geneticdecipher.core.scoring import key_fitness


@dataclass(frozen=True)
class Candidate:
    """A key and its fitness against one ciphertext. Lower fitness is better."""

    key: str
    fitness: float

    @classmethod
    def evaluate(cls, key: str, ciphertext: str) -> "Candidate":
        return cls(key=key, fitness=key_fitness(key, ciphertext))

    @classmethod
    def random(cls, size: int, ciphertext: str, rng: random.Random) -> "Candidate":
        return cls.evaluate(random_key(size, rng), ciphertext)

    @property
    def solved(self) -> bool:
        return self.fitness == 0.0
