from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Any


class CrossoverType(IntEnum):
    ONE_POINT = 1
    TWO_POINT = 2
    UNIFORM = 3
    # Picks one of the three above independently on every crossover call
    RANDOM = 4

    @property
    def label(self) -> str:
        return {1: "1-Point", 2: "2-Point", 3: "Uniform", 4: "Random"}[self.value]


class MutationType(IntEnum):
    UNIFORM = 1
    # Rate climbs linearly toward 1.0 over the run
    NON_UNIFORM = 2

    @property
    def label(self) -> str:
        return "Uniform" if self is MutationType.UNIFORM else "Non-Uniform"


def _clamp(x, lo, hi):
    return lo if x < lo else hi if x > hi else x


@dataclass(frozen=True)
class GAConfig:
    population_size: int = 50
    max_generations: int = 20
    chromosome_size: int = 3
    elite_count: int = 4
    tournament_size: int = 3
    crossover_type: CrossoverType = CrossoverType.UNIFORM
    mutation_type: MutationType = MutationType.UNIFORM
    crossover_rate: float = 0.7
    mutation_rate: float = 0.05
    random_seed: int = 1

    def __post_init__(self) -> None:
        # accept the raw 1..4 / 1..2 codes as well as the enums
        object.__setattr__(self, "crossover_type", CrossoverType(self.crossover_type))
        object.__setattr__(self, "mutation_type", MutationType(self.mutation_type))

    @classmethod
    def clamped(
        cls,
        *,
        population_size: int,
        max_generations: int,
        chromosome_size: int,
        elite_count: int,
        tournament_size: int,
        crossover_type: int,
        mutation_type: int,
        crossover_rate: float,
        mutation_rate: float,
        random_seed: int,
    ) -> "GAConfig":
        """
        Build a config from raw user values, pulling anything out of range back
        to the nearest legal value instead of rejecting it.

        Elites are clamped to [2, population // 2] with the upper bound applied
        last, so a population of 1..3 ends up with fewer than two elites.
        """
        population_size = max(1, population_size)
        elite_count = max(2, elite_count)
        if elite_count > population_size // 2:
            elite_count = population_size // 2

        return cls(
            population_size=population_size,
            max_generations=max(1, max_generations),
            chromosome_size=max(1, chromosome_size),
            elite_count=elite_count,
            tournament_size=_clamp(tournament_size, 2, 5),
            crossover_type=CrossoverType(_clamp(crossover_type, 1, 4)),
            mutation_type=MutationType(_clamp(mutation_type, 1, 2)),
            crossover_rate=float(_clamp(crossover_rate, 0.0, 1.0)),
            mutation_rate=float(_clamp(mutation_rate, 0.0, 1.0)),
            random_seed=max(1, random_seed),
        )

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["crossover_type"] = self.crossover_type.label
        d["mutation_type"] = self.mutation_type.label
        return d
