from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GenerationReport:
    generation: int
    best_key: str
    best_fitness: float

    # Mean over the candidates left after elites and tournament were drawn
    average_fitness: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "generation": self.generation,
            "best_key": self.best_key,
            "best_fitness": self.best_fitness,
            "average_fitness": self.average_fitness,
        }


@dataclass(frozen=True)
class RunReport:
    best_key: str
    best_fitness: float

    # Number of generation reports emitted before the run stopped
    generations: int = 0
    solved: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "best_key": self.best_key,
            "best_fitness": self.best_fitness,
            "generations": self.generations,
            "solved": self.solved,
        }
