from __future__ import annotations

from typing import Iterable, Iterator

from geneticdecipher.genetic.candidate import Candidate


class Population:
    """Ordered pool of candidates for one generation."""

    def __init__(self, members: Iterable[Candidate] = ()) -> None:
        self._members: list[Candidate] = list(members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._members)

    def __getitem__(self, index: int) -> Candidate:
        return self._members[index]

    def sort_by_fitness(self) -> None:
        # list.sort is stable, so equal scores keep insertion order
        self._members.sort(key=lambda c: c.fitness)

    def remove_at(self, index: int) -> Candidate:
        return self._members.pop(index)

    def append(self, candidate: Candidate) -> None:
        self._members.append(candidate)

    def extend(self, candidates: Iterable[Candidate]) -> None:
        self._members.extend(candidates)

    def clear(self) -> None:
        self._members.clear()

    def keys(self) -> list[str]:
        return [c.key for c in self._members]

    def best(self) -> Candidate:
        """Lowest-fitness member; the first one wins ties."""
        if not self._members:
            raise ValueError("Population is empty.")
        return min(self._members, key=lambda c: c.fitness)

    def mean_fitness(self) -> float:
        if not self._members:
            return 0.0
        return sum(c.fitness for c in self._members) / len(self._members)
