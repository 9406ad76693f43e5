from __future__ import annotations

import random

from loguru import logger

from geneticdecipher.genetic.candidate import Candidate
from geneticdecipher.genetic.population import Population

# Leading slots of the post-elite pool that tournament draws never touch
TOURNAMENT_SKIP = 2


def select_elites(population: Population, elite_count: int) -> list[Candidate]:
    """
    Pull the best unique-key candidates out of a fitness-sorted population.

    Accepted candidates are removed; duplicates of an accepted key stay behind.
    Returns fewer than elite_count when the population runs out of unique keys.
    """
    elites: list[Candidate] = []
    seen: set[str] = set()

    i = 0
    while len(elites) < elite_count and i < len(population):
        if population[i].key in seen:
            i += 1
            continue
        cand = population.remove_at(i)
        seen.add(cand.key)
        elites.append(cand)

    if len(elites) < elite_count:
        logger.debug(
            "select_elites: only {} unique keys available (requested {})",
            len(elites),
            elite_count,
        )
    return elites


def run_tournament(population: Population, tournament_size: int, rng: random.Random) -> list[Candidate]:
    """
    Draw tournament_size random candidates out of the population (removing
    them) and return them sorted best-first; element 0 is the winner.

    Draws skip the first TOURNAMENT_SKIP positions of the pool unless that
    would leave nothing to draw from. Stops early if the pool empties.
    """
    pool: list[Candidate] = []
    for _ in range(tournament_size):
        n = len(population)
        if n == 0:
            logger.debug("run_tournament: pool exhausted after {} draws", len(pool))
            break
        lo = TOURNAMENT_SKIP if n > TOURNAMENT_SKIP else 0
        pool.append(population.remove_at(rng.randrange(lo, n)))

    pool.sort(key=lambda c: c.fitness)
    return pool
