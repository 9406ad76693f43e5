from __future__ import annotations

import random
from typing import Callable, Iterator, Optional

from loguru import logger

from geneticdecipher.core.config import GAConfig
from geneticdecipher.core.results import GenerationReport, RunReport
from geneticdecipher.genetic.candidate import Candidate
from geneticdecipher.genetic.operators import MutationSchedule, crossover, mutate
from geneticdecipher.genetic.population import Population
from geneticdecipher.genetic.selection import run_tournament, select_elites

# ============================================================
# Evolution driver
#
#   - random initial population
#   - for each generation 0..max_generations
#       - sort by fitness, stop early on a perfect score
#       - pull unique elites, then a random tournament pool
#       - report best + average of the leftovers
#       - elites carry over verbatim
#       - breed up to 90% from (elite, elite) or (winner, elite) pairs
#       - fill the last 10% with novel random keys
#       - advance the mutation schedule
# ============================================================


class GeneticDecipher:
    def __init__(self, config: GAConfig, ciphertext: str, *, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.ciphertext = ciphertext
        # Every random decision of the run comes from this one stream
        self.rng = rng if rng is not None else random.Random(config.random_seed)
        self.schedule = MutationSchedule(config.mutation_type, config.mutation_rate, config.max_generations)

        self._best: Candidate | None = None
        self._reported = 0

    @property
    def best(self) -> Candidate | None:
        """Best candidate of the finished run (None until generations() is exhausted)."""
        return self._best

    @property
    def bred_limit(self) -> int:
        """Population size after breeding; the remainder is novel fill."""
        return (9 * self.config.population_size) // 10

    # ----------------------------
    # Main loop
    # ----------------------------

    def generations(self) -> Iterator[GenerationReport]:
        cfg = self.config
        logger.info(
            "Starting run: pop={} gens={} chromosome={} elites={} tournament={} crossover={} mutation={} seed={}",
            cfg.population_size,
            cfg.max_generations,
            cfg.chromosome_size,
            cfg.elite_count,
            cfg.tournament_size,
            cfg.crossover_type.name,
            cfg.mutation_type.name,
            cfg.random_seed,
        )

        population = self._initial_population()
        population.sort_by_fitness()
        generation = 0

        while generation <= cfg.max_generations and not population[0].solved:
            best = population[0]
            generation_mean = population.mean_fitness()

            elites = select_elites(population, cfg.elite_count)
            tournament = run_tournament(population, cfg.tournament_size, self.rng)

            # leftovers only; an empty remainder falls back to the whole generation
            average = population.mean_fitness() if len(population) else generation_mean
            report = GenerationReport(
                generation=generation,
                best_key=best.key,
                best_fitness=best.fitness,
                average_fitness=average,
            )
            logger.debug(
                "gen {}: best={!r} ({:.4f}) avg={:.4f} elites={} tournament={} mutation_rate={:.4f}",
                generation,
                best.key,
                best.fitness,
                average,
                len(elites),
                len(tournament),
                self.schedule.rate,
            )
            self._reported += 1
            yield report

            population.clear()
            population = self._repopulate(elites, tournament)

            self.schedule.advance()
            generation += 1
            population.sort_by_fitness()

        self._best = population[0]
        if self._best.solved:
            logger.info("Converged at generation {} with key {!r}", generation, self._best.key)
        else:
            logger.info(
                "Run finished after {} generations: best {!r} ({:.4f})",
                self._reported,
                self._best.key,
                self._best.fitness,
            )

    def run(self, on_generation: Optional[Callable[[GenerationReport], None]] = None) -> RunReport:
        for report in self.generations():
            if on_generation is not None:
                on_generation(report)
        return self.result()

    def result(self) -> RunReport:
        if self._best is None:
            raise RuntimeError("Run has not finished yet.")
        return RunReport(
            best_key=self._best.key,
            best_fitness=self._best.fitness,
            generations=self._reported,
            solved=self._best.solved,
        )

    # ----------------------------
    # Population building
    # ----------------------------

    def _random_candidate(self) -> Candidate:
        return Candidate.random(self.config.chromosome_size, self.ciphertext, self.rng)

    def _initial_population(self) -> Population:
        return Population(self._random_candidate() for _ in range(self.config.population_size))

    def _pick_parents(self, elites: list[Candidate], winner: Candidate | None) -> tuple[str, str]:
        """Two distinct random elites, or the tournament winner plus a random elite (50/50)."""
        use_two_elites = self.rng.randrange(2) == 1
        if use_two_elites or winner is None:
            i = self.rng.randrange(len(elites))
            others = elites[:i] + elites[i + 1:]
            first = elites[i].key
            second = self.rng.choice(others).key if others else first
            return first, second
        return winner.key, self.rng.choice(elites).key

    def _repopulate(self, elites: list[Candidate], tournament: list[Candidate]) -> Population:
        cfg = self.config
        nxt = Population(elites)
        winner = tournament[0] if tournament else None

        if elites:
            while len(nxt) < self.bred_limit:
                p1, p2 = self._pick_parents(elites, winner)
                child_a, child_b = crossover(p1, p2, cfg.crossover_type, cfg.crossover_rate, self.rng)
                for child in (child_a, child_b):
                    nxt.append(Candidate.evaluate(mutate(child, self.schedule.rate, self.rng), self.ciphertext))
        else:
            logger.debug("No elites to breed from; filling generation with novel keys")

        bred = len(nxt)
        while len(nxt) < cfg.population_size:
            nxt.append(self._random_candidate())

        logger.debug(
            "repopulated: {} elites, {} bred, {} novel",
            len(elites),
            bred - len(elites),
            len(nxt) - bred,
        )
        return nxt
