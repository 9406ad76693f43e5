from loguru import logger

from .candidate import Candidate
from .engine import GeneticDecipher
from .operators import MutationSchedule, crossover, mutate
from .population import Population
from .selection import run_tournament, select_elites

# Library use stays quiet; the CLI turns logging back on
logger.disable("geneticdecipher")

__all__ = [
    "Candidate",
    "GeneticDecipher",
    "MutationSchedule",
    "crossover",
    "mutate",
    "Population",
    "run_tournament",
    "select_elites",
]
