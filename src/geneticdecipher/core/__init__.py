from .config import CrossoverType, GAConfig, MutationType
from .results import GenerationReport, RunReport
from .scoring import ENGLISH_FREQ, key_fitness
from .utils import load_ciphertext, normalize_letters

__all__ = [
    "CrossoverType",
    "GAConfig",
    "MutationType",
    "GenerationReport",
    "RunReport",
    "ENGLISH_FREQ",
    "key_fitness",
    "load_ciphertext",
    "normalize_letters",
]
