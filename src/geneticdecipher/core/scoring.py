from __future__ import annotations

from typing import Iterable

from geneticdecipher.classical.vigenere import decrypt_values

# ----------------------------
# English reference table
# ----------------------------

# Expected letter frequencies, a..z.
ENGLISH_FREQ: tuple[float, ...] = (
    0.0850, 0.0160, 0.0316, 0.0387, 0.1210, 0.0218, 0.0209, 0.0496, 0.0733,
    0.0022, 0.0081, 0.0421, 0.0252, 0.0717, 0.0747, 0.0207, 0.0010, 0.0633,
    0.0673, 0.0894, 0.0268, 0.0106, 0.0183, 0.0019, 0.0172, 0.0011,
)


def letter_histogram(values: Iterable[int]) -> list[int]:
    counts = [0] * 26
    for v in values:
        counts[v] += 1
    return counts


def frequency_distance(counts: list[int]) -> float:
    """
    L1 distance between observed letter frequencies and ENGLISH_FREQ.
    Lower is better; an empty histogram counts as all-zero frequencies.
    """
    total = sum(counts)
    score = 0.0
    for observed, expected in zip(counts, ENGLISH_FREQ):
        freq = observed / total if total else 0.0
        score += abs(freq - expected)
    return score


# ----------------------------
# Fitness
# ----------------------------

def key_fitness(key: str, ciphertext: str) -> float:
    """
    Fitness of a candidate key: decode the ciphertext with it and measure how
    far the plaintext histogram sits from English. 0.0 is a perfect match.
    """
    return frequency_distance(letter_histogram(decrypt_values(ciphertext, key)))


def text_fitness(plaintext: str) -> float:
    """Same measure applied directly to normalized plaintext."""
    return key_fitness("", plaintext)
