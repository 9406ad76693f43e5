from __future__ import annotations

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
GAP = "-"
# Genes a key may hold: 26 letters plus the gap.
SYMBOLS = ALPHABET + GAP
A_ORD = ord("a")
Z_ORD = ord("z")


def is_az(ch: str) -> bool:
    o = ord(ch)
    return A_ORD <= o <= Z_ORD


def letter_value(ch: str) -> int:
    return ord(ch) - A_ORD


def key_shifts(key: str) -> list[int]:
    """
    Letter values of a key, gaps skipped.

    Walking this list cyclically is the same as walking the key with a pointer
    that jumps over gap positions. An all-gap key yields an empty list.
    """
    return [letter_value(ch) for ch in key.lower() if is_az(ch)]


def effective_key(key: str) -> str:
    """Key with gaps dropped, e.g. 'k-ey' -> 'key'."""
    return "".join(ch for ch in key.lower() if is_az(ch))


def random_key(size: int, rng) -> str:
    """Uniformly random key of 'size' genes over the 27-symbol alphabet."""
    return "".join(rng.choice(SYMBOLS) for _ in range(size))
