from __future__ import annotations

from geneticdecipher.classical.common import A_ORD, key_shifts, letter_value


def decrypt_values(ciphertext: str, key: str) -> list[int]:
    """
    Decode normalized ciphertext into plaintext letter values (0..25).

    The key repeats as a stream; gap genes are skipped. A key with no letters
    applies no shift at all.
    """
    shifts = key_shifts(key)
    values = [letter_value(ch) for ch in ciphertext]
    if not shifts:
        return values

    n = len(shifts)
    return [(c - shifts[i % n] + 26) % 26 for i, c in enumerate(values)]


def decrypt(ciphertext: str, key: str) -> str:
    return "".join(chr(A_ORD + v) for v in decrypt_values(ciphertext, key))


def encrypt(plaintext: str, key: str) -> str:
    """Inverse of decrypt() over the same gap-skipping key stream."""
    shifts = key_shifts(key)
    if not shifts:
        return plaintext

    n = len(shifts)
    return "".join(
        chr(A_ORD + (letter_value(ch) + shifts[i % n]) % 26) for i, ch in enumerate(plaintext)
    )
