from .common import ALPHABET, GAP, SYMBOLS, effective_key, key_shifts, random_key
from .vigenere import decrypt, decrypt_values, encrypt

__all__ = [
    "ALPHABET",
    "GAP",
    "SYMBOLS",
    "effective_key",
    "key_shifts",
    "random_key",
    "decrypt",
    "decrypt_values",
    "encrypt",
]
