from __future__ import annotations

import math
import re
from pathlib import Path

_NON_AZ_RE = re.compile(r"[^a-z]+")


def normalize_letters(s: str) -> str:
    """Lowercase and keep only a-z (drops whitespace, digits, punctuation, newlines)."""
    if s is None:
        return ""
    return _NON_AZ_RE.sub("", f"{s}".lower())


def load_ciphertext(path: str | Path) -> str:
    """Read a ciphertext file and return its normalized letters."""
    raw = Path(path).read_text(encoding="utf-8", errors="replace")
    return normalize_letters(raw)


def floor_to(x: float, places: int) -> float:
    """Truncate toward -inf at 'places' decimals (report formatting)."""
    scale = 10 ** places
    return math.floor(x * scale) / scale
