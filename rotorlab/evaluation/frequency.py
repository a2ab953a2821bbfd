"""Letter statistics for ciphertext.

A rotor machine should flatten the letter distribution of its input: the
index of coincidence of good ciphertext sits near the uniform 1/26 (~0.0385)
rather than English's ~0.066.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

import numpy as np

from rotorlab.machine.catalog import ALPHABET, ALPHABET_SIZE

UNIFORM_IC = 1.0 / ALPHABET_SIZE
ENGLISH_IC = 0.0667


@dataclass
class FrequencyResult:
    """Letter counts and derived statistics for one text."""
    label: str
    total_letters: int
    counts: List[int] = field(default_factory=list)   # len 26, A..Z
    index_of_coincidence: float = 0.0
    chi_squared_uniform: float = 0.0
    self_maps: int = 0                                # output letter == input letter

    @property
    def looks_flat(self) -> bool:
        """Heuristic: IC closer to uniform than to English."""
        return abs(self.index_of_coincidence - UNIFORM_IC) < abs(self.index_of_coincidence - ENGLISH_IC)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["looks_flat"] = self.looks_flat
        return d

    def summary(self) -> str:
        status = "FLAT" if self.looks_flat else "SKEWED"
        return (
            f"[{status}] {self.label}: {self.total_letters} letters, "
            f"IC={self.index_of_coincidence:.4f}, chi2={self.chi_squared_uniform:.2f}, "
            f"self_maps={self.self_maps}"
        )


def letter_counts(text: str) -> np.ndarray:
    codes = np.fromiter((ALPHABET.index(c) for c in text.upper() if c in ALPHABET), dtype=np.int64)
    return np.bincount(codes, minlength=ALPHABET_SIZE)


def index_of_coincidence(counts: np.ndarray) -> float:
    n = int(counts.sum())
    if n < 2:
        return 0.0
    return float((counts * (counts - 1)).sum() / (n * (n - 1)))


def chi_squared_uniform(counts: np.ndarray) -> float:
    n = counts.sum()
    if n == 0:
        return 0.0
    expected = n / ALPHABET_SIZE
    return float(((counts - expected) ** 2 / expected).sum())


def count_self_maps(plaintext: str, ciphertext: str) -> int:
    """Positions where a letter enciphered to itself (whitespace ignored)."""
    pt = [c for c in plaintext.upper() if c in ALPHABET]
    ct = [c for c in ciphertext.upper() if c in ALPHABET]
    n = min(len(pt), len(ct))
    if n == 0:
        return 0
    return int(np.count_nonzero(np.array(pt[:n]) == np.array(ct[:n])))


def analyze_frequency(ciphertext: str, *, plaintext: str = "", label: str = "ciphertext") -> FrequencyResult:
    counts = letter_counts(ciphertext)
    return FrequencyResult(
        label=label,
        total_letters=int(counts.sum()),
        counts=[int(c) for c in counts],
        index_of_coincidence=round(index_of_coincidence(counts), 6),
        chi_squared_uniform=round(chi_squared_uniform(counts), 6),
        self_maps=count_self_maps(plaintext, ciphertext) if plaintext else 0,
    )
