from __future__ import annotations

"""Benchmark input pairs."""

from typing import Tuple

import numpy as np


def worst_case_pair(size: int, symbols: Tuple[str, str] = ("a", "b")) -> Tuple[str, str]:
    """Two runs of distinct symbols; every position mismatches, distance == size."""

    first, second = symbols
    return first * size, second * size


def random_pair(size: int, alphabet: str, *, seed: int) -> Tuple[str, str]:
    """Two independent random strings over *alphabet*, reproducible by *seed*."""

    rng = np.random.default_rng(seed)
    letters = np.array(list(alphabet))
    a = "".join(rng.choice(letters, size=size).tolist())
    b = "".join(rng.choice(letters, size=size).tolist())
    return a, b
