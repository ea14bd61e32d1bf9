"""Reproducible random sources from a seed. Seed -1 = new random seed each call.
The seed actually used is returned so a randomized start can be replayed."""

import random
from typing import Tuple

import numpy as np


def resolve_seed(seed: int) -> int:
    """Return seed, or a freshly drawn one if seed == -1."""
    if seed == -1:
        return random.randint(0, 2**31 - 1)
    if seed < 0:
        raise ValueError(f"seed must be -1 or non-negative, got {seed}")
    return seed


def make_rng(seed: int = -1) -> Tuple[np.random.Generator, int]:
    """Return (rng, seed_used). Same seed gives the same sequence of cells."""
    seed_used = resolve_seed(seed)
    return np.random.default_rng(seed_used), seed_used
