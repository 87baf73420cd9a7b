"""Deterministic seeding utilities for reproducibility.

Provides helpers to seed the random number generators used in the project:
Python's random, NumPy's legacy global state, and explicit NumPy generators
passed to Deck.shuffle.
"""

import random
from typing import Optional

import numpy as np


def set_seed(seed: Optional[int] = None) -> int:
    """Set random seeds for reproducibility across global RNGs.

    Sets seeds for:
    - Python's built-in random module
    - NumPy's global random state

    Args:
        seed: The seed value to use. If None, a random seed will be generated
              and returned for later reproducibility.

    Returns:
        The seed value that was used (useful when seed=None was passed).

    Example:
        >>> from poker_hands import set_seed
        >>> set_seed(42)  # Deterministic
        42
        >>> seed = set_seed()  # Random seed, but returns it for logging
        >>> print(f"Using seed: {seed}")
    """
    if seed is None:
        # Generate a random seed if none provided
        seed = random.randint(0, 2**32 - 1)

    random.seed(seed)
    np.random.seed(seed)

    return seed


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a NumPy generator for shuffling.

    Args:
        seed: Seed for a reproducible stream; None draws fresh OS entropy.
    """
    return np.random.default_rng(seed)
