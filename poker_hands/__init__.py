"""Poker Hands - five-card poker hand evaluation.

Classifies five-card hands into the ten standard categories and orders
any two hands, including exact tie detection.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.utils.seeding import set_seed, make_rng

__all__ = ["__version__", "set_seed", "make_rng"]
