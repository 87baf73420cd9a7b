"""Deck handling.

This module provides:
- Deck: standard 52-card deck with seeded shuffling and dealing
- deal_hands: deal and classify several hands
"""

from .deck import (
    Deck,
    DECK_SIZE,
    shuffle_deck,
    deal_cards,
    deal_hands,
)

__all__ = [
    "Deck",
    "DECK_SIZE",
    "shuffle_deck",
    "deal_cards",
    "deal_hands",
]
