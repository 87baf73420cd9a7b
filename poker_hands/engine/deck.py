"""Deck construction, shuffling, and dealing.

This module provides:
- Deck: an ordered, shrinking collection of the 52 standard cards
- Fisher-Yates shuffling driven by an explicit, seedable NumPy generator
- deal_hands: deal and classify several five-card hands in one go

A Deck is mutable and single-owner; share Cards and Hands, not Decks.
"""

import logging
from typing import Iterator, List, Optional

import numpy as np

from poker_hands.errors import InsufficientCards
from poker_hands.rules import HAND_SIZE, Card, Hand, classify_hand, create_standard_deck

logger = logging.getLogger(__name__)

DECK_SIZE = 52


class Deck:
    """An ordered sequence of cards, dealt from the front.

    Created full by :meth:`standard`, shrinks with every :meth:`deal`, and
    is never replenished.
    """

    def __init__(self, cards: Optional[List[Card]] = None):
        self._cards: List[Card] = list(cards) if cards is not None else create_standard_deck()

    @classmethod
    def standard(cls) -> "Deck":
        """Create a full 52-card deck in canonical order."""
        return cls(create_standard_deck())

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"

    @property
    def cards(self) -> List[Card]:
        """Copy of the remaining cards, top of the deck first."""
        return list(self._cards)

    def shuffle(self, rng: Optional[np.random.Generator] = None) -> "Deck":
        """Shuffle the deck in place with Fisher-Yates.

        For i from the last index down to 1, swap position i with a uniformly
        random position in [0, i].

        Args:
            rng: NumPy random generator. Pass a seeded one
                (``np.random.default_rng(seed)``) for reproducible order.

        Returns:
            This deck, for chaining
        """
        if rng is None:
            rng = np.random.default_rng()

        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = int(rng.integers(0, i + 1))
            cards[i], cards[j] = cards[j], cards[i]
        return self

    def deal(self, n: int) -> List[Card]:
        """Remove and return the first n cards.

        Args:
            n: Number of cards to deal

        Returns:
            The dealt cards, in deck order

        Raises:
            InsufficientCards: If n exceeds the cards remaining
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        if n > len(self._cards):
            raise InsufficientCards(requested=n, remaining=len(self._cards))

        dealt = self._cards[:n]
        del self._cards[:n]
        logger.debug("Dealt %d cards, %d remaining", n, len(self._cards))
        return dealt


def shuffle_deck(deck: Deck, rng: Optional[np.random.Generator] = None) -> Deck:
    """Shuffle a deck in place. Function form of :meth:`Deck.shuffle`."""
    return deck.shuffle(rng)


def deal_cards(deck: Deck, n: int) -> List[Card]:
    """Deal n cards from the deck. Function form of :meth:`Deck.deal`."""
    return deck.deal(n)


def deal_hands(deck: Deck, num_hands: int) -> List[Hand]:
    """Deal consecutive five-card hands and classify each.

    Args:
        deck: Deck to deal from (shrinks by 5 * num_hands)
        num_hands: Number of hands to deal

    Returns:
        List of classified hands, in deal order

    Raises:
        InsufficientCards: If the deck cannot supply every hand; nothing is
            dealt in that case
    """
    needed = num_hands * HAND_SIZE
    if needed > len(deck):
        raise InsufficientCards(requested=needed, remaining=len(deck))
    return [classify_hand(deck.deal(HAND_SIZE)) for _ in range(num_hands)]
