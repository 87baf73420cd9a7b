"""Card rank and suit definitions.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Rank and suit enums with their display symbols
- Card representation with validation
- Rank counting and standard deck utilities
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Union

from poker_hands.errors import ValidationError


class Rank(IntEnum):
    """Card ranks. The integer value is the card's strength (Ace high = 14)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Highest rank


class Suit(IntEnum):
    """Card suits. Suits never rank against each other."""

    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3


# Rank symbols for display, in ascending order
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit symbols for display
SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

SUIT_NAMES = {
    Suit.HEARTS: "hearts",
    Suit.DIAMONDS: "diamonds",
    Suit.CLUBS: "clubs",
    Suit.SPADES: "spades",
}

# Reverse lookups (for construction from strings)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
NAME_TO_SUIT = {v: k for k, v in SUIT_NAMES.items()}

RankLike = Union[Rank, int, str]
SuitLike = Union[Suit, str]


def _coerce_rank(rank: RankLike) -> Rank:
    if isinstance(rank, Rank):
        return rank
    if isinstance(rank, str):
        if rank in SYMBOL_TO_RANK:
            return SYMBOL_TO_RANK[rank]
        raise ValidationError(f"Invalid rank: {rank!r}")
    if isinstance(rank, int) and not isinstance(rank, bool):
        try:
            return Rank(rank)
        except ValueError:
            raise ValidationError(f"Invalid rank: {rank!r}") from None
    raise ValidationError(f"Invalid rank: {rank!r}")


def _coerce_suit(suit: SuitLike) -> Suit:
    if isinstance(suit, Suit):
        return suit
    if isinstance(suit, str) and suit in NAME_TO_SUIT:
        return NAME_TO_SUIT[suit]
    raise ValidationError(f"Invalid suit: {suit!r}")


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Accepts a Rank (or its value 2-14) or a rank symbol such as "10" or "J",
    and a Suit or a suit name such as "hearts". Anything else raises
    ValidationError. Immutable and hashable for use in sets.
    """

    rank: Rank
    suit: Suit

    def __post_init__(self):
        object.__setattr__(self, "rank", _coerce_rank(self.rank))
        object.__setattr__(self, "suit", _coerce_suit(self.suit))

    @property
    def value(self) -> int:
        """Numeric strength, 2-14 with the Ace high."""
        return int(self.rank)

    @property
    def is_ace(self) -> bool:
        return self.rank == Rank.ACE

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self.rank]

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"


def get_rank_counts(cards: Iterable[Card]) -> Dict[int, int]:
    """Count occurrences of each rank value in a list of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping rank value (2-14) to count
    """
    counts: Dict[int, int] = {}
    for card in cards:
        counts[card.value] = counts.get(card.value, 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Order is suit-major, rank-minor: 2♥ 3♥ ... A♥ 2♦ ... A♠.

    Returns:
        List of 52 Card objects (4 suits × 13 ranks)
    """
    deck = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(rank=rank, suit=suit))
    return deck


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by value, highest first.

    The sort is stable, so cards of equal value keep their input order.
    """
    return sorted(cards, key=lambda c: c.value, reverse=True)
