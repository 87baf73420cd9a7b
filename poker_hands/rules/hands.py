"""Hand classification, tie-break vectors, and comparison.

Hand types (weakest to strongest):
- High card, one pair, two pair, three of a kind
- Straight (five consecutive values; A-2-3-4-5 "wheel" counts, 5-high)
- Flush, full house, four of a kind
- Straight flush, royal flush (A-high straight flush)

Comparison rules:
- Hand type decides first
- Within a type, the tie-break vector is compared element by element
- Suits never break ties; two royal flushes always tie
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from poker_hands.errors import InvalidCardType, InvalidHandSize

from .ranks import Card, Rank, get_rank_counts, sort_cards

logger = logging.getLogger(__name__)

HAND_SIZE = 5

# Values of the wheel (A-2-3-4-5) once sorted descending
WHEEL_VALUES = (14, 5, 4, 3, 2)
WHEEL_HIGH = 5


class HandType(IntEnum):
    """Hand categories. The integer value is the category's strength."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def display_name(self) -> str:
        return HAND_TYPE_NAMES[self]


HAND_TYPE_NAMES = {
    HandType.HIGH_CARD: "High Card",
    HandType.ONE_PAIR: "One Pair",
    HandType.TWO_PAIR: "Two Pair",
    HandType.THREE_OF_A_KIND: "Three of a Kind",
    HandType.STRAIGHT: "Straight",
    HandType.FLUSH: "Flush",
    HandType.FULL_HOUSE: "Full House",
    HandType.FOUR_OF_A_KIND: "Four of a Kind",
    HandType.STRAIGHT_FLUSH: "Straight Flush",
    HandType.ROYAL_FLUSH: "Royal Flush",
}


class Comparison(IntEnum):
    """Result of comparing the first hand against the second."""

    LESS_THAN = -1
    EQUAL = 0
    GREATER_THAN = 1


OUTCOME_LABELS = {
    Comparison.GREATER_THAN: "first wins",
    Comparison.LESS_THAN: "second wins",
    Comparison.EQUAL: "tie",
}


@dataclass(frozen=True)
class Hand:
    """A classified five-card poker hand.

    Attributes:
        cards: The five cards, highest value first
        hand_type: The hand's category
        tiebreak: Discriminating values that follow the category in the
            comparison key. For the wheel this records 5 as the high card
            even though the Ace stays first in ``cards``.
    """

    cards: Tuple[Card, ...]
    hand_type: HandType
    tiebreak: Tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{cards_str} ({self.category})"

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Hand":
        """Classify five cards. See :func:`classify_hand`."""
        return classify_hand(cards)

    @property
    def category(self) -> str:
        """Human-readable category, e.g. "Full House"."""
        return HAND_TYPE_NAMES[self.hand_type]

    @property
    def key(self) -> Tuple[int, ...]:
        """Full comparison key: category strength followed by the tie-break vector."""
        return (int(self.hand_type),) + self.tiebreak

    def beats(self, other: "Hand") -> bool:
        return compare_hands(self, other) == Comparison.GREATER_THAN

    def ties(self, other: "Hand") -> bool:
        return compare_hands(self, other) == Comparison.EQUAL


@dataclass(frozen=True)
class _Analysis:
    """Everything classification needs, computed in one pass over the cards."""

    values: Tuple[int, ...]
    groups: Dict[int, List[int]]
    is_flush: bool
    straight_high: Optional[int]

    def count_of(self, count: int) -> int:
        """Number of distinct ranks appearing exactly ``count`` times."""
        return len(self.groups.get(count, []))


def group_by_count(cards: Iterable[Card]) -> Dict[int, List[int]]:
    """Group rank values by how many times they occur.

    Args:
        cards: Card objects

    Returns:
        Dict mapping occurrence count to the rank values with that count,
        each list sorted highest first. E.g. a full house of tens over
        fours gives ``{3: [10], 2: [4]}``.
    """
    groups: Dict[int, List[int]] = {}
    for value, count in get_rank_counts(cards).items():
        groups.setdefault(count, []).append(value)
    for values in groups.values():
        values.sort(reverse=True)
    return groups


def straight_high_card(values: Sequence[int]) -> Optional[int]:
    """Return the high card of a straight, or None.

    Args:
        values: Five card values sorted highest first

    Returns:
        The straight's high card value (5 for the wheel), or None if the
        values are not a straight
    """
    if tuple(values) == WHEEL_VALUES:
        return WHEEL_HIGH
    for i in range(len(values) - 1):
        if values[i] != values[i + 1] + 1:
            return None
    return values[0]


def _analyze(cards: Sequence[Card]) -> _Analysis:
    values = tuple(card.value for card in cards)
    first_suit = cards[0].suit
    return _Analysis(
        values=values,
        groups=group_by_count(cards),
        is_flush=all(card.suit == first_suit for card in cards),
        straight_high=straight_high_card(values),
    )


def _detect_hand_type(analysis: _Analysis) -> HandType:
    """Pick the strongest category the analysis satisfies.

    The order matters only for inputs with duplicate physical cards, where
    e.g. a suited pair still reads as a flush.
    """
    is_straight = analysis.straight_high is not None
    pairs = analysis.count_of(2)
    trips = analysis.count_of(3)

    if analysis.is_flush and is_straight:
        if analysis.straight_high == Rank.ACE:
            return HandType.ROYAL_FLUSH
        return HandType.STRAIGHT_FLUSH
    if analysis.count_of(4):
        return HandType.FOUR_OF_A_KIND
    if trips and pairs:
        return HandType.FULL_HOUSE
    if analysis.is_flush:
        return HandType.FLUSH
    if is_straight:
        return HandType.STRAIGHT
    if trips:
        return HandType.THREE_OF_A_KIND
    if pairs == 2:
        return HandType.TWO_PAIR
    if pairs == 1:
        return HandType.ONE_PAIR
    return HandType.HIGH_CARD


def _build_tiebreak(hand_type: HandType, analysis: _Analysis) -> Tuple[int, ...]:
    """Build the discriminators that follow the category tag."""
    groups = analysis.groups
    kickers = groups.get(1, [])

    if hand_type == HandType.ROYAL_FLUSH:
        return ()
    if hand_type in (HandType.STRAIGHT_FLUSH, HandType.STRAIGHT):
        return (analysis.straight_high,)
    if hand_type == HandType.FOUR_OF_A_KIND:
        return (groups[4][0], kickers[0])
    if hand_type == HandType.FULL_HOUSE:
        return (groups[3][0], groups[2][0])
    if hand_type in (HandType.FLUSH, HandType.HIGH_CARD):
        return analysis.values
    if hand_type == HandType.THREE_OF_A_KIND:
        return (groups[3][0], *kickers[:2])
    if hand_type == HandType.TWO_PAIR:
        return (groups[2][0], groups[2][1], kickers[0])
    if hand_type == HandType.ONE_PAIR:
        return (groups[2][0], *kickers[:3])
    raise AssertionError(f"Unhandled hand type: {hand_type!r}")


def classify_hand(cards: Iterable[Card]) -> Hand:
    """Classify exactly five cards into a Hand.

    Args:
        cards: Five Card objects. Duplicate physical cards are not rejected;
            uniqueness is the deck's responsibility.

    Returns:
        Hand with its category and tie-break vector

    Raises:
        InvalidHandSize: If not exactly five cards are given
        InvalidCardType: If any element is not a Card
    """
    cards = list(cards)
    if len(cards) != HAND_SIZE:
        raise InvalidHandSize(f"A poker hand must contain exactly {HAND_SIZE} cards, got {len(cards)}")
    for card in cards:
        if not isinstance(card, Card):
            raise InvalidCardType(f"Expected Card, got {type(card).__name__}: {card!r}")

    ordered = sort_cards(cards)
    analysis = _analyze(ordered)
    hand_type = _detect_hand_type(analysis)
    tiebreak = _build_tiebreak(hand_type, analysis)

    logger.debug("Classified %s as %s %s", " ".join(map(str, ordered)), hand_type.name, tiebreak)
    return Hand(cards=tuple(ordered), hand_type=hand_type, tiebreak=tiebreak)


def compare_keys(key1: Sequence[int], key2: Sequence[int]) -> Comparison:
    """Compare two comparison keys element by element.

    If one key is a prefix of the other they compare equal; fixed-length
    construction per category means this only happens for identical keys.
    """
    for a, b in zip(key1, key2):
        if a > b:
            return Comparison.GREATER_THAN
        if a < b:
            return Comparison.LESS_THAN
    return Comparison.EQUAL


def compare_hands(hand1: Hand, hand2: Hand) -> Comparison:
    """Compare two hands.

    Args:
        hand1: First hand
        hand2: Second hand

    Returns:
        GREATER_THAN if hand1 is stronger, LESS_THAN if weaker, EQUAL on a tie
    """
    return compare_keys(hand1.key, hand2.key)


def describe_outcome(result: Comparison) -> str:
    """Map a comparison to "first wins", "second wins" or "tie"."""
    return OUTCOME_LABELS[Comparison(result)]


def best_hand(hands: Sequence[Hand]) -> List[int]:
    """Return the indices of the strongest hands (several on a tie)."""
    if not hands:
        return []
    top = max(hand.key for hand in hands)
    return [i for i, hand in enumerate(hands) if compare_keys(hand.key, top) == Comparison.EQUAL]


def describe_hand_types() -> Dict[HandType, str]:
    """Get a description of requirements for each hand type.

    Returns:
        Dict mapping HandType to description string
    """
    return {
        HandType.ROYAL_FLUSH: "A-K-Q-J-10 all of one suit",
        HandType.STRAIGHT_FLUSH: "Five consecutive values of one suit",
        HandType.FOUR_OF_A_KIND: "Four cards of the same rank",
        HandType.FULL_HOUSE: "Three of one rank and two of another",
        HandType.FLUSH: "Five cards of one suit",
        HandType.STRAIGHT: "Five consecutive values (A-2-3-4-5 counts, 5-high)",
        HandType.THREE_OF_A_KIND: "Three cards of the same rank",
        HandType.TWO_PAIR: "Two pairs of different ranks",
        HandType.ONE_PAIR: "Two cards of the same rank",
        HandType.HIGH_CARD: "None of the above",
    }
