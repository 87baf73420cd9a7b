"""Poker rules implementations.

This module provides:
- Card and rank definitions (ranks.py)
- Hand classification and comparison (hands.py)
- Hand notation parsing (notation.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    SUIT_NAMES,
    get_rank_counts,
    create_standard_deck,
    sort_cards,
)

from .hands import (
    HAND_SIZE,
    HAND_TYPE_NAMES,
    HandType,
    Hand,
    Comparison,
    classify_hand,
    group_by_count,
    straight_high_card,
    compare_hands,
    compare_keys,
    describe_outcome,
    best_hand,
    describe_hand_types,
)

from .notation import (
    parse_card,
    parse_cards,
    parse_hand,
    format_card,
    format_cards,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "SUIT_NAMES",
    "get_rank_counts",
    "create_standard_deck",
    "sort_cards",
    # Hands
    "HAND_SIZE",
    "HAND_TYPE_NAMES",
    "HandType",
    "Hand",
    "Comparison",
    "classify_hand",
    "group_by_count",
    "straight_high_card",
    "compare_hands",
    "compare_keys",
    "describe_outcome",
    "best_hand",
    "describe_hand_types",
    # Notation
    "parse_card",
    "parse_cards",
    "parse_hand",
    "format_card",
    "format_cards",
]
