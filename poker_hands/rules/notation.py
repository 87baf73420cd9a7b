"""Parsing of human-readable hand notation.

Two card forms are accepted, and may be mixed within one hand:
- Short form: rank + suit letter, e.g. "Ah", "Td", "10c", "9S".
  Ranks are 2-9, T (or 10), J, Q, K, A; suits are h, d, c, s.
- Glyph form: rank symbol or English or French name + suit glyph, e.g. "A♥",
  "10♠", "King♦", "queen♣", "Roi♠", "As♥".

Cards are separated by whitespace and/or commas.
"""

import re
from typing import Iterable, List

from poker_hands.errors import MalformedNotation, PokerError

from .hands import HAND_SIZE, Hand, classify_hand
from .ranks import RANK_SYMBOLS, SUIT_SYMBOLS, Card, Rank, Suit

_SEPARATORS = re.compile(r"[\s,]+")

# Rank tokens, matched case-insensitively
RANK_TOKENS = {symbol.lower(): rank for rank, symbol in RANK_SYMBOLS.items()}
RANK_TOKENS["t"] = Rank.TEN
RANK_TOKENS.update(
    {
        "two": Rank.TWO,
        "three": Rank.THREE,
        "four": Rank.FOUR,
        "five": Rank.FIVE,
        "six": Rank.SIX,
        "seven": Rank.SEVEN,
        "eight": Rank.EIGHT,
        "nine": Rank.NINE,
        "ten": Rank.TEN,
        "jack": Rank.JACK,
        "queen": Rank.QUEEN,
        "king": Rank.KING,
        "ace": Rank.ACE,
        # French names
        "as": Rank.ACE,
        "roi": Rank.KING,
        "dame": Rank.QUEEN,
        "valet": Rank.JACK,
    }
)

SUIT_LETTERS = {"h": Suit.HEARTS, "d": Suit.DIAMONDS, "c": Suit.CLUBS, "s": Suit.SPADES}
GLYPH_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# Single-letter short-form rank for each rank ("T" for ten)
SHORT_RANKS = {rank: ("T" if rank == Rank.TEN else symbol) for rank, symbol in RANK_SYMBOLS.items()}
SHORT_SUITS = {v: k for k, v in SUIT_LETTERS.items()}


def parse_card(token: str) -> Card:
    """Parse a single card token.

    Args:
        token: Card string such as "Ah", "Td", "10♠" or "Queen♥"

    Returns:
        Card object

    Raises:
        MalformedNotation: If the rank or suit is not recognized
    """
    token = token.strip()
    if len(token) < 2:
        raise MalformedNotation(f"Card token too short: {token!r}")

    suit_char = token[-1]
    rank_str = token[:-1]

    if suit_char in GLYPH_TO_SUIT:
        suit = GLYPH_TO_SUIT[suit_char]
    elif suit_char.lower() in SUIT_LETTERS:
        suit = SUIT_LETTERS[suit_char.lower()]
    else:
        raise MalformedNotation(f"Invalid suit {suit_char!r} in {token!r}")

    rank = RANK_TOKENS.get(rank_str.lower())
    if rank is None:
        raise MalformedNotation(f"Invalid rank {rank_str!r} in {token!r}")

    try:
        return Card(rank=rank, suit=suit)
    except PokerError as exc:
        raise MalformedNotation(str(exc)) from exc


def parse_cards(text: str) -> List[Card]:
    """Parse any number of cards from a string like "Ah Kd, Qc".

    Raises:
        MalformedNotation: If any token is not a valid card
    """
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    return [parse_card(t) for t in tokens]


def parse_hand(text: str) -> Hand:
    """Parse and classify a five-card hand.

    Args:
        text: Notation such as "Ah Kh Qh Jh Th" or "A♥ K♥ Q♥ J♥ 10♥"

    Returns:
        Classified Hand

    Raises:
        MalformedNotation: If the text does not resolve to exactly five cards
    """
    cards = parse_cards(text)
    if len(cards) != HAND_SIZE:
        raise MalformedNotation(f"A poker hand must contain exactly {HAND_SIZE} cards, got {len(cards)}")
    return classify_hand(cards)


def format_card(card: Card) -> str:
    """Render a card in the short ASCII form, e.g. "Th"."""
    return f"{SHORT_RANKS[card.rank]}{SHORT_SUITS[card.suit]}"


def format_cards(cards: Iterable[Card]) -> str:
    """Render cards in short form, space separated. Inverse of parse_cards."""
    return " ".join(format_card(c) for c in cards)
