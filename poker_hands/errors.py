"""Exception types raised by the hand evaluator.

All of these are construction-time failures: a failed call produces no
Card, Hand or deal, and the caller decides whether to re-prompt.
"""


class PokerError(Exception):
    """Base class for every error raised by poker_hands."""

    pass


class ValidationError(PokerError, ValueError):
    """Raised when a card is built from an unknown rank or suit."""

    pass


class InvalidHandSize(PokerError, ValueError):
    """Raised when a hand is built from anything other than five cards."""

    pass


class InvalidCardType(PokerError, TypeError):
    """Raised when a hand is given an element that is not a Card."""

    pass


class InsufficientCards(PokerError):
    """Raised when more cards are dealt than the deck holds."""

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(f"Cannot deal {requested} cards from a deck of {remaining}")


class MalformedNotation(PokerError, ValueError):
    """Raised when hand notation does not resolve to valid cards."""

    pass


class NoRememberedHand(PokerError):
    """Raised when a comparison is requested before any hand was submitted."""

    pass
