"""Interactive evaluator session state.

An EvaluatorSession remembers the last classified hand so a newly
submitted one can be compared against it. Front ends (the Rich TUI and
the web server) feed it raw input lines or call its operations directly.

Commands understood by :meth:`EvaluatorSession.handle`:
- five cards, e.g. "Ah Kd Qc Js Th": classify and remember
- "compare <hand>": compare the remembered hand against a new one
- "compare": compare against the next hand entered
- "deal": deal a random hand from a freshly shuffled deck
- "clear": forget the remembered hand
- "help", "exit" / "quit"
"""

import logging
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from poker_hands.engine import Deck
from poker_hands.errors import NoRememberedHand, PokerError
from poker_hands.rules import HAND_SIZE, Hand, classify_hand, compare_hands, describe_outcome, parse_hand
from poker_hands.utils.seeding import make_rng

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Enter 5 cards to evaluate a hand (example: Ah Kd Qc Js Th)
Ranks: A K Q J T (or 10) 9 8 7 6 5 4 3 2
Suits: h (hearts) d (diamonds) c (clubs) s (spades), or ♥ ♦ ♣ ♠

Commands:
  compare [hand]  Compare a new hand with the remembered one
  deal            Deal a random hand
  clear           Forget the remembered hand
  help            Show this message
  exit            Quit"""


class ReplyKind(Enum):
    HAND = "hand"
    COMPARE = "compare"
    AWAITING = "awaiting"
    CLEARED = "cleared"
    HELP = "help"
    EXIT = "exit"
    ERROR = "error"
    EMPTY = "empty"


@dataclass
class SessionReply:
    """Outcome of one input line.

    Attributes:
        kind: What happened
        message: Text to show the user
        hand: The hand just classified (new hand for comparisons)
        previous: The remembered hand a comparison was made against
        outcome: "first wins", "second wins" or "tie" (first = previous)
    """

    kind: ReplyKind
    message: str = ""
    hand: Optional[Hand] = None
    previous: Optional[Hand] = None
    outcome: Optional[str] = None


class EvaluatorSession:
    """Evaluator state for one user: the remembered hand and a deal RNG."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = make_rng(seed)
        self.last_hand: Optional[Hand] = None
        self.awaiting_compare = False
        self.lock = threading.Lock()
        self.last_access = time.time()

    def touch(self) -> None:
        self.last_access = time.time()

    def submit(self, text: str) -> Hand:
        """Classify a hand and remember it."""
        hand = parse_hand(text)
        self.last_hand = hand
        return hand

    def compare(self, text: str) -> SessionReply:
        """Compare the remembered hand (first) against a new one (second).

        The new hand becomes the remembered hand afterwards.

        Raises:
            NoRememberedHand: If nothing has been submitted yet
            MalformedNotation: If the new hand cannot be parsed
        """
        if self.last_hand is None:
            raise NoRememberedHand("No hand to compare against; enter a hand first")
        previous = self.last_hand
        hand = parse_hand(text)
        outcome = describe_outcome(compare_hands(previous, hand))
        self.last_hand = hand
        return SessionReply(
            kind=ReplyKind.COMPARE,
            message=f"{previous.category} vs {hand.category}: {outcome}",
            hand=hand,
            previous=previous,
            outcome=outcome,
        )

    def clear(self) -> None:
        self.last_hand = None
        self.awaiting_compare = False

    def deal(self) -> Hand:
        """Deal a random hand from a freshly shuffled deck and remember it.

        Cancels a pending two-step compare.
        """
        deck = Deck.standard().shuffle(self.rng)
        hand = classify_hand(deck.deal(HAND_SIZE))
        self.last_hand = hand
        self.awaiting_compare = False
        return hand

    def handle(self, line: str) -> SessionReply:
        """Interpret one line of user input.

        Errors are reported in the reply rather than raised, so the caller
        can simply re-prompt.
        """
        text = line.strip()
        if not text:
            return SessionReply(kind=ReplyKind.EMPTY)

        command, _, rest = text.partition(" ")
        command = command.lower()

        try:
            if command in ("exit", "quit"):
                return SessionReply(kind=ReplyKind.EXIT, message="Goodbye")
            if command == "help":
                return SessionReply(kind=ReplyKind.HELP, message=HELP_TEXT)
            if command == "clear":
                self.clear()
                return SessionReply(kind=ReplyKind.CLEARED, message="Remembered hand cleared")
            if command == "deal":
                hand = self.deal()
                return SessionReply(kind=ReplyKind.HAND, message=hand.category, hand=hand)
            if command == "compare":
                if rest.strip():
                    return self.compare(rest)
                if self.last_hand is None:
                    raise NoRememberedHand("No hand to compare against; enter a hand first")
                self.awaiting_compare = True
                return SessionReply(kind=ReplyKind.AWAITING, message="Enter the hand to compare")

            if self.awaiting_compare:
                reply = self.compare(text)
                self.awaiting_compare = False
                return reply

            hand = self.submit(text)
            return SessionReply(kind=ReplyKind.HAND, message=hand.category, hand=hand)
        except PokerError as exc:
            logger.debug("Rejected input %r: %s", text, exc)
            return SessionReply(kind=ReplyKind.ERROR, message=str(exc))
